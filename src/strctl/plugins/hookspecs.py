"""Pluggy hook specifications for strctl extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from strctl.domain.transform import Transformer

hookspec = pluggy.HookspecMarker("strctl")
hookimpl = pluggy.HookimplMarker("strctl")


class StrctlHookSpec:
    """Hook specifications for the strctl plugin system."""

    @hookspec
    def register_transformers(self) -> dict[str, Transformer[object]] | None:
        """Return name -> Transformer mappings to extend TRANSFORMER_REGISTRY."""
