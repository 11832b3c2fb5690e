"""Builtin plugin: ASCII case transformers."""

from __future__ import annotations

from strctl.domain.transform import ToLowerChar, ToUpperChar, Transformer
from strctl.plugins.hookspecs import hookimpl


class CaseTransformPlugin:
    """Registers ``upper`` and ``lower``."""

    @hookimpl
    def register_transformers(self) -> dict[str, Transformer[object]]:
        return {"upper": ToUpperChar(), "lower": ToLowerChar()}  # type: ignore[dict-item]
