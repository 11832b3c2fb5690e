"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, strctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LimitsConfig(BaseModel):
    """[limits] section."""

    model_config = {"frozen": True}

    max_length: int = Field(default=1_000_000, ge=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, gt=0)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
