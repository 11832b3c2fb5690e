"""Configuration layer: TOML discovery, pydantic models, settings, logging."""
