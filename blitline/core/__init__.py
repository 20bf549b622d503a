"""Core utilities shared by the Blitline payload models."""

from .config import (
    ConfigError,
    load_project_config,
    builder_from_config,
    destination_from_config,
)

__all__ = [
    "ConfigError",
    "load_project_config",
    "builder_from_config",
    "destination_from_config",
]
