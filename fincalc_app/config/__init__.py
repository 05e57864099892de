"""Configuration defaults, loading and validation."""

from .defaults import EngineConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["ConfigLoader", "EngineConfig", "get_default_config"]
