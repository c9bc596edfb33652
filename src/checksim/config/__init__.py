"""Configuration utilities for checksim."""
from .schema import DEFAULT_CONFIG_PATH, ConfigSchema, load_config

__all__ = ["ConfigSchema", "DEFAULT_CONFIG_PATH", "load_config"]
