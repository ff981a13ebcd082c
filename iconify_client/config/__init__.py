"""Configuration management for Iconify Client."""

from .config import IconifyConfig
from .defaults import create_default_config

__all__ = ["IconifyConfig", "create_default_config"]
