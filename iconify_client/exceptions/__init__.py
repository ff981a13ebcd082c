"""Custom exceptions for Iconify Client."""

from .base import IconifyClientException
from .configuration import ConfigurationError
from .icons import IconNotFoundError, MissingDimensionsError, PrefixNotFoundError
from .registry import RegistryError

__all__ = [
    "IconifyClientException",
    "ConfigurationError",
    "IconNotFoundError",
    "PrefixNotFoundError",
    "MissingDimensionsError",
    "RegistryError",
]
