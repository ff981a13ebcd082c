"""Configuration-related exceptions."""

from .base import IconifyClientException


class ConfigurationError(IconifyClientException):
    """Raised when the client cannot be set up (missing HTTP library, bad endpoint)."""

    pass
