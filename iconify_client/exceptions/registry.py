"""Registry communication exceptions."""

from .base import IconifyClientException


class RegistryError(IconifyClientException):
    """Raised when the registry answers with an unexpected status or payload."""

    pass
