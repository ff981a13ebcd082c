"""Icon lookup exceptions."""

from .base import IconifyClientException


class IconNotFoundError(IconifyClientException):
    """Raised when an icon does not exist in the registry.

    Also covers responses the registry sends for unknown icons: error
    pages, non-JSON bodies and SVG responses without an ``<svg`` root.
    """

    pass


class PrefixNotFoundError(IconNotFoundError):
    """Raised when an icon set prefix is not part of the collection index."""

    pass


class MissingDimensionsError(IconifyClientException):
    """Raised when an icon exists but neither a width nor a height can be resolved."""

    pass
