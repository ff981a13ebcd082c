"""Base exception classes for Iconify Client."""


class IconifyClientException(Exception):
    """Base exception for all Iconify Client errors.

    All custom exceptions in the iconify_client package should inherit
    from this base class for consistent error handling.
    """

    pass
