"""Data models for Iconify Client."""

from .collection import CollectionMetadata, dimension_value
from .icon import Icon

__all__ = ["CollectionMetadata", "Icon", "dimension_value"]
