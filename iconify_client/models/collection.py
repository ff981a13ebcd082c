"""Data model for icon set (collection) metadata."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

KNOWN_FIELDS = ("name", "total", "width", "height")


def dimension_value(value: Any) -> int | float | str | None:
    """Normalize a width or height sent by the registry.

    Values that are not numbers or strings are treated as absent. Icon
    sets may list several heights (e.g. ``[16, 24]``); the first one
    is the set's default.
    """
    if isinstance(value, list):
        return dimension_value(value[0]) if value else None
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float | str):
        return value
    return None


@dataclass(frozen=True)
class CollectionMetadata:
    """Metadata for one icon set in the registry's collection index.

    Known fields are typed; everything else the registry sends (author,
    license, samples, palette, ...) is kept untouched in ``extra``.
    """

    prefix: str
    name: str | None = None
    total: int | None = None
    width: int | float | str | None = None
    height: int | float | str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
        object.__setattr__(self, "raw", MappingProxyType(dict(self.raw)))

    @classmethod
    def from_dict(cls, prefix: str, data: Mapping[str, Any]) -> "CollectionMetadata":
        """Build metadata from a ``/collections`` record.

        Args:
            prefix: Icon set prefix the record belongs to.
            data: Raw record as returned by the registry.
        """
        name = data.get("name")
        total = data.get("total")
        return cls(
            prefix=prefix,
            name=name if isinstance(name, str) else None,
            total=total if isinstance(total, int) and not isinstance(total, bool) else None,
            width=dimension_value(data.get("width")),
            height=dimension_value(data.get("height")),
            extra={k: v for k, v in data.items() if k not in KNOWN_FIELDS},
            raw=data,
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the record exactly as the registry sent it."""
        if self.raw:
            return dict(self.raw)
        data: dict[str, Any] = dict(self.extra)
        for key in KNOWN_FIELDS:
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    def __getitem__(self, key: str) -> Any:
        return self.as_dict()[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.as_dict().get(key, default)

    def __hash__(self) -> int:
        # extra may hold lists and dicts, so only the typed fields are hashed
        return hash((self.prefix, self.name, self.total, self.width, self.height))
