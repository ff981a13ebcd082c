"""Data model for a fetched icon."""

import html
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Icon:
    """An icon's inner SVG markup plus the attributes of its ``<svg>`` root.

    Immutable: ``attributes`` is exposed as a read-only mapping.
    """

    body: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Freeze the attribute mapping."""
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @classmethod
    def from_dimensions(cls, body: str, width, height) -> "Icon":
        """Create an icon whose viewBox spans ``width`` x ``height``.

        Values are stringified as given, no unit normalization.
        """
        return cls(body, {"viewBox": f"0 0 {width} {height}"})

    @property
    def view_box(self) -> str | None:
        return self.attributes.get("viewBox")

    def to_html(self) -> str:
        """Render the icon as a standalone ``<svg>`` element."""
        attrs = {"xmlns": "http://www.w3.org/2000/svg", **self.attributes}
        rendered = " ".join(f'{key}="{html.escape(str(value))}"' for key, value in attrs.items())
        return f"<svg {rendered}>{self.body}</svg>"

    def __hash__(self) -> int:
        return hash((self.body, tuple(sorted(self.attributes))))

    def __str__(self) -> str:
        return self.to_html()
