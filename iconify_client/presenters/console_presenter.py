"""Console presenter for CLI output."""

import json
import sys
from collections.abc import Mapping

from iconify_client.models import CollectionMetadata


class ConsolePresenter:
    """Present output to console (CLI implementation).

    Results go to stdout so they can be piped; status messages go to stderr.
    """

    def show_result(self, text: str) -> None:
        """Display command output."""
        print(text)

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message, file=sys.stderr)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}", file=sys.stderr)

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}", file=sys.stderr)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=sys.stderr)

    def show_collections(self, collections: Mapping[str, CollectionMetadata]) -> None:
        """Display one line per icon set."""
        width = max((len(prefix) for prefix in collections), default=0)
        for prefix in sorted(collections):
            metadata = collections[prefix]
            total = f" ({metadata.total} icons)" if metadata.total is not None else ""
            print(f"{prefix:{width}s}  {metadata.name or ''}{total}")

    def show_metadata(self, metadata: CollectionMetadata) -> None:
        """Display an icon set's metadata as JSON."""
        print(json.dumps(metadata.as_dict(), indent=2, ensure_ascii=False))
