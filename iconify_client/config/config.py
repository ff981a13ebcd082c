"""Configuration classes for Iconify Client."""

from dataclasses import dataclass, field
from pathlib import Path

from iconify_client import __version__


@dataclass(frozen=True)
class IconifyConfig:
    """Immutable configuration for registry lookups.

    All configuration is frozen (immutable) so a single instance can be
    shared between clients and threads.
    """

    # Registry settings
    endpoint: str = "https://api.iconify.design"
    timeout: float = 10.0  # Seconds per request, passed to the HTTP transport
    user_agent: str = f"iconify-client/{__version__}"

    # Collection index cache settings
    cache_key: str = "ux-iconify-sets"
    cache_ttl: float | None = 86400.0  # Seconds; None = never expire
    use_disk_cache: bool = True
    cache_db_path: Path = field(
        default_factory=lambda: Path.home() / ".iconify_client" / "cache.db"
    )

    # Import settings
    icons_dir: Path = field(default_factory=lambda: Path("icons"))

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.cache_db_path, str):
            object.__setattr__(self, "cache_db_path", Path(self.cache_db_path))
        if isinstance(self.icons_dir, str):
            object.__setattr__(self, "icons_dir", Path(self.icons_dir))
