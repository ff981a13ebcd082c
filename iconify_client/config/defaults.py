"""Default configuration values for Iconify Client."""

from .config import IconifyConfig


def create_default_config(**overrides) -> IconifyConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        IconifyConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            endpoint="https://icons.example.com",
            use_disk_cache=False,
        )
    """
    return IconifyConfig(**overrides)
