"""Helpers shared by the CLI subcommands."""

import argparse

from iconify_client.config import IconifyConfig, create_default_config
from iconify_client.services import IconifyClient, create_client


def parse_icon_id(value: str) -> tuple[str, str]:
    """Split a ``prefix:name`` icon identifier.

    Raises:
        argparse.ArgumentTypeError: If the identifier is not of that form.
    """
    prefix, sep, name = value.partition(":")
    if not sep or not prefix or not name:
        raise argparse.ArgumentTypeError(f'Invalid icon "{value}": expected "prefix:name".')
    return prefix, name


def config_from_args(args) -> IconifyConfig:
    """Build the configuration from the global CLI options."""
    overrides = {"use_disk_cache": not args.no_cache}
    if args.endpoint:
        overrides["endpoint"] = args.endpoint
    if args.cache_db:
        overrides["cache_db_path"] = args.cache_db
    return create_default_config(**overrides)


def build_client(args) -> IconifyClient:
    """Create a client for the global CLI options.

    Raises:
        ConfigurationError: If the client cannot be set up
    """
    return create_client(config_from_args(args))
