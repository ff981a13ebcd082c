"""CLI subcommands for Iconify Client."""
