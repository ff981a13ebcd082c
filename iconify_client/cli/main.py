"""Main CLI entry point for iconify_client."""

import argparse
import logging
import sys

from iconify_client import __version__
from iconify_client.cli.commands import collections, fetch, import_icons
from iconify_client.cli.commands.common import parse_icon_id


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="iconify-client",
        description="Look up icons on an Iconify icon registry",
        epilog="Use 'iconify-client <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--endpoint", help="Registry base URL (default: https://api.iconify.design)")
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Do not keep the icon set list in the on-disk cache",
    )
    parser.add_argument("--cache-db", help="Path to the on-disk cache database")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # iconify-client collections
    subparsers.add_parser(
        "collections",
        help="List available icon sets",
        description="List every icon set prefix known to the registry",
    )

    # iconify-client metadata <prefix>
    metadata_parser = subparsers.add_parser(
        "metadata",
        help="Show icon set metadata",
        description="Print the metadata of one icon set as JSON",
    )
    metadata_parser.add_argument("prefix", help="Icon set prefix (e.g. mdi)")

    # iconify-client icon <prefix:name>
    icon_parser = subparsers.add_parser(
        "icon",
        help="Print an icon as <svg>",
        description="Fetch icon metadata and print it rendered as an <svg> element",
    )
    icon_parser.add_argument("icon", type=parse_icon_id, help="Icon identifier (prefix:name)")

    # iconify-client svg <prefix:name>
    svg_parser = subparsers.add_parser(
        "svg",
        help="Print an icon's SVG document",
        description="Fetch and print the registry's SVG document for an icon",
    )
    svg_parser.add_argument("icon", type=parse_icon_id, help="Icon identifier (prefix:name)")

    # iconify-client import <prefix:name>...
    import_parser = subparsers.add_parser(
        "import",
        help="Save icons to a local directory",
        description="Fetch icons and write them to <dir>/<prefix>/<name>.svg",
    )
    import_parser.add_argument(
        "icons", nargs="+", type=parse_icon_id, help="Icon identifiers (prefix:name)"
    )
    import_parser.add_argument("--dir", help="Target directory (default: ./icons)")
    import_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite icons that were already imported",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    # Dispatch to appropriate command
    if args.command == "collections":
        return collections.collections_command(args)
    elif args.command == "metadata":
        return collections.metadata_command(args)
    elif args.command == "icon":
        return fetch.icon_command(args)
    elif args.command == "svg":
        return fetch.svg_command(args)
    elif args.command == "import":
        return import_icons.import_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
