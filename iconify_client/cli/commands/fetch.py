"""CLI commands for fetching a single icon."""

from iconify_client.cli.commands.common import build_client
from iconify_client.exceptions import IconifyClientException
from iconify_client.presenters import ConsolePresenter


def icon_command(args) -> int:
    """Execute the icon subcommand: print the icon rendered as ``<svg>``.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    prefix, name = args.icon
    try:
        client = build_client(args)
        presenter.show_result(client.fetch_icon(prefix, name).to_html())
        return 0
    except IconifyClientException as e:
        presenter.show_error(str(e))
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1


def svg_command(args) -> int:
    """Execute the svg subcommand: print the registry's SVG document.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    prefix, name = args.icon
    try:
        client = build_client(args)
        presenter.show_result(client.fetch_svg(prefix, name))
        return 0
    except IconifyClientException as e:
        presenter.show_error(str(e))
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1
