"""CLI commands for inspecting icon sets."""

from iconify_client.cli.commands.common import build_client
from iconify_client.exceptions import IconifyClientException
from iconify_client.presenters import ConsolePresenter


def collections_command(args) -> int:
    """Execute the collections subcommand.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    try:
        client = build_client(args)
        presenter.show_collections(client.collections())
        return 0
    except IconifyClientException as e:
        presenter.show_error(str(e))
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1


def metadata_command(args) -> int:
    """Execute the metadata subcommand.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    try:
        client = build_client(args)
        presenter.show_metadata(client.metadata_for(args.prefix))
        return 0
    except IconifyClientException as e:
        presenter.show_error(str(e))
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1
