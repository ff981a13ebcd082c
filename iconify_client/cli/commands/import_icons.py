"""CLI command for importing icons into a local directory."""

from pathlib import Path

from iconify_client.cli.commands.common import build_client, config_from_args
from iconify_client.exceptions import IconifyClientException
from iconify_client.presenters import ConsolePresenter


def import_command(args) -> int:
    """Execute the import subcommand.

    Icons are grouped by prefix and fetched with one request per icon set,
    then written to ``<dir>/<prefix>/<name>.svg``.

    Returns:
        Exit code (0 = all icons imported, 1 = at least one failure)
    """
    presenter = ConsolePresenter()
    config = config_from_args(args)
    icons_dir = Path(args.dir) if args.dir else config.icons_dir

    by_prefix: dict[str, list[str]] = {}
    for prefix, name in args.icons:
        by_prefix.setdefault(prefix, []).append(name)

    try:
        client = build_client(args)
    except IconifyClientException as e:
        presenter.show_error(str(e))
        return 1

    failures = 0
    for prefix, names in by_prefix.items():
        pending = []
        for name in names:
            if not args.force and (icons_dir / prefix / f"{name}.svg").exists():
                presenter.show_warning(f'Icon "{prefix}:{name}" already imported, skipping')
            else:
                pending.append(name)
        if not pending:
            continue

        try:
            icons = client.fetch_icons(prefix, pending)
        except IconifyClientException as e:
            presenter.show_error(str(e))
            failures += len(pending)
            continue
        except Exception as e:
            presenter.show_error(f"Unexpected error: {e}")
            failures += len(pending)
            continue

        for name in pending:
            icon = icons.get(name)
            if icon is None:
                presenter.show_error(f'The icon "{prefix}:{name}" does not exist on {client.endpoint}.')
                failures += 1
                continue

            path = icons_dir / prefix / f"{name}.svg"
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(icon.to_html(), encoding="utf-8")
            except OSError as e:
                presenter.show_error(f'Could not write "{prefix}:{name}" to {path}: {e}')
                failures += 1
                continue
            presenter.show_success(f'Imported "{prefix}:{name}" to {path}')

    return 1 if failures else 0
