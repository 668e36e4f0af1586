import json
from pathlib import Path

import click
from click import Choice, argument, group, option
from click import Path as ClickPath
from loguru import logger

from papernotes.notes import create_paper_note
from papernotes.settings import SETTING_NAMES, SettingsStore
from papernotes.utils import configure_logging, default_vault_root, load_config
from papernotes.vault import Vault

LOG_LEVELS = Choice(
    ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
)


@group()
def cli():
    pass


@cli.command()
@argument("paper")
@option(
    "--vault",
    "vault_root",
    type=ClickPath(file_okay=False, path_type=Path),
    default=None,
    help="Notes vault root (default: $PAPERNOTES_VAULT or the current directory).",
)
@option(
    "--settings",
    "settings_path",
    type=ClickPath(dir_okay=False, path_type=Path),
    default=None,
)
@option("--open/--no-open", "open_note", default=False, help="Open the new note.")
@option("--log-level", type=LOG_LEVELS, default="WARNING")
def note(
    paper: str,
    vault_root: Path,
    settings_path: Path,
    open_note: bool,
    log_level: str,
):
    """Load paper details for an arXiv ID or URL and write a note."""
    configure_logging(log_level.upper())
    load_config()

    settings = SettingsStore(settings_path).load()
    vault = Vault(
        vault_root or default_vault_root(),
        opener=click.launch if open_note else None,
    )
    result = create_paper_note(paper, settings, vault)
    for notice in result.notices:
        click.echo(notice)
    if result.created:
        click.echo(f"Created {result.note.path}")


@cli.group()
@option(
    "--settings",
    "settings_path",
    type=ClickPath(dir_okay=False, path_type=Path),
    default=None,
)
@click.pass_context
def settings(ctx: click.Context, settings_path: Path):
    """Show or change how notes are rendered and stored."""
    configure_logging("WARNING")
    load_config()
    ctx.obj = SettingsStore(settings_path)


@settings.command()
@click.pass_obj
def show(store: SettingsStore):
    click.echo(json.dumps(store.load().to_dict(), indent=2))


@settings.command(name="set")
@argument("key", type=Choice(SETTING_NAMES))
@argument("value")
@click.pass_obj
def set_(store: SettingsStore, key: str, value: str):
    """Change one setting and save it."""
    try:
        updated = store.update(**{key: value})
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="VALUE") from e
    logger.info("Updated {} in {}", key, store.path)
    click.echo(f"{key} = {json.dumps(updated.to_dict()[key])}")
