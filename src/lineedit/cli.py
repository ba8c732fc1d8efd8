"""lineedit CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from lineedit import __version__

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--config", "-c", type=click.Path(), default=None, envvar="LINEEDIT_CONFIG",
    help="Config file path",
)
@click.option("--log-level", default=None, help="Log level (overrides config)")
@click.option("--json-logs", is_flag=True, help="JSON log output")
@click.pass_context
def main(
    ctx: click.Context,
    config: str | None,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """lineedit - a simple line-oriented text editor.

    Runs the interactive editor when no command is given.
    """
    from lineedit.config.loader import DEFAULT_CONFIG_PATH, load_config
    from lineedit.logging_config import setup_logging

    config_path = Path(config) if config else DEFAULT_CONFIG_PATH
    try:
        cfg = load_config(config_path)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(
        level=log_level or cfg.logging.level,
        json_output=json_logs or cfg.logging.json_output,
    )
    logger.debug("Using config %s", config_path)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = cfg

    if ctx.invoked_subcommand is None:
        ctx.invoke(edit)


@main.command()
@click.argument("path", required=False, type=click.Path())
@click.pass_context
def edit(ctx: click.Context, path: str | None) -> None:
    """Run the interactive editor, optionally loading PATH first."""
    from lineedit.document.errors import DocumentIOError
    from lineedit.document.session import DocumentSession
    from lineedit.menu import MenuLoop

    config = ctx.obj["config"]
    session = DocumentSession.from_config(config.editor)

    if path:
        try:
            count = session.load_from(path)
        except DocumentIOError as e:
            click.echo(f"Could not load '{e.path}' ({e.reason}), starting with an empty document.")
        else:
            click.echo(f"Loaded '{path}' ({count} lines)")

    MenuLoop(session, config.editor).run()


@main.command()
@click.argument("path", type=click.Path())
@click.pass_context
def view(ctx: click.Context, path: str) -> None:
    """Print PATH with line numbers."""
    from lineedit.document.errors import DocumentIOError, EmptyDocument
    from lineedit.document.session import DocumentSession
    from lineedit.menu import format_listing

    config = ctx.obj["config"]
    session = DocumentSession.from_config(config.editor)

    try:
        session.load_from(path)
    except DocumentIOError as e:
        raise click.ClickException(f"Could not open file '{e.path}' ({e.reason})") from e

    try:
        rows = session.render()
    except EmptyDocument:
        click.echo("Document is empty.")
        return

    click.echo(format_listing(rows, config.editor.number_width))
