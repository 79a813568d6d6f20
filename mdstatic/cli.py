"""Command-line interface for mdstatic.

This module defines the CLI using the Click framework. A single entry command
takes a ``resource:action`` token and hands it to the command dispatcher.

Commands:
- post:new TITLE: Create a new post in the site root.
- preview:start: Bind the preview server and register the routes.
- preview:run: Run the preview server until interrupted.
- generate:site: Build the site into the output directory.
"""

from __future__ import annotations

from pathlib import Path

import click
import questionary

from . import __version__
from .commands import (
    HELP_TEXT,
    ArgumentFormatError,
    Command,
    UnknownCommandError,
    dispatch,
    parse_command,
)
from .config import ConfigError, configure
from .content import MissingTitleError


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="mdstatic")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (defaults to ./static.yaml)",
)
@click.option("--host", help="Address for the preview server")
@click.option("--port", type=int, help="Port for the preview server")
@click.option("--root", help="Directory holding the Markdown sources")
@click.option("--output", help="Directory the site is built into")
@click.argument("command", required=False, default="help")
@click.argument("args", nargs=-1)
def cli(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    root: str | None,
    output: str | None,
    command: str,
    args: tuple[str, ...],
):
    """mdstatic static site generator."""
    try:
        parsed = parse_command(command)
    except ArgumentFormatError:
        click.echo(HELP_TEXT, nl=False)
        return
    except UnknownCommandError as exc:
        raise click.ClickException(str(exc)) from None

    try:
        config = configure(config_path, host=host, port=port, root=root, output=output)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from None

    try:
        if parsed is Command.NEW_POST:
            title = " ".join(args) if args else _ask_title()
            path = dispatch(parsed, config, title)
            click.echo(f"Created {path}")
        elif parsed is Command.GENERATE_SITE:
            result = dispatch(parsed, config)
            click.echo(f"Built {len(result.pages)} pages into {result.output_dir}")
        else:
            dispatch(parsed, config)
    except MissingTitleError as exc:
        raise click.ClickException(exc.message) from None
    except OSError as exc:
        raise click.ClickException(_format_os_error(exc)) from None


def _ask_title() -> str:
    """Prompt for a post title."""
    title = questionary.text(
        "Post title:",
        validate=lambda x: len(x.strip()) > 0 or "Title cannot be empty",
        style=_questionary_style(),
    ).ask()
    if title is None:
        raise click.Abort()
    return title.strip()


def _format_os_error(exc: OSError) -> str:
    """Format a filesystem error into a user-friendly message.

    Args:
        exc: The exception to format.

    Returns:
        A human-readable error message.
    """
    if exc.filename is not None:
        return f"{exc.strerror or type(exc).__name__}: {exc.filename}"
    return f"{type(exc).__name__}: {exc}"


def _questionary_style():
    """Return consistent questionary style."""
    return questionary.Style(
        [
            ("qmark", "fg:cyan bold"),
            ("question", "bold"),
            ("answer", "fg:cyan"),
        ]
    )


def main():
    """Entry point for the CLI application."""
    cli()
