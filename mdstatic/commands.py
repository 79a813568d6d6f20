"""Command dispatch for mdstatic.

Commands are written as ``resource:action`` tokens. The set of commands is
closed: every token maps to one ``Command`` member and each member to one
function.

Key functions:
- parse_command: Turn a token into a Command.
- dispatch: Run the function registered for a Command.
- new_post, preview_start, preview_run, generate_site: Command handlers.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

from .build import Builder, BuildResult
from .config import Configuration
from .content import Document
from .server import PreviewServer
from .site import Site

COMMAND_RE = re.compile(r"\w+:\w+")

NEW_POST_BODY = "Your content here."

HELP_TEXT = """\
mdstatic:
  preview:start to check the preview server, preview:run to preview your site
  post:new TITLE to create a new post
  generate:site to build your site into the output directory
"""


class ArgumentFormatError(ValueError):
    """A command token is not shaped like ``resource:action``."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Malformed command: {token!r}")


class UnknownCommandError(LookupError):
    """A command token has no matching command."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown command: {token}")


class Command(Enum):
    NEW_POST = "post:new"
    PREVIEW_START = "preview:start"
    PREVIEW_RUN = "preview:run"
    GENERATE_SITE = "generate:site"


def parse_command(token: str) -> Command:
    """Map a command token to a Command.

    Raises:
        ArgumentFormatError: If the token is not ``resource:action``.
        UnknownCommandError: If no command has that name.
    """
    if not COMMAND_RE.search(token):
        raise ArgumentFormatError(token)
    try:
        return Command(token)
    except ValueError:
        raise UnknownCommandError(token) from None


def new_post(config: Configuration, title: str | None = None) -> Path:
    """Create a placeholder post named after its title in the site root."""
    document = Document(Site(config), title=title, body=NEW_POST_BODY)
    return document.save()


def preview_start(config: Configuration) -> PreviewServer:
    """Check that the preview server can bind and register its routes.

    The listening socket is released before returning; use ``preview:run``
    to serve.
    """
    server = PreviewServer(Site(config))
    server.close()
    return server


def preview_run(config: Configuration) -> PreviewServer:
    server = PreviewServer(Site(config))
    server.run()
    return server


def generate_site(config: Configuration) -> BuildResult:
    return Builder(Site(config)).site()


HANDLERS: dict[Command, Callable[..., Any]] = {
    Command.NEW_POST: new_post,
    Command.PREVIEW_START: preview_start,
    Command.PREVIEW_RUN: preview_run,
    Command.GENERATE_SITE: generate_site,
}


def dispatch(command: Command, config: Configuration, *args: str) -> Any:
    """Run a command.

    Args:
        command: Command to run.
        config: Process configuration.
        *args: Remaining command-line arguments, passed to the handler.

    Returns:
        Whatever the handler returns.
    """
    return HANDLERS[command](config, *args)
