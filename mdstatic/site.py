"""Route discovery and path resolution for mdstatic.

A ``Site`` resolves the configured root and output directories and takes a
snapshot of the Markdown sources found directly inside the root. The snapshot
is taken once, when the Site is created, and is never refreshed: files added
afterwards are not part of that Site's routes.

Key functions:
- is_markdown_route: Check whether a directory entry name is a Markdown route.
- output_name: Map a route to the name of its built HTML file.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from .config import Configuration

MARKDOWN_ROUTE_RE = re.compile(r".+\.md")

STYLESHEET_NAME = "static.css"


def is_markdown_route(name: str) -> bool:
    """Check if a directory entry name should be served as a page.

    The match is not anchored to the end of the name, so backups such as
    ``notes.md.bak`` are routes too.

    Args:
        name: Entry name inside the root directory.

    Returns:
        True if ``.md`` appears in the name after at least one character.
    """
    return MARKDOWN_ROUTE_RE.search(name) is not None


def output_name(route: str) -> str:
    """Return the output filename for a route.

    Only the first ``.md`` is replaced.

    Examples:
        >>> output_name("2024-notes.md")
        '2024-notes.html'

        >>> output_name("a.md.md")
        'a.html.md'
    """
    return route.replace(".md", ".html", 1)


class Site:
    """Resolved directories and the route snapshot of one site.

    Attributes:
        config: Configuration the site was created from.
        root_dir: Absolute path of the source directory.
        output_dir: Absolute path of the build directory.
        routes: Markdown entry names inside ``root_dir``, in directory order.
    """

    def __init__(self, config: Configuration):
        self.config = config
        self.root_dir = Path(config.root).expanduser().resolve()
        self.output_dir = Path(config.output).expanduser().resolve()
        self.routes: list[str] = [
            name for name in os.listdir(self.root_dir) if is_markdown_route(name)
        ]

    @property
    def stylesheet_path(self) -> Path:
        return self.root_dir / STYLESHEET_NAME

    def source_path(self, route: str) -> Path:
        return self.root_dir / route

    def output_path(self, route: str) -> Path:
        return self.output_dir / output_name(route)
