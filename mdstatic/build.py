"""Site building functionality for mdstatic.

This module writes the whole site to disk in a single sequential pass:
the output directory is created, every route is rendered to an HTML file and
the stylesheet is copied next to the pages.

Any error aborts the build where it happens. Files written before the error
stay in place.

Key classes:
- Builder: Renders every route of a Site into its output directory.
- BuildResult: Pages and directory produced by a build.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .content import Document
from .site import Site


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        pages: HTML files written, in route order.
        output_dir: Directory where the site was built.
    """

    pages: list[Path]
    output_dir: Path


class Builder:
    """Eager, disk-writing renderer for a Site.

    Attributes:
        site_index: Site whose routes are built.
    """

    def __init__(self, site: Site):
        self.site_index = site

    def site(self) -> BuildResult:
        """Build the entire site.

        Raises:
            FileExistsError: If the output directory already exists.

        Returns:
            BuildResult listing the written pages.
        """
        self.site_index.output_dir.mkdir()
        pages = self.generate_posts()
        self.generate_assets()
        return BuildResult(pages=pages, output_dir=self.site_index.output_dir)

    def generate_posts(self) -> list[Path]:
        pages: list[Path] = []
        for route in self.site_index.routes:
            document = Document.from_route(self.site_index, route)
            target = self.site_index.output_path(route)
            _write_page(target, document.to_html())
            pages.append(target)
        return pages

    def generate_assets(self) -> Path:
        """Copy ``static.css`` from the root into the output directory."""
        css = self.site_index.stylesheet_path.read_bytes()
        target = self.site_index.output_dir / self.site_index.stylesheet_path.name
        target.write_bytes(css)
        return target


def _write_page(target: Path, rendered: str) -> None:
    """Write a rendered page, creating or truncating the file.

    Args:
        target: Output file path.
        rendered: Rendered HTML content.
    """
    with open(target, "w", encoding="utf-8") as f:
        f.write(rendered)
