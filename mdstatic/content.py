"""Documents for mdstatic.

A Document is one piece of content: a title and a raw Markdown body. It knows
where it lives on disk and how to render itself into a full HTML page.
Documents are cheap and short-lived; a new one is created for every render or
save.

Key classes:
- Document: Title, body, derived filename/path, rendering and saving.
- MissingTitleError: Raised when a filename is needed but no title is set.
"""

from __future__ import annotations

from pathlib import Path

from .site import Site
from .templates import Template


class MissingTitleError(Exception):
    """A document's filename was requested before it was given a title."""

    def __init__(self, message: str = "Document has no title to derive a filename from"):
        self.message = message
        super().__init__(message)


class Document:
    """One content unit of the site.

    Attributes:
        site: Site the document belongs to.
        title: Human-readable title, used to derive the filename.
        body: Raw Markdown text.
    """

    def __init__(self, site: Site, title: str | None = None, body: str = ""):
        self.site = site
        self.title = title
        self.body = body
        self._filename: str | None = None
        self._path: Path | None = None
        self._template = Template(site.config)

    @classmethod
    def from_route(cls, site: Site, route: str) -> Document:
        """Create a document whose body is the current content of a route."""
        body = site.source_path(route).read_text(encoding="utf-8")
        return cls(site, body=body)

    @property
    def filename(self) -> str:
        """Title with spaces replaced by underscores.

        The value is derived once; later title changes do not affect it.

        Raises:
            MissingTitleError: If the document has no title or an empty one.
        """
        if self._filename is None:
            if not self.title:
                raise MissingTitleError()
            self._filename = self.title.replace(" ", "_")
        return self._filename

    @property
    def path(self) -> Path:
        """Location of the document in the root directory, without extension."""
        if self._path is None:
            self._path = self.site.root_dir / self.filename
        return self._path

    def to_html(self) -> str:
        return self._template.render(
            lambda: self._template.renderer.to_html(self.body)
        )

    def save(self) -> Path:
        """Write the raw Markdown body to ``{path}.md``.

        Returns:
            Path of the written file.
        """
        target = self.site.root_dir / f"{self.filename}.md"
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(self.body)
        return target
