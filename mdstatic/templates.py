"""Page templating for mdstatic.

A Template wraps a rendered body between the header and footer produced by
the Markdown renderer. There is no template language beyond that wrapping.
"""

from __future__ import annotations

from collections.abc import Callable

from .config import Configuration
from .renderers import MarkdownRenderer

__all__ = ["Template"]


class Template:
    """Header/body/footer composition for one site.

    Attributes:
        renderer: Markdown renderer configured with the site's stylesheet URL
            and name.
    """

    def __init__(self, config: Configuration):
        self.renderer = MarkdownRenderer(config.css_url, config.site_name)

    def render(self, body: Callable[[], str] | None = None) -> str:
        """Render a full page.

        Args:
            body: Optional callable producing the HTML placed between the
                header and footer. Without it only the header and footer are
                returned.

        Returns:
            The concatenated page HTML.
        """
        output = [self.renderer.header()]
        if body is not None:
            output.append(body())
        output.append(self.renderer.footer())
        return "".join(output)
