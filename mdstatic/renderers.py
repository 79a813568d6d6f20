"""Markdown rendering for mdstatic.

This module converts Markdown bodies to HTML and produces the page header and
footer that wrap every rendered document.

Key classes:
- MarkdownRenderer: Header/footer generation plus Markdown to HTML conversion.
- _HighlightRenderer: mistune renderer adding heading anchors and Pygments
  highlighting for fenced code.
"""

from __future__ import annotations

import re

import mistune
from jinja2 import Environment, select_autoescape
from markupsafe import escape
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

HEADER_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ site_name }}</title>
<link rel="stylesheet" href="{{ css_url }}">
</head>
<body>
<header><h1>{{ site_name }}</h1></header>
<main>
"""

FOOTER_TEMPLATE = """\
</main>
<footer><p>{{ site_name }}</p></footer>
</body>
</html>
"""

MARKDOWN_PLUGINS = ["strikethrough", "footnotes", "table", "url"]

_environment = Environment(autoescape=select_autoescape(default_for_string=True))
_header = _environment.from_string(HEADER_TEMPLATE)
_footer = _environment.from_string(FOOTER_TEMPLATE)


def _generate_heading_id(text: str) -> str:
    """Generate a URL-friendly ID from heading text.

    Args:
        text: The heading text.

    Returns:
        URL-friendly slug suitable for anchor links.
    """
    slug = re.sub(r"<[^>]+>", "", text).lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[-\s]+", "-", slug)
    return slug.strip("-")


class _HighlightRenderer(mistune.HTMLRenderer):
    """Markdown renderer with heading anchors and syntax highlighting."""

    def __init__(self):
        super().__init__(escape=False)
        self._heading_id_counts: dict[str, int] = {}

    def heading(self, text: str, level: int, **attrs) -> str:
        base_id = _generate_heading_id(text)

        if base_id in self._heading_id_counts:
            self._heading_id_counts[base_id] += 1
            heading_id = f"{base_id}-{self._heading_id_counts[base_id]}"
        else:
            self._heading_id_counts[base_id] = 0
            heading_id = base_id

        return f'<h{level} id="{heading_id}">{text}</h{level}>\n'

    def block_code(self, code: str, info: str | None = None) -> str:
        """Render a code block with Pygments syntax highlighting.

        Args:
            code: The code content.
            info: Language identifier (e.g., 'python', 'javascript').

        Returns:
            HTML string with highlighted code.
        """
        lang = info.split()[0] if info and info.strip() else None
        if lang:
            try:
                lexer = get_lexer_by_name(lang, stripall=True)
            except ClassNotFound:
                lexer = None
            if lexer is not None:
                formatter = HtmlFormatter(nowrap=False, cssclass="highlight")
                return highlight(code, lexer, formatter)
        escaped = code.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        lang_class = f' class="language-{escape(lang)}"' if lang else ""
        return f"<pre><code{lang_class}>{escaped}</code></pre>\n"


def markdown_to_html(text: str) -> str:
    """Convert a Markdown body to an HTML fragment."""
    markdown = mistune.create_markdown(
        renderer=_HighlightRenderer(), plugins=MARKDOWN_PLUGINS
    )
    return markdown(text)


class MarkdownRenderer:
    """Renders page chrome and Markdown bodies.

    Attributes:
        css_url: Stylesheet URL linked from the header.
        site_name: Site name shown in the header, title and footer.
    """

    def __init__(self, css_url: str, site_name: str):
        self.css_url = css_url
        self.site_name = site_name

    def header(self) -> str:
        return _header.render(css_url=self.css_url, site_name=self.site_name)

    def footer(self) -> str:
        return _footer.render(css_url=self.css_url, site_name=self.site_name)

    def to_html(self, text: str) -> str:
        return markdown_to_html(text)
