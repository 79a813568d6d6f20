"""Preview server for mdstatic.

Serves the site straight from its sources: every page request re-reads the
Markdown file and renders it again, so edits show up on the next reload
without rebuilding. The set of routes is fixed when the server is created;
sources added later are answered with a 404.

Key classes:
- PreviewServer: Registers one location per route plus ``/static.css``.
- RoutingHTTPServer: HTTP server dispatching exact paths to handlers.
- _RouteHandler: Request handler looking up the registered locations.

Key functions:
- render_route: Render one route from its current content on disk.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import unquote, urlsplit

from .content import Document
from .site import Site

# A handler returns the response body and its content type.
Response = tuple[bytes, str]
LocationHandler = Callable[[], Response]


class _RouteHandler(BaseHTTPRequestHandler):
    """Answers GET and HEAD requests from the server's location table."""

    server: RoutingHTTPServer

    def do_GET(self):
        self._respond(include_body=True)

    def do_HEAD(self):
        self._respond(include_body=False)

    def _respond(self, include_body: bool) -> None:
        path = unquote(urlsplit(self.path).path)
        handler = self.server.locations.get(path)
        if handler is None:
            self.send_error(404, "File not found")
            return
        try:
            body, content_type = handler()
        except FileNotFoundError:
            self.send_error(404, "File not found")
            return
        except OSError as exc:
            self.send_error(500, f"Cannot read source: {exc.strerror or exc}")
            return
        self.send_response(200)
        self.send_header("Content-type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Cache-Control", "no-cache, no-store, must-revalidate")
        self.end_headers()
        if include_body:
            self.wfile.write(body)


class RoutingHTTPServer(ThreadingHTTPServer):
    """HTTP server with exact-path locations.

    Attributes:
        document_root: Directory the served content comes from.
        locations: Mapping of request path to handler.
    """

    daemon_threads = True

    def __init__(self, bind_ip: str, port: int, document_root: Path):
        self.document_root = document_root
        self.locations: dict[str, LocationHandler] = {}
        super().__init__((bind_ip, port), _RouteHandler)

    def location(self, path: str, handler: LocationHandler) -> None:
        self.locations[path] = handler

    def run(self) -> None:
        self.serve_forever()


def render_route(site: Site, route: str) -> str:
    """Render a route from its current content on disk.

    Args:
        site: Site the route belongs to.
        route: Markdown entry name inside the site root.

    Returns:
        Full page HTML.
    """
    return Document.from_route(site, route).to_html()


class PreviewServer:
    """Live preview of a site.

    Attributes:
        site: Site being previewed.
        server: Underlying HTTP server, bound on creation.
    """

    def __init__(self, site: Site):
        self.site = site
        config = site.config
        print(f"Starting preview at {config.url}")
        self.server = RoutingHTTPServer(config.host, config.port, site.root_dir)
        self._register_locations()

    @property
    def address(self) -> tuple[str, int]:
        host, port = self.server.server_address[:2]
        return host, port

    def _register_locations(self) -> None:
        for route in self.site.routes:
            self.server.location(f"/{route}", functools.partial(self._serve_page, route))
        self.server.location(f"/{self.site.stylesheet_path.name}", self._serve_stylesheet)

    def _serve_page(self, route: str) -> Response:
        html = render_route(self.site, route)
        return html.encode("utf-8"), "text/html; charset=utf-8"

    def _serve_stylesheet(self) -> Response:
        return self.site.stylesheet_path.read_bytes(), "text/css"

    def run(self) -> None:  # pragma: no cover - integration path
        try:
            self.server.run()
        except KeyboardInterrupt:
            print("Stopping preview")
        finally:
            self.close()

    def shutdown(self) -> None:
        self.server.shutdown()

    def close(self) -> None:
        self.server.server_close()
