import threading
import urllib.error
import urllib.request
from pathlib import Path

import pytest

from mdstatic.config import Configuration
from mdstatic.renderers import MarkdownRenderer, markdown_to_html
from mdstatic.server import PreviewServer, RoutingHTTPServer, render_route
from mdstatic.site import Site


def create_site(tmp_path: Path) -> Site:
    (tmp_path / "hello.md").write_text("# Hi", encoding="utf-8")
    (tmp_path / "static.css").write_text("body{}", encoding="utf-8")
    return Site(Configuration(host="127.0.0.1", port=0, root=str(tmp_path)))


@pytest.fixture
def preview(tmp_path):
    server = PreviewServer(create_site(tmp_path))
    thread = threading.Thread(target=server.server.run, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.close()
        thread.join(timeout=5)


def fetch(server: PreviewServer, path: str):
    host, port = server.address
    with urllib.request.urlopen(f"http://{host}:{port}{path}", timeout=5) as resp:
        return resp.status, resp.headers, resp.read()


def test_render_route_renders_current_content(tmp_path):
    site = create_site(tmp_path)
    renderer = MarkdownRenderer("static.css", "Static HTML Site")
    assert render_route(site, "hello.md") == (
        renderer.header() + markdown_to_html("# Hi") + renderer.footer()
    )


def test_preview_registers_routes_and_stylesheet(tmp_path, capsys):
    site = create_site(tmp_path)
    (tmp_path / "notes.md").write_text("notes", encoding="utf-8")
    site = Site(site.config)
    server = PreviewServer(site)
    try:
        assert set(server.server.locations) == {"/hello.md", "/notes.md", "/static.css"}
        assert server.server.document_root == site.root_dir
        body, content_type = server.server.locations["/static.css"]()
        assert body == b"body{}"
        assert content_type == "text/css"
    finally:
        server.close()
    assert "Starting preview at 127.0.0.1:0" in capsys.readouterr().out


def test_preview_serves_rendered_page(preview):
    status, headers, body = fetch(preview, "/hello.md")
    assert status == 200
    assert headers["Content-type"] == "text/html; charset=utf-8"
    assert b'<h1 id="hi">Hi</h1>' in body
    assert b"<title>Static HTML Site</title>" in body


def test_preview_renders_live_edits(preview, tmp_path):
    fetch(preview, "/hello.md")
    (tmp_path / "hello.md").write_text("# Changed", encoding="utf-8")
    _, _, body = fetch(preview, "/hello.md")
    assert b'<h1 id="changed">Changed</h1>' in body
    assert b">Hi<" not in body


def test_preview_serves_stylesheet_fresh(preview, tmp_path):
    _, _, body = fetch(preview, "/static.css")
    assert body == b"body{}"
    (tmp_path / "static.css").write_text("p{}", encoding="utf-8")
    _, _, body = fetch(preview, "/static.css")
    assert body == b"p{}"


def test_preview_ignores_files_added_after_start(preview, tmp_path):
    (tmp_path / "late.md").write_text("# Late", encoding="utf-8")
    with pytest.raises(urllib.error.HTTPError) as excinfo:
        fetch(preview, "/late.md")
    assert excinfo.value.code == 404


def test_preview_unknown_path_is_404(preview):
    with pytest.raises(urllib.error.HTTPError) as excinfo:
        fetch(preview, "/missing")
    assert excinfo.value.code == 404


def test_routing_server_location_table(tmp_path):
    server = RoutingHTTPServer("127.0.0.1", 0, tmp_path)
    try:
        server.location("/x", lambda: (b"x", "text/plain"))
        assert server.locations["/x"]() == (b"x", "text/plain")
    finally:
        server.server_close()


def test_preview_deleted_source_is_404(preview, tmp_path):
    (tmp_path / "hello.md").unlink()
    with pytest.raises(urllib.error.HTTPError) as excinfo:
        fetch(preview, "/hello.md")
    assert excinfo.value.code == 404


def test_preview_unreadable_source_is_500(preview, monkeypatch):
    def fail(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("mdstatic.server.render_route", fail)
    with pytest.raises(urllib.error.HTTPError) as excinfo:
        fetch(preview, "/hello.md")
    assert excinfo.value.code == 500
