"""Tests for page template rendering."""

from pathlib import Path

import pytest
from md2web.core.links import LinkPair
from md2web.core.page import Page
from md2web.templates import load_template, render_page


class TestRenderPage:
    """Tests for render_page()."""

    def test__inline_template__renders_links_and_content(self) -> None:
        """Render links, title and trusted content HTML."""
        page = Page(
            title="guide",
            header_links=[LinkPair("/", "/"), LinkPair("/a/", "a")],
            nav_links=[LinkPair("one", "one")],
            content="<p>Hello</p>",
        )

        html = render_page(load_template(), page, "/static")

        assert "<title>guide</title>" in html
        assert '<a href="/a/">a</a>' in html
        assert '<a href="one">one</a>' in html
        assert "<p>Hello</p>" in html
        assert 'href="/static/favicon.png"' in html

    def test__message__escaped(self) -> None:
        """Escape the fallback message instead of trusting it."""
        page = Page(
            title="x",
            header_links=[LinkPair("/", "/")],
            message="/<script> couldn't be served.",
            status=404,
        )

        html = render_page(load_template(), page, "/static")

        assert "&lt;script&gt;" in html
        assert "<script>" not in html

    def test__template_file__used(self, tmp_path: Path) -> None:
        """Load a template file instead of the inline one."""
        template_file = tmp_path / "page.html"
        template_file.write_text("<h1>{{ title }}</h1>{{ content | safe }}")
        page = Page(title="<b>", header_links=[], content="<p>x</p>")

        html = render_page(load_template(template_file), page, "/static")

        assert html == "<h1>&lt;b&gt;</h1><p>x</p>"

    def test__missing_template_file__raises(self, tmp_path: Path) -> None:
        """Raise when the configured template file doesn't exist."""
        with pytest.raises(FileNotFoundError):
            load_template(tmp_path / "missing.html")
