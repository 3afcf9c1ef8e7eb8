"""Markdown page controller.

Renders the markdown file behind any request path into the page template.
"""

from aiohttp import web
from jinja2 import Template

from md2web.core.page import PageBuilder
from md2web.templates import render_page


class ClientController:
    """Serves every path as a rendered markdown page."""

    def __init__(self, builder: PageBuilder, template: Template, static_url: str) -> None:
        self._builder = builder
        self._template = template
        self._static_url = static_url

    def match(self, path: str) -> bool:
        return True

    async def handle(self, request: web.Request) -> web.Response:
        page = self._builder.build(request.path)
        return web.Response(
            text=render_page(self._template, page, self._static_url),
            content_type="text/html",
            status=page.status,
        )
