"""Per-request page assembly.

Combines path resolution, link building and content loading into the data
handed to the page template. Any failure turns into the not-found page.
"""

import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from pathlib import Path, PurePosixPath

from md2web.core.content import MarkdownRenderer
from md2web.core.errors import PageError, ReadFailureError
from md2web.core.links import ROOT_LINK, LinkPair, header_links, nav_links
from md2web.core.paths import MAIN_PAGE, ensure_not_excluded, resolve, strip_markdown_suffix
from md2web.core.types import FilePath, RequestPath

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """Everything the page template needs."""

    title: str
    header_links: list[LinkPair]
    nav_links: list[LinkPair] = field(default_factory=list)
    content: str = ""
    message: str | None = None
    status: int = HTTPStatus.OK


class PageBuilder:
    """Builds pages for request paths under a site root."""

    def __init__(
        self,
        source_dir: Path,
        renderer: MarkdownRenderer,
        exclusions: frozenset[str],
        *,
        title: str,
    ) -> None:
        """Initialize builder.

        Args:
            source_dir: Site root containing main.md
            renderer: Renderer for markdown content
            exclusions: Names and relative paths hidden from the site
            title: Title of the root page
        """
        self._source_dir = source_dir
        self._renderer = renderer
        self._exclusions = exclusions
        self._title = title

    @property
    def source_dir(self) -> Path:
        """Site root on disk."""
        return self._source_dir

    @property
    def exclusions(self) -> frozenset[str]:
        """Names and relative paths hidden from the site."""
        return self._exclusions

    def build(self, request_path: str) -> Page:
        """Build the page for a request path.

        Args:
            request_path: URL path, with or without leading slash

        Returns:
            Page with status 200, or the not-found page on any failure
        """
        relative = RequestPath(request_path.lstrip("/"))
        file_path = resolve(relative)
        try:
            page = self._build(relative, file_path)
        except PageError as e:
            logger.info(f"/{relative} couldn't be served: {e}")
            return self.not_found(relative)
        logger.debug(f"/{relative} served from {file_path}")
        return page

    def not_found(self, request_path: str) -> Page:
        """Fallback page for paths that don't resolve."""
        return Page(
            title=_title_for(request_path) or self._title,
            header_links=[ROOT_LINK],
            nav_links=[],
            message=f"/{request_path.lstrip('/')} couldn't be served.",
            status=HTTPStatus.NOT_FOUND,
        )

    def _build(self, request_path: RequestPath, file_path: FilePath) -> Page:
        if ".." in PurePosixPath(file_path).parts:
            raise ReadFailureError(file_path, "path leaves the site root")
        ensure_not_excluded(file_path, self._exclusions)

        headers = header_links(file_path, self._exclusions)
        navs = nav_links(file_path, self._exclusions, root=self._source_dir)
        content = self._renderer.load_content(self._source_dir / file_path)

        return Page(
            title=_title_for(request_path) or self._title,
            header_links=headers,
            nav_links=navs,
            content=content,
        )


def _title_for(request_path: str) -> str:
    """Last segment of the request path without its .md suffix."""
    name = PurePosixPath(request_path).name
    if name == strip_markdown_suffix(MAIN_PAGE):
        name = PurePosixPath(request_path).parent.name
    return strip_markdown_suffix(name)
