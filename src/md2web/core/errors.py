"""Errors raised while turning a request path into a page.

All of them collapse into the same not-found page at the request boundary.
"""


class PageError(Exception):
    """Base class for failures serving a single page."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class NotMarkdownError(PageError):
    """Resolved path does not end in .md."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "not a markdown file")


class ReadFailureError(PageError):
    """Markdown file could not be opened or read."""


class ExcludedError(PageError):
    """Part of the path matches the exclusion set."""

    def __init__(self, path: str, match: str) -> None:
        super().__init__(path, f"'{match}' is excluded")
        self.match = match


class DirectoryReadError(PageError):
    """Directory holding the page could not be listed."""
