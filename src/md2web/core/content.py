"""Markdown loading and rendering.

Wraps mistune with the static placeholder substitution applied to the
markdown source before conversion.
"""

from pathlib import Path

import mistune

from md2web.core.errors import NotMarkdownError, ReadFailureError
from md2web.core.paths import MARKDOWN_SUFFIX

DEFAULT_PLACEHOLDER = "{{ static }}"


class MarkdownRenderer:
    """Reads markdown files and converts them to HTML.

    The placeholder token is replaced with the static base URL so pages can
    reference images and stylesheets without knowing where they are served.
    """

    def __init__(self, static_url: str, *, placeholder: str = DEFAULT_PLACEHOLDER) -> None:
        """Initialize renderer.

        Args:
            static_url: Base URL of the static asset namespace
            placeholder: Token replaced with static_url in markdown sources
        """
        self._static_url = static_url
        self._placeholder = placeholder
        self._markdown = mistune.create_markdown(
            escape=False,
            plugins=["strikethrough", "table", "footnotes"],
        )

    def render(self, text: str) -> str:
        """Convert markdown text to HTML."""
        if self._placeholder:
            text = text.replace(self._placeholder, self._static_url)
        return self._markdown(text)

    def load_content(self, path: Path) -> str:
        """Read a markdown file and render it.

        Args:
            path: Markdown file on disk

        Returns:
            Rendered HTML

        Raises:
            NotMarkdownError: If the path doesn't have a .md extension
            ReadFailureError: If the file can't be read
        """
        if path.suffix != MARKDOWN_SUFFIX:
            raise NotMarkdownError(str(path))
        try:
            raw = path.read_bytes()
        except (OSError, ValueError) as e:
            # ValueError: embedded null byte
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise ReadFailureError(str(path), reason) from e
        return self.render(raw.decode("utf-8", errors="replace"))
