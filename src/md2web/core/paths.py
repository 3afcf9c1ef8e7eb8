"""Request path resolution and exclusion checks.

A request path maps onto a markdown file relative to the site root:
"guide" -> "guide.md", "domain/" -> "domain/main.md", "" -> "main.md".
"""

from collections.abc import Iterable
from pathlib import PurePosixPath

from md2web.core.errors import ExcludedError
from md2web.core.types import FilePath, RequestPath

MARKDOWN_SUFFIX = ".md"
MAIN_PAGE = "main.md"

# Hidden from rendering and linking regardless of configuration
DEFAULT_EXCLUDES = (".git", ".gitignore")


def resolve(request_path: RequestPath | str, base: str | None = None) -> FilePath:
    """Map a request path to the markdown file that backs it.

    Args:
        request_path: Path relative to the site root
        base: Optional folder prefixed to the result

    Returns:
        Path of the markdown file. Nothing is checked on disk.
    """
    path = request_path
    if path == "" or path.endswith("/"):
        path += "main"
    path += MARKDOWN_SUFFIX
    if base:
        path = f"{base.rstrip('/')}/{path}"
    return FilePath(path)


def strip_markdown_suffix(name: str) -> str:
    """Drop a trailing .md from a file name."""
    if name.endswith(MARKDOWN_SUFFIX):
        return name[: -len(MARKDOWN_SUFFIX)]
    return name


def is_excluded(path: str, exclusions: frozenset[str]) -> bool:
    """Check a relative path and its base name against the exclusion set."""
    if path in exclusions:
        return True
    return PurePosixPath(path).name in exclusions


def ensure_not_excluded(file_path: FilePath, exclusions: frozenset[str]) -> None:
    """Reject a file path if it, or any prefix or segment of it, is excluded.

    Raises:
        ExcludedError: With the first matching prefix or segment
    """
    accumulated = ""
    for part in PurePosixPath(file_path).parts:
        accumulated = f"{accumulated}/{part}" if accumulated else part
        if is_excluded(accumulated, exclusions):
            match = accumulated if accumulated in exclusions else part
            raise ExcludedError(file_path, match)


def build_exclusions(static_dir: str, extra: Iterable[str] = ()) -> frozenset[str]:
    """Build the exclusion set from the static folder name and configured names."""
    return frozenset((static_dir, *DEFAULT_EXCLUDES, *extra))
