"""Header (breadcrumb) and nav (sibling) link builders.

Both are derived from the resolved markdown file path relative to the site
root and recomputed for every request.
"""

import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from md2web.core.errors import DirectoryReadError, ExcludedError
from md2web.core.paths import MAIN_PAGE, MARKDOWN_SUFFIX, is_excluded, strip_markdown_suffix
from md2web.core.types import FilePath


@dataclass(frozen=True)
class LinkPair:
    """Link target and its display label."""

    target: str
    label: str


ROOT_LINK = LinkPair(target="/", label="/")


def header_links(file_path: FilePath, exclusions: frozenset[str]) -> list[LinkPair]:
    """Build breadcrumbs from the site root to the file's directory.

    Always starts with the root link. The file itself gets no entry.

    Args:
        file_path: Markdown file path relative to the site root
        exclusions: Names and relative paths that must not be linked

    Returns:
        Ordered list of LinkPair, one per directory

    Raises:
        ExcludedError: If any directory on the way is excluded
    """
    links = [ROOT_LINK]
    accumulated = ""
    for part in PurePosixPath(file_path).parent.parts:
        if part == MAIN_PAGE:
            break
        accumulated = f"{accumulated}/{part}" if accumulated else part
        if is_excluded(accumulated, exclusions):
            raise ExcludedError(file_path, part)
        links.append(LinkPair(target=f"/{accumulated}/", label=strip_markdown_suffix(part)))
    return links


def nav_links(
    file_path: FilePath,
    exclusions: frozenset[str],
    *,
    root: Path = Path("."),
) -> list[LinkPair]:
    """Build links to the pages and folders next to the file.

    Targets are relative to the current directory. Order follows the
    directory listing.

    Args:
        file_path: Markdown file path relative to the site root
        exclusions: Names and relative paths that must not be listed
        root: Site root on disk

    Returns:
        List of LinkPair for sibling markdown files and subdirectories

    Raises:
        DirectoryReadError: If the directory can't be listed
    """
    parent = PurePosixPath(file_path).parent
    directory = root / parent
    try:
        with os.scandir(directory) as entries:
            listing = [(entry.name, entry.is_dir(), entry.is_file()) for entry in entries]
    except (OSError, ValueError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise DirectoryReadError(file_path, f"can't list {directory}: {reason}") from e

    links: list[LinkPair] = []
    for name, is_dir, is_file in listing:
        relative = str(parent / name)
        if is_excluded(relative, exclusions):
            continue
        if is_dir:
            links.append(LinkPair(target=f"{name}/", label=name))
        elif is_file and name.endswith(MARKDOWN_SUFFIX) and name != MAIN_PAGE:
            stripped = strip_markdown_suffix(name)
            links.append(LinkPair(target=stripped, label=stripped))
    return links
