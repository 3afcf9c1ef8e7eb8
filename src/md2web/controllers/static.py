"""Static asset controllers.

Assets are served unprocessed from the static folder, either under a path
prefix on the main host or on a dedicated subdomain.
"""

from pathlib import Path

from aiohttp import web

ROBOTS_PATH = "/robots.txt"


def _static_file(static_dir: Path, name: str) -> Path:
    """Join a request name onto the static folder.

    Raises:
        web.HTTPNotFound: If the file doesn't exist or lies outside the folder
    """
    try:
        root = static_dir.resolve()
        path = (root / name.lstrip("/")).resolve()
        found = path.is_relative_to(root) and path.is_file()
    except (OSError, ValueError):
        found = False
    if not found:
        raise web.HTTPNotFound()
    return path


class StaticController:
    """Serves raw files from the static folder.

    With a prefix, matches only paths below it and strips it before joining.
    Without one (subdomain mode), matches every path.
    """

    def __init__(self, static_dir: Path, prefix: str = "") -> None:
        self._static_dir = static_dir
        self._prefix = prefix.rstrip("/")

    def match(self, path: str) -> bool:
        if not self._prefix:
            return True
        return path.startswith(f"{self._prefix}/")

    async def handle(self, request: web.Request) -> web.FileResponse:
        name = request.path[len(self._prefix) :]
        return web.FileResponse(_static_file(self._static_dir, name))


class RobotsController:
    """Serves robots.txt from the static folder at the site root."""

    def __init__(self, static_dir: Path) -> None:
        self._static_dir = static_dir

    def match(self, path: str) -> bool:
        return path == ROBOTS_PATH

    async def handle(self, request: web.Request) -> web.FileResponse:
        return web.FileResponse(_static_file(self._static_dir, ROBOTS_PATH))
