"""Request controllers and the router that picks between them.

Controllers are grouped by subdomain. The main host uses the None group.
Within a group the first controller whose match() accepts the path
handles the request.
"""

from typing import Protocol

from aiohttp import web


class Controller(Protocol):
    """Handles requests for the paths it matches."""

    def match(self, path: str) -> bool: ...

    async def handle(self, request: web.Request) -> web.StreamResponse: ...


class Router:
    """Dispatches requests to controllers by subdomain and path."""

    def __init__(self, host: str) -> None:
        """Initialize router.

        Args:
            host: Main host name; subdomains are matched against it
        """
        self._host = host.lower()
        self._controllers: dict[str | None, list[Controller]] = {None: []}

    def add(self, controller: Controller, *, subdomain: str | None = None) -> None:
        """Register a controller, after those already registered."""
        self._controllers.setdefault(subdomain, []).append(controller)

    def select(self, host: str, path: str) -> Controller | None:
        """Pick the controller for a request host and path."""
        subdomain = self._subdomain_of(host)
        for controller in self._controllers.get(subdomain, []):
            if controller.match(path):
                return controller
        return None

    async def dispatch(self, request: web.Request) -> web.StreamResponse:
        """aiohttp handler for the wildcard route."""
        controller = self.select(request.host, request.path)
        if controller is None:
            raise web.HTTPNotFound()
        return await controller.handle(request)

    def _subdomain_of(self, host: str) -> str | None:
        """Return the registered subdomain a Host header addresses, if any."""
        name = host.split(":", 1)[0].lower()
        for subdomain in self._controllers:
            if subdomain is not None and name == f"{subdomain}.{self._host}":
                return subdomain
        return None
