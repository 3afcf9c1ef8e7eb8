"""aiohttp server for md2web.

Application factory and route registration.
"""

import logging

from aiohttp import web
from yarl import URL

from md2web.app_keys import cache_max_age_key, page_builder_key, router_key, static_url_key
from md2web.config import Config, StaticConfig
from md2web.controllers import Router
from md2web.controllers.client import ClientController
from md2web.controllers.static import RobotsController, StaticController
from md2web.core.content import MarkdownRenderer
from md2web.core.page import PageBuilder
from md2web.core.paths import build_exclusions
from md2web.templates import load_template

logger = logging.getLogger(__name__)


def build_static_url(static: StaticConfig, host: str, port: int) -> str:
    """Compute the base URL of the static asset namespace.

    Args:
        static: Static asset configuration
        host: Host the site is served on
        port: Port the site is served on

    Returns:
        Base URL without trailing slash

    Raises:
        ValueError: If the configured URL, subdomain or prefix is invalid
    """
    if static.url:
        url = URL(static.url)
        if not url.is_absolute():
            raise ValueError(f"static.url must be an absolute URL: {static.url}")
        return str(url).rstrip("/")

    if static.subdomain:
        if "." in static.subdomain or "/" in static.subdomain:
            raise ValueError(f"static.subdomain must be a single label: {static.subdomain}")
        url = URL.build(
            scheme="http",
            host=f"{static.subdomain}.{host}",
            port=None if port == 80 else port,
        )
        return str(url).rstrip("/")

    prefix = static.prefix.rstrip("/")
    if not prefix.startswith("/"):
        raise ValueError(f"static.prefix must start with '/' and not be '/': {static.prefix}")
    return prefix


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        FileNotFoundError: If the source directory or template file is missing
        ValueError: If the static URL can't be built
    """
    source_dir = config.site.source_dir
    if not source_dir.is_dir():
        raise FileNotFoundError(f"Source directory not found: {source_dir}")

    static_url = build_static_url(config.static, config.server.host, config.server.port)
    exclusions = build_exclusions(config.static.dir, config.site.exclude)
    template = load_template(config.site.template)

    renderer = MarkdownRenderer(static_url, placeholder=config.static.placeholder)
    builder = PageBuilder(source_dir, renderer, exclusions, title=config.site.title)

    router = Router(config.server.host)
    router.add(RobotsController(config.static_dir))
    if config.static.subdomain and not config.static.url:
        router.add(StaticController(config.static_dir), subdomain=config.static.subdomain)
    else:
        router.add(StaticController(config.static_dir, config.static.prefix))
    router.add(ClientController(builder, template, static_url))

    app = web.Application()
    app[router_key] = router
    app[page_builder_key] = builder
    app[static_url_key] = static_url
    app[cache_max_age_key] = config.server.cache_max_age

    app.router.add_get("/{path:.*}", router.dispatch)
    app.on_response_prepare.append(_add_cache_headers)

    logger.debug(f"Excluded from the site: {', '.join(sorted(exclusions))}")
    return app


async def _add_cache_headers(request: web.Request, response: web.StreamResponse) -> None:
    """Mark successful responses as cacheable."""
    max_age = request.app[cache_max_age_key]
    if max_age and response.status == 200:
        response.headers["Cache-Control"] = f"public, max-age={max_age}"


def run_server(config: Config, app: web.Application | None = None) -> None:
    """Run the server.

    Args:
        config: Application configuration
        app: Already created application (default: create from config)
    """
    if app is None:
        app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
