"""Application keys for type-safe app configuration access."""

from aiohttp import web

from md2web.controllers import Router
from md2web.core.page import PageBuilder

router_key = web.AppKey("router", Router)
page_builder_key = web.AppKey("page_builder", PageBuilder)
static_url_key = web.AppKey("static_url", str)
cache_max_age_key = web.AppKey("cache_max_age", int)
