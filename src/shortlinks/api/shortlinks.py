"""Shortlink redirect endpoints.

Translates resolver outcomes into HTTP responses: a redirect on success and
the configured not-found page otherwise.
"""

import logging

from aiohttp import web

from shortlinks.app_keys import config_key
from shortlinks.core.resolver import resolve

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "shortlink handler is running!"


def create_shortlink_routes() -> list[web.RouteDef]:
    return [
        web.get("/", get_health),
        web.get("/{shortlink:.*}", get_shortlink),
    ]


async def get_health(request: web.Request) -> web.Response:
    return web.Response(text=HEALTH_MESSAGE)


async def get_shortlink(request: web.Request) -> web.Response:
    shortlink = request.match_info["shortlink"]
    config = request.app[config_key]

    target = resolve(shortlink, config.links)
    if target is None:
        logger.debug(f"No shortlink for {shortlink!r}")
        return web.Response(
            text=config.not_found_message,
            status=404,
            content_type="text/html",
        )

    logger.debug(f"Redirecting {shortlink!r} to {target}")
    # Location may be empty
    return web.Response(status=303, headers={"Location": target})
