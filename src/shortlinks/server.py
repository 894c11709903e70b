"""aiohttp server for Shortlinks.

Application factory and route registration.
"""

from aiohttp import web

from shortlinks.api.shortlinks import create_shortlink_routes
from shortlinks.app_keys import config_key
from shortlinks.config import Config


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[config_key] = config

    app.router.add_routes(create_shortlink_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
