"""aiohttp server for pathlingo.

Application factory and route registration for the path resolution API.
"""

import logging
from collections.abc import Awaitable, Callable

from aiohttp import web

from pathlingo.api.locales import create_locales_routes
from pathlingo.api.paths import create_paths_routes
from pathlingo.api.slugs import create_slugs_routes
from pathlingo.app_keys import i18n_key, verbose_key
from pathlingo.config import Config
from pathlingo.i18n import I18n, create_i18n

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def locale_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Store the locale encoded in the request path as request["locale"].

    Only the path is inspected, never the Accept-Language header.
    """
    request["locale"] = request.app[i18n_key].get_locale_from_path(request.path)
    if request.app[verbose_key]:
        logger.debug(f"{request.method} {request.path} [{request['locale']}]")
    return await handler(request)


def create_app(
    config: Config, *, verbose: bool = False, i18n: I18n | None = None
) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        verbose: Log every request with its detected locale
        i18n: Prebuilt i18n instance (default: built from config)

    Returns:
        Configured aiohttp application
    """
    app = web.Application(middlewares=[locale_middleware])

    app[i18n_key] = i18n if i18n is not None else create_i18n(config)
    app[verbose_key] = verbose

    app.router.add_routes(create_locales_routes())
    app.router.add_routes(create_paths_routes())
    app.router.add_routes(create_slugs_routes())

    return app


def run_server(config: Config, *, verbose: bool = False, i18n: I18n | None = None) -> None:
    """Run the server.

    Args:
        config: Application configuration
        verbose: Log every request with its detected locale
        i18n: Prebuilt i18n instance (default: built from config)
    """
    app = create_app(config, verbose=verbose, i18n=i18n)
    web.run_app(app, host=config.server.host, port=config.server.port)
