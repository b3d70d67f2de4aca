"""Locales API endpoint."""

from aiohttp import web

from pathlingo.app_keys import i18n_key


def create_locales_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/locales", get_locales),
    ]


async def get_locales(request: web.Request) -> web.Response:
    locale_config = request.app[i18n_key].locale_config
    return web.json_response(
        {
            "default_locale": locale_config.default_locale,
            "locales": locale_config.locales,
            "labels": locale_config.labels,
            "html_lang": {
                locale: locale_config.html_lang_for(locale) for locale in locale_config.locales
            },
        }
    )
