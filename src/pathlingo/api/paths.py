"""Path translation API endpoints.

Localizes canonical paths, switches paths between locales and reports the
SEO alternates of a path.
"""

from aiohttp import web

from pathlingo.app_keys import i18n_key


def create_paths_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/paths/localize", localize_path),
        web.get("/api/paths/switch", switch_path),
        web.get("/api/paths/alternates", get_alternates),
    ]


async def localize_path(request: web.Request) -> web.Response:
    i18n = request.app[i18n_key]
    path = request.query.get("path")
    locale = request.query.get("locale")

    error = _validate(request, path=path, locale=locale)
    if error is not None:
        return error

    return web.json_response({"locale": locale, "path": i18n.locale_path(locale, path)})


async def switch_path(request: web.Request) -> web.Response:
    i18n = request.app[i18n_key]
    path = request.query.get("path")
    locale = request.query.get("locale")

    error = _validate(request, path=path, locale=locale)
    if error is not None:
        return error

    return web.json_response(
        {
            "from": i18n.get_locale_from_path(path),
            "to": locale,
            "path": i18n.switch_locale_path(path, locale),
        }
    )


async def get_alternates(request: web.Request) -> web.Response:
    i18n = request.app[i18n_key]
    path = request.query.get("path")

    error = _validate(request, path=path)
    if error is not None:
        return error

    response_data: dict[str, object] = {
        "path": path,
        "locale": i18n.get_locale_from_path(path),
        "og": i18n.og_locales(path).to_dict(),
    }
    if i18n.site_url:
        response_data["canonical_url"] = i18n.canonical_url(path)
        response_data["hreflangs"] = [entry.to_dict() for entry in i18n.hreflangs(path)]

    return web.json_response(response_data)


def _validate(request: web.Request, **params: str | None) -> web.Response | None:
    """Check required query parameters, and that any locale is configured."""
    missing = [name for name, value in params.items() if not value]
    if missing:
        return web.json_response(
            {"error": "Missing query parameter", "params": missing},
            status=400,
        )

    locale = params.get("locale")
    if locale is not None and locale not in request.app[i18n_key].locale_config.locales:
        return web.json_response(
            {"error": "Unknown locale", "locale": locale},
            status=400,
        )
    return None
