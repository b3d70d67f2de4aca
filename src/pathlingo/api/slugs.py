"""Slug lookup API endpoints."""

from aiohttp import web

from pathlingo.app_keys import i18n_key


def create_slugs_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/slugs/{category}", get_slug_pairs),
        web.get("/api/slugs/{category}/{slug}", get_canonical_slug),
    ]


async def get_slug_pairs(request: web.Request) -> web.Response:
    i18n = request.app[i18n_key]
    category = request.match_info["category"]
    locale = request.query.get("locale", i18n.locale_config.default_locale)

    if category not in i18n.slug_maps:
        return web.json_response(
            {"error": "Category not found", "category": category},
            status=404,
        )
    if locale not in i18n.locale_config.locales:
        return web.json_response({"error": "Unknown locale", "locale": locale}, status=400)

    pairs = i18n.get_all_slug_pairs(category, locale)
    return web.json_response(
        {
            "category": category,
            "locale": locale,
            "pairs": [pair.to_dict() for pair in pairs],
        }
    )


async def get_canonical_slug(request: web.Request) -> web.Response:
    i18n = request.app[i18n_key]
    category = request.match_info["category"]
    slug = request.match_info["slug"]
    locale = request.query.get("locale", i18n.locale_config.default_locale)

    if category not in i18n.slug_maps:
        return web.json_response(
            {"error": "Category not found", "category": category},
            status=404,
        )
    if locale not in i18n.locale_config.locales:
        return web.json_response({"error": "Unknown locale", "locale": locale}, status=400)

    canonical = i18n.get_canonical_slug(category, slug, locale)
    if canonical is None:
        return web.json_response(
            {"error": "Slug not found", "category": category, "slug": slug, "locale": locale},
            status=404,
        )

    return web.json_response(
        {"category": category, "locale": locale, "slug": slug, "canonical": canonical}
    )
