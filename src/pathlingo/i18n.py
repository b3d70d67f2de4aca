"""Fully configured i18n instance built from a single Config.

Loads slug maps once (inline maps, pages directory, content directories)
and exposes every resolution helper over the resulting immutable maps.
"""

import logging
from collections.abc import Mapping
from typing import TypeVar

from pathlingo.config import Config, LocaleConfig
from pathlingo.core.content import localized
from pathlingo.core.resolver import SlugPair, SlugResolver
from pathlingo.core.route_table import LocalizedRoute, PageEntry, build_localized_routes
from pathlingo.core.routes import RouteResolver
from pathlingo.core.seo import (
    HrefLang,
    OGLocales,
    generate_canonical_url,
    generate_hreflangs,
    generate_og_locales,
)
from pathlingo.core.slug_map import SlugMaps
from pathlingo.core.types import Locale, URLPath
from pathlingo.loaders.content import load_content_slug_map, split_locale_sections
from pathlingo.loaders.pages import PageMapLoader

T = TypeVar("T")

logger = logging.getLogger(__name__)

PAGES_CATEGORY = "pages"


class I18n:
    """Route and slug helpers bound to one locale configuration."""

    def __init__(
        self,
        locale_config: LocaleConfig,
        slug_maps: SlugMaps,
        pages: Mapping[str, PageEntry] | None = None,
        *,
        site_url: str | None = None,
    ) -> None:
        """Initialize i18n instance.

        Args:
            locale_config: Configured locales and default locale
            slug_maps: Immutable slug maps for all categories
            pages: Discovered page entries, for the localized route table
            site_url: Absolute site URL for SEO helpers
        """
        self._config = locale_config
        self._slug_maps = slug_maps
        self._pages = dict(pages or {})
        self._site_url = site_url
        self._routes = RouteResolver(locale_config.default_locale, locale_config.locales, slug_maps)
        self._slugs = SlugResolver(slug_maps, locale_config.default_locale)

    @property
    def locale_config(self) -> LocaleConfig:
        return self._config

    @property
    def slug_maps(self) -> SlugMaps:
        return self._slug_maps

    @property
    def pages(self) -> dict[str, PageEntry]:
        return self._pages

    @property
    def site_url(self) -> str | None:
        return self._site_url

    @property
    def route_resolver(self) -> RouteResolver:
        return self._routes

    @property
    def slug_resolver(self) -> SlugResolver:
        return self._slugs

    def get_locale_from_path(self, path: str) -> Locale:
        return self._routes.get_locale_from_path(path)

    def locale_path(self, locale: str, path: str) -> URLPath:
        return self._routes.locale_path(locale, path)

    def switch_locale_path(self, current_path: str, target_locale: str) -> URLPath:
        return self._routes.switch_locale_path(current_path, target_locale)

    def get_localized_slug(self, category: str, canonical_slug: str, locale: str) -> str:
        return self._slugs.get_localized_slug(category, canonical_slug, locale)

    def get_canonical_slug(self, category: str, localized_slug: str, locale: str) -> str | None:
        return self._slugs.get_canonical_slug(category, localized_slug, locale)

    def get_all_slug_pairs(self, category: str, locale: str) -> list[SlugPair]:
        return self._slugs.get_all_slug_pairs(category, locale)

    def localized(self, field: Mapping[str, T], locale: str) -> T | None:
        """Pick a content field's value for a locale, default locale as fallback."""
        return localized(field, locale, self._config.default_locale)

    def locale_sections(self, body: str) -> dict[str, str]:
        """Split a content body on "<!-- locale:xx -->" markers.

        Text before the first marker belongs to the default locale.
        """
        return split_locale_sections(body, self._config.default_locale)

    def hreflangs(self, current_path: str, site_url: str | None = None) -> list[HrefLang]:
        """Alternate links for the current page.

        Raises:
            ValueError: If no site URL is given or configured
        """
        return generate_hreflangs(
            current_path,
            self._require_site_url(site_url),
            self._routes,
            self._config.html_lang,
        )

    def canonical_url(self, current_path: str, site_url: str | None = None) -> str:
        """Absolute canonical URL of the current page.

        Raises:
            ValueError: If no site URL is given or configured
        """
        return generate_canonical_url(current_path, self._require_site_url(site_url))

    def og_locales(self, current_path: str) -> OGLocales:
        return generate_og_locales(current_path, self._routes, self._config.html_lang)

    def routes(self) -> list[LocalizedRoute]:
        """Localized route table for all discovered pages."""
        return build_localized_routes(
            self._pages,
            self._config.default_locale,
            self._config.locales,
        )

    def _require_site_url(self, site_url: str | None) -> str:
        effective = site_url or self._site_url
        if not effective:
            raise ValueError("site.url is required for absolute URLs")
        return effective


def create_i18n(config: Config) -> I18n:
    """Build an I18n instance from configuration.

    Slug maps are assembled in this order: inline slug_maps, then the pages
    directory (replacing any inline "pages" category), then each content
    directory as its own category.

    Args:
        config: Application configuration

    Returns:
        I18n instance over immutable slug maps

    Raises:
        DuplicateSlugError: If config.strict and a category has duplicate slugs
    """
    data: dict[str, dict[str, dict[str, str]]] = {
        category: {canonical: dict(row) for canonical, row in rows.items()}
        for category, rows in config.slug_maps.items()
    }
    pages: dict[str, PageEntry] = {}

    if config.pages.pages_dir is not None:
        loader = PageMapLoader(
            config.pages.pages_dir,
            config.i18n.locales,
            extensions=config.pages.extensions,
            entrypoint_root=config.config_path.parent if config.config_path else None,
        )
        page_map = loader.load()
        pages = page_map.pages
        data[PAGES_CATEGORY] = page_map.slug_map

    for category, content_dir in config.content_dirs.items():
        data[category] = load_content_slug_map(content_dir)

    slug_maps = SlugMaps.from_dict(data, strict=config.strict)
    logger.info(
        f"i18n ready: default locale '{config.i18n.default_locale}', "
        f"locales {config.i18n.locales}, categories {slug_maps.categories}"
    )

    return I18n(config.i18n, slug_maps, pages, site_url=config.site.url)
