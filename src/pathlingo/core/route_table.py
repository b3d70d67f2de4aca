"""Localized route table for static pages.

Lists the URL pattern every page is served under in each non-default
locale. Default-locale routes are the canonical page routes themselves.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from pathlingo.core.types import Locale, URLPath

INDEX_PAGE = "index"


@dataclass(frozen=True)
class PageEntry:
    """Routable page with its render entrypoint and per-locale slugs."""

    canonical: str
    entrypoint: str
    slugs: Mapping[str, str]


@dataclass(frozen=True)
class LocalizedRoute:
    """Route pattern for one page in one locale."""

    pattern: URLPath
    entrypoint: str
    locale: Locale
    canonical: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {
            "pattern": self.pattern,
            "entrypoint": self.entrypoint,
            "locale": self.locale,
            "canonical": self.canonical,
        }


def build_localized_routes(
    pages: Mapping[str, PageEntry],
    default_locale: str,
    locales: Sequence[str],
) -> list[LocalizedRoute]:
    """Build route patterns for every page in every non-default locale.

    The index page is served at the bare locale prefix ("/es"); other pages
    at "/<locale>/<localized slug>".

    Args:
        pages: Canonical key -> page entry
        default_locale: Locale served without prefix (skipped)
        locales: All configured locales

    Returns:
        Routes grouped by locale, pages in stored order
    """
    routes: list[LocalizedRoute] = []
    for locale in locales:
        if locale == default_locale:
            continue

        for canonical, page in pages.items():
            if canonical == INDEX_PAGE:
                pattern = f"/{locale}"
            else:
                pattern = f"/{locale}/{page.slugs.get(locale, canonical)}"
            routes.append(
                LocalizedRoute(
                    pattern=URLPath(pattern),
                    entrypoint=page.entrypoint,
                    locale=Locale(locale),
                    canonical=canonical,
                )
            )
    return routes
