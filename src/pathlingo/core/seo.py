"""SEO tag data for multilingual pages.

Pure functions producing hreflang alternates, canonical URLs and Open Graph
locale values. Rendering the actual tags is left to templates.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from pathlingo.core.routes import RouteResolver

X_DEFAULT = "x-default"

# Bare language codes whose region is not the upper-cased language code
_OG_REGION_OVERRIDES = {"en": "en_US", "pt": "pt_PT"}


@dataclass(frozen=True)
class HrefLang:
    """Alternate link entry for one locale."""

    hreflang: str
    href: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"hreflang": self.hreflang, "href": self.href}


@dataclass(frozen=True)
class OGLocales:
    """Open Graph locale of the current page and its alternates."""

    current: str
    alternates: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, str | list[str]]:
        """Convert to dictionary for JSON serialization."""
        return {"current": self.current, "alternates": list(self.alternates)}


def generate_hreflangs(
    current_path: str,
    site_url: str,
    resolver: RouteResolver,
    html_lang: Mapping[str, str],
) -> list[HrefLang]:
    """Generate hreflang alternates for all locales, plus x-default.

    Args:
        current_path: Path of the page being rendered, in any locale
        site_url: Absolute site URL (trailing slash optional)
        resolver: Route resolver for locale switching
        html_lang: Locale -> HTML lang value, locale code when absent

    Returns:
        One entry per configured locale, followed by x-default
    """
    base = site_url.removesuffix("/")
    entries = [
        HrefLang(
            hreflang=html_lang.get(locale, locale),
            href=f"{base}{resolver.switch_locale_path(current_path, locale)}",
        )
        for locale in resolver.locales
    ]

    default_path = resolver.switch_locale_path(current_path, resolver.default_locale)
    entries.append(HrefLang(hreflang=X_DEFAULT, href=f"{base}{default_path}"))
    return entries


def generate_canonical_url(current_path: str, site_url: str) -> str:
    """Generate the canonical URL for the current page."""
    return f"{site_url.removesuffix('/')}{current_path}"


def to_og_locale(html_lang: str) -> str:
    """Convert an HTML lang value to Open Graph locale format.

    "en" -> "en_US", "es" -> "es_ES", "en-GB" -> "en_GB", "pt-BR" -> "pt_BR"
    """
    if "-" in html_lang:
        lang, region = html_lang.split("-", 1)
        return f"{lang}_{region.upper()}"
    return _OG_REGION_OVERRIDES.get(html_lang, f"{html_lang}_{html_lang.upper()}")


def generate_og_locales(
    current_path: str,
    resolver: RouteResolver,
    html_lang: Mapping[str, str],
) -> OGLocales:
    """Generate Open Graph locale values for the current page.

    Args:
        current_path: Path of the page being rendered, in any locale
        resolver: Route resolver for locale detection
        html_lang: Locale -> HTML lang value, locale code when absent

    Returns:
        OGLocales with the current page's locale and the other locales
    """
    current_locale = resolver.get_locale_from_path(current_path)
    alternates = [
        to_og_locale(html_lang.get(locale, locale))
        for locale in resolver.locales
        if locale != current_locale
    ]
    return OGLocales(
        current=to_og_locale(html_lang.get(current_locale, current_locale)),
        alternates=alternates,
    )
