"""Locale-aware route helpers.

Composes locale detection and path translation into the directional
operations used by templates and the API: canonical -> localized, and
switching an already localized path to another locale.
"""

from collections.abc import Sequence

from pathlingo.core.locale import LocaleDetector
from pathlingo.core.slug_map import SlugMaps
from pathlingo.core.translator import PathTranslator
from pathlingo.core.types import Locale, URLPath


class RouteResolver:
    """Resolves paths between the canonical and localized path spaces.

    Holds only immutable state, so one instance can serve any number of
    concurrent lookups.
    """

    __slots__ = ("_default_locale", "_detector", "_locales", "_translator")

    def __init__(
        self,
        default_locale: str,
        locales: Sequence[str],
        slug_maps: SlugMaps,
    ) -> None:
        """Initialize route resolver.

        Args:
            default_locale: Locale whose paths carry no prefix
            locales: All configured locales, default included
            slug_maps: Slug maps to translate path segments with
        """
        self._default_locale = Locale(default_locale)
        self._locales = tuple(locales)
        self._detector = LocaleDetector(default_locale, locales)
        self._translator = PathTranslator(default_locale, slug_maps)

    @property
    def default_locale(self) -> Locale:
        """Locale whose paths carry no prefix."""
        return self._default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        """All configured locales."""
        return self._locales

    def get_locale_from_path(self, path: str) -> Locale:
        """Get locale from a URL path.

        "/es/sobre/" -> "es", "/about/" -> default locale
        """
        return self._detector.get_locale_from_path(path)

    def locale_path(self, locale: str, path: str) -> URLPath:
        """Build a localized path from a locale and a canonical path.

        locale_path("en", "/about/") -> "/about/"
        locale_path("es", "/about/") -> "/es/sobre/"
        locale_path("es", "/saunas/model-165/") -> "/es/saunas/modelo-165/"
        """
        return self._translator.localize(locale, path)

    def switch_locale_path(self, current_path: str, target_locale: str) -> URLPath:
        """Get the equivalent path in another locale.

        Always goes through the canonical form: translated-to-translated
        substitution between two non-default locales is not well defined.

        switch_locale_path("/es/saunas/modelo-165/", "en") -> "/saunas/model-165/"
        switch_locale_path("/about/", "es") -> "/es/sobre/"
        """
        current_locale = self.get_locale_from_path(current_path)
        canonical_path = self._translator.canonicalize(current_locale, current_path)
        return self._translator.localize(target_locale, canonical_path)
