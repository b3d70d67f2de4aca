"""Locale detection from URL paths."""

from collections.abc import Iterable

from pathlingo.core.types import Locale


class LocaleDetector:
    """Detects the locale encoded in a path's first segment.

    Paths in the default locale carry no prefix, so anything that does not
    start with a known non-default locale resolves to the default locale.
    """

    __slots__ = ("_default_locale", "_prefixed")

    def __init__(self, default_locale: str, locales: Iterable[str]) -> None:
        self._default_locale = Locale(default_locale)
        self._prefixed = frozenset(locale for locale in locales if locale != default_locale)

    def get_locale_from_path(self, path: str) -> Locale:
        """Get locale from a URL path.

        "/es/sobre/" -> "es", "/about/" -> default locale

        Args:
            path: URL path, with or without leading slash

        Returns:
            Detected locale, the default locale when no known prefix is present
        """
        first = next((segment for segment in path.split("/") if segment), None)
        if first is not None and first in self._prefixed:
            return Locale(first)
        return self._default_locale
