"""Path segment translation between canonical and localized paths.

Substitution is purely textual on "/"-delimited boundaries. Within each
category, canonical keys are tried longest first so a composed key like
"saunas/types" is replaced as one unit before its prefix "saunas" is
considered.
"""

from pathlingo.core.slug_map import SlugMaps
from pathlingo.core.types import URLPath


def _replace_segment(path: str, source: str, target: str) -> str:
    """Replace the first "/source/" (or a trailing "/source") with target."""
    interior = f"/{source}/"
    if interior in path:
        return path.replace(interior, f"/{target}/", 1)

    trailing = f"/{source}"
    if path.endswith(trailing):
        return f"{path[: -len(trailing)]}/{target}"

    return path


class PathTranslator:
    """Translates whole paths using every configured slug map."""

    __slots__ = ("_default_locale", "_slug_maps")

    def __init__(self, default_locale: str, slug_maps: SlugMaps) -> None:
        self._default_locale = default_locale
        self._slug_maps = slug_maps

    def localize(self, locale: str, canonical_path: str) -> URLPath:
        """Translate a canonical path into a locale's path.

        Segments are substituted for the default locale too; only the
        "/<locale>" prefix is specific to non-default locales.

        Args:
            locale: Target locale
            canonical_path: Path in canonical form (e.g., "/saunas/model-165/")

        Returns:
            Localized path (e.g., "/es/saunas/modelo-165/")
        """
        result = canonical_path
        for slug_map in self._slug_maps:
            for canonical, row in slug_map.longest_first():
                translated = row.get(locale, canonical)
                if canonical and translated and translated != canonical:
                    result = _replace_segment(result, canonical, translated)

        if locale == self._default_locale:
            return URLPath(result)

        clean_path = result if result.startswith("/") else f"/{result}"
        return URLPath(f"/{locale}{clean_path}")

    def canonicalize(self, locale: str, path: str) -> URLPath:
        """Strip the locale prefix and reverse-translate segments.

        Entries are tried by canonical key length, not by translation length.
        A long key with a short translation is therefore reversed before a
        composed key whose translation contains it: with "b-long-key" -> "y"
        and "a/b" -> "x/y", "/x/y/" becomes "/x/b-long-key/". Localized slugs
        of one locale must not overlap that way.

        Args:
            locale: Locale the path is written in
            path: Localized path (e.g., "/es/saunas/modelo-165/")

        Returns:
            Canonical path (e.g., "/saunas/model-165/")
        """
        result = path
        if locale != self._default_locale:
            prefix = f"/{locale}"
            if result == prefix or result.startswith(f"{prefix}/"):
                result = result[len(prefix) :] or "/"

        for slug_map in self._slug_maps:
            for canonical, row in slug_map.longest_first():
                translated = row.get(locale)
                if canonical and translated and translated != canonical:
                    result = _replace_segment(result, translated, canonical)

        return URLPath(result)
