"""Category-scoped slug lookups.

Translates single slugs rather than whole paths, e.g. to build a link to
one content item or to resolve a localized slug from a route parameter.
"""

from dataclasses import dataclass

from pathlingo.core.slug_map import SlugMaps


@dataclass(frozen=True)
class SlugPair:
    """Canonical slug and its localized form."""

    canonical: str
    localized: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"canonical": self.canonical, "localized": self.localized}


class SlugResolver:
    """Slug lookups within one category of the slug maps.

    Every lookup has a defined fallback so an incomplete translation table
    degrades to canonical slugs instead of failing.
    """

    __slots__ = ("_default_locale", "_slug_maps")

    def __init__(self, slug_maps: SlugMaps, default_locale: str) -> None:
        self._slug_maps = slug_maps
        self._default_locale = default_locale

    def get_localized_slug(self, category: str, canonical_slug: str, locale: str) -> str:
        """Get the localized slug for a canonical slug.

        Args:
            category: Slug map category (e.g., "saunas")
            canonical_slug: Canonical slug (e.g., "model-165")
            locale: Target locale

        Returns:
            Localized slug, or canonical_slug when the category, slug or
            locale entry is unknown
        """
        slug_map = self._slug_maps.get(category)
        if slug_map is None:
            return canonical_slug
        return slug_map.localized_or_canonical(canonical_slug, locale)

    def get_canonical_slug(self, category: str, localized_slug: str, locale: str) -> str | None:
        """Get the canonical slug for a localized slug.

        For the default locale the localized slug is returned unchanged:
        by convention default-locale slugs are canonical.

        Args:
            category: Slug map category (e.g., "saunas")
            localized_slug: Slug as written in the locale (e.g., "modelo-165")
            locale: Locale the slug is written in

        Returns:
            First matching canonical slug in stored order, None if the
            category is unknown or nothing matches
        """
        if locale == self._default_locale:
            return localized_slug

        slug_map = self._slug_maps.get(category)
        if slug_map is None:
            return None
        return slug_map.canonical_for(localized_slug, locale)

    def get_all_slug_pairs(self, category: str, locale: str) -> list[SlugPair]:
        """List every canonical slug of a category with its localized form.

        Returns:
            Pairs in the category's stored order, empty for an unknown category
        """
        slug_map = self._slug_maps.get(category)
        if slug_map is None:
            return []
        return [
            SlugPair(canonical=canonical, localized=row.get(locale, canonical))
            for canonical, row in slug_map.items()
        ]
