"""Slug maps for canonical to localized segment lookups.

A slug map holds one category (e.g. "pages", "saunas") of canonical keys,
each mapped to its per-locale localized segment. Maps are built once and
shared read-only by every resolution call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pathlingo.core.types import SlugRow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlugConflict:
    """Two or more canonical keys sharing one localized value."""

    category: str
    locale: str
    localized: str
    canonicals: tuple[str, ...]

    def __str__(self) -> str:
        keys = ", ".join(self.canonicals)
        return f"{self.category}[{self.locale}] '{self.localized}' is used by: {keys}"


class DuplicateSlugError(ValueError):
    """Raised when a category maps several canonical keys to one localized slug."""

    def __init__(self, conflicts: list[SlugConflict]) -> None:
        self.conflicts = conflicts
        lines = "\n".join(f"  {conflict}" for conflict in conflicts)
        super().__init__(f"Duplicate localized slugs:\n{lines}")


class SlugMap:
    """Canonical key to per-locale slug table for one category.

    Entries keep their stored order for enumeration and reverse lookups,
    and are additionally pre-sorted by descending canonical key length so
    composed keys such as "saunas/types" are always tried before "saunas".
    """

    __slots__ = ("_by_length", "_category", "_reverse", "_rows")

    def __init__(self, category: str, rows: Mapping[str, SlugRow]) -> None:
        """Initialize slug map.

        Args:
            category: Category name (e.g., "pages")
            rows: Canonical key -> (locale -> localized slug), in stored order
        """
        self._category = category
        self._rows: Mapping[str, SlugRow] = MappingProxyType(
            {canonical: MappingProxyType(dict(row)) for canonical, row in rows.items()}
        )
        self._by_length: tuple[tuple[str, SlugRow], ...] = tuple(
            sorted(self._rows.items(), key=lambda item: -len(item[0]))
        )

        reverse: dict[tuple[str, str], str] = {}
        for canonical, row in self._rows.items():
            for locale, localized in row.items():
                reverse.setdefault((locale, localized), canonical)
        self._reverse = MappingProxyType(reverse)

    @property
    def category(self) -> str:
        """Category name."""
        return self._category

    def __contains__(self, canonical: object) -> bool:
        return canonical in self._rows

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def items(self) -> Iterator[tuple[str, SlugRow]]:
        """Iterate (canonical, row) pairs in stored order."""
        return iter(self._rows.items())

    def longest_first(self) -> tuple[tuple[str, SlugRow], ...]:
        """Entries ordered by descending canonical key length."""
        return self._by_length

    def localized(self, canonical: str, locale: str) -> str | None:
        """Get the explicit localized slug, or None if not recorded."""
        row = self._rows.get(canonical)
        if row is None:
            return None
        return row.get(locale)

    def localized_or_canonical(self, canonical: str, locale: str) -> str:
        """Get the localized slug, falling back to the canonical key."""
        localized = self.localized(canonical, locale)
        return canonical if localized is None else localized

    def canonical_for(self, localized: str, locale: str) -> str | None:
        """Reverse lookup of the first canonical key with this localized slug.

        Args:
            localized: Localized slug to look up
            locale: Locale the slug is written in

        Returns:
            First matching canonical key in stored order, None if no match
        """
        return self._reverse.get((locale, localized))

    def conflicts(self) -> list[SlugConflict]:
        """Find localized values shared by several canonical keys in one locale."""
        seen: dict[tuple[str, str], list[str]] = {}
        for canonical, row in self._rows.items():
            for locale, localized in row.items():
                seen.setdefault((locale, localized), []).append(canonical)

        return [
            SlugConflict(
                category=self._category,
                locale=locale,
                localized=localized,
                canonicals=tuple(canonicals),
            )
            for (locale, localized), canonicals in seen.items()
            if len(canonicals) > 1
        ]

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Convert to plain dictionaries for JSON serialization."""
        return {canonical: dict(row) for canonical, row in self._rows.items()}


class SlugMaps:
    """Ordered, immutable collection of slug maps keyed by category."""

    __slots__ = ("_maps",)

    def __init__(self, maps: list[SlugMap]) -> None:
        self._maps: Mapping[str, SlugMap] = MappingProxyType(
            {slug_map.category: slug_map for slug_map in maps}
        )

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Mapping[str, SlugRow]],
        *,
        strict: bool = False,
    ) -> SlugMaps:
        """Build slug maps from nested dictionaries.

        Duplicate localized values within one category and locale make
        reverse lookups ambiguous. They are always reported; in strict mode
        they are fatal, otherwise the first canonical key in stored order wins.

        Args:
            data: Category -> canonical key -> locale -> localized slug
            strict: Raise on duplicate localized slugs instead of warning

        Returns:
            SlugMaps instance

        Raises:
            DuplicateSlugError: If strict and duplicates exist
        """
        instance = cls([SlugMap(category, rows) for category, rows in data.items()])

        conflicts = instance.conflicts()
        if conflicts and strict:
            raise DuplicateSlugError(conflicts)
        for conflict in conflicts:
            logger.warning(f"Ambiguous slug, first match wins: {conflict}")

        logger.debug(
            f"Built {len(instance._maps)} slug maps: {', '.join(instance.categories) or '-'}"
        )
        return instance

    @property
    def categories(self) -> list[str]:
        """Category names in configured order."""
        return list(self._maps)

    def get(self, category: str) -> SlugMap | None:
        """Get slug map for a category, None if not configured."""
        return self._maps.get(category)

    def __contains__(self, category: object) -> bool:
        return category in self._maps

    def __iter__(self) -> Iterator[SlugMap]:
        return iter(self._maps.values())

    def __len__(self) -> int:
        return len(self._maps)

    def conflicts(self) -> list[SlugConflict]:
        """Collect duplicate localized slugs across all categories."""
        return [conflict for slug_map in self for conflict in slug_map.conflicts()]

    def to_dict(self) -> dict[str, dict[str, dict[str, str]]]:
        """Convert to plain dictionaries for JSON serialization."""
        return {category: slug_map.to_dict() for category, slug_map in self._maps.items()}
