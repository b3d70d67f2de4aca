"""Hierarchical slug composition for nested pages.

Nested page keys such as "saunas/types" carry only their own leaf slug
("tipos"). Composition joins each ancestor's leaf slug with the page's own
leaf so the whole sub-path becomes one matchable unit ("saunas/tipos").
"""

from collections.abc import Mapping

from pathlingo.core.types import SlugRow


def compose_page_slugs(leaf_slugs: Mapping[str, SlugRow]) -> dict[str, dict[str, str]]:
    """Compose full-path slugs from per-page leaf slugs.

    Reads only the already collected leaf table, so a descendant picks up
    its ancestors' resolved slugs without re-reading any page.

    Args:
        leaf_slugs: Canonical page key -> (locale -> leaf slug)

    Returns:
        Canonical page key -> (locale -> composed slug), in input order
    """
    composed: dict[str, dict[str, str]] = {}

    for key, row in leaf_slugs.items():
        segments = key.split("/")
        if len(segments) == 1:
            composed[key] = dict(row)
            continue

        composed[key] = {}
        for locale, leaf in row.items():
            parts = [
                _ancestor_slug(leaf_slugs, "/".join(segments[: depth + 1]), segment, locale)
                for depth, segment in enumerate(segments[:-1])
            ]
            parts.append(leaf)
            composed[key][locale] = "/".join(parts)

    return composed


def _ancestor_slug(
    leaf_slugs: Mapping[str, SlugRow],
    ancestor_key: str,
    segment: str,
    locale: str,
) -> str:
    """Get an ancestor's leaf slug, defaulting to its untranslated segment."""
    row = leaf_slugs.get(ancestor_key)
    if row is None:
        return segment
    return row.get(locale, segment)
