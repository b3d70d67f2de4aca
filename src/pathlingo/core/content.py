"""Localized field access for multilingual content items."""

from collections.abc import Mapping
from typing import TypeVar

T = TypeVar("T")


def localized(field: Mapping[str, T], locale: str, default_locale: str) -> T | None:
    """Pick a field's value for a locale, falling back to the default locale.

    localized({"en": "Sauna", "es": "Sauna finlandesa"}, "es", "en") -> "Sauna finlandesa"
    localized({"en": "Sauna"}, "es", "en") -> "Sauna"
    """
    value = field.get(locale)
    if value is not None:
        return value
    return field.get(default_locale)
