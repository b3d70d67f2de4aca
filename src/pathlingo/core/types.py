"""Core type definitions."""

from collections.abc import Mapping
from typing import NewType

# URL path for routing (e.g., "/about/", "/es/sobre/")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)

# Locale identifier (e.g., "en", "es"), opaque to the core
Locale = NewType("Locale", str)

# Locale -> localized slug for one canonical key
SlugRow = Mapping[str, str]
