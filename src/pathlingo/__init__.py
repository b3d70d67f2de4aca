"""pathlingo - translated URL paths for multilingual static sites."""

from pathlingo.core.routes import RouteResolver
from pathlingo.core.slug_map import DuplicateSlugError, SlugMap, SlugMaps
from pathlingo.i18n import I18n, create_i18n

__all__ = [
    "DuplicateSlugError",
    "I18n",
    "RouteResolver",
    "SlugMap",
    "SlugMaps",
    "create_i18n",
]
