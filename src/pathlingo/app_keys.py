"""Application keys for type-safe app configuration access."""

from aiohttp import web

from pathlingo.i18n import I18n

i18n_key = web.AppKey("i18n", I18n)
verbose_key = web.AppKey("verbose", bool)
