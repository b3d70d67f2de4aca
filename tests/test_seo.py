"""Tests for SEO helpers."""

from pathlingo.core.routes import RouteResolver
from pathlingo.core.seo import (
    HrefLang,
    OGLocales,
    generate_canonical_url,
    generate_hreflangs,
    generate_og_locales,
    to_og_locale,
)

HTML_LANG = {"en": "en", "es": "es"}


class TestGenerateHrefLangs:
    """Tests for generate_hreflangs()."""

    def test__all_locales_plus_x_default(self, resolver: RouteResolver) -> None:
        entries = generate_hreflangs("/about/", "https://example.com", resolver, HTML_LANG)

        assert entries == [
            HrefLang(hreflang="en", href="https://example.com/about/"),
            HrefLang(hreflang="es", href="https://example.com/es/sobre/"),
            HrefLang(hreflang="x-default", href="https://example.com/about/"),
        ]

    def test__from_non_default_locale_path(self, resolver: RouteResolver) -> None:
        entries = generate_hreflangs("/es/sobre/", "https://example.com", resolver, HTML_LANG)

        assert [entry.href for entry in entries] == [
            "https://example.com/about/",
            "https://example.com/es/sobre/",
            "https://example.com/about/",
        ]

    def test__root_path(self, resolver: RouteResolver) -> None:
        entries = generate_hreflangs("/", "https://example.com", resolver, HTML_LANG)

        assert [entry.href for entry in entries] == [
            "https://example.com/",
            "https://example.com/es/",
            "https://example.com/",
        ]

    def test__strips_trailing_slash_from_site_url(self, resolver: RouteResolver) -> None:
        entries = generate_hreflangs("/about/", "https://example.com/", resolver, HTML_LANG)

        assert entries[0].href == "https://example.com/about/"

    def test__content_slug(self, resolver: RouteResolver) -> None:
        entries = generate_hreflangs(
            "/saunas/model-165/", "https://example.com", resolver, HTML_LANG
        )

        assert entries[1].href == "https://example.com/es/saunas/modelo-165/"

    def test__html_lang_mapping__used_for_hreflang(self, resolver: RouteResolver) -> None:
        entries = generate_hreflangs("/", "https://example.com", resolver, {"es": "es-ES"})

        assert [entry.hreflang for entry in entries] == ["en", "es-ES", "x-default"]

    def test__to_dict(self) -> None:
        entry = HrefLang(hreflang="es", href="https://example.com/es/")

        assert entry.to_dict() == {"hreflang": "es", "href": "https://example.com/es/"}


class TestGenerateCanonicalURL:
    """Tests for generate_canonical_url()."""

    def test__joins_site_and_path(self) -> None:
        assert generate_canonical_url("/about/", "https://example.com") == "https://example.com/about/"

    def test__strips_trailing_slash_from_site_url(self) -> None:
        assert generate_canonical_url("/about/", "https://example.com/") == "https://example.com/about/"

    def test__root_path(self) -> None:
        assert generate_canonical_url("/", "https://example.com") == "https://example.com/"


class TestToOGLocale:
    """Tests for to_og_locale()."""

    def test__simple_codes(self) -> None:
        assert to_og_locale("en") == "en_US"
        assert to_og_locale("es") == "es_ES"
        assert to_og_locale("fr") == "fr_FR"
        assert to_og_locale("pt") == "pt_PT"

    def test__hyphenated_codes(self) -> None:
        assert to_og_locale("en-GB") == "en_GB"
        assert to_og_locale("pt-BR") == "pt_BR"
        assert to_og_locale("zh-cn") == "zh_CN"


class TestGenerateOGLocales:
    """Tests for generate_og_locales()."""

    def test__current_and_alternates(self, resolver: RouteResolver) -> None:
        result = generate_og_locales("/about/", resolver, HTML_LANG)

        assert result == OGLocales(current="en_US", alternates=["es_ES"])

    def test__non_default_locale_is_current(self, resolver: RouteResolver) -> None:
        result = generate_og_locales("/es/sobre/", resolver, HTML_LANG)

        assert result.current == "es_ES"
        assert result.alternates == ["en_US"]

    def test__root_path(self, resolver: RouteResolver) -> None:
        result = generate_og_locales("/", resolver, HTML_LANG)

        assert result.to_dict() == {"current": "en_US", "alternates": ["es_ES"]}
