"""Shared test fixtures."""

from pathlib import Path

import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient
from pathlingo.config import Config, LocaleConfig, PagesConfig, ServerConfig, SiteConfig
from pathlingo.core.routes import RouteResolver
from pathlingo.core.slug_map import SlugMaps
from pathlingo.server import create_app

SLUG_MAPS = {
    "pages": {
        "index": {"en": "", "es": ""},
        "about": {"en": "about", "es": "sobre"},
        "contact": {"en": "contact", "es": "contacto"},
        "saunas": {"en": "saunas", "es": "saunas"},
        "saunas/types": {"en": "saunas/types", "es": "saunas/tipos"},
    },
    "saunas": {
        "model-165": {"en": "model-165", "es": "modelo-165"},
    },
}


@pytest.fixture
def slug_maps() -> SlugMaps:
    """Slug maps with a page hierarchy and one content category."""
    return SlugMaps.from_dict(SLUG_MAPS)


@pytest.fixture
def resolver(slug_maps: SlugMaps) -> RouteResolver:
    """Route resolver for en (default) and es."""
    return RouteResolver("en", ["en", "es"], slug_maps)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a site with pages and a content collection.

    Layout:
        pages/index.md
        pages/about.md            slugs: {es: sobre}
        pages/contact.html        slugs: {es: contacto}
        pages/saunas/index.md
        pages/saunas/types/index.md   slugs: {en: types, es: tipos}
        pages/_draft.md           (skipped)
        pages/[slug].md           (skipped)
        content/saunas/model-165.md   slugs: {en: model-165, es: modelo-165}
        content/saunas/model-200.md   (no slugs)
    """
    pages = tmp_path / "pages"
    (pages / "saunas" / "types").mkdir(parents=True)
    (pages / "index.md").write_text("# Home\n")
    (pages / "about.md").write_text("---\nslugs:\n  es: sobre\n---\n# About\n")
    (pages / "contact.html").write_text("---\nslugs:\n  es: contacto\n---\n<h1>Contact</h1>\n")
    (pages / "saunas" / "index.md").write_text("# Saunas\n")
    (pages / "saunas" / "types" / "index.md").write_text(
        "---\nslugs:\n  en: types\n  es: tipos\n---\n# Types\n"
    )
    (pages / "_draft.md").write_text("# Draft\n")
    (pages / "[slug].md").write_text("# Dynamic\n")

    saunas = tmp_path / "content" / "saunas"
    saunas.mkdir(parents=True)
    (saunas / "model-165.md").write_text(
        "---\ntitle: Model 165\nslugs:\n  en: model-165\n  es: modelo-165\n---\nBody.\n"
    )
    (saunas / "model-200.md").write_text("---\ntitle: Model 200\n---\nBody.\n")

    return tmp_path


@pytest.fixture
def test_config(site_dir: Path) -> Config:
    """Create a test configuration pointing at the site fixture."""
    return Config(
        server=ServerConfig(),
        i18n=LocaleConfig(
            default_locale="en",
            locales=["en", "es"],
            labels={"en": "English", "es": "Español"},
            html_lang={"en": "en", "es": "es"},
        ),
        pages=PagesConfig(pages_dir=site_dir / "pages"),
        site=SiteConfig(url="https://example.com/"),
        content_dirs={"saunas": site_dir / "content" / "saunas"},
        config_path=site_dir / "pathlingo.toml",
    )


@pytest.fixture
def app(test_config: Config) -> web.Application:
    """Create the API application over the site fixture."""
    return create_app(test_config)


@pytest.fixture
def client(app: web.Application, aiohttp_client) -> TestClient:
    """Create test client with configured app."""
    return aiohttp_client(app)
