"""Tests for CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner
from pathlingo.cli import cli

CONFIG = """
[i18n]
default_locale = "en"
locales = ["en", "es"]

[site]
url = "https://example.com"

[pages]
dir = "pages"

[content]
saunas = "content/saunas"
"""


@pytest.fixture
def config_file(site_dir: Path) -> Path:
    """Write a configuration file into the site fixture."""
    path = site_dir / "pathlingo.toml"
    path.write_text(CONFIG)
    return path


def _invoke(config_file: Path, *args: str):
    runner = CliRunner()
    return runner.invoke(cli, [args[0], "-c", str(config_file), *args[1:]])


class TestLocalizeCommand:
    """Tests for the localize command."""

    def test__prints_localized_path(self, config_file: Path) -> None:
        result = _invoke(config_file, "localize", "es", "/saunas/types/")

        assert result.exit_code == 0
        assert result.output == "/es/saunas/tipos/\n"

    def test__unknown_locale__fails(self, config_file: Path) -> None:
        """Reject locales missing from the configuration."""
        result = _invoke(config_file, "localize", "fr", "/about/")

        assert result.exit_code == 1
        assert "Unknown locale 'fr' (configured: en, es)" in result.output


class TestSwitchCommand:
    """Tests for the switch command."""

    def test__prints_switched_path(self, config_file: Path) -> None:
        result = _invoke(config_file, "switch", "/es/saunas/modelo-165/", "en")

        assert result.exit_code == 0
        assert result.output == "/saunas/model-165/\n"


class TestDetectCommand:
    """Tests for the detect command."""

    def test__prints_locale(self, config_file: Path) -> None:
        result = _invoke(config_file, "detect", "/es/sobre/")

        assert result.exit_code == 0
        assert result.output == "es\n"


class TestSlugsCommand:
    """Tests for the slugs command."""

    def test__lists_pairs(self, config_file: Path) -> None:
        result = _invoke(config_file, "slugs", "pages", "--locale", "es")

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "about -> sobre",
            "contact -> contacto",
            "index -> /",
            "saunas -> saunas",
            "saunas/types -> saunas/tipos",
        ]

    def test__unknown_category__fails(self, config_file: Path) -> None:
        result = _invoke(config_file, "slugs", "blog")

        assert result.exit_code == 1
        assert "Unknown category 'blog' (known: pages, saunas)" in result.output


class TestRoutesCommand:
    """Tests for the routes command."""

    def test__lists_localized_routes(self, config_file: Path) -> None:
        result = _invoke(config_file, "routes")

        assert result.exit_code == 0
        assert "/es/sobre  pages/about.md" in result.output
        assert "/es  pages/index.md" in result.output

    def test__single_locale__no_routes(self, tmp_path: Path) -> None:
        config_file = tmp_path / "pathlingo.toml"
        config_file.write_text('[i18n]\nlocales = ["en"]\n')

        result = _invoke(config_file, "routes")

        assert result.exit_code == 0
        assert "only the default locale is configured" in result.output

    def test__no_pages__no_routes(self, tmp_path: Path) -> None:
        config_file = tmp_path / "pathlingo.toml"
        config_file.write_text('[i18n]\nlocales = ["en", "es"]\n')

        result = _invoke(config_file, "routes")

        assert result.exit_code == 0
        assert "No localized routes (no pages found)" in result.output

    def test__pages_dir_option__overrides_config(self, site_dir: Path, tmp_path: Path) -> None:
        """Routes come from --pages-dir instead of the configured pages directory."""
        config_file = tmp_path / "pathlingo.toml"
        config_file.write_text('[i18n]\nlocales = ["en", "es"]\n')

        result = _invoke(config_file, "routes", "--pages-dir", str(site_dir / "pages"))

        assert result.exit_code == 0
        assert "/es/sobre  " in result.output


class TestSectionCommand:
    """Tests for the section command."""

    @pytest.fixture
    def content_file(self, site_dir: Path) -> Path:
        path = site_dir / "content" / "sauna.md"
        path.write_text(
            "---\ntitle: Sauna\n---\nHot room.\n<!-- locale:es -->\nSala caliente.\n"
        )
        return path

    def test__prints_locale_section(self, config_file: Path, content_file: Path) -> None:
        result = _invoke(config_file, "section", str(content_file), "--locale", "es")

        assert result.exit_code == 0
        assert result.output == "Sala caliente.\n"

    def test__default_locale_when_not_given(self, config_file: Path, content_file: Path) -> None:
        result = _invoke(config_file, "section", str(content_file))

        assert result.exit_code == 0
        assert result.output == "Hot room.\n"

    def test__missing_section__falls_back_to_default(
        self, config_file: Path, site_dir: Path
    ) -> None:
        path = site_dir / "content" / "english.md"
        path.write_text("Only English.\n")

        result = _invoke(config_file, "section", str(path), "-l", "es")

        assert result.exit_code == 0
        assert result.output == "Only English.\n"

    def test__no_content__fails(self, config_file: Path, site_dir: Path) -> None:
        path = site_dir / "content" / "spanish.md"
        path.write_text("<!-- locale:es -->\nSolo.\n")

        result = _invoke(config_file, "section", str(path))

        assert result.exit_code == 1
        assert "No content for locale 'en'" in result.output


class TestCheckCommand:
    """Tests for the check command."""

    def test__no_duplicates__ok(self, config_file: Path) -> None:
        result = _invoke(config_file, "check")

        assert result.exit_code == 0
        assert "OK: 6 slugs in 2 categories, no duplicates" in result.output

    def test__duplicates__fails(self, config_file: Path) -> None:
        """Report every duplicate localized slug and exit with an error."""
        config_file.write_text(
            CONFIG
            + """
[slug_maps.legal.privacy]
es = "aviso"

[slug_maps.legal.terms]
es = "aviso"
"""
        )

        result = _invoke(config_file, "check")

        assert result.exit_code == 1
        assert "Duplicate: legal[es] 'aviso' is used by: privacy, terms" in result.output

    def test__invalid_config__fails(self, tmp_path: Path) -> None:
        config_file = tmp_path / "pathlingo.toml"
        config_file.write_text('[i18n]\ndefault_locale = "fr"\nlocales = ["en"]\n')

        result = _invoke(config_file, "check")

        assert result.exit_code == 1
        assert "Error: i18n.default_locale 'fr' is not in i18n.locales" in result.output


class TestServeCommand:
    """Tests for the serve command."""

    def test__runs_server_with_overrides(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls = []
        monkeypatch.setattr(
            "pathlingo.server.run_server",
            lambda config, verbose, i18n: calls.append(
                (config.server.port, config.site.url, verbose, i18n.site_url)
            ),
        )

        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "-v",
                "serve",
                "-c",
                str(config_file),
                "-p",
                "9000",
                "--site-url",
                "https://docs.example.org",
            ],
        )

        assert result.exit_code == 0
        assert "Starting server on 127.0.0.1:9000" in result.output
        assert calls == [
            (9000, "https://docs.example.org", True, "https://docs.example.org")
        ]


class TestConfigOption:
    """Tests for the shared --config option."""

    def test__nonexistent_config__fails(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["detect", "-c", str(tmp_path / "missing.toml"), "/"])

        assert result.exit_code != 0
