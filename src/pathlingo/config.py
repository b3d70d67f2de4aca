"""Configuration management for pathlingo.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "pathlingo.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class LocaleConfig:
    """Locale configuration."""

    default_locale: str = "en"
    locales: list[str] = field(default_factory=lambda: ["en"])
    labels: dict[str, str] = field(default_factory=dict)
    html_lang: dict[str, str] = field(default_factory=dict)

    @property
    def non_default_locales(self) -> list[str]:
        """Locales served under a "/<locale>" prefix."""
        return [locale for locale in self.locales if locale != self.default_locale]

    def html_lang_for(self, locale: str) -> str:
        """HTML lang value for a locale, the locale code when not configured."""
        return self.html_lang.get(locale, locale)


@dataclass
class PagesConfig:
    """Pages directory configuration."""

    pages_dir: Path | None = None
    extensions: list[str] = field(default_factory=lambda: [".md", ".html"])


@dataclass
class SiteConfig:
    """Public site configuration."""

    url: str | None = None


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    i18n: LocaleConfig
    pages: PagesConfig
    site: SiteConfig
    content_dirs: dict[str, Path] = field(default_factory=dict)
    slug_maps: dict[str, dict[str, dict[str, str]]] = field(default_factory=dict)
    strict: bool = False
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Read pathlingo settings.

        An explicit config_path must exist. Without one, the nearest
        pathlingo.toml from the working directory upwards is used, and
        built-in defaults apply when there is none.

        Raises:
            FileNotFoundError: If config_path is given but missing
            ValueError: If the TOML is malformed or a value has the wrong type
        """
        if config_path is None:
            config_path = cls._discover_config()
            return cls._default() if config_path is None else cls._load_from_file(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        return cls._load_from_file(config_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Nearest pathlingo.toml in the working directory or an ancestor."""
        cwd = Path.cwd()
        for directory in (cwd, *cwd.parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def _default(cls) -> Config:
        """Create config with all defaults."""
        return cls(
            server=ServerConfig(),
            i18n=LocaleConfig(),
            pages=PagesConfig(),
            site=SiteConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        i18n_data = data.get("i18n")
        return cls(
            server=cls._parse_server(data.get("server")),
            i18n=cls._parse_i18n(i18n_data),
            pages=cls._parse_pages(data.get("pages"), config_dir),
            site=cls._parse_site(data.get("site")),
            content_dirs=cls._parse_content(data.get("content"), config_dir),
            slug_maps=cls._parse_slug_maps(data.get("slug_maps")),
            strict=cls._parse_strict(i18n_data),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_i18n(cls, data: object) -> LocaleConfig:
        """Parse i18n configuration section.

        Args:
            data: Raw i18n section data

        Returns:
            LocaleConfig instance
        """
        if data is None:
            return LocaleConfig()

        if not isinstance(data, dict):
            raise ValueError("i18n section must be a dictionary")

        default_locale = data.get("default_locale", "en")
        if not isinstance(default_locale, str) or not default_locale:
            raise ValueError("i18n.default_locale must be a non-empty string")

        locales_raw = data.get("locales", [default_locale])
        if not isinstance(locales_raw, list):
            raise ValueError("i18n.locales must be a list")
        locales: list[str] = []
        for item in locales_raw:
            if not isinstance(item, str) or not item or "/" in item:
                raise ValueError("i18n.locales items must be non-empty strings without '/'")
            if item not in locales:
                locales.append(item)
        if not locales:
            locales = [default_locale]
        if default_locale not in locales:
            raise ValueError(f"i18n.default_locale '{default_locale}' is not in i18n.locales")

        labels = cls._parse_string_table(data.get("labels"), "i18n.labels")
        html_lang = cls._parse_string_table(data.get("html_lang"), "i18n.html_lang")

        return LocaleConfig(
            default_locale=default_locale,
            locales=locales,
            labels=labels,
            html_lang=html_lang,
        )

    @classmethod
    def _parse_strict(cls, data: object) -> bool:
        """Parse i18n.strict flag."""
        if not isinstance(data, dict):
            return False

        strict = data.get("strict", False)
        if not isinstance(strict, bool):
            raise ValueError("i18n.strict must be a boolean")
        return strict

    @classmethod
    def _parse_pages(cls, data: object, config_dir: Path) -> PagesConfig:
        """Parse pages configuration section.

        Args:
            data: Raw pages section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            PagesConfig instance
        """
        if data is None:
            return PagesConfig()

        if not isinstance(data, dict):
            raise ValueError("pages section must be a dictionary")

        pages_dir = data.get("dir")
        if pages_dir is not None and not isinstance(pages_dir, str):
            raise ValueError("pages.dir must be a string")

        extensions_raw = data.get("extensions", [".md", ".html"])
        if not isinstance(extensions_raw, list):
            raise ValueError("pages.extensions must be a list")
        extensions: list[str] = []
        for item in extensions_raw:
            if not isinstance(item, str):
                raise ValueError("pages.extensions items must be strings")
            extensions.append(item if item.startswith(".") else f".{item}")

        return PagesConfig(
            pages_dir=config_dir / pages_dir if pages_dir is not None else None,
            extensions=extensions,
        )

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section."""
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        url = data.get("url")
        if url is not None and not isinstance(url, str):
            raise ValueError("site.url must be a string")

        return SiteConfig(url=url)

    @classmethod
    def _parse_content(cls, data: object, config_dir: Path) -> dict[str, Path]:
        """Parse content section: category name -> content directory."""
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ValueError("content section must be a dictionary")

        content_dirs: dict[str, Path] = {}
        for category, directory in data.items():
            if not isinstance(directory, str):
                raise ValueError(f"content.{category} must be a string")
            content_dirs[category] = config_dir / directory
        return content_dirs

    @classmethod
    def _parse_slug_maps(cls, data: object) -> dict[str, dict[str, dict[str, str]]]:
        """Parse inline slug_maps section.

        Layout: [slug_maps.<category>.<canonical>] with locale = "slug" pairs.
        """
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ValueError("slug_maps section must be a dictionary")

        slug_maps: dict[str, dict[str, dict[str, str]]] = {}
        for category, rows in data.items():
            if not isinstance(rows, dict):
                raise ValueError(f"slug_maps.{category} must be a dictionary")
            slug_maps[category] = {
                canonical: cls._parse_string_table(row, f"slug_maps.{category}.{canonical}")
                for canonical, row in rows.items()
            }
        return slug_maps

    @classmethod
    def _parse_string_table(cls, data: object, name: str) -> dict[str, str]:
        """Parse a table of string values."""
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ValueError(f"{name} must be a dictionary")

        table: dict[str, str] = {}
        for key, value in data.items():
            if not isinstance(value, str):
                raise ValueError(f"{name}.{key} must be a string")
            table[key] = value
        return table

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        pages_dir: Path | None = None,
        site_url: str | None = None,
        strict: bool | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            pages_dir: Override pages.dir
            site_url: Override site.url
            strict: Override i18n.strict

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        pages = self.pages
        if pages_dir is not None:
            pages = replace(self.pages, pages_dir=pages_dir)

        site = self.site
        if site_url is not None:
            site = replace(self.site, url=site_url)

        return replace(
            self,
            server=server,
            pages=pages,
            site=site,
            strict=strict if strict is not None else self.strict,
        )
