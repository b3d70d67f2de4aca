"""CLI interface for pathlingo.

Command-line tool for inspecting translated routes and serving the
path resolution API.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from pathlingo.config import Config
from pathlingo.core.slug_map import DuplicateSlugError
from pathlingo.i18n import I18n, create_i18n
from pathlingo.loaders.frontmatter import FrontmatterError, parse_frontmatter

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover pathlingo.toml)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (show loader and slug map logs)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """pathlingo - translated URL paths for multilingual static sites."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@config_option
@click.argument("locale")
@click.argument("path")
def localize(config_path: Path | None, locale: str, path: str) -> None:
    """Translate a canonical PATH into LOCALE."""
    i18n = _load(config_path)
    _require_locale(i18n, locale)
    click.echo(i18n.locale_path(locale, path))


@cli.command()
@config_option
@click.argument("path")
@click.argument("locale")
def switch(config_path: Path | None, path: str, locale: str) -> None:
    """Switch a PATH written in any locale to LOCALE."""
    i18n = _load(config_path)
    _require_locale(i18n, locale)
    click.echo(i18n.switch_locale_path(path, locale))


@cli.command()
@config_option
@click.argument("path")
def detect(config_path: Path | None, path: str) -> None:
    """Print the locale a PATH is written in."""
    i18n = _load(config_path)
    click.echo(i18n.get_locale_from_path(path))


@cli.command()
@config_option
@click.argument("category")
@click.option("--locale", "-l", default=None, help="Locale to show (default: default locale)")
def slugs(config_path: Path | None, category: str, locale: str | None) -> None:
    """List canonical and localized slugs of a CATEGORY."""
    i18n = _load(config_path)
    effective_locale = locale or i18n.locale_config.default_locale
    _require_locale(i18n, effective_locale)

    if category not in i18n.slug_maps:
        known = ", ".join(i18n.slug_maps.categories) or "none"
        _fail(f"Unknown category '{category}' (known: {known})")

    for pair in i18n.get_all_slug_pairs(category, effective_locale):
        click.echo(f"{pair.canonical or '/'} -> {pair.localized or '/'}")


@cli.command()
@config_option
@click.option(
    "--pages-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Pages directory (overrides config)",
)
def routes(config_path: Path | None, pages_dir: Path | None) -> None:
    """List the localized route of every page in every non-default locale."""
    i18n = _load(config_path, pages_dir=pages_dir)
    if not i18n.locale_config.non_default_locales:
        click.echo("No localized routes (only the default locale is configured)")
        return

    localized_routes = i18n.routes()
    if not localized_routes:
        click.echo("No localized routes (no pages found)")
        return

    for route in localized_routes:
        click.echo(f"{route.pattern}  {route.entrypoint}")


@cli.command()
@config_option
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--locale", "-l", default=None, help="Locale to show (default: default locale)")
def section(config_path: Path | None, file: Path, locale: str | None) -> None:
    """Print the LOCALE section of a content FILE.

    Sections are marked with "<!-- locale:xx -->" comments. A locale without
    its own section gets the default locale's text.
    """
    i18n = _load(config_path)
    effective_locale = locale or i18n.locale_config.default_locale
    _require_locale(i18n, effective_locale)

    try:
        _, body = parse_frontmatter(file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, FrontmatterError) as e:
        _fail(f"Cannot read {file}: {e}")

    text = i18n.localized(i18n.locale_sections(body), effective_locale)
    if text is None:
        _fail(f"No content for locale '{effective_locale}' in {file}")
    click.echo(text)


@cli.command()
@config_option
def check(config_path: Path | None) -> None:
    """Check slug maps for duplicate localized slugs."""
    try:
        config = Config.load(config_path).with_overrides(strict=True)
        i18n = create_i18n(config)
    except DuplicateSlugError as e:
        for conflict in e.conflicts:
            click.echo(click.style(f"Duplicate: {conflict}", fg="red"), err=True)
        sys.exit(1)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))

    total = sum(len(slug_map) for slug_map in i18n.slug_maps)
    click.echo(
        click.style(
            f"OK: {total} slugs in {len(i18n.slug_maps)} categories, no duplicates",
            fg="green",
        )
    )


@cli.command()
@config_option
@click.option("--host", default=None, help="Host to bind to (overrides config)")
@click.option("--port", "-p", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--pages-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Pages directory (overrides config)",
)
@click.option(
    "--site-url",
    default=None,
    help="Absolute site URL for SEO alternates (overrides config)",
)
@click.pass_context
def serve(
    ctx: click.Context,
    config_path: Path | None,
    host: str | None,
    port: int | None,
    pages_dir: Path | None,
    site_url: str | None,
) -> None:
    """Start the path resolution API server."""
    from pathlingo.server import run_server

    try:
        config = Config.load(config_path).with_overrides(
            host=host, port=port, pages_dir=pages_dir, site_url=site_url
        )
        i18n = create_i18n(config)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Locales: {', '.join(config.i18n.locales)} (default: {config.i18n.default_locale})")

    run_server(config, verbose=ctx.obj["verbose"], i18n=i18n)


def _load(config_path: Path | None, *, pages_dir: Path | None = None) -> I18n:
    """Load configuration and build slug maps, exiting on errors."""
    try:
        return create_i18n(Config.load(config_path).with_overrides(pages_dir=pages_dir))
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))


def _require_locale(i18n: I18n, locale: str) -> None:
    if locale not in i18n.locale_config.locales:
        known = ", ".join(i18n.locale_config.locales)
        _fail(f"Unknown locale '{locale}' (configured: {known})")


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)
