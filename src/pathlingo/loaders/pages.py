"""Page map discovery from a pages directory.

Each routable file under the pages directory becomes one page keyed by its
path without extension ("saunas/types/index.md" -> "saunas/types"). A page
can declare per-locale leaf slugs in its front matter:

    ---
    slugs:
      es: tipos
    ---

Nested pages get full-path slugs composed from their ancestors' slugs.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pathlingo.core.composer import compose_page_slugs
from pathlingo.core.route_table import INDEX_PAGE, PageEntry
from pathlingo.loaders.frontmatter import FrontmatterError, parse_frontmatter, read_slugs

logger = logging.getLogger(__name__)

# Prefixes of files and directories that never become routes; files with
# a "[" anywhere in the name are dynamic routes and are skipped too
_SKIPPED_PREFIXES = (".", "_", "[")


@dataclass
class PageMap:
    """Discovered pages and the derived "pages" slug map rows."""

    pages: dict[str, PageEntry]
    slug_map: dict[str, dict[str, str]]


class PageMapLoader:
    """Loads page entries and composed page slugs from a pages directory."""

    def __init__(
        self,
        pages_dir: Path,
        locales: Sequence[str],
        *,
        extensions: Sequence[str] = (".md", ".html"),
        entrypoint_root: Path | None = None,
    ) -> None:
        """Initialize page map loader.

        Args:
            pages_dir: Directory containing page files
            locales: Configured locales; every page gets a slug for each
            extensions: File extensions of routable pages
            entrypoint_root: Directory entrypoints are made relative to
                             (default: pages_dir's parent)
        """
        self._pages_dir = pages_dir
        self._locales = list(locales)
        self._extensions = tuple(extensions)
        self._entrypoint_root = entrypoint_root if entrypoint_root is not None else pages_dir.parent

    @property
    def pages_dir(self) -> Path:
        """Directory containing page files."""
        return self._pages_dir

    def load(self) -> PageMap:
        """Scan the pages directory and build the page map.

        Returns:
            PageMap with entries in sorted file order; empty if the
            directory doesn't exist
        """
        if not self._pages_dir.is_dir():
            logger.info(f"Pages directory not found, no pages loaded: {self._pages_dir}")
            return PageMap(pages={}, slug_map={})

        leaf_slugs: dict[str, dict[str, str]] = {}
        entrypoints: dict[str, str] = {}

        for file_path in self._collect_files(self._pages_dir):
            relative = file_path.relative_to(self._pages_dir)
            key = self._page_key(relative)
            entrypoints[key] = self._entrypoint(file_path)
            leaf_slugs[key] = self._leaf_slugs(key, file_path)

        composed = compose_page_slugs(leaf_slugs)
        pages = {
            key: PageEntry(canonical=key, entrypoint=entrypoints[key], slugs=composed[key])
            for key in leaf_slugs
        }

        logger.info(f"Loaded {len(pages)} pages from {self._pages_dir}")
        return PageMap(pages=pages, slug_map=composed)

    def _collect_files(self, directory: Path) -> list[Path]:
        """Recursively collect routable files, skipping hidden and dynamic entries."""
        files: list[Path] = []
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.name.startswith(_SKIPPED_PREFIXES):
                continue
            if entry.is_dir():
                files.extend(self._collect_files(entry))
            elif entry.suffix in self._extensions and "[" not in entry.name:
                files.append(entry)
        return files

    def _page_key(self, relative: Path) -> str:
        """Convert a relative file path to a canonical page key."""
        key = relative.with_suffix("").as_posix()
        return key.removesuffix(f"/{INDEX_PAGE}")

    def _entrypoint(self, file_path: Path) -> str:
        """Render entrypoint reference for a page file."""
        try:
            return file_path.relative_to(self._entrypoint_root).as_posix()
        except ValueError:
            return file_path.as_posix()

    def _leaf_slugs(self, key: str, file_path: Path) -> dict[str, str]:
        """Per-locale leaf slugs: front matter overrides over the file's own name."""
        default_slug = "" if key == INDEX_PAGE else key.rsplit("/", 1)[-1]
        slugs = dict.fromkeys(self._locales, default_slug)

        try:
            metadata, _ = parse_frontmatter(file_path.read_text(encoding="utf-8"))
            explicit = read_slugs(metadata)
        except (OSError, UnicodeDecodeError, FrontmatterError) as e:
            logger.warning(f"Ignoring slugs of {file_path}: {e}")
            return slugs

        if explicit:
            logger.debug(f"Explicit slugs for page '{key}': {explicit}")
            slugs.update(explicit)
        return slugs
