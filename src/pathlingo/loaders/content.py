"""Content collection slug discovery.

Every markdown item in a content directory may declare per-locale slugs in
its front matter. The item's file stem is its canonical slug:

    ---
    slugs:
      en: model-165
      es: modelo-165
    ---
"""

import logging
import re
from pathlib import Path

from pathlingo.loaders.frontmatter import FrontmatterError, parse_frontmatter, read_slugs

logger = logging.getLogger(__name__)

_LOCALE_MARKER_RE = re.compile(r"<!--\s*locale:(\w+)\s*-->")


def load_content_slug_map(content_dir: Path) -> dict[str, dict[str, str]]:
    """Build a slug map from the front matter of a content directory.

    Only top-level .md files are read. Items without a `slugs` field are
    left out of the map; lookups for them fall back to the canonical slug.

    Args:
        content_dir: Directory holding one markdown file per item

    Returns:
        Canonical slug -> (locale -> slug), in sorted file order
    """
    if not content_dir.is_dir():
        logger.info(f"Content directory not found, no slugs loaded: {content_dir}")
        return {}

    slug_map: dict[str, dict[str, str]] = {}
    for file_path in sorted(content_dir.glob("*.md")):
        try:
            metadata, _ = parse_frontmatter(file_path.read_text(encoding="utf-8"))
            slugs = read_slugs(metadata)
        except (OSError, UnicodeDecodeError, FrontmatterError) as e:
            logger.warning(f"Skipping {file_path}: {e}")
            continue

        if slugs:
            slug_map[file_path.stem] = slugs

    logger.info(f"Loaded {len(slug_map)} content slugs from {content_dir}")
    return slug_map


def split_locale_sections(body: str, default_locale: str) -> dict[str, str]:
    """Split a content body into per-locale markdown sections.

    Sections are introduced by "<!-- locale:xx -->" markers. Text before the
    first marker belongs to the default locale. Empty sections are dropped.

    Args:
        body: Markdown body without front matter
        default_locale: Locale of the unmarked leading section

    Returns:
        Locale -> stripped markdown text
    """
    parts = _LOCALE_MARKER_RE.split(body)
    sections: dict[str, str] = {}

    leading = parts[0].strip()
    if leading:
        sections[default_locale] = leading

    # split() with one group alternates marker locale and section text
    for locale, text in zip(parts[1::2], parts[2::2], strict=True):
        stripped = text.strip()
        if stripped:
            sections[locale] = stripped

    return sections
