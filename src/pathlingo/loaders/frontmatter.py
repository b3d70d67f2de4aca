"""YAML front matter parsing."""

import re
from typing import Any

import yaml

_FRONTMATTER_RE = re.compile(r"\A---\r?\n(.*?)\r?\n---(?:\r?\n|\Z)(.*)\Z", re.DOTALL)


class FrontmatterError(ValueError):
    """Raised when a file's front matter is not a valid YAML mapping."""


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split "---" delimited YAML front matter from a document body.

    Args:
        text: Raw file contents

    Returns:
        Tuple of (metadata, body). Metadata is empty when the document has
        no front matter; body is then the whole text.

    Raises:
        FrontmatterError: If front matter is invalid YAML or not a mapping
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return {}, text

    raw, body = match.groups()
    try:
        metadata = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML front matter: {e}") from e

    if metadata is None:
        return {}, body
    if not isinstance(metadata, dict):
        raise FrontmatterError("Front matter must be a mapping")
    return metadata, body


def read_slugs(metadata: dict[str, Any]) -> dict[str, str] | None:
    """Extract a `slugs` mapping of locale -> slug from front matter.

    Entries without a value are dropped so those locales fall back to the
    canonical slug.

    Returns:
        Slugs with values coerced to strings, None when absent

    Raises:
        FrontmatterError: If `slugs` is present but not a mapping
    """
    slugs = metadata.get("slugs")
    if slugs is None:
        return None
    if not isinstance(slugs, dict):
        raise FrontmatterError("`slugs` must be a mapping of locale to slug")
    return {
        str(locale): str(slug).strip("/") for locale, slug in slugs.items() if slug is not None
    }
