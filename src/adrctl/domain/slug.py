"""Slug and filename codec.

ADR files are named ``NNNN-slug.md``: a zero-padded number of at least
four digits, a hyphen, and a slug derived from the title.
"""

from __future__ import annotations

import re

from adrctl.domain.errors import AdrError, ErrorKind

ADR_FILE_PATTERN = re.compile(r"^(\d{4,})-.*\.md$")

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9-]")
_MULTIPLE_HYPHENS = re.compile(r"-{2,}")


def slugify(title: str) -> str:
    """Convert *title* into a lower-case, hyphen-separated slug.

    Raises:
        AdrError: ``INVALID`` if nothing usable remains.

    Examples:
        >>> slugify("Use Go for CLI")
        'use-go-for-cli'
        >>> slugify("  API -- v2!  ")
        'api-v2'
    """
    slug = title.strip().lower().replace(" ", "-")
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _MULTIPLE_HYPHENS.sub("-", slug)
    slug = slug.strip("-")
    if not slug:
        msg = f"title {title!r} produces an empty slug"
        raise AdrError(ErrorKind.INVALID, msg)
    return slug


def format_filename(number: int, title: str) -> str:
    """Filename for ADR *number* with *title*, e.g. ``0001-use-go.md``."""
    return f"{number:04d}-{slugify(title)}.md"


def parse_filename(filename: str) -> tuple[int, str] | None:
    """Split an ADR filename into ``(number, slug)``.

    Returns None for names that are not ADR files (``template.md``,
    ``README.md``, three-digit prefixes, other extensions).
    """
    match = ADR_FILE_PATTERN.match(filename)
    if match is None:
        return None
    digits = match.group(1)
    slug = filename[len(digits) + 1 : -len(".md")]
    return int(digits), slug
