"""Identifiers & Slugs — classify project identifiers and normalize names to slugs.

Invariants:
    - to_slug is total and idempotent: to_slug(to_slug(x)) == to_slug(x)
    - to_slug output contains only [a-z0-9-], no leading/trailing hyphen, no "--"
    - classify_identifier never raises: anything not UUID-shaped is a slug
"""

import re

from backlog.core.domain_types import IdentifierKind

_UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")


def classify_identifier(identifier: str) -> IdentifierKind:
    """UUID if the string matches the 8-4-4-4-12 hex grouping, else SLUG."""
    if _UUID_PATTERN.fullmatch(identifier):
        return IdentifierKind.UUID
    return IdentifierKind.SLUG


def to_slug(name: str) -> str:
    """Normalize a display name into a URL-safe slug."""
    slug = _DISALLOWED.sub("", name.lower())
    slug = _WHITESPACE_RUN.sub("-", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")
