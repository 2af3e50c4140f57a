"""
Slug generation for categories and catalog items.
"""

import re

_WHITESPACE = re.compile(r"\s+")
_INVALID = re.compile(r"[^a-z0-9-]")


def slugify(value: str) -> str:
    """
    Turn a display name into a URL slug.

    Lowercases, replaces whitespace runs with "-" and drops anything
    outside [a-z0-9-].

    Example:
        slugify("Luxury  Cruises!") -> "luxury-cruises"
    """
    lowered = _WHITESPACE.sub("-", (value or "").strip().lower())
    return _INVALID.sub("", lowered)
