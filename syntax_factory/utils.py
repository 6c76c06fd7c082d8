"""
Utility functions for canonicalizing type and name strings.
"""

from __future__ import annotations

import re

_WHITESPACE_PATTERN = re.compile(r"\s+")

# A union separator together with any whitespace around it
_UNION_SEPARATOR_PATTERN = re.compile(r"\s*\|\s*")


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character from text."""
    return _WHITESPACE_PATTERN.sub("", text)


def is_union_type(type_name: str | None) -> bool:
    return bool(type_name) and "|" in type_name


def split_union_type(type_name: str | None) -> list[str]:
    """Split a tight union string into its sorted member names."""
    if not type_name:
        return []
    return sorted(type_name.split("|"))


def union_key(type_name: str | None) -> str | None:
    """Canonical tight form of a type, used as an index key.

    Examples:
        "B | A" -> "A|B"
        " Node " -> "Node"

    Args:
        type_name: Raw or already-normalized type text

    Returns:
        Whitespace-free type with sorted union members, or None when absent
    """
    if not type_name:
        return None
    type_name = strip_whitespace(type_name)
    if is_union_type(type_name):
        type_name = "|".join(split_union_type(type_name))
    return type_name


def format_type(type_name: str | None) -> str | None:
    """Spaced rendering of a union type: "A|B" -> "A | B"."""
    if not type_name:
        return None
    return _UNION_SEPARATOR_PATTERN.sub(" | ", type_name)


def normalize_type(type_name: str | None) -> str | None:
    """Canonical spaced form of a type, used in emitted source.

    Examples:
        "B|A" -> "A | B"
        "C | A|B" -> "A | B | C"
        "Identifier" -> "Identifier"
    """
    return format_type(union_key(type_name))


def format_name(name: str | None) -> str | None:
    """Turn a possibly-union name into an identifier: "A | B" -> "AOrB".

    Plain names are returned unchanged.
    """
    if not name:
        return None
    return _UNION_SEPARATOR_PATTERN.sub("Or", name)
