"""Identifier formatting and path-segment helpers.

Every generated identifier is built from words found in resource names,
tags and path segments. Words are delimited by '-', '_', whitespace or a
lowercase->uppercase boundary:

  user-limits  -> UserLimits
  user_limits  -> UserLimits
  userLimits   -> UserLimits
  user limits  -> UserLimits
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_DELIMITERS = re.compile(r"[-_\s]")


def _insert_boundaries(value: str) -> str:
    """Insert a dash at every lowercase->uppercase boundary (digits count as lowercase)."""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", value)


def to_pascal_case(value: str) -> str:
    """Convert a delimited or camelCase string to PascalCase.

    Idempotent: an already formatted identifier is returned unchanged.
    Single-letter words are the exception, "a-b" -> "AB" -> "Ab".
    """
    words = [w for w in _DELIMITERS.split(_insert_boundaries(value)) if w]
    return "".join(w[0].upper() + w[1:].lower() for w in words)


def to_camel_case(value: str) -> str:
    """Like to_pascal_case, with the first letter lower-cased."""
    pascal = to_pascal_case(value)
    return pascal[:1].lower() + pascal[1:]


def to_kebab_case(value: str) -> str:
    """Convert a tag such as 'UserLimits' or 'Login Check' to 'user-limits'."""
    return re.sub(r"\s+", "-", _insert_boundaries(value)).lower()


def to_snake_case(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1).lower()


def path_segments(path: str) -> list[str]:
    """Split a path into its non-empty segments."""
    return [p for p in path.split("/") if p]


def is_path_param(segment: str) -> bool:
    """Return True for templated segments such as '{id}'."""
    return "{" in segment


def path_params(path: str) -> list[str]:
    """Return the parameter names of a templated path, in order."""
    return re.findall(r"\{([^}]+)\}", path)
