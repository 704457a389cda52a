"""Map API paths to the logical resources they belong to.

A resource is a lowercase, dash-separated grouping key:

  /api/tasks              -> tasks
  /api/habit-entries/{id} -> habit-entries
  /auth/login             -> authentication
  /custom/path  (tag "UserLimits") -> user-limits

Rules are evaluated in order and the first match wins. Paths that match no
rule resolve to "" and are left out of every resource.
"""

from __future__ import annotations

from typing import Any, Callable

from .loader import get_paths
from .naming import is_path_param, path_segments, to_kebab_case

# The segment that marks the API root, e.g. /api/<resource>/...
API_ROOT = "api"

AUTH_RESOURCE = "authentication"

# Only these path item keys are operations; everything else is metadata.
HTTP_METHODS: tuple[str, ...] = ("get", "post", "put", "patch", "delete")

_AUTH_FINAL_SEGMENTS = {"login", "token"}


def _is_auth_path(path: str, schema: dict[str, Any]) -> bool:
    segments = path_segments(path)
    return "auth" in segments[:-1] or (bool(segments) and segments[-1] in _AUTH_FINAL_SEGMENTS)


def _auth_resource(path: str, schema: dict[str, Any]) -> str:
    return AUTH_RESOURCE


def resource_segment_index(path: str) -> int | None:
    """Return the index of the resource segment following the API root."""
    segments = path_segments(path)
    for i, segment in enumerate(segments[:-1]):
        if segment == API_ROOT:
            if is_path_param(segments[i + 1]):
                return None
            return i + 1
    return None


def _has_root_resource(path: str, schema: dict[str, Any]) -> bool:
    return resource_segment_index(path) is not None


def _root_resource(path: str, schema: dict[str, Any]) -> str:
    return path_segments(path)[resource_segment_index(path)]


def _first_tag(path: str, schema: dict[str, Any]) -> str | None:
    path_item = get_paths(schema).get(path) or {}
    for method in HTTP_METHODS:
        operation = path_item.get(method)
        if isinstance(operation, dict) and operation.get("tags"):
            return operation["tags"][0]
    return None


def _has_tag(path: str, schema: dict[str, Any]) -> bool:
    return bool(_first_tag(path, schema))


def _tag_resource(path: str, schema: dict[str, Any]) -> str:
    return to_kebab_case(_first_tag(path, schema))


_Rule = tuple[Callable[[str, dict], bool], Callable[[str, dict], str]]

RESOURCE_RULES: list[_Rule] = [
    (_is_auth_path, _auth_resource),
    (_has_root_resource, _root_resource),
    (_has_tag, _tag_resource),
]


def get_resource_name(path: str, schema: dict[str, Any]) -> str:
    """Return the resource a path belongs to, or "" when it is unroutable."""
    for matches, resolve in RESOURCE_RULES:
        if matches(path, schema):
            return resolve(path, schema)
    return ""


def extract_resources(schema: dict[str, Any]) -> set[str]:
    """Extract all distinct resources from the schema paths."""
    resources = set()
    for path in get_paths(schema):
        resource = get_resource_name(path, schema)
        if resource:
            resources.add(resource)
    return resources


def get_resource_paths(
    resource_name: str,
    schema: dict[str, Any],
) -> list[tuple[str, dict[str, Any]]]:
    """Return (path, path_item) pairs belonging to a resource, sorted by path."""
    return sorted(
        (
            (path, path_item)
            for path, path_item in get_paths(schema).items()
            if get_resource_name(path, schema) == resource_name
        ),
        key=lambda pair: pair[0],
    )


def get_http_methods(path_item: dict[str, Any]) -> list[str]:
    """Return the HTTP verbs declared on a path item, in declaration order."""
    return [key for key in path_item if key in HTTP_METHODS]
