"""Convert HTTP method + path to accessor method names.

Pattern: {verb}{Resource}{Kind}Api
  - GET    collection         -> get{Resource}CollectionApi
  - POST   collection         -> create{Resource}ItemApi
  - GET    collection/{id}    -> get{Resource}ItemApi
  - PATCH  collection/{id}    -> patch{Resource}ItemApi
  - DELETE collection/{id}    -> delete{Resource}ItemApi
  - GET    collection/{param} -> get{Resource}ItemBy{Param}Api
  - any    .../{x}/{action}   -> {action}{Resource}Api
  - anything else             -> {method}{Resource}Api

Examples:
  GET    /api/tasks                   -> getTasksCollectionApi
  POST   /api/tasks                   -> createTasksItemApi
  GET    /api/tasks/{id}              -> getTasksItemApi
  GET    /api/tasks/{entityType}      -> getTasksItemByEntityTypeApi
  GET    /api/habits/{id}/streak      -> streakHabitsApi
  PUT    /api/tasks/{id}              -> putTasksApi

Names are only candidates: two paths of the same resource can produce the
same name, so ensure_unique_method_names() runs over every candidate of an
emitted unit before anything is rendered.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterator

from .naming import (
    is_path_param,
    path_params,
    path_segments,
    to_camel_case,
    to_pascal_case,
)
from .resource_parser import API_ROOT, get_resource_name

MethodKey = tuple[str, str]

_COLLECTION_NAMES: dict[str, str] = {
    "get": "get{base}CollectionApi",
    "post": "create{base}ItemApi",
}

_ITEM_NAMES: dict[str, str] = {
    "get": "get{base}ItemApi",
    "patch": "patch{base}ItemApi",
    "delete": "delete{base}ItemApi",
}

_BY_PARAM_VERBS: dict[str, str] = {
    "get": "get",
    "post": "create",
    "patch": "patch",
    "delete": "delete",
}

# Order matters: the first prefix a name starts with is the one split on.
_VERB_PREFIXES: tuple[str, ...] = ("get", "create", "delete", "patch", "put")


def _action_segment(path: str) -> str | None:
    """Return the trailing action word of /api/{resource}/.../{action} paths.

    At least two segments must follow the resource and the last one must be
    a literal, so /api/habits/{id}/streak yields 'streak' while
    /api/habits/{id} and /api/tasks/{id}/comments/{commentId} yield None.
    """
    segments = path_segments(path)
    if API_ROOT not in segments:
        return None
    rest = segments[segments.index(API_ROOT) + 2:]
    if len(rest) >= 2 and not is_path_param(rest[-1]):
        return rest[-1]
    return None


def generate_method_name(path: str, method: str, schema: dict[str, Any]) -> str:
    """Build a candidate method name for one operation.

    Falls back to the bare HTTP method when the path has no resource.
    """
    resource = get_resource_name(path, schema)
    if not resource:
        return method

    base = to_pascal_case(resource)

    action = _action_segment(path)
    if action:
        return f"{to_camel_case(action)}{base}Api"

    params = path_params(path)

    if not params and method in _COLLECTION_NAMES:
        return _COLLECTION_NAMES[method].format(base=base)

    if "{id}" in path:
        if method in _ITEM_NAMES:
            return _ITEM_NAMES[method].format(base=base)
    elif params and method in _BY_PARAM_VERBS:
        # Lookups keyed by a custom field, e.g. {entityType}
        verb = _BY_PARAM_VERBS[method]
        return f"{verb}{base}ItemBy{to_pascal_case(params[0])}Api"

    return f"{method}{base}Api"


def _insert_after_verb(name: str, word: str) -> str | None:
    for verb in _VERB_PREFIXES:
        if name.startswith(verb):
            return f"{verb}{word}{name[len(verb):]}"
    return None


def _disambiguated_names(name: str, path: str) -> Iterator[str]:
    """Yield name variants built from the path's literal segments, last first."""
    for segment in reversed(path_segments(path)):
        if segment == API_ROOT or is_path_param(segment):
            continue
        variant = _insert_after_verb(name, to_pascal_case(segment))
        if variant is None:
            return
        yield variant


def _numbered_name(name: str, claimed: set[str]) -> str:
    counter = 1
    while f"{name}{counter}" in claimed:
        counter += 1
    return f"{name}{counter}"


def ensure_unique_method_names(method_names: dict[MethodKey, str]) -> dict[MethodKey, str]:
    """Make candidate names unique across one emitted unit.

    method_names maps (path, method) to a candidate name and must be ordered
    path-then-declared-verb; the result keeps that order. Names that occur
    once are kept. Colliding names get a distinguishing path segment inserted
    after their verb prefix (getTasksItemApi -> getArchiveTasksItemApi), and
    a numeric suffix when no segment helps.
    """
    counts = Counter(method_names.values())
    claimed: set[str] = set()
    final_names: dict[MethodKey, str] = {}

    for key, name in method_names.items():
        path = key[0]
        if counts[name] == 1 and name not in claimed:
            final = name
        else:
            final = next(
                (v for v in _disambiguated_names(name, path) if v not in claimed),
                None,
            ) or _numbered_name(name, claimed)

        claimed.add(final)
        final_names[key] = final

    return final_names
