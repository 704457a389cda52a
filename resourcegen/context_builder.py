"""Build Jinja2 template context from a parsed OpenAPI spec.

Groups resources into emitted units, assigns every operation a final method
name and content type, and assembles the context dicts the templates render.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from .content_types import get_content_type
from .gen_logging import get_logger
from .method_names import MethodKey, ensure_unique_method_names, generate_method_name
from .naming import to_pascal_case, to_snake_case
from .resource_parser import get_http_methods, get_resource_paths

logger = get_logger(__name__)


def unit_names(unit_name: str) -> tuple[str, str]:
    """Return (class name, module file name) for a unit: TaskStatuses ->
    ('TaskStatusesApi', 'task_statuses_api.py')."""
    # Resource names come from URLs and may carry characters such as "."
    safe = re.sub(r"\W", "", unit_name)
    if safe[:1].isdigit():
        safe = f"_{safe}"
    return f"{safe}Api", f"{to_snake_case(safe)}_api.py"


def _claim_unit_names(unit: dict[str, Any], taken: set[str]) -> None:
    """Suffix a unit's class and file name when an earlier unit already uses them.

    'v1.2' and 'v12' both map to V12Api / v12_api.py; the later one becomes
    V12Api1 / v12_api1.py.
    """
    class_name, file_name = unit["class_name"], unit["file_name"]
    stem = file_name[: -len(".py")]
    counter = 0
    while class_name in taken or file_name in taken:
        counter += 1
        class_name = f"{unit['class_name']}{counter}"
        file_name = f"{stem}{counter}.py"

    if counter:
        logger.warning(
            f"{unit['file_name']} is already generated for another resource; "
            f"writing {', '.join(unit['resources'])} to {file_name}"
        )
    unit["class_name"], unit["file_name"] = class_name, file_name
    taken.update((class_name, file_name))


def group_resources(resources: Iterable[str]) -> dict[str, list[str]]:
    """Group resources whose formatted names collide into one unit.

    'user-limits' and 'user_limits' both format to 'UserLimits' and end up
    in the same module.
    """
    groups: dict[str, list[str]] = {}
    for resource in sorted(resources):
        groups.setdefault(to_pascal_case(resource), []).append(resource)
    return dict(sorted(groups.items()))


def collect_resource_paths(
    resource_names: Iterable[str],
    spec: dict[str, Any],
) -> list[tuple[str, dict[str, Any]]]:
    """Concatenate the sorted paths of every member resource."""
    resource_paths: list[tuple[str, dict[str, Any]]] = []
    for resource in resource_names:
        resource_paths.extend(get_resource_paths(resource, spec))
    return resource_paths


def build_method_names(
    resource_paths: list[tuple[str, dict[str, Any]]],
    spec: dict[str, Any],
) -> dict[MethodKey, str]:
    """Generate candidate names for every operation, then make them unique."""
    candidates: dict[MethodKey, str] = {}
    for path, path_item in resource_paths:
        for method in get_http_methods(path_item):
            candidates[(path, method)] = generate_method_name(path, method, spec)
    return ensure_unique_method_names(candidates)


def get_generated_methods(
    resource_names: str | Iterable[str],
    spec: dict[str, Any],
) -> list[dict[str, str]]:
    """Return the manifest of generated methods for one unit.

    Accepts a single resource name or every resource of a unit. Unknown
    resources yield an empty list.
    """
    if isinstance(resource_names, str):
        resource_names = [resource_names]
    resource_paths = collect_resource_paths(resource_names, spec)
    final_names = build_method_names(resource_paths, spec)

    methods = []
    for path, path_item in resource_paths:
        for method in get_http_methods(path_item):
            methods.append({
                "name": final_names[(path, method)],
                "path": path,
                "method": method,
                "content_type": get_content_type(path, method, spec),
            })
    return methods


def build_unit_context(
    unit_name: str,
    resource_names: list[str],
    spec: dict[str, Any],
) -> dict[str, Any] | None:
    """Build the template context for one emitted unit.

    Returns None when the unit has nothing to emit.
    """
    methods = get_generated_methods(resource_names, spec)
    if not methods:
        logger.warning(f"No operations found for {', '.join(resource_names) or unit_name}; skipping")
        return None

    class_name, file_name = unit_names(unit_name)
    info = spec.get("info") or {}
    return {
        "unit_name": unit_name,
        "class_name": class_name,
        "file_name": file_name,
        "resources": list(resource_names),
        "methods": methods,
        "api_title": info.get("title", "API"),
        "api_version": info.get("version", "unknown"),
    }


def build_context(spec: dict[str, Any], resources: Iterable[str]) -> dict[str, Any]:
    """Build the full template context for every unit."""
    units = []
    taken: set[str] = set()
    for unit_name, members in group_resources(resources).items():
        unit = build_unit_context(unit_name, members, spec)
        if unit is not None:
            _claim_unit_names(unit, taken)
            units.append(unit)

    info = spec.get("info") or {}
    return {
        "units": units,
        "unit_count": len(units),
        "method_count": sum(len(u["methods"]) for u in units),
        "api_title": info.get("title", "API"),
        "api_version": info.get("version", "unknown"),
    }
