"""Pick one MIME type per operation from the types the schema declares.

Request bodies win over responses. PATCH uses merge-patch when the server
advertises it. Collection GETs prefer JSON-LD (pagination and filtering
metadata), everything else prefers plain JSON.
"""

from __future__ import annotations

from typing import Any

from .loader import get_paths

JSON = "application/json"
JSON_LD = "application/ld+json"
MERGE_PATCH = "application/merge-patch+json"

DEFAULT_CONTENT_TYPE = JSON


def _first_declared(content_types: list[str], *preferred: str) -> str:
    for content_type in preferred:
        if content_type in content_types:
            return content_type
    return content_types[0]


def is_collection_path(path: str) -> bool:
    """A path without an {id} token addresses a collection."""
    return "{id}" not in path


def get_content_type(path: str, method: str, schema: dict[str, Any]) -> str:
    """Get the content type for a path and method from the OpenAPI schema."""
    path_item = get_paths(schema).get(path) or {}
    operation = path_item.get(method)
    if not isinstance(operation, dict):
        return DEFAULT_CONTENT_TYPE

    request_content = list((operation.get("requestBody") or {}).get("content") or {})
    if request_content:
        if method == "patch" and MERGE_PATCH in request_content:
            return MERGE_PATCH
        return _first_declared(request_content, JSON, JSON_LD)

    responses = operation.get("responses") or {}
    # YAML loads an unquoted 200 status as an int.
    success = responses.get("200") or responses.get(200) or {}
    response_content = list(success.get("content") or {})
    if response_content:
        if method == "get" and is_collection_path(path):
            for content_type in (JSON_LD, JSON):
                if content_type in response_content:
                    return content_type
        return _first_declared(response_content, JSON, JSON_LD)

    return DEFAULT_CONTENT_TYPE
