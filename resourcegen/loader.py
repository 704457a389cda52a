"""Load and validate an OpenAPI document.

Reads JSON or YAML from disk and checks the few top-level fields the
generator relies on. Nothing beyond that is validated.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import SpecError
from .gen_logging import get_logger

logger = get_logger(__name__)


def load_spec(path: Path | str) -> dict[str, Any]:
    """Load the OpenAPI spec from disk."""
    spec_file = Path(path)
    if not spec_file.is_file():
        raise SpecError(f"OpenAPI schema file not found at {spec_file}")

    logger.info(f"Reading OpenAPI schema from: {spec_file}")
    text = spec_file.read_text(encoding="utf-8")
    try:
        if spec_file.suffix.lower() == ".json":
            spec = json.loads(text)
        else:
            # YAML is a superset of JSON, so this also covers unknown suffixes.
            spec = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SpecError(f"Could not parse OpenAPI schema {spec_file}: {exc}") from exc

    if not isinstance(spec, dict):
        raise SpecError(f"Invalid OpenAPI schema: {spec_file} does not contain a mapping")
    return spec


def validate_spec(spec: dict[str, Any]) -> None:
    """Fail fast on documents the generator cannot work with."""
    version = spec.get("openapi") or spec.get("swagger")
    if not version:
        raise SpecError('Invalid OpenAPI schema: missing "openapi" field')

    paths = spec.get("paths")
    if not isinstance(paths, dict) or not paths:
        raise SpecError("Invalid OpenAPI schema: no paths defined")

    info = spec.get("info") or {}
    logger.info(f"OpenAPI version: {version}")
    logger.info(f"API title: {info.get('title', 'Unknown')}")
    logger.info(f"API version: {info.get('version', 'Unknown')}")


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Return the paths mapping, empty when the document has none."""
    return spec.get("paths") or {}
