"""Run the whole generation pipeline for one configuration.

load -> validate -> (types) -> resources -> context -> files -> manifest
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .codegen import generate
from .config import GeneratorConfig
from .context_builder import build_context
from .errors import GenerationError
from .gen_logging import get_logger
from .loader import load_spec, validate_spec
from .resource_parser import extract_resources
from .typegen import generate_types

logger = get_logger(__name__)


def _summaries(context: dict[str, Any]) -> list[dict[str, Any]]:
    return [
        {
            "file_name": unit["file_name"],
            "class_name": unit["class_name"],
            "resources": unit["resources"],
            "methods": unit["methods"],
        }
        for unit in context["units"]
    ]


def write_manifest(summaries: list[dict[str, Any]], manifest_path: Path) -> None:
    """Write the generated-method manifest as JSON."""
    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    manifest_path.write_text(json.dumps(summaries, indent=2) + "\n", encoding="utf-8")
    logger.info(f"Wrote manifest to {manifest_path}")


def generate_from_config(config: GeneratorConfig) -> list[dict[str, Any]]:
    """Generate accessor modules and return one summary per written unit."""
    config.validate()

    spec = load_spec(config.schema_path)
    validate_spec(spec)

    if config.generate_types:
        logger.info("Generating types...")
        generate_types(config.schema_path, config.resolved_types_output_path)

    resources = extract_resources(spec)
    if not resources:
        raise GenerationError("No API resources found in the schema")
    logger.info(f"Found {len(resources)} resources: {', '.join(sorted(resources))}")

    context = build_context(spec, resources)
    generate(context, config)

    summaries = _summaries(context)
    if config.manifest_path is not None:
        write_manifest(summaries, config.manifest_path)
    return summaries
