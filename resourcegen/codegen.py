"""Render templates and write generated output.

Takes the context from context_builder and writes one accessor module per
unit, plus client.py and __init__.py, into the output directory.
"""

from __future__ import annotations

import keyword
from pathlib import Path
from typing import Any

import jinja2

from .config import DEFAULT_RUNTIME_IMPORT, GeneratorConfig
from .gen_logging import get_logger

logger = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _is_valid_attribute(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["pyrepr"] = repr
    env.tests["valid_attribute"] = _is_valid_attribute
    return env


def render_unit(unit: dict[str, Any] | None, runtime_import: str = DEFAULT_RUNTIME_IMPORT) -> str:
    """Render one accessor module; empty string when there is nothing to emit."""
    if not unit or not unit.get("methods"):
        return ""
    template = _environment().get_template("unit.py.j2")
    return template.render(runtime_import=runtime_import, **unit)


def render_client(context: dict[str, Any], config: GeneratorConfig) -> str:
    template = _environment().get_template("client.py.j2")
    return template.render(
        api_title=context["api_title"],
        runtime_import=config.runtime_import,
        base_url=config.base_url,
        api_prefix=config.api_prefix,
        token_env_var=config.token_env_var,
    )


def render_package_init(context: dict[str, Any]) -> str:
    template = _environment().get_template("__init__.py.j2")
    return template.render(**context)


def generate(context: dict[str, Any], config: GeneratorConfig) -> list[Path]:
    """Write every unit module plus client.py and __init__.py.

    Existing files are overwritten. Returns the written unit module paths.
    """
    output_dir = Path(config.output_dir)
    if not output_dir.exists():
        output_dir.mkdir(parents=True)
        logger.info(f"Created output directory: {output_dir}")

    (output_dir / "client.py").write_text(render_client(context, config), encoding="utf-8")
    logger.debug("Wrote client.py")

    written: list[Path] = []
    emitted_units = []
    for unit in context["units"]:
        output = render_unit(unit, config.runtime_import)
        if not output:
            logger.warning(f"Nothing to emit for {unit['unit_name']}; skipping")
            continue
        output_path = output_dir / unit["file_name"]
        output_path.write_text(output, encoding="utf-8")
        logger.debug(f"Wrote {output_path.name} ({len(unit['methods'])} methods)")
        written.append(output_path)
        emitted_units.append(unit)

    package_init = render_package_init(dict(context, units=emitted_units))
    (output_dir / "__init__.py").write_text(package_init, encoding="utf-8")

    logger.info(f"Generated {len(written)} modules in {output_dir} ({context['method_count']} methods)")
    return written
