"""CLI entry point for resourcegen."""

from pathlib import Path

import click

from resourcegen import __version__
from resourcegen.config import (
    DEFAULT_BASE_URL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_RUNTIME_IMPORT,
    DEFAULT_SCHEMA_PATH,
    DEFAULT_TOKEN_ENV_VAR,
    GeneratorConfig,
)
from resourcegen.errors import ResourcegenError
from resourcegen.gen_logging import configure_logging
from resourcegen.generator import generate_from_config


def _banner(config: GeneratorConfig) -> str:
    lines = [
        f"Schema: {config.schema_path}",
        f"Output: {config.output_dir}",
        f"Runtime: {config.runtime_import}",
        f"Types: {'Yes' if config.generate_types else 'No'}",
    ]
    if config.generate_types:
        lines.append(f"Types Output: {config.resolved_types_output_path}")
    if config.api_prefix:
        lines.append(f"API Prefix: {config.api_prefix}")
    return "\n".join(lines)


def _print_tree(summaries: list[dict]) -> None:
    """Print generated files and their methods as a tree."""
    for file_index, summary in enumerate(summaries):
        is_last = file_index == len(summaries) - 1
        click.echo(f"{'└──' if is_last else '├──'} {click.style(summary['file_name'], fg='cyan')}")

        methods = summary["methods"]
        for method_index, method in enumerate(methods):
            indent = "    " if is_last else "│   "
            marker = "└──" if method_index == len(methods) - 1 else "├──"
            click.echo(f"{indent}{marker} {method['name']}")


@click.group()
@click.version_option(__version__, prog_name="resourcegen")
def main():
    """resourcegen: generate per-resource API accessors from OpenAPI schemas."""
    pass


@main.command()
@click.option("-s", "--schema", "schema_path", default=DEFAULT_SCHEMA_PATH, show_default=True, envvar="RESOURCEGEN_SCHEMA", type=click.Path(path_type=Path), help="Path to the OpenAPI schema file (JSON or YAML).")
@click.option("-o", "--output", "output_dir", default=DEFAULT_OUTPUT_DIR, show_default=True, envvar="RESOURCEGEN_OUTPUT", type=click.Path(file_okay=False, path_type=Path), help="Output directory for generated modules.")
@click.option("-t", "--types", "generate_types", is_flag=True, default=False, envvar="RESOURCEGEN_TYPES", help="Also generate models with datamodel-codegen.")
@click.option("--types-output", type=click.Path(dir_okay=False, path_type=Path), default=None, envvar="RESOURCEGEN_TYPES_OUTPUT", help="Output path for generated models (default: <output>/models.py).")
@click.option("--runtime-import", default=DEFAULT_RUNTIME_IMPORT, show_default=True, envvar="RESOURCEGEN_RUNTIME_IMPORT", help="Module the generated code imports ApiClient from.")
@click.option("--api-prefix", default="", envvar="RESOURCEGEN_API_PREFIX", help="Default API path prefix for the generated client.")
@click.option("--base-url", default=DEFAULT_BASE_URL, show_default=True, envvar="RESOURCEGEN_BASE_URL", help="Default base URL for the generated client.")
@click.option("--token-env-var", default=DEFAULT_TOKEN_ENV_VAR, show_default=True, envvar="RESOURCEGEN_TOKEN_ENV_VAR", help="Environment variable the generated client reads its token from.")
@click.option("--manifest", "manifest_path", type=click.Path(dir_okay=False, path_type=Path), default=None, envvar="RESOURCEGEN_MANIFEST", help="Write a JSON manifest of generated methods.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
def generate(
    schema_path: Path,
    output_dir: Path,
    generate_types: bool,
    types_output: Path | None,
    runtime_import: str,
    api_prefix: str,
    base_url: str,
    token_env_var: str,
    manifest_path: Path | None,
    verbose: bool,
    quiet: bool,
):
    """Generate accessor modules from an OpenAPI schema."""
    configure_logging(verbose=verbose, quiet=quiet)

    config = GeneratorConfig(
        schema_path=schema_path.resolve(),
        output_dir=output_dir.resolve(),
        runtime_import=runtime_import,
        api_prefix=api_prefix,
        base_url=base_url,
        token_env_var=token_env_var,
        generate_types=generate_types,
        types_output_path=types_output.resolve() if types_output else None,
        manifest_path=manifest_path,
    )

    if not config.schema_path.exists():
        raise click.ClickException(f"Schema file not found at: {config.schema_path}")

    if not quiet:
        click.echo(_banner(config))
        click.echo()

    try:
        summaries = generate_from_config(config)
    except ResourcegenError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Generated {len(summaries)} modules:")
    _print_tree(summaries)


@main.command()
def init():
    """Show how to get started."""
    click.echo("To generate accessors, run:")
    click.echo(f"  resourcegen generate --schema {DEFAULT_SCHEMA_PATH} --output {DEFAULT_OUTPUT_DIR}")
    click.echo("Then, in your code:")
    click.echo("  from api_client import create_client, TasksApi")
    click.echo("  tasks = TasksApi(create_client())")
