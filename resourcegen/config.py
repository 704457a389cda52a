"""Generator configuration.

Filled in by the CLI (options or RESOURCEGEN_* environment variables) or
constructed directly when the generator is used as a library.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

DEFAULT_SCHEMA_PATH = "./schema/api.json"
DEFAULT_OUTPUT_DIR = "./api_client"
DEFAULT_RUNTIME_IMPORT = "resourcegen.runtime"
DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TOKEN_ENV_VAR = "API_TOKEN"


@dataclass
class GeneratorConfig:
    schema_path: Path | None
    output_dir: Path | None
    # Module the generated code imports ApiClient from
    runtime_import: str = DEFAULT_RUNTIME_IMPORT
    # Default path prefix baked into the generated client.py
    api_prefix: str = ""
    base_url: str = DEFAULT_BASE_URL
    token_env_var: str = DEFAULT_TOKEN_ENV_VAR
    generate_types: bool = False
    types_output_path: Path | None = None
    manifest_path: Path | None = None

    def __post_init__(self) -> None:
        if self.schema_path is not None:
            self.schema_path = Path(self.schema_path)
        if self.output_dir is not None:
            self.output_dir = Path(self.output_dir)
        if self.types_output_path is not None:
            self.types_output_path = Path(self.types_output_path)
        if self.manifest_path is not None:
            self.manifest_path = Path(self.manifest_path)

    def validate(self) -> None:
        """Raise ConfigError when a required setting is missing."""
        if not self.schema_path:
            raise ConfigError("Schema path is required")
        if not self.output_dir:
            raise ConfigError("Output directory is required")
        if not self.runtime_import:
            raise ConfigError("Runtime import path is required")

    @property
    def resolved_types_output_path(self) -> Path:
        """Where strict types are written; defaults to <output_dir>/models.py."""
        if self.types_output_path is not None:
            return self.types_output_path
        return Path(self.output_dir) / "models.py"
