"""Generate per-resource API accessor modules from OpenAPI schemas."""

from .config import GeneratorConfig
from .content_types import get_content_type
from .context_builder import get_generated_methods
from .errors import ConfigError, GenerationError, ResourcegenError, SpecError
from .generator import generate_from_config
from .method_names import ensure_unique_method_names, generate_method_name
from .naming import to_pascal_case
from .resource_parser import (
    extract_resources,
    get_http_methods,
    get_resource_name,
    get_resource_paths,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "GenerationError",
    "GeneratorConfig",
    "ResourcegenError",
    "SpecError",
    "ensure_unique_method_names",
    "extract_resources",
    "generate_from_config",
    "generate_method_name",
    "get_content_type",
    "get_generated_methods",
    "get_http_methods",
    "get_resource_name",
    "get_resource_paths",
    "to_pascal_case",
]
