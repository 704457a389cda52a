"""Exceptions raised by the generator.

Library code raises these; only the CLI turns them into process exits.
"""

from __future__ import annotations


class ResourcegenError(Exception):
    """Base class for every error raised by resourcegen."""


class ConfigError(ResourcegenError):
    """Required configuration is missing or inconsistent."""


class SpecError(ResourcegenError):
    """The OpenAPI document is missing, unparsable or structurally invalid."""


class GenerationError(ResourcegenError):
    """Generation cannot produce any output."""
