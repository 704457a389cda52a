"""Generate strict model types with the external datamodel-codegen tool."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from .errors import GenerationError
from .gen_logging import get_logger

logger = get_logger(__name__)

TYPEGEN_EXECUTABLE = "datamodel-codegen"


def _typegen_exe() -> str:
    exe = shutil.which(TYPEGEN_EXECUTABLE)
    if exe is None:
        raise GenerationError(
            f"{TYPEGEN_EXECUTABLE} not found; install it with "
            "`pip install resourcegen[types]` to generate types"
        )
    return exe


def generate_types(schema_path: Path, output_path: Path) -> Path:
    """Write pydantic models for the schema to output_path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = [
        _typegen_exe(),
        "--input",
        str(schema_path),
        "--input-file-type",
        "openapi",
        "--output",
        str(output_path),
    ]
    logger.debug(" ".join(cmd))
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise GenerationError(f"Failed to generate types: {detail}") from exc

    logger.info(f"Generated types at {output_path}")
    return output_path
