"""
Env file writer for resolved stack values.

Hands resolved values to tools that read KEY=value files.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from tracer_iac.utils.logger import get_logger

logger = get_logger(__name__)


def format_env_value(value: Any) -> str:
    """Render a value for an env file (sequences are comma-joined)."""
    if isinstance(value, Sequence) and not isinstance(value, str):
        return ",".join(str(item) for item in value)
    return str(value)


def write_outputs_to_env(
    outputs: Mapping[str, Any],
    filename: str | Path,
) -> Path:
    """
    Write outputs to an env file, one upper-cased KEY=value per line.

    Args:
        outputs: Output values by name
        filename: Destination file path

    Returns:
        Path: Path of the written file
    """
    path = Path(filename)
    lines = [f"{key.upper()}={format_env_value(value)}" for key, value in outputs.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    logger.info("Wrote %d values to %s", len(lines), path)
    return path
