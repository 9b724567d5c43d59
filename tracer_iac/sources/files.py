"""
Variable file override source.

Loads overrides from JSON (terraform.tfvars.json style) or YAML files.
The top level of a variable file must be a mapping of name to value.
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from tracer_iac.configs.constants import (
    AUTO_VARIABLE_FILE_GLOB,
    DEFAULT_VARIABLE_FILE,
    VARIABLE_FILE_FORMATS,
)
from tracer_iac.exceptions import VariableFileError
from tracer_iac.schema.resolver import ConfigurationSchema
from tracer_iac.utils.logger import get_logger

logger = get_logger(__name__)


def load_variable_file(path: str | Path) -> dict[str, Any]:
    """
    Parse a variable file.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        dict[str, Any]: Values by parameter name

    Raises:
        VariableFileError: Missing file, unknown format, parse error
            or a top level that is not a mapping
    """
    path = Path(path)
    if not path.is_file():
        raise VariableFileError(path, "file not found")

    file_format = VARIABLE_FILE_FORMATS.get(path.suffix.lower())
    if file_format is None:
        raise VariableFileError(path, f"unsupported format '{path.suffix}'")

    text = path.read_text(encoding="utf-8")
    try:
        if file_format == "json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise VariableFileError(path, f"invalid {file_format}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise VariableFileError(path, "top level must be a mapping")
    return data


def discover_variable_files(directory: str | Path) -> list[Path]:
    """
    Find variable files loaded automatically from a directory.

    terraform.tfvars.json comes first, then *.auto.tfvars.json in lexical order.
    """
    directory = Path(directory)
    found: list[Path] = []

    default_file = directory / DEFAULT_VARIABLE_FILE
    if default_file.is_file():
        found.append(default_file)
    found.extend(sorted(p for p in directory.glob(AUTO_VARIABLE_FILE_GLOB) if p.is_file()))
    return found


def file_overrides(
    schema: ConfigurationSchema,
    paths: Iterable[str | Path],
) -> dict[str, Any]:
    """
    Merge overrides from variable files; later files win.

    Names the schema does not declare are dropped with a warning.
    Null values are skipped so they do not hide an earlier file.

    Args:
        schema: Schema the values are meant for
        paths: Variable files in precedence order

    Returns:
        dict[str, Any]: Merged overrides
    """
    overrides: dict[str, Any] = {}
    for path in paths:
        for name, value in load_variable_file(path).items():
            if name not in schema:
                logger.warning("Ignoring undeclared parameter %s in %s", name, path)
                continue
            if value is not None:
                overrides[name] = value
        logger.info("Loaded variable file %s", path)
    return overrides
