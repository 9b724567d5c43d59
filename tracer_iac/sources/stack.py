"""
Pulumi stack config override source.

Reads declared parameters from the stack's config file
(e.g. `pulumi config set vpc_id vpc-123`).
"""

from pathlib import Path
from typing import Any, Protocol

import pulumi

from tracer_iac.exceptions import TypeMismatch
from tracer_iac.schema.resolver import ConfigurationSchema
from tracer_iac.schema.types import ParameterType, describe_value_type, matches
from tracer_iac.utils.logger import get_logger

logger = get_logger(__name__)


class StackConfig(Protocol):
    """Subset of pulumi.Config used for reading overrides."""

    def get(self, key: str) -> str | None: ...

    def get_object(self, key: str) -> Any: ...


def stack_overrides(
    schema: ConfigurationSchema,
    config: StackConfig | None = None,
) -> dict[str, Any]:
    """
    Collect overrides from Pulumi stack config.

    Args:
        schema: Schema whose parameter names are looked up
        config: Config to read from; defaults to pulumi.Config()

    Returns:
        dict[str, Any]: Overrides for keys present in the stack config

    Raises:
        TypeMismatch: A list parameter is not valid JSON
    """
    config = config if config is not None else pulumi.Config()
    overrides: dict[str, Any] = {}

    for name, declaration in schema.items():
        if declaration.type is ParameterType.LIST_OF_STRING:
            try:
                value = config.get_object(name)
            except pulumi.ConfigTypeError as exc:
                raise TypeMismatch(name, declaration.type.value, "string") from exc
        else:
            value = config.get(name)

        if value is not None:
            overrides[name] = value

    if overrides:
        logger.debug("Stack config overrides: %s", sorted(overrides))
    return overrides


def stack_variable_files(
    config: StackConfig | None = None,
    key: str = "variable_files",
) -> list[Path]:
    """
    Read extra variable file paths listed in stack config.

    Args:
        config: Config to read from; defaults to pulumi.Config()
        key: Config key holding a JSON array of paths

    Returns:
        list[Path]: Listed paths, empty when the key is unset

    Raises:
        TypeMismatch: The key is not a JSON array of strings
    """
    config = config if config is not None else pulumi.Config()
    try:
        value = config.get_object(key)
    except pulumi.ConfigTypeError as exc:
        raise TypeMismatch(key, ParameterType.LIST_OF_STRING.value, "string") from exc

    if value is None:
        return []
    if not matches(value, ParameterType.LIST_OF_STRING):
        raise TypeMismatch(key, ParameterType.LIST_OF_STRING.value, describe_value_type(value))
    return [Path(p) for p in value]
