"""
Override sources for stack parameters.

Sources are layered with Terraform precedence, later wins:
environment < variable files < Pulumi stack config < explicit overrides.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from tracer_iac.schema.resolver import ConfigurationSchema
from tracer_iac.sources.environment import environment_overrides
from tracer_iac.sources.files import (
    discover_variable_files,
    file_overrides,
    load_variable_file,
)
from tracer_iac.sources.stack import StackConfig, stack_overrides, stack_variable_files


def collect_overrides(
    schema: ConfigurationSchema,
    overrides: Mapping[str, Any] | None = None,
    variable_files: Iterable[str | Path] = (),
    stack_config: StackConfig | None = None,
    use_stack_config: bool = True,
    use_environment: bool = True,
    env_file: str | Path | None = None,
) -> dict[str, Any]:
    """
    Merge overrides from every enabled source.

    Args:
        schema: Schema the overrides are collected for
        overrides: Explicit caller overrides (highest precedence)
        variable_files: Variable files in precedence order
        stack_config: Config object for stack overrides; defaults to pulumi.Config()
        use_stack_config: Read Pulumi stack config
        use_environment: Read TF_VAR_ environment variables
        env_file: Dotenv file for the environment source

    Returns:
        dict[str, Any]: Merged overrides, ready for ConfigurationSchema.resolve()
    """
    layers: list[Mapping[str, Any]] = []
    if use_environment:
        layers.append(environment_overrides(schema, env_file=env_file))
    layers.append(file_overrides(schema, variable_files))
    if use_stack_config:
        layers.append(stack_overrides(schema, stack_config))
    layers.append(overrides or {})

    merged: dict[str, Any] = {}
    for layer in layers:
        # None means "not supplied" and must not mask a lower layer
        merged.update({k: v for k, v in layer.items() if v is not None})
    return merged


__all__ = [
    "collect_overrides",
    "discover_variable_files",
    "environment_overrides",
    "file_overrides",
    "load_variable_file",
    "stack_overrides",
    "stack_variable_files",
    "StackConfig",
]
