"""
Stack configuration loader.

Collects overrides from every source and resolves them against the
database stack variables.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from tracer_iac.configs.base import DatabaseStackConfig
from tracer_iac.schema.variables import DATABASE_STACK_VARIABLES
from tracer_iac.sources import StackConfig, collect_overrides
from tracer_iac.utils.logger import get_logger

logger = get_logger(__name__)


def get_config(
    overrides: Mapping[str, Any] | None = None,
    variable_files: Iterable[str | Path] = (),
    stack_config: StackConfig | None = None,
    use_stack_config: bool = True,
    use_environment: bool = True,
    env_file: str | Path | None = None,
) -> DatabaseStackConfig:
    """
    Load the database stack configuration.

    Returns:
        DatabaseStackConfig: Validated configuration object

    Raises:
        MissingRequiredParameter: If vpc_id or security_group_ids is not supplied
        TypeMismatch: If a supplied value has the wrong shape
        UnknownParameter: If an explicit override is not a declared parameter
        VariableFileError: If a variable file cannot be loaded
    """
    merged = collect_overrides(
        DATABASE_STACK_VARIABLES,
        overrides=overrides,
        variable_files=variable_files,
        stack_config=stack_config,
        use_stack_config=use_stack_config,
        use_environment=use_environment,
        env_file=env_file,
    )
    config = DatabaseStackConfig.from_resolved(DATABASE_STACK_VARIABLES.resolve(merged))

    logger.info(
        "Resolved database stack config: region=%s instance_class=%s vpc=%s",
        config.region,
        config.db_instance_class,
        config.vpc_id,
    )
    return config
