"""
Environment override source.

Reads TF_VAR_<name> variables for every declared parameter.
"""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tracer_iac.configs.settings import build_environment_model
from tracer_iac.exceptions import TypeMismatch
from tracer_iac.schema.resolver import ConfigurationSchema
from tracer_iac.schema.types import describe_value_type
from tracer_iac.utils.logger import get_logger

logger = get_logger(__name__)


def environment_overrides(
    schema: ConfigurationSchema,
    env_file: str | Path | None = None,
) -> dict[str, Any]:
    """
    Collect overrides from TF_VAR_ environment variables.

    Args:
        schema: Schema whose parameter names are looked up
        env_file: Dotenv file to read; defaults to .env in the working directory

    Returns:
        dict[str, Any]: Overrides for parameters that are set

    Raises:
        TypeMismatch: A variable cannot be decoded into its declared type
    """
    model = build_environment_model(schema)
    kwargs: dict[str, Any] = {}
    if env_file is not None:
        kwargs["_env_file"] = env_file

    try:
        settings = model(**kwargs)
    except ValidationError as exc:
        error = exc.errors()[0]
        name = str(error["loc"][0])
        actual = describe_value_type(error.get("input"))
        # A deeper loc points at the first bad element of a decoded list
        if len(error["loc"]) > 1:
            actual = f"list({actual})"
        raise TypeMismatch(name, schema[name].type.value, actual) from exc

    overrides = settings.model_dump(exclude_none=True)
    if overrides:
        logger.debug("Environment overrides: %s", sorted(overrides))
    return overrides
