"""
Environment settings for stack parameter overrides.

Reads TF_VAR_<name> variables (and a .env file) through Pydantic Settings.
List parameters are JSON encoded, e.g. TF_VAR_subnet_ids='["subnet-a"]'.

Dependencies: pydantic, pydantic_settings
System role: Environment-variable source for parameter overrides
"""

import json
from typing import Any, Optional, get_args, get_origin

from pydantic import Field, ValidationInfo, create_model, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

from tracer_iac.configs.constants import ENV_FILE, ENV_PREFIX
from tracer_iac.schema.resolver import ConfigurationSchema


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _is_list_annotation(annotation: Any) -> bool:
    if get_origin(annotation) is list:
        return True
    return any(get_origin(arg) is list for arg in get_args(annotation))


class VariableEnvironment(BaseSettings):
    """
    Base for environment models generated from a parameter schema.

    Every field is optional: unset variables are simply not overrides.
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        enable_decoding=False,
    )

    @field_validator("*", mode="before")
    @classmethod
    def decode_list_values(cls, value: Any, info: ValidationInfo) -> Any:
        """Decode JSON-encoded list parameters."""
        annotation = cls.model_fields[info.field_name].annotation
        if isinstance(value, str) and _is_list_annotation(annotation):
            try:
                return json.loads(value)
            except json.JSONDecodeError as exc:
                raise ValueError(f"not a JSON list: {exc.msg}") from exc
        return value


def build_environment_model(schema: ConfigurationSchema) -> type[VariableEnvironment]:
    """
    Build a settings model with one optional field per declared parameter.

    Args:
        schema: ConfigurationSchema to mirror

    Returns:
        type[VariableEnvironment]: Settings class reading TF_VAR_ variables
    """
    fields = {
        name: (
            Optional[declaration.type.annotation],
            Field(default=None, description=declaration.description),
        )
        for name, declaration in schema.items()
    }
    return create_model(
        "StackVariableEnvironment",
        __base__=VariableEnvironment,
        **fields,
    )
