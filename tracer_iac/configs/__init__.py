"""
Configuration module for the tracer database stack.

Provides the resolved config dataclass, constants and environment settings.
Load a config with tracer_iac.configs.environment.get_config().
"""

from tracer_iac.configs.base import DatabaseStackConfig
from tracer_iac.configs.constants import (
    ENV_FILE,
    ENV_PREFIX,
    OUTPUTS_ENV_FILE,
)
from tracer_iac.configs.settings import BaseSettings, VariableEnvironment

__all__ = [
    "DatabaseStackConfig",
    "ENV_FILE",
    "ENV_PREFIX",
    "OUTPUTS_ENV_FILE",
    "BaseSettings",
    "VariableEnvironment",
]
