"""
Parameter schema for stack configuration.

Provides typed parameter declarations, the resolving schema and the
tracer database stack variables.
"""

from tracer_iac.schema.declaration import NO_DEFAULT, ParameterDeclaration
from tracer_iac.schema.resolver import ConfigurationSchema
from tracer_iac.schema.types import ParameterType
from tracer_iac.schema.variables import DATABASE_STACK_VARIABLES

__all__ = [
    "NO_DEFAULT",
    "ParameterDeclaration",
    "ParameterType",
    "ConfigurationSchema",
    "DATABASE_STACK_VARIABLES",
]
