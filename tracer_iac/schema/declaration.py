"""
Parameter declaration dataclass.

A declaration is one named, typed input slot with an optional default.
Declarations are frozen: they are authored once and never mutated.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Final

from tracer_iac.exceptions import SchemaError
from tracer_iac.schema.types import ParameterType, describe_value_type, matches


class _NoDefault:
    """Marker for a declaration without a default (distinct from None)."""

    _instance = None

    def __new__(cls) -> "_NoDefault":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT: Final = _NoDefault()

_NAME_PATTERN: Final = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class ParameterDeclaration:
    """
    Declaration of a single stack parameter.

    Attributes:
        name: Unique identifier, key in the schema mapping
        description: Human-readable documentation string
        type: Declared type; string when not given
        default: Default value, or NO_DEFAULT when the caller must supply one
    """
    name: str
    description: str = ""
    type: ParameterType = ParameterType.STRING
    default: Any = field(default=NO_DEFAULT)

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "type", ParameterType(self.type))
        except ValueError as exc:
            raise SchemaError(
                f"Unsupported type for {self.name}: {self.type!r}",
                name=self.name,
            ) from exc
        if not _NAME_PATTERN.match(self.name):
            raise SchemaError(f"Invalid parameter name: {self.name!r}", name=self.name)
        if self.has_default and not matches(self.default, self.type):
            raise SchemaError(
                f"Default for {self.name} does not match type {self.type.value}",
                name=self.name,
                details={"actual": describe_value_type(self.default)},
            )
        # Lists are stored as tuples so the frozen declaration stays immutable
        if self.type is ParameterType.LIST_OF_STRING and self.has_default:
            object.__setattr__(self, "default", tuple(self.default))

    @property
    def has_default(self) -> bool:
        """Check whether a default value is declared."""
        return self.default is not NO_DEFAULT

    @property
    def required(self) -> bool:
        """A parameter without a default must be supplied by the caller."""
        return not self.has_default
