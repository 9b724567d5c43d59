"""
Parameter type model and value shape checks.

Only the two shapes used by the database stack are supported:
plain strings and lists of strings.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class ParameterType(str, Enum):
    """Declared type of a stack parameter, spelled the way Terraform spells it."""

    STRING = "string"
    LIST_OF_STRING = "list(string)"

    @property
    def annotation(self) -> Any:
        """Python annotation used when building settings models."""
        if self is ParameterType.LIST_OF_STRING:
            return list[str]
        return str


def describe_value_type(value: Any) -> str:
    """
    Name the type of a value using the schema's vocabulary.

    Args:
        value: Any caller-supplied value

    Returns:
        Type name such as 'string', 'integer' or 'list(integer)'
    """
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, Sequence):
        for item in value:
            if not isinstance(item, str):
                return f"list({describe_value_type(item)})"
        return "list(string)"
    return type(value).__name__


def matches(value: Any, param_type: ParameterType) -> bool:
    """Check that a value has the shape of the declared type."""
    if param_type is ParameterType.STRING:
        return isinstance(value, str)
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    return all(isinstance(item, str) for item in value)


def normalize(value: Any, param_type: ParameterType) -> Any:
    """Return a fresh copy of a checked value (lists become new lists)."""
    if param_type is ParameterType.LIST_OF_STRING:
        return list(value)
    return value
