"""
Exception hierarchy for tracer stack configuration.

Every failure here is a validation failure raised before any downstream
provisioning step runs. Exceptions carry a details dict for logging.

Dependencies: None (pure domain layer)
System role: Centralized error types for schema declaration and resolution
"""

from pathlib import Path
from typing import Any


class StackConfigError(Exception):
    """Base exception for all stack configuration errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class SchemaError(StackConfigError):
    """Raised when a parameter declaration or schema is malformed."""

    def __init__(
        self,
        message: str,
        name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize schema error.

        Args:
            message: Error message
            name: Parameter name the error refers to
            details: Additional context
        """
        details = details or {}
        if name:
            details["name"] = name
        super().__init__(message, details)


class MissingRequiredParameter(StackConfigError):
    """Raised when a parameter has neither an override nor a default."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"No value for required parameter: {name}",
            {"name": name},
        )


class TypeMismatch(StackConfigError):
    """Raised when an override does not match the declared parameter type."""

    def __init__(self, name: str, expected: str, actual: str) -> None:
        """
        Initialize type mismatch error.

        Args:
            name: Parameter name
            expected: Declared type (e.g. 'string', 'list(string)')
            actual: Type name of the supplied value (e.g. 'integer')
        """
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid value for parameter {name}: expected {expected}, got {actual}",
            {"name": name, "expected": expected, "actual": actual},
        )


class UnknownParameter(StackConfigError):
    """Raised when an explicit override names an undeclared parameter."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Value for undeclared parameter: {name}",
            {"name": name},
        )


class VariableFileError(StackConfigError):
    """Raised when a variable file cannot be loaded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        """
        Initialize variable file error.

        Args:
            path: Path of the variable file
            reason: Why loading failed
        """
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            f"Cannot load variable file {self.path}: {reason}",
            {"path": str(self.path)},
        )
