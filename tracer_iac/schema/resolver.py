"""
Configuration schema and override resolution.

Resolution merges caller overrides with declared defaults:
1. An override (not None) wins after it is type-checked
2. Otherwise the declared default is used
3. Otherwise resolution fails with MissingRequiredParameter

Resolution is a pure function of the schema and the overrides.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from tracer_iac.exceptions import (
    MissingRequiredParameter,
    SchemaError,
    StackConfigError,
    TypeMismatch,
    UnknownParameter,
)
from tracer_iac.schema.declaration import ParameterDeclaration
from tracer_iac.schema.types import describe_value_type, matches, normalize
from tracer_iac.utils.logger import get_logger

logger = get_logger(__name__)


class ConfigurationSchema(Mapping[str, ParameterDeclaration]):
    """
    Ordered, read-only mapping of parameter name to declaration.

    Provides resolve() for producing final parameter values.
    """

    def __init__(self, declarations: Iterable[ParameterDeclaration]) -> None:
        self._declarations: dict[str, ParameterDeclaration] = {}
        for declaration in declarations:
            if declaration.name in self._declarations:
                raise SchemaError(
                    f"Duplicate parameter declaration: {declaration.name}",
                    name=declaration.name,
                )
            self._declarations[declaration.name] = declaration

    def __getitem__(self, name: str) -> ParameterDeclaration:
        return self._declarations[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f"ConfigurationSchema({list(self._declarations)})"

    @property
    def required(self) -> list[str]:
        """Names of parameters the caller must supply."""
        return [d.name for d in self._declarations.values() if d.required]

    @property
    def optional(self) -> list[str]:
        """Names of parameters with a declared default."""
        return [d.name for d in self._declarations.values() if d.has_default]

    def resolve_parameter(self, name: str, overrides: Mapping[str, Any]) -> Any:
        """
        Resolve a single declared parameter.

        Args:
            name: Declared parameter name
            overrides: Caller-supplied values by name

        Returns:
            Resolved value (lists are fresh copies)

        Raises:
            MissingRequiredParameter: No override and no default
            TypeMismatch: Override shape disagrees with the declared type
        """
        declaration = self._declarations[name]
        value = overrides.get(name)

        if value is not None:
            if not matches(value, declaration.type):
                raise TypeMismatch(
                    name,
                    declaration.type.value,
                    describe_value_type(value),
                )
            return normalize(value, declaration.type)

        if declaration.has_default:
            return normalize(declaration.default, declaration.type)

        raise MissingRequiredParameter(name)

    def resolve(self, overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """
        Resolve every declared parameter against caller overrides.

        Args:
            overrides: Caller-supplied values by name

        Returns:
            dict[str, Any]: Final values in declaration order

        Raises:
            UnknownParameter: An override names an undeclared parameter
            MissingRequiredParameter: A required parameter was not supplied
            TypeMismatch: An override has the wrong shape
        """
        overrides = overrides or {}
        self._reject_unknown(overrides)

        resolved = {name: self.resolve_parameter(name, overrides) for name in self._declarations}
        logger.debug("Resolved %d parameters", len(resolved))
        return resolved

    def validate(self, overrides: Mapping[str, Any] | None = None) -> list[StackConfigError]:
        """
        Collect every resolution error instead of stopping at the first.

        Returns:
            list[StackConfigError]: Errors in declaration order, empty if valid
        """
        overrides = overrides or {}
        errors: list[StackConfigError] = [
            UnknownParameter(name) for name in overrides if name not in self._declarations
        ]
        for name in self._declarations:
            try:
                self.resolve_parameter(name, overrides)
            except (MissingRequiredParameter, TypeMismatch) as exc:
                errors.append(exc)
        return errors

    def describe(self) -> list[dict[str, Any]]:
        """
        Summarize declarations as table rows.

        Returns:
            list[dict]: One row per parameter with name, type, default, required
        """
        return [
            {
                "name": d.name,
                "type": d.type.value,
                "default": normalize(d.default, d.type) if d.has_default else None,
                "required": d.required,
                "description": d.description,
            }
            for d in self._declarations.values()
        ]

    def _reject_unknown(self, overrides: Mapping[str, Any]) -> None:
        for name in overrides:
            if name not in self._declarations:
                raise UnknownParameter(name)
