"""Exceptions raised by the parameter type registry and its converters."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import re

    from parameter_types.generator import GeneratedExpression
    from parameter_types.parameter_type import ParameterType


class ParameterTypeError(Exception):
    """Base class for all parameter type errors."""

    pass


class DuplicateTypeNameError(ParameterTypeError):
    """Raised when a parameter type name is already registered.

    Attributes:
        name: The conflicting parameter type name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"There is already a parameter type with name {name}")


class AmbiguousPreferenceError(ParameterTypeError):
    """Raised when two preferential parameter types would share a regexp.

    Attributes:
        pattern: The shared regexp.
        existing_name: Name of the preferential type already registered.
        incoming_name: Name of the type whose registration was rejected.
    """

    def __init__(self, pattern: str, existing_name: str, incoming_name: str) -> None:
        self.pattern = pattern
        self.existing_name = existing_name
        self.incoming_name = incoming_name
        super().__init__(
            "There can only be one preferential parameter type per regexp. "
            f"The regexp /{pattern}/ is used for two preferential parameter types, "
            f"{{{existing_name}}} and {{{incoming_name}}}"
        )


class AmbiguousPatternError(ParameterTypeError):
    """Raised when a regexp maps to several parameter types and none is preferred.

    Attributes:
        pattern: The regexp that was looked up.
        compiled_expression: The full compiled expression the regexp came from.
        parameter_types: The candidate types, in rank order.
        generated_expressions: Alternative expressions that avoid the ambiguity.
    """

    def __init__(
        self,
        pattern: str,
        compiled_expression: re.Pattern[str],
        parameter_types: Sequence[ParameterType],
        generated_expressions: Sequence[GeneratedExpression],
    ) -> None:
        self.pattern = pattern
        self.compiled_expression = compiled_expression
        self.parameter_types = list(parameter_types)
        self.generated_expressions = list(generated_expressions)
        super().__init__(self._build_message())

    @property
    def candidate_names(self) -> list[str]:
        """Names of the candidate parameter types."""
        return [parameter_type.name for parameter_type in self.parameter_types]

    def _build_message(self) -> str:
        candidates = "\n".join(f"   {{{name}}}" for name in self.candidate_names)
        suggestions = "\n".join(
            f"   {expression.source}" for expression in self.generated_expressions
        )
        return (
            f"Your Regular Expression /{self.compiled_expression.pattern}/\n"
            f"matches multiple parameter types with regexp /{self.pattern}/:\n"
            f"{candidates}\n"
            "\n"
            "I couldn't decide which one to use. You have two options:\n"
            "\n"
            "1) Use an expression with parameter placeholders instead of a "
            "Regular Expression. Try one of these:\n"
            f"{suggestions}\n"
            "\n"
            "2) Make one of the parameter types preferential and continue to use "
            "a Regular Expression.\n"
        )


class ConversionError(ParameterTypeError):
    """Raised when matched text cannot be converted to the target type.

    Attributes:
        parameter_type_name: Name of the parameter type, when known.
        group_values: The captured values that failed to convert.
    """

    def __init__(
        self,
        message: str,
        parameter_type_name: str | None = None,
        group_values: Sequence[Any] = (),
    ) -> None:
        self.message = message
        self.parameter_type_name = parameter_type_name
        self.group_values = tuple(group_values)
        super().__init__(message)
