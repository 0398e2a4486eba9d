"""ParameterType model: a named regexp family with a text-to-value converter."""

import re
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, Field, field_validator

from parameter_types.exceptions import ConversionError

ILLEGAL_PARAMETER_NAME_PATTERN = re.compile(r"[\[\]()$.|?*+]")


class ParameterType(BaseModel):
    """A named, typed pattern-matching rule.

    The registry indexes a parameter type under each of its regexps. When
    several types share a regexp, the one flagged with
    ``prefer_for_regexp_match`` owns plain regexp matches.

    Example:
        ParameterType(
            name="color",
            regexps=["red|green|blue"],
            type=str,
            transformer=str.upper,
        )
    """

    name: str = Field(..., description="Unique name, used as {name} in expressions")
    regexps: tuple[str, ...] = Field(
        ..., description="Regexps recognised by this type, in declaration order"
    )
    type: Any = Field(
        default=object, description="Tag for the value produced by the transformer"
    )
    transformer: Callable[..., Any] = Field(
        ..., description="Converts captured group values into a value", exclude=True
    )
    use_for_snippets: bool = Field(
        default=False, description="Offer this type when generating expressions"
    )
    prefer_for_regexp_match: bool = Field(
        default=False, description="Wins shared regexps over non-preferred types"
    )

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject empty names and names that clash with expression syntax."""
        if not v:
            raise ValueError("Parameter type name must not be empty")
        if ILLEGAL_PARAMETER_NAME_PATTERN.search(v):
            raise ValueError(
                f"Illegal character in parameter name {{{v}}}. "
                "Parameter names may not contain '[]()$.|?*+'"
            )
        return v

    @field_validator("regexps", mode="before")
    @classmethod
    def normalize_regexps(cls, v: Any) -> tuple[str, ...]:
        """Accept a single regexp or a sequence, dropping repeated entries."""
        if isinstance(v, str):
            v = [v]
        regexps = tuple(dict.fromkeys(v))
        if not regexps:
            raise ValueError("A parameter type needs at least one regexp")
        if any(not regexp for regexp in regexps):
            raise ValueError("Regexps must not be empty")
        return regexps

    @property
    def rank_key(self) -> tuple[bool, str]:
        """Sort key among types sharing a regexp: preferred first, then by name."""
        return (not self.prefer_for_regexp_match, self.name)

    def transform(self, group_values: Sequence[str | None]) -> Any:
        """Convert the values captured for this type.

        ``group_values`` holds the text of each top-level capture group of the
        matched regexp (None for groups that did not participate), or the
        whole match when the regexp has no groups.

        Raises:
            ConversionError: If the transformer rejects the values.
        """
        try:
            return self.transformer(*group_values)
        except ConversionError as exc:
            if exc.parameter_type_name is None:
                exc.parameter_type_name = self.name
            raise
        except (ValueError, ArithmeticError) as exc:
            raise ConversionError(
                f"ParameterType {{{self.name}}} failed to transform "
                f"{list(group_values)} to {getattr(self.type, '__name__', self.type)}",
                parameter_type_name=self.name,
                group_values=group_values,
            ) from exc
