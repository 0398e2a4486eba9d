"""Generates placeholder expressions that match a piece of example text.

Used to suggest unambiguous alternatives when a plain regexp maps to several
parameter types. Example:

    "I have 12 cukes in my 'big' belly"
    -> I have {int} cukes in my {string} belly
"""

import logging
import re
from itertools import islice, product
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from parameter_types.parameter_type import ParameterType

if TYPE_CHECKING:
    from parameter_types.registry import ParameterTypeRegistry

logger = logging.getLogger(__name__)

_EXPRESSION_SPECIAL_CHARACTERS = re.compile(r"([\\({/])")


def _escape(text: str) -> str:
    """Escape literal text for an expression, then for str.format."""
    escaped = _EXPRESSION_SPECIAL_CHARACTERS.sub(r"\\\1", text)
    return escaped.replace("{", "{{").replace("}", "}}")


def _is_word_character(char: str) -> bool:
    return char.isalnum() or char == "_"


class GeneratedExpression(BaseModel):
    """An expression template together with the types filling its placeholders."""

    expression_template: str = Field(
        ..., description="str.format template with one {} slot per parameter"
    )
    parameter_types: tuple[ParameterType, ...] = Field(default_factory=tuple)

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @property
    def source(self) -> str:
        """The expression text, e.g. ``I have {int} cukes``."""
        return self.expression_template.format(
            *(f"{{{parameter_type.name}}}" for parameter_type in self.parameter_types)
        )

    @property
    def parameter_names(self) -> list[str]:
        """Argument names for code snippets, numbered on reuse (int, int2)."""
        usage: dict[str, int] = {}
        names = []
        for parameter_type in self.parameter_types:
            count = usage.get(parameter_type.name, 0) + 1
            usage[parameter_type.name] = count
            names.append(parameter_type.name if count == 1 else f"{parameter_type.name}{count}")
        return names


class ExpressionGenerator:
    """Builds placeholder expressions from example text using snippet types."""

    def __init__(self, registry: "ParameterTypeRegistry", max_expressions: int = 256):
        self.registry = registry
        self.max_expressions = max_expressions

    def _create_matchers(self) -> list[tuple[ParameterType, re.Pattern[str]]]:
        matchers = []
        for parameter_type in self.registry.all_types():
            if not parameter_type.use_for_snippets:
                continue
            for regexp in parameter_type.regexps:
                try:
                    matchers.append((parameter_type, re.compile(f"({regexp})")))
                except re.error as exc:
                    logger.warning(
                        f"Skipping regexp /{regexp}/ of {parameter_type.name}: {exc}"
                    )
        return matchers

    @staticmethod
    def _find(compiled: re.Pattern[str], text: str, pos: int) -> re.Match[str] | None:
        """Find the first non-empty match at or after ``pos`` that sits on word boundaries."""
        start = pos
        while start <= len(text):
            match = compiled.search(text, start)
            if match is None:
                return None
            begin, end = match.span()
            if (
                end > begin
                and (begin == 0 or not _is_word_character(text[begin - 1]))
                and (end == len(text) or not _is_word_character(text[end]))
            ):
                return match
            start = begin + 1
        return None

    def generate_expressions(self, text: str) -> list[GeneratedExpression]:
        """
        Generate expressions matching ``text``.

        Args:
            text: Example text, e.g. a step as written by a user

        Returns:
            Generated expressions, most preferred parameter types first
        """
        matchers = self._create_matchers()
        alternatives: list[list[ParameterType]] = []
        template: list[str] = []
        pos = 0

        while pos < len(text):
            found = []
            for parameter_type, compiled in matchers:
                match = self._find(compiled, text, pos)
                if match is not None:
                    found.append((match.start(), -len(match.group(0)), parameter_type))
            if not found:
                break

            start, negative_length, _ = min(found, key=lambda item: item[:2])
            candidates = {
                parameter_type.name: parameter_type
                for s, n, parameter_type in found
                if (s, n) == (start, negative_length)
            }
            alternatives.append(sorted(candidates.values(), key=lambda p: p.rank_key))
            template.append(_escape(text[pos:start]))
            template.append("{}")
            pos = start - negative_length

        template.append(_escape(text[pos:]))
        expression_template = "".join(template)

        return [
            GeneratedExpression(
                expression_template=expression_template, parameter_types=combination
            )
            for combination in islice(product(*alternatives), self.max_expressions)
        ]
