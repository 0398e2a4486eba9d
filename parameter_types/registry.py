"""Registry of parameter types, indexed by name and by regexp.

The ParameterTypeRegistry owns two tables:
- name -> ParameterType, enforcing unique names
- regexp -> ParameterTypes sharing that regexp, kept in rank order
  (preferential type first, then by name)

Registration is all-or-nothing. Ambiguity between non-preferential types is
only reported when somebody looks a type up by that regexp.
"""

import logging
import re
from bisect import insort
from collections.abc import Callable, ValuesView
from operator import attrgetter
from typing import Any

from parameter_types.builtins import define_builtin_parameter_types
from parameter_types.config import RegistrySettings
from parameter_types.exceptions import (
    AmbiguousPatternError,
    AmbiguousPreferenceError,
    DuplicateTypeNameError,
)
from parameter_types.generator import ExpressionGenerator
from parameter_types.numbers import NumberParser
from parameter_types.parameter_type import ParameterType

logger = logging.getLogger(__name__)


class ParameterTypeRegistry:
    """
    Registry for defining and resolving parameter types.

    Usage:
        ```python
        registry = ParameterTypeRegistry()
        registry.register(
            ParameterType(name="color", regexps="red|blue", type=str, transformer=str)
        )

        registry.lookup_by_name("int")
        registry.lookup_by_pattern(r"-?\\d+", re.compile(r"I have (-?\\d+) cukes"), text)
        ```
    """

    def __init__(
        self,
        settings: RegistrySettings | None = None,
        *,
        number_parser: NumberParser | None = None,
        generator_factory: Callable[["ParameterTypeRegistry"], Any] | None = None,
    ):
        """
        Initialize a registry, seeding the built-in types unless disabled.

        Args:
            settings: Registry configuration; read from the environment if omitted
            number_parser: Parser for the float and double types; derived from
                ``settings.locale`` if omitted
            generator_factory: Builds the expression generator used to suggest
                alternatives for ambiguous regexps
        """
        self.settings = settings or RegistrySettings()
        self.number_parser = number_parser or NumberParser.for_locale(self.settings.locale)
        self._generator_factory = generator_factory or self._default_generator
        self._by_name: dict[str, ParameterType] = {}
        self._by_regexp: dict[str, list[ParameterType]] = {}

        if self.settings.seed_builtins:
            define_builtin_parameter_types(self, self.number_parser)

    def _default_generator(self, registry: "ParameterTypeRegistry") -> ExpressionGenerator:
        return ExpressionGenerator(
            registry, max_expressions=self.settings.max_generated_expressions
        )

    def register(self, parameter_type: ParameterType) -> None:
        """Register a parameter type under its name and each of its regexps.

        Args:
            parameter_type: The parameter type to add

        Raises:
            DuplicateTypeNameError: If the name is already registered
            AmbiguousPreferenceError: If the type is preferential and one of its
                regexps already has a preferential type
        """
        if parameter_type.name in self._by_name:
            raise DuplicateTypeNameError(parameter_type.name)

        # Check every regexp before touching either table
        if parameter_type.prefer_for_regexp_match:
            for regexp in parameter_type.regexps:
                existing = self._by_regexp.get(regexp)
                if existing and existing[0].prefer_for_regexp_match:
                    raise AmbiguousPreferenceError(
                        regexp, existing[0].name, parameter_type.name
                    )

        self._by_name[parameter_type.name] = parameter_type
        for regexp in parameter_type.regexps:
            insort(
                self._by_regexp.setdefault(regexp, []),
                parameter_type,
                key=attrgetter("rank_key"),
            )
        logger.debug(
            f"Registered parameter type: {parameter_type.name} "
            f"regexps={list(parameter_type.regexps)}"
        )

    def lookup_by_name(self, name: str) -> ParameterType | None:
        """
        Retrieve a parameter type by its name.

        Args:
            name: The parameter type name

        Returns:
            ParameterType if found, None otherwise
        """
        return self._by_name.get(name)

    def lookup_by_pattern(
        self, pattern: str, compiled_expression: re.Pattern[str], text: str
    ) -> ParameterType | None:
        """
        Resolve the parameter type that owns matches of ``pattern``.

        Args:
            pattern: The regexp of a capture group in the compiled expression
            compiled_expression: The full expression the regexp belongs to
            text: The text being matched, used to suggest alternatives

        Returns:
            The single or preferential ParameterType, or None if no type
            uses the regexp

        Raises:
            AmbiguousPatternError: If several types share the regexp and none
                of them is preferential
        """
        parameter_types = self._by_regexp.get(pattern)
        if not parameter_types:
            return None
        best = parameter_types[0]
        if len(parameter_types) > 1 and not best.prefer_for_regexp_match:
            logger.debug(
                f"Regexp /{pattern}/ is ambiguous between "
                f"{[p.name for p in parameter_types]}"
            )
            generator = self._generator_factory(self)
            raise AmbiguousPatternError(
                pattern,
                compiled_expression,
                parameter_types,
                generator.generate_expressions(text),
            )
        return best

    def all_types(self) -> ValuesView[ParameterType]:
        """Get a live view of all registered parameter types."""
        return self._by_name.values()

    def types_for_pattern(self, pattern: str) -> list[ParameterType]:
        """Get the parameter types indexed under ``pattern``, in rank order."""
        return list(self._by_regexp.get(pattern, []))

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
