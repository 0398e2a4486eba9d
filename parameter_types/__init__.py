"""Parameter types - typed regexp families for step expression matching.

This module provides the parameter type model, the registry that indexes
types by name and by regexp, and the built-in numeric and string types.
"""

from parameter_types.builtins import builtin_parameter_types, define_builtin_parameter_types
from parameter_types.config import RegistrySettings
from parameter_types.exceptions import (
    AmbiguousPatternError,
    AmbiguousPreferenceError,
    ConversionError,
    DuplicateTypeNameError,
    ParameterTypeError,
)
from parameter_types.generator import ExpressionGenerator, GeneratedExpression
from parameter_types.numbers import NumberParser
from parameter_types.parameter_type import ParameterType
from parameter_types.registry import ParameterTypeRegistry

__all__ = [
    "ParameterType",
    "ParameterTypeRegistry",
    "RegistrySettings",
    "NumberParser",
    "ExpressionGenerator",
    "GeneratedExpression",
    "builtin_parameter_types",
    "define_builtin_parameter_types",
    "ParameterTypeError",
    "DuplicateTypeNameError",
    "AmbiguousPreferenceError",
    "AmbiguousPatternError",
    "ConversionError",
]
