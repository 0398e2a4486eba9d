"""Built-in parameter types seeded into every new registry."""

from collections.abc import Callable
from decimal import Decimal
from typing import TYPE_CHECKING

from parameter_types.exceptions import ConversionError
from parameter_types.numbers import NumberParser
from parameter_types.parameter_type import ParameterType

if TYPE_CHECKING:
    from parameter_types.registry import ParameterTypeRegistry

INTEGER_REGEXPS = (r"-?\d+", r"\d+")
FLOAT_REGEXPS = (r"-?\d*[\.,]\d+",)
HEX_REGEXPS = (r"0[xX][0-9a-fA-F]{2}",)
WORD_REGEXPS = (r"\w+",)
STRING_REGEXPS = (
    r'"([^"\\]*(\\.[^"\\]*)*)"' + "|" + r"\'([^\'\\]*(\\.[^\'\\]*)*)\'",
)


def _bounded_int(type_name: str, bits: int, base: int = 10) -> Callable[[str], int]:
    """Build a transformer for a signed integer of the given width."""
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1

    def transform(text: str) -> int:
        value = int(text, base)
        if not low <= value <= high:
            raise ConversionError(
                f"Value {text} out of range for {type_name} [{low}, {high}]",
                parameter_type_name=type_name,
                group_values=[text],
            )
        return value

    return transform


def _transform_string(double_quoted: str | None, single_quoted: str | None = None) -> str:
    text = double_quoted if double_quoted is not None else single_quoted
    if text is None:
        return ""
    return text.replace('\\"', '"').replace("\\'", "'")


def builtin_parameter_types(number_parser: NumberParser) -> list[ParameterType]:
    """Return the built-in parameter types in registration order."""
    return [
        ParameterType(name="bigint", regexps=INTEGER_REGEXPS, type=int, transformer=int),
        ParameterType(
            name="bigdecimal", regexps=INTEGER_REGEXPS, type=Decimal, transformer=Decimal
        ),
        ParameterType(
            name="byte",
            regexps=HEX_REGEXPS,
            type=int,
            transformer=_bounded_int("byte", 8, base=16),
        ),
        ParameterType(
            name="short", regexps=INTEGER_REGEXPS, type=int, transformer=_bounded_int("short", 16)
        ),
        ParameterType(
            name="int",
            regexps=INTEGER_REGEXPS,
            type=int,
            transformer=_bounded_int("int", 32),
            use_for_snippets=True,
            prefer_for_regexp_match=True,
        ),
        ParameterType(
            name="long", regexps=INTEGER_REGEXPS, type=int, transformer=_bounded_int("long", 64)
        ),
        ParameterType(
            name="float",
            regexps=FLOAT_REGEXPS,
            type=float,
            transformer=number_parser.parse_float,
        ),
        ParameterType(
            name="double",
            regexps=FLOAT_REGEXPS,
            type=float,
            transformer=number_parser.parse_double,
            use_for_snippets=True,
            prefer_for_regexp_match=True,
        ),
        ParameterType(name="word", regexps=WORD_REGEXPS, type=str, transformer=str),
        ParameterType(
            name="string",
            regexps=STRING_REGEXPS,
            type=str,
            transformer=_transform_string,
            use_for_snippets=True,
        ),
    ]


def define_builtin_parameter_types(
    registry: "ParameterTypeRegistry", number_parser: NumberParser
) -> None:
    """Register the built-in parameter types in ``registry``."""
    for parameter_type in builtin_parameter_types(number_parser):
        registry.register(parameter_type)
