"""Locale-aware parsing for the float and double parameter types."""

import math
import struct
from decimal import Decimal, InvalidOperation

from parameter_types.exceptions import ConversionError

# language (or language_REGION) -> (decimal separator, grouping separator)
LOCALE_SEPARATORS: dict[str, tuple[str, str]] = {
    "en": (".", ","),
    "ja": (".", ","),
    "zh": (".", ","),
    "ko": (".", ","),
    "de": (",", "."),
    "de_CH": (".", "'"),
    "es": (",", "."),
    "it": (",", "."),
    "nl": (",", "."),
    "pt": (",", "."),
    "da": (",", "."),
    "fr": (",", "\u00a0"),
    "ru": (",", "\u00a0"),
    "pl": (",", "\u00a0"),
    "sv": (",", "\u00a0"),
    "nb": (",", "\u00a0"),
    "fi": (",", "\u00a0"),
}


class NumberParser:
    """Parses decimal numbers written with locale-specific separators."""

    def __init__(self, decimal_separator: str = ".", grouping_separator: str = ","):
        if decimal_separator == grouping_separator:
            raise ValueError(
                f"Decimal and grouping separators must differ, got {decimal_separator!r}"
            )
        self.decimal_separator = decimal_separator
        self.grouping_separator = grouping_separator

    @classmethod
    def for_locale(cls, locale: str) -> "NumberParser":
        """Build a parser for a locale tag such as ``en``, ``de_DE`` or ``fr-CA``.

        Unknown locales fall back to English separators.
        """
        tag = locale.replace("-", "_").split(".")[0]
        parts = tag.split("_")
        language = parts[0].lower()
        region = parts[1].upper() if len(parts) > 1 else ""
        separators = (
            LOCALE_SEPARATORS.get(f"{language}_{region}")
            or LOCALE_SEPARATORS.get(language)
            or LOCALE_SEPARATORS["en"]
        )
        return cls(*separators)

    def parse_decimal(self, text: str) -> Decimal:
        normalized = text.strip()
        if self.grouping_separator:
            normalized = normalized.replace(self.grouping_separator, "")
        normalized = normalized.replace(self.decimal_separator, ".")
        try:
            value = Decimal(normalized)
        except InvalidOperation as exc:
            raise ConversionError(f"Not a number: {text!r}", group_values=[text]) from exc
        if not value.is_finite():
            raise ConversionError(f"Not a finite number: {text!r}", group_values=[text])
        return value

    def parse_double(self, text: str) -> float:
        value = float(self.parse_decimal(text))
        if math.isinf(value):
            raise ConversionError(f"Out of range for double: {text!r}", group_values=[text])
        return value

    def parse_float(self, text: str) -> float:
        """Parse ``text`` rounded to single precision."""
        value = struct.unpack("f", struct.pack("f", self.parse_double(text)))[0]
        # out-of-range doubles pack as infinity
        if math.isinf(value):
            raise ConversionError(f"Out of range for float: {text!r}", group_values=[text])
        return value
