"""Tests for parameter_types.config module."""

import pytest
from pydantic import ValidationError

from parameter_types import NumberParser, ParameterTypeRegistry, RegistrySettings


def test_defaults():
    settings = RegistrySettings()
    assert settings.locale == "en"
    assert settings.seed_builtins is True
    assert settings.max_generated_expressions == 256


def test_environment_overrides(monkeypatch):
    """Test that PARAMETER_TYPES_* variables configure the registry."""
    monkeypatch.setenv("PARAMETER_TYPES_LOCALE", "de_DE")
    monkeypatch.setenv("PARAMETER_TYPES_SEED_BUILTINS", "false")

    settings = RegistrySettings()

    assert settings.locale == "de_DE"
    assert settings.seed_builtins is False


def test_max_generated_expressions_must_be_positive():
    with pytest.raises(ValidationError):
        RegistrySettings(max_generated_expressions=0)


def test_registry_uses_locale_from_settings():
    registry = ParameterTypeRegistry(RegistrySettings(locale="de"))
    assert registry.number_parser.decimal_separator == ","


def test_explicit_number_parser_wins():
    parser = NumberParser(",", " ")
    registry = ParameterTypeRegistry(RegistrySettings(locale="en"), number_parser=parser)

    assert registry.number_parser is parser
    assert registry.lookup_by_name("double").transform(["2,5"]) == 2.5


def test_unseeded_registry_from_environment(monkeypatch):
    monkeypatch.setenv("PARAMETER_TYPES_SEED_BUILTINS", "0")
    assert len(ParameterTypeRegistry()) == 0
