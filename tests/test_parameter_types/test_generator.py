"""Tests for parameter_types.generator module."""

from parameter_types import ExpressionGenerator, GeneratedExpression, ParameterType


def sources(expressions):
    return [expression.source for expression in expressions]


def snippet_type(name, regexps):
    return ParameterType(name=name, regexps=regexps, type=str, transformer=str, use_for_snippets=True)


class TestExpressionGenerator:
    """Test suite for ExpressionGenerator with the built-in types."""

    def test_integer(self, registry):
        expressions = ExpressionGenerator(registry).generate_expressions("I have 12 cucumbers")

        assert sources(expressions) == ["I have {int} cucumbers"]
        assert expressions[0].parameter_names == ["int"]

    def test_integer_and_decimal(self, registry):
        expressions = ExpressionGenerator(registry).generate_expressions(
            "I have 2 cukes and 3.5 apples"
        )
        assert sources(expressions) == ["I have {int} cukes and {double} apples"]

    def test_repeated_type_names_are_numbered(self, registry):
        expressions = ExpressionGenerator(registry).generate_expressions("I have 1 cuke and 2 apples")

        assert sources(expressions) == ["I have {int} cuke and {int} apples"]
        assert expressions[0].parameter_names == ["int", "int2"]

    def test_quoted_string(self, registry):
        expressions = ExpressionGenerator(registry).generate_expressions('I say "hello" twice')
        assert sources(expressions) == ["I say {string} twice"]

    def test_text_without_parameters(self, registry):
        expressions = ExpressionGenerator(registry).generate_expressions("hello world")

        assert sources(expressions) == ["hello world"]
        assert expressions[0].parameter_types == ()

    def test_matches_must_sit_on_word_boundaries(self, registry):
        expressions = ExpressionGenerator(registry).generate_expressions("abc123 rocks")
        assert sources(expressions) == ["abc123 rocks"]

    def test_literal_text_is_escaped(self, registry):
        expressions = ExpressionGenerator(registry).generate_expressions("a (b) {c} / 1")
        assert sources(expressions) == [r"a \(b) \{c} \/ {int}"]

    def test_non_snippet_types_are_ignored(self, registry):
        """Test that word, long and other non-snippet types are never suggested."""
        expressions = ExpressionGenerator(registry).generate_expressions("banana 7")
        assert sources(expressions) == ["banana {int}"]


class TestCombinations:
    """Test suite for ambiguous spans producing several expressions."""

    def setup_types(self, registry):
        registry.register(snippet_type("colour", "red|blue"))
        registry.register(snippet_type("color", "red|blue"))

    def test_every_combination_is_generated(self, empty_registry):
        self.setup_types(empty_registry)

        expressions = ExpressionGenerator(empty_registry).generate_expressions("red and blue")

        assert sources(expressions) == [
            "{color} and {color}",
            "{color} and {colour}",
            "{colour} and {color}",
            "{colour} and {colour}",
        ]
        assert expressions[0].parameter_names == ["color", "color2"]

    def test_combinations_are_capped(self, empty_registry):
        self.setup_types(empty_registry)

        generator = ExpressionGenerator(empty_registry, max_expressions=3)

        assert len(generator.generate_expressions("red and blue")) == 3

    def test_longest_match_wins(self, empty_registry):
        empty_registry.register(snippet_type("short", "ab"))
        empty_registry.register(snippet_type("long", "abc"))

        expressions = ExpressionGenerator(empty_registry).generate_expressions("x abc")

        assert sources(expressions) == ["x {long}"]

    def test_invalid_regexp_is_skipped(self, empty_registry):
        empty_registry.register(snippet_type("broken", "(unclosed"))
        empty_registry.register(snippet_type("color", "red|blue"))

        expressions = ExpressionGenerator(empty_registry).generate_expressions("red")

        assert sources(expressions) == ["{color}"]

    def test_registry_is_not_modified(self, empty_registry):
        self.setup_types(empty_registry)

        ExpressionGenerator(empty_registry).generate_expressions("red and blue")

        assert len(empty_registry) == 2


def test_generated_expression_source():
    """Test that templates keep literal braces and fill placeholders in order."""
    expression = GeneratedExpression(
        expression_template="{{x}} {} and {}",
        parameter_types=(snippet_type("a", "a"), snippet_type("b", "b")),
    )
    assert expression.source == "{x} {a} and {b}"
    assert expression.parameter_names == ["a", "b"]
