# tests/contracts/test_arguments.py
"""Tests for validated invocation arguments."""

import pytest

from wrangler.contracts import Arguments, ColumnName, DirectiveParseError, Text, TokenType, UsageDefinition

USAGE = (
    UsageDefinition.builder("extract-xpath")
    .define("xpath", TokenType.TEXT)
    .define("source", TokenType.COLUMN_NAME)
    .define("target", TokenType.COLUMN_NAME)
    .build()
)


class TestFromTokens:
    """Arguments.from_tokens validation."""

    def test_accepts_matching_tokens(self) -> None:
        args = Arguments.from_tokens(
            USAGE,
            {"target": ColumnName("title"), "xpath": Text("/a"), "source": ColumnName("payload")},
        )

        # Ordered by the usage definition, not by the input mapping
        assert list(args) == ["xpath", "source", "target"]
        assert args.value("xpath", Text).value == "/a"
        assert args.value("source", ColumnName).value == "payload"
        assert len(args) == 3

    def test_rejects_wrong_kind(self) -> None:
        with pytest.raises(DirectiveParseError, match="'source' must be of type column_name"):
            Arguments.from_tokens(
                USAGE,
                {"xpath": Text("/a"), "source": Text("payload"), "target": ColumnName("t")},
            )

    def test_rejects_missing_argument(self) -> None:
        with pytest.raises(DirectiveParseError, match="Missing required argument\\(s\\): target"):
            Arguments.from_tokens(USAGE, {"xpath": Text("/a"), "source": ColumnName("s")})

    def test_rejects_unknown_argument(self) -> None:
        with pytest.raises(DirectiveParseError, match="Unknown argument 'extra'"):
            Arguments.from_tokens(
                USAGE,
                {"xpath": Text("/a"), "source": ColumnName("s"), "target": ColumnName("t"), "extra": Text("x")},
            )


class TestFromOptions:
    """Arguments.from_options wraps raw strings in declared token kinds."""

    def test_wraps_values_by_declared_kind(self) -> None:
        args = Arguments.from_options(USAGE, {"xpath": "/a/text()", "source": "payload", "target": "a"})

        assert args["xpath"] == Text("/a/text()")
        assert args["source"] == ColumnName("payload")
        assert args["target"] == ColumnName("a")

    def test_rejects_non_string_value(self) -> None:
        with pytest.raises(DirectiveParseError, match="must be a string, got int"):
            Arguments.from_options(USAGE, {"xpath": 42, "source": "s", "target": "t"})  # type: ignore[dict-item]

    def test_rejects_missing_option(self) -> None:
        with pytest.raises(DirectiveParseError, match="xpath"):
            Arguments.from_options(USAGE, {"source": "s", "target": "t"})


class TestValue:
    """Narrowed access."""

    def test_wrong_class_raises_type_error(self) -> None:
        args = Arguments.from_options(USAGE, {"xpath": "/a", "source": "s", "target": "t"})

        with pytest.raises(TypeError, match="expected ColumnName"):
            args.value("xpath", ColumnName)

    def test_missing_raises_key_error(self) -> None:
        args = Arguments.from_options(USAGE, {"xpath": "/a", "source": "s", "target": "t"})

        with pytest.raises(KeyError):
            args.value("nope", Text)
