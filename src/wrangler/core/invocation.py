# src/wrangler/core/invocation.py
"""Parser for the textual directive invocation syntax.

A directive line is the directive name followed by its arguments in the
order the directive's UsageDefinition declares them:

    extract-xpath '/bookstore/book/title/text()' :payload :title;

Lexical rules:
- Text literals are single- or double-quoted. A backslash escapes the
  enclosing quote character or another backslash; any other backslash is
  kept as is.
- Column references start with ':' followed by the column name.
- Bare words are used for the directive name.
- A single trailing ';' terminates the line.
"""

import re
from dataclasses import dataclass
from typing import Literal

from wrangler.contracts.arguments import Arguments
from wrangler.contracts.enums import TokenType
from wrangler.contracts.errors import DirectiveParseError
from wrangler.contracts.tokens import TOKEN_CLASSES, Token
from wrangler.contracts.usage import UsageDefinition

LexKind = Literal["text", "column", "word"]

_COLUMN = re.compile(r":([^\s;'\"]+)")
_WORD = re.compile(r"[^\s;'\":][^\s;'\"]*")
_KIND_BY_TOKEN_TYPE: dict[TokenType, LexKind] = {TokenType.TEXT: "text", TokenType.COLUMN_NAME: "column"}


@dataclass(frozen=True, slots=True)
class LexToken:
    """One lexical token of a directive line."""

    kind: LexKind
    value: str
    position: int


def _read_quoted(text: str, start: int) -> tuple[str, int]:
    quote = text[start]
    chars: list[str] = []
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text) and text[i + 1] in (quote, "\\"):
            chars.append(text[i + 1])
            i += 2
            continue
        if ch == quote:
            return "".join(chars), i + 1
        chars.append(ch)
        i += 1
    raise DirectiveParseError(f"Unterminated text literal starting at position {start}: {text[start:]}")


def tokenize(text: str) -> list[LexToken]:
    """Split a directive line into lexical tokens.

    Raises:
        DirectiveParseError: On an unterminated quote, an empty column
            reference, or content after the terminating ';'
    """
    tokens: list[LexToken] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace():
            i += 1
        elif ch in ("'", '"'):
            value, end = _read_quoted(text, i)
            tokens.append(LexToken("text", value, i))
            i = end
        elif ch == ":":
            match = _COLUMN.match(text, i)
            if match is None:
                raise DirectiveParseError(f"Empty column reference at position {i}")
            tokens.append(LexToken("column", match.group(1), i))
            i = match.end()
        elif ch == ";":
            if text[i + 1 :].strip():
                raise DirectiveParseError(f"Unexpected content after ';' at position {i}: {text[i + 1 :].strip()}")
            break
        else:
            match = _WORD.match(text, i)
            assert match is not None  # any other non-space char starts a word
            tokens.append(LexToken("word", match.group(0), i))
            i = match.end()
    return tokens


def parse_directive_name(text: str) -> str:
    """Return the directive name a line invokes.

    Raises:
        DirectiveParseError: If the line is empty or does not start with a name
    """
    tokens = tokenize(text)
    if not tokens:
        raise DirectiveParseError("Empty directive invocation")
    if tokens[0].kind != "word":
        raise DirectiveParseError(f"Directive invocation must start with a directive name, got: {text.strip()}")
    return tokens[0].value


def parse_invocation(text: str, usage: UsageDefinition) -> Arguments:
    """Match a directive line against a usage definition.

    Raises:
        DirectiveParseError: If the line names another directive, or its
            arguments do not match the usage definition
    """
    name = parse_directive_name(text)
    if name != usage.directive:
        raise DirectiveParseError(f"Expected directive '{usage.directive}', got '{name}'")

    args = tokenize(text)[1:]
    supplied: dict[str, Token] = {}
    for idx, param in enumerate(usage.parameters):
        if idx >= len(args):
            if param.optional:
                break
            raise DirectiveParseError(f"Missing argument '{param.name}'. Usage: {usage}")
        lex = args[idx]
        expected = _KIND_BY_TOKEN_TYPE[param.token_type]
        if lex.kind != expected:
            raise DirectiveParseError(
                f"Argument '{param.name}' at position {lex.position} must be a {param.token_type}, got {lex.kind} '{lex.value}'. Usage: {usage}"
            )
        supplied[param.name] = TOKEN_CLASSES[param.token_type](lex.value)

    if len(args) > len(usage.parameters):
        surplus = " ".join(t.value for t in args[len(usage.parameters) :])
        raise DirectiveParseError(f"Too many arguments: {surplus}. Usage: {usage}")

    return Arguments.from_tokens(usage, supplied)
