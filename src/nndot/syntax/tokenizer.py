"""Tokenizer for the DOT-like graph language.

Two passes: raw_tokenize splits the source on whitespace and ';' while
keeping quoted strings atomic, then strip_comments drops C and C++ style
comments and the newline markers the second pass needed.
"""

from __future__ import annotations

from nndot.types import Token

NEWLINE = "\n"
SEMICOLON = ";"

_SEPARATORS = frozenset(" \t\r\n;")
# Separators that are also emitted as tokens.
_EMITTED = frozenset("\n;")

_LINE_COMMENT = "//"
_BLOCK_OPEN = "/*"
_BLOCK_CLOSE = "*/"


def raw_tokenize(source: str) -> list[Token]:
    """Split source into tokens, keeping newline and ';' markers.

    Never fails: an unterminated quote turns the rest of the input into one
    token.
    """
    tokens: list[Token] = []
    buf: list[str] = []
    in_quote = False
    escaped = False
    for ch in source:
        if ch in _SEPARATORS and not in_quote:
            if buf:
                tokens.append("".join(buf))
                buf.clear()
            if ch in _EMITTED:
                tokens.append(ch)
        else:
            if ch == '"' and not escaped:
                in_quote = not in_quote
            buf.append(ch)
        # A backslash escapes the next character unless it is itself escaped.
        escaped = ch == "\\" and not escaped
    if buf:
        tokens.append("".join(buf))
    return tokens


def strip_comments(tokens: list[Token]) -> list[Token]:
    """Drop '//' and '/* */' comments, then every newline marker.

    Comment markers only count as whole tokens. An unterminated block comment
    swallows the rest of the input.
    """
    kept: list[Token] = []
    in_line_comment = False
    in_block_comment = False
    for token in tokens:
        if in_line_comment:
            if token == NEWLINE:
                in_line_comment = False
            continue
        if in_block_comment:
            if token == _BLOCK_CLOSE:
                in_block_comment = False
            continue
        if token == _LINE_COMMENT:
            in_line_comment = True
            continue
        if token == _BLOCK_OPEN:
            in_block_comment = True
            continue
        kept.append(token)
    return [t for t in kept if t != NEWLINE]


def tokenize(source: str) -> list[Token]:
    return strip_comments(raw_tokenize(source))
