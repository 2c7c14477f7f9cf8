"""
Tokenizer for the exprtree wire format.

Splits an encoded stream into whitespace-delimited tokens. Runs of
whitespace (including the trailing space every leaf encoding ends with)
produce no empty tokens.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto


class Tag(StrEnum):
    """Node tags in the prefix encoding."""

    CONST = "C"
    BINARY = "BOp"
    TERNARY = "TOp"


class TokenKind(StrEnum):
    """Token types for the wire format."""

    WORD = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the stream tokenizer."""

    __slots__ = ("kind", "value", "index", "offset")

    def __init__(self, kind: TokenKind, value: str, index: int, offset: int) -> None:
        self.kind = kind
        self.value = value
        self.index = index
        self.offset = offset

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, index={self.index}, offset={self.offset})"


_WORD_RE = re.compile(r"\S+")


def tokenize(source: str) -> list[Token]:
    """Tokenize an encoded stream, always ending with an EOF token."""
    tokens = [
        Token(TokenKind.WORD, m.group(0), i, m.start())
        for i, m in enumerate(_WORD_RE.finditer(source))
    ]
    tokens.append(Token(TokenKind.EOF, "", len(tokens), len(source)))
    return tokens
