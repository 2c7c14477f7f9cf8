"""
Recursive descent decoder for the exprtree prefix encoding.

Grammar:
    expr     → const | binop | ternary
    const    → "C" INTEGER
    binop    → "BOp" OPCHAR expr expr
    ternary  → "TOp" expr expr expr
    OPCHAR   → "+" | "-" | "*" | "/"
    INTEGER  → ("+" | "-")? DIGIT+

Every production consumes exactly the tokens its encoding produced, so
children are read one after another from the same cursor.
"""

from __future__ import annotations

import logging
import re

from exprtree.core.errors import (
    DecodeError,
    InvalidIntegerError,
    InvalidOperatorError,
    NestingTooDeepError,
    TokenContext,
    TrailingInputError,
    UnexpectedEndOfInputError,
    UnknownTagError,
)
from exprtree.core.expression_lang.tokenizer import Tag, Token, TokenKind, tokenize
from exprtree.core.ir.expressions import BinaryOp, Conditional, Const, Expr, Operator

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Each level costs two Python frames; stays well under the default recursion limit
MAX_DEPTH = 256


class _Parser:
    """Recursive descent parser over a shared token cursor."""

    def __init__(self, source: str, tokens: list[Token], max_depth: int = MAX_DEPTH) -> None:
        self.source = source
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def next_word(self, expected: str) -> Token:
        tok = self.current
        if tok.kind == TokenKind.EOF:
            raise self.error(
                UnexpectedEndOfInputError, f"Unexpected end of input, expected {expected}", tok
            )
        return self.advance()

    def error(self, cls: type[DecodeError], message: str, tok: Token) -> DecodeError:
        return cls(message, TokenContext(source=self.source, index=tok.index, offset=tok.offset))

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """const | binop | ternary, chosen by the leading tag."""
        if self.depth >= self.max_depth:
            raise self.error(
                NestingTooDeepError,
                f"Expression nested deeper than {self.max_depth} levels",
                self.current,
            )
        tag = self.next_word("a node tag")

        self.depth += 1
        try:
            if tag.value == Tag.CONST:
                return self.parse_const()
            if tag.value == Tag.BINARY:
                return self.parse_binop()
            if tag.value == Tag.TERNARY:
                return self.parse_ternary()
        finally:
            self.depth -= 1

        raise self.error(UnknownTagError, f"Unknown node tag: {tag.value!r}", tag)

    def parse_const(self) -> Const:
        """INTEGER"""
        tok = self.next_word("an integer")
        if not _INTEGER_RE.fullmatch(tok.value):
            raise self.error(InvalidIntegerError, f"Invalid constant: {tok.value!r}", tok)
        try:
            value = int(tok.value)
        except ValueError:
            # Past the interpreter's int string conversion limit
            raise self.error(
                InvalidIntegerError, f"Invalid constant: {len(tok.value)}-digit integer", tok
            ) from None
        return Const(value=value)

    def parse_binop(self) -> BinaryOp:
        """OPCHAR expr expr"""
        tok = self.next_word("an operator")
        try:
            operator = Operator(tok.value)
        except ValueError:
            raise self.error(InvalidOperatorError, f"Invalid operator: {tok.value!r}", tok) from None

        left = self.parse_expr()
        right = self.parse_expr()
        return BinaryOp(operator=operator, left=left, right=right)

    def parse_ternary(self) -> Conditional:
        """expr expr expr"""
        condition = self.parse_expr()
        on_true = self.parse_expr()
        on_false = self.parse_expr()
        return Conditional(condition=condition, on_true=on_true, on_false=on_false)

    def parse(self) -> Expr:
        """Parse one tree from the cursor, bounding recursion."""
        try:
            return self.parse_expr()
        except RecursionError:
            raise self.error(
                NestingTooDeepError, "Expression nested too deeply to decode", self.current
            ) from None

    def remainder(self) -> list[str]:
        return [t.value for t in self.tokens[self.pos :] if t.kind != TokenKind.EOF]


def decode_with_remainder(source: str, max_depth: int = MAX_DEPTH) -> tuple[Expr, list[str]]:
    """Decode one tree from the front of a stream.

    Args:
        source: Encoded stream
        max_depth: Deepest nesting accepted before NestingTooDeepError.

    Returns:
        The decoded tree and the tokens left after it.

    Raises:
        DecodeError: If the front of the stream is not a complete tree.
    """
    parser = _Parser(source, tokenize(source), max_depth)
    expr = parser.parse()
    return expr, parser.remainder()


def decode(source: str, strict: bool = False, max_depth: int = MAX_DEPTH) -> Expr:
    """Decode an encoded stream into an expression tree.

    Args:
        source: Encoded stream (e.g., "BOp + C 2 C 2 ")
        strict: Reject tokens left over after a complete tree. When False,
            leftovers are ignored.
        max_depth: Deepest nesting accepted. Deeper streams fail instead of
            exhausting the interpreter stack.

    Returns:
        Decoded expression tree.

    Raises:
        UnexpectedEndOfInputError: If the stream ends mid-tree.
        InvalidIntegerError: If a constant is not a signed integer.
        InvalidOperatorError: If an operator is not one of + - * /.
        UnknownTagError: If a node tag is not recognised.
        TrailingInputError: If strict and tokens remain.
        NestingTooDeepError: If nodes nest deeper than max_depth.
    """
    parser = _Parser(source, tokenize(source), max_depth)
    expr = parser.parse()

    if parser.current.kind != TokenKind.EOF:
        if strict:
            raise parser.error(
                TrailingInputError,
                f"Unexpected token after expression: {parser.current.value!r}",
                parser.current,
            )
        logger.debug("Ignoring %d trailing token(s): %s", len(parser.remainder()), parser.remainder())

    return expr


load = decode
