"""
Prefix serializer for exprtree.

Encodes a tree as space-separated prefix tokens. Each node writes its tag
first, then its children in order. A constant's value is always followed
by a single space, so every encoding ends with one trailing space and
children concatenate without extra separators:

    Const(2)                         →  "C 2 "
    BinaryOp(+, Const(2), Const(2))  →  "BOp + C 2 C 2 "
    Conditional(c, a, b)             →  "TOp " + c + a + b
"""

from __future__ import annotations

from exprtree.core.errors import TreeDepthError
from exprtree.core.expression_lang.tokenizer import Tag
from exprtree.core.ir.expressions import BinaryOp, Conditional, Const, Expr


def encode(expr: Expr) -> str:
    """Encode an expression tree as a prefix token stream.

    Raises:
        TreeDepthError: If the tree is too deep to walk.
    """
    try:
        return _encode(expr)
    except RecursionError:
        raise TreeDepthError("Expression nested too deeply to encode") from None


def _encode(expr: Expr) -> str:
    if isinstance(expr, Const):
        return f"{Tag.CONST} {expr.value} "

    if isinstance(expr, BinaryOp):
        return f"{Tag.BINARY} {expr.operator.value} {_encode(expr.left)}{_encode(expr.right)}"

    if isinstance(expr, Conditional):
        return (
            f"{Tag.TERNARY} "
            f"{_encode(expr.condition)}{_encode(expr.on_true)}{_encode(expr.on_false)}"
        )

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")
