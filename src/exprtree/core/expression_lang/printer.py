"""
Infix printer for exprtree.

Renders a tree as fully parenthesized infix text with no whitespace:
every node, leaves included, is wrapped in its own parentheses.

    BinaryOp(+, Const(2), Const(2))  →  ((2)+(2))
    Conditional(c, a, b)             →  (c?a:b)
"""

from __future__ import annotations

from exprtree.core.errors import TreeDepthError
from exprtree.core.ir.expressions import BinaryOp, Conditional, Const, Expr


def render(expr: Expr) -> str:
    """Render an expression tree as infix text.

    Raises:
        TreeDepthError: If the tree is too deep to walk.
    """
    try:
        return _render(expr)
    except RecursionError:
        raise TreeDepthError("Expression nested too deeply to render") from None


def _render(expr: Expr) -> str:
    if isinstance(expr, Const):
        return f"({expr.value})"

    if isinstance(expr, BinaryOp):
        return f"({_render(expr.left)}{expr.operator.value}{_render(expr.right)})"

    if isinstance(expr, Conditional):
        return f"({_render(expr.condition)}?{_render(expr.on_true)}:{_render(expr.on_false)})"

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")
