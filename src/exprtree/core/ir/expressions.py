"""
Expression tree types for exprtree.

A closed set of immutable node types:
- Const: a signed integer leaf
- BinaryOp: left <op> right, with op one of + - * /
- Conditional: condition ? on_true : on_false

Every node can be computed to an integer, rendered as fully parenthesized
infix text, and encoded as a prefix token stream.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, StrictInt

if TYPE_CHECKING:
    from exprtree.core.expression_lang.evaluator import EvalOptions

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class _Node(BaseModel):
    """Shared behaviour for all expression nodes."""

    model_config = ConfigDict(frozen=True)

    def compute(self, options: EvalOptions | None = None) -> int:
        """Evaluate this tree to an integer."""
        from exprtree.core.expression_lang.evaluator import evaluate

        return evaluate(self, options)  # type: ignore[arg-type]

    def render(self) -> str:
        """Render this tree as fully parenthesized infix text."""
        from exprtree.core.expression_lang.printer import render

        return render(self)  # type: ignore[arg-type]

    def encode(self) -> str:
        """Encode this tree as a prefix token stream."""
        from exprtree.core.expression_lang.serializer import encode

        return encode(self)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.render()


class Const(_Node):
    """A signed integer constant."""

    value: StrictInt = Field(description="The constant value")


class BinaryOp(_Node):
    """Binary operation: left op right."""

    operator: Operator
    left: Expr
    right: Expr


class Conditional(_Node):
    """
    Ternary conditional: condition ? on_true : on_false.

    A non-zero condition selects on_true. Only the selected branch is
    evaluated.
    """

    condition: Expr = Field(description="Branch selector")
    on_true: Expr = Field(description="Value when condition is non-zero")
    on_false: Expr = Field(description="Value when condition is zero")


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Const | BinaryOp | Conditional

# Rebuild models for recursive forward references
BinaryOp.model_rebuild()
Conditional.model_rebuild()
