"""
exprtree Intermediate Representation (IR) types.

All node types are re-exported from this package.
"""

from .expressions import (
    BinaryOp,
    Conditional,
    Const,
    Expr,
    Operator,
)

__all__ = [
    "BinaryOp",
    "Conditional",
    "Const",
    "Expr",
    "Operator",
]
