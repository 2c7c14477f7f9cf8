"""
exprtree - integer expression trees with an infix printer and a prefix wire format.

    from exprtree import BinaryOp, Const, Operator, decode

    e = BinaryOp(operator=Operator.ADD, left=Const(value=2), right=Const(value=2))
    e.compute()   # 4
    e.render()    # "((2)+(2))"
    e.encode()    # "BOp + C 2 C 2 "
    decode(e.encode()) == e
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .core import ir
from .core.errors import DecodeError, EvaluationError, ExprTreeError
from .core.expression_lang import EvalOptions, OverflowMode, decode, encode, evaluate, load, render
from .core.ir import BinaryOp, Conditional, Const, Expr, Operator

try:
    __version__ = version("exprtree")
except PackageNotFoundError:
    # Running from a source tree without an installed distribution
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ir",
    "BinaryOp",
    "Conditional",
    "Const",
    "Expr",
    "Operator",
    "EvalOptions",
    "OverflowMode",
    "decode",
    "encode",
    "evaluate",
    "load",
    "render",
    "ExprTreeError",
    "DecodeError",
    "EvaluationError",
]
