"""
Expression evaluator for exprtree.

Reduces an expression tree to an integer. Pure evaluation: no I/O, no
side effects, no Python eval(). A tree-walking interpreter over the
closed set of node types.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from exprtree.core.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    EvaluationDepthError,
    EvaluationError,
)
from exprtree.core.ir.expressions import BinaryOp, Conditional, Const, Expr, Operator

logger = logging.getLogger(__name__)


class OverflowMode(StrEnum):
    """What happens when an arithmetic result leaves the integer domain."""

    CHECKED = "checked"
    WRAPPING = "wrapping"
    SATURATING = "saturating"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class EvalOptions:
    """Evaluation settings.

    The integer domain is signed two's complement of ``int_bits`` width.
    ``overflow`` is applied to every constant and to the result of every
    arithmetic operation.
    """

    overflow: OverflowMode = OverflowMode.CHECKED
    int_bits: int = 64

    def __post_init__(self) -> None:
        if self.int_bits < 2:
            raise ValueError(f"int_bits must be at least 2, got {self.int_bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.int_bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.int_bits - 1)) - 1


DEFAULT_OPTIONS = EvalOptions()


def evaluate(expr: Expr, options: EvalOptions | None = None) -> int:
    """Evaluate an expression tree to an integer.

    Args:
        expr: Expression tree.
        options: Overflow policy and integer width. Defaults to checked
            64-bit arithmetic.

    Returns:
        The computed value.

    Raises:
        DivisionByZeroError: If a divisor evaluates to zero.
        ArithmeticOverflowError: If a constant or result overflows under
            checked mode.
        EvaluationDepthError: If the tree is too deep to walk.
    """
    try:
        return _interpret(expr, options or DEFAULT_OPTIONS)
    except RecursionError:
        raise EvaluationDepthError("Expression nested too deeply to evaluate") from None


def _interpret(expr: Expr, opts: EvalOptions) -> int:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Const):
        return _apply_overflow(expr.value, expr, opts)

    if isinstance(expr, BinaryOp):
        return _interpret_binary(expr, opts)

    if isinstance(expr, Conditional):
        return _interpret_conditional(expr, opts)

    raise EvaluationError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_binary(expr: BinaryOp, opts: EvalOptions) -> int:
    """Evaluate left, then right, then apply the operator."""
    left = _interpret(expr.left, opts)
    right = _interpret(expr.right, opts)

    if expr.operator == Operator.ADD:
        result = left + right
    elif expr.operator == Operator.SUB:
        result = left - right
    elif expr.operator == Operator.MUL:
        result = left * right
    else:
        if right == 0:
            raise DivisionByZeroError(f"Division by zero: {left} / {right}")
        result = _truncating_div(left, right)

    return _apply_overflow(result, expr, opts)


def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero (-7 / 2 == -3)."""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _apply_overflow(result: int, expr: Expr, opts: EvalOptions) -> int:
    """Bring a constant or arithmetic result into the configured integer domain."""
    if opts.overflow == OverflowMode.UNBOUNDED:
        return result
    if opts.min_value <= result <= opts.max_value:
        return result

    if opts.overflow == OverflowMode.CHECKED:
        where = f"operator {expr.operator.value}" if isinstance(expr, BinaryOp) else "constant"
        raise ArithmeticOverflowError(
            f"Integer overflow in {where}: {result} does not fit in {opts.int_bits} bits"
        )

    logger.debug("Overflow in %s: %d handled as %s", type(expr).__name__, result, opts.overflow)
    if opts.overflow == OverflowMode.SATURATING:
        return opts.max_value if result > 0 else opts.min_value

    # Wrapping: two's complement reduction
    span = 1 << opts.int_bits
    return (result - opts.min_value) % span + opts.min_value


def _interpret_conditional(expr: Conditional, opts: EvalOptions) -> int:
    """Evaluate the condition, then only the branch it selects."""
    if _interpret(expr.condition, opts) != 0:
        return _interpret(expr.on_true, opts)
    return _interpret(expr.on_false, opts)
