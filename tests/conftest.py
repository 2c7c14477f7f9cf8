"""Shared pytest fixtures for exprtree tests."""

import pytest

from exprtree.core.ir import BinaryOp, Conditional, Const, Expr, Operator


@pytest.fixture
def two_plus_two() -> BinaryOp:
    """Return the tree for 2 + 2."""
    return BinaryOp(operator=Operator.ADD, left=Const(value=2), right=Const(value=2))


@pytest.fixture
def twelve(two_plus_two: BinaryOp) -> BinaryOp:
    """Return the tree for (2 + 2) * 3."""
    return BinaryOp(operator=Operator.MUL, left=two_plus_two, right=Const(value=3))


@pytest.fixture
def nested_conditional(twelve: BinaryOp) -> Conditional:
    """Return the tree for ((2 + 2) * 3) ? 1 : 2."""
    return Conditional(condition=twelve, on_true=Const(value=1), on_false=Const(value=2))


@pytest.fixture
def divide_by_zero() -> BinaryOp:
    """Return the tree for 5 / 0."""
    return BinaryOp(operator=Operator.DIV, left=Const(value=5), right=Const(value=0))


@pytest.fixture
def sample_trees(
    two_plus_two: BinaryOp,
    twelve: BinaryOp,
    nested_conditional: Conditional,
    divide_by_zero: BinaryOp,
) -> list[Expr]:
    """Return a spread of hand-built trees covering every node kind."""
    return [
        Const(value=0),
        Const(value=-5),
        two_plus_two,
        twelve,
        nested_conditional,
        divide_by_zero,
        Conditional(condition=Const(value=0), on_true=divide_by_zero, on_false=Const(value=5)),
        BinaryOp(
            operator=Operator.SUB,
            left=Const(value=-3),
            right=Conditional(
                condition=Const(value=1), on_true=Const(value=10), on_false=Const(value=20)
            ),
        ),
    ]
