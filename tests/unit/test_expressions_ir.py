"""Tests for the expression tree IR types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from exprtree.core.ir.expressions import BinaryOp, Conditional, Const, Operator


class TestConstruction:
    """Nodes validate their fields at construction."""

    def test_operator_from_symbol(self) -> None:
        expr = BinaryOp(operator="*", left=Const(value=1), right=Const(value=2))
        assert expr.operator is Operator.MUL

    def test_rejects_unknown_operator(self) -> None:
        with pytest.raises(ValidationError):
            BinaryOp(operator="%", left=Const(value=1), right=Const(value=2))

    def test_operator_is_closed(self) -> None:
        assert {op.value for op in Operator} == {"+", "-", "*", "/"}

    def test_const_rejects_string(self) -> None:
        with pytest.raises(ValidationError):
            Const(value="2")

    def test_const_rejects_float(self) -> None:
        with pytest.raises(ValidationError):
            Const(value=2.0)

    def test_const_rejects_bool(self) -> None:
        with pytest.raises(ValidationError):
            Const(value=True)

    def test_const_accepts_large_values(self) -> None:
        assert Const(value=10**30).value == 10**30

    def test_child_must_be_expression(self) -> None:
        with pytest.raises(ValidationError):
            BinaryOp(operator=Operator.ADD, left=1, right=Const(value=2))

    def test_conditional_requires_all_branches(self) -> None:
        with pytest.raises(ValidationError):
            Conditional(condition=Const(value=1), on_true=Const(value=2))


class TestImmutability:
    """Trees cannot be changed after construction."""

    def test_const_is_frozen(self) -> None:
        c = Const(value=1)
        with pytest.raises(ValidationError):
            c.value = 2  # type: ignore[misc]

    def test_binary_op_is_frozen(self, two_plus_two: BinaryOp) -> None:
        with pytest.raises(ValidationError):
            two_plus_two.operator = Operator.SUB  # type: ignore[misc]

    def test_operations_do_not_mutate(self, nested_conditional: Conditional) -> None:
        before = nested_conditional.model_copy(deep=True)
        nested_conditional.compute()
        nested_conditional.render()
        nested_conditional.encode()
        assert nested_conditional == before


class TestEquality:
    """Trees compare structurally."""

    def test_equal_trees(self, two_plus_two: BinaryOp) -> None:
        other = BinaryOp(operator="+", left=Const(value=2), right=Const(value=2))
        assert other == two_plus_two
        assert hash(other) == hash(two_plus_two)

    def test_different_operator(self, two_plus_two: BinaryOp) -> None:
        other = BinaryOp(operator=Operator.MUL, left=Const(value=2), right=Const(value=2))
        assert other != two_plus_two

    def test_different_value(self) -> None:
        assert Const(value=1) != Const(value=2)

    def test_different_shape(self) -> None:
        a = Conditional(condition=Const(value=1), on_true=Const(value=2), on_false=Const(value=3))
        b = Conditional(condition=Const(value=1), on_true=Const(value=3), on_false=Const(value=2))
        assert a != b

    def test_usable_as_dict_key(self, twelve: BinaryOp) -> None:
        cache = {twelve: twelve.compute()}
        assert cache[twelve.model_copy(deep=True)] == 12
