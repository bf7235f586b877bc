"""Tests for tree evaluation."""

import pytest

from rpncalc import (
    BinaryOp, DivisionByZero, InvalidOperator, Literal, NotFullyEvaluated,
    apply_operator, evaluate, to_int,
)


def test_literal_evaluates_to_itself():
    assert evaluate(Literal(7)) == Literal(7)


@pytest.mark.parametrize('symbol, left, right, expected', [
    ('+', 2, 3, 5),
    ('-', 2, 3, -1),
    ('*', -4, 3, -12),
    ('/', 7, 2, 3),
    ('/', -7, 2, -3),
    ('/', 7, -2, -3),
    ('/', -7, -2, 3),
    ('/', 0, 5, 0),
])
def test_apply_operator(symbol, left, right, expected):
    assert apply_operator(symbol, left, right) == expected


def test_nested_tree():
    tree = BinaryOp(
        '-',
        BinaryOp('*', Literal(6), Literal(7)),
        BinaryOp('/', Literal(9), Literal(2)),
    )
    assert to_int(evaluate(tree)) == 38


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        evaluate(BinaryOp('/', Literal(5), Literal(0)))


def test_division_by_zero_from_subtree():
    tree = BinaryOp('/', Literal(1), BinaryOp('-', Literal(3), Literal(3)))
    with pytest.raises(ZeroDivisionError):
        evaluate(tree)


def test_invalid_operator():
    with pytest.raises(InvalidOperator) as excinfo:
        evaluate(BinaryOp('%', Literal(5), Literal(2)))
    assert excinfo.value.operator == '%'


def test_to_int_requires_a_literal():
    tree = BinaryOp('+', Literal(1), Literal(2))
    with pytest.raises(NotFullyEvaluated):
        to_int(tree)
    assert to_int(evaluate(tree)) == 3


def test_large_integers_do_not_overflow():
    tree = BinaryOp('*', Literal(2 ** 40), Literal(2 ** 40))
    assert to_int(evaluate(tree)) == 2 ** 80


def test_deep_tree_is_evaluated_without_recursion():
    tree = Literal(0)
    for _ in range(5000):
        tree = BinaryOp('+', Literal(1), tree)
    assert to_int(evaluate(tree)) == 5000
    assert str(tree).startswith('(1 + (1 + ')


def test_evaluate_rejects_non_nodes():
    with pytest.raises(TypeError):
        evaluate(BinaryOp('+', Literal(1), 2))
