'''
Evaluator: expression tree -> integer
'''

import operator

from .errors import DivisionByZero, InvalidOperator, NotFullyEvaluated
from .nodes import Expr, Literal, fold


def truncating_div(left: int, right: int) -> int:
    '''
    Integer division rounded toward zero (7 / -2 == -3, not -4)
    '''
    if right == 0:
        raise DivisionByZero(f"division by zero: {left} / {right}")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


operations = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': truncating_div,
}


def apply_operator(symbol: str, left: int, right: int) -> int:
    try:
        func = operations[symbol]
    except KeyError:
        raise InvalidOperator(symbol) from None
    return func(left, right)


def evaluate(node: Expr) -> Literal:
    '''
    Reduces a tree to a Literal, left subtree first
    '''
    if isinstance(node, Literal):
        return node
    return Literal(fold(node, to_int, apply_operator))


def to_int(node: Expr) -> int:
    if isinstance(node, Literal):
        return node.value
    raise NotFullyEvaluated(f"expression is not reduced to a literal: {node}")
