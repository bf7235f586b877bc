'''
Token variants produced by the lexer and reordered by the postfix converter
'''

from dataclasses import dataclass
from typing import Union

from .errors import PrecedenceError


# 연산자 우선순위 (값이 클수록 먼저 묶임)
PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
}


@dataclass(frozen=True)
class Number:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Operator:
    symbol: str

    def __str__(self):
        return self.symbol


Token = Union[Number, Operator]


def precedence(symbol: str) -> int:
    try:
        return PRECEDENCE[symbol]
    except KeyError:
        raise PrecedenceError(symbol) from None


def is_higher(op: Operator, top: Operator) -> bool:
    '''
    True when op binds strictly tighter than the operator on top of the stack
    '''
    return precedence(op.symbol) > precedence(top.symbol)
