'''
Expression tree: a closed set of two node kinds, Literal and BinaryOp
'''

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class BinaryOp:
    operator: str
    left: 'Expr'
    right: 'Expr'

    def __str__(self):
        return fold(self, str, lambda op, left, right: f"({left} {op} {right})")


Expr = Union[Literal, BinaryOp]


def fold(node, leaf, combine):
    '''
    Post-order reduction of a tree without recursion

    leaf(literal) gives the value of a Literal, combine(operator, left,
    right) the value of a BinaryOp from the values of its children. The
    left subtree is always reduced before the right one. Depth is limited
    only by memory, so chains of thousands of operators are fine.
    '''
    values = []
    stack = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if isinstance(current, Literal):
            values.append(leaf(current))
        elif isinstance(current, BinaryOp):
            if expanded:
                right = values.pop()
                left = values.pop()
                values.append(combine(current.operator, left, right))
            else:
                stack.append((current, True))
                stack.append((current.right, False))
                stack.append((current.left, False))
        else:
            raise TypeError(f"not an expression node: {current!r}")
    return values.pop()
