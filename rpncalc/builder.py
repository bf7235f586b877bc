'''
Postfix token sequence -> expression tree
'''

import logging
from collections import deque
from typing import Iterable

from .errors import TreeBuildError
from .nodes import BinaryOp, Expr, Literal
from .tokens import Number, Operator, Token, is_higher

logger = logging.getLogger(__name__)


def _combine(operands, op_stack):
    '''
    Pops the two front operands and the top operator into a BinaryOp,
    appended to the back of the operand queue
    '''
    if len(operands) < 2:
        raise TreeBuildError(f"need two operands to combine, have {len(operands)}")
    if not op_stack:
        raise TreeBuildError('no pending operator to combine operands with')
    left = operands.popleft()
    right = operands.popleft()
    node = BinaryOp(op_stack.pop().symbol, left, right)
    operands.append(node)
    return node


def build_tree(postfix: Iterable[Token], observer=None) -> Expr:
    '''
    Reduces a postfix sequence to a single tree

    Operators follow the same stack discipline as the postfix converter:
    an operator that does not bind strictly tighter than the stack top
    first combines the two front operands with the popped top operator.
    After the input is exhausted exactly one more combination is made and
    the last node of the queue is the root. Sequences that leave more than
    one operator pending are not fully reduced; the extra operands and
    operators are dropped.
    '''
    operands = deque()
    op_stack = []

    for tok in postfix:
        if isinstance(tok, Number):
            operands.append(Literal(tok.value))
        elif isinstance(tok, Operator):
            if not op_stack or is_higher(tok, op_stack[-1]):
                op_stack.append(tok)
            else:
                _combine(operands, op_stack)
                op_stack.append(tok)
        else:
            raise TypeError(f"build_tree: unexpected token {tok!r}")

    _combine(operands, op_stack)
    tree = operands[-1]

    if len(operands) > 1 or op_stack:
        logger.debug('dropping %d operand(s) and %d operator(s) left after the final combination',
                     len(operands) - 1, len(op_stack))
    if observer is not None:
        observer.on_tree(tree)
    return tree
