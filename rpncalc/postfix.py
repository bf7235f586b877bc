'''
Infix -> postfix (RPN) conversion

The operator stack is not drained one operator at a time as in textbook
shunting-yard. An operator that does not bind strictly tighter than the
top of the stack flushes the whole stack to the output before it is
pushed, so "1 - 2 - 3" becomes "1 2 - 3 -" while "2 + 3 * 4" becomes
"2 3 4 * +".
'''

import logging
from typing import Iterable, Tuple

from .tokens import Number, Operator, Token, is_higher

logger = logging.getLogger(__name__)


def to_postfix(tokens: Iterable[Token], observer=None) -> Tuple[Token, ...]:
    output = []
    op_stack = []

    for tok in tokens:
        if isinstance(tok, Number):
            output.append(tok)
        elif isinstance(tok, Operator):
            if not op_stack or is_higher(tok, op_stack[-1]):
                op_stack.append(tok)
            else:
                while op_stack:
                    output.append(op_stack.pop())
                op_stack.append(tok)
        else:
            raise TypeError(f"to_postfix: unexpected token {tok!r}")

    while op_stack:
        output.append(op_stack.pop())

    postfix = tuple(output)
    logger.debug('postfix: %s', ' '.join(map(str, postfix)))
    if observer is not None:
        observer.on_postfix(postfix)
    return postfix
