'''Integer arithmetic expressions through a lexer -> postfix -> tree -> value pipeline

Example:
    >>> from rpncalc import calculate
    >>> calculate('2 * 4 + 3 * 2')
    14
'''

from .errors import (
    CalcError, LexError, PrecedenceError, TreeBuildError,
    DivisionByZero, InvalidOperator, NotFullyEvaluated,
)
from .tokens import Number, Operator, Token, PRECEDENCE, precedence
from .nodes import Literal, BinaryOp, Expr
from .lexer import tokenize
from .postfix import to_postfix
from .builder import build_tree
from .evaluator import evaluate, to_int, apply_operator
from .observers import Observer, LoggingObserver, RecordingObserver, format_tokens, format_tree
from .pipeline import Session, calculate

__version__ = '0.1.0'

__all__ = [
    'CalcError', 'LexError', 'PrecedenceError', 'TreeBuildError',
    'DivisionByZero', 'InvalidOperator', 'NotFullyEvaluated',
    'Number', 'Operator', 'Token', 'PRECEDENCE', 'precedence',
    'Literal', 'BinaryOp', 'Expr',
    'tokenize', 'to_postfix', 'build_tree',
    'evaluate', 'to_int', 'apply_operator',
    'Observer', 'LoggingObserver', 'RecordingObserver', 'format_tokens', 'format_tree',
    'Session', 'calculate',
]
