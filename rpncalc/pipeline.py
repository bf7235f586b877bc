'''
Staged pipeline: text -> tokens -> postfix -> tree -> int

Session carries the state of one parse run. Every stage method returns a
new Session and leaves the one it was called on untouched, so a session
can be stopped, inspected and resumed at any stage:

    (Session.from_text('2 * 4 + 3 * 2')
        .enable_debug()
        .tokenize()
        .to_postfix()
        .disable_debug()
        .build()
        .evaluate())
'''

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .builder import build_tree
from .evaluator import evaluate, to_int
from .lexer import tokenize
from .nodes import Expr
from .observers import LoggingObserver, Observer
from .postfix import to_postfix
from .tokens import Token


@dataclass(frozen=True)
class Session:
    text: str
    tokens: Optional[Tuple[Token, ...]] = None
    postfix: Optional[Tuple[Token, ...]] = None
    tree: Optional[Expr] = None
    observer: Optional[Observer] = None

    @classmethod
    def from_text(cls, text, observer=None):
        return cls(text=text, observer=observer)

    @property
    def debug_enabled(self):
        return self.observer is not None

    def enable_debug(self, observer=None):
        return replace(self, observer=observer or LoggingObserver())

    def disable_debug(self):
        return replace(self, observer=None)

    def tokenize(self):
        return replace(self, tokens=tokenize(self.text, self.observer), postfix=None, tree=None)

    def to_postfix(self):
        session = self if self.tokens is not None else self.tokenize()
        return replace(session, postfix=to_postfix(session.tokens, self.observer), tree=None)

    def build(self):
        session = self if self.postfix is not None else self.to_postfix()
        return replace(session, tree=build_tree(session.postfix, self.observer))

    def collect(self) -> Expr:
        if self.tree is not None:
            return self.tree
        return self.build().tree

    def evaluate(self) -> int:
        return to_int(evaluate(self.collect()))


def calculate(text: str, observer=None) -> int:
    '''
    Evaluates an infix expression in one go
    '''
    tokens = tokenize(text, observer)
    postfix = to_postfix(tokens, observer)
    tree = build_tree(postfix, observer)
    return to_int(evaluate(tree))
