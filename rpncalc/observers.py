'''
Debug side channel

Every pipeline stage accepts an optional observer and reports what it
produced. Observers only watch: nothing they return is used by the
pipeline.
'''

import logging

from tabulate import tabulate

from .nodes import BinaryOp, Literal


def format_tokens(tokens, tablefmt='psql'):
    '''
    Renders a token sequence as a table, one row per token
    '''
    rows = [(i, type(tok).__name__, str(tok)) for i, tok in enumerate(tokens)]
    return tabulate(rows, headers=['#', 'kind', 'value'], tablefmt=tablefmt, disable_numparse=True)


def format_tree(node, indent='  '):
    '''
    Renders a tree one node per line, children indented under their operator
    '''
    lines = []
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, BinaryOp):
            lines.append(indent * depth + current.operator)
            stack.append((current.right, depth + 1))
            stack.append((current.left, depth + 1))
        elif isinstance(current, Literal):
            lines.append(indent * depth + str(current.value))
        else:
            raise TypeError(f"format_tree: not an expression node: {current!r}")
    return '\n'.join(lines)


class Observer:
    def on_tokens(self, text, tokens):
        pass

    def on_postfix(self, postfix):
        pass

    def on_tree(self, tree):
        pass


class LoggingObserver(Observer):
    '''
    Writes every intermediate stage to a logger
    '''

    def __init__(self, logger=None, level=logging.DEBUG):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def on_tokens(self, text, tokens):
        self.logger.log(self.level, 'Expression: %s\nTokens:\n%s', text, format_tokens(tokens))

    def on_postfix(self, postfix):
        self.logger.log(self.level, 'RPN: %s', ' '.join(map(str, postfix)))

    def on_tree(self, tree):
        self.logger.log(self.level, 'AST: %s\n%s', tree, format_tree(tree))


class RecordingObserver(Observer):
    def __init__(self):
        self.events = []

    def on_tokens(self, text, tokens):
        self.events.append(('tokens', tokens))

    def on_postfix(self, postfix):
        self.events.append(('postfix', postfix))

    def on_tree(self, tree):
        self.events.append(('tree', tree))

    @property
    def stages(self):
        return [stage for stage, _ in self.events]

    def last(self, stage):
        for name, value in reversed(self.events):
            if name == stage:
                return value
        raise KeyError(stage)
