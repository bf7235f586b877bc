class CalcError(Exception):
    '''Base class for every failure of the expression pipeline'''


class LexError(CalcError):
    def __init__(self, char, position):
        super().__init__(f"illegal character {char!r} at position {position}")
        self.char = char
        self.position = position


class PrecedenceError(CalcError):
    def __init__(self, operator):
        super().__init__(f"no precedence defined for operator {operator!r}")
        self.operator = operator


class TreeBuildError(CalcError):
    pass


class DivisionByZero(CalcError, ZeroDivisionError):
    pass


class InvalidOperator(CalcError):
    def __init__(self, operator):
        super().__init__(f"invalid operator {operator!r}")
        self.operator = operator


class NotFullyEvaluated(CalcError):
    pass
