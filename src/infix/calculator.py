from collections import namedtuple

from .parser import Parser
from .evaluator import Evaluator
from .util import InfixError


class Result(namedtuple('Result', 'value error')):
    '''
    Outcome of one calculation: a float value, or the InfixError that
    stopped it. Never both.
    '''
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None


def calculate(line, strict=False, lexer=None):
    '''
    Parse and evaluate one line.

    Bad input doesn't raise; it comes back as Result.error.
    '''
    try:
        tree = Parser(line, lexer=lexer, strict=strict).parse()
        return Result(Evaluator().evaluate(tree), None)
    except InfixError as e:
        return Result(None, e)
