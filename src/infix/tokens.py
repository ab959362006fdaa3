from collections import namedtuple
from enum import Enum


class TokenKind(Enum):
    NUMBER = 'number'
    PLUS = '+'
    MINUS = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    LEFT_PAREN = '('
    RIGHT_PAREN = ')'
    END = 'end'
    INVALID = 'invalid'


class Token(namedtuple('Token', 'kind text offset')):
    '''
    One lexeme of an infix line.

    text is the number's digits for NUMBER; for the other kinds it's only
    kept for diagnostics (the operator character, the bad character, or ''
    at the end of input). offset is where the token starts in the line.
    '''
    __slots__ = ()
