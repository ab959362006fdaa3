'''
Infix calculator.

Plain old four-function arithmetic on one line at a time: integers, + - * /,
and parentheses, with the usual precedence. Everything is a float, and
division by zero follows IEEE 754 (inf, -inf or nan) rather than failing.

Lexer turns a line into tokens, Parser builds a tree from them, Evaluator
reduces the tree to a number. calculate() does all three and hands back a
Result instead of raising.
'''

from .calculator import Result, calculate
from .cli import CLI
from .evaluator import Evaluator
from .lexer import Lexer
from .parser import Parser


__all__ = 'calculate', 'Result', 'Evaluator', 'Parser', 'Lexer', 'CLI'
