'''
Abstract syntax tree for infix expressions.

Two shapes only, both immutable: Literal leaves and BinaryOp nodes. Grouping
parentheses leave no trace in the tree; str() puts them all back.
'''

from collections import namedtuple, deque
from enum import Enum


class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'


class Literal(namedtuple('Literal', 'value')):
    __slots__ = ()

    def __str__(self):
        return repr(self.value)


class BinaryOp(namedtuple('BinaryOp', 'operator left right')):
    __slots__ = ()

    def __str__(self):
        return render(self)


def render(node):
    '''
    Fully parenthesized text of the tree rooted at node.

    Same explicit stack walk as Evaluator.evaluate, so a long chain renders
    however deep its left spine goes.
    '''
    parts = deque()
    # (node, True) once both its operands are rendered on parts.
    pending = deque([(node, False)])
    while pending:
        node, reduced = pending.pop()
        if not isinstance(node, BinaryOp):
            parts.append(str(node))
        elif reduced:
            right = parts.pop()
            left = parts.pop()
            symbol = getattr(node.operator, 'value', node.operator)
            parts.append('({} {} {})'.format(left, symbol, right))
        else:
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))
    return parts.pop()
