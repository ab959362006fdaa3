from collections import deque
import logging
import operator
import math

from .tree import Operator, Literal, BinaryOp
from .util import UnknownOperator, UnknownNode


logger = logging.getLogger(__name__)


def _truediv(left, right):
    '''
    IEEE 754 division: by zero gives a signed infinity, or nan for 0/0.

    Python's own float division raises instead.
    '''
    try:
        return operator.__truediv__(left, right)
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


class Evaluator:
    '''
    Reduces a tree to a float.

    Walks with an explicit stack, like a stack machine fed the tree in
    postfix order, so chains like 1 + 1 + ... + 1 don't hit the recursion
    limit. Left operands are always evaluated before right ones.
    '''

    OPERATORS = {
        Operator.ADD: operator.__add__,
        Operator.SUB: operator.__sub__,
        Operator.MUL: operator.__mul__,
        Operator.DIV: _truediv,
    }

    def evaluate(self, node):
        '''
        Return the value of the tree rooted at node.
        '''
        values = deque()
        # (node, True) once its children are on the values stack.
        pending = deque([(node, False)])
        while pending:
            node, reduced = pending.pop()
            if isinstance(node, Literal):
                values.append(float(node.value))
            elif isinstance(node, BinaryOp):
                if reduced:
                    right = values.pop()
                    left = values.pop()
                    values.append(self._apply(node.operator, left, right))
                else:
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
            else:
                raise UnknownNode(node)
        result = values.pop()
        logger.debug('evaluated to %r', result)
        return result

    def _apply(self, op, left, right):
        try:
            f = type(self).OPERATORS[op]
        except (KeyError, TypeError) as e:
            raise UnknownOperator(op) from e
        return f(left, right)
