import logging

from .lexer import Lexer
from .tokens import TokenKind
from .tree import Operator, Literal, BinaryOp
from .util import (UnexpectedToken, InvalidCharacter, UnbalancedParenthesis,
                   MalformedNumericLiteral, NestingTooDeep)


logger = logging.getLogger(__name__)


class Parser:
    '''
    Recursive descent parser for one line of infix arithmetic.

    Owns its lexer and cursor for the duration of a parse; there is one
    token of lookahead and no backtracking.
    '''

    GRAMMAR = '''\
expression := term (('+' | '-') term)*
term       := factor (('*' | '/') factor)*
factor     := Number | '(' expression ')'\
'''

    # Operators by precedence level, loosest first.
    EXPRESSION_OPERATORS = {
        TokenKind.PLUS: Operator.ADD,
        TokenKind.MINUS: Operator.SUB,
    }
    TERM_OPERATORS = {
        TokenKind.MULTIPLY: Operator.MUL,
        TokenKind.DIVIDE: Operator.DIV,
    }

    def __init__(self, line, lexer=None, strict=False):
        '''
        Create parser over line.

        :param lexer: Lexer to pull tokens from. A fresh one by default.
        :param strict: Reject anything left over after the expression,
                       instead of ignoring it.
        '''
        self.line = line
        self.lexer = lexer if lexer is not None else Lexer()
        self.strict = strict
        self.position = 0
        self.current = None

    def parse(self):
        '''
        Parse the whole line and return the root of its tree.
        '''
        self.position = 0
        self._advance()
        try:
            tree = self._expression()
        except RecursionError as e:
            raise NestingTooDeep('Expression nested too deeply') from e
        if self.strict:
            self._expect(TokenKind.END)
        elif self.current.kind is not TokenKind.END:
            logger.debug('ignoring trailing input from offset %d',
                         self.current.offset)
        logger.debug('parsed %r as %s', self.line, tree)
        return tree

    def _advance(self):
        self.current, self.position = self.lexer.next_token(self.line,
                                                            self.position)

    def _expect(self, kind, error=None):
        '''
        Consume the current token if it's of kind, or raise error for it.
        '''
        token = self.current
        if token.kind is kind:
            self._advance()
            return token
        if error is not None:
            raise error(token)
        elif token.kind is TokenKind.INVALID:
            raise InvalidCharacter(token, expected=kind.value)
        else:
            raise UnexpectedToken(token, expected=kind.value)

    def _fold(self, operand, operators):
        '''
        Left fold operand (op operand)* into a tree.
        '''
        left = operand()
        while self.current.kind in operators:
            op = operators[self.current.kind]
            self._advance()
            right = operand()
            left = BinaryOp(op, left, right)
        return left

    def _expression(self):
        return self._fold(self._term, type(self).EXPRESSION_OPERATORS)

    def _term(self):
        return self._fold(self._factor, type(self).TERM_OPERATORS)

    def _factor(self):
        token = self.current
        if token.kind is TokenKind.NUMBER:
            self._advance()
            return self._literal(token)
        elif token.kind is TokenKind.LEFT_PAREN:
            self._advance()
            inner = self._expression()
            self._expect(TokenKind.RIGHT_PAREN, UnbalancedParenthesis)
            return inner
        elif token.kind is TokenKind.INVALID:
            raise InvalidCharacter(token)
        else:
            raise UnexpectedToken(token)

    def _literal(self, token):
        try:
            return Literal(float(token.text))
        except ValueError as e:
            raise MalformedNumericLiteral(token) from e
