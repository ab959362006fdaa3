from functools import reduce
import operator
import logging

import regex

from .tokens import Token, TokenKind


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for the infix arithmetic *regular* grammar.

    Holds no state: the caller owns the position, so lexing can restart from
    any offset of the line.
    '''
    # Plain unsigned integers only: no sign, no point, no exponent, and no
    # thousands separators.
    NUMBER = r'[0-9]+'

    OPERATORS = {
        '+': TokenKind.PLUS,
        '-': TokenKind.MINUS,
        '*': TokenKind.MULTIPLY,
        '/': TokenKind.DIVIDE,
        '(': TokenKind.LEFT_PAREN,
        ')': TokenKind.RIGHT_PAREN,
    }
    assert not [operator
                for operator
                in OPERATORS
                if len(operator) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    SPACE = r'\s*'

    # All possible lexemes, after whatever leading space.
    LEXEME = r'(?<space>' + SPACE + r')' \
             r'(?:' \
             r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<end>\Z)|' \
             r'(?<invalid>.)' \
             r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, FLAGS)

    def next_token(self, line, position=0):
        '''
        Return the token starting at or after position, and the position
        just past it.

        Always returns something: END once the line is exhausted (without
        moving), INVALID for a single unrecognized character.
        '''
        match = type(self).PATTERN.match(line, position)
        groups = self.matchedgroups(match)
        offset = match.end('space')
        if 'number' in groups:
            token = Token(TokenKind.NUMBER, groups['number'], offset)
        elif 'operator' in groups:
            token = Token(type(self).OPERATORS[groups['operator']],
                          groups['operator'],
                          offset)
        elif 'invalid' in groups:
            token = Token(TokenKind.INVALID, groups['invalid'], offset)
        else:
            token = Token(TokenKind.END, '', offset)
        logger.debug('lexed %s at %d', token.kind.name, offset)
        return token, match.end()

    def lex(self, line):
        '''
        Take a line and lazily yield all of its tokens, END included.

        Doesn't stop on INVALID; that's for the parser to decide.
        '''
        position = 0
        while True:
            token, position = self.next_token(line, position)
            yield token
            if token.kind is TokenKind.END:
                return

    def matchedgroups(self, match):
        '''
        Return the lexeme groups that actually matched something.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value and key != 'space'}
