class InfixError(Exception):
    '''
    Base of everything the calculator reports about bad input.

    args[0] is always a message fit for the user.
    '''
    pass


class ParseError(InfixError):
    pass


class UnexpectedToken(ParseError):
    '''
    A production needed some other kind of token than the current one.
    '''

    def __init__(self, token, expected=None):
        self.token = token
        self.expected = expected
        super().__init__(self.describe(token, expected))

    @property
    def kind(self):
        return self.token.kind

    @property
    def text(self):
        return self.token.text

    @property
    def offset(self):
        return self.token.offset

    @staticmethod
    def describe(token, expected):
        if token.text:
            found = '{} {!r}'.format(token.kind.name, token.text)
        else:
            found = token.kind.name
        message = 'Unexpected {} at offset {}'.format(found, token.offset)
        if expected is not None:
            message += ', expected {!r}'.format(expected)
        return message


class InvalidCharacter(UnexpectedToken):
    @staticmethod
    def describe(token, expected):
        return 'Invalid character {!r} at offset {}'.format(
            token.text, token.offset)


class UnbalancedParenthesis(UnexpectedToken):
    def __init__(self, token):
        super().__init__(token, expected=')')


class MalformedNumericLiteral(ParseError):
    def __init__(self, token):
        self.token = token
        super().__init__('Cannot convert {!r} at offset {}'.format(
            token.text, token.offset))


class NestingTooDeep(ParseError):
    pass


class EvaluationError(InfixError):
    pass


class UnknownOperator(EvaluationError):
    def __init__(self, operator):
        self.operator = operator
        super().__init__('Unknown operator {!r}'.format(operator))


class UnknownNode(EvaluationError):
    def __init__(self, node):
        self.node = node
        super().__init__('Unknown node {!r}'.format(node))
