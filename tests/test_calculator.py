'''
End to end: text in, Result out.
'''

import math

from pytest import mark

from infix import calculate
from infix.util import UnexpectedToken, InvalidCharacter, UnbalancedParenthesis


@mark.parametrize('line, value', [
    ('42', 42.0),
    ('2 + 3 * 4', 14.0),
    ('10 - 2 - 3', 5.0),
    ('100 / 10 / 2', 5.0),
    ('(2 + 3) * 4', 20.0),
    ('((1 + 2) * (3 + 4))', 21.0),
    ('1+2', 3.0),
    ('  1  +  2  ', 3.0),
    ('7 / 2', 3.5),
    ('007', 7.0),
])
def test_values(line, value):
    result = calculate(line)
    assert result.ok
    assert result.error is None
    assert result.value == value


def test_division_by_zero_is_not_an_error():
    assert calculate('5 / 0').value == math.inf
    assert calculate('0 - 5 / 0').value == -math.inf
    assert calculate('(0 - 5) / 0').value == -math.inf
    result = calculate('0 / 0')
    assert result.ok
    assert math.isnan(result.value)


def test_no_unary_minus():
    result = calculate('-5 / 0')
    assert not result.ok
    assert isinstance(result.error, UnexpectedToken)


def test_unbalanced_parenthesis():
    result = calculate('(1 + 2')
    assert not result.ok
    assert result.value is None
    assert isinstance(result.error, UnbalancedParenthesis)


def test_invalid_character():
    result = calculate('1 + a')
    assert isinstance(result.error, InvalidCharacter)
    assert result.error.offset == 4


def test_empty_line_is_an_error_not_zero():
    result = calculate('')
    assert not result.ok
    assert result.value is None


def test_trailing_input():
    assert calculate('1 + 2 abc').value == 3.0
    assert isinstance(calculate('1 + 2 abc', strict=True).error,
                      InvalidCharacter)


def test_idempotent():
    for line in '2 + 3 * 4', '1 / 3', '0 / 0', '5 / 0', '(1':
        first, second = calculate(line), calculate(line)
        if first.ok:
            assert first.value.hex() == second.value.hex()
        else:
            assert type(first.error) is type(second.error)
            assert first.error.args == second.error.args
