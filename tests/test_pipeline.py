'''
End to end tests, line in, display string out
'''

from infixrpn import process
from infixrpn.pipeline import strip
from infixrpn.util import EvaluationError, LexError, ParseError

from pytest import mark, raises


@mark.parametrize('line, expected', [
    ('2+3*4', '2 3 4 * +\nResult: 14.00'),
    ('2-3-4', '2 3 - 4 -\nResult: -5.00'),
    ('5.9<<1', '5.9 1 <<\nResult: 10.00'),
    ('1/3', '1 3 /\nResult: 0.33'),
    ('-3', '3 NEG\nResult: -3.00'),
    ('(2)-3', '2 3 -\nResult: -1.00'),
    ('  1 + 2  \n', '1 2 +\nResult: 3.00'),
    ('abs(3)', '3 abs\nResult: 3.00'),
])
def test_process(line, expected):
    assert process(line) == expected


def test_interior_spaces_removed():
    # As if typed without them.
    assert process('1 2') == '12\nResult: 12.00'


def test_idempotent():
    assert process('(1+2)*-3') == process('(1+2)*-3')


def test_strip_columns():
    assert strip(' 1 +\t2 ') == ('1+\t2', [1, 3, 4, 5])


@mark.parametrize('line, message', [
    ('(2+3', 'missing closing parenthesis'),
    ('2+3)', 'missing opening parenthesis'),
    ('1,2', 'missing argument separator or opening parenthesis'),
])
def test_parse_errors(line, message):
    with raises(ParseError) as info:
        process(line)
    assert str(info.value) == message


def test_lex_error():
    with raises(LexError) as info:
        process('2+?')
    assert info.value.char == '?'
    assert str(info.value) == "2+?\n  ^ unrecognized token '?'"


def test_lex_error_points_at_actual_column():
    # The first . lexes fine as part of 1.5, the second doesn't.
    with raises(LexError) as info:
        process(' 1.5 + .\n')
    assert info.value.position == 7
    assert str(info.value) == " 1.5 + .\n       ^ unrecognized token '.'"


@mark.parametrize('line', ['', '   ', 'max(1,2)', '2+', '2*'])
def test_evaluation_errors(line):
    with raises(EvaluationError, match='malformed RPN'):
        process(line)


@mark.parametrize('line', ['*2', '*(2)(3)', '(*3)'])
def test_binary_operator_in_operand_position(line):
    with raises(LexError) as info:
        process(line)
    assert info.value.char == '*'
    assert str(info.value).endswith("^ unrecognized token '*'")
