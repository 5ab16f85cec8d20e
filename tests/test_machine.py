'''
RPN machine tests
'''

from infixrpn.converter import to_rpn
from infixrpn.machine import Machine
from infixrpn.tokens import Queue, Token, TokenKind
from infixrpn.util import EvaluationError

from pytest import fixture, mark, raises


@fixture
def run(lexer, machine):
    def evaluate(line):
        return machine.evaluate(to_rpn(lexer.tokenize(line)))
    return evaluate


def integer(lexeme):
    return Token(TokenKind.INTEGER, lexeme)


@mark.parametrize('line, result', [
    ('2+3*4', '14.00'),
    ('2-3-4', '-5.00'),
    ('(2+3)*4', '20.00'),
    # A stacked unary operator is only output after the binary one.
    ('-2+3', '-5.00'),
    ('-2*3', '-6.00'),
    ('--3', '3.00'),
    ('+3', '3.00'),
    ('2*-3', '-6.00'),
    ('10/4', '2.50'),
    ('1/3', '0.33'),
    ('2/3', '0.67'),
    ('7%3', '1.00'),
    ('-7%3', '-1.00'),
    ('5.9<<1', '10.00'),
    ('-8>>1', '-4.00'),
    ('1<<2+3', '32.00'),
    ('1.5*1.5', '2.25'),
])
def test_arithmetic(run, line, result):
    assert run(line)[1] == result


def test_trace(run):
    assert run('2+3*4') == ('2 3 4 * +', '14.00')


def test_single_number(run):
    assert run('5') == ('5', '5.00')


def test_intermediate_results_rounded(run):
    # 1/3 goes back on the stack as 0.33.
    assert run('1/3*3') == ('1 3 / 3 *', '0.99')


def test_single_precision(run):
    # 16777217 isn't representable as a float32.
    assert run('16777217+0')[1] == '16777216.00'


@mark.parametrize('line, result', [
    ('1/0', 'inf'),
    ('-1/0', '-inf'),
    ('0/0', 'nan'),
    ('1/0-1/0', 'nan'),
])
def test_ieee_division(run, line, result):
    assert run(line)[1] == result


def test_functions_ignored(run):
    assert run('abs(-4)') == ('4 NEG abs', '-4.00')


def test_precision():
    machine = Machine(precision=3)
    assert machine.evaluate(to_rpn([integer('1'),
                                    Token(TokenKind.BINARY, '/'),
                                    integer('3')])) == ('1 3 /', '0.333')


def test_consumes_queue(machine):
    queue = Queue([integer('1'), integer('2'), Token(TokenKind.BINARY, '+')])
    machine.evaluate(queue)
    assert len(queue) == 0


def test_no_state_between_runs(machine):
    with raises(EvaluationError):
        machine.evaluate(Queue([integer('1'), integer('2')]))
    assert machine.evaluate(Queue([integer('3')])) == ('3', '3.00')


@mark.parametrize('tokens', [
    [],
    [integer('1'), integer('2')],
    [integer('1'), Token(TokenKind.BINARY, '+')],
    [Token(TokenKind.UNARY, 'NEG')],
    [Token(TokenKind.FUNCTION, 'sin')],
    [integer('1'), Token(TokenKind.OPEN_PAREN, '(')],
    [integer('1'), integer('2'), Token(TokenKind.BINARY, '^')],
    # Arity doesn't match kind.
    [integer('1'), Token(TokenKind.UNARY, '+')],
], ids=str)
def test_malformed(machine, tokens):
    with raises(EvaluationError, match='malformed RPN'):
        machine.evaluate(Queue(tokens))


def test_bad_literal(machine):
    with raises(EvaluationError, match='Cannot convert abc'):
        machine.evaluate(Queue([Token(TokenKind.FLOAT, 'abc')]))
