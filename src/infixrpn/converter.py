'''
Infix to RPN, by Dijkstra's shunting-yard algorithm.

Extended with functions and argument separators. Functions are only moved
into place, behind their arguments; the machine doesn't run them.
'''

from .operators import lookup
from .tokens import Queue, Stack, TokenKind
from .util import ParseError


MISSING_SEPARATOR = 'missing argument separator or opening parenthesis'
MISSING_OPEN = 'missing opening parenthesis'
MISSING_CLOSE = 'missing closing parenthesis'


def to_rpn(tokens):
    '''
    Return queue of tokens in RPN order.

    :param tokens: infix tokens, whitespace already dropped by the lexer.
    :raises ParseError: on unbalanced parentheses or a misplaced separator.
    '''
    output = Queue()
    stack = Stack()
    for token in tokens:
        kind = token.kind
        if kind.isnumber:
            output.enqueue(token)
        elif kind is TokenKind.FUNCTION:
            stack.push(token)
        elif kind is TokenKind.SEPARATOR:
            _unwind(stack, output)
            if not stack:
                raise ParseError(MISSING_SEPARATOR)
        elif kind.isoperator:
            _shunt(token, stack, output)
        elif kind is TokenKind.OPEN_PAREN:
            stack.push(token)
        elif kind is TokenKind.CLOSE_PAREN:
            _unwind(stack, output)
            if not stack:
                raise ParseError(MISSING_OPEN)
            # Drop the (, it has no place in RPN.
            stack.pop()
            top = stack.peek()
            if top is not None and top.kind is TokenKind.FUNCTION:
                output.enqueue(stack.pop())
        else:
            raise ParseError('unexpected {} token {!r}'.format(kind,
                                                               token.lexeme))

    while stack:
        top = stack.pop()
        if top.kind is TokenKind.OPEN_PAREN:
            raise ParseError(MISSING_CLOSE)
        output.enqueue(top)
    return output


def _unwind(stack, output):
    '''
    Move tokens from stack to output until an open parenthesis is on top, or
    the stack is empty.
    '''
    while stack and stack.peek().kind is not TokenKind.OPEN_PAREN:
        output.enqueue(stack.pop())


def _shunt(token, stack, output):
    '''
    Move binary operators that bind before token from stack to output, then
    push token.

    Only binary operators are compared; a unary operator on top of the stack
    stops the scan, as a parenthesis would.
    '''
    incoming = lookup(token.lexeme)
    while stack:
        top = stack.peek()
        if top.kind is not TokenKind.BINARY:
            break
        if not lookup(top.lexeme).binds_before(incoming):
            break
        output.enqueue(stack.pop())
    stack.push(token)
