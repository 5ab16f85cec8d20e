import numpy as np

from .operators import lookup
from .tokens import Stack, Token, TokenKind
from .util import EvaluationError, wrap_user_errors


class Machine:
    '''
    Arithmetic stack machine (RPN evaluator).

    Takes an RPN queue, as produced by the converter, and runs it. All
    arithmetic is single precision, and every intermediate result is rounded
    to the machine's precision before going back on the stack, just as it
    would be displayed.

    Holds no stack between runs; one machine can evaluate any number of
    queues.
    '''

    DEFAULT_PRECISION = 2

    # Token kind to number of operands it takes.
    ARITIES = {
        TokenKind.UNARY: 1,
        TokenKind.BINARY: 2,
    }

    def __init__(self, precision=None):
        '''
        Create machine.

        :param precision: Number of fractional digits results are rounded to.
        '''
        if precision is None:
            precision = type(self).DEFAULT_PRECISION
        self.precision = precision

    def evaluate(self, rpn):
        '''
        Run RPN queue, consuming it. Return trace of the RPN and the result.

        :raises EvaluationError: unless the queue reduces to a single number.
        '''
        stack = Stack()
        trace = []
        # IEEE semantics, e.g. 1/0 is inf, not an exception.
        with np.errstate(all='ignore'):
            while rpn:
                token = rpn.dequeue()
                trace.append(token.lexeme)
                if token.kind.isnumber:
                    stack.push(token)
                elif token.kind.isoperator:
                    stack.push(self._apply(token, stack))
                elif token.kind is TokenKind.FUNCTION:
                    # Recognized, not evaluated.
                    pass
                else:
                    raise EvaluationError()

            result = stack.pop()
            if result is None or stack or not result.kind.isnumber:
                raise EvaluationError()
            return ' '.join(trace), self.format(self._iconvert(result.lexeme))

    def _apply(self, token, stack):
        '''
        Pop operands for operator token, and return the result as a token.
        '''
        spec = lookup(token.lexeme)
        if spec is None or spec.arity != type(self).ARITIES[token.kind]:
            raise EvaluationError()
        # If you don't reverse, you'll do 3-2 when you say 2 3 -.
        args = [self._iconvert(operand.lexeme)
                for operand
                in reversed(self._popstack(stack, spec.arity))]
        return Token(TokenKind.FLOAT, self.format(spec.function(*args)))

    def _popstack(self, stack, n=1):
        '''
        Pop specified number of tokens from stack, topmost first.
        '''
        if len(stack) < n:
            raise EvaluationError()
        return [stack.pop() for _ in range(n)]

    @wrap_user_errors('Cannot convert {1}')
    def _iconvert(self, lexeme):
        '''
        Convert lexeme to a number for computation.
        '''
        return np.float32(lexeme)

    def format(self, number):
        '''
        Format number rounded to precision, e.g. 0.33 for 1/3.
        '''
        return '{0:.{1}f}'.format(float(number), self.precision)
