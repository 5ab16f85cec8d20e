from functools import wraps


class RPNError(Exception):
    pass


class LexError(RPNError):
    '''
    No token pattern matches at some position of the scanned string.

    Given the line, renders it with a caret under the offending column.
    '''
    def __init__(self, char, position, line=None):
        super().__init__("Couldn't lex {0!r}".format(char), char, position)
        self.char = char
        self.position = position
        self.line = line

    def __str__(self):
        if self.line is None:
            return self.args[0]
        return '\n'.join([self.line.rstrip('\r\n'),
                          ' ' * self.position +
                          '^ unrecognized token {0!r}'.format(self.char)])


class ParseError(RPNError):
    '''
    Infix expression is structurally broken, e.g. unbalanced parentheses.
    '''
    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


class EvaluationError(RPNError):
    '''
    RPN queue doesn't reduce to a single number.
    '''
    def __init__(self, reason='malformed RPN'):
        super().__init__(reason)
        self.reason = reason


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts exceptions to evaluation errors.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise EvaluationError(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
