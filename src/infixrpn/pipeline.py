'''
The whole pipeline: line to tokens, to RPN, to result.
'''

from .converter import to_rpn
from .lexer import Lexer
from .machine import Machine
from .util import LexError


def strip(line):
    '''
    Strip line of surrounding whitespace and interior spaces.

    Return stripped line, and column in the original line of each character
    kept.
    '''
    indent = len(line) - len(line.lstrip())
    kept = [(indent + index, char)
            for index, char
            in enumerate(line.strip())
            if char != ' ']
    return ''.join(char for _, char in kept), [index for index, _ in kept]


def process(line):
    '''
    Convert line to RPN and evaluate it.

    Return RPN and result, as displayed. Raise an RPNError on bad input, whose
    str() is the diagnostic for the user.
    '''
    stripped, columns = strip(line)
    try:
        tokens = Lexer().tokenize(stripped)
    except LexError as e:
        raise LexError(e.char, columns[e.position], line) from e
    trace, result = Machine().evaluate(to_rpn(tokens))
    return '{}\nResult: {}'.format(trace, result)
