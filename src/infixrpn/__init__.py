'''
Infix to RPN converter and calculator.

Takes an arithmetic expression in the usual infix notation, e.g. 2+3*4,
converts it to Reverse Polish Notation, 2 3 4 * +, and evaluates that.

Supports unary + and -, the binary + - * / % and the bitwise shifts << and >>,
which truncate their operands to 32-bit integers. Everything else is single
precision floating point, rounded to two decimals at each step.

Function calls, e.g. max(1,2), are understood by the parser, which puts them
in the right place in the RPN, but are not evaluated.
'''

from .cli import CLI
from .converter import to_rpn
from .lexer import Lexer
from .machine import Machine
from .pipeline import process
from .util import RPNError, LexError, ParseError, EvaluationError


__all__ = ('process', 'to_rpn', 'Machine', 'Lexer', 'CLI',
           'RPNError', 'LexError', 'ParseError', 'EvaluationError')
