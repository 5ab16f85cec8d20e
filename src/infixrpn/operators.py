'''
Operator table: precedence, associativity and arithmetic of every operator.

Lower rank binds tighter. Unary plus and minus are keyed by their canonical
names, POS and NEG, which the lexer substitutes for unary + and -.
'''

from enum import Enum
from typing import Callable, NamedTuple, Optional
import math
import operator

import numpy as np


class Associativity(Enum):
    LEFT = 'Left'
    RIGHT = 'Right'

    def __str__(self):
        return self.value


class OperatorSpec(NamedTuple):
    symbol: str
    rank: int
    associativity: Associativity
    arity: int
    function: Callable[..., np.float32]

    def binds_before(self, incoming):
        '''
        Return True if self, sitting on the stack, must be output before
        pushing incoming.
        '''
        return (self.rank < incoming.rank or
                self.rank == incoming.rank and
                incoming.associativity is Associativity.LEFT)


INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def _int32(x):
    '''
    Truncate towards zero into a signed 32-bit int, saturating. NaN is 0.
    '''
    x = float(x)
    if math.isnan(x):
        return 0
    if x <= INT32_MIN:
        return INT32_MIN
    if x >= INT32_MAX:
        return INT32_MAX
    return int(x)


def _wrap32(n):
    n &= 0xFFFFFFFF
    return n - 2 ** 32 if n > INT32_MAX else n


def _lshift(left, right):
    return np.float32(_wrap32(_int32(left) << (_int32(right) & 31)))


def _rshift(left, right):
    # Python's >> on negative ints is already arithmetic.
    return np.float32(_int32(left) >> (_int32(right) & 31))


def _pos(only):
    return np.float32(only)


_LEFT = Associativity.LEFT
_RIGHT = Associativity.RIGHT

OPERATORS = {
    spec.symbol: spec
    for spec
    in [
        OperatorSpec('POS', 1, _RIGHT, 1, _pos),
        OperatorSpec('NEG', 1, _RIGHT, 1, operator.__neg__),
        OperatorSpec('/', 2, _LEFT, 2, operator.__truediv__),
        OperatorSpec('*', 2, _LEFT, 2, operator.__mul__),
        # Sign of the dividend, like C's fmod, not Python's %.
        OperatorSpec('%', 2, _LEFT, 2, np.fmod),
        OperatorSpec('+', 3, _LEFT, 2, operator.__add__),
        OperatorSpec('-', 3, _LEFT, 2, operator.__sub__),
        OperatorSpec('<<', 4, _LEFT, 2, _lshift),
        OperatorSpec('>>', 4, _LEFT, 2, _rshift),
    ]
}

UNARY = {'+': 'POS', '-': 'NEG'}


def lookup(symbol) -> Optional[OperatorSpec]:
    '''
    Return the spec for symbol, None if no such operator.
    '''
    return OPERATORS.get(symbol)
