'''
Tokens, and the containers the converter and machine shuffle them through.
'''

from collections import deque
from enum import Enum
from typing import NamedTuple


class TokenKind(Enum):
    INTEGER = 'IntegerLiteral'
    FLOAT = 'FloatLiteral'
    UNARY = 'UnaryOperator'
    BINARY = 'BinaryOperator'
    FUNCTION = 'Function'
    OPEN_PAREN = 'OpenParen'
    CLOSE_PAREN = 'CloseParen'
    SEPARATOR = 'ArgumentSeparator'
    WHITESPACE = 'Whitespace'

    def __str__(self):
        return self.value

    @property
    def isnumber(self):
        return self in NUMBERS

    @property
    def isoperator(self):
        return self in OPERATORS


NUMBERS = frozenset({TokenKind.INTEGER, TokenKind.FLOAT})
OPERATORS = frozenset({TokenKind.UNARY, TokenKind.BINARY})


class Token(NamedTuple):
    kind: TokenKind
    lexeme: str

    def __str__(self):
        return self.lexeme


class Queue:
    '''
    FIFO of tokens. Enqueue at the back, dequeue from the front.
    '''

    def __init__(self, tokens=()):
        self._items = deque(tokens)

    def enqueue(self, token):
        self._items.append(token)

    def dequeue(self):
        '''
        Remove and return the front token, None if empty.
        '''
        if not self._items:
            return None
        return self._items.popleft()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, list(self._items))

    def __str__(self):
        return ' '.join(map(str, self._items))


class Stack:
    '''
    LIFO of tokens.
    '''

    def __init__(self):
        self._items = deque()

    def push(self, token):
        self._items.append(token)

    def pop(self):
        '''
        Remove and return the top token, None if empty.
        '''
        if not self._items:
            return None
        return self._items.pop()

    def peek(self):
        '''
        Return the top token without removing it, None if empty.
        '''
        if not self._items:
            return None
        return self._items[-1]

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, list(self._items))
