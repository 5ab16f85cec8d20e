from functools import reduce
import operator

import regex

from .operators import OPERATORS, UNARY
from .tokens import Token, TokenKind
from .util import LexError


def _compile(patterns, flags):
    '''
    Compile (kind, pattern) pairs, keeping their order.
    '''
    return tuple((kind, regex.compile(pattern, flags=flags))
                 for kind, pattern
                 in patterns)


class Lexer:
    '''
    Lexer for infix arithmetic expressions.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    OPEN_PAREN = r'\('
    CLOSE_PAREN = r'\)'
    # sin, max, etc. Recognized, never evaluated.
    FUNCTION = r'[a-zA-Z]+'
    # Everything binary in the operator table. Longest first, so << isn't
    # mistaken for anything shorter should a < operator ever turn up.
    BINARY_OPERATOR = r'(?:' + r'|'.join(
        map(regex.escape,
            sorted((symbol
                    for symbol, spec
                    in OPERATORS.items()
                    if spec.arity == 2),
                   key=len,
                   reverse=True))) + r')'
    UNARY_OPERATOR = r'(?:' + r'|'.join(map(regex.escape, UNARY)) + r')'
    FLOAT = r'''
             # 1.5, 12.25, but not 1. or .5
             \d+
             \.
             \d+
             '''
    INTEGER = r'\d+'
    SEPARATOR = r','
    SPACE = r'\s+'

    # Order matters: the first pattern matching at a position wins, so e.g.
    # FLOAT must precede INTEGER, and BINARY must get first dibs on + and -.
    PATTERNS = (
        (TokenKind.OPEN_PAREN, OPEN_PAREN),
        (TokenKind.CLOSE_PAREN, CLOSE_PAREN),
        (TokenKind.FUNCTION, FUNCTION),
        (TokenKind.BINARY, BINARY_OPERATOR),
        (TokenKind.UNARY, UNARY_OPERATOR),
        (TokenKind.FLOAT, FLOAT),
        (TokenKind.INTEGER, INTEGER),
        (TokenKind.SEPARATOR, SEPARATOR),
        (TokenKind.WHITESPACE, SPACE),
    )
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)
    COMPILED = _compile(PATTERNS, FLAGS)

    # Tokens after which an operator is binary.
    OPERANDS = frozenset({TokenKind.INTEGER,
                          TokenKind.FLOAT,
                          TokenKind.CLOSE_PAREN})

    def lex(self, line):
        '''
        Take a line and yield all tokens, whitespace excluded.

        Doesn't yield anything past the first character it can't lex, raising
        LexError there instead.
        '''
        position = 0
        previous = None
        while position < len(line):
            token, position = self._match(line, position, previous)
            if token is None:
                raise LexError(line[position], position)
            if token.kind is TokenKind.WHITESPACE:
                continue
            yield token
            previous = token

    def tokenize(self, line):
        '''
        Return all tokens of line, as a list.
        '''
        return list(self.lex(line))

    def _match(self, line, position, previous):
        '''
        Try patterns in order at position.

        Return token (None if nothing matched) and position past it.
        '''
        for kind, pattern in type(self).COMPILED:
            match = pattern.match(line, position)
            if match is None:
                continue
            lexeme = match.group(0)
            if kind is TokenKind.BINARY and not self.isoperand(previous):
                # Not binary here. + and - go on to the unary pattern, the
                # rest match nothing else and fail to lex.
                continue
            if kind is TokenKind.UNARY:
                lexeme = UNARY[lexeme]
            return Token(kind, lexeme), match.end()
        return None, position

    def isoperand(self, token):
        '''
        Return True if token ends an operand, so a binary operator may follow.
        '''
        return token is not None and token.kind in type(self).OPERANDS

    def grammar(self):
        '''
        Yield (kind, pattern) in the order they're tried.
        '''
        yield from type(self).PATTERNS
