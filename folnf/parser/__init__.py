"""Reading formulas from text: macro normalization, tokenization, and
recursive descent parsing.
"""

from .normalizer import normalize  # noqa

from .lexer import LexError, Token, TokenKind, tokenize  # noqa

from .parser import ParseError, Parser, TrailingTokens, UnexpectedToken, parse  # noqa


__all__ = [
    'normalize', 'tokenize', 'parse',

    'LexError', 'ParseError', 'TrailingTokens', 'UnexpectedToken'
]
