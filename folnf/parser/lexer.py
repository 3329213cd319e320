"""Split normalized formula text into tokens.

>>> [token.value for token in tokenize('∀x. (P(x) → x = f(A))')]
['∀', 'x', '.', '(', 'P', '(', 'x', ')', '→', 'x', '=', 'f', '(', 'A', ')', ')']
>>> tokenize('P(x) # Q')
Traceback (most recent call last):
...
folnf.parser.lexer.LexError: invalid token at position 5 near '# Q'
"""

from __future__ import annotations

from dataclasses import dataclass
import enum
import re
from typing import Final

from ..support.excepthook import NoTraceException


class TokenKind(enum.Enum):
    """The kinds of tokens. The value of a kind is the symbol that makes up
    the token, except for :attr:`NAME`.
    """
    FORALL = '∀'
    EXISTS = '∃'
    NOT = '¬'
    AND = '∧'
    OR = '∨'
    IMPLIES = '→'
    IFF = '↔'
    LPAREN = '('
    RPAREN = ')'
    COMMA = ','
    DOT = '.'
    EQ = '='
    NAME = 'name'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    position: int


class LexError(NoTraceException):
    """Raised when no token starts at a position in the input. The snippet
    holds the input text from that position on, up to 10 characters.
    """

    def __init__(self, position: int, snippet: str) -> None:
        super().__init__(f'invalid token at position {position} near {snippet!r}')
        self.position = position
        self.snippet = snippet


SYMBOLS: Final = {kind.value: kind for kind in TokenKind if kind is not TokenKind.NAME}

NAME: Final = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def tokenize(s: str) -> list[Token]:
    """Scan `s` from left to right. Spaces separate tokens and are skipped
    otherwise. `s` is expected to be normalized by
    :func:`.normalizer.normalize`.
    """
    tokens = []
    i = 0
    while i < len(s):
        c = s[i]
        if c == ' ':
            i += 1
            continue
        if c in SYMBOLS:
            tokens.append(Token(SYMBOLS[c], c, i))
            i += 1
            continue
        match = NAME.match(s, i)
        if match is None:
            raise LexError(i, s[i:i + 10])
        tokens.append(Token(TokenKind.NAME, match.group(), i))
        i = match.end()
    return tokens
