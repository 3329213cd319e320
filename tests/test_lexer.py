"""
Unit tests for the lexer.

Core claims:
    - Every symbol of the internal alphabet is a token of its own kind
    - Identifiers match [A-Za-z_][A-Za-z0-9_]*
    - Spaces are skipped; positions refer to the input string
    - Anything else fails with LexError carrying position and snippet
"""

import dataclasses

import pytest

from folnf.parser import LexError, TokenKind, tokenize
from folnf.support.excepthook import NoTraceException


def kinds(s):
    return [token.kind for token in tokenize(s)]


class TestTokens:

    def test_all_symbols(self):
        assert kinds('∀∃¬∧∨→↔(),.=') == [
            TokenKind.FORALL, TokenKind.EXISTS, TokenKind.NOT, TokenKind.AND,
            TokenKind.OR, TokenKind.IMPLIES, TokenKind.IFF, TokenKind.LPAREN,
            TokenKind.RPAREN, TokenKind.COMMA, TokenKind.DOT, TokenKind.EQ]

    @pytest.mark.parametrize('name', ['x', 'P', 'x_1', '_a', 'P2', 'Top', 'SK12'])
    def test_identifiers(self, name):
        token, = tokenize(name)
        assert token.kind is TokenKind.NAME
        assert token.value == name

    def test_identifier_stops_at_symbol(self):
        assert [token.value for token in tokenize('f(x1,y)')] == ['f', '(', 'x1', ',', 'y', ')']

    def test_spaces_are_skipped(self):
        tokens = tokenize(' P  ∧ Q ')
        assert [token.value for token in tokens] == ['P', '∧', 'Q']
        assert [token.position for token in tokens] == [1, 4, 6]

    def test_empty(self):
        assert tokenize('') == []

    def test_tokens_are_immutable(self):
        token, = tokenize('P')
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.value = 'Q'


class TestLexError:

    def test_position_and_snippet(self):
        with pytest.raises(LexError) as info:
            tokenize('P ∧ #abcdefghijkl')
        assert info.value.position == 4
        assert info.value.snippet == '#abcdefghi'

    def test_short_snippet_at_end(self):
        with pytest.raises(LexError) as info:
            tokenize('P ∧ 1')
        assert info.value.snippet == '1'

    def test_leading_digit(self):
        with pytest.raises(LexError) as info:
            tokenize('1x')
        assert info.value.position == 0

    def test_backslash_of_unknown_macro(self):
        with pytest.raises(LexError):
            tokenize(r'\alpha')

    def test_is_no_trace_exception(self):
        assert issubclass(LexError, NoTraceException)
