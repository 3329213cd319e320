r"""A recursive descent parser for formulas in LaTeX notation.

The grammar, from the lowest to the highest precedence, where all binary
operators are left-associative::

    Formula  := Iff
    Iff      := Implies ( '↔' Implies )*
    Implies  := Or ( '→' Or )*
    Or       := And ( '∨' And )*
    And      := Unary ( '∧' Unary )*
    Unary    := '¬' Unary | ('∀' | '∃') NAME ['.'] Unary | Atom
    Atom     := NAME [Args] ['=' Term] | '(' Formula ')'
    Args     := '(' [TermLike (',' TermLike)*] ')'
    TermLike := Term ['=' Term]
    Term     := NAME [Args]

A quantifier binds the following unary formula only:

>>> parse(r'\forall x P(x) \land Q(x)')
And(Forall(x, P(x)), Q(x))
>>> parse(r'\forall x. (P(x) \to \exists y\, R(x, f(y)))')
Forall(x, Implies(P(x), Exists(y, R(x, f(y)))))

Names without argument lists are variables when they start with a lowercase
letter, and constants otherwise:

>>> parse('P(x, A) ∨ x = B')
Or(P(x, A), x = B)
"""

from __future__ import annotations

from typing import Optional

from ..firstorder import (And, Const, Eq, Exists, Forall, Func, Iff, Implies,
                          Not, Or, Pred, Var)
from ..firstorder.formula import Formula
from ..firstorder.term import Term, TermLike
from ..support.excepthook import NoTraceException
from .lexer import Token, TokenKind, tokenize
from .normalizer import normalize

from ..support.tracing import trace  # noqa


class ParseError(NoTraceException):
    pass


class UnexpectedToken(ParseError):
    """Raised when the next token is not of an expected kind. The attribute
    `found` is the name of the kind of the token found, or ``'EOF'`` at the
    end of the input.

    >>> try:
    ...     parse('P(x')
    ... except UnexpectedToken as exc:
    ...     print(exc.expected, exc.found)
    RPAREN EOF
    """

    def __init__(self, expected: str, token: Optional[Token]) -> None:
        self.expected = expected
        self.found = 'EOF' if token is None else token.kind.name
        self.token = token
        super().__init__(f'expected {self.expected}, found {self.found}')


class TrailingTokens(ParseError):
    """Raised when tokens are left after a complete formula.

    >>> parse('P(x)) Q')
    Traceback (most recent call last):
    ...
    folnf.parser.parser.TrailingTokens: trailing tokens: ) Q
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        super().__init__(f'trailing tokens: {" ".join(token.value for token in tokens)}')


class Parser:
    """Holds the token list and the current position for a single parse.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def at(self, *kinds: TokenKind) -> bool:
        token = self.peek()
        return token is not None and token.kind in kinds

    def eat(self, kind: TokenKind) -> Token:
        token = self.peek()
        if token is None or token.kind is not kind:
            raise UnexpectedToken(kind.name, token)
        self.pos += 1
        return token

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def parse(self) -> Formula:
        """Parse a formula and check that all tokens have been consumed.
        """
        f = self.parse_formula()
        if self.pos < len(self.tokens):
            raise TrailingTokens(self.tokens[self.pos:])
        return f

    def parse_formula(self) -> Formula:
        return self.parse_iff()

    def parse_iff(self) -> Formula:
        f = self.parse_implies()
        while self.at(TokenKind.IFF):
            self.eat(TokenKind.IFF)
            f = Iff(f, self.parse_implies())
        return f

    def parse_implies(self) -> Formula:
        f = self.parse_or()
        while self.at(TokenKind.IMPLIES):
            self.eat(TokenKind.IMPLIES)
            f = Implies(f, self.parse_or())
        return f

    def parse_or(self) -> Formula:
        f = self.parse_and()
        while self.at(TokenKind.OR):
            self.eat(TokenKind.OR)
            f = Or(f, self.parse_and())
        return f

    def parse_and(self) -> Formula:
        f = self.parse_unary()
        while self.at(TokenKind.AND):
            self.eat(TokenKind.AND)
            f = And(f, self.parse_unary())
        return f

    def parse_unary(self) -> Formula:
        if self.at(TokenKind.NOT):
            self.eat(TokenKind.NOT)
            return Not(self.parse_unary())
        if self.at(TokenKind.FORALL, TokenKind.EXISTS):
            token = self.eat(self.peek().kind)  # type: ignore[union-attr]
            Q = Forall if token.kind is TokenKind.FORALL else Exists
            var = Var(self.eat(TokenKind.NAME).value)
            if self.at(TokenKind.DOT):
                self.eat(TokenKind.DOT)
            return Q(var, self.parse_unary())
        return self.parse_atom()

    def parse_atom(self) -> Formula:
        if self.at(TokenKind.NAME):
            name = self.eat(TokenKind.NAME).value
            args = self.parse_arguments() if self.at(TokenKind.LPAREN) else None
            if self.at(TokenKind.EQ):
                # An equation at atom position: the name was a term.
                lhs = self.make_term(name, args)
                self.eat(TokenKind.EQ)
                return Eq(lhs, self.parse_term())
            return Pred(name, *(args or ()))
        if self.at(TokenKind.LPAREN):
            self.eat(TokenKind.LPAREN)
            f = self.parse_formula()
            self.eat(TokenKind.RPAREN)
            return f
        raise UnexpectedToken('atom', self.peek())

    def parse_arguments(self) -> list[TermLike]:
        self.eat(TokenKind.LPAREN)
        args = []
        if not self.at(TokenKind.RPAREN):
            args.append(self.parse_term_like())
            while self.at(TokenKind.COMMA):
                self.eat(TokenKind.COMMA)
                args.append(self.parse_term_like())
        self.eat(TokenKind.RPAREN)
        return args

    def parse_term(self) -> Term:
        name = self.eat(TokenKind.NAME).value
        args = self.parse_arguments() if self.at(TokenKind.LPAREN) else None
        return self.make_term(name, args)

    def parse_term_like(self) -> TermLike:
        lhs = self.parse_term()
        if self.at(TokenKind.EQ):
            self.eat(TokenKind.EQ)
            return Eq(lhs, self.parse_term())
        return lhs

    @staticmethod
    def make_term(name: str, args: Optional[list[TermLike]]) -> Term:
        if args is not None:
            return Func(name, *args)
        if 'a' <= name[0] <= 'z':
            return Var(name)
        return Const(name)


def parse(s: str) -> Formula:
    """Normalize, tokenize, and parse `s`.
    """
    return Parser(tokenize(normalize(s))).parse()
