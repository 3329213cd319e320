"""Atomic formulas over an uninterpreted signature: predicates applied to
terms, and equations between terms.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import final, Iterator

from IPython.lib import pretty

from .formula import Formula
from .term import Term, TermLike, Var

from ..support.tracing import trace  # noqa


class AtomicFormula(Formula):
    """This abstract class provides the final implementations of the methods
    of :class:`.Formula` that are recursive over the expression tree, where
    the recursion ends at atomic formulas. They delegate to the argument
    terms.
    """

    @property
    @abstractmethod
    def terms(self) -> tuple[TermLike, ...]:
        """The argument terms of this atomic formula.
        """
        ...

    def __repr__(self) -> str:
        return str(self)

    @abstractmethod
    def __str__(self) -> str:
        """Representation of this atomic formula used in printing. This method
        is required by the corresponding recursive first-order method.
        """
        #  Overloading here breaks an infinite recursion in the inherited
        #  method.
        ...

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        p.text(str(self))

    @final
    def atoms(self) -> Iterator[AtomicFormula]:
        yield self

    @final
    def bvars(self, quantified: frozenset[Var] = frozenset()) -> Iterator[Var]:
        for v in self.vars():
            if v in quantified:
                yield v

    @final
    def fvars(self, quantified: frozenset[Var] = frozenset()) -> Iterator[Var]:
        for v in self.vars():
            if v not in quantified:
                yield v

    @abstractmethod
    def subs(self, substitution: dict[Var, Term]) -> AtomicFormula:
        """Simultaneous substitution of terms for variables. This method is
        required by the corresponding recursive first-order method
        :meth:`.Formula.subs`.
        """
        ...

    def vars(self) -> Iterator[Var]:
        """An iterator over all occurrences of variables in the argument
        terms, from left to right.
        """
        for term in self.terms:
            yield from term.vars()


@final
class Pred(AtomicFormula):
    """A predicate symbol applied to a possibly empty sequence of terms.
    Predicates of arity 0 are propositional atoms; the parser reads ``\\top``
    and ``\\bot`` as the propositional atoms ``Top`` and ``Bot``.

    >>> x = Var('x')
    >>> Pred('P', x, Const('A'))
    P(x, A)
    >>> Pred('Top')
    Top
    """

    @property
    def name(self) -> str:
        """The predicate symbol.
        """
        return self.args[0]

    @property
    def terms(self) -> tuple[TermLike, ...]:
        return self.args[1:]

    def __init__(self, name: str, *args: TermLike) -> None:
        super().__init__()
        if not isinstance(name, str) or not name:
            raise ValueError(f'expecting non-empty string as name; {name!r} is {type(name)}')
        for arg in args:
            if not isinstance(arg, (Term, Eq)):
                raise ValueError(f'{arg!r} is not a term')
        self._args = (name, *args)

    def __str__(self) -> str:
        if not self.terms:
            return self.name
        return f'{self.name}({", ".join(str(term) for term in self.terms)})'

    def subs(self, substitution: dict[Var, Term]) -> Pred:
        return Pred(self.name, *(term.subs(substitution) for term in self.terms))

    def symbols(self) -> Iterator[str]:
        yield self.name
        for term in self.terms:
            yield from term.symbols()


@final
class Eq(AtomicFormula):
    """An equation between two terms.

    >>> Eq(Func('f', Var('x')), Const('A'))
    f(x) = A
    """

    @property
    def lhs(self) -> TermLike:
        """The left-hand side of the equation.
        """
        return self.args[0]

    @property
    def rhs(self) -> TermLike:
        """The right-hand side of the equation.
        """
        return self.args[1]

    @property
    def terms(self) -> tuple[TermLike, ...]:
        return self.args

    def __init__(self, lhs: TermLike, rhs: TermLike) -> None:
        super().__init__()
        for arg in (lhs, rhs):
            if not isinstance(arg, (Term, Eq)):
                raise ValueError(f'{arg!r} is not a term')
        self._args = (lhs, rhs)

    def __str__(self) -> str:
        return f'{self.lhs} = {self.rhs}'

    def subs(self, substitution: dict[Var, Term]) -> Eq:
        return Eq(self.lhs.subs(substitution), self.rhs.subs(substitution))

    def symbols(self) -> Iterator[str]:
        yield from self.lhs.symbols()
        yield from self.rhs.symbols()


# Used in doctests only:
from .term import Const, Func  # noqa
