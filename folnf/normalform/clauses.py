"""Clausal form of skolemized conjunctive normal forms, and the
classification of clauses as Horn clauses.

>>> from folnf.firstorder import *
>>> x = Var('x')
>>> f = Forall(x, And(Or(Not(Pred('P', x)), Pred('Q', x)), Or(Pred('P', x), Pred('R', x))))
>>> clauses = clausal_form(f)
>>> for clause in clauses:
...     print(clause)
¬P(x) ∨ Q(x)
P(x) ∨ R(x)
>>> horn_partition(clauses)
HornPartition(horn=[Clause([Not(P(x)), Q(x)])], not_horn=[Clause([P(x), R(x)])])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..firstorder import And, Forall, Not, Or
from ..firstorder.atomic import AtomicFormula
from ..firstorder.formula import Formula

from ..support.tracing import trace  # noqa


class Clause(tuple[Formula, ...]):
    """A disjunction of literals, represented as a tuple of literals. A
    literal is an atomic formula or the negation of an atomic formula. The
    empty clause is printed as ``⊥``.

    >>> from folnf.firstorder import *
    >>> Clause([Not(Pred('P')), Pred('Q'), Not(Pred('R'))]).is_horn()
    True
    >>> print(Clause())
    ⊥
    """

    def __new__(cls, literals: Iterable[Formula] = ()) -> Clause:
        literals = tuple(literals)
        for literal in literals:
            if not Formula.is_literal(literal):
                raise ValueError(f'{literal!r} is not a literal')
        return super().__new__(cls, literals)

    def __repr__(self) -> str:
        return f'Clause([{", ".join(repr(literal) for literal in self)}])'

    def __str__(self) -> str:
        if not self:
            return '⊥'
        return ' ∨ '.join(str(literal) for literal in self)

    def is_horn(self) -> bool:
        """A clause is a Horn clause if it contains at most one positive
        literal.
        """
        return len(self.positive_literals()) <= 1

    def negative_literals(self) -> list[Not]:
        """The negated atomic formulas, in the order of the clause.
        """
        return [literal for literal in self if isinstance(literal, Not)]

    def positive_literals(self) -> list[AtomicFormula]:
        """The atomic formulas that are not negated, in the order of the
        clause.
        """
        return [literal for literal in self if isinstance(literal, AtomicFormula)]


@dataclass
class HornPartition:
    """Clauses separated into Horn clauses and others, both in their original
    relative order.
    """

    horn: list[Clause] = field(default_factory=list)
    not_horn: list[Clause] = field(default_factory=list)


def clausal_form(f: Formula) -> list[Clause]:
    """Drop the leading universal quantifiers of the skolemized CNF `f`, and
    split the matrix into clauses.
    """
    while isinstance(f, Forall):
        f = f.arg
    return [Clause(split_or(conjunct)) for conjunct in split_and(f)]


def horn_partition(clauses: Iterable[Clause]) -> HornPartition:
    partition = HornPartition()
    for clause in clauses:
        if clause.is_horn():
            partition.horn.append(clause)
        else:
            partition.not_horn.append(clause)
    return partition


def split_and(f: Formula) -> list[Formula]:
    """The arguments of the top-level chain of conjunctions, from left to
    right.
    """
    if isinstance(f, And):
        return [*split_and(f.lhs), *split_and(f.rhs)]
    return [f]


def split_or(f: Formula) -> list[Formula]:
    """The arguments of the top-level chain of disjunctions, from left to
    right.
    """
    if isinstance(f, Or):
        return [*split_or(f.lhs), *split_or(f.rhs)]
    return [f]
