"""Boolean normal forms of prenex formulas by explicit distribution.

The matrix of a prenex formula is brought into disjunctive normal form by
distributing :class:`.And` over :class:`.Or`, and into conjunctive normal form
by the dual distribution of :class:`.Or` over :class:`.And`. The size of the
result can be exponential in the size of the input. Every recursive call of
the distribution therefore consumes one unit of a :class:`Budget`, and
:exc:`ResourceExceeded` is raised when the budget is exhausted.

>>> from folnf.firstorder import *
>>> A, B, C = Pred('A'), Pred('B'), Pred('C')
>>> print(cnf(Or(And(A, B), C)))
(A ∨ C) ∧ (B ∨ C)
>>> print(dnf(And(Or(A, B), C)))
A ∧ C ∨ B ∧ C
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..firstorder import And, Or
from ..firstorder.formula import Formula
from ..support.excepthook import NoTraceException

from ..support.tracing import trace  # noqa


class ResourceExceeded(NoTraceException):
    """Raised when a distribution exhausts its budget. The attribute `stage`
    is ``'CNF'`` or ``'DNF'``.
    """

    def __init__(self, stage: str, limit: int) -> None:
        self.stage = stage
        self.limit = limit
        super().__init__(f'formula grew too large during {stage} distribution '
                         f'(budget of {limit} exhausted)')


@dataclass
class Budget:
    """A finite number of recursive distribution calls.

    >>> budget = Budget(limit=2)
    >>> budget.consume('CNF')
    >>> budget.remaining
    1
    >>> budget.consume('CNF')
    Traceback (most recent call last):
    ...
    folnf.normalform.bnf.ResourceExceeded: formula grew too large during CNF distribution (budget of 2 exhausted)
    """

    limit: int = 5000
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f'budget must be positive; {self.limit} is not')
        self.reset()

    def consume(self, stage: str) -> None:
        """Consume one unit. Raise :exc:`ResourceExceeded` tagged with `stage`
        when nothing is left afterwards.
        """
        self.remaining -= 1
        if self.remaining <= 0:
            raise ResourceExceeded(stage, self.limit)

    def reset(self) -> None:
        self.remaining = self.limit


@dataclass
class BooleanNormalForm:
    """Disjunctive normal form computation, or conjunctive normal form
    computation with ``dualize=True``.
    """

    dualize: bool = False

    @property
    def inner(self) -> type[And | Or]:
        """The operator that is distributed.
        """
        return Or if self.dualize else And

    @property
    def outer(self) -> type[And | Or]:
        """The operator that the :attr:`inner` operator is distributed over.
        """
        return And if self.dualize else Or

    @property
    def stage(self) -> str:
        return 'CNF' if self.dualize else 'DNF'

    def __call__(self, f: Formula, budget: Optional[Budget] = None) -> Formula:
        """Bring the matrix of the prenex formula `f` into normal form and
        restore the quantifier prefix. The matrix is converted to NNF first.
        """
        if budget is None:
            budget = Budget()
        matrix, prefix = f.matrix()
        return self.distribute(matrix.to_nnf(), budget).quantify(prefix)

    def distribute(self, f: Formula, budget: Budget) -> Formula:
        """Distribute the quantifier-free formula `f` in NNF. The budget is
        reset first.
        """
        budget.reset()
        return self._distribute(f, budget)

    def _distribute(self, f: Formula, budget: Budget) -> Formula:
        budget.consume(self.stage)
        if isinstance(f, self.inner):
            lhs = self._distribute(f.lhs, budget)
            rhs = self._distribute(f.rhs, budget)
            if isinstance(lhs, self.outer):
                return self.outer(self._distribute(self.inner(lhs.lhs, rhs), budget),
                                  self._distribute(self.inner(lhs.rhs, rhs), budget))
            if isinstance(rhs, self.outer):
                return self.outer(self._distribute(self.inner(lhs, rhs.lhs), budget),
                                  self._distribute(self.inner(lhs, rhs.rhs), budget))
            return self.inner(lhs, rhs)
        if isinstance(f, self.outer):
            return self.outer(self._distribute(f.lhs, budget), self._distribute(f.rhs, budget))
        assert Formula.is_literal(f), f
        return f

    def is_normal_form(self, f: Formula) -> bool:
        """Test whether the matrix of `f` is a normal form in the sense that
        no :attr:`inner` operator has an :attr:`outer` operator as an
        argument.

        >>> from folnf.firstorder import *
        >>> A, B, C = Pred('A'), Pred('B'), Pred('C')
        >>> cnf.is_normal_form(Or(And(A, B), C))
        False
        >>> dnf.is_normal_form(Or(And(A, B), C))
        True
        """
        matrix, _ = f.matrix()
        return self._is_normal_form(matrix)

    def _is_normal_form(self, f: Formula) -> bool:
        if isinstance(f, self.inner):
            if isinstance(f.lhs, self.outer) or isinstance(f.rhs, self.outer):
                return False
        if isinstance(f, (And, Or)):
            return self._is_normal_form(f.lhs) and self._is_normal_form(f.rhs)
        return Formula.is_literal(f)


dnf = BooleanNormalForm()
cnf = BooleanNormalForm(dualize=True)
