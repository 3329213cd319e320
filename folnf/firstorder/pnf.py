"""Convert to Prenex Normal Form.

A Prenex Normal Form (PNF) is a Negation Normal Form (NNF) in which all
quantifiers :class:`Exists` and :class:`Forall` stand at the beginning of the
formula. Bound variables are renamed apart first, so that quantifiers can be
moved out of conjunctions and disjunctions without capturing variables. The
relative order of the quantifiers is the order in which they are encountered
in a depth-first, left-to-right traversal.

>>> from folnf.firstorder import *
>>> x, y = Var('x'), Var('y')
>>> f = And(Forall(x, Pred('P', x)), Exists(x, Pred('Q', x, y)))
>>> print(pnf(f))
∀x ∃x_1 (P(x) ∧ Q(x_1, y))
"""

from __future__ import annotations

from typing import Optional

from .atomic import AtomicFormula
from .boolean import And, Iff, Implies, Not, Or
from .formula import Formula
from .names import NameSupply
from .quantified import Exists, Forall, Prefix
from .term import Var

from ..support.tracing import trace  # noqa


class PrenexNormalForm:

    def __call__(self, f: Formula, names: Optional[NameSupply] = None,
                 is_nnf: bool = False) -> Formula:
        """An keyword argument `is_nnf=True` indicates that `f` is already in
        NNF. The initial NNF computation is then skipped. Fresh variables are
        taken from `names`, which defaults to a new :class:`.NameSupply`.
        """
        if not is_nnf:
            f = f.to_nnf()
        f = self.standardize_apart(f, names)
        prefix, matrix = self.extract(f)
        return matrix.quantify(prefix)

    def extract(self, f: Formula) -> tuple[Prefix, Formula]:
        """Split `f` into a quantifier prefix and a quantifier-free matrix.

        The prefixes of both arguments of :class:`.And` and :class:`.Or` are
        concatenated, left before right. `f` must be in NNF and have distinct
        bound variables, which is not checked.

        >>> from folnf.firstorder import *
        >>> x, y = Var('x'), Var('y')
        >>> prefix, matrix = pnf.extract(
        ...     Or(Exists(x, Pred('P', x)), Not(Pred('Q', y))))
        >>> print(prefix)
        ∃x
        >>> matrix
        Or(P(x), Not(Q(y)))
        >>> pnf.extract(Not(Exists(x, Pred('P', x))))
        Traceback (most recent call last):
        ...
        ValueError: expecting a formula in NNF; ¬∃x P(x) is not
        """
        match f:
            case Forall() | Exists():
                prefix, matrix = self.extract(f.arg)
                prefix.appendleft((f.op, f.var))
                return prefix, matrix
            case And() | Or():
                lhs_prefix, lhs_matrix = self.extract(f.lhs)
                rhs_prefix, rhs_matrix = self.extract(f.rhs)
                lhs_prefix.extend(rhs_prefix)
                return lhs_prefix, f.op(lhs_matrix, rhs_matrix)
            case Not(arg=AtomicFormula()) | AtomicFormula():
                return Prefix(), f
            case Not() | Implies() | Iff():
                raise ValueError(f'expecting a formula in NNF; {f} is not')
            case _:
                assert False, type(f)

    def standardize_apart(self, f: Formula, names: Optional[NameSupply] = None) -> Formula:
        """Rename bound variables such that each quantifier binds its own
        variable, and no bound variable occurs free in `f`.

        All names occurring in `f` are declared as used in `names`, so that
        fresh names do not clash with them.

        >>> from folnf.firstorder import *
        >>> x = Var('x')
        >>> f = Or(Pred('P', x), Or(Forall(x, Pred('Q', x)), Exists(x, Pred('R', x))))
        >>> print(pnf.standardize_apart(f))
        P(x) ∨ (∀x_1 Q(x_1) ∨ ∃x_2 R(x_2))
        """
        if names is None:
            names = NameSupply()
        names.declare(*f.symbols())
        return self.with_distinct_vars(f, set(f.fvars()), names)

    def with_distinct_vars(self, f: Formula, badlist: set[Var], names: NameSupply) -> Formula:
        """Convert to equivalent formula with distinct variables.

        Traverse `f` top-down, left to right. If a badlisted variable is
        encountered as a quantified variable, it will be replaced with a fresh
        name in the respective quantified formula. Every quantified variable is
        badlisted for the future, so that later quantifiers of the same variable
        are renamed.
        """
        match f:
            case Forall() | Exists():
                var, arg = f.var, f.arg
                if var in badlist:
                    new_var = names.fresh_variable(var)
                    arg = arg.subs({var: new_var})
                    var = new_var
                badlist.add(var)  # mutable
                return f.op(var, self.with_distinct_vars(arg, badlist, names))
            case Not() | And() | Or() | Implies() | Iff():
                return f.op(*[self.with_distinct_vars(arg, badlist, names) for arg in f.args])
            case AtomicFormula():
                return f
            case _:
                assert False, type(f)


pnf = PrenexNormalForm()
