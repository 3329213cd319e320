"""Skolemization of prenex formulas.

Each existentially quantified variable of the prefix is replaced in the
matrix by a term over a fresh Skolem symbol. The arguments of that term are
the universally quantified variables that strictly precede the existential
quantifier in the prefix. Without such variables the Skolem term is a
constant. The result has universal quantifiers only, in their original
order, and it is satisfiable if and only if the input is.

>>> from folnf.firstorder import *
>>> x, y, z = Var('x'), Var('y'), Var('z')
>>> f = Exists(y, Forall(x, Exists(z, Pred('R', x, y, z))))
>>> skolemize(f)
Forall(x, R(x, SK1, SK2(x)))
"""

from __future__ import annotations

from typing import Optional

from ..firstorder import Const, Forall, Func, NameSupply, Prefix, Var
from ..firstorder.formula import Formula
from ..firstorder.term import Term

from ..support.tracing import trace  # noqa


class Skolemization:

    def __call__(self, f: Formula, names: Optional[NameSupply] = None) -> Formula:
        """Skolemize the prenex formula `f`. Skolem symbols are taken from
        `names`, which defaults to a new :class:`.NameSupply`. All names
        occurring in `f` are declared as used in `names`.

        Only the leading quantifiers of `f` are considered, so `f` should be
        prenex.
        """
        if names is None:
            names = NameSupply()
        names.declare(*f.symbols())
        matrix, prefix = f.matrix()
        new_prefix = Prefix()
        for Q, var in prefix:
            if Q is Forall:
                new_prefix.append((Q, var))
                continue
            skolem_term = self.skolem_term(names.fresh_skolem(), new_prefix.universal_variables())
            matrix = matrix.subs({var: skolem_term})
        return matrix.quantify(new_prefix)

    @staticmethod
    def skolem_term(name: str, universals: list[Var]) -> Term:
        if universals:
            return Func(name, *universals)
        return Const(name)


skolemize = Skolemization()
