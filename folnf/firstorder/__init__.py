r"""Implementation of first-order formulas over an uninterpreted signature.

An abstract base class :class:`Formula` implements representations of and
methods on first-order formulas recursively built using first-order operators:

1. Boolean operators:

   a. Negation :math:`\lnot`

   b. Conjunction :math:`\land` and disjunction :math:`\lor`

   c. Implication :math:`\longrightarrow`

   d. Bi-implication (syntactic equivalence) :math:`\longleftrightarrow`

2. Quantifiers :math:`\exists x` and :math:`\forall x`, where :math:`x` is a
   variable.

Operators are mapped to classes as follows:

+---------------+---------------+--------------+-------------------------+-----------------------------+-----------------+-----------------+
| :math:`\lnot` | :math:`\land` | :math:`\lor` | :math:`\longrightarrow` | :math:`\longleftrightarrow` | :math:`\exists` | :math:`\forall` |
+---------------+---------------+--------------+-------------------------+-----------------------------+-----------------+-----------------+
| :class:`Not`  | :class:`And`  | :class:`Or`  | :class:`Implies`        | :class:`Iff`                | :class:`Exists` | :class:`Forall` |
+---------------+---------------+--------------+-------------------------+-----------------------------+-----------------+-----------------+

Atomic formulas are predicates :class:`Pred` and equations :class:`Eq` over
terms, which are variables :class:`Var`, constants :class:`Const`, and
function applications :class:`Func`:

>>> x, y = Var('x'), Var('y')
>>> f = Forall(x, Implies(Pred('P', x), Exists(y, Eq(Func('f', x), y))))
>>> f
Forall(x, Implies(P(x), Exists(y, f(x) = y)))
>>> print(f)
∀x (P(x) → ∃y f(x) = y)
>>> print(f.to_nnf())
∀x (¬P(x) ∨ ∃y f(x) = y)
>>> print(pnf(f))
∀x ∃y (¬P(x) ∨ f(x) = y)
"""  # noqa

from .formula import Formula  # noqa

from .term import Term, Var, Const, Func, TermLike  # noqa

from .atomic import AtomicFormula, Pred, Eq  # noqa

from .boolean import BooleanFormula, BinaryFormula, Iff, Implies, And, Or, Not  # noqa

from .quantified import QuantifiedFormula, Exists, Forall, Prefix  # noqa

from .names import NameSupply  # noqa

from .pnf import pnf  # noqa


__all__ = [
    'Var', 'Const', 'Func',

    'Pred', 'Eq',

    'Iff', 'Implies', 'And', 'Or', 'Not',

    'Exists', 'Forall', 'Prefix',

    'NameSupply', 'pnf'
]
