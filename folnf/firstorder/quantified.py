r"""We provide subclasses of :class:`Formula <.formula.Formula>` that implement
quantified formulas in the sense that their toplevel operator is one of the
quantifiers :math:`\exists` or :math:`\forall`.
"""
from __future__ import annotations

from collections import deque
from typing import final, Sequence

from .formula import Formula
from .term import Var

from ..support.tracing import trace  # noqa


class QuantifiedFormula(Formula):
    r"""A class whose instances are quantified formulas in the sense that their
    toplevel operator is one of the quantifiers :math:`\exists` or
    :math:`\forall`. Each quantifier binds exactly one variable in exactly one
    argument formula, its scope.
    """

    @property
    def var(self) -> Var:
        """The variable of the quantifier.

        >>> from folnf.firstorder import *
        >>> x, y = Var('x'), Var('y')
        >>> Forall(x, Exists(y, Eq(x, y))).var
        x
        """
        return self.args[0]

    @property
    def arg(self) -> Formula:
        """The subformula in the scope of the :class:`QuantifiedFormula`.
        """
        return self.args[1]

    def __init__(self, vars_: Var | str | Sequence[Var | str], arg: Formula) -> None:
        """Construct a quantified formula. Variables can be given by name, and
        a sequence of variables is a shorthand for nested quantifiers.

        >>> from folnf.firstorder import *
        >>> Forall(['x', 'y'], Pred('R', Var('x'), Var('y')))
        Forall(x, Forall(y, R(x, y)))
        """
        assert self.op in (Exists, Forall)  # in lack of abstract class properties
        super().__init__()
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')
        match vars_:
            case Var():
                self._args = (vars_, arg)
            case str():
                self._args = (Var(vars_), arg)
            case (_, *_):
                f = arg
                for v in reversed(vars_[1:]):
                    f = self.op(v, f)
                self.__init__(vars_[0], f)  # type: ignore[misc]
            case _:
                raise ValueError(f'{vars_!r} is not a Variable')


@final
class Exists(QuantifiedFormula):
    r"""A class whose instances are existentially quantified formulas in the
    sense that their toplevel operator represents the quantifier symbol
    :math:`\exists`.
    """

    @classmethod
    def dual(cls) -> type[Forall]:
        r"""A class method yielding the class :class:`Forall`, which
        implements the dual operator :math:`\forall` of :math:`\exists`.
        """
        return Forall


@final
class Forall(QuantifiedFormula):
    r"""A class whose instances are universally quantified formulas in the
    sense that their toplevel operator represents the quantifier symbol
    :math:`\forall`.
    """

    @classmethod
    def dual(cls) -> type[Exists]:
        """A class method yielding the dual class :class:`Exists` of
        class:`Forall`.
        """
        return Exists


class Prefix(deque[tuple[type[Forall | Exists], Var]]):
    """Holds a quantifier prefix of a formula as a sequence of pairs of
    quantifiers and variables, from the outermost to the innermost
    quantifier.

    >>> x, y, z = Var('x'), Var('y'), Var('z')
    >>> p = Prefix((Forall, x), (Exists, y), (Forall, z))
    >>> print(p)
    ∀x ∃y ∀z
    >>> p.universal_variables()
    [x, z]

    .. seealso::
        * :external:class:`collections.deque` -- for methods inherited from double-ended queues
        * :meth:`matrix <.Formula.matrix>` -- the matrix of a prenex formula
        * :meth:`quantify <.Formula.quantify>` -- add quantifier prefix
    """

    def __init__(self, *entries: tuple[type[Forall | Exists], Var]) -> None:
        super().__init__(entries)

    def __copy__(self) -> Prefix:
        return self.copy()

    def copy(self) -> Prefix:
        """A shallow copy. The inherited method would pass the whole deque
        as a single entry to :meth:`__init__`.

        >>> p = Prefix((Forall, Var('x')))
        >>> p.copy()
        Prefix((Forall, x))
        """
        return Prefix(*self)

    def __repr__(self) -> str:
        return f'Prefix({", ".join(f"({q.__name__}, {v})" for q, v in self)})'

    def __str__(self) -> str:
        SYMBOL = {Forall: '∀', Exists: '∃'}
        return ' '.join(f'{SYMBOL[q]}{v}' for q, v in self)

    def universal_variables(self) -> list[Var]:
        """The universally quantified variables, in prefix order.
        """
        return [v for q, v in self if q is Forall]
