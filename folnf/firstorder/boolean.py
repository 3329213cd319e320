"""We introduce formulas with Boolean toplevel operators as subclasses of
:class:`.Formula`.
"""
from __future__ import annotations

from typing import final

from .formula import Formula

from ..support.tracing import trace  # noqa


class BooleanFormula(Formula):
    r"""A class whose instances are Boolean formulas in the sense that their
    toplevel operator is one of the Boolean operators :math:`\lnot`,
    :math:`\wedge`, :math:`\vee`, :math:`\longrightarrow`,
    :math:`\longleftrightarrow`.
    """
    pass


class BinaryFormula(BooleanFormula):
    """A class whose instances are Boolean formulas with exactly two argument
    formulas.
    """

    @property
    def lhs(self) -> Formula:
        """The left-hand side.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[0]

    @property
    def rhs(self) -> Formula:
        """The right-hand side.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[1]

    def __init__(self, lhs: Formula, rhs: Formula) -> None:
        super().__init__()
        for arg in (lhs, rhs):
            if not isinstance(arg, Formula):
                raise ValueError(f'{arg!r} is not a Formula')
        self._args = (lhs, rhs)


@final
class Iff(BinaryFormula):
    r"""A class whose instances are equivalences in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\longleftrightarrow`.

    >>> from folnf.firstorder import Pred
    >>> Iff(Pred('A'), Pred('B'))
    Iff(A, B)
    """
    pass


@final
class Implies(BinaryFormula):
    r"""A class whose instances are implications in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\longrightarrow`.

    .. seealso::
        * :meth:`>>, __rshift__() <.formula.Formula.__rshift__>` -- \
            infix notation of :class:`Implies`
    """
    pass


@final
class And(BinaryFormula):
    r"""A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\wedge`.

    .. seealso::
        * :meth:`&, __and__() <.formula.Formula.__and__>` -- \
            infix notation of :class:`And`
    """

    @classmethod
    def dual(cls) -> type[Or]:
        r"""A class method yielding the class :class:`Or`, which implements
        the dual operator :math:`\vee` of :math:`\wedge`.
        """
        return Or


@final
class Or(BinaryFormula):
    r"""A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\vee`.

    .. seealso::
        * :meth:`|, __or__() <.formula.Formula.__or__>` -- \
            infix notation of :class:`Or`
    """

    @classmethod
    def dual(cls) -> type[And]:
        r"""A class method yielding the class :class:`And`, which implements
        the dual operator :math:`\wedge` of :math:`\vee`.
        """
        return And


@final
class Not(BooleanFormula):
    r"""A class whose instances are negated formulas in the sense that their
    toplevel operator is the Boolean operator :math:`\neg`.

    >>> from folnf.firstorder import Pred, Var
    >>> Not(Pred('P', Var('x')))
    Not(P(x))

    .. seealso::
        * :meth:`~, __invert__() <.formula.Formula.__invert__>` -- \
            short notation of :class:`Not`
    """

    @property
    def arg(self) -> Formula:
        """The one argument of the operator :math:`\\neg`.
        """
        return self.args[0]

    def __init__(self, arg: Formula) -> None:
        super().__init__()
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')
        self._args = (arg,)
