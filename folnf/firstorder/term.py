"""Terms of first-order logic over an uninterpreted signature.

A term is a variable, a constant, or a function symbol applied to argument
terms. Whether an identifier denotes a variable or a constant is decided by
the parser from its spelling: lowercase initials without an argument list are
variables, everything else without an argument list is a constant.

>>> x, y = Var('x'), Var('y')
>>> t = Func('f', x, Const('A'), Func('g', y))
>>> t
f(x, A, g(y))
>>> list(t.vars())
[x, y]
>>> t.subs({x: Const('B')})
f(B, A, g(y))
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Iterator, Optional, TYPE_CHECKING, TypeAlias

from ..support.tracing import trace  # noqa

if TYPE_CHECKING:
    from .atomic import Eq


class Term:
    """This abstract base class implements structural equality, hashing, and
    representation for terms. Like formulas, terms are immutable, and the
    invariant ``t == t.op(*t.args)`` holds.
    """

    _args: tuple[Any, ...]
    _hash: Optional[int]

    @property
    def op(self) -> type[Term]:
        """The class of this term.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of the constructor as a tuple.
        """
        return self._args

    @property
    def name(self) -> str:
        """The name of the variable, constant, or function symbol.
        """
        return self._args[0]

    @abstractmethod
    def __init__(self, name: str, *args: Any) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError(f'expecting non-empty string as name; {name!r} is {type(name)}')
        self._args = (name, *args)
        self._hash = None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Term):
            return False
        return self.op is other.op and self.args == other.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    def __repr__(self) -> str:
        return str(self)

    @abstractmethod
    def __str__(self) -> str:
        ...

    @abstractmethod
    def subs(self, substitution: dict[Var, Term]) -> Term:
        """Simultaneous substitution of terms for variables.
        """
        ...

    def symbols(self) -> Iterator[str]:
        """An iterator over all names occurring in this term, including
        function symbols.
        """
        yield self.name
        for arg in self.args[1:]:
            yield from arg.symbols()

    def vars(self) -> Iterator[Var]:
        """An iterator over all occurrences of variables in this term, from
        left to right.
        """
        for arg in self.args[1:]:
            yield from arg.vars()


class Var(Term):
    """A variable, identified by its name.

    >>> Var('x') == Var('x')
    True
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def __str__(self) -> str:
        return self.name

    def subs(self, substitution: dict[Var, Term]) -> Term:
        return substitution.get(self, self)

    def vars(self) -> Iterator[Var]:
        yield self


class Const(Term):
    """A constant, i.e., a function symbol of arity 0. Skolem constants are
    instances of this class.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def __str__(self) -> str:
        return self.name

    def subs(self, substitution: dict[Var, Term]) -> Term:
        return self


class Func(Term):
    """A function symbol applied to a sequence of arguments. The parser
    admits equations as arguments, so that an argument is either a
    :class:`Term` or an :class:`.atomic.Eq`. An empty argument list, as in
    ``f()``, is kept apart from the constant ``f``.
    """

    @property
    def terms(self) -> tuple[TermLike, ...]:
        """The arguments of the function symbol.
        """
        return self._args[1:]

    def __init__(self, name: str, *args: TermLike) -> None:
        super().__init__(name, *args)

    def __str__(self) -> str:
        return f'{self.name}({", ".join(str(arg) for arg in self.terms)})'

    def subs(self, substitution: dict[Var, Term]) -> Term:
        return Func(self.name, *(arg.subs(substitution) for arg in self.terms))


TermLike: TypeAlias = 'Term | Eq'
"""Arguments of function and predicate symbols.
"""
