"""Fresh names for renamed variables and for Skolem symbols.

Both kinds of names are drawn from one :class:`NameSupply`, which records all
names in use. A generated name never coincides with a name occurring in the
input formula or with any other generated name, no matter whether it names a
variable or a Skolem symbol.
"""

from __future__ import annotations

from .term import Var

from ..support.tracing import trace  # noqa


class NameSupply:
    """The set of names in use together with two counters, one for fresh
    variables and one for Skolem symbols. Fresh variables are taken from the
    sequences ``x_1``, ``x_2``, ... for a variable ``x``, and Skolem symbols
    from the sequence ``SK1``, ``SK2``, ... Candidates that are already in
    use are skipped.

    >>> names = NameSupply()
    >>> names.declare('x', 'x_1', 'SK1')
    >>> names.fresh_variable(Var('x'))
    x_2
    >>> names.fresh_variable(Var('y'))
    y_3
    >>> names.fresh_skolem()
    'SK2'
    >>> names
    NameSupply(used=6 names, variable_counter=3, skolem_counter=2)

    An instance belongs to one run of the normal form computations. Sharing an
    instance between concurrent runs is not supported.
    """

    used: set[str]
    variable_counter: int
    skolem_counter: int

    def __init__(self, skolem_prefix: str = 'SK') -> None:
        if not skolem_prefix:
            raise ValueError('Skolem prefix must not be empty')
        self.skolem_prefix = skolem_prefix
        self.reset()

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}(used={len(self.used)} names, '
                f'variable_counter={self.variable_counter}, '
                f'skolem_counter={self.skolem_counter})')

    def declare(self, *names: str) -> None:
        """Mark `names` as used.
        """
        self.used.update(names)

    def fresh_skolem(self) -> str:
        """Return an unused Skolem symbol and mark it as used.
        """
        self.skolem_counter += 1
        name = f'{self.skolem_prefix}{self.skolem_counter}'
        while name in self.used:
            self.skolem_counter += 1
            name = f'{self.skolem_prefix}{self.skolem_counter}'
        self.used.add(name)
        return name

    def fresh_variable(self, base: Var) -> Var:
        """Return an unused variable derived from `base` and mark it as used.
        """
        self.variable_counter += 1
        name = f'{base.name}_{self.variable_counter}'
        while name in self.used:
            self.variable_counter += 1
            name = f'{base.name}_{self.variable_counter}'
        self.used.add(name)
        return Var(name)

    def reset(self) -> None:
        """Forget all names and restart both counters.
        """
        self.used = set()
        self.variable_counter = 0
        self.skolem_counter = 0
