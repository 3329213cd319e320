"""This module :mod:`folnf.engine` runs the complete sequence of normal form
computations on a formula given as text, and records the steps taken for
each derivation.

>>> engine = Engine()
>>> report = engine(r'\\forall x (P(x) \\to Q(x))')
>>> print(report.cnf.result)
∀x (¬P(x) ∨ Q(x))
>>> report.clausal.result
[Clause([Not(P(x)), Q(x)])]
>>> for step in report.horn.steps:
...     print(step)
1. Check each clause for the Horn property
Clause 1: 1 positive literal(s), 1 negative
→ Horn clause (≤ 1 positive literal)
2. All clauses are Horn

An :class:`Engine` holds the state of one run: the names in use, the counters
for fresh variables and Skolem symbols, and the rewrite budget. Concurrent
runs require separate instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import sys
import time
from typing import Any, Final, Optional

from .firstorder import NameSupply, pnf
from .firstorder.formula import Formula
from .normalform import (Budget, Clause, HornPartition, clausal_form, cnf,
                         dnf, horn_partition, skolemize)
from .parser import parse
from .support.logging import DeltaTimeFormatter, Timer

from .support.tracing import trace  # noqa

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    f'%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.addFilter(lambda record: record.msg.strip() != '')
logger.setLevel(logging.WARNING)


ELIMINATE: Final = '1. Eliminate equivalences (↔) and implications (→)'
NNF: Final = '2. Convert to NNF (push negations inward)'
STANDARDIZE: Final = '3. Standardize bound variables apart (α-renaming)'
PRENEX: Final = '4. Move quantifiers to prenex form'
SKOLEMIZE: Final = '5. Skolemize (replace existentials by Skolem functions)'
DISTRIBUTE_OR: Final = '6. Distribute OR over AND to obtain CNF'
DISTRIBUTE_AND: Final = '5. Distribute AND over OR to obtain DNF'

DROP_UNIVERSALS: Final = '1. Drop universal quantifiers (implicit in clausal form)'
SPLIT_CONJUNCTIONS: Final = '2. Split conjunctions into separate clauses'

CHECK_HORN: Final = '1. Check each clause for the Horn property'
IS_HORN: Final = '→ Horn clause (≤ 1 positive literal)'
IS_NOT_HORN: Final = '→ not a Horn clause (> 1 positive literal)'


@dataclass
class Options:
    """This class holds options that can be provided to :class:`Engine` and
    to :meth:`Engine.__call__`.

    >>> Options(budget=0)
    Traceback (most recent call last):
    ...
    ValueError: budget must be positive; 0 is not
    """

    budget: int = 5000
    """The number of recursive calls admitted for each CNF or DNF
    distribution.
    """

    skolem_prefix: str = 'SK'
    """Skolem symbols are ``SK1``, ``SK2``, ... with the default prefix.
    """

    log_level: int = logging.NOTSET
    """The `log_level` of the logger used by :class:`.Engine` during
    :meth:`.Engine.__call__`.
    """

    recursion_limit: int = 100_000
    """The Python recursion limit during :meth:`.Engine.__call__`. All passes
    recurse over the formula tree, once per operator, and long chains of
    conjunctions or disjunctions exceed the default limit of 1000. The limit
    is only raised, never lowered, and it is restored after the run.
    """

    def __post_init__(self) -> None:
        if self.budget < 1:
            raise ValueError(f'budget must be positive; {self.budget} is not')
        if not self.skolem_prefix:
            raise ValueError('Skolem prefix must not be empty')


@dataclass
class Derivation:
    """The result of a derivation together with descriptions of the steps that
    led to it.
    """

    result: Any
    steps: list[str] = field(default_factory=list)


@dataclass
class Report:
    """All derivations of one run of :meth:`.Engine.__call__`.
    """

    original: Derivation
    """The parsed input formula.
    """

    nnf: Derivation
    prenex: Derivation

    cnf: Derivation
    """A skolemized prenex formula with its matrix in CNF.
    """

    dnf: Derivation
    """A prenex formula with its matrix in DNF. Existential quantifiers are
    kept.
    """

    clausal: Derivation
    """The list of :class:`.Clause` of the CNF.
    """

    horn: Derivation
    """A :class:`.HornPartition` of the clauses.
    """


class Engine:
    """A callable class that runs all normal form computations for one
    formula. The single derivations are available as methods as well, so that
    a caller can keep earlier results when a later derivation fails.

    >>> engine = Engine(budget=100)
    >>> f = engine.parse(r'\\exists x P(x) \\land \\exists y Q(y)').result
    >>> prenex = engine.prenex(f)
    >>> print(prenex.result)
    ∃x ∃y (P(x) ∧ Q(y))
    >>> print(engine.cnf_prenex(prenex.result).result)
    P(SK1) ∧ Q(SK2)
    """

    options: Options
    """The options that have been passed to :meth:`.__init__` or to
    :meth:`.__call__`.
    """

    names: NameSupply
    """All names in use, including generated ones.
    """

    budget: Budget
    """The rewrite budget for the distributions. It is reset for each
    distribution.
    """

    # Timings; all times are wall times in seconds:
    time_parse: Optional[float]
    time_cnf: Optional[float]
    """The time spent for the CNF derivation, including clausal form and Horn
    classification.
    """

    time_dnf: Optional[float]
    time_total: Optional[float]
    """The total time spent in :meth:`.__call__`.
    """

    def __init__(self, **options) -> None:
        self.options = Options(**options)
        self.reset()

    def __call__(self, s: str, **options) -> Report:
        """The entry point of the callable class :class:`.Engine`.

        :param s:
          The input formula in LaTeX notation.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`.Options`. They override the options of the engine.

        :returns:
          A :class:`.Report` of all derivations.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        if options:
            self.options = replace(self.options, **options)
        self.reset()
        save_level = logger.getEffectiveLevel()
        save_recursion_limit = sys.getrecursionlimit()
        try:
            logger.setLevel(self.options.log_level)
            sys.setrecursionlimit(max(save_recursion_limit, self.options.recursion_limit))
            logger.info(f'{self.options}')
            report = self.run(s)
            logger.info('finished')
        finally:
            logger.setLevel(save_level)
            sys.setrecursionlimit(save_recursion_limit)
        self.time_total = timer.get()
        return report

    def clausal(self, f: Formula) -> Derivation:
        """Split the skolemized CNF `f` into clauses.
        """
        logger.info(DROP_UNIVERSALS)
        logger.info(SPLIT_CONJUNCTIONS)
        clauses = clausal_form(f)
        result = f'3. Result: {len(clauses)} clause(s) extracted'
        logger.info(result)
        return Derivation(clauses, [DROP_UNIVERSALS, SPLIT_CONJUNCTIONS, result])

    def cnf_prenex(self, f: Formula) -> Derivation:
        """Skolemize the prenex formula `f` and bring its matrix into CNF.
        This raises :exc:`.ResourceExceeded` when the distribution exhausts
        the budget.
        """
        logger.info(SKOLEMIZE)
        skolemized = skolemize(f, self.names)
        logger.info(DISTRIBUTE_OR)
        result = cnf(skolemized, self.budget)
        logger.debug(f'{self.budget.limit - self.budget.remaining} distribution steps')
        return Derivation(result, [ELIMINATE, NNF, STANDARDIZE, PRENEX, SKOLEMIZE,
                                   DISTRIBUTE_OR])

    def dnf_prenex(self, f: Formula) -> Derivation:
        """Bring the matrix of the prenex formula `f` into DNF. This raises
        :exc:`.ResourceExceeded` when the distribution exhausts the budget.
        """
        logger.info(DISTRIBUTE_AND)
        result = dnf(f, self.budget)
        logger.debug(f'{self.budget.limit - self.budget.remaining} distribution steps')
        return Derivation(result, [ELIMINATE, NNF, STANDARDIZE, PRENEX, DISTRIBUTE_AND])

    def horn_info(self, clauses: list[Clause]) -> Derivation:
        """Partition `clauses` into Horn clauses and others.
        """
        logger.info(CHECK_HORN)
        steps = [CHECK_HORN]
        for i, clause in enumerate(clauses, start=1):
            steps.append(f'Clause {i}: {len(clause.positive_literals())} positive literal(s), '
                         f'{len(clause.negative_literals())} negative')
            steps.append(IS_HORN if clause.is_horn() else IS_NOT_HORN)
        partition: HornPartition = horn_partition(clauses)
        if len(partition.horn) == len(clauses):
            steps.append('2. All clauses are Horn')
        else:
            steps.append(f'2. {len(partition.horn)}/{len(clauses)} clauses are Horn')
        logger.info(steps[-1])
        return Derivation(partition, steps)

    def nnf(self, f: Formula) -> Derivation:
        """Eliminate equivalences and implications, and convert to NNF.
        """
        logger.info(ELIMINATE)
        f = f.elim_iff_imp()
        logger.info(NNF)
        f = f.to_nnf()
        return Derivation(f, [ELIMINATE, NNF])

    def parse(self, s: str) -> Derivation:
        """Parse `s`. This raises :exc:`.LexError` or :exc:`.ParseError` for
        invalid input.
        """
        timer = Timer()
        f = parse(s)
        self.time_parse = timer.get()
        logger.debug(f'{self.time_parse=:.3f}')
        return Derivation(f)

    def prenex(self, f: Formula, is_nnf: bool = False) -> Derivation:
        """Compute a prenex normal form of `f` with distinct bound variables.
        A keyword argument `is_nnf=True` indicates that `f` is already the
        result of :meth:`nnf`, which is then not computed again.
        """
        g = f if is_nnf else self.nnf(f).result
        logger.info(STANDARDIZE)
        g = pnf.standardize_apart(g, self.names)
        logger.info(PRENEX)
        prefix, matrix = pnf.extract(g)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f'prefix {prefix} of length {len(prefix)}')
        return Derivation(matrix.quantify(prefix), [ELIMINATE, NNF, STANDARDIZE, PRENEX])

    def reset(self) -> None:
        """Restart names, counters, and timings for a new run with the
        current :attr:`options`.
        """
        self.names = NameSupply(skolem_prefix=self.options.skolem_prefix)
        self.budget = Budget(limit=self.options.budget)
        self.time_parse = None
        self.time_cnf = None
        self.time_dnf = None
        self.time_total = None

    def run(self, s: str) -> Report:
        original = self.parse(s)
        nnf = self.nnf(original.result)
        prenex = self.prenex(nnf.result, is_nnf=True)
        timer = Timer()
        cnf = self.cnf_prenex(prenex.result)
        clausal = self.clausal(cnf.result)
        horn = self.horn_info(clausal.result)
        self.time_cnf = timer.get()
        logger.debug(f'{self.time_cnf=:.3f}')
        timer.reset()
        dnf = self.dnf_prenex(prenex.result)
        self.time_dnf = timer.get()
        logger.debug(f'{self.time_dnf=:.3f}')
        return Report(original=original, nnf=nnf, prenex=prenex, cnf=cnf, dnf=dnf,
                      clausal=clausal, horn=horn)
