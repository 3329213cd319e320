"""Normal forms beyond the prenex normal form: Skolemization, conjunctive and
disjunctive normal forms, and clausal form with Horn classification.
"""

from .skolem import skolemize  # noqa

from .bnf import Budget, ResourceExceeded, cnf, dnf  # noqa

from .clauses import Clause, HornPartition, clausal_form, horn_partition  # noqa


__all__ = [
    'skolemize', 'cnf', 'dnf', 'Budget', 'ResourceExceeded',

    'Clause', 'HornPartition', 'clausal_form', 'horn_partition'
]
