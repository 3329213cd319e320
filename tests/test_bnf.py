"""
Unit tests for CNF and DNF by distribution.

Core claims:
    - cnf distributes ∨ over ∧ and dnf distributes ∧ over ∨, on both sides
    - The matrix is converted to NNF first and the prefix is restored
    - Every recursive distribution call consumes one unit of the budget;
      exhausting it raises ResourceExceeded tagged with the stage
    - The budget is reset for each distribution
"""

from functools import reduce

import pytest

from folnf.firstorder import (And, Exists, Forall, Implies, Not, Or, Pred,
                              Var)
from folnf.normalform import Budget, ResourceExceeded, cnf, dnf
from folnf.support.excepthook import NoTraceException

x, y = Var('x'), Var('y')
A, B, C, D = (Pred(name) for name in 'ABCD')


def P(*args):
    return Pred('P', *args)


def Q(*args):
    return Pred('Q', *args)


def pairs(op_outer, op_inner, n):
    """(A1 ∘ B1) • ... • (An ∘ Bn) for inner operator ∘ and outer operator •.
    """
    return reduce(op_outer, (op_inner(Pred(f'A{i}'), Pred(f'B{i}')) for i in range(1, n + 1)))


class TestCNF:

    def test_left(self):
        assert cnf(Or(And(A, B), C)) == And(Or(A, C), Or(B, C))

    def test_right(self):
        assert cnf(Or(A, And(B, C))) == And(Or(A, B), Or(A, C))

    def test_both(self):
        assert cnf(Or(And(A, B), And(C, D))) == \
            And(And(Or(A, C), Or(A, D)), And(Or(B, C), Or(B, D)))

    def test_already_normal(self):
        f = And(Or(A, Not(B)), C)
        assert cnf(f) == f

    def test_literal(self):
        assert cnf(Not(A)) == Not(A)

    def test_nnf_first(self):
        assert cnf(Implies(A, And(B, C))) == And(Or(Not(A), B), Or(Not(A), C))
        assert cnf(Not(Or(A, B))) == And(Not(A), Not(B))

    def test_prefix_preserved(self):
        f = Forall(x, Exists(y, Or(P(x), And(Q(y), P(y)))))
        assert cnf(f) == Forall(x, Exists(y, And(Or(P(x), Q(y)), Or(P(x), P(y)))))

    def test_is_normal_form(self):
        assert cnf.is_normal_form(cnf(Or(And(A, B), And(C, D))))
        assert not cnf.is_normal_form(Or(A, And(B, C)))
        assert not cnf.is_normal_form(Implies(A, B))


class TestDNF:

    def test_left(self):
        assert dnf(And(Or(A, B), C)) == Or(And(A, C), And(B, C))

    def test_right(self):
        assert dnf(And(A, Or(B, C))) == Or(And(A, B), And(A, C))

    def test_nested(self):
        assert dnf(And(A, And(B, Or(C, D)))) == Or(And(A, And(B, C)), And(A, And(B, D)))

    def test_prefix_preserved(self):
        f = Exists(x, And(P(x), Or(Q(x), Not(P(x)))))
        assert dnf(f) == Exists(x, Or(And(P(x), Q(x)), And(P(x), Not(P(x)))))

    def test_is_normal_form(self):
        assert dnf.is_normal_form(Or(And(A, B), C))
        assert not dnf.is_normal_form(And(Or(A, B), C))


class TestBudget:

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            Budget(limit=0)

    def test_limit_one_is_always_exhausted(self):
        with pytest.raises(ResourceExceeded):
            cnf(A, Budget(limit=1))

    def test_cnf_blowup(self):
        f = pairs(Or, And, 12)
        with pytest.raises(ResourceExceeded) as info:
            cnf(f, Budget(limit=5000))
        assert info.value.stage == 'CNF'
        assert info.value.limit == 5000
        assert 'CNF' in str(info.value)

    def test_dnf_of_cnf_blowup_succeeds(self):
        f = pairs(Or, And, 12)
        assert dnf(f, Budget(limit=5000)) == f

    def test_dnf_blowup(self):
        f = pairs(And, Or, 12)
        with pytest.raises(ResourceExceeded) as info:
            dnf(f, Budget(limit=5000))
        assert info.value.stage == 'DNF'

    def test_cnf_of_dnf_blowup_succeeds(self):
        f = pairs(And, Or, 12)
        assert cnf(f, Budget(limit=5000)) == f

    def test_reset_per_distribution(self):
        budget = Budget(limit=20)
        f = Or(And(A, B), C)
        for _ in range(10):
            cnf(f, budget)
        assert budget.remaining > 0

    def test_consumption(self):
        budget = Budget(limit=100)
        cnf(Or(A, B), budget)
        assert budget.remaining == 97

    def test_is_no_trace_exception(self):
        assert issubclass(ResourceExceeded, NoTraceException)
