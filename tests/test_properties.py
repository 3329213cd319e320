"""
Property-based tests over randomly generated formulas.

Core claims:
    - NNF:         to_nnf is idempotent and negates atomic formulas only
    - Renaming:    standardize_apart yields pairwise distinct binders and
                   keeps the free variables
    - Extraction:  the matrix is quantifier-free and the prefix lists the
                   quantifiers in traversal order
    - Skolem:      each Skolem term has the universals preceding its
                   existential as arguments, in prefix order
    - CNF/DNF:     the results are normal forms, and their matrices are
                   propositionally equivalent to the input matrices
    - Horn:        a clause is Horn iff it has at most one positive literal
    - Printing:    str() parses back to an equal formula
"""

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from folnf.firstorder import Forall, Func, NameSupply, Not, pnf
from folnf.firstorder.formula import Formula
from folnf.normalform import Budget, Clause, clausal_form, cnf, dnf, skolemize
from folnf.parser import parse

from tests.strategies import atoms, formulas, propositionally_equivalent

LARGE_BUDGET = 10 ** 6

property_settings = settings(max_examples=100, deadline=None,
                             suppress_health_check=[HealthCheck.too_slow])


def subterms(t):
    yield t
    if isinstance(t, Func):
        for arg in t.args[1:]:
            yield from subterms(arg)


def all_terms(f):
    for atom in f.atoms():
        for t in atom.terms:
            yield from subterms(t)


# ── NNF ─────────────────────────────────────────────────────────────────────

class TestNNF:

    @given(formulas())
    @property_settings
    def test_idempotent(self, f):
        g = f.to_nnf()
        assert g.is_nnf()
        assert g.to_nnf() == g

    @given(formulas())
    @property_settings
    def test_elimination_first(self, f):
        g = f.elim_iff_imp()
        assert g.to_nnf() == f.to_nnf()


# ── Prenex ──────────────────────────────────────────────────────────────────

class TestPrenex:

    @given(formulas())
    @property_settings
    def test_standardize_apart(self, f):
        g = pnf.standardize_apart(f.to_nnf())
        qvars = list(g.qvars())
        assert len(qvars) == len(set(qvars))
        assert set(g.fvars()) == set(f.fvars())
        assert set(qvars).isdisjoint(set(g.fvars()))

    @given(formulas())
    @property_settings
    def test_extract(self, f):
        g = pnf.standardize_apart(f.to_nnf())
        prefix, matrix = pnf.extract(g)
        assert list(matrix.qvars()) == []
        assert [var for _, var in prefix] == list(g.qvars())
        assert matrix.quantify(prefix).matrix() == (matrix, prefix)

    @given(formulas())
    @property_settings
    def test_free_variables(self, f):
        assert set(pnf(f).fvars()) == set(f.fvars())


# ── Skolemization ───────────────────────────────────────────────────────────

class TestSkolemization:

    @given(formulas())
    @property_settings
    def test_arity(self, f):
        names = NameSupply()
        prenex = pnf(f, names)
        _, prefix = prenex.matrix()
        expected = {}
        universals = []
        for Q, var in prefix:
            if Q is Forall:
                universals.append(var)
            else:
                expected[f'SK{len(expected) + 1}'] = tuple(universals)
        result = skolemize(prenex, names)
        _, new_prefix = result.matrix()
        assert [var for _, var in new_prefix] == universals
        for t in all_terms(result):
            if t.name in expected:
                assert t.args[1:] == expected[t.name]


# ── Boolean normal forms ────────────────────────────────────────────────────

class TestBooleanNormalForms:

    @given(formulas(max_depth=3))
    @property_settings
    def test_cnf(self, f):
        skolemized = skolemize(pnf(f))
        result = cnf(skolemized, Budget(limit=LARGE_BUDGET))
        assert cnf.is_normal_form(result)
        assert propositionally_equivalent(result.matrix()[0], skolemized.matrix()[0])
        for clause in clausal_form(result):
            assert all(Formula.is_literal(literal) for literal in clause)

    @given(formulas(max_depth=3))
    @property_settings
    def test_dnf(self, f):
        prenex = pnf(f)
        result = dnf(prenex, Budget(limit=LARGE_BUDGET))
        assert dnf.is_normal_form(result)
        assert result.matrix()[1] == prenex.matrix()[1]
        assert propositionally_equivalent(result.matrix()[0], prenex.matrix()[0])


# ── Horn ────────────────────────────────────────────────────────────────────

@st.composite
def literals(draw):
    atom = draw(atoms())
    return Not(atom) if draw(st.booleans()) else atom


class TestHorn:

    @given(st.lists(literals(), max_size=6))
    @property_settings
    def test_is_horn(self, literal_list):
        clause = Clause(literal_list)
        positive = sum(1 for literal in literal_list if not isinstance(literal, Not))
        assert clause.is_horn() == (positive <= 1)
        assert len(clause.positive_literals()) + len(clause.negative_literals()) == len(clause)


# ── Printing ────────────────────────────────────────────────────────────────

class TestPrinting:

    @given(formulas(max_depth=4))
    @property_settings
    def test_parse_str(self, f):
        assert parse(str(f)) == f
