"""
Unit tests for the recursive descent parser.

Core claims:
    - Precedence from low to high: ↔, →, ∨, ∧, then unary operators
    - All binary operators are left-associative
    - A quantifier binds the following unary formula only
    - Lowercase names without arguments are variables, other names without
      arguments are constants, names with arguments are function symbols
    - Missing tokens raise UnexpectedToken, leftovers raise TrailingTokens
    - str() of a formula parses back to the same formula
"""

import pytest

from folnf.firstorder import (And, Const, Eq, Exists, Forall, Func, Iff,
                              Implies, Not, Or, Pred, Var)
from folnf.parser import (LexError, ParseError, TrailingTokens,
                          UnexpectedToken, parse)
from folnf.support.excepthook import NoTraceException

x, y, z = Var('x'), Var('y'), Var('z')
A, B, C, D, E = (Pred(name) for name in 'ABCDE')


def P(*args):
    return Pred('P', *args)


def Q(*args):
    return Pred('Q', *args)


class TestPrecedence:

    def test_full_chain(self):
        assert parse('A ↔ B → C ∨ D ∧ ¬E') == Iff(A, Implies(B, Or(C, And(D, Not(E)))))

    def test_implies_binds_stronger_than_iff(self):
        assert parse(r'P \to Q \leftrightarrow Q \to P') == \
            Iff(Implies(P(), Q()), Implies(Q(), P()))

    def test_and_binds_stronger_than_or(self):
        assert parse('A ∧ B ∨ C ∧ D') == Or(And(A, B), And(C, D))

    def test_parentheses(self):
        assert parse('A ∧ (B ∨ C)') == And(A, Or(B, C))

    @pytest.mark.parametrize('symbol, op', [
        ('∧', And), ('∨', Or), ('→', Implies), ('↔', Iff)])
    def test_left_associative(self, symbol, op):
        assert parse(f'A {symbol} B {symbol} C') == op(op(A, B), C)

    def test_double_negation(self):
        assert parse(r'\neg \neg A') == Not(Not(A))


class TestQuantifiers:

    def test_scope_is_unary(self):
        assert parse(r'\forall x P(x) \land Q(x)') == And(Forall(x, P(x)), Q(x))

    def test_parentheses_widen_scope(self):
        assert parse(r'\forall x (P(x) \land Q(x))') == Forall(x, And(P(x), Q(x)))

    def test_optional_dot(self):
        assert parse(r'\exists x. P(x)') == Exists(x, P(x))

    def test_nested(self):
        assert parse(r'\forall x \exists y \neg R(x, y)') == \
            Forall(x, Exists(y, Not(Pred('R', x, y))))

    def test_quantified_equation(self):
        assert parse(r'\forall x\, x = x') == Forall(x, Eq(x, x))

    def test_uppercase_variable_is_accepted(self):
        f = parse(r'\forall X P(X)')
        assert f == Forall(Var('X'), P(Const('X')))

    def test_example(self):
        assert parse(r'\forall x (P(x) \to Q(x))') == Forall(x, Implies(P(x), Q(x)))


class TestTerms:

    def test_variables_constants_functions(self):
        assert parse('P(x, A, f(y), g(B, z))') == \
            P(x, Const('A'), Func('f', y), Func('g', Const('B'), z))

    def test_underscore_is_not_lowercase(self):
        assert parse('P(_x)') == P(Const('_x'))

    def test_propositional_atom(self):
        assert parse('P') == Pred('P')

    def test_empty_argument_list(self):
        assert parse('P()') == Pred('P')

    def test_empty_function_argument_list(self):
        assert parse('P(f())') == P(Func('f'))

    def test_top_and_bot(self):
        assert parse(r'\top \lor \bot') == Or(Pred('Top'), Pred('Bot'))


class TestEquations:

    def test_atom_position(self):
        assert parse('x = y') == Eq(x, y)

    def test_function_term_at_atom_position(self):
        assert parse('f(x) = A') == Eq(Func('f', x), Const('A'))

    def test_equation_as_argument(self):
        assert parse('P(x = y, z)') == P(Eq(x, y), z)

    def test_negated_equation(self):
        assert parse(r'\neg (x = f(y))') == Not(Eq(x, Func('f', y)))


class TestErrors:

    def test_unterminated_argument_list(self):
        with pytest.raises(UnexpectedToken) as info:
            parse('P(x')
        assert info.value.expected == 'RPAREN'
        assert info.value.found == 'EOF'
        assert str(info.value) == 'expected RPAREN, found EOF'

    def test_unmatched_parenthesis(self):
        with pytest.raises(UnexpectedToken) as info:
            parse('(A ∧ B')
        assert info.value.expected == 'RPAREN'

    def test_quantifier_without_variable(self):
        with pytest.raises(UnexpectedToken) as info:
            parse(r'\forall (P)')
        assert info.value.expected == 'NAME'
        assert info.value.found == 'LPAREN'

    def test_missing_operand(self):
        with pytest.raises(UnexpectedToken) as info:
            parse('A ∧')
        assert info.value.expected == 'atom'
        assert info.value.found == 'EOF'

    def test_operator_at_start(self):
        with pytest.raises(UnexpectedToken) as info:
            parse('∨ A')
        assert info.value.found == 'OR'

    def test_empty_input(self):
        with pytest.raises(UnexpectedToken):
            parse('')

    def test_trailing_tokens(self):
        with pytest.raises(TrailingTokens) as info:
            parse('P(x)) Q')
        assert [token.value for token in info.value.tokens] == [')', 'Q']
        assert str(info.value) == 'trailing tokens: ) Q'

    def test_juxtaposed_atoms(self):
        with pytest.raises(TrailingTokens):
            parse('P Q')

    def test_lex_error_propagates(self):
        with pytest.raises(LexError):
            parse('P # Q')

    def test_hierarchy(self):
        assert issubclass(UnexpectedToken, ParseError)
        assert issubclass(TrailingTokens, ParseError)
        assert issubclass(ParseError, NoTraceException)


class TestRoundTrip:

    @pytest.mark.parametrize('text', [
        r'\forall x (P(x) \to \exists y R(x, y))',
        r'(A \to B) \to C',
        r'A \to (B \to C)',
        r'\neg (A \land B) \lor \neg \forall x\, x = f(x)',
        r'(A \leftrightarrow B) \leftrightarrow (C \leftrightarrow D)',
        r'\exists x (P(x) \lor Q(x)) \land R(g(x, A))',
    ])
    def test_str_parses_back(self, text):
        f = parse(text)
        assert parse(str(f)) == f
