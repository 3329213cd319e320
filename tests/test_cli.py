"""
Unit tests for the command line interface.

Core claims:
    - A valid formula prints all derivations and exits with status 0
    - Errors print one line on stderr and exit with status 1
"""

import pytest

from folnf.__main__ import format_result, main
from folnf.firstorder import Not, Pred
from folnf.normalform import Clause, HornPartition


class TestMain:

    def test_report(self, capsys):
        assert main([r'\forall x (P(x) \to Q(x))']) == 0
        out = capsys.readouterr().out
        for label in ['original:', 'nnf:', 'prenex:', 'cnf:', 'dnf:', 'clausal:', 'horn:']:
            assert label in out
        assert '  1. ¬P(x) ∨ Q(x)' in out
        assert '  horn: [¬P(x) ∨ Q(x)]' in out
        assert 'Eliminate' not in out

    def test_steps(self, capsys):
        assert main([r'\exists x P(x)', '--steps']) == 0
        out = capsys.readouterr().out
        assert '    5. Skolemize (replace existentials by Skolem functions)' in out
        assert '    2. All clauses are Horn' in out

    def test_parse_error(self, capsys):
        assert main(['P(x']) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err == 'UnexpectedToken: expected RPAREN, found EOF\n'

    def test_lex_error(self, capsys):
        assert main(['P # Q']) == 1
        assert capsys.readouterr().err.startswith('LexError: invalid token at position 2')

    def test_invalid_budget(self, capsys):
        assert main(['P', '--budget', '0']) == 1
        assert capsys.readouterr().err == 'ValueError: budget must be positive; 0 is not\n'

    def test_budget_exhausted(self, capsys):
        assert main([r'(A \land B) \lor C', '--budget', '3']) == 1
        assert capsys.readouterr().err.startswith('ResourceExceeded: ')

    def test_unknown_log_level(self):
        with pytest.raises(SystemExit):
            main(['P', '--log-level', 'VERBOSE'])


class TestFormatResult:

    def test_clauses(self):
        assert format_result([Clause([Pred('A')]), Clause()]) == ['  1. A', '  2. ⊥']

    def test_partition(self):
        partition = HornPartition(horn=[Clause([Not(Pred('A'))])],
                                  not_horn=[Clause([Pred('A'), Pred('B')])])
        assert format_result(partition) == ['  horn: [¬A]', '  not horn: [A ∨ B]']

    def test_formula(self):
        assert format_result(Pred('P')) == ['  P']
