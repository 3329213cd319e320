r"""Rewrite the LaTeX surface syntax of formulas into the internal symbol
alphabet read by the lexer.

>>> normalize(r'$\forall x\, (P(x) \to \exists y\; R(x, y))$')
'∀ x (P(x) → ∃ y R(x, y))'
>>> normalize(r'\neg A <-> ~B | C & \top')
'¬ A ↔ ¬B ∨ C ∧ Top'

Macros only match complete command names, so ``\top`` is not ``\to``
followed by ``p``. Unknown macros are kept as they are and are reported by
the lexer.
"""

from __future__ import annotations

import re
from typing import Final


def _macro(*names: str) -> re.Pattern[str]:
    return re.compile(r'\\(?:' + '|'.join(names) + r')(?![A-Za-z])')


RULES: Final[list[tuple[re.Pattern[str], str]]] = [
    # Math delimiters
    (re.compile(r'\$'), ''),
    # Quantifiers and connectives
    (_macro('forall'), '∀'),
    (_macro('exists'), '∃'),
    (_macro('neg', 'lnot'), '¬'),
    (_macro('land', 'wedge'), '∧'),
    (_macro('lor', 'vee'), '∨'),
    (_macro('to', 'rightarrow', 'longrightarrow', 'Rightarrow', 'implies'), '→'),
    (_macro('leftrightarrow', 'longleftrightarrow', 'Leftrightarrow', 'iff'), '↔'),
    # Logical constants and comparators become identifiers
    (_macro('top'), 'Top'),
    (_macro('bot'), 'Bot'),
    (_macro('neq'), 'NEQ'),
    (_macro('leq'), 'LE'),
    (_macro('geq'), 'GE'),
    # ASCII shorthand
    (re.compile(r'<->'), '↔'),
    (re.compile(r'->'), '→'),
    (re.compile(r'~'), '¬'),
    (re.compile(r'\|'), '∨'),
    (re.compile(r'&'), '∧'),
    # Spacing and sizing
    (re.compile(r'\\[,;:! ]'), ' '),
    (_macro('left', 'right'), ''),
    (_macro('bigl', 'bigr', 'Bigl', 'Bigr', 'biggl', 'biggr', 'Biggl', 'Biggr'), ''),
    # Grouping braces
    (re.compile(r'[{}]'), ''),
]
"""The rewrite rules in the order of their application.
"""


def normalize(s: str) -> str:
    """Apply :data:`RULES` to `s` and collapse white space. There are no
    failures.
    """
    for pattern, replacement in RULES:
        s = pattern.sub(replacement, s)
    return ' '.join(s.split())
