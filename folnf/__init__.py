__version__ = 0.1

___author___ = 'folnf developers'
___license__ = 'BSD-2-Clause'
___status__ = 'Prototype'

from .support import excepthook  # noqa

from . import firstorder

from .firstorder import (Formula, AtomicFormula, Term, Var, Const, Func,  # noqa
                         Pred, Eq, BooleanFormula, Iff, Implies, And, Or, Not,
                         QuantifiedFormula, Exists, Forall, Prefix, NameSupply,
                         pnf)

from . import normalform

from .normalform import (skolemize, cnf, dnf, Budget, ResourceExceeded,  # noqa
                         Clause, HornPartition, clausal_form, horn_partition)

from . import parser

from .parser import (normalize, tokenize, parse, LexError, ParseError,  # noqa
                     TrailingTokens, UnexpectedToken)

from .engine import Derivation, Engine, Options, Report  # noqa

__all__ = (firstorder.__all__ + normalform.__all__ + parser.__all__
           + ['Engine', 'Options', 'Derivation', 'Report'])
