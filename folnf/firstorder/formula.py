from __future__ import annotations

from abc import abstractmethod
from typing import Any, Final, Iterator, Optional, Self
from typing_extensions import TypeIs

from IPython.lib import pretty

from ..support.tracing import trace  # noqa


class Formula:
    r"""This abstract base class implements representations of and methods on
    first-order formulas recursively built using first-order operators:

    1. Boolean operators:

       a. Negation :math:`\lnot`

       b. Conjunction :math:`\land` and disjunction :math:`\lor`

       c. Implication :math:`\longrightarrow`

       d. Bi-implication (syntactic equivalence) :math:`\longleftrightarrow`

    2. Quantifiers :math:`\exists x` and :math:`\forall x`, where :math:`x` is
       a variable.

    The atoms are predicates :class:`.atomic.Pred` and equations
    :class:`.atomic.Eq`.

    Formulas are immutable. Each transformation constructs a new formula and
    shares unchanged subformulas with its input. All constructor arguments are
    available as the tuple :attr:`args`, and ``f == f.op(*f.args)``.

    All binary operators have exactly two arguments. There is no flattening of
    nested conjunctions or disjunctions.
    """

    _args: tuple[Any, ...]
    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Formula`. It yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of a formula as a tuple.

        .. seealso::
            * :attr:`lhs <.boolean.BinaryFormula.lhs>`, \
              :attr:`rhs <.boolean.BinaryFormula.rhs>` \
                -- arguments of binary Boolean operators
            * :attr:`Not.arg <.boolean.Not.arg>` \
                -- argument formula of a logical :math:`\\neg`
            * :attr:`QuantifiedFormula.var <.quantified.QuantifiedFormula.var>`, \
              :attr:`QuantifiedFormula.arg <.quantified.QuantifiedFormula.arg>` \
                -- variable and scope of a quantifier
        """
        return self._args

    def __and__(self, other: Formula) -> Formula:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.boolean.And`.

        >>> from folnf.firstorder import Pred
        >>> Pred('P') & Pred('Q') & Pred('R')
        And(And(P, Q), R)
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`.

        Note that this is not a logical operator for equality.
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        self._hash = None

    def __invert__(self) -> Formula:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`.boolean.Not`.
        """
        return Not(self)

    def __or__(self, other: Formula) -> Formula:
        """Override the :obj:`| <object.__or__>` operator to apply
        :class:`.boolean.Or`.
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of `self` in constructor notation. Terms and
        atoms are written in infix notation.
        """
        return f'{self.op.__name__}({", ".join(repr(arg) for arg in self.args)})'

    def __rshift__(self, other: Formula) -> Formula:
        """Override the :obj:`>> <object.__rshift__>` operator to apply
        :class:`.boolean.Implies`.
        """
        return Implies(self, other)

    def __str__(self) -> str:
        """Representation in the internal symbol alphabet. The parser reads
        it back into an equal formula.

        >>> from folnf.firstorder import *
        >>> x, y = Var('x'), Var('y')
        >>> print(Forall(x, Implies(Pred('P', x), Exists(y, Pred('R', x, y)))))
        ∀x (P(x) → ∃y R(x, y))
        >>> print(Or(Pred('A'), And(Pred('B'), Not(Or(Pred('C'), Pred('D'))))))
        A ∨ B ∧ ¬(C ∨ D)
        """
        SYMBOL: Final = {
            Forall: '∀', Exists: '∃', Not: '¬', And: '∧', Or: '∨',
            Implies: '→', Iff: '↔'}
        PRECEDENCE: Final = {Iff: 10, Implies: 20, Or: 30, And: 40}
        UNARY: Final = 99
        match self:
            case Forall() | Exists():
                arg_as_str = str(self.arg)
                if self.arg.op in PRECEDENCE:
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[self.op]}{self.var} {arg_as_str}'
            case And() | Or() | Implies() | Iff():
                # Operators are left-associative, so the right hand side needs
                # parentheses already at equal precedence.
                lhs_as_str = str(self.lhs)
                if PRECEDENCE.get(self.lhs.op, UNARY) < PRECEDENCE[self.op]:
                    lhs_as_str = f'({lhs_as_str})'
                rhs_as_str = str(self.rhs)
                if PRECEDENCE.get(self.rhs.op, UNARY) <= PRECEDENCE[self.op]:
                    rhs_as_str = f'({rhs_as_str})'
                return f'{lhs_as_str} {SYMBOL[self.op]} {rhs_as_str}'
            case Not():
                arg_as_str = str(self.arg)
                if self.arg.op in PRECEDENCE or isinstance(self.arg, Eq):
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[Not]}{arg_as_str}'
            case _:
                # Atomic formulas are caught by the implementation of the
                # abstract method AtomicFormula.__str__.
                assert False, repr(self)

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    def atoms(self) -> Iterator[AtomicFormula]:
        """An iterator over all instances of :class:`.atomic.AtomicFormula`
        occurring in `self`, from left to right.

        >>> from folnf.firstorder import *
        >>> x = Var('x')
        >>> list(Forall(x, Or(Not(Pred('P', x)), Eq(x, Const('A')))).atoms())
        [P(x), x = A]
        """
        match self:
            case Forall() | Exists():
                yield from self.arg.atoms()
            case Not() | And() | Or() | Implies() | Iff():
                for arg in self.args:
                    yield from arg.atoms()
            case _:
                # Atomic formulas are caught by the final method
                # AtomicFormula.atoms.
                assert False, type(self)

    def bvars(self, quantified: frozenset[Var] = frozenset()) -> Iterator[Var]:
        """An iterator over all bound occurrences of variables in `self`. Each
        variable is reported once for each term that it occurs in.

        >>> from folnf.firstorder import *
        >>> a, x, y = Var('a'), Var('x'), Var('y')
        >>> f = Forall(y, And(Exists(x, Pred('P', a, x, y)), Pred('Q', x, y)))
        >>> list(f.bvars())
        [x, y, y]

        The parameter `quantified` specifies variables to be considered bound
        in addition to those that are explicitly quantified in `self`.

        .. seealso::
            * :meth:`fvars` -- all occurring free variables
            * :meth:`qvars` -- all quantified variables
        """
        match self:
            case Forall() | Exists():
                yield from self.arg.bvars(quantified.union({self.var}))
            case Not() | And() | Or() | Implies() | Iff():
                for arg in self.args:
                    yield from arg.bvars(quantified)
            case _:
                assert False, type(self)

    def depth(self) -> int:
        """The depth of a formula is the maximal length of a path from the root
        to an atomic formula in the expression tree.

        >>> from folnf.firstorder import *
        >>> x = Var('x')
        >>> Forall(x, And(Pred('P', x), Not(Pred('Q', x)))).depth()
        3
        """
        match self:
            case Forall() | Exists():
                return self.arg.depth() + 1
            case Not() | And() | Or() | Implies() | Iff():
                return max([arg.depth() for arg in self.args]) + 1
            case AtomicFormula():
                return 0
            case _:
                assert False, type(self)

    def elim_iff_imp(self) -> Formula:
        """Eliminate :class:`.boolean.Iff` and :class:`.boolean.Implies`.
        ``Iff(A, B)`` becomes ``And(Implies(A, B), Implies(B, A))``, and
        ``Implies(A, B)`` becomes ``Or(Not(A), B)``, so that both together
        leave ``And(Or(Not(A), B), Or(Not(B), A))``. All other operators are
        kept as they are.

        >>> from folnf.firstorder import *
        >>> x = Var('x')
        >>> Forall(x, Implies(Pred('P', x), Pred('Q', x))).elim_iff_imp()
        Forall(x, Or(Not(P(x)), Q(x)))
        >>> Iff(Pred('A'), Pred('B')).elim_iff_imp()
        And(Or(Not(A), B), Or(Not(B), A))
        """
        match self:
            case Iff():
                lhs = self.lhs.elim_iff_imp()
                rhs = self.rhs.elim_iff_imp()
                return And(Or(Not(lhs), rhs), Or(Not(rhs), lhs))
            case Implies():
                return Or(Not(self.lhs.elim_iff_imp()), self.rhs.elim_iff_imp())
            case Not() | And() | Or():
                return self.op(*[arg.elim_iff_imp() for arg in self.args])
            case Forall() | Exists():
                return self.op(self.var, self.arg.elim_iff_imp())
            case AtomicFormula():
                return self
            case _:
                assert False, type(self)

    def fvars(self, quantified: frozenset[Var] = frozenset()) -> Iterator[Var]:
        """An iterator over all free occurrences of variables in `self`. Each
        variable is reported once for each term that it occurs in.

        The parameter `quantified` specifies variables to be considered bound
        in addition to those that are explicitly quantified in `self`.

        >>> from folnf.firstorder import *
        >>> a, x, y = Var('a'), Var('x'), Var('y')
        >>> f = Forall(y, And(Exists(x, Pred('P', a, x, y)), Pred('Q', x, a)))
        >>> list(f.fvars())
        [a, x, a]

        .. seealso::
            * :meth:`bvars` -- all occurring bound variables
            * :meth:`qvars` -- all quantified variables
        """
        match self:
            case Forall() | Exists():
                yield from self.arg.fvars(quantified.union({self.var}))
            case Not() | And() | Or() | Implies() | Iff():
                for arg in self.args:
                    yield from arg.fvars(quantified)
            case _:
                assert False, type(self)

    @staticmethod
    def is_atomic(f: Formula) -> TypeIs[AtomicFormula]:
        """Type narrowing :func:`isinstance` test for
        :class:`.atomic.AtomicFormula`.
        """
        return isinstance(f, AtomicFormula)

    @staticmethod
    def is_literal(f: Formula) -> TypeIs[AtomicFormula | Not]:
        """Test for an atomic formula or the negation of an atomic formula.
        """
        return isinstance(f, AtomicFormula) or (
            isinstance(f, Not) and isinstance(f.arg, AtomicFormula))

    @staticmethod
    def is_quantified_formula(f: Formula) -> TypeIs[QuantifiedFormula]:
        """Type narrowing :func:`isinstance` test for
        :class:`.quantified.QuantifiedFormula`.
        """
        return isinstance(f, QuantifiedFormula)

    def is_nnf(self) -> bool:
        """Test whether :class:`.boolean.Not` is applied only to atomic
        formulas and there are no implications or equivalences.
        """
        match self:
            case Forall() | Exists():
                return self.arg.is_nnf()
            case And() | Or():
                return self.lhs.is_nnf() and self.rhs.is_nnf()
            case Not():
                return Formula.is_atomic(self.arg)
            case Implies() | Iff():
                return False
            case AtomicFormula():
                return True
            case _:
                assert False, type(self)

    def matrix(self) -> tuple[Formula, Prefix]:
        """The matrix of a prenex formula is its quantifier-free part. Its
        prefix is a double ended queue holding the leading quantifiers from
        left to right.

        >>> from folnf.firstorder import *
        >>> x, y = Var('x'), Var('y')
        >>> m, p = Forall(x, Exists(y, Pred('R', x, y))).matrix()
        >>> m
        R(x, y)
        >>> print(p)
        ∀x ∃y

        If `self` is not prenex, then only the leading quantifiers are
        considered, and the matrix will not be quantifier-free.

        .. seealso::
            * :class:`Prefix <.quantified.Prefix>` -- a quantifier prefix
            * :meth:`quantify` -- add quantifier prefix
        """
        mat: Formula = self
        prefix = Prefix()
        while Formula.is_quantified_formula(mat):
            prefix.append((mat.op, mat.var))
            mat = mat.arg
        return mat, prefix

    def quantify(self, prefix: Prefix) -> Formula:
        """Add quantifier prefix. The last entry of the prefix becomes the
        innermost quantifier.

        >>> from folnf.firstorder import *
        >>> x, y = Var('x'), Var('y')
        >>> Pred('R', x, y).quantify(Prefix((Forall, x), (Exists, y)))
        Forall(x, Exists(y, R(x, y)))

        .. seealso::
            * :meth:`matrix` -- prenex formula without quantifier prefix
        """
        f = self
        for q, v in reversed(prefix):
            f = q(v, f)
        return f

    def qvars(self) -> Iterator[Var]:
        """An iterator over all quantified variables in `self`, in the order
        of the quantifiers from left to right.

        >>> from folnf.firstorder import *
        >>> x, y = Var('x'), Var('y')
        >>> f = Forall(y, And(Exists(x, Pred('P', x)), Exists(x, Pred('Q', y))))
        >>> list(f.qvars())
        [y, x, x]
        """
        match self:
            case Forall() | Exists():
                yield self.var
                yield from self.arg.qvars()
            case Not() | And() | Or() | Implies() | Iff():
                for arg in self.args:
                    yield from arg.qvars()
            case AtomicFormula():
                yield from ()
            case _:
                assert False, type(self)

    def subs(self, substitution: dict[Var, Term]) -> Formula:
        """Substitution of terms for free occurrences of variables.

        A quantifier removes its own variable from the substitution before the
        substitution is applied to its scope, so that variables rebound by a
        quantifier are never replaced. This is shadowing, not renaming:
        variables occurring in the substituted terms can be captured. Callers
        guarantee distinct variable names, e.g., via
        :meth:`.pnf.PrenexNormalForm.standardize_apart`.

        >>> from folnf.firstorder import *
        >>> x, y = Var('x'), Var('y')
        >>> f = And(Pred('P', x), Exists(x, Pred('Q', x, y)))
        >>> f.subs({x: Const('A'), y: Func('g', x)})
        And(P(A), Exists(x, Q(x, g(x))))
        """
        match self:
            case Forall() | Exists():
                if self.var in substitution:
                    substitution = {v: t for v, t in substitution.items() if v != self.var}
                return self.op(self.var, self.arg.subs(substitution))
            case Not() | And() | Or() | Implies() | Iff():
                return self.op(*[arg.subs(substitution) for arg in self.args])
            case _:
                # Atomic formulas are caught by the implementation of the
                # abstract method AtomicFormula.subs.
                assert False, type(self)

    def symbols(self) -> Iterator[str]:
        """An iterator over all names occurring in `self`: quantified
        variables, variables, constants, function symbols, and predicate
        symbols. Fresh names must avoid those.

        >>> from folnf.firstorder import *
        >>> x = Var('x')
        >>> sorted(set(Forall(x, Pred('P', Func('f', x, Const('A')))).symbols()))
        ['A', 'P', 'f', 'x']
        """
        match self:
            case Forall() | Exists():
                yield self.var.name
                yield from self.arg.symbols()
            case Not() | And() | Or() | Implies() | Iff():
                for arg in self.args:
                    yield from arg.symbols()
            case _:
                assert False, type(self)

    def to_nnf(self, _not: bool = False) -> Formula:
        """Convert to Negation Normal Form.

        A Negation Normal Form (NNF) is an equivalent formula within which the
        application of :class:`.boolean.Not` is restricted to atomic formulas.
        The only other operators admitted are :class:`.boolean.And`,
        :class:`.boolean.Or`, :class:`.quantified.Exists`, and
        :class:`.quantified.Forall`. Remaining implications and equivalences
        are eliminated on the fly as in :meth:`elim_iff_imp`.

        The conversion is idempotent.

        >>> from folnf.firstorder import *
        >>> x = Var('x')
        >>> f = Not(Forall(x, And(Pred('P', x), Not(Not(Pred('Q', x))))))
        >>> f.to_nnf()
        Exists(x, Or(Not(P(x)), Not(Q(x))))
        >>> f.to_nnf().to_nnf() == f.to_nnf()
        True
        """
        match self:
            case Forall() | Exists():
                nnf_op: type[Formula] = self.dual() if _not else self.op
                return nnf_op(self.var, self.arg.to_nnf(_not))
            case Iff():
                rewrite: Formula = And(Implies(self.lhs, self.rhs), Implies(self.rhs, self.lhs))
                return rewrite.to_nnf(_not)
            case Implies():
                return Or(Not(self.lhs), self.rhs).to_nnf(_not)
            case And() | Or():
                nnf_op = self.dual() if _not else self.op
                return nnf_op(self.lhs.to_nnf(_not), self.rhs.to_nnf(_not))
            case Not():
                return self.arg.to_nnf(not _not)
            case AtomicFormula():
                return Not(self) if _not else self
            case _:
                assert False, type(self)


# The following imports are intentionally late to avoid circularity.
from .atomic import AtomicFormula, Eq
from .boolean import And, Iff, Implies, Not, Or
from .quantified import Exists, Forall, Prefix, QuantifiedFormula
from .term import Term, Var
