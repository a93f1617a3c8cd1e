"""Normal-order beta reduction to beta-normal form, with a trace of every contraction.

The leftmost, outermost redex is contracted first and arguments are substituted unevaluated. Reduction also continues
under abstractions, so the result is a full normal form rather than a head normal form.

Source: http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from collections import namedtuple
from dataclasses import dataclass

from lnorm.lang.error import InternalInvariantViolation, ReductionLimitExceeded
from lnorm.pure.lexical import Abstraction, Application, LambdaTerm, Variable
from lnorm.pure.substitution import NameSupply, substitute


@dataclass(frozen=True)
class TraceEntry:
    """One contraction: (abstraction argument) became result."""
    abstraction: Abstraction
    argument: LambdaTerm
    result: LambdaTerm

    ARROW = "\t→\t"

    @property
    def redex(self):
        return Application(self.abstraction, self.argument)

    def __str__(self):
        return f"{self.redex.expr}{TraceEntry.ARROW}{self.result.expr}"


Reduction = namedtuple("Reduction", ["term", "steps"])
Reduction.__doc__ = """Beta-normal form of a term and the contractions that led to it, in order."""


class NormalOrderReducer:
    """Implements normal-order beta reduction of a λ-term. Does not detect non-termination: a term without a normal
    form runs until max_steps contractions have been made or subterms nest deeper than max_depth, then raises
    ReductionLimitExceeded. Either limit can be disabled with None.
    """
    MAX_STEPS = 1000
    MAX_DEPTH = 500

    def __init__(self, term, names=None, max_steps=MAX_STEPS, max_depth=MAX_DEPTH):
        if not isinstance(term, LambdaTerm):
            raise InternalInvariantViolation("'{}' is not a λ-term", repr(term))

        self.term = term
        self.avoid = term.names()  # names invented while renaming binders never clash with these
        self.names = names if names is not None else NameSupply.default()
        self.max_steps = max_steps
        self.max_depth = max_depth

        self.steps = []
        self._reduction = None

    def reduce(self):
        """Returns the Reduction of self.term. Reduction runs once; later calls return the same result."""
        if self._reduction is None:
            self.steps = []
            try:
                normal_form = self._normalize(self.term, 0)
            except RecursionError:
                msg = "beta-normal form might exist, but maximum recursion depth was exceeded after {} steps"
                raise ReductionLimitExceeded(msg, str(len(self.steps)), len(self.steps)) from None
            self._reduction = Reduction(normal_form, tuple(self.steps))
        return self._reduction

    def _contract(self, abstraction, argument):
        """Contracts the redex (abstraction argument) and records it."""
        if self.max_steps is not None and len(self.steps) >= self.max_steps:
            msg = "'{}' has no beta-normal form within {} steps"
            raise ReductionLimitExceeded(msg, (self.term.expr, self.max_steps), len(self.steps))

        result = substitute(abstraction.arg, argument, abstraction.body, self.names, self.avoid)
        self.steps.append(TraceEntry(abstraction, argument, result))
        return result

    def _normalize(self, term, depth):
        if self.max_depth is not None and depth > self.max_depth:
            msg = "reduction nests deeper than {} levels"
            raise ReductionLimitExceeded(msg, str(self.max_depth), len(self.steps))

        while True:  # each contraction restarts normalization on the contractum
            if isinstance(term, Variable):
                return term

            elif isinstance(term, Abstraction):
                return Abstraction(term.arg, self._normalize(term.body, depth + 1))

            elif isinstance(term, Application):
                if not term.is_redex:
                    term = Application(self._normalize(term.left, depth + 1), term.right)
                    if not term.is_redex:
                        return Application(term.left, self._normalize(term.right, depth + 1))

                term = self._contract(term.left, term.right)

            else:
                raise InternalInvariantViolation("'{}' is not a λ-term", repr(term))

    def __repr__(self):
        return f"{type(self).__name__}({self.term!r})"


def normalize(term, names=None, max_steps=NormalOrderReducer.MAX_STEPS, max_depth=NormalOrderReducer.MAX_DEPTH):
    """Reduces term to beta-normal form. Returns a Reduction, which unpacks as (normal_form, steps)."""
    return NormalOrderReducer(term, names, max_steps, max_depth).reduce()
