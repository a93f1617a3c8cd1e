"""Free-variable analysis and capture-avoiding substitution.

Substituting a value under a binder whose name occurs free in that value would capture the value's variable. Instead
of refusing such a substitution, the binder is alpha-converted to a fresh name first, so every redex can be contracted.
"""

import threading

from lnorm.lang.error import InternalInvariantViolation
from lnorm.pure.lexical import Abstraction, Application, LambdaTerm, Variable


def _not_a_term(term):
    return InternalInvariantViolation("'{}' is not a λ-term", repr(term))


def occurs_free(var, term):
    """Whether var's name has a free occurrence in term. A binder of the same name shadows everything below it."""
    if isinstance(term, Variable):
        return term.name == var.name
    elif isinstance(term, Abstraction):
        return term.arg.name != var.name and occurs_free(var, term.body)
    elif isinstance(term, Application):
        return occurs_free(var, term.left) or occurs_free(var, term.right)
    raise _not_a_term(term)


class NameSupply:
    """Generates fresh variable names: PREFIX followed by a counter that only ever increases. One supply can be shared
    between threads; the counter is incremented under a lock.
    """
    PREFIX = "a"

    _default = None
    _default_lock = threading.Lock()

    def __init__(self, prefix=PREFIX, start=0):
        Variable(f"{prefix}{start}")  # raises ParseError if prefix is not made of identifier characters
        self.prefix = prefix
        self.counter = start
        self._lock = threading.Lock()

    @classmethod
    def default(cls):
        """Process-wide supply, used whenever none is given explicitly. Never reset."""
        with cls._default_lock:
            if cls._default is None:
                cls._default = cls()
            return cls._default

    def fresh(self, avoid=()):
        """Returns a new Variable whose name is not in avoid. Candidates that are in avoid are skipped for good."""
        with self._lock:
            while True:
                name = f"{self.prefix}{self.counter}"
                self.counter += 1
                if name not in avoid:
                    return Variable(name)

    def __repr__(self):
        return f"{type(self).__name__}(prefix='{self.prefix}', counter={self.counter})"


def substitute(var, value, term, names=None, avoid=()):
    """Returns term with every free occurrence of var replaced by value. Binders in term whose names occur free in
    value are renamed with a name from names (the process-wide NameSupply if not given) before substituting beneath
    them. A new name is never one of the names in value, term, var or avoid. term is left untouched.
    """
    if names is None:
        names = NameSupply.default()

    if isinstance(term, Variable):
        return value if term.name == var.name else term

    elif isinstance(term, Application):
        return Application(substitute(var, value, term.left, names, avoid),
                           substitute(var, value, term.right, names, avoid))

    elif isinstance(term, Abstraction):
        if term.arg.name == var.name:
            return term

        if occurs_free(term.arg, value):
            new_arg = names.fresh(value.names().union(term.body.names(), {var.name}, avoid))
            term = alpha_convert(term, new_arg, names, avoid)

        return Abstraction(term.arg, substitute(var, value, term.body, names, avoid))

    raise _not_a_term(term)


def alpha_convert(abstraction, new_arg, names=None, avoid=()):
    """Renames the bound variable of abstraction to new_arg. new_arg must not occur free in the body."""
    if not isinstance(abstraction, LambdaTerm):
        raise _not_a_term(abstraction)
    elif not isinstance(abstraction, Abstraction):
        raise ValueError(f"can only alpha-convert an Abstraction, got {abstraction!r}")
    elif abstraction.arg.name != new_arg.name and occurs_free(new_arg, abstraction.body):
        raise ValueError(f"'{new_arg.name}' occurs free in '{abstraction.body.expr}'")
    return Abstraction(new_arg, substitute(abstraction.arg, new_arg, abstraction.body, names, avoid))
