"""Pure lambda calculus expression model.

The `pure` directory contains the pure lambda calculus engine: terms, substitution and reduction. Reading terms from
text lives in `lang`.

Formally, pure lambda calculus can be defined as

```
<λ-term> ::= <variable>                 ; "variable"
                                        ; - one or more identifier characters: [a-zA-z0-9']+
           | "λ" <variable> "." <λ-term>; "abstraction"
                                        ; - one bound variable per λ, no currying
           | "(" <λ-term> <λ-term> ")"  ; "application"
                                        ; - always parenthesized, so printed terms are unambiguous
```

Terms are immutable: every transformation builds a new tree. A subtree may appear in several places of a tree (a
substituted value is duplicated into each occurrence), which is safe because nothing is ever mutated in place.

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com,
         http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

import re
from abc import abstractmethod, ABC
from dataclasses import dataclass

from lnorm.lang.error import ParseError


@dataclass(frozen=True, repr=False)
class LambdaTerm(ABC):
    """Represents a valid λ-term: variable, abstraction, or application."""
    LAMBDA = "λ"

    @property
    @abstractmethod
    def expr(self):
        """Surface syntax of this term. Every application is fully parenthesized."""

    @property
    @abstractmethod
    def nodes(self):
        """Child nodes, left to right. Lambda calculus ASTs are binary, so at most two."""

    @abstractmethod
    def _alpha_equals(self, other, bound):
        """Whether self and other are equal up to renaming of bound variables. bound is a tuple of
        (self name, other name) binder pairs, innermost last.
        """

    def alpha_equals(self, other):
        """Whether or not two LambdaTerms are alpha-equivalent."""
        return isinstance(other, LambdaTerm) and self._alpha_equals(other, ())

    def names(self):
        """Every variable name used in self: free, bound, or binding."""
        result = set()
        stack = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Variable):
                result.add(node.name)
            stack.extend(node.nodes)
        return result

    def free_vars(self):
        """Names of the variables that occur free in self."""
        if isinstance(self, Variable):
            return {self.name}
        if isinstance(self, Abstraction):
            return self.body.free_vars() - {self.arg.name}
        left, right = self.nodes
        return left.free_vars() | right.free_vars()

    def display(self, indents=0):
        """Recursively displays LambdaTerm tree with readable format.

        Format:
        <LambdaTerm>(expr='<expr>', nodes=[
            <LambdaTerm>(expr='<expr>', nodes=[
                ...
                <LambdaTerm>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(expr='{self.expr}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __repr__(self):
        return f"{type(self).__name__}('{self.expr}')"

    def __str__(self):
        return self.expr


@dataclass(frozen=True, repr=False)
class Variable(LambdaTerm):
    """Variable in lambda calculus. Identity is by name only."""
    name: str

    # the A-z range also admits [ \ ] ^ _ and `
    CHARS = "a-zA-z0-9'"
    PATTERN = re.compile(f"[{CHARS}]+")

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ParseError("variable name cannot be empty", "", 0)
        if not Variable.PATTERN.fullmatch(self.name):
            match = Variable.PATTERN.match(self.name)
            raise ParseError("'{}' is not a valid variable name", self.name, match.end() if match else 0)

    @property
    def expr(self):
        return self.name

    @property
    def nodes(self):
        return ()

    def _alpha_equals(self, other, bound):
        if not isinstance(other, Variable):
            return False

        for mine, theirs in reversed(bound):
            if mine == self.name or theirs == other.name:
                return mine == self.name and theirs == other.name
        return self.name == other.name


@dataclass(frozen=True, repr=False)
class Abstraction(LambdaTerm):
    """Abstraction λarg.body."""
    arg: Variable
    body: LambdaTerm

    def __post_init__(self):
        if not isinstance(self.arg, Variable):
            raise TypeError(f"abstraction must bind a Variable, got {self.arg!r}")
        if not isinstance(self.body, LambdaTerm):
            raise TypeError(f"abstraction body must be a LambdaTerm, got {self.body!r}")

    @property
    def expr(self):
        return f"{LambdaTerm.LAMBDA}{self.arg.name}.{self.body.expr}"

    @property
    def nodes(self):
        return self.arg, self.body

    def _alpha_equals(self, other, bound):
        if not isinstance(other, Abstraction):
            return False
        return self.body._alpha_equals(other.body, bound + ((self.arg.name, other.arg.name),))


@dataclass(frozen=True, repr=False)
class Application(LambdaTerm):
    """Application (left right): left in function position, right in argument position."""
    left: LambdaTerm
    right: LambdaTerm

    def __post_init__(self):
        for node in (self.left, self.right):
            if not isinstance(node, LambdaTerm):
                raise TypeError(f"application operands must be LambdaTerms, got {node!r}")

    @property
    def expr(self):
        return f"({self.left.expr} {self.right.expr})"

    @property
    def nodes(self):
        return self.left, self.right

    @property
    def is_redex(self):
        """Applications are the only LambdaTerm that can be a redex: their left child is an Abstraction."""
        return isinstance(self.left, Abstraction)

    def _alpha_equals(self, other, bound):
        if not isinstance(other, Application):
            return False
        return self.left._alpha_equals(other.left, bound) and self.right._alpha_equals(other.right, bound)
