r"""Reads λ-terms from text. The accepted grammar is fixed:

```
<term>        ::= <variable> | <abstraction> | <application>
<variable>    ::= [a-zA-z0-9']+
<abstraction> ::= "λ" <variable> "." <term>
<application> ::= "(" <term> <ws>* <term> ")"
<ws>          ::= " " | "\t" | "\n" | "\r"
```

Whitespace is only allowed between the two terms of an application, and the whole text must be one term. Because
variables are greedy, `(xy)` is the variable `xy` missing its argument, not an application.
"""

from lnorm.lang.error import ParseError
from lnorm.pure.lexical import Abstraction, Application, LambdaTerm, Variable


class Parser:
    """Recursive-descent parser over a single string. Use parse() rather than instantiating directly."""
    WHITESPACE = " \t\n\r"

    def __init__(self, text):
        self.text = text
        self.pos = 0

    def _error(self, msg, *snippets):
        return ParseError(msg, (self.text, *snippets), self.pos)

    def _peek(self):
        return self.text[self.pos] if self.pos < len(self.text) else None

    def _expect(self, char):
        if self._peek() != char:
            if self._peek() is None:
                raise self._error("'{}' ended early: expected '{}'", char)
            raise self._error("'{}' expected '{}' but found '{}'", char, self._peek())
        self.pos += 1

    def parse(self):
        """Parses self.text as exactly one λ-term."""
        try:
            term = self.term()
        except RecursionError:
            raise self._error("'{}' is nested too deeply to parse") from None

        if self.pos != len(self.text):
            raise self._error("'{}' has unexpected trailing input '{}'", self.text[self.pos:])
        return term

    def term(self):
        char = self._peek()
        if char is None:
            raise self._error("'{}' ended early: expected a λ-term")
        elif char == LambdaTerm.LAMBDA:
            return self.abstraction()
        elif char == "(":
            return self.application()
        elif Variable.PATTERN.match(char):
            return self.variable()
        raise self._error("'{}' has unexpected character '{}'", char)

    def variable(self):
        match = Variable.PATTERN.match(self.text, self.pos)
        if not match:
            if self._peek() is None:
                raise self._error("'{}' ended early: expected a variable")
            raise self._error("'{}' expected a variable but found '{}'", self._peek())
        self.pos = match.end()
        return Variable(match.group())

    def abstraction(self):
        args = []
        while self._peek() == LambdaTerm.LAMBDA:  # a chain of binders is read in a loop, only "(" recurses
            self.pos += 1
            args.append(self.variable())
            self._expect(".")

        term = self.term()
        for arg in reversed(args):
            term = Abstraction(arg, term)
        return term

    def application(self):
        self._expect("(")
        left = self.term()
        while self._peek() is not None and self._peek() in Parser.WHITESPACE:
            self.pos += 1
        right = self.term()
        self._expect(")")
        return Application(left, right)


def parse(text):
    """Converts text to a LambdaTerm, raises ParseError if text is not valid λ-term grammar."""
    return Parser(text).parse()
