"""Named constants, expanded textually before parsing. Names are matched case-insensitively anywhere in the text, so
they are reserved words: a variable such as `second` contains `cond` and will be rewritten.

Expansions bind variables (x10, y10, ...) that are not expected anywhere else in user input. AND and NOT expand to text
that mentions TRUE and FALSE, which are rewritten in turn because they come later in the table.
"""

import re


MACROS = (
    ("_", " "),  # lets an input line encode the space between an application's terms
    ("AND", "λx10.λy10.((x10 y10) FALSE)"),
    ("NOT", "λx9.((x9 FALSE) TRUE)"),
    ("TRUE", "λx8.λy8.x8"),
    ("FALSE", "λx7.λy7.y7"),
    ("COND", "λa6.λb6.λc6.((c6 a6) b6)"),
)


def expand(text, macros=MACROS):
    """Applies each (name, replacement) of macros to text, in order."""
    for name, replacement in macros:
        text = re.sub(re.escape(name), lambda match, replacement=replacement: replacement, text, flags=re.IGNORECASE)
    return text
