"""Session control for lnorm. Reads λ-terms from a file or the command line, expands macros, parses and reduces them,
and prints each normal form with the steps that produced it.

Source files hold one term per line. `;;` starts a comment, and a line with more '(' than ')' continues onto the next
one (lines are joined by a single space, so break lines between the two terms of an application).
"""

from termcolor import colored

from lnorm.lang.error import GenericException, ParseError, ReductionLimitExceeded
from lnorm.lang.macros import expand
from lnorm.lang.parser import parse
from lnorm.pure.reducer import NormalOrderReducer, normalize


def render(reduction, separator="\n", visible_spaces=False):
    """Returns (normal form, steps) as text. Steps are joined by separator. If visible_spaces, spaces become '_'."""
    result = reduction.term.expr
    steps = separator.join(str(step) for step in reduction.steps)

    if visible_spaces:
        result, steps = result.replace(" ", "_"), steps.replace(" ", "_")
    return result, steps


class Session:
    """Governs a lnorm session: the terms waiting to be reduced and the results so far."""
    SH_FILE = "<in>"  # command-line interpreter filename
    COMMENT = ";;"

    def __init__(self, error_handler, path, cmd_line, macros=True, quiet=False, visible_spaces=False,
                 max_steps=NormalOrderReducer.MAX_STEPS, max_depth=NormalOrderReducer.MAX_DEPTH, names=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path                      # used for error messages
        self.cmd_line = cmd_line              # whether or not in command-line mode
        self.macros = macros                  # whether or not to expand AND, NOT, TRUE, FALSE, COND
        self.quiet = quiet                    # whether or not to hide reduction steps
        self.visible_spaces = visible_spaces  # whether or not to print spaces as '_'

        self.max_steps = max_steps
        self.max_depth = max_depth
        self.names = names  # NameSupply shared by every reduction in this session (process-wide if None)

        self.to_exec = {}  # dict of line num: (source line, LambdaTerm) to reduce
        self.results = []  # Reductions, in the order they were run

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            exprs = []
            add_to_prev = False

            try:
                with open(path, "r", encoding="utf-8") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, exprs)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            if add_to_prev:
                raise GenericException("'{}' ends inside an unclosed '('", exprs[-1][0], diagnosis=False)

            for expr, line_num in exprs:
                self.add(expr, line_num)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. In command-line mode, exprs can be ignored (used to keep
        track of file's exprs), but add_to_prev will indicate whether a line continuation is necessary. Returns
        updated value of line and add_to_prev. Must be called before calling add.
        """
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]  # get rid of comments

        line = line.strip()
        if exprs is not None and line:
            if add_to_prev:
                prev, start = exprs.pop()
                line = f"{prev} {line}"
                exprs.append([line, start])
            else:
                exprs.append([line, line_num])
        elif exprs is not None and add_to_prev:
            line = exprs[-1][0]

        return line, line.count("(") > line.count(")")

    def add(self, expr, line_num):
        """Parses expr and queues it for reduction. Reduction is delayed until run is called."""
        self.error_handler.register_line(self.path, expr, line_num)  # in case error is raised

        text = expand(expr) if self.macros else expr
        try:
            term = parse(text)
        except ParseError as error:
            if text == expr:
                raise
            # position is in the expanded text, so that is what gets shown
            msg = "'{}' is not a valid λ-term after macros expanded '{}': {}"
            raise ParseError(msg, (text, expr, error.args[0]), error.pos) from error
        self.to_exec[line_num] = (expr, term)

        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Reduces this session's queued terms and prints them. A term without a normal form within the limits is
        reported as a warning and the remaining terms still run; any other error is raised.
        """
        for line_num, (expr, term) in list(self.to_exec.items()):
            self.error_handler.register_line(self.path, expr, line_num)

            try:
                reduction = normalize(term, self.names, self.max_steps, self.max_depth)
            except ReductionLimitExceeded as error:
                self.error_handler.warn(error)
            else:
                self.results.append(reduction)
                self.show(reduction)
            finally:
                del self.to_exec[line_num]
                self.error_handler.remove_line(self.path)

    def show(self, reduction):
        """Prints reduction: its normal form in bold, then one line per step unless quiet."""
        result, steps = render(reduction, visible_spaces=self.visible_spaces)
        print(colored(result, attrs=["bold"]))

        if not self.quiet and steps:
            marker = colored("β", "cyan", attrs=["bold"])
            for step in steps.split("\n"):
                print(f"  {marker} {step}")
