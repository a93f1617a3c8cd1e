"""Uses lnorm to reduce the λ-terms in a file or run in command-line mode. Also uses error handling context manager.
Installed as the lnorm console script.
"""

import argparse

from lnorm.lang.error import ErrorHandler
from lnorm.lang.session import Session
from lnorm.lang.shell import Shell
from lnorm.pure.reducer import NormalOrderReducer


def limit(value):
    """argparse type for a reduction limit: a positive integer, or 'none' for no limit."""
    if value.lower() == "none":
        return None
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer or 'none', got '{value}'")
    return number


def build_parser():
    parser = argparse.ArgumentParser(prog="lnorm", description="Reduce untyped λ-terms to beta-normal form.")
    parser.add_argument("file", help="file to reduce, one term per line (if empty, goes to command-line mode)",
                        nargs="?")
    parser.add_argument("--max-steps", type=limit, default=NormalOrderReducer.MAX_STEPS,
                        help="contractions allowed per term before giving up (default: %(default)s)")
    parser.add_argument("--max-depth", type=limit, default=NormalOrderReducer.MAX_DEPTH,
                        help="subterm nesting allowed during reduction (default: %(default)s)")
    parser.add_argument("--no-macros", dest="macros", action="store_false",
                        help="do not expand AND, NOT, TRUE, FALSE, COND and '_'")
    parser.add_argument("-q", "--quiet", action="store_true", help="print normal forms only, not reduction steps")
    parser.add_argument("--visible-spaces", action="store_true", help="print spaces as '_'")
    return parser


def main(argv=None):
    """Runs lnorm. Called from the lnorm console script."""
    with ErrorHandler() as error_handler:
        args = build_parser().parse_args(argv)
        options = dict(macros=args.macros, quiet=args.quiet, visible_spaces=args.visible_spaces,
                       max_steps=args.max_steps, max_depth=args.max_depth)

        if args.file is not None:
            Session(error_handler, args.file, cmd_line=False, **options).run()

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, **options)).cmdloop()


if __name__ == "__main__":
    main()
