import argparse
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from lnorm.main import build_parser, limit, main
from lnorm.pure.reducer import NormalOrderReducer


class MainTestCase(unittest.TestCase):

    def test_limit(self):
        self.assertIsNone(limit("none"))
        self.assertEqual(5, limit("5"))

        should_raise = ["0", "-3", "x", "1.5"]
        for case in should_raise:
            self.assertRaises(argparse.ArgumentTypeError, limit, case)

        for option in ["--max-steps", "--max-depth"]:
            with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
                build_parser().parse_args([option, "0"])

    def test_build_parser(self):
        args = build_parser().parse_args([])
        self.assertIsNone(args.file)
        self.assertEqual(NormalOrderReducer.MAX_STEPS, args.max_steps)
        self.assertEqual(NormalOrderReducer.MAX_DEPTH, args.max_depth)
        self.assertTrue(args.macros)

        args = build_parser().parse_args(["terms.lc", "--max-steps", "none", "--no-macros", "-q"])
        self.assertEqual("terms.lc", args.file)
        self.assertIsNone(args.max_steps)
        self.assertFalse(args.macros)
        self.assertTrue(args.quiet)

    def test_main(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "terms.lc")
            with open(path, "w", encoding="utf-8") as file:
                file.write("(NOT TRUE)\n")

            output = io.StringIO()
            with redirect_stdout(output):
                main([path, "--quiet"])
        self.assertIn("λx7.λy7.y7", output.getvalue())

    def test_main_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "terms.lc")
            with open(path, "w", encoding="utf-8") as file:
                file.write("(x)\n")

            output = io.StringIO()
            with redirect_stdout(output), self.assertRaises(SystemExit) as context:
                main([path])
        self.assertEqual(1, context.exception.code)
        self.assertIn("error: ", output.getvalue())


if __name__ == '__main__':
    unittest.main()
