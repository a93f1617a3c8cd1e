import unittest

from lnorm.lang.error import ParseError
from lnorm.lang.parser import parse
from lnorm.pure.lexical import Abstraction, Application, Variable


x, y, z = Variable("x"), Variable("y"), Variable("z")


class VariableTestCase(unittest.TestCase):

    def test_init(self):
        should_raise = ["", "a b", "λ", "x.y", "(x)", "x\n"]
        for case in should_raise:
            self.assertRaises(ParseError, Variable, case)

        should_pass = ["a", "xy", "x'", "x10", "ABC", "a_b"]
        for case in should_pass:
            self.assertEqual(case, Variable(case).expr, case)

    def test_equality(self):
        self.assertEqual(Variable("x"), x)
        self.assertNotEqual(x, y)
        self.assertEqual(hash(Variable("x")), hash(x))
        self.assertEqual({x, Variable("x"), y}, {x, y})


class AbstractionTestCase(unittest.TestCase):

    def test_init(self):
        self.assertRaises(TypeError, Abstraction, Application(x, y), x)
        self.assertRaises(TypeError, Abstraction, x, "x")

    def test_expr(self):
        cases = {
            Abstraction(x, x): "λx.x",
            Abstraction(x, Abstraction(y, x)): "λx.λy.x",
            Abstraction(x, Application(x, y)): "λx.(x y)",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, case.expr, repr(case))
            self.assertEqual(expected, str(case), repr(case))

    def test_nodes(self):
        self.assertEqual((x, Application(x, y)), Abstraction(x, Application(x, y)).nodes)


class ApplicationTestCase(unittest.TestCase):

    def test_expr(self):
        cases = {
            Application(x, y): "(x y)",
            Application(Abstraction(x, x), y): "(λx.x y)",
            Application(Application(x, y), z): "((x y) z)",
            Application(x, Application(y, z)): "(x (y z))",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, case.expr, repr(case))

    def test_is_redex(self):
        self.assertTrue(Application(Abstraction(x, x), y).is_redex)
        self.assertFalse(Application(x, Abstraction(x, x)).is_redex)
        self.assertFalse(Application(Application(Abstraction(x, x), y), z).is_redex)


class LambdaTermTestCase(unittest.TestCase):

    def test_repr(self):
        self.assertEqual("Variable('x')", repr(x))
        self.assertEqual("Abstraction('λx.(x y)')", repr(Abstraction(x, Application(x, y))))

    def test_structural_equality(self):
        self.assertEqual(parse("λx.(x y)"), Abstraction(x, Application(x, y)))
        self.assertNotEqual(parse("λx.x"), parse("λy.y"))
        self.assertNotEqual(parse("(x y)"), parse("(y x)"))

    def test_alpha_equals(self):
        should_fail = [
            ("λx.λy.x", "λa.λb.b"),
            ("λx.y", "λy.y"),
            ("λx.λx.x", "λa.λb.a"),
            ("x", "y"),
            ("λx.x", "(x x)"),
            ("(λx.x y)", "(λx.x z)"),
        ]
        for left, right in should_fail:
            self.assertFalse(parse(left).alpha_equals(parse(right)), (left, right))
            self.assertFalse(parse(right).alpha_equals(parse(left)), (right, left))

        should_pass = [
            ("λx.x", "λy.y"),
            ("λx.λy.x", "λa.λb.a"),
            ("λx.y", "λz.y"),
            ("λx.λx.x", "λa.λb.b"),
            ("(λx.(x y) λz.z)", "(λa.(a y) λb.b)"),
            ("x", "x"),
        ]
        for left, right in should_pass:
            self.assertTrue(parse(left).alpha_equals(parse(right)), (left, right))
            self.assertTrue(parse(right).alpha_equals(parse(left)), (right, left))

        self.assertFalse(x.alpha_equals("x"))

    def test_names(self):
        cases = {
            "x": ({"x"}, {"x"}),
            "λx.x": ({"x"}, set()),
            "λx.(y λz.x)": ({"x", "y", "z"}, {"y"}),
            "(λx.x x)": ({"x"}, {"x"}),
            "λx.λy.z": ({"x", "y", "z"}, {"z"}),
        }
        for case, (names, free) in cases.items():
            self.assertEqual(names, parse(case).names(), case)
            self.assertEqual(free, parse(case).free_vars(), case)

    def test_display(self):
        self.assertEqual("Variable(expr='x')", x.display())
        expected = ("Abstraction(expr='λx.(x y)', nodes=[\n"
                    "    Variable(expr='x'),\n"
                    "    Application(expr='(x y)', nodes=[\n"
                    "        Variable(expr='x'),\n"
                    "        Variable(expr='y')\n"
                    "    ])\n"
                    "])")
        self.assertEqual(expected, parse("λx.(x y)").display())


if __name__ == '__main__':
    unittest.main()
