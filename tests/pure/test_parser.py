import unittest

from camel.lang.error import ParseError, UnexpectedEndOfInput, UnexpectedToken
from camel.pure.lexical import TokenKind
from camel.pure.parser import Parser, parse
from camel.pure.term import Abstraction, Application, Identifier


class ParserTestCase(unittest.TestCase):

    def test_parse_term(self):
        cases = {
            "(λx.x)(λy.y)": Application(
                Abstraction("x", Identifier("x")),
                Abstraction("y", Identifier("y"))
            ),
            "(λx.x)(λy.(λa.a))": Application(
                Abstraction("x", Identifier("x")),
                Abstraction("y", Abstraction("a", Identifier("a")))
            ),
            # left associative
            "(λx.x)(λy.y)(λabc.abc)": Application(
                Application(
                    Abstraction("x", Identifier("x")),
                    Abstraction("y", Identifier("y"))
                ),
                Abstraction("abc", Identifier("abc"))
            ),
            "a b c": Application(Application(Identifier("a"), Identifier("b")), Identifier("c")),
            "a (b c)": Application(Identifier("a"), Application(Identifier("b"), Identifier("c"))),
            # abstraction bodies are greedy
            "λx. λy. x y": Abstraction("x", Abstraction("y", Application(Identifier("x"), Identifier("y")))),
            "\\x. λy. x": Abstraction("x", Abstraction("y", Identifier("x"))),
            "((x))": Identifier("x"),
            "(λaBC.aBC)": Abstraction("aBC", Identifier("aBC")),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, Parser(case).parse_term(), case)

    def test_str(self):
        cases = {
            "(λx.x)(λy.(λa.a))": "(λx. x) (λy. (λa. a))",
            "(λx.x)(λy.y)(λabc.abc)": "(λx. x) (λy. y) (λabc. abc)",
            "\\x.x": "(λx. x)",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(Parser(case).parse_term()), case)

    def test_round_trip(self):
        cases = ["(λx.x)(λy.y)", "λx. λy. x y", "a b c", "(λf.f a) (λx.x) b", "x (λy. y y) z", "λs.λz.s s z"]
        for case in cases:
            term = parse(case)
            self.assertEqual(term, parse(str(term)), case)

    def test_prefix(self):
        parser = Parser("x) y")
        self.assertEqual(Identifier("x"), parser.parse_term())
        self.assertEqual(TokenKind.RIGHT_PAREN, parser.current_kind())

    def test_unexpected_token(self):
        cases = {
            "(λx.1)": (TokenKind.UNKNOWN, "1"),
            "(λA.a)": (TokenKind.UNKNOWN, "A"),
            "(λAbc.Abc)": (TokenKind.UNKNOWN, "A"),
            "(3 λx.x)": (TokenKind.UNKNOWN, "3"),
            ")λx.x)": (TokenKind.RIGHT_PAREN, ")"),
            "(.x.x)": (TokenKind.DOT, "."),
            "(x .)": (TokenKind.DOT, "."),
            "λ.x": (TokenKind.DOT, "."),
            "λx x": (TokenKind.LOWERCASE_ID, "x"),
            "x λy.y": (TokenKind.LAMBDA, "λ"),
        }
        for case, (kind, text) in cases.items():
            with self.assertRaises(UnexpectedToken, msg=case) as context:
                parse(case)
            self.assertEqual(kind, context.exception.kind, case)
            self.assertEqual(text, context.exception.text, case)

    def test_unexpected_end_of_input(self):
        cases = ["", "   ", "(", "(λ", "(λx", "(λx.", "(λx.x", "(λx.x)("]
        for case in cases:
            self.assertRaises(UnexpectedEndOfInput, Parser(case).parse_term)

    def test_parse_trailing(self):
        with self.assertRaises(UnexpectedToken) as context:
            parse("(λx.x))")
        self.assertEqual(TokenKind.RIGHT_PAREN, context.exception.kind)
        self.assertEqual(6, context.exception.start)

        self.assertRaises(ParseError, parse, "x y .")

    def test_separator_between_identifiers(self):
        with self.assertRaises(UnexpectedToken) as context:
            parse("x\x1cy")
        self.assertEqual((TokenKind.UNKNOWN, "\x1c"), (context.exception.kind, context.exception.text))

    def test_error_span(self):
        with self.assertRaises(UnexpectedToken) as context:
            parse("λx. x Yz")
        self.assertEqual((6, 7), (context.exception.start, context.exception.end))
        self.assertEqual("λx. x Yz", context.exception.expr)

        with self.assertRaises(UnexpectedEndOfInput) as context:
            parse("(λx.")
        self.assertEqual(4, context.exception.start)


if __name__ == '__main__':
    unittest.main()
