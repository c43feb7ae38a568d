import unittest

from tini.lexer import Lexer, LexerError, OtherLexerError, UnexpectedCharacter, UnexpectedEndOfInput, UnknownEscape
from tini.token import Position, Token, TokenType


def types(text):
    return [(token.type, token.value) for token in Lexer(text)]


class LexerTestCase(unittest.TestCase):

    def test_tokens(self):
        T = TokenType
        expected = [
            (T.LEFT_BRACKET, None), (T.IF, None),
            (T.LEFT_BRACKET, None), (T.IDENTIFIER, "="),
            (T.LEFT_BRACKET, None), (T.IDENTIFIER, "+"), (T.INTEGER, 1), (T.INTEGER, 2), (T.RIGHT_BRACKET, None),
            (T.INTEGER, 3), (T.RIGHT_BRACKET, None),
            (T.LEFT_BRACKET, None), (T.IDENTIFIER, "print"), (T.INTEGER, 1), (T.RIGHT_BRACKET, None),
            (T.LEFT_BRACKET, None), (T.IDENTIFIER, "print"), (T.INTEGER, 0), (T.RIGHT_BRACKET, None),
            (T.RIGHT_BRACKET, None),
        ]
        self.assertEqual(expected, types("(if (= (+ 1 2) 3) (print 1) (print 0))"))

    def test_identifiers(self):
        cases = {
            "foo": "foo",
            "x1": "x1",
            "a-b?": "a-b?",
            "<=": "<=",
            "'quote": "'quote",
            "_": "_",
            "définir": "définir",
            "ifx": "ifx",
            "defined": "defined",
        }
        for case, name in cases.items():
            self.assertEqual([(TokenType.IDENTIFIER, name)], types(case), case)

    def test_keywords(self):
        cases = {"if": TokenType.IF, "define": TokenType.DEFINE}
        for case, token_type in cases.items():
            self.assertEqual([(token_type, None)], types(case), case)

    def test_integers(self):
        cases = {
            "0": [(TokenType.INTEGER, 0)],
            "42": [(TokenType.INTEGER, 42)],
            "007": [(TokenType.INTEGER, 7)],
            "9223372036854775807": [(TokenType.INTEGER, 2 ** 63 - 1)],
            "12abc": [(TokenType.INTEGER, 12), (TokenType.IDENTIFIER, "abc")],
            "-5": [(TokenType.IDENTIFIER, "-5")],  # no negative literals
        }
        for case, expected in cases.items():
            self.assertEqual(expected, types(case), case)

    def test_integer_overflow(self):
        lexer = Lexer("9223372036854775808 1")
        with self.assertRaises(OtherLexerError) as context:
            lexer.next_token()
        self.assertIsInstance(context.exception.error, OverflowError)
        self.assertEqual(Position(1, 1), context.exception.position)

        # the whole literal was consumed
        self.assertEqual(Token(TokenType.INTEGER, 1, Position(1, 21)), lexer.next_token())

    def test_whitespace_and_comments(self):
        cases = {
            "": [],
            "   \n\t ": [],
            "; just a comment": [],
            "1 ; one\n2": [(TokenType.INTEGER, 1), (TokenType.INTEGER, 2)],
            ";a\n;b\n(": [(TokenType.LEFT_BRACKET, None)],
            "x;comment": [(TokenType.IDENTIFIER, "x")],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, types(case), case)

    def test_positions(self):
        tokens = list(Lexer("(define x\n  ; comment\n  10)"))
        expected = [Position(1, 1), Position(1, 2), Position(1, 9), Position(3, 3), Position(3, 5)]
        self.assertEqual(expected, [token.position for token in tokens])

    def test_unexpected_character(self):
        should_raise = ["{", "[1]", "\"str\"", "1 \\ 2", "x\ty}"]
        for case in should_raise:
            self.assertRaises(UnexpectedCharacter, list, Lexer(case))

        lexer = Lexer("a\n {b")
        self.assertEqual("a", lexer.next_token().value)
        with self.assertRaises(UnexpectedCharacter) as context:
            lexer.next_token()
        self.assertEqual("{", context.exception.ch)
        self.assertEqual(Position(2, 2), context.exception.position)
        self.assertEqual("unexpected character at 2:2: '{'", str(context.exception))

        # lexing can be resumed after an error
        self.assertEqual(Token(TokenType.IDENTIFIER, "b", Position(2, 3)), lexer.next_token())

    def test_error_messages(self):
        cases = [
            (UnexpectedCharacter("{", Position(1, 3)), "unexpected character at 1:3: '{'"),
            (UnexpectedEndOfInput("`)`"), "unexpected end of file, expected `)`"),
            (UnknownEscape("q", Position(2, 5)), "invalid escape character at 2:5: 'q'"),
            (OtherLexerError(OverflowError("too big"), Position(1, 1)), "error at 1:1: too big"),
        ]
        for error, expected in cases:
            self.assertIsInstance(error, LexerError)
            self.assertEqual(expected, str(error))

        self.assertIsNone(UnexpectedEndOfInput("`)`").position)
        self.assertEqual(Position(2, 5), UnknownEscape("q", Position(2, 5)).position)

    def test_exhaustion(self):
        lexer = Lexer("x")
        self.assertIsNotNone(lexer.next_token())
        self.assertIsNone(lexer.next_token())
        self.assertIsNone(lexer.next_token())
        self.assertRaises(StopIteration, next, lexer)

    def test_str(self):
        cases = {"(": "(", ")": ")", "if": "if", "define": "define", "foo": "foo", "12": "12"}
        for case, expected in cases.items():
            self.assertEqual(expected, str(Lexer(case).next_token()), case)


if __name__ == '__main__':
    unittest.main()
