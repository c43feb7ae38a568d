"""Lexical analysis for tini: turns source text into a stream of Tokens.

Tokens can be loosely defined as follows:

```
<left_bracket>  ::= "("
<right_bracket> ::= ")"
<integer>       ::= <digit>+                    ; no sign, must fit in a signed 64-bit integer
<identifier>    ::= <start> (<start> | <digit>)*  ; "if" and "define" are keywords, not identifiers
<start>         ::= <alphabetic> | one of '!@#$%^&*-=+|:/?,.<>`~_

<comment>       ::= ";" <char>*                 ; up to the end of the line
```
"""

from tini.lang.error import GenericException
from tini.token import Position, Token, TokenType

IDENTIFIER_SYMBOLS = "'!@#$%^&*-=+|:/?,.<>`~_"
DIGITS = "0123456789"

INT64_MAX = 2 ** 63 - 1


class LexerError(GenericException):
    """Superclass of every error raised by the Lexer."""


class UnexpectedCharacter(LexerError):

    def __init__(self, ch, position):
        super().__init__("unexpected character at {}: '{}'", [position, ch], position=position)
        self.ch = ch


class UnexpectedEndOfInput(LexerError):
    """The input ended inside a token. Unreachable while every token is complete after its first char."""

    def __init__(self, expected):
        super().__init__("unexpected end of file, expected {}", expected)
        self.expected = expected


class UnknownEscape(LexerError):
    """Invalid escape character. Reserved for string literals, which tini does not have yet."""

    def __init__(self, ch, position):
        super().__init__("invalid escape character at {}: '{}'", [position, ch], position=position)
        self.ch = ch


class OtherLexerError(LexerError):
    """Wraps an error that is not specific to the lexer."""

    def __init__(self, error, position, span=1):
        super().__init__("error at {}: {}", [position, error], position=position, span=span)
        self.error = error


class Lexer:
    """Turns a stream of characters into Tokens. Iterating over a Lexer yields Tokens until the input is exhausted;
    a LexerError is raised for an invalid token, after which iteration may be resumed.
    """

    def __init__(self, text):
        self.text = text
        self.index = 0
        self.position = Position(1, 1)

    @staticmethod
    def is_identifier_begin(ch):
        return ch.isalpha() or ch in IDENTIFIER_SYMBOLS

    @staticmethod
    def is_identifier(ch):
        return ch.isalpha() or ch in DIGITS or ch in IDENTIFIER_SYMBOLS

    def peek_char(self):
        """Returns the next char without consuming it, or None at the end of the input."""
        if self.index < len(self.text):
            return self.text[self.index]
        return None

    def read_char(self):
        """Consumes and returns the next char (None at the end of the input), advancing self.position."""
        ch = self.peek_char()
        if ch is None:
            return None

        self.index += 1
        if ch == "\n":
            self.position = self.position.next_line()
        else:
            self.position = self.position.next_column()
        return ch

    def skip_whitespace(self):
        """Skips whitespace and comments until a token (or the end of the input) is next."""
        ch = self.peek_char()
        while ch is not None and (ch.isspace() or ch == ";"):
            if ch == ";":
                self.read_comment()
            else:
                self.read_char()
            ch = self.peek_char()

    def read_comment(self):
        """Discards a comment, up to (but not including) the next newline."""
        while self.peek_char() not in (None, "\n"):
            self.read_char()

    def read_while(self, predicate):
        chars = []
        while self.peek_char() is not None and predicate(self.peek_char()):
            chars.append(self.read_char())
        return "".join(chars)

    def read_identifier(self, position):
        """Reads an identifier or keyword. Must only be called when the next char begins an identifier."""
        return Token.identifier_or_keyword(self.read_while(Lexer.is_identifier), position)

    def read_integer(self, position):
        """Reads an integer. Must only be called when the next char is a digit. Literals that don't fit in a signed
        64-bit integer are rejected.
        """
        digits = self.read_while(lambda ch: ch in DIGITS)

        value = int(digits)
        if value > INT64_MAX:
            error = OverflowError(f"integer literal {digits} does not fit in 64 bits")
            raise OtherLexerError(error, position, span=len(digits))

        return Token(TokenType.INTEGER, value, position)

    def next_token(self):
        """Returns the next Token in the input, or None if the input is exhausted."""
        self.skip_whitespace()

        position = self.position
        ch = self.peek_char()

        if ch is None:
            return None
        elif ch == "(":
            self.read_char()
            return Token(TokenType.LEFT_BRACKET, position=position)
        elif ch == ")":
            self.read_char()
            return Token(TokenType.RIGHT_BRACKET, position=position)
        elif Lexer.is_identifier_begin(ch):
            return self.read_identifier(position)
        elif ch in DIGITS:
            return self.read_integer(position)

        self.read_char()  # skip the offending char so that lexing can be resumed
        raise UnexpectedCharacter(ch, position)

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token
