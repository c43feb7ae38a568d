"""Tokens produced by the lexer, and the source positions attached to tokens and syntax trees."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    """A position in a source text. Both line and column start at 1."""
    line: int = 1
    column: int = 1

    def next_line(self):
        """Position of the beginning of the next line."""
        return Position(self.line + 1, 1)

    def next_column(self):
        """Position of the next column on this line."""
        return Position(self.line, self.column + 1)

    def __str__(self):
        return f"{self.line}:{self.column}"

    def __repr__(self):
        return f"Position({self})"


class TokenType(Enum):
    IDENTIFIER = "identifier"
    INTEGER = "integer"
    LEFT_BRACKET = "("
    RIGHT_BRACKET = ")"
    IF = "if"
    DEFINE = "define"


KEYWORDS = {"if": TokenType.IF, "define": TokenType.DEFINE}


@dataclass(frozen=True)
class Token:
    """A token with its position in the source. value is the name of an identifier or the value of an integer, and
    None for every other token type.
    """
    type: TokenType
    value: object = None
    position: Position = Position()

    @classmethod
    def identifier_or_keyword(cls, name, position):
        """Returns a keyword Token if name is reserved, otherwise an identifier Token."""
        if name in KEYWORDS:
            return cls(KEYWORDS[name], position=position)
        return cls(TokenType.IDENTIFIER, name, position)

    def __str__(self):
        if self.type in (TokenType.IDENTIFIER, TokenType.INTEGER):
            return str(self.value)
        return self.type.value
