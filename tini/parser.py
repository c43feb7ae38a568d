"""Recursive descent parser for tini: turns a stream of Tokens into ASTs, one top-level expression at a time.

Formally, tini grammar can be defined as

```
<expression> ::= <integer>
               | <identifier>
               | "(" <form>
<form>       ::= "if" <expression> <expression> <expression> ")"                       ; condition, consequence,
                                                                                         ; alternative
               | "define" (<identifier> | "(" <identifier> <identifier>* ")") <expression> ")"
               | <identifier> <expression>* ")"                                          ; function call
```

Note that bare integers and identifiers are complete expressions and are not followed by a closing bracket.
"""

from tini.lang.error import GenericException
from tini.lexer import LexerError
from tini.syntax import AST, Define, FunctionCall, Identifier, If, Integer
from tini.token import TokenType


class ParseError(GenericException):
    """Superclass of every error raised by the Parser."""


class UnexpectedToken(ParseError):

    def __init__(self, token):
        super().__init__("unexpected token at {}: {}", [token.position, token], position=token.position,
                         span=len(str(token)))
        self.token = token


class UnexpectedExpression(ParseError):

    def __init__(self, ast):
        source = ast.source()
        super().__init__("unexpected expression at {}: {}", [ast.position, source], position=ast.position,
                         span=len(source))
        self.ast = ast


class UnexpectedEndOfFile(ParseError):

    def __init__(self, expected):
        super().__init__("found end of file, but expected {}", expected)
        self.expected = expected


class LexerFailure(ParseError):
    """Wraps a LexerError raised while parsing."""

    def __init__(self, error):
        super().__init__("{}", error, position=error.position, span=error.span)
        self.error = error

    def colored_msg(self, no_color=None):
        return self.error.colored_msg(no_color)


class OtherParseError(ParseError):
    """Wraps an error that is not specific to the parser."""

    def __init__(self, error, position):
        super().__init__("error at {}: {}", [position, error], position=position)
        self.error = error


class Parser:
    """Turns the Tokens supplied by a Lexer into ASTs. Iterating over a Parser yields one AST per top-level expression
    until the input is exhausted; a ParseError is raised for invalid input. Nothing is rolled back after an error:
    the Lexer is left wherever parsing stopped.
    """

    def __init__(self, lexer):
        self.lexer = lexer
        self._peeked = None  # Token read ahead from self.lexer, if any

    def next_token(self):
        """Consumes and returns the next Token, or None at the end of the input."""
        if self._peeked is not None:
            token, self._peeked = self._peeked, None
            return token

        try:
            return self.lexer.next_token()
        except LexerError as error:
            raise LexerFailure(error) from error

    def peek_token(self):
        """Returns the next Token without consuming it, or None at the end of the input."""
        if self._peeked is None:
            self._peeked = self.next_token()
        return self._peeked

    def parse_expression(self):
        """Parses the next expression and returns its AST, or None if the input is exhausted."""
        token = self.next_token()
        if token is None:
            return None

        if token.type is TokenType.INTEGER:
            return AST(Integer(token.value), token.position)
        elif token.type is TokenType.IDENTIFIER:
            return AST(Identifier(token.value), token.position)
        elif token.type is TokenType.LEFT_BRACKET:
            return self.parse_form(token.position)

        raise UnexpectedToken(token)

    def expect_expression(self, expected):
        """Parses the next expression, which must exist. expected names it in the error otherwise."""
        ast = self.parse_expression()
        if ast is None:
            raise UnexpectedEndOfFile(expected)
        return ast

    def expect_right_bracket(self):
        token = self.next_token()
        if token is None:
            raise UnexpectedEndOfFile("`)`")
        elif token.type is not TokenType.RIGHT_BRACKET:
            raise UnexpectedToken(token)

    def parse_form(self, position):
        """Parses whatever follows a left bracket at position. Nesting too deep for the Python stack is reported as an
        OtherParseError at the bracket where it ran out.
        """
        token = self.peek_token()
        if token is None:
            raise UnexpectedEndOfFile("`if`, `define`, a value, or an identifier")

        try:
            if token.type is TokenType.IDENTIFIER:
                return self.parse_function_call(position)
            elif token.type is TokenType.IF:
                return self.parse_if(position)
            elif token.type is TokenType.DEFINE:
                return self.parse_define(position)
        except RecursionError as error:
            raise OtherParseError(error, position) from error

        raise UnexpectedToken(self.next_token())

    def parse_function_call(self, position):
        name = self.next_token().value

        arguments = []
        while True:
            token = self.peek_token()
            if token is None:
                raise UnexpectedEndOfFile("function parameter or `)`")
            elif token.type is TokenType.RIGHT_BRACKET:
                break
            arguments.append(self.parse_expression())

        self.next_token()  # right bracket
        return AST(FunctionCall(name, tuple(arguments)), position)

    def parse_if(self, position):
        self.next_token()  # if

        condition = self.expect_expression("condition in if expression")
        consequence = self.expect_expression("consequence in if expression")
        alternative = self.expect_expression("alternative in if expression")
        self.expect_right_bracket()

        return AST(If(condition, consequence, alternative), position)

    def parse_define(self, position):
        """Parses either form of define. The name slot is parsed as an expression: an Identifier is a variable
        definition, and a FunctionCall whose arguments are all Identifiers is a function definition.
        """
        self.next_token()  # define

        target = self.expect_expression("name in define expression")
        if isinstance(target.expression, Identifier):
            name, parameters = target.expression.name, None
        elif isinstance(target.expression, FunctionCall):
            name, parameters = target.expression.name, []
            for parameter in target.expression.arguments:
                if not isinstance(parameter.expression, Identifier):
                    raise UnexpectedExpression(parameter)
                parameters.append(parameter.expression.name)
            parameters = tuple(parameters)
        else:
            raise UnexpectedExpression(target)

        value = self.expect_expression("value in define expression")
        self.expect_right_bracket()

        return AST(Define(name, parameters, value), position)

    def __iter__(self):
        return self

    def __next__(self):
        ast = self.parse_expression()
        if ast is None:
            raise StopIteration
        return ast
