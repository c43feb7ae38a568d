"""tini: a tiny interpreter for a parenthesized language with integers, definitions, conditionals and function calls.

Basic program flow:
    1. Lexer: turns source text into Tokens (see tini/lexer.py)
    2. Parser: turns Tokens into one AST per top-level expression by recursive descent (see tini/parser.py)
    3. Interpreter: walks each AST as soon as it is parsed, against a single mutable Environment
       (see tini/interpreter)

The command-line mode (tini/lang/shell.py) and file interpretation mode (tini/lang/session.py) are thin wrappers
around these three.
"""

from tini.token import Position, Token, TokenType
from tini.syntax import AST
from tini.lexer import Lexer, LexerError
from tini.parser import Parser, ParseError
from tini.interpreter import Environment, Interpreter, InterpreterError
from tini.interpreter.value import Builtin, Function, Integer, Value

__version__ = "0.1.0"

__all__ = ["Position", "Token", "TokenType", "AST", "Lexer", "LexerError", "Parser", "ParseError", "Environment",
           "Interpreter", "InterpreterError", "Value", "Integer", "Function", "Builtin"]
