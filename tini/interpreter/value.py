"""Runtime values of tini. Only integers and functions are first-class.

Values are shared, never copied: the same Value object may be bound under several names and passed around as an
argument any number of times.
"""

from dataclasses import dataclass

from tini.syntax import AST


def wrap_int64(number):
    """Wraps number to a signed 64-bit integer (two's complement)."""
    return (number + 2 ** 63) % 2 ** 64 - 2 ** 63


class Value:
    """Superclass of every runtime value."""
    type_name = "value"


@dataclass(frozen=True)
class Integer(Value):
    value: int
    type_name = "int"

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True, eq=False)
class Function(Value):
    """A user-defined function. body is the raw, unevaluated AST: no environment is captured at definition."""
    parameters: tuple
    body: AST
    type_name = "function"

    def __str__(self):
        return "<function>"


@dataclass(frozen=True, eq=False)
class Builtin(Value):
    """A built-in function. procedure takes a list of evaluated Values and returns a Value."""
    name: str
    procedure: object
    type_name = "function"

    def __call__(self, arguments):
        return self.procedure(arguments)

    def __str__(self):
        return "<function>"


FALSE = Integer(0)
TRUE = Integer(1)
