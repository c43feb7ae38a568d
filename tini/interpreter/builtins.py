"""Built-in functions of tini. Each one takes a list of already evaluated Values and returns a Value.

Arithmetic (+, -, *) only accepts integers and wraps around on 64-bit overflow. Comparisons (=, >, <) never fail on
types: comparing anything but two integers is simply false.
"""

import operator

from tini.interpreter.error import BuiltinArgumentError, BuiltinTypeError
from tini.interpreter.value import FALSE, TRUE, Builtin, Integer, wrap_int64


def check_arity(name, arguments, expected=2):
    if len(arguments) != expected:
        raise BuiltinArgumentError(name, str(expected), len(arguments))


def arithmetic(name, op):
    """Returns a builtin procedure applying op to two integers."""

    def procedure(arguments):
        check_arity(name, arguments)

        for argument in arguments:
            if not isinstance(argument, Integer):
                raise BuiltinTypeError(name, "int", argument.type_name)

        left, right = arguments
        return Integer(wrap_int64(op(left.value, right.value)))

    return procedure


def comparison(name, op):
    """Returns a builtin procedure comparing two integers with op. Non-integers always compare false."""

    def procedure(arguments):
        check_arity(name, arguments)

        left, right = arguments
        if isinstance(left, Integer) and isinstance(right, Integer) and op(left.value, right.value):
            return TRUE
        return FALSE

    return procedure


def builtin_print(arguments):
    """Prints arguments separated by spaces, followed by a newline."""
    print(" ".join(str(argument) for argument in arguments))
    return Integer(0)


BUILTINS = {
    "+": arithmetic("+", operator.add),
    "-": arithmetic("-", operator.sub),
    "*": arithmetic("*", operator.mul),
    "=": comparison("=", operator.eq),
    ">": comparison(">", operator.gt),
    "<": comparison("<", operator.lt),
    "print": builtin_print,
}


def add_builtins_to_environment(env):
    """Binds every built-in function in env."""
    for name, procedure in BUILTINS.items():
        env.set(name, Builtin(name, procedure))
