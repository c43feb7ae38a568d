"""Tree-walking interpreter for tini.

Scoping is dynamic. There is a single Environment: calling a user-defined function binds its parameters in that
Environment, evaluates the body, then restores whatever the parameter names were bound to before the call. A
function body therefore sees the caller's bindings for every name that isn't one of its parameters.

Recursion uses the Python stack, so unbounded recursion ends in a RecursionError, which is not caught here.
"""

from tini.interpreter.builtins import add_builtins_to_environment
from tini.interpreter.environment import Environment
from tini.interpreter.error import (ArgumentError, BuiltinArgumentError, BuiltinTypeError, InterpreterError,
                                    TypeMismatch, UnknownVariable)
from tini.interpreter.value import Builtin, Function, Integer, Value
from tini import syntax


class Interpreter:
    """Evaluates expressions (ASTs) one at a time against its Environment."""

    def __init__(self):
        self.env = Environment()
        add_builtins_to_environment(self.env)

    def evaluate(self, ast):
        """Evaluates ast and returns the resulting Value. Raises an InterpreterError on failure."""
        expr = ast.expression

        if isinstance(expr, syntax.Integer):
            return Integer(expr.value)

        elif isinstance(expr, syntax.Define):
            if expr.parameters is None:
                self.env.set(expr.name, self.evaluate(expr.value))
            else:
                self.env.set(expr.name, Function(tuple(expr.parameters), expr.value))
            return Integer(0)

        elif isinstance(expr, syntax.If):
            if self.evaluate(expr.condition) == Integer(0):  # 0 is the only falsy value
                return self.evaluate(expr.alternative)
            return self.evaluate(expr.consequence)

        elif isinstance(expr, syntax.Identifier):
            return self.lookup(expr.name, ast.position)

        elif isinstance(expr, syntax.FunctionCall):
            function = self.lookup(expr.name, ast.position, span=len(expr.name) + 1)  # bracket and name

            if isinstance(function, Builtin):
                return self.evaluate_builtin(function, expr.arguments)
            elif isinstance(function, Function):
                return self.evaluate_function(function, expr.arguments, ast.position)
            raise TypeMismatch("function in function call", function.type_name, ast.position)

        raise TypeError(f"cannot evaluate {type(expr).__name__}")

    def lookup(self, name, position, span=None):
        value = self.env.get(name)
        if value is None:
            raise UnknownVariable(name, position, span)
        return value

    def evaluate_builtin(self, builtin, arguments):
        """Evaluates arguments from left to right and calls builtin on them."""
        return builtin([self.evaluate(argument) for argument in arguments])

    def evaluate_function(self, function, arguments, position):
        """Binds each parameter to its evaluated argument, in order, then evaluates the body. Arguments are evaluated
        with the earlier parameters already bound.
        """
        if len(function.parameters) != len(arguments):
            raise ArgumentError(len(function.parameters), len(arguments), position)

        with self.env.shadow(function.parameters):
            for name, argument in zip(function.parameters, arguments):
                self.env.set(name, self.evaluate(argument))
            return self.evaluate(function.body)


__all__ = ["Interpreter", "Environment", "Value", "Integer", "Function", "Builtin", "InterpreterError",
           "UnknownVariable", "TypeMismatch", "ArgumentError", "BuiltinArgumentError", "BuiltinTypeError"]
