from tini.lang.error import GenericException


class InterpreterError(GenericException):
    """Superclass of every error raised while evaluating an AST."""


class UnknownVariable(InterpreterError):

    def __init__(self, name, position, span=None):
        """span defaults to the length of name. A function call is positioned at its bracket, so it spans one more."""
        if span is None:
            span = len(name)
        super().__init__("unknown variable {} at {}", [name, position], position=position, span=span)
        self.name = name


class TypeMismatch(InterpreterError):

    def __init__(self, expected, found, position):
        super().__init__("type error: expected {} at {}, found {}", [expected, position, found], position=position)
        self.expected = expected
        self.found = found


class ArgumentError(InterpreterError):
    """The number of arguments given to a user-defined function does not match its number of parameters."""

    def __init__(self, expected, got, position):
        super().__init__("function at {} takes {} arguments, but got {}", [position, expected, got],
                         position=position)
        self.expected = expected
        self.got = got


class BuiltinArgumentError(InterpreterError):

    def __init__(self, name, expected, got):
        super().__init__("built-in function {} takes {} arguments, but got {}", [name, expected, got])
        self.name = name
        self.expected = expected
        self.got = got


class BuiltinTypeError(InterpreterError):

    def __init__(self, name, expected, found):
        super().__init__("built-in function {} expected argument of type {}, but got {}", [name, expected, found])
        self.name = name
        self.expected = expected
        self.found = found
