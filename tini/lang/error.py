"""Error handling for tini. Every error raised by the lexer, parser or interpreter is a GenericException; if another
type of error makes it all the way to ErrorHandler, it is assumed to be an internal issue (or the native stack ran
out, see RecursionError below).
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a tini error/warning. The message template is
    formatted with exprs: plainly for str(), and with exprs bolded for terminal output.
    """

    def __init__(self, msg, exprs=None, position=None, span=1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning. position is the tini Position of the offending source, if
        known, and span is the number of columns to highlight from there.
        """
        if exprs is None:
            exprs = []
        if not isinstance(exprs, (list, tuple)):
            exprs = [exprs]

        self.template = msg
        self.exprs = [str(expr) for expr in exprs]
        self.msg = msg.format(*self.exprs)

        self.position = position
        self.span = max(span, 1)
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)

    def colored_msg(self, no_color=None):
        """Returns self.msg with expr snippets bolded."""
        return self.template.format(*(colored(expr, attrs=["bold"], no_color=no_color) for expr in self.exprs))

    def __str__(self):
        return self.msg


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report tini errors/warnings on stderr."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, no_color=None, stream=None):
        self.fatal = fatal
        self.no_color = no_color
        self.stream = stream
        self.traceback = {}  # path: source lines currently being run from path (None if nothing is running)

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = None

    def register_source(self, path, source):
        """Registers source text in traceback given path. Should be called prior to Session run."""
        self.traceback[path] = source.splitlines()

    def remove_source(self, path):
        """Removes source text from traceback given path. Should be called after successful Session run."""
        self.traceback[path] = None

    def _print(self, msg):
        print(msg, file=self.stream if self.stream is not None else sys.stderr)

    def _color(self, text, color=None, bold=True):
        return colored(text, color, attrs=["bold"] if bold else None, no_color=self.no_color)

    def _locate(self, error):
        """Returns (path, line) where error originated, or (path, None) if the line is unknown."""
        if not self.traceback:
            return None, None

        path, lines = list(self.traceback.items())[-1]  # assumes dict is insertion-ordered
        if error.position is None or not lines or error.position.line > len(lines):
            return path, None
        return path, lines[error.position.line - 1]

    def diagnose(self, line, error, warning=False):
        """Returns offending part of line highlighted and bolded, with a caret underneath."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        start = error.position.column - 1
        end = start + error.span

        diagnosis = "  " + line[:start]
        diagnosis += self._color(line[start:end], color)
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += self._color("^" + "~" * (error.span - 1), color)

        return diagnosis

    def _report(self, error, label, color):
        path, line = self._locate(error)

        error_msg = ""
        if path is not None:
            location = path if error.position is None else f"{path}:{error.position}"
            error_msg += self._color(f"{location}: ")

        if error.internal:
            error_msg += self._color("[internal] ", ErrorHandler.ERROR)

        error_msg += self._color(f"{label}: ", color) + error.colored_msg(self.no_color)
        self._print(error_msg)

        if not error.internal and error.diagnosis and line is not None:
            self._print(self.diagnose(line, error, warning=color == ErrorHandler.WARNING))

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args."""
        self._report(GenericException(*args, **kwargs), "warning", ErrorHandler.WARNING)

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException."""
        self._report(error, "error", ErrorHandler.ERROR)

        if self.fatal:
            sys.exit(1)
        for path in self.traceback:  # if error occurred, reset traceback (no need if error is fatal)
            self.traceback[path] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum recursion depth exceeded", diagnosis=False))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
