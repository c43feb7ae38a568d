"""Session control for tini. Runs source text through the lexer, parser and interpreter, either in command-line mode
or file interpretation mode.
"""

from tini.interpreter import Interpreter
from tini.lang.error import GenericException
from tini.lexer import Lexer
from tini.parser import Parser


class Session:
    """Governs a tini session: one Interpreter, and therefore one Environment, shared by everything that is run."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.interpreter = Interpreter()
        self.source = ""
        self.results = []  # Values of the expressions run so far that haven't been popped

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    self.source = file.read()
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, add_to_prev=""):
        """Preprocesses a line from the command-line. add_to_prev is the text of previous, unfinished lines. Returns
        the text so far and whether or not it still has unclosed brackets (and so needs a line continuation).
        """
        if add_to_prev:
            line = add_to_prev + "\n" + line

        code = "\n".join(part.split(";")[0] for part in line.split("\n"))  # get rid of comments
        return line, code.count("(") > code.count(")")

    def run(self, source=None):
        """Runs source (by default, the contents of this session's file), one top-level expression at a time: each
        expression is parsed and then evaluated before the next one is parsed. Values are appended to self.results.
        Will raise any errors that are encountered, leaving the expressions after the error unparsed.
        """
        if source is None:
            source = self.source

        self.error_handler.register_source(self.path, source)  # in case error is raised

        ran = 0
        for ast in Parser(Lexer(source)):
            self.results.append(self.interpreter.evaluate(ast))
            ran += 1

        if not ran and not self.cmd_line:
            self.error_handler.warn("'{}' contains no expressions", self.path, diagnosis=False)

        self.error_handler.remove_source(self.path)  # error was not raised
        return self.results

    def pop(self):
        """Returns the values of the expressions run since the last pop, and forgets them."""
        results, self.results = self.results, []
        return results
