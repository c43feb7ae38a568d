"""Handles interactive/command-line mode for tini interpreter. Uses cmd as backend."""

import cmd

from tini.interpreter.value import Builtin


class Shell(cmd.Cmd):
    """tini interpreter shell."""
    intro = "tini interpreter :: Python backend\nType 'help' for more information."
    prompt = ">> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = ">> "      # also used for prompt swapping in line continuations
    result_prefix = " < "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self._tmp_line = ""

    def onecmd(self, line):
        """Commands are only recognized as a whole first word at the start of an expression: inside unclosed brackets,
        every line is code, and so is a line like 'help-me' or '?x' that merely begins like a command.
        """
        if self._tmp_line and line != "EOF":
            return self.default(line)

        words = line.split(maxsplit=1)
        if words and not hasattr(self, f"do_{words[0]}"):
            return self.default(line)
        return super().onecmd(line)

    def default(self, line):
        """Executes arbitrary tini code."""
        line, add_to_prev = self.sess.preprocess_line(line, self._tmp_line)

        if add_to_prev:
            self._tmp_line = line
            self.prompt = self.secondary_prompt
            return

        self._tmp_line = ""
        self.prompt = self._tmp_prompt

        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            try:
                self.sess.run(line)
            finally:
                for value in self.sess.pop():  # values computed before an error are still shown
                    self.stdout.write(f"{self.result_prefix}{value}\n")

    def do_env(self, arg):
        """Lists user bindings."""
        for name, value in self.sess.interpreter.env:
            if not isinstance(value, Builtin):
                self.stdout.write(f"{name} = {value}\n")

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        self.stdout.write(
            "Welcome to the tini interpreter!\n\n"
            "tini is a tiny language of integers and functions, written as parenthesized \n"
            "prefix expressions. Builtins are +, -, *, =, >, < and print.\n\n"
            "Try it out by typing '(define (inc x) (+ x 1))'. This will bind a function \n"
            "to the name 'inc'. Next, try typing '(inc 41)', which gives 42. Expressions \n"
            "may span several lines; 'env' lists your definitions.\n")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            self.sess.error_handler.warn("unrecognized argument to exit: '{}'", arg, diagnosis=False)
            return False
        return True
