import contextlib
import io
import os
import tempfile
import unittest

from tini.interpreter.error import UnknownVariable
from tini.interpreter.value import Integer
from tini.lang.error import ErrorHandler, GenericException
from tini.lang.session import Session
from tini.parser import UnexpectedEndOfFile


class SessionTestCase(unittest.TestCase):

    def setUp(self):
        self.stream = io.StringIO()
        self.error_handler = ErrorHandler(no_color=True, stream=self.stream)
        self.stdout = io.StringIO()

    def write_file(self, source):
        fd, path = tempfile.mkstemp(suffix=".tini")
        with os.fdopen(fd, "w") as file:
            file.write(source)
        self.addCleanup(os.remove, path)
        return path

    def test_run_file(self):
        path = self.write_file("(define (square x) (* x x))\n(print (square 12))\n(square 3)\n")
        sess = Session(self.error_handler, path, cmd_line=False)

        with contextlib.redirect_stdout(self.stdout):
            results = sess.run()
        self.assertEqual([Integer(0), Integer(0), Integer(9)], results)
        self.assertEqual("144\n", self.stdout.getvalue())
        self.assertTrue(self.error_handler.fatal)

    def test_missing_file(self):
        with self.assertRaises(GenericException) as context:
            Session(self.error_handler, os.path.join(tempfile.gettempdir(), "does-not-exist.tini"), cmd_line=False)
        self.assertIn("could not be opened", str(context.exception))

    def test_reserved_filename(self):
        self.assertRaises(GenericException, Session, self.error_handler, Session.SH_FILE, False)

    def test_error_stops_run(self):
        path = self.write_file("(print 1)\n(print undefined)\n(print 2)\n")
        sess = Session(self.error_handler, path, cmd_line=False)

        with contextlib.redirect_stdout(self.stdout):
            self.assertRaises(UnknownVariable, sess.run)
        self.assertEqual("1\n", self.stdout.getvalue())
        self.assertEqual(["(print 1)", "(print undefined)", "(print 2)"], self.error_handler.traceback[path])

    def test_fatal_error_report(self):
        path = self.write_file("(define x\n")
        sess = Session(self.error_handler, path, cmd_line=False)

        with self.assertRaises(SystemExit):
            with self.error_handler:
                sess.run()
        self.assertEqual(f"{path}: error: found end of file, but expected value in define expression\n",
                         self.stream.getvalue())

    def test_empty_file_warns(self):
        path = self.write_file("; nothing to see here\n")
        Session(self.error_handler, path, cmd_line=False).run()
        self.assertIn("warning: ", self.stream.getvalue())
        self.assertIn("contains no expressions", self.stream.getvalue())

    def test_cmd_line(self):
        sess = Session(self.error_handler, Session.SH_FILE, cmd_line=True)
        self.assertFalse(self.error_handler.fatal)

        sess.run("(define x 2)")
        sess.run("(+ x 1) x")
        self.assertEqual([Integer(0), Integer(3), Integer(2)], sess.pop())
        self.assertEqual([], sess.pop())

        self.assertRaises(UnexpectedEndOfFile, sess.run, "(+ x")
        self.assertEqual("", self.stream.getvalue())  # no warning for empty input in command-line mode
        sess.run("")

    def test_unknown_variable_diagnosis(self):
        sess = Session(self.error_handler, Session.SH_FILE, cmd_line=True)
        cases = {
            "(foo 1)": "<in>:1:1: error: unknown variable foo at 1:1\n  (foo 1)\n  ^~~~\n",
            "(+ 1 abc)": "<in>:1:6: error: unknown variable abc at 1:6\n  (+ 1 abc)\n       ^~~\n",
        }
        for case, expected in cases.items():
            self.stream.seek(0)
            self.stream.truncate()
            with self.error_handler:
                sess.run(case)
            self.assertEqual(expected, self.stream.getvalue(), case)

    def test_preprocess_line(self):
        cases = {
            ("(define x 1)", ""): ("(define x 1)", False),
            ("(define (f x)", ""): ("(define (f x)", True),
            ("x)", "(define (f x)"): ("(define (f x)\nx)", False),
            ("(f ; (", ""): ("(f ; (", True),
            ("1) ; )", "(f"): ("(f\n1) ; )", False),
            ("", ""): ("", False),
        }
        for (line, add_to_prev), expected in cases.items():
            self.assertEqual(expected, Session.preprocess_line(line, add_to_prev), line)


if __name__ == '__main__':
    unittest.main()
