"""Runs tini source files, or the interactive shell. Also uses error handling context manager. Called from the tini
executable script (or python -m tini).
"""

import argparse
import sys

from tini import __version__
from tini.lang.error import ErrorHandler
from tini.lang.session import Session
from tini.lang.shell import Shell

RECURSION_LIMIT = 10000  # each tini call takes about five Python frames


def main(argv=None):
    """Runs tini interpreter. With a file, the first error is fatal (exit status 1); without one, errors are reported
    and the shell keeps going.
    """
    parser = argparse.ArgumentParser(prog="tini")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--no-color", help="disable colored error messages", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))

    with ErrorHandler(no_color=True if args.no_color else None) as error_handler:
        if args.file is not None:
            Session(error_handler, args.file, cmd_line=False).run()
        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()
