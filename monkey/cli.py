import argparse
import code
import logging
import os
import sys

from termcolor import colored

from monkey.errors import ParseError
from monkey.interpreter import Interpreter
from monkey.objects import NULL, Error

try:
    import readline
except ImportError:
    readline = None

logger = logging.getLogger(__name__)

PROMPT = ">> "
INTRO = "Welcome to the Monkey programming language REPL!"
EXTENSION = ".monkey"
REPL_HISTFILE = os.path.expanduser("~/.monkey_history")
ERROR = "red"


def report_error(msg, color=True):
    prefix = colored("error: ", ERROR, attrs=["bold"]) if color else "error: "
    print(prefix + msg, file=sys.stderr)


def run_source(interpreter, src, color=True, show=None):
    """Evaluate src, print diagnostics, and return the result or None on failure.

    `show` is called with a successful result. Displaying a deeply nested
    value can overflow the stack too, so it runs under the same guard.
    """
    try:
        result = interpreter.go(src)
        if isinstance(result, Error):
            logger.debug("Evaluation error of kind %s", result.kind.name)
            report_error(result.inspect(), color)
            return None
        if show is not None:
            show(result)
    except ParseError as e:
        report_error(str(e), color)
        return None
    except RecursionError:
        report_error("maximum recursion depth exceeded", color)
        return None
    return result


def show_value(result):
    print(result.inspect())


def show_non_null(result):
    if result is not NULL:
        print(result.inspect())


def run_file(path, color=True):
    if not os.path.exists(path):
        report_error(f"File not found: {path}", color)
        return 1
    if not path.endswith(EXTENSION):
        report_error(f"File must have a `{EXTENSION}` extension", color)
        return 1

    # one character per byte, so any file decodes
    with open(path, "r", encoding="latin-1") as file:
        src = file.read()

    if run_source(Interpreter(), src, color, show=show_non_null) is None:
        return 1
    return 0


class MonkeyRepl(code.InteractiveConsole):
    def __init__(self, color=True):
        super().__init__()
        self.interpreter = Interpreter()
        self.color = color

    def enable_readline(self):
        assert readline, "Can't enable readline without readline module"
        if os.path.exists(REPL_HISTFILE):
            readline.read_history_file(REPL_HISTFILE)

    def finish_readline(self):
        assert readline, "Can't finish readline without readline module"
        readline.set_history_length(1000)
        readline.write_history_file(REPL_HISTFILE)

    def runsource(self, source, filename="<input>", symbol="single"):
        run_source(self.interpreter, source, self.color, show=show_value)
        # never ask for continuation lines
        return False


def repl(color=True):
    console = MonkeyRepl(color)
    sys.ps1 = PROMPT
    if readline:
        console.enable_readline()
    try:
        console.interact(banner=INTRO, exitmsg="")
    finally:
        if readline:
            console.finish_readline()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="monkey", description="Monkey programming language interpreter")
    parser.add_argument("file", nargs="?", help=f"path to a `*{EXTENSION}` file (if empty, starts the REPL)")
    parser.add_argument("--debug", action="store_true", help="log tokens, syntax trees and function calls")
    parser.add_argument("--no-color", dest="color", action="store_false", help="print diagnostics without color")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    if args.file is not None:
        return run_file(args.file, args.color)
    repl(args.color)
    return 0
