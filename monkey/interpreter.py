import logging

from monkey.environment import Environment
from monkey.evaluator import Evaluator
from monkey.lexer import Lexer
from monkey.parser import Parser

logger = logging.getLogger(__name__)


class Interpreter:
    """Runs Monkey source against one long-lived global environment.

    Bindings made by `let` survive across `go()` calls, which is what the REPL
    relies on.
    """

    def __init__(self, env=None):
        self.env = env if env is not None else Environment()
        self._evaluator = Evaluator()

    def scan(self, src):
        return Lexer(src).tokenize()

    def ast(self, src):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tokens: %s", self.scan(src))
        program = Parser(Lexer(src)).parse_program()
        logger.debug("AST: %s", program)
        return program

    def evaluate(self, node):
        return self._evaluator.evaluate(node, self.env)

    def go(self, src):
        return self.evaluate(self.ast(src))
