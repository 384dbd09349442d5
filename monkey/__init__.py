from monkey.environment import Environment
from monkey.evaluator import Evaluator, evaluate
from monkey.interpreter import Interpreter
from monkey.lexer import Lexer
from monkey.parser import Parser, parse
from monkey.printer import print_node
