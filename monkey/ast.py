"""Syntax tree produced by the parser and walked by the evaluator and printer.

Nodes hold no token positions; each one carries everything needed to print
it back to source or to evaluate it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class Node:
    pass


class Statement(Node):
    pass


class Expression(Node):
    pass


@dataclass
class Program(Node):
    statements: List[Statement] = field(default_factory=list)


# Statements

@dataclass
class LetStatement(Statement):
    name: "Identifier"
    value: Expression


@dataclass
class ReturnStatement(Statement):
    return_value: Expression


@dataclass
class ExpressionStatement(Statement):
    expression: Expression


@dataclass
class BlockStatement(Statement):
    statements: List[Statement] = field(default_factory=list)


# Expressions

@dataclass
class Identifier(Expression):
    value: str


@dataclass
class IntegerLiteral(Expression):
    value: int


@dataclass
class StringLiteral(Expression):
    value: str


@dataclass
class BooleanLiteral(Expression):
    value: bool


@dataclass
class ArrayLiteral(Expression):
    elements: List[Expression] = field(default_factory=list)


@dataclass
class HashLiteral(Expression):
    # keys may be any expression here; the evaluator rejects unhashable ones
    pairs: List[Tuple[Expression, Expression]] = field(default_factory=list)


@dataclass
class FunctionLiteral(Expression):
    parameters: List[Identifier]
    body: BlockStatement


@dataclass
class PrefixExpression(Expression):
    operator: str
    right: Expression


@dataclass
class InfixExpression(Expression):
    left: Expression
    operator: str
    right: Expression


@dataclass
class IndexExpression(Expression):
    left: Expression
    index: Expression


@dataclass
class CallExpression(Expression):
    function: Expression
    arguments: List[Expression] = field(default_factory=list)


@dataclass
class IfExpression(Expression):
    condition: Expression
    consequence: BlockStatement
    alternative: Optional[BlockStatement] = None
