"""Runtime values produced by the evaluator.

The set of values is closed: Integer, Boolean, String, Null, Array, Hash,
Function, Builtin, ReturnValue and Error. Every value knows how to
`inspect()` itself for display.

ReturnValue and Error double as control-flow signals. They travel through
the same return channel as ordinary values and each construct that composes
sub-evaluations checks for them.
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from monkey import ast
from monkey.numbers import int_to_digits
from monkey.printer import print_node


class Object:
    def inspect(self):
        raise NotImplementedError

    def __str__(self):
        return self.inspect()


@dataclass(frozen=True)
class Integer(Object):
    value: int

    def inspect(self):
        return int_to_digits(self.value)


@dataclass(frozen=True)
class Boolean(Object):
    value: bool

    def inspect(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class String(Object):
    value: str

    def inspect(self):
        return f'"{self.value}"'


@dataclass(frozen=True)
class Null(Object):
    def inspect(self):
        return "null"


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()

# only these can be used as hash keys; frozen dataclasses hash and compare by
# type and value, so Integer(1) and Boolean(True) stay distinct keys
HASHABLE = (Integer, Boolean, String)


def native_bool(value):
    return TRUE if value else FALSE


@dataclass(frozen=True)
class Array(Object):
    elements: Tuple[Object, ...] = ()

    def inspect(self):
        return "[" + ", ".join(e.inspect() for e in self.elements) + "]"


@dataclass(frozen=True)
class Hash(Object):
    # insertion order only matters for display
    pairs: Dict[Object, Object] = field(default_factory=dict)

    def inspect(self):
        return "{" + ", ".join(f"{k.inspect()}: {v.inspect()}" for k, v in self.pairs.items()) + "}"


@dataclass(frozen=True, eq=False)
class Function(Object):
    parameters: List[ast.Identifier]
    body: ast.BlockStatement
    # the environment the literal was evaluated in, shared not copied
    env: Any = field(repr=False)

    def inspect(self):
        params = ", ".join(p.value for p in self.parameters)
        body = print_node(self.body)
        return f"fn({params}) {{ {body} }}" if body else f"fn({params}) {{ }}"


@dataclass(frozen=True, eq=False)
class Builtin(Object):
    name: str
    fn: Callable[[List[Object]], Object] = field(repr=False)

    def inspect(self):
        return "builtin function"


@dataclass(frozen=True)
class ReturnValue(Object):
    value: Object

    def inspect(self):
        return self.value.inspect()


class ErrorKind(enum.Enum):
    TYPE_MISMATCH = "Type mismatch"
    UNKNOWN_OPERATOR = "Unknown operator"
    IDENTIFIER_NOT_FOUND = "Identifier not found"
    NOT_A_FUNCTION = "Not a function"
    ARGUMENT_WRONG_NUMBER = "Wrong number of arguments"
    ARGUMENT_NOT_SUPPORTED = "Argument not supported"
    INDEX_OPERATOR_NOT_SUPPORTED = "Index operator not supported"
    INVALID_HASH_KEY = "Invalid hash key"
    DIVISION_BY_ZERO = "Division by zero"


@dataclass(frozen=True)
class Error(Object):
    kind: ErrorKind
    message: str

    def inspect(self):
        return self.message

    @classmethod
    def type_mismatch(cls, left, operator, right):
        return cls(ErrorKind.TYPE_MISMATCH, f"Type mismatch: {left.inspect()} {operator} {right.inspect()}")

    @classmethod
    def unknown_operator(cls, operator, right, left=None):
        if left is None:
            expression = f"{operator}{right.inspect()}"
        else:
            expression = f"{left.inspect()} {operator} {right.inspect()}"
        return cls(ErrorKind.UNKNOWN_OPERATOR, f"Unknown operator: {expression}")

    @classmethod
    def identifier_not_found(cls, name):
        return cls(ErrorKind.IDENTIFIER_NOT_FOUND, f"Identifier not found: {name}")

    @classmethod
    def not_a_function(cls, obj):
        return cls(ErrorKind.NOT_A_FUNCTION, f"Not a function: {obj.inspect()}")

    @classmethod
    def argument_wrong_number(cls, expected, got):
        return cls(ErrorKind.ARGUMENT_WRONG_NUMBER, f"Wrong number of arguments: expected {expected}, got {got}")

    @classmethod
    def argument_not_supported(cls, builtin, arg):
        return cls(ErrorKind.ARGUMENT_NOT_SUPPORTED, f"Argument to '{builtin}' not supported, got {arg.inspect()}")

    @classmethod
    def index_operator_not_supported(cls, left):
        return cls(ErrorKind.INDEX_OPERATOR_NOT_SUPPORTED, f"Index operator not supported: {left.inspect()}")

    @classmethod
    def invalid_hash_key(cls, key):
        return cls(ErrorKind.INVALID_HASH_KEY,
                   f"Hash key must be string, integer, or boolean, got: {key.inspect()}")

    @classmethod
    def division_by_zero(cls, left, right):
        return cls(ErrorKind.DIVISION_BY_ZERO, f"Division by zero: {left.inspect()} / {right.inspect()}")
