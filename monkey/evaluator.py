import logging

from monkey import ast
from monkey.builtins import BUILTINS
from monkey.environment import Environment
from monkey.objects import (
    FALSE, HASHABLE, NULL, TRUE,
    Array, Boolean, Builtin, Error, Function, Hash, Integer, ReturnValue, String,
    native_bool,
)

logger = logging.getLogger(__name__)


def is_error(obj): return isinstance(obj, Error)
def is_truthy(obj): return obj is not NULL and obj is not FALSE


class Evaluator:
    """Tree-walking evaluator.

    Errors and `return` travel as Error and ReturnValue values, not as
    exceptions: every construct that evaluates sub-nodes checks the result and
    hands an Error back up unchanged.
    """

    def evaluate(self, node, env):
        match node:
            case ast.Program(statements):
                return self._evaluate_program(statements, env)
            case ast.BlockStatement(statements):
                return self._evaluate_block(statements, env)
            case ast.ExpressionStatement(expression):
                return self.evaluate(expression, env)
            case ast.LetStatement(name, value_expr):
                value = self.evaluate(value_expr, env)
                if is_error(value):
                    return value
                env.set(name.value, value)
                return NULL
            case ast.ReturnStatement(return_value):
                value = self.evaluate(return_value, env)
                if is_error(value):
                    return value
                return ReturnValue(value)

            case ast.Identifier(name):
                return self._evaluate_identifier(name, env)
            case ast.IntegerLiteral(value):
                return Integer(value)
            case ast.StringLiteral(value):
                return String(value)
            case ast.BooleanLiteral(value):
                return native_bool(value)
            case ast.ArrayLiteral(elements):
                values = self._evaluate_expressions(elements, env)
                if is_error(values):
                    return values
                return Array(tuple(values))
            case ast.HashLiteral(pairs):
                return self._evaluate_hash(pairs, env)
            case ast.FunctionLiteral(parameters, body):
                return Function(parameters, body, env)
            case ast.PrefixExpression(operator, right_expr):
                right = self.evaluate(right_expr, env)
                if is_error(right):
                    return right
                return self._evaluate_prefix(operator, right)
            case ast.InfixExpression(left_expr, operator, right_expr):
                left = self.evaluate(left_expr, env)
                if is_error(left):
                    return left
                right = self.evaluate(right_expr, env)
                if is_error(right):
                    return right
                return self._evaluate_infix(operator, left, right)
            case ast.IfExpression(condition, consequence, alternative):
                return self._evaluate_if(condition, consequence, alternative, env)
            case ast.CallExpression(function_expr, arg_exprs):
                function = self.evaluate(function_expr, env)
                if is_error(function):
                    return function
                args = self._evaluate_expressions(arg_exprs, env)
                if is_error(args):
                    return args
                return self._apply_function(function, args)
            case ast.IndexExpression(left_expr, index_expr):
                left = self.evaluate(left_expr, env)
                if is_error(left):
                    return left
                index = self.evaluate(index_expr, env)
                if is_error(index):
                    return index
                return self._evaluate_index(left, index)
            case _:
                return NULL

    def _evaluate_program(self, statements, env):
        result = NULL
        for statement in statements:
            result = self.evaluate(statement, env)
            match result:
                case ReturnValue(value):
                    return value
                case Error():
                    return result
        return result

    def _evaluate_block(self, statements, env):
        result = NULL
        for statement in statements:
            result = self.evaluate(statement, env)
            # a ReturnValue is passed up whole so enclosing blocks stop too
            if isinstance(result, (ReturnValue, Error)):
                return result
        return result

    def _evaluate_expressions(self, exprs, env):
        """Evaluate left to right; returns the first Error instead of a list."""
        values = []
        for expr in exprs:
            value = self.evaluate(expr, env)
            if is_error(value):
                return value
            values.append(value)
        return values

    def _evaluate_identifier(self, name, env):
        value = env.get(name)
        if value is not None:
            return value
        if name in BUILTINS:
            return BUILTINS[name]
        return Error.identifier_not_found(name)

    def _evaluate_hash(self, pair_exprs, env):
        pairs = {}
        for key_expr, value_expr in pair_exprs:
            key = self.evaluate(key_expr, env)
            if is_error(key):
                return key
            if not isinstance(key, HASHABLE):
                return Error.invalid_hash_key(key)
            value = self.evaluate(value_expr, env)
            if is_error(value):
                return value
            pairs[key] = value
        return Hash(pairs)

    def _evaluate_prefix(self, operator, right):
        match operator, right:
            case "!", _:
                return self._evaluate_bang(right)
            case "-", Integer(value):
                return Integer(-value)
            case _:
                return Error.unknown_operator(operator, right)

    def _evaluate_bang(self, right):
        if right is TRUE:
            return FALSE
        elif right is FALSE or right is NULL:
            return TRUE
        else:
            return FALSE

    def _evaluate_infix(self, operator, left, right):
        match left, right:
            case Integer(), Integer():
                return self._evaluate_integer_infix(operator, left, right)
            case Boolean(), Boolean():
                return self._evaluate_boolean_infix(operator, left, right)
            case String(), String():
                return self._evaluate_string_infix(operator, left, right)
            case _ if type(left) is not type(right):
                return Error.type_mismatch(left, operator, right)
            case _:
                return Error.unknown_operator(operator, right, left=left)

    def _evaluate_integer_infix(self, operator, left, right):
        a, b = left.value, right.value
        match operator:
            case "+": return Integer(a + b)
            case "-": return Integer(a - b)
            case "*": return Integer(a * b)
            case "/":
                if b == 0:
                    return Error.division_by_zero(left, right)
                return Integer(truncate_divide(a, b))
            case "<": return native_bool(a < b)
            case ">": return native_bool(a > b)
            case "==": return native_bool(a == b)
            case "!=": return native_bool(a != b)
            case _:
                return Error.unknown_operator(operator, right, left=left)

    def _evaluate_boolean_infix(self, operator, left, right):
        match operator:
            case "==": return native_bool(left is right)
            case "!=": return native_bool(left is not right)
            case _:
                return Error.unknown_operator(operator, right, left=left)

    def _evaluate_string_infix(self, operator, left, right):
        if operator == "+":
            return String(left.value + right.value)
        return Error.unknown_operator(operator, right, left=left)

    def _evaluate_if(self, condition_expr, consequence, alternative, env):
        condition = self.evaluate(condition_expr, env)
        if is_error(condition):
            return condition
        if is_truthy(condition):
            return self.evaluate(consequence, env)
        elif alternative is not None:
            return self.evaluate(alternative, env)
        else:
            return NULL

    def _apply_function(self, function, args):
        match function:
            case Function(parameters, body, closure_env):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Calling %s with %s", function.inspect(), [a.inspect() for a in args])
                call_env = Environment(closure_env)
                # extra arguments are ignored, missing parameters stay unbound
                for param, arg in zip(parameters, args):
                    call_env.set(param.value, arg)
                result = self.evaluate(body, call_env)
                return result.value if isinstance(result, ReturnValue) else result
            case Builtin(name, fn):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Calling builtin %s with %s", name, [a.inspect() for a in args])
                return fn(args)
            case _:
                return Error.not_a_function(function)

    def _evaluate_index(self, left, index):
        match left, index:
            case Array(elements), Integer(i):
                if 0 <= i < len(elements):
                    return elements[i]
                return NULL
            case Hash(pairs), _:
                if not isinstance(index, HASHABLE):
                    return Error.invalid_hash_key(index)
                return pairs.get(index, NULL)
            case _:
                return Error.index_operator_not_supported(left)


def truncate_divide(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate(node, env=None):
    return Evaluator().evaluate(node, env if env is not None else Environment())
