from monkey import ast
from monkey.numbers import int_to_digits


def print_node(node):
    """Serialize a syntax tree node back to Monkey source.

    Operator expressions come out fully parenthesized, so two different
    parses never print the same, and the output parses back to an equal tree.
    """
    match node:
        case ast.Program(statements) | ast.BlockStatement(statements):
            return "\n".join(print_node(statement) for statement in statements)
        case ast.LetStatement(name, value):
            return f"let {name.value} = {print_node(value)};"
        case ast.ReturnStatement(return_value):
            return f"return {print_node(return_value)};"
        case ast.ExpressionStatement(expression):
            return f"{print_node(expression)};"

        case ast.Identifier(value):
            return value
        case ast.IntegerLiteral(value):
            return int_to_digits(value)
        case ast.StringLiteral(value):
            return f'"{value}"'
        case ast.BooleanLiteral(value):
            return "true" if value else "false"
        case ast.ArrayLiteral(elements):
            return f"[{_join(elements)}]"
        case ast.HashLiteral(pairs):
            return "{" + ", ".join(f"{print_node(k)}: {print_node(v)}" for k, v in pairs) + "}"
        case ast.FunctionLiteral(parameters, body):
            params = ", ".join(p.value for p in parameters)
            return f"fn({params}) {_braced(body)}"
        case ast.PrefixExpression(operator, right):
            return f"({operator}{print_node(right)})"
        case ast.InfixExpression(left, operator, right):
            return f"({print_node(left)} {operator} {print_node(right)})"
        case ast.IndexExpression(left, index):
            return f"({print_node(left)}[{print_node(index)}])"
        case ast.CallExpression(function, arguments):
            return f"{print_node(function)}({_join(arguments)})"
        case ast.IfExpression(condition, consequence, None):
            return f"if ({print_node(condition)}) {_braced(consequence)}"
        case ast.IfExpression(condition, consequence, alternative):
            return f"if ({print_node(condition)}) {_braced(consequence)} else {_braced(alternative)}"
        case unexpected:
            raise TypeError(f"Unexpected node @ print_node(): {unexpected!r}")


def _join(expressions):
    return ", ".join(print_node(e) for e in expressions)


def _braced(block):
    if not block.statements:
        return "{ }"
    return "{ " + print_node(block) + " }"
