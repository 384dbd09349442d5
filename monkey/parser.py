import enum

from monkey import ast
from monkey.errors import NoPrefixParseFunctionError, UnexpectedTokenError
from monkey.lexer import Lexer
from monkey.numbers import digits_to_int
from monkey.tokens import TokenType


class Precedence(enum.IntEnum):
    LOWEST = 1
    EQUALS = 2       # ==
    LESSGREATER = 3  # < or >
    SUM = 4          # +
    PRODUCT = 5      # *
    PREFIX = 6       # -x or !x
    CALL = 7         # f(x)
    INDEX = 8        # a[i]


PRECEDENCES = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
    TokenType.LBRACKET: Precedence.INDEX,
}


class Parser:
    """Pratt parser over a Lexer.

    Fails fast: the first syntax error is raised as a ParseError and no
    partial tree is returned.
    """

    def __init__(self, lexer):
        self._lexer = lexer
        self._current = lexer.next_token()
        self._peek = lexer.next_token()

        self._prefix_fns = {
            TokenType.IDENT: self._identifier,
            TokenType.INT: self._integer_literal,
            TokenType.STRING: self._string_literal,
            TokenType.TRUE: self._boolean,
            TokenType.FALSE: self._boolean,
            TokenType.BANG: self._prefix_expression,
            TokenType.MINUS: self._prefix_expression,
            TokenType.LPAREN: self._grouped_expression,
            TokenType.IF: self._if_expression,
            TokenType.FUNCTION: self._function_literal,
            TokenType.LBRACKET: self._array_literal,
            TokenType.LBRACE: self._hash_literal,
        }
        # `(` and `[` continue an expression as a call and an index
        self._infix_fns = {
            TokenType.PLUS: self._infix_expression,
            TokenType.MINUS: self._infix_expression,
            TokenType.SLASH: self._infix_expression,
            TokenType.ASTERISK: self._infix_expression,
            TokenType.EQ: self._infix_expression,
            TokenType.NOT_EQ: self._infix_expression,
            TokenType.LT: self._infix_expression,
            TokenType.GT: self._infix_expression,
            TokenType.LPAREN: self._call_expression,
            TokenType.LBRACKET: self._index_expression,
        }

    def parse_program(self):
        statements = []
        while self._current.type != TokenType.EOF:
            statements.append(self._statement())
            self._advance()
        return ast.Program(statements)

    # Statements leave the current token on their last token

    def _statement(self):
        match self._current.type:
            case TokenType.LET:
                return self._let_statement()
            case TokenType.RETURN:
                return self._return_statement()
            case _:
                return self._expression_statement()

    def _let_statement(self):
        self._expect_peek(TokenType.IDENT)
        name = ast.Identifier(self._current.literal)
        self._expect_peek(TokenType.ASSIGN)
        self._advance()
        value = self._expression(Precedence.LOWEST)
        self._skip_semicolon()
        return ast.LetStatement(name, value)

    def _return_statement(self):
        self._advance()
        return_value = self._expression(Precedence.LOWEST)
        self._skip_semicolon()
        return ast.ReturnStatement(return_value)

    def _expression_statement(self):
        expression = self._expression(Precedence.LOWEST)
        self._skip_semicolon()
        return ast.ExpressionStatement(expression)

    def _block_statement(self):
        self._advance()
        statements = []
        while self._current.type not in (TokenType.RBRACE, TokenType.EOF):
            statements.append(self._statement())
            self._advance()
        if self._current.type == TokenType.EOF:
            raise UnexpectedTokenError(TokenType.RBRACE, TokenType.EOF)
        return ast.BlockStatement(statements)

    # Expressions

    def _expression(self, precedence):
        prefix = self._prefix_fns.get(self._current.type)
        if prefix is None:
            raise NoPrefixParseFunctionError(self._current.type)
        left = prefix()

        while self._peek.type != TokenType.SEMICOLON and precedence < self._peek_precedence():
            infix = self._infix_fns.get(self._peek.type)
            if infix is None:
                return left
            self._advance()
            left = infix(left)
        return left

    def _identifier(self):
        return ast.Identifier(self._current.literal)

    def _integer_literal(self):
        return ast.IntegerLiteral(digits_to_int(self._current.literal))

    def _string_literal(self):
        return ast.StringLiteral(self._current.literal)

    def _boolean(self):
        return ast.BooleanLiteral(self._current.type == TokenType.TRUE)

    def _prefix_expression(self):
        operator = self._current.literal
        self._advance()
        return ast.PrefixExpression(operator, self._expression(Precedence.PREFIX))

    def _infix_expression(self, left):
        operator = self._current.literal
        precedence = self._current_precedence()
        self._advance()
        # passing precedence - 1 here would make the operator right associative
        right = self._expression(precedence)
        return ast.InfixExpression(left, operator, right)

    def _grouped_expression(self):
        self._advance()
        expression = self._expression(Precedence.LOWEST)
        self._expect_peek(TokenType.RPAREN)
        return expression

    def _if_expression(self):
        self._expect_peek(TokenType.LPAREN)
        self._advance()
        condition = self._expression(Precedence.LOWEST)
        self._expect_peek(TokenType.RPAREN)
        self._expect_peek(TokenType.LBRACE)
        consequence = self._block_statement()

        alternative = None
        if self._peek.type == TokenType.ELSE:
            self._advance()
            self._expect_peek(TokenType.LBRACE)
            alternative = self._block_statement()
        return ast.IfExpression(condition, consequence, alternative)

    def _function_literal(self):
        self._expect_peek(TokenType.LPAREN)
        parameters = self._function_parameters()
        self._expect_peek(TokenType.LBRACE)
        return ast.FunctionLiteral(parameters, self._block_statement())

    def _function_parameters(self):
        if self._peek.type == TokenType.RPAREN:
            self._advance()
            return []

        self._expect_peek(TokenType.IDENT)
        parameters = [self._identifier()]
        while self._peek.type == TokenType.COMMA:
            self._advance()
            self._expect_peek(TokenType.IDENT)
            parameters.append(self._identifier())
        self._expect_peek(TokenType.RPAREN)
        return parameters

    def _array_literal(self):
        return ast.ArrayLiteral(self._expression_list(TokenType.RBRACKET))

    def _hash_literal(self):
        pairs = []
        while self._peek.type != TokenType.RBRACE:
            self._advance()
            key = self._expression(Precedence.LOWEST)
            self._expect_peek(TokenType.COLON)
            self._advance()
            value = self._expression(Precedence.LOWEST)
            pairs.append((key, value))
            if self._peek.type != TokenType.RBRACE:
                self._expect_peek(TokenType.COMMA)
        self._expect_peek(TokenType.RBRACE)
        return ast.HashLiteral(pairs)

    def _call_expression(self, function):
        return ast.CallExpression(function, self._expression_list(TokenType.RPAREN))

    def _index_expression(self, left):
        self._advance()
        index = self._expression(Precedence.LOWEST)
        self._expect_peek(TokenType.RBRACKET)
        return ast.IndexExpression(left, index)

    def _expression_list(self, end):
        if self._peek.type == end:
            self._advance()
            return []

        self._advance()
        expressions = [self._expression(Precedence.LOWEST)]
        while self._peek.type == TokenType.COMMA:
            self._advance()
            self._advance()
            expressions.append(self._expression(Precedence.LOWEST))
        self._expect_peek(end)
        return expressions

    # Token handling

    def _advance(self):
        self._current = self._peek
        self._peek = self._lexer.next_token()

    def _expect_peek(self, expected):
        if self._peek.type != expected:
            raise UnexpectedTokenError(expected, self._peek.type)
        self._advance()

    def _skip_semicolon(self):
        if self._peek.type == TokenType.SEMICOLON:
            self._advance()

    def _current_precedence(self):
        return PRECEDENCES.get(self._current.type, Precedence.LOWEST)

    def _peek_precedence(self):
        return PRECEDENCES.get(self._peek.type, Precedence.LOWEST)


def parse(src):
    return Parser(Lexer(src)).parse_program()
