class ParseError(Exception):
    pass


class UnexpectedTokenError(ParseError):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected next token to be '{expected}', but got '{actual}'.")


class NoPrefixParseFunctionError(ParseError):
    def __init__(self, token_type):
        self.token_type = token_type
        super().__init__(f"No prefix parse function for '{token_type}' found.")
