from string import ascii_letters, digits

from monkey.tokens import Token, TokenType, lookup_ident

EOF_CHAR = "\0"

SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}

# `=` and `!` become `==` and `!=` when followed by `=`
TWO_CHAR_TOKENS = {
    "=": (TokenType.ASSIGN, TokenType.EQ),
    "!": (TokenType.BANG, TokenType.NOT_EQ),
}


def is_letter(c): return c in ascii_letters or c == "_"
def is_digit(c): return c in digits
def is_whitespace(c): return c in " \t\n\r"


class Lexer:
    """Turns Monkey source into tokens, one `next_token()` call at a time.

    Only single-byte input is supported: identifiers are ASCII letters and
    underscores, integers are ASCII digits.
    """

    def __init__(self, src):
        self._src = src
        self._pos = 0

    def __iter__(self):
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def tokenize(self):
        return list(self)

    def next_token(self):
        while is_whitespace(self._current_char()):
            self._advance()

        match self._current_char():
            case "\0" if self._at_end():
                return Token(TokenType.EOF, "")
            case ch if ch in TWO_CHAR_TOKENS:
                single, double = TWO_CHAR_TOKENS[ch]
                self._advance()
                if self._current_char() == "=":
                    self._advance()
                    return Token(double, ch + "=")
                return Token(single, ch)
            case ch if ch in SINGLE_CHAR_TOKENS:
                self._advance()
                return Token(SINGLE_CHAR_TOKENS[ch], ch)
            case '"':
                return Token(TokenType.STRING, self._string())
            case ch if is_letter(ch):
                name = self._identifier()
                return Token(lookup_ident(name), name)
            case ch if is_digit(ch):
                return Token(TokenType.INT, self._number())
            case illegal:
                self._advance()
                return Token(TokenType.ILLEGAL, illegal)

    def _identifier(self):
        start = self._pos
        while is_letter(self._current_char()):
            self._advance()
        return self._src[start:self._pos]

    def _number(self):
        start = self._pos
        while is_digit(self._current_char()):
            self._advance()
        return self._src[start:self._pos]

    def _string(self):
        self._advance()
        start = self._pos
        while not self._at_end() and self._current_char() != '"':
            self._advance()
        literal = self._src[start:self._pos]
        if not self._at_end():
            self._advance()
        return literal

    def _advance(self):
        self._pos += 1

    def _at_end(self):
        return self._pos >= len(self._src)

    def _current_char(self):
        if self._pos < len(self._src):
            return self._src[self._pos]
        else:
            return EOF_CHAR
