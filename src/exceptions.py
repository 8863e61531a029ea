""" Errors raised while lexing. """


class LexError(SyntaxError):
    """ Base class for input the lexer refuses in strict mode. """


class UnterminatedStringError(LexError):
    def __init__(self, quote: str, position: int):
        super().__init__(f"unterminated {quote} string starting at offset {position}")
        self.quote = quote
        self.position = position
