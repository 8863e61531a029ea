""" Token types produced by the lexer. """
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """ Lexical category of a token. The value is the display name. """
    # Syntax
    WORD = "Word"
    SEMICOLON = "Semicolon"
    AMPERSAND = "Ampersand"
    DOLLAR = "Dollar"
    ASSIGN = "Assign"
    ONE_QUOTE_STR = "OneQuoteStr"  # no interpolation: 'hello world'
    TWO_QUOTE_STR = "TwoQuoteStr"  # interpolation: "hello ${planet}"

    # Dataflow
    PIPE = "Pipe"
    REDIRECT = "Redirect"
    CAT_REDIRECT = "CatRedirect"

    # Logical
    EQUALITY = "Equality"
    INEQUALITY = "Inequality"
    LOGICAL_OR = "LogicalOr"
    LOGICAL_AND = "LogicalAnd"
    LOGICAL_NOT = "LogicalNot"

    # Grouping
    LPAREN = "LParen"
    RPAREN = "RParen"
    LCURLY = "LCurly"
    RCURLY = "RCurly"
    LSQUARE = "LSquare"
    RSQUARE = "RSquare"

    # Reserved for numeric literals; the lexer never produces these yet.
    TYPE_INT = "TypeInt"
    TYPE_LONG = "TypeLong"
    TYPE_CHAR = "TypeChar"
    TYPE_FLOAT = "TypeFloat"
    TYPE_DOUBLE = "TypeDouble"

    # Etc
    NEWLINE = "Newline"
    UNKNOWN = "Unknown"
    WHILE = "While"
    FOR = "For"
    IF = "If"
    ELIF = "Elif"
    ELSE = "Else"

    def __str__(self):
        return self.value


KEYWORD_KINDS = frozenset({
    TokenKind.WHILE,
    TokenKind.FOR,
    TokenKind.IF,
    TokenKind.ELIF,
    TokenKind.ELSE,
})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str

    @property
    def is_keyword(self) -> bool:
        return self.kind in KEYWORD_KINDS


@dataclass(frozen=True)
class Span:
    """
    One step of the scan.
    token is None when the step only discarded whitespace.
    raw is the exact input text the step consumed, starting at offset start.
    """
    token: Token | None
    raw: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.raw)
