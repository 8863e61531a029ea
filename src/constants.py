import regex

from tokens import TokenKind

QUOTE_CHARS = ("'", '"')

# Display form of a newline token.
NEWLINE_LEXEME = "\\n"

# Unicode Alphabetic or Numeric (general category N)
WORD_RX = regex.compile(r"[\p{Alphabetic}\p{N}]+")
WHITESPACE_RX = regex.compile(r"\p{White_Space}")

SINGLE_CHAR_TOKENS = {
    "$": TokenKind.DOLLAR,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LCURLY,
    "}": TokenKind.RCURLY,
    "[": TokenKind.LSQUARE,
    "]": TokenKind.RSQUARE,
}

# seed -> (partner, kind without partner, kind with partner)
TWO_CHAR_TOKENS = {
    "=": ("=", TokenKind.ASSIGN, TokenKind.EQUALITY),
    "!": ("=", TokenKind.LOGICAL_NOT, TokenKind.INEQUALITY),
    "|": ("|", TokenKind.PIPE, TokenKind.LOGICAL_OR),
    "&": ("&", TokenKind.AMPERSAND, TokenKind.LOGICAL_AND),
    ">": (">", TokenKind.REDIRECT, TokenKind.CAT_REDIRECT),
}

KEYWORDS = {
    "while": TokenKind.WHILE,
    "for": TokenKind.FOR,
    "if": TokenKind.IF,
    "elif": TokenKind.ELIF,
    "else": TokenKind.ELSE,
}
