""" Lexical analysis for shell commands. """
from constants import (KEYWORDS, NEWLINE_LEXEME, QUOTE_CHARS, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS,
                       WHITESPACE_RX, WORD_RX)
from exceptions import UnterminatedStringError
from tokens import Span, Token, TokenKind


def match_two_or_one(text: str, pos: int, partner: str,
                     if_not_match: TokenKind, if_match: TokenKind) -> tuple[Token, int]:
    """
    Lex a one- or two-character operator starting at text[pos].

    If the character after the seed is partner, both are consumed and the
    token has kind if_match. Otherwise only the seed is consumed and the
    following character is left for the next step.
    Returns the token and the position just past it.
    """
    assert pos < len(text), "match_two_or_one called past end of input"

    first = text[pos]
    pos += 1
    if pos < len(text) and text[pos] == partner:
        return Token(if_match, first + partner), pos + 1
    return Token(if_not_match, first), pos


def scan_word(text: str, pos: int) -> tuple[Token, int]:
    """ Consume a maximal alphanumeric run and classify it. """
    end = WORD_RX.match(text, pos).end()
    lexeme = text[pos:end]
    return Token(KEYWORDS.get(lexeme, TokenKind.WORD), lexeme), end


def scan_string(text: str, pos: int, strict: bool = False) -> tuple[Token, int]:
    """
    Consume a quoted string whose opening quote is at text[pos].

    No escapes are processed. Without a closing quote the rest of the input
    is taken as the string body, unless strict is set.
    """
    quote = text[pos]
    close = text.find(quote, pos + 1)
    if close == -1:
        if strict:
            raise UnterminatedStringError(quote, pos)
        body = text[pos + 1:]
        end = len(text)
    else:
        body = text[pos + 1:close]
        end = close + 1

    if quote == "'":
        return Token(TokenKind.ONE_QUOTE_STR, body), end
    return Token(TokenKind.TWO_QUOTE_STR, f'"{body}"'), end


def scan(text: str, strict: bool = False) -> list[Span]:
    """
    Split text into scan steps, one Span per token or skipped whitespace
    character. The raw text of the spans, joined in order, is text.
    """
    spans = []
    pos = 0
    n = len(text)

    while pos < n:
        c = text[pos]
        start = pos

        if c in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[c], c)
            pos += 1
        elif c in TWO_CHAR_TOKENS:
            partner, single, pair = TWO_CHAR_TOKENS[c]
            token, pos = match_two_or_one(text, pos, partner, single, pair)
        elif WORD_RX.match(c):
            token, pos = scan_word(text, pos)
        elif c in QUOTE_CHARS:
            token, pos = scan_string(text, pos, strict)
        elif c == "\n":
            token = Token(TokenKind.NEWLINE, NEWLINE_LEXEME)
            pos += 1
        elif WHITESPACE_RX.match(c):
            token = None
            pos += 1
        else:
            token = Token(TokenKind.UNKNOWN, c)
            pos += 1

        spans.append(Span(token, text[start:pos], start))

    return spans


def tokenize(text: str, strict: bool = False) -> list[Token]:
    return [span.token for span in scan(text, strict) if span.token is not None]
