""" Interactive loop that prints the tokens of each input line. """
import sys

from exceptions import LexError
from lexer import tokenize
from tokens import Token

LEXEME_WIDTH = 10


def read_line(prompt=""):
    """ Read one line of input, keeping its trailing newline. """
    return input(prompt) + "\n"


def format_token(token: Token) -> str:
    lexeme = f"[{token.lexeme}]"
    return f"{lexeme:<{LEXEME_WIDTH}}: {token.kind}"


def print_lex_results(line: str, strict=False):
    for token in tokenize(line, strict=strict):
        print(format_token(token))


class Shell:
    def __init__(self, prompt="", strict=False):
        self.prompt = prompt
        self.strict = strict

    def run(self):
        while True:
            try:
                line = read_line(self.prompt)
                print_lex_results(line, strict=self.strict)
                print()

            except LexError as e:
                print(f"lex: {e}", file=sys.stderr)

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
