#!/usr/bin/env python3
""" Command line entry point for the tokenizer. """
import argparse
import sys

from exceptions import LexError
from shell import Shell, print_lex_results


def build_parser():
    parser = argparse.ArgumentParser(
        description="Print the tokens of shell command lines"
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="TEXT",
        help="Tokenize TEXT once and exit instead of reading lines from stdin"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unterminated quoted strings instead of reading to end of input"
    )
    parser.add_argument(
        "--prompt",
        default="",
        help="Prompt shown before each line in interactive mode (default: none)"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.command is not None:
        try:
            print_lex_results(args.command, strict=args.strict)
        except LexError as e:
            print(f"lex: {e}", file=sys.stderr)
            return 1
        return 0

    sh = Shell(prompt=args.prompt, strict=args.strict)
    return sh.run()


if __name__ == "__main__":
    sys.exit(main())
