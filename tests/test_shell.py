import io
import sys
import unittest
from unittest.mock import patch

import shell
from tokens import Token, TokenKind


class TestFormatting(unittest.TestCase):
    def test_format_pads_bracketed_lexeme_to_ten(self):
        self.assertEqual("[echo]    : Word", shell.format_token(Token(TokenKind.WORD, "echo")))

    def test_format_newline(self):
        self.assertEqual("[\\n]      : Newline", shell.format_token(Token(TokenKind.NEWLINE, "\\n")))

    def test_format_long_lexeme_is_not_truncated(self):
        token = Token(TokenKind.TWO_QUOTE_STR, '"hello world"')
        self.assertEqual('["hello world"]: TwoQuoteStr', shell.format_token(token))

    def test_print_lex_results(self):
        out = io.StringIO()
        with patch.object(sys, "stdout", out):
            shell.print_lex_results("a&&b")
        self.assertEqual(
            "[a]       : Word\n[&&]      : LogicalAnd\n[b]       : Word\n",
            out.getvalue(),
        )

    def test_print_lex_results_blank_line_prints_nothing(self):
        out = io.StringIO()
        with patch.object(sys, "stdout", out):
            shell.print_lex_results("   ")
        self.assertEqual("", out.getvalue())


class TestReadLine(unittest.TestCase):
    def test_read_line_restores_newline(self):
        with patch("builtins.input", side_effect=["echo hi"]):
            self.assertEqual("echo hi\n", shell.read_line())

    def test_read_line_passes_prompt(self):
        with patch("builtins.input", return_value="x") as mock_input:
            shell.read_line("> ")
        mock_input.assert_called_once_with("> ")


class TestShellRun(unittest.TestCase):
    def run_shell(self, inputs, **kwargs):
        out = io.StringIO()
        err = io.StringIO()
        with patch("builtins.input", side_effect=inputs), \
             patch.object(sys, "stdout", out), \
             patch.object(sys, "stderr", err):
            rc = shell.Shell(**kwargs).run()
        return rc, out.getvalue(), err.getvalue()

    def test_run_prints_tokens_then_blank_line(self):
        rc, out, err = self.run_shell(["echo hi", EOFError])
        self.assertEqual(0, rc)
        self.assertEqual(
            "[echo]    : Word\n[hi]      : Word\n[\\n]      : Newline\n\n\n",
            out,
        )
        self.assertEqual("", err)

    def test_run_each_line_separately(self):
        rc, out, _ = self.run_shell(["if", "fi", EOFError])
        self.assertEqual(0, rc)
        self.assertEqual(
            "[if]      : If\n[\\n]      : Newline\n\n"
            "[fi]      : Word\n[\\n]      : Newline\n\n\n",
            out,
        )

    def test_run_keyboard_interrupt_continues(self):
        rc, out, _ = self.run_shell([KeyboardInterrupt, EOFError])
        self.assertEqual(0, rc)
        self.assertEqual("\n\n", out)

    def test_run_permissive_unterminated_string(self):
        rc, out, err = self.run_shell(["'oops", EOFError])
        self.assertEqual(0, rc)
        # the string swallows the line's newline, so no Newline token follows
        self.assertEqual("[oops\n]   : OneQuoteStr\n\n\n", out)
        self.assertEqual("", err)

    def test_run_strict_reports_and_continues(self):
        rc, out, err = self.run_shell(["'oops", "ok", EOFError], strict=True)
        self.assertEqual(0, rc)
        self.assertEqual("lex: unterminated ' string starting at offset 0\n", err)
        self.assertIn("[ok]      : Word\n", out)

    def test_run_uses_prompt(self):
        with patch("builtins.input", side_effect=EOFError) as mock_input, \
             patch.object(sys, "stdout", io.StringIO()):
            shell.Shell(prompt="tok> ").run()
        mock_input.assert_called_once_with("tok> ")


if __name__ == "__main__":
    unittest.main()
