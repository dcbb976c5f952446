import contextlib
import io
import json
import unittest
from unittest import mock

from . import terminal_play


class TerminalPlayTest(unittest.TestCase):

    def test_simulate(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = terminal_play.main(["--simulate", "3", "--seed", "4", "--computer-first"])
        self.assertEqual(code, 0)
        summary = json.loads(out.getvalue())
        self.assertEqual(summary["games"], 3)
        self.assertEqual(summary["human_wins"], 0)

    def test_end_of_input(self):
        out = io.StringIO()
        with mock.patch("builtins.input", side_effect=EOFError):
            with contextlib.redirect_stdout(out):
                code = terminal_play.main(["--think-delay", "0"])
        self.assertEqual(code, 1)
        self.assertIn("Enter comma separated move", out.getvalue())

    def test_rejects_negative_values(self):
        for argv in [
            ["--think-delay", "-1"],
            ["--think-delay", "nan"],
            ["--simulate", "-2"],
        ]:
            err = io.StringIO()
            with contextlib.redirect_stderr(err):
                with self.assertRaises(SystemExit) as cm:
                    terminal_play.main(argv)
            self.assertEqual(cm.exception.code, 2, argv)
            self.assertIn("must be >= 0", err.getvalue())


if __name__ == "__main__":
    unittest.main()
