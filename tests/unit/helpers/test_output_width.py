"""Tests for output width resolution."""

from __future__ import annotations

import os
import unittest
from unittest import mock

from gridls.listing.options import DEFAULT_OUTPUT_WIDTH
from gridls.terminal import output_width


class OutputWidthTests(unittest.TestCase):
    def test_columns_environment_wins(self) -> None:
        with mock.patch("gridls.terminal.os.get_terminal_size") as query:
            self.assertEqual(output_width({"COLUMNS": "132"}), 132)
        query.assert_not_called()

    def test_terminal_size_used_without_override(self) -> None:
        with mock.patch("gridls.terminal.os.get_terminal_size", return_value=os.terminal_size((100, 40))):
            self.assertEqual(output_width({"COLUMNS": "-5"}), 100)

    def test_falls_back_when_not_a_terminal(self) -> None:
        with mock.patch("gridls.terminal.os.get_terminal_size", side_effect=OSError("not a tty")):
            self.assertEqual(output_width({}), DEFAULT_OUTPUT_WIDTH)

    def test_zero_width_terminal_falls_back(self) -> None:
        with mock.patch("gridls.terminal.os.get_terminal_size", return_value=os.terminal_size((0, 0))):
            self.assertEqual(output_width({}), DEFAULT_OUTPUT_WIDTH)


if __name__ == "__main__":
    unittest.main()
