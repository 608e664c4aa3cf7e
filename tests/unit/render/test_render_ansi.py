"""Tests for terminal display-width measurement."""

from __future__ import annotations

import unittest

from fancyls.render import ansi


class DisplayWidthTests(unittest.TestCase):
    def test_ascii_counts_one_cell_per_character(self) -> None:
        self.assertEqual(ansi.text_display_width("Modified"), 8)

    def test_wide_emoji_counts_two_cells(self) -> None:
        self.assertEqual(ansi.text_display_width("📁"), 2)
        self.assertEqual(ansi.text_display_width("⚡ x"), 4)

    def test_combining_marks_consume_no_cells(self) -> None:
        self.assertEqual(ansi.text_display_width("é"), 1)

    def test_escape_sequences_are_ignored(self) -> None:
        self.assertEqual(ansi.text_display_width("\x1b[01m\x1b[34mbin/\x1b[39;49;00m"), 4)

    def test_pad_to_width_never_truncates(self) -> None:
        self.assertEqual(ansi.pad_to_width("📁 a", 6), "📁 a  ")
        self.assertEqual(ansi.pad_to_width("abcdef", 3), "abcdef")


if __name__ == "__main__":
    unittest.main()
