"""Tests for size and timestamp formatting helpers."""

from __future__ import annotations

import unittest
from datetime import datetime, timezone

from fancyls.formatting import format_modified_at, human_readable_size


class HumanReadableSizeTests(unittest.TestCase):
    def test_zero_bytes_stays_in_bytes(self) -> None:
        self.assertEqual(human_readable_size(0), "0.00 B")

    def test_values_below_one_kilobyte_stay_in_bytes(self) -> None:
        self.assertEqual(human_readable_size(1023), "1023.00 B")

    def test_exact_and_fractional_kilobytes(self) -> None:
        self.assertEqual(human_readable_size(1024), "1.00 KB")
        self.assertEqual(human_readable_size(1536), "1.50 KB")

    def test_each_unit_boundary_promotes_to_next_unit(self) -> None:
        self.assertEqual(human_readable_size(1024**2), "1.00 MB")
        self.assertEqual(human_readable_size(1024**3), "1.00 GB")
        self.assertEqual(human_readable_size(1099511627776), "1.00 TB")

    def test_terabytes_are_the_ceiling(self) -> None:
        self.assertEqual(human_readable_size(1024**5), "1024.00 TB")
        self.assertEqual(human_readable_size(3 * 1024**6), "3145728.00 TB")

    def test_two_decimal_rounding(self) -> None:
        self.assertEqual(human_readable_size(1_500_000), "1.43 MB")

    def test_negative_size_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            human_readable_size(-1)


class FormatModifiedAtTests(unittest.TestCase):
    def test_epoch_renders_in_utc(self) -> None:
        self.assertEqual(format_modified_at(0), "1970-01-01 00:00:00")

    def test_fractional_seconds_are_truncated(self) -> None:
        stamp = datetime(2024, 2, 29, 13, 5, 9, tzinfo=timezone.utc).timestamp() + 0.75
        self.assertEqual(format_modified_at(stamp), "2024-02-29 13:05:09")


if __name__ == "__main__":
    unittest.main()
