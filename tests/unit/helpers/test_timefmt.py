"""Tests for recent/old long-format timestamps."""

from __future__ import annotations

import unittest
from datetime import datetime

from gridls.errors import TimestampFormatError
from gridls.timefmt import SIX_MONTHS_SECONDS, format_timestamp, is_recent

NOW = 1_700_000_000.0


class TimestampTests(unittest.TestCase):
    def test_recent_timestamp_shows_time_of_day(self) -> None:
        seconds = NOW - 3600
        moment = datetime.fromtimestamp(seconds)

        self.assertEqual(format_timestamp(seconds, NOW), f"{moment:%b} {moment.day:2d} {moment:%H:%M}")

    def test_boundary_is_shown_with_year(self) -> None:
        seconds = NOW - SIX_MONTHS_SECONDS
        moment = datetime.fromtimestamp(seconds)

        self.assertFalse(is_recent(seconds, NOW))
        self.assertTrue(is_recent(seconds + 1, NOW))
        self.assertEqual(format_timestamp(seconds, NOW), f"{moment:%b} {moment.day:2d}  {moment.year}")

    def test_future_timestamp_counts_as_recent(self) -> None:
        self.assertTrue(is_recent(NOW + 86400, NOW))

    def test_both_forms_have_the_same_width(self) -> None:
        recent = format_timestamp(NOW - 60, NOW)
        old = format_timestamp(NOW - 2 * SIX_MONTHS_SECONDS, NOW)
        self.assertEqual(len(recent), len(old))

    def test_unrepresentable_timestamp_raises(self) -> None:
        with self.assertRaises(TimestampFormatError):
            format_timestamp(1e20, NOW)


if __name__ == "__main__":
    unittest.main()
