"""Tests for one-level processing: visibility, headers, grid and line output."""

from __future__ import annotations

import io
import stat
import unittest

from gridls.diagnostics import Diagnostics
from gridls.entry_model import Entry, EntryStatus, LevelBatch, StatSnapshot
from gridls.listing import LevelController, ListingOptions, column_overhead, is_visible


class FakeNames:
    def resolve_owner(self, uid: int) -> str | None:
        return None

    def resolve_group(self, gid: int) -> str | None:
        return None


def make_entry(name: bytes, level: int = 1, is_dir: bool = False, blocks: int = 8) -> Entry:
    mode = stat.S_IFDIR | 0o755 if is_dir else stat.S_IFREG | 0o644
    snapshot = StatSnapshot(inode=1, size=10, blocks=blocks, nlink=1, uid=0, gid=0, mode=mode, mtime=0.0)
    status = EntryStatus.DIRECTORY if is_dir else EntryStatus.NORMAL
    return Entry(name=name, path=name, level=level, status=status, stat=snapshot)


def render(batch: LevelBatch, options: ListingOptions) -> tuple[str, int, Diagnostics]:
    out = io.StringIO()
    diagnostics = Diagnostics()
    controller = LevelController(options, out, diagnostics, names=FakeNames(), now=0.0)
    count = controller.render_level(batch)
    return out.getvalue(), count, diagnostics


class LevelControllerTests(unittest.TestCase):
    def test_grid_rows_are_written_row_major(self) -> None:
        entries = tuple(make_entry(name) for name in (b"a", b"b", b"c", b"d", b"e"))
        batch = LevelBatch(directory=None, path=b"dir", level=1, entries=entries)

        output, count, _ = render(batch, ListingOptions(output_width=8))

        self.assertEqual(output, "a c e\nb d\n")
        self.assertEqual(count, 5)

    def test_grid_pads_to_column_width(self) -> None:
        entries = tuple(make_entry(name) for name in (b"alpha", b"b", b"gamma", b"d"))
        batch = LevelBatch(directory=None, path=b"dir", level=1, entries=entries)

        output, _, _ = render(batch, ListingOptions(output_width=14))

        self.assertEqual(output, "alpha gamma\nb     d\n")

    def test_single_column_mode_writes_one_line_per_entry(self) -> None:
        entries = (make_entry(b"one"), make_entry(b"two"))
        batch = LevelBatch(directory=None, path=b"dir", level=1, entries=entries)

        output, _, _ = render(batch, ListingOptions(grid=False))

        self.assertEqual(output, "one\ntwo\n")

    def test_hidden_entries_take_no_space(self) -> None:
        entries = (make_entry(b".secret"), make_entry(b"shown"))
        batch = LevelBatch(directory=None, path=b"dir", level=1, entries=entries)

        hidden_output, hidden_count, _ = render(batch, ListingOptions(grid=False))
        shown_output, shown_count, _ = render(batch, ListingOptions(grid=False, show_hidden=True))

        self.assertEqual((hidden_output, hidden_count), ("shown\n", 1))
        self.assertEqual((shown_output, shown_count), (".secret\nshown\n", 2))

    def test_block_total_header_below_root_only(self) -> None:
        entries = (make_entry(b"a", blocks=8), make_entry(b"b", blocks=16))
        nested = LevelBatch(directory=None, path=b"dir", level=1, entries=entries)
        root = LevelBatch(directory=None, path=b"", level=0, entries=tuple(make_entry(e.name, level=0, blocks=e.stat.blocks) for e in entries))
        options = ListingOptions(grid=False, print_blocks=True, block_size=1024)

        nested_output, _, _ = render(nested, options)
        root_output, _, _ = render(root, options)

        self.assertEqual(nested_output, "total 12\n4 a\n8 b\n")
        self.assertEqual(root_output, "4 a\n8 b\n")

    def test_empty_level_prints_nothing(self) -> None:
        batch = LevelBatch(directory=None, path=b"dir", level=1, entries=(make_entry(b".only"),))

        output, count, _ = render(batch, ListingOptions(long_format=True))

        self.assertEqual((output, count), ("", 0))

    def test_root_directories_are_listed_through_their_own_level(self) -> None:
        root_dir = make_entry(b"subdir", level=0, is_dir=True)
        root_file = make_entry(b"file.txt", level=0)
        hidden_operand = make_entry(b".profile", level=0)

        self.assertFalse(is_visible(root_dir, ListingOptions()))
        self.assertTrue(is_visible(root_dir, ListingOptions(list_directories=True)))
        self.assertTrue(is_visible(root_file, ListingOptions()))
        self.assertTrue(is_visible(hidden_operand, ListingOptions()))

    def test_failed_root_operand_is_reported_but_not_rendered(self) -> None:
        missing = Entry(name=b"missing", path=b"missing", level=0, status=EntryStatus.ERROR, error_code=2)
        batch = LevelBatch(directory=None, path=b"", level=0, entries=(make_entry(b"present", level=0), missing))

        with self.assertLogs("gridls", level="WARNING") as captured:
            output, count, diagnostics = render(batch, ListingOptions(long_format=True, numeric_ids=True))

        self.assertFalse(is_visible(missing, ListingOptions(list_directories=True)))
        self.assertEqual(count, 1)
        self.assertTrue(output.endswith(" present\n"))
        self.assertNotIn("missing", output)
        self.assertEqual(diagnostics.exit_status, 1)
        self.assertEqual(len(captured.output), 1)
        self.assertIn("missing: No such file or directory", captured.output[0])

    def test_failed_entry_is_reported_and_still_rendered(self) -> None:
        gone = Entry(name=b"gone", path=b"gone", level=1, status=EntryStatus.ERROR, error_code=2)
        batch = LevelBatch(directory=None, path=b"dir", level=1, entries=(make_entry(b"here"), gone))

        with self.assertLogs("gridls", level="WARNING") as captured:
            output, count, diagnostics = render(batch, ListingOptions(grid=False))

        self.assertEqual(output, "here\ngone\n")
        self.assertEqual(count, 2)
        self.assertEqual(diagnostics.exit_status, 1)
        self.assertIn("gone: No such file or directory", captured.output[0])

    def test_column_overhead_counts_indicator_and_prefix_fields(self) -> None:
        self.assertEqual(column_overhead(ListingOptions(), 0, 0), 1)
        self.assertEqual(column_overhead(ListingOptions(classify=True), 0, 0), 2)
        self.assertEqual(column_overhead(ListingOptions(print_inode=True, print_blocks=True), 6, 3), 1 + 7 + 4)

    def test_annotations_do_not_leak_between_levels(self) -> None:
        controller_out = io.StringIO()
        controller = LevelController(ListingOptions(output_width=18), controller_out, Diagnostics(), names=FakeNames(), now=0.0)
        wide = LevelBatch(directory=None, path=b"a", level=1, entries=(make_entry(b"a-very-long-name"), make_entry(b"x")))
        narrow = LevelBatch(directory=None, path=b"b", level=1, entries=(make_entry(b"p"), make_entry(b"q")))

        controller.render_level(wide)
        controller.render_level(narrow)

        self.assertEqual(controller_out.getvalue(), "a-very-long-name\nx\np q\n")


if __name__ == "__main__":
    unittest.main()
