"""End-to-end listing of a small real directory tree.

Runs the CLI against a temporary tree and checks ordering, labels, and the
display width of every bar row.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirbars import cli
from dirbars.ansi import str_display_width
from dirbars.render import row_budget
from dirbars.terminal import TerminalInfo


class _Terminal(TerminalInfo):
    def __init__(self, columns: int) -> None:
        self._columns = columns

    def columns(self) -> int:
        return self._columns

    def supports_ansi(self) -> bool:
        return True


def _build_tree(root: Path) -> None:
    (root / "a").write_bytes(b"x" * 500)
    (root / "b").mkdir()
    (root / "b" / "inner.bin").write_bytes(b"x" * 2000)
    (root / "c").write_bytes(b"x" * 10)


class ListingEndToEndTests(unittest.TestCase):
    def _listing(self, root: Path, columns: int) -> list[str]:
        stdout = io.StringIO()
        with (
            mock.patch.object(sys, "argv", ["dirbars", str(root)]),
            mock.patch("dirbars.cli.select_terminal_info", return_value=_Terminal(columns)),
            mock.patch("sys.stdout", stdout),
        ):
            cli.main()
        return stdout.getvalue().splitlines()

    def test_three_entries_sorted_and_sized_on_wide_terminals(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _build_tree(root)

            for columns in (76, 80):
                rows = self._listing(root, columns)
                budget = row_budget(columns)

                self.assertEqual(len(rows), 3)
                self.assertTrue(rows[0].startswith("|c ") and rows[0].endswith(" 10B|"))
                self.assertTrue(rows[1].startswith("|a ") and rows[1].endswith(" 500B|"))
                self.assertTrue(rows[2].startswith("|b ") and rows[2].endswith(" 2K 0B|"))
                for row in rows:
                    self.assertEqual(str_display_width(row), budget)

    def test_width_76_rows_are_38_columns(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _build_tree(root)

            rows = self._listing(root, 76)

        self.assertEqual(rows[0], "|c" + " " * 32 + "10B|")
        self.assertEqual([len(row) for row in rows], [38, 38, 38])

    def test_narrow_terminal_uses_full_width(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _build_tree(root)

            rows = self._listing(root, 75)

        self.assertEqual([len(row) for row in rows], [75, 75, 75])

    @unittest.skipUnless(os.name == "posix", "byte filenames are a POSIX feature")
    def test_undecodable_filename_is_listed_with_escaped_byte(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            try:
                with open(os.path.join(os.fsencode(tmp), b"bad\xffname"), "wb") as handle:
                    handle.write(b"x" * 5)
            except OSError as exc:
                self.skipTest(f"filesystem rejects non-UTF-8 names: {exc}")

            raw = io.BytesIO()
            sink = io.TextIOWrapper(raw, encoding="utf-8", errors="strict")
            with (
                mock.patch.object(sys, "argv", ["dirbars", tmp]),
                mock.patch("dirbars.cli.select_terminal_info", return_value=_Terminal(40)),
                mock.patch("sys.stdout", sink),
            ):
                cli.main()
            output = raw.getvalue().decode("utf-8")

        self.assertEqual(output, "|bad\\xffname" + " " * 25 + "5B|\n")

    def test_wide_character_names_align_by_display_width(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "データ").write_bytes(b"x" * 42)
            (root / "plain").write_bytes(b"x" * 41)

            rows = self._listing(root, 60)

        self.assertTrue(rows[0].startswith("|plain"))
        self.assertTrue(rows[1].startswith("|データ"))
        self.assertEqual([str_display_width(row) for row in rows], [60, 60])
        self.assertEqual(len(rows[1]), 57)


if __name__ == "__main__":
    unittest.main()
