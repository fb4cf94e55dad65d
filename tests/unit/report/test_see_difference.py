"""Tests for first-mismatch reporting and the ``assert_same`` fixture helper."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path, PurePath

from dirdiff import MismatchKind, TreeMismatchError, WalkError, assert_same, is_different, see_difference


def _write_tree(root: Path, files: dict[str, bytes]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for relative, data in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    return root


class SeeDifferenceTests(unittest.TestCase):
    def _trees(self, tmp: str, files_a: dict[str, bytes], files_b: dict[str, bytes]) -> tuple[Path, Path]:
        return _write_tree(Path(tmp) / "a", files_a), _write_tree(Path(tmp) / "b", files_b)

    def test_identical_trees_report_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a, b = self._trees(tmp, {"sub/x.txt": b"one\ntwo\n"}, {"sub/x.txt": b"one\ntwo\n"})
            self.assertIsNone(see_difference(a, b))
            assert_same(a, b)

    def test_file_count_mismatch(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a, b = self._trees(tmp, {"x.txt": b"x"}, {"x.txt": b"x", "y.txt": b"y"})
            mismatch = see_difference(a, b)
            self.assertIsNotNone(mismatch)
            self.assertIs(mismatch.kind, MismatchKind.MISSING_FILES)
            self.assertIsNone(mismatch.a_path)

    def test_file_name_mismatch_reports_first_sorted_pair(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a, b = self._trees(tmp, {"a.txt": b"1", "c.txt": b"3"}, {"b.txt": b"1", "c.txt": b"3"})
            mismatch = see_difference(a, b)
            self.assertIs(mismatch.kind, MismatchKind.FILE_NAME)
            self.assertEqual(mismatch.a_path, PurePath("a.txt"))
            self.assertEqual(mismatch.b_path, PurePath("b.txt"))

    def test_line_content_mismatch_reports_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a, b = self._trees(tmp, {"a/1.txt": b"hello\nworld\n"}, {"a/1.txt": b"hello\nWORLD\n"})
            mismatch = see_difference(a, b)
            self.assertIs(mismatch.kind, MismatchKind.LINE_CONTENT)
            self.assertEqual(mismatch.a_path, PurePath("a/1.txt"))
            self.assertEqual(mismatch.line_number, 1)
            self.assertEqual(mismatch.a_line, "world")
            self.assertEqual(mismatch.b_line, "WORLD")

    def test_line_count_mismatch(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a, b = self._trees(tmp, {"x.txt": b"one\n"}, {"x.txt": b"one\ntwo\n"})
            self.assertIs(see_difference(a, b).kind, MismatchKind.LINE_COUNT)

    def test_line_endings_are_ignored_by_report_but_not_by_is_different(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a, b = self._trees(tmp, {"x.txt": b"one\ntwo\n"}, {"x.txt": b"one\r\ntwo\r\n"})
            self.assertIsNone(see_difference(a, b))
            self.assertTrue(is_different(a, b))

    def test_binary_content_mismatch(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a, b = self._trees(tmp, {"x.bin": b"\xff\x00"}, {"x.bin": b"\xff\x01"})
            self.assertIs(see_difference(a, b).kind, MismatchKind.BINARY_CONTENT)

    def test_text_against_binary_is_binary_mismatch(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a, b = self._trees(tmp, {"x.dat": b"plain"}, {"x.dat": b"\xff\xfe"})
            self.assertIs(see_difference(a, b).kind, MismatchKind.BINARY_CONTENT)

    def test_identical_binary_files_match(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a, b = self._trees(tmp, {"x.bin": b"\xff\x00"}, {"x.bin": b"\xff\x00"})
            self.assertIsNone(see_difference(a, b))

    def test_missing_root_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a = _write_tree(Path(tmp) / "a", {})
            with self.assertRaises(WalkError):
                see_difference(a, Path(tmp) / "missing")


class AssertSameTests(unittest.TestCase):
    def test_assert_same_raises_with_mismatch(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            a = _write_tree(Path(tmp) / "a", {"x.txt": b"left\n"})
            b = _write_tree(Path(tmp) / "b", {"x.txt": b"right\n"})
            with self.assertRaises(TreeMismatchError) as ctx:
                assert_same(a, b)

            self.assertIsInstance(ctx.exception, AssertionError)
            self.assertIs(ctx.exception.mismatch.kind, MismatchKind.LINE_CONTENT)
            self.assertIn("line 0 differs in x.txt", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
