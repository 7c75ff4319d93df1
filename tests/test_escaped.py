from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from archivejson.parsing.args_parser import ArgsParseError  # noqa: E402
from archivejson.parsing.escaped import (  # noqa: E402
    MalformedPairError,
    split_escaped,
    split_key_value,
)


class SplitEscapedTests(unittest.TestCase):
    def test_escaped_delimiters_and_escapes_stay_literal(self) -> None:
        self.assertEqual(
            split_escaped("foo\\\\\\==\\\\ba\\=r", "=", "\\"),
            ["foo\\=", "\\ba=r"],
        )

    def test_escaped_delimiters_on_both_sides(self) -> None:
        self.assertEqual(
            split_escaped("\\=baz\\==\\=\\\\", "=", "\\"),
            ["=baz=", "=\\"],
        )

    def test_empty_input_yields_one_empty_field(self) -> None:
        self.assertEqual(split_escaped("", "=", "\\"), [""])

    def test_field_count_follows_unescaped_delimiters(self) -> None:
        self.assertEqual(split_escaped("a=b=c", "=", "\\"), ["a", "b", "c"])
        self.assertEqual(split_escaped("=", "=", "\\"), ["", ""])
        self.assertEqual(split_escaped("abc", "=", "\\"), ["abc"])

    def test_escaped_ordinary_character_is_kept_without_escape(self) -> None:
        self.assertEqual(split_escaped("a\\bc", "=", "\\"), ["abc"])

    def test_dangling_escape_is_dropped(self) -> None:
        self.assertEqual(split_escaped("abc\\", "=", "\\"), ["abc"])
        self.assertEqual(split_escaped("k=v\\", "=", "\\"), ["k", "v"])

    def test_other_delimiter_and_escape(self) -> None:
        self.assertEqual(split_escaped("a:b^:c", ":", "^"), ["a", "b:c"])

    def test_invalid_runes_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            split_escaped("a=b", "==", "\\")
        with self.assertRaises(ValueError):
            split_escaped("a=b", "=", "")
        with self.assertRaises(ValueError):
            split_escaped("a=b", "=", "=")


class SplitKeyValueTests(unittest.TestCase):
    def test_plain_pair(self) -> None:
        self.assertEqual(split_key_value("github.com/foo/bar=//foo:bar"), ("github.com/foo/bar", "//foo:bar"))

    def test_escaped_pair(self) -> None:
        self.assertEqual(split_key_value("a\\=b=c\\\\"), ("a=b", "c\\"))

    def test_empty_sides_are_allowed(self) -> None:
        self.assertEqual(split_key_value("="), ("", ""))

    def test_missing_delimiter_is_malformed(self) -> None:
        with self.assertRaises(MalformedPairError) as ctx:
            split_key_value("novalue")
        self.assertEqual(ctx.exception.value, "novalue")
        self.assertIn("novalue", str(ctx.exception))

    def test_extra_delimiter_is_malformed(self) -> None:
        with self.assertRaises(MalformedPairError):
            split_key_value("a=b=c")

    def test_escaped_only_delimiter_is_malformed(self) -> None:
        with self.assertRaises(MalformedPairError):
            split_key_value("a\\=b")

    def test_malformed_pair_is_a_parse_error(self) -> None:
        self.assertTrue(issubclass(MalformedPairError, ArgsParseError))


if __name__ == "__main__":
    unittest.main()
