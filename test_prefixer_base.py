import unittest

from prefixer_base import Edit, ParseFailure, apply_edits, quote_string, string_value


class ApplyEditsTest(unittest.TestCase):
    def test_splices_in_offset_order(self):
        src = b"abcdef"
        out = apply_edits(src, [Edit(4, 5, "E"), Edit(0, 1, "AA")])
        self.assertEqual(out, b"AAbcdEf")

    def test_no_edits_is_identity(self):
        self.assertEqual(apply_edits(b"same", []), b"same")

    def test_overlap_rejected(self):
        with self.assertRaises(ValueError):
            apply_edits(b"abcdef", [Edit(0, 3, "x"), Edit(2, 4, "y")])

    def test_multibyte_replacement(self):
        self.assertEqual(apply_edits(b"a-b", [Edit(1, 2, "é")]), "aéb".encode("utf8"))


class StringLiteralTest(unittest.TestCase):
    def test_value_of_plain_literal(self):
        self.assertEqual(string_value('"bg-red-500 p-2"'), "bg-red-500 p-2")
        self.assertEqual(string_value("''"), "")

    def test_value_decodes_escapes(self):
        self.assertEqual(string_value(r"'a\tb\nc'"), "a\tb\nc")
        self.assertEqual(string_value(r'"\"q\" \\ \x41B\u{43}"'), '"q" \\ ABC')
        self.assertEqual(string_value("'a\\\nb'"), "ab")
        self.assertEqual(string_value(r"'\w'"), "w")

    def test_quote_escapes_quote_and_backslash(self):
        self.assertEqual(quote_string('a"b\\c'), r'"a\"b\\c"')
        self.assertEqual(quote_string("it's", "'"), r"'it\'s'")
        self.assertEqual(quote_string('say "hi"', "'"), "'say \"hi\"'")
        self.assertEqual(quote_string("\x01"), '"\\u0001"')

    def test_round_trip_through_quote(self):
        literal = r"'x\\y \'z\''"
        self.assertEqual(quote_string(string_value(literal), "'"), literal)


class ParseFailureTest(unittest.TestCase):
    def test_message_carries_position(self):
        exc = ParseFailure(3, 7, "ERROR")
        self.assertEqual((exc.line, exc.column, exc.kind), (3, 7, "ERROR"))
        self.assertIn("3:7", str(exc))
