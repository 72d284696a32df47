# prefixer_base.py – common helpers: logging, parse errors, byte-accurate edits

import re
import sys
from typing import Iterable, List


# ----- helpers ---------------------------------------------------------------
def error(msg: str):
    print(msg, file=sys.stderr, flush=True)


class ParseFailure(Exception):
    """Source text is not valid in the requested dialect."""

    def __init__(self, line: int, column: int, kind: str):
        super().__init__(f"Syntax error at {line}:{column} ({kind})")
        self.line = line  # 1-based
        self.column = column  # 1-based, in bytes
        self.kind = kind


# ----- core edit -------------------------------------------------------------
class Edit:
    def __init__(self, start: int, end: int, text: str):
        self.start = start  # byte offset, inclusive
        self.end = end  # byte offset, exclusive
        self.text = text

    def __repr__(self):
        return f"Edit({self.start}, {self.end}, {self.text!r})"

    def __eq__(self, other):
        return isinstance(other, Edit) and (self.start, self.end, self.text) == (
            other.start,
            other.end,
            other.text,
        )


def apply_edits(source: bytes, edits: Iterable[Edit]) -> bytes:
    """Splice replacement text into *source*; untouched bytes are copied as-is."""
    out: List[bytes] = []
    pos = 0
    for e in sorted(edits, key=lambda e: e.start):
        if e.start < pos:
            raise ValueError(f"Overlapping edit {e!r}")
        out.append(source[pos : e.start])
        out.append(e.text.encode("utf8"))
        pos = e.end
    out.append(source[pos:])
    return b"".join(out)


# ----- JS string literals ----------------------------------------------------
_ESCAPE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)
_SIMPLE = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}
_LINE_CONTINUATIONS = {"\n", "\r", "\r\n", "\u2028", "\u2029"}


def _cook(m: "re.Match[str]") -> str:
    seq = m.group(1)
    if seq.startswith("u{"):
        return chr(int(seq[2:-1], 16))
    if len(seq) > 1 and seq[0] in "ux":
        return chr(int(seq[1:], 16))
    if seq in _LINE_CONTINUATIONS:
        return ""
    return _SIMPLE.get(seq, seq)


def string_value(literal: str) -> str:
    """Cooked value of a quoted JS string literal, e.g. ``'a\\tb'`` -> ``a<TAB>b``."""
    return _ESCAPE.sub(_cook, literal[1:-1])


def quote_string(value: str, quote: str = '"') -> str:
    chars = []
    for ch in value:
        if ch == "\\" or ch == quote:
            chars.append("\\" + ch)
        elif ch == "\n":
            chars.append("\\n")
        elif ch == "\r":
            chars.append("\\r")
        elif ch == "\t":
            chars.append("\\t")
        elif ord(ch) < 0x20 or ch in "\u2028\u2029":
            chars.append(f"\\u{ord(ch):04x}")
        else:
            chars.append(ch)
    return quote + "".join(chars) + quote
