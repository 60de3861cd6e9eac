"""Extraction of the ``deviceArray`` literal and its conversion to JSON.

The upstream file is TypeScript, so the array is written in a relaxed
superset of JSON: single-quoted strings, bare keys, trailing commas and
comments. ``LiteralParser`` reads exactly that subset; it is not a
JavaScript parser and will reject anything outside it.
"""
import json
import math
import re

from emulated_devices.errors import DecodeError, MarkerNotFoundError

START_RE = re.compile(r"^const\s+deviceArray:\s*Device\[\]\s*=\s*(?=\[)", re.MULTILINE)
END_RE = re.compile(r"^\];", re.MULTILINE)

_NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_IDENT_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}

_KEYWORDS = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": None,
}


def extract(raw: bytes) -> str:
    """Return the array literal between the start and end markers, brackets included."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"descriptor source is not valid UTF-8: {e}") from e

    start = START_RE.search(text)
    if start is None:
        raise MarkerNotFoundError("start")
    text = text[start.end():]

    end = END_RE.search(text)
    if end is None:
        raise MarkerNotFoundError("end")
    return text[:end.start() + 1]


class LiteralSyntaxError(ValueError):
    def __init__(self, message, pos):
        super().__init__(f"{message} at offset {pos}")
        self.pos = pos


class LiteralParser:
    def __init__(self, text):
        self.text = text
        self.pos = 0

    def parse(self):
        value = self._value()
        self._skip()
        if self.pos != len(self.text):
            raise LiteralSyntaxError("unexpected trailing data", self.pos)
        return value

    def _skip(self):
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch.isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                newline = text.find("\n", self.pos)
                self.pos = len(text) if newline == -1 else newline + 1
            elif text.startswith("/*", self.pos):
                close = text.find("*/", self.pos + 2)
                if close == -1:
                    raise LiteralSyntaxError("unterminated comment", self.pos)
                self.pos = close + 2
            else:
                break

    def _peek(self):
        self._skip()
        if self.pos >= len(self.text):
            raise LiteralSyntaxError("unexpected end of input", self.pos)
        return self.text[self.pos]

    def _expect(self, ch):
        if self._peek() != ch:
            raise LiteralSyntaxError(f"expected {ch!r}", self.pos)
        self.pos += 1

    def _value(self):
        ch = self._peek()
        if ch == "[":
            return self._array()
        if ch == "{":
            return self._object()
        if ch in "'\"":
            return self._string()

        match = _NUMBER_RE.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            number = match.group()
            if any(c in number for c in ".eE"):
                value = float(number)
                if not math.isfinite(value):
                    raise LiteralSyntaxError("number out of range", match.start())
                return value
            return int(number)

        match = _IDENT_RE.match(self.text, self.pos)
        if match and match.group() in _KEYWORDS:
            self.pos = match.end()
            return _KEYWORDS[match.group()]
        raise LiteralSyntaxError("unexpected character", self.pos)

    def _array(self):
        self._expect("[")
        items = []
        while self._peek() != "]":
            items.append(self._value())
            if self._peek() == ",":
                self.pos += 1
            elif self._peek() != "]":
                raise LiteralSyntaxError("expected ',' or ']'", self.pos)
        self.pos += 1
        return items

    def _object(self):
        self._expect("{")
        obj = {}
        while self._peek() != "}":
            key = self._key()
            self._expect(":")
            obj[key] = self._value()
            if self._peek() == ",":
                self.pos += 1
            elif self._peek() != "}":
                raise LiteralSyntaxError("expected ',' or '}'", self.pos)
        self.pos += 1
        return obj

    def _key(self):
        if self._peek() in "'\"":
            return self._string()
        match = _IDENT_RE.match(self.text, self.pos)
        if match is None:
            raise LiteralSyntaxError("expected object key", self.pos)
        self.pos = match.end()
        return match.group()

    def _string(self):
        quote = self.text[self.pos]
        self.pos += 1
        chunks = []
        text = self.text
        while True:
            if self.pos >= len(text):
                raise LiteralSyntaxError("unterminated string", self.pos)
            ch = text[self.pos]
            if ch == quote:
                self.pos += 1
                return "".join(chunks)
            if ch == "\n":
                raise LiteralSyntaxError("newline in string", self.pos)
            if ch == "\\":
                chunks.append(self._escape())
                continue
            chunks.append(ch)
            self.pos += 1

    def _escape(self):
        text = self.text
        self.pos += 1
        if self.pos >= len(text):
            raise LiteralSyntaxError("unterminated escape", self.pos)
        ch = text[self.pos]
        self.pos += 1
        if ch == "\n":
            # line continuation
            return ""
        if ch in ("u", "x"):
            width = 4 if ch == "u" else 2
            digits = text[self.pos:self.pos + width]
            if len(digits) != width or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise LiteralSyntaxError("invalid escape", self.pos)
            self.pos += width
            return chr(int(digits, 16))
        return _ESCAPES.get(ch, ch)


def parse_literal(text):
    return LiteralParser(text).parse()


def normalize(text: str) -> str:
    """Rewrite the relaxed array literal as strict JSON."""
    try:
        value = parse_literal(text)
    except LiteralSyntaxError as e:
        raise DecodeError(f"malformed descriptor literal: {e}") from e
    return json.dumps(value, ensure_ascii=False, allow_nan=False)
