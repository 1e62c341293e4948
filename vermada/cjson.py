"""A small JSON document tree with a lenient, forgiving parser.

Nodes keep their children in order and look object members up by name
without regard to ASCII case.  The parser accepts trailing text unless asked
not to, reads numbers and strings in the relaxed way the stage and config
files rely on, and raises :class:`JsonParseError` with the offending position
when the text cannot be read.
"""

from __future__ import annotations

import enum
import math
import string
from dataclasses import dataclass, field
from typing import Iterable, Iterator

_DIGITS = frozenset("0123456789")
_NON_ZERO_DIGITS = frozenset("123456789")
_HEX_DIGITS = frozenset(string.hexdigits)
_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_SIMPLE_ESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}


class JsonType(enum.IntEnum):
    """Kinds of value a node can hold."""

    FALSE = 0
    TRUE = 1
    NULL = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


class JsonParseError(ValueError):
    """Raised when text cannot be parsed; ``position`` marks where it failed."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


def _ascii_lower(text: str) -> str:
    return text.translate(_LOWER_TABLE)


def _truncate(value: float) -> int:
    return int(value) if math.isfinite(value) else 0


@dataclass
class JsonNode:
    """One value of a JSON document; arrays and objects hold ``children``."""

    type: JsonType
    value_string: str | None = None
    value_int: int = 0
    value_double: float = 0.0
    name: str | None = None
    children: list[JsonNode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.children)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[JsonNode]:
        return iter(self.children)

    def __getitem__(self, which: int | str) -> JsonNode:
        if isinstance(which, str):
            item = self.get_item(which)
            if item is None:
                raise KeyError(which)
            return item
        return self.children[which]

    def _index_of(self, name: str) -> int | None:
        wanted = _ascii_lower(name)
        for index, child in enumerate(self.children):
            if child.name is not None and _ascii_lower(child.name) == wanted:
                return index
        return None

    def get_item(self, name: str) -> JsonNode | None:
        """Return the first member called ``name`` (ASCII case ignored), or None."""
        index = self._index_of(name)
        return None if index is None else self.children[index]

    def append(self, item: JsonNode | None) -> None:
        """Add ``item`` at the end; ``None`` is ignored."""
        if item is not None:
            self.children.append(item)

    def set(self, name: str, item: JsonNode | None) -> None:
        """Name ``item`` and add it at the end as an object member."""
        if item is None:
            return
        item.name = name
        self.children.append(item)

    def detach(self, which: int) -> JsonNode | None:
        """Remove and return the child at ``which``; None when there is none."""
        which = max(which, 0)
        if which >= len(self.children):
            return None
        return self.children.pop(which)

    def detach_by_name(self, name: str) -> JsonNode | None:
        """Remove and return the member called ``name``, or None."""
        index = self._index_of(name)
        return None if index is None else self.children.pop(index)

    def insert(self, which: int, item: JsonNode) -> None:
        """Insert ``item`` before position ``which``, appending when past the end."""
        which = max(which, 0)
        if which >= len(self.children):
            self.children.append(item)
        else:
            self.children.insert(which, item)

    def replace(self, which: int, item: JsonNode) -> None:
        """Put ``item`` in place of the child at ``which``; no-op when out of range."""
        which = max(which, 0)
        if which < len(self.children):
            self.children[which] = item

    def replace_by_name(self, name: str, item: JsonNode) -> None:
        """Put ``item`` in place of the member called ``name``, if there is one."""
        index = self._index_of(name)
        if index is not None:
            item.name = name
            self.children[index] = item

    def duplicate(self, recurse: bool = True) -> JsonNode:
        """Return a copy; children are copied only when ``recurse`` is true."""
        return JsonNode(
            type=self.type,
            value_string=self.value_string,
            value_int=self.value_int,
            value_double=self.value_double,
            name=self.name,
            children=[child.duplicate(True) for child in self.children] if recurse else [],
        )


def _pow10(exponent: int) -> float:
    try:
        return 10.0 ** exponent
    except OverflowError:
        return math.inf


def _hex4(text: str, start: int) -> int:
    digits = text[start:start + 4]
    if len(digits) < 4 or not all(c in _HEX_DIGITS for c in digits):
        return 0
    return int(digits, 16)


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text

    def char(self, pos: int) -> str:
        return self.text[pos] if 0 <= pos < len(self.text) else ""

    def skip(self, pos: int) -> int:
        text = self.text
        while pos < len(text) and ord(text[pos]) <= 32:
            pos += 1
        return pos

    def value(self, pos: int) -> tuple[JsonNode, int]:
        text = self.text
        if text.startswith("null", pos):
            return JsonNode(JsonType.NULL), pos + 4
        if text.startswith("false", pos):
            return JsonNode(JsonType.FALSE), pos + 5
        if text.startswith("true", pos):
            return JsonNode(JsonType.TRUE, value_int=1), pos + 4
        ch = self.char(pos)
        if ch == '"':
            return self.string(pos)
        if ch == "-" or ch in _DIGITS:
            return self.number(pos)
        if ch == "[":
            return self.array(pos)
        if ch == "{":
            return self.object(pos)
        raise JsonParseError("unexpected input", pos)

    def _digits(self, pos: int) -> Iterator[tuple[int, int]]:
        while self.char(pos) in _DIGITS and self.char(pos):
            yield pos, ord(self.text[pos]) - ord("0")
            pos += 1

    def number(self, pos: int) -> tuple[JsonNode, int]:
        sign = 1.0
        mantissa = 0.0
        scale = 0
        exponent = 0
        exponent_sign = 1
        if self.char(pos) == "-":
            sign = -1.0
            pos += 1
        if self.char(pos) == "0":
            pos += 1
        if self.char(pos) in _NON_ZERO_DIGITS and self.char(pos):
            for pos, digit in self._digits(pos):
                mantissa = mantissa * 10.0 + digit
            pos += 1
        if self.char(pos) == "." and self.char(pos + 1) in _DIGITS and self.char(pos + 1):
            for pos, digit in self._digits(pos + 1):
                mantissa = mantissa * 10.0 + digit
                scale -= 1
            pos += 1
        if self.char(pos) in ("e", "E"):
            pos += 1
            if self.char(pos) == "+":
                pos += 1
            elif self.char(pos) == "-":
                exponent_sign = -1
                pos += 1
            if self.char(pos) in _DIGITS and self.char(pos):
                for pos, digit in self._digits(pos):
                    exponent = exponent * 10 + digit
                pos += 1
        value = sign * mantissa * _pow10(scale + exponent * exponent_sign)
        node = JsonNode(JsonType.NUMBER, value_double=value, value_int=_truncate(value))
        return node, pos

    def _unicode_escape(self, pos: int) -> tuple[str, int]:
        """Decode ``\\uXXXX`` whose ``u`` is at ``pos``; return text and last index."""
        text = self.text
        code = _hex4(text, pos + 1)
        pos += 4
        if 0xDC00 <= code <= 0xDFFF or code == 0:
            return "", pos
        if 0xD800 <= code <= 0xDBFF:
            if text[pos + 1:pos + 3] != "\\u":
                return "", pos
            low = _hex4(text, pos + 3)
            pos += 6
            if not 0xDC00 <= low <= 0xDFFF:
                return "", pos
            code = 0x10000 + (((code & 0x3FF) << 10) | (low & 0x3FF))
        return chr(code), pos

    def string(self, pos: int) -> tuple[JsonNode, int]:
        text = self.text
        if self.char(pos) != '"':
            raise JsonParseError("expected a string", pos)
        out: list[str] = []
        pos += 1
        end = len(text)
        while pos < end and text[pos] != '"':
            ch = text[pos]
            if ch != "\\":
                out.append(ch)
                pos += 1
                continue
            pos += 1
            if pos >= end:
                break
            escape = text[pos]
            if escape in _SIMPLE_ESCAPES:
                out.append(_SIMPLE_ESCAPES[escape])
            elif escape == "u":
                decoded, pos = self._unicode_escape(pos)
                out.append(decoded)
            else:
                out.append(escape)
            pos += 1
        if pos < end and text[pos] == '"':
            pos += 1
        return JsonNode(JsonType.STRING, value_string="".join(out)), min(pos, end)

    def array(self, pos: int) -> tuple[JsonNode, int]:
        node = JsonNode(JsonType.ARRAY)
        pos = self.skip(pos + 1)
        if self.char(pos) == "]":
            return node, pos + 1
        child, pos = self.value(self.skip(pos))
        node.children.append(child)
        pos = self.skip(pos)
        while self.char(pos) == ",":
            child, pos = self.value(self.skip(pos + 1))
            node.children.append(child)
            pos = self.skip(pos)
        if self.char(pos) == "]":
            return node, pos + 1
        raise JsonParseError("malformed array", pos)

    def member(self, pos: int) -> tuple[JsonNode, int]:
        key, pos = self.string(self.skip(pos))
        pos = self.skip(pos)
        if self.char(pos) != ":":
            raise JsonParseError("expected ':'", pos)
        child, pos = self.value(self.skip(pos + 1))
        child.name = key.value_string
        return child, self.skip(pos)

    def object(self, pos: int) -> tuple[JsonNode, int]:
        node = JsonNode(JsonType.OBJECT)
        pos = self.skip(pos + 1)
        if self.char(pos) == "}":
            return node, pos + 1
        child, pos = self.member(pos)
        node.children.append(child)
        while self.char(pos) == ",":
            child, pos = self.member(pos + 1)
            node.children.append(child)
        if self.char(pos) == "}":
            return node, pos + 1
        raise JsonParseError("malformed object", pos)


def parse_with_opts(text: str, require_null_terminated: bool = False) -> tuple[JsonNode, int]:
    """Parse ``text`` and return the root node with the index where parsing stopped.

    With ``require_null_terminated`` anything but whitespace after the value
    is an error.  Text after a NUL character is ignored.
    """
    text = text.split("\0", 1)[0]
    parser = _Parser(text)
    node, end = parser.value(parser.skip(0))
    if require_null_terminated:
        end = parser.skip(end)
        if end < len(text):
            raise JsonParseError("trailing characters", end)
    return node, end


def parse(text: str) -> JsonNode:
    """Parse ``text``, tolerating anything after the first value."""
    node, _ = parse_with_opts(text, False)
    return node


def create_null() -> JsonNode:
    """Return a null node."""
    return JsonNode(JsonType.NULL)


def create_bool(value: bool) -> JsonNode:
    """Return a true or false node."""
    if value:
        return JsonNode(JsonType.TRUE, value_int=1)
    return JsonNode(JsonType.FALSE)


def create_number(value: float) -> JsonNode:
    """Return a number node; ``value_int`` is the value truncated toward zero."""
    value = float(value)
    return JsonNode(JsonType.NUMBER, value_double=value, value_int=_truncate(value))


def create_string(value: str) -> JsonNode:
    """Return a string node."""
    return JsonNode(JsonType.STRING, value_string=value)


def create_array() -> JsonNode:
    """Return an empty array node."""
    return JsonNode(JsonType.ARRAY)


def create_object() -> JsonNode:
    """Return an empty object node."""
    return JsonNode(JsonType.OBJECT)


def create_number_array(numbers: Iterable[float]) -> JsonNode:
    """Return an array holding a number node for each of ``numbers``."""
    return JsonNode(JsonType.ARRAY, children=[create_number(n) for n in numbers])


def create_string_array(strings: Iterable[str]) -> JsonNode:
    """Return an array holding a string node for each of ``strings``."""
    return JsonNode(JsonType.ARRAY, children=[create_string(s) for s in strings])