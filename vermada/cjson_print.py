"""Render :class:`~vermada.cjson.JsonNode` trees back to text.

The formatted layout puts each object member on its own line, indented with
tabs and separated from its value by a tab, while arrays stay on one line.
Numbers are written as integers where they hold one, otherwise in fixed or
exponent notation.
"""

from __future__ import annotations

import math
import sys

from vermada.cjson import JsonNode, JsonType

_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1
_EPSILON = sys.float_info.epsilon
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_WHITESPACE = frozenset(" \t\r\n")


def format_number(node: JsonNode) -> str:
    """Return the text for a number node."""
    value = node.value_double
    if value == 0:
        return "0"
    if abs(node.value_int - value) <= _EPSILON and _INT_MIN <= value <= _INT_MAX:
        return "%d" % node.value_int
    if math.isfinite(value) and abs(math.floor(value) - value) <= _EPSILON and abs(value) < 1.0e60:
        return "%.0f" % value
    if abs(value) < 1.0e-6 or abs(value) > 1.0e9:
        return "%e" % value
    return "%f" % value


def _escape_char(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if ord(ch) < 32:
        return "\\u%04x" % ord(ch)
    return ch


def escape_string(text: str | None) -> str:
    """Return ``text`` quoted, with quotes, backslashes and control characters escaped."""
    if text is None:
        return '""'
    return '"' + "".join(_escape_char(ch) for ch in text) + '"'


def _render_array(node: JsonNode, depth: int, formatted: bool) -> str:
    if not node.children:
        return "[]"
    separator = ", " if formatted else ","
    return "[" + separator.join(_render(child, depth + 1, formatted) for child in node.children) + "]"


def _render_object(node: JsonNode, depth: int, formatted: bool) -> str:
    if not node.children:
        if formatted:
            return "{\n" + "\t" * max(depth - 1, 0) + "}"
        return "{}"
    depth += 1
    indent = "\t" * depth if formatted else ""
    colon = ":\t" if formatted else ":"
    parts = ["{\n" if formatted else "{"]
    last = len(node.children) - 1
    for index, child in enumerate(node.children):
        parts.append(indent)
        parts.append(escape_string(child.name))
        parts.append(colon)
        parts.append(_render(child, depth, formatted))
        if index != last:
            parts.append(",")
        if formatted:
            parts.append("\n")
    if formatted:
        parts.append("\t" * (depth - 1))
    parts.append("}")
    return "".join(parts)


def _render(node: JsonNode, depth: int, formatted: bool) -> str:
    kind = node.type
    if kind == JsonType.NULL:
        return "null"
    if kind == JsonType.FALSE:
        return "false"
    if kind == JsonType.TRUE:
        return "true"
    if kind == JsonType.NUMBER:
        return format_number(node)
    if kind == JsonType.STRING:
        return escape_string(node.value_string)
    if kind == JsonType.ARRAY:
        return _render_array(node, depth, formatted)
    if kind == JsonType.OBJECT:
        return _render_object(node, depth, formatted)
    raise ValueError(f"cannot render node of type {kind!r}")


def print_json(node: JsonNode) -> str:
    """Render ``node`` with tab indentation and line breaks."""
    return _render(node, 0, True)


def print_unformatted(node: JsonNode) -> str:
    """Render ``node`` without any whitespace between tokens."""
    return _render(node, 0, False)


def minify(text: str) -> str:
    """Strip whitespace and ``//`` or ``/* */`` comments outside string literals."""
    out: list[str] = []
    pos = 0
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch in _WHITESPACE:
            pos += 1
        elif text.startswith("//", pos):
            newline = text.find("\n", pos)
            pos = end if newline < 0 else newline
        elif text.startswith("/*", pos):
            close = text.find("*/", pos)
            pos = end if close < 0 else close + 2
        elif ch == '"':
            out.append(ch)
            pos += 1
            while pos < end and text[pos] != '"':
                if text[pos] == "\\" and pos + 1 < end:
                    out.append(text[pos])
                    pos += 1
                out.append(text[pos])
                pos += 1
            if pos < end:
                out.append(text[pos])
                pos += 1
        else:
            out.append(ch)
            pos += 1
    return "".join(out)