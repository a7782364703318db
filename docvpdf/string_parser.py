"""Parser for literal ``(...)`` and hexadecimal ``<...>`` PDF strings."""

from __future__ import annotations

import re

from .objects import HexString, LiteralString, PdfString
from .whitespace import ParseError, is_whitespace

_ESCAPES = {
    ord("n"): 0x0A,
    ord("r"): 0x0D,
    ord("t"): 0x09,
    ord("b"): 0x08,
    ord("f"): 0x0C,
    ord("("): 0x28,
    ord(")"): 0x29,
    ord("\\"): 0x5C,
}
_PLAIN = re.compile(rb"[^\\()]+")
_OCTAL = re.compile(rb"[0-7]{1,3}")
_WHITESPACE_RUN = re.compile(rb"[\x00\t\n\x0c\r ]+")
_HEX_STRING = re.compile(rb"<([0-9A-Fa-f\x00\t\n\x0c\r ]*)>")
_UTF16_BOM = b"\xfe\xff"


def pdf_string(data: bytes) -> tuple[PdfString, bytes]:
    """Parse a string at the start of ``data``; return it and the remaining input."""
    data = bytes(data)
    if data.startswith(b"("):
        content, end = _literal_body(data, 0)
        return _decode_literal(content), data[end:]
    if data.startswith(b"<"):
        return _hexadecimal(data)
    raise ParseError("expected '(' or '<' at the start of a string", data)


def _literal_body(data: bytes, start: int) -> tuple[bytes, int]:
    """Parse the literal string opening at ``start``; return content and end offset."""
    out = bytearray()
    pos = start + 1
    size = len(data)
    while pos < size:
        c = data[pos]
        if c == 0x29:  # ')'
            break
        if c == 0x28:  # '(' opens a balanced inner string, kept verbatim
            _, end = _literal_body(data, pos)
            out += data[pos:end]
            pos = end
            continue
        if c != 0x5C:
            match = _PLAIN.match(data, pos)
            out += match.group()
            pos = match.end()
            continue
        # Backslash escape.
        if pos + 1 >= size:
            break
        nxt = data[pos + 1]
        if nxt in _ESCAPES:
            out.append(_ESCAPES[nxt])
            pos += 2
            continue
        octal = _OCTAL.match(data, pos + 1)
        if octal is not None:
            value = int(octal.group(), 8)
            if value > 0xFF:
                break
            out.append(value)
            pos = octal.end()
            continue
        if is_whitespace(nxt):
            pos = _WHITESPACE_RUN.match(data, pos + 1).end()
            continue
        break
    if pos < size and data[pos] == 0x29:
        return bytes(out), pos + 1
    raise ParseError("unterminated or malformed literal string", data[start:])


def _decode_literal(content: bytes) -> LiteralString:
    if content.startswith(_UTF16_BOM):
        if len(content) % 2:
            content += b"\x00"
        return LiteralString(content.decode("utf-16-be", errors="replace"))
    return LiteralString(content.decode("utf-8", errors="replace"))


def _hexadecimal(data: bytes) -> tuple[HexString, bytes]:
    match = _HEX_STRING.match(data)
    if match is None:
        raise ParseError("malformed or unterminated hexadecimal string", data)
    digits = bytes(b for b in match.group(1) if not is_whitespace(b))
    if len(digits) % 2:
        digits += b"0"
    return HexString(bytes.fromhex(digits.decode("ascii"))), data[match.end():]