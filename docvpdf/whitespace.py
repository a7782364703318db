"""Lexical helpers: whitespace, delimiters, end-of-line markers and comments."""

from __future__ import annotations

import re

WHITESPACE = b"\x00\t\n\x0c\r "
DELIMITERS = b"()<>[]{}/%"

_WHITESPACE_SET = frozenset(WHITESPACE)
_DELIMITER_SET = frozenset(DELIMITERS)
_COMMENT = re.compile(rb"%[^\r\n]+")


class ParseError(ValueError):
    """Raised when input does not match the expected syntax."""

    def __init__(self, message: str, data: bytes = b""):
        super().__init__(message)
        self.data = bytes(data)


def is_whitespace(c: int) -> bool:
    """Return True for NUL, TAB, LF, FF, CR and SPACE."""
    return c in _WHITESPACE_SET


def is_delimiter(c: int) -> bool:
    """Return True for the delimiter characters ( ) < > [ ] { } / %."""
    return c in _DELIMITER_SET


def whitespace(data: bytes) -> bytes:
    """Consume one or more whitespace bytes and return the rest of the input."""
    data = bytes(data)
    rest = data.lstrip(WHITESPACE)
    if len(rest) == len(data):
        raise ParseError("expected whitespace", data)
    return rest


def eol(data: bytes) -> bytes:
    """Consume one end-of-line marker (CRLF, CR or LF) and return the rest."""
    data = bytes(data)
    if data.startswith(b"\r\n"):
        return data[2:]
    if data[:1] in (b"\r", b"\n"):
        return data[1:]
    raise ParseError("expected end of line", data)


def comment(data: bytes) -> bytes:
    """Consume a non-empty '%' comment and its end-of-line marker; return the rest."""
    data = bytes(data)
    match = _COMMENT.match(data)
    if match is None:
        raise ParseError("expected a comment", data)
    try:
        return eol(data[match.end():])
    except ParseError as exc:
        raise ParseError("comment is not terminated by an end of line", data) from exc