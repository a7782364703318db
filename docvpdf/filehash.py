"""The file identifier pair stored under a trailer's /ID entry."""

from __future__ import annotations

from dataclasses import dataclass

from .objects import Object, ObjectError


class HashError(ValueError):
    """Raised when an /ID value is not a pair of strings."""

    @classmethod
    def invalid_object(cls) -> "HashError":
        return cls("Object conversion error")

    @classmethod
    def invalid_array_size(cls, expected: int, got: int) -> "HashError":
        error = cls(f"Wrong array size. Expected = {expected}; Got = {got}")
        error.expected = expected
        error.got = got
        return error


def _format_hex(data: bytes) -> str:
    """Hex digits of ``data``, with a dash before every 8th byte except the 32nd."""
    pieces = []
    for index, byte in enumerate(data):
        if index not in (0, 32) and index % 8 == 0:
            pieces.append("-")
        pieces.append(f"{byte:02x}")
    return "".join(pieces)


@dataclass(frozen=True)
class FileHash:
    """The initial and current identifiers of a file."""

    initial: bytes
    current: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "initial", bytes(self.initial))
        object.__setattr__(self, "current", bytes(self.current))

    @classmethod
    def from_object(cls, obj: Object) -> "FileHash":
        """Build the hash from an array object holding exactly two strings."""
        try:
            items = obj.as_array()
        except ObjectError as exc:
            raise HashError.invalid_object() from exc

        if len(items) != 2:
            raise HashError.invalid_array_size(2, len(items))

        try:
            initial, current = (item.as_string().as_bytes() for item in items)
        except ObjectError as exc:
            raise HashError.invalid_object() from exc

        return cls(initial, current)

    def __str__(self) -> str:
        return f"{_format_hex(self.initial)}:{_format_hex(self.current)}"