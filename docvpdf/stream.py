"""PDF stream objects and decoding of their filters."""

from __future__ import annotations

import enum
import zlib
from dataclasses import dataclass, field
from typing import Union

from .objects import Dictionary, Object, ObjectError, ObjectKind


class StreamError(ValueError):
    """Raised when a stream's dictionary or data cannot be processed."""


class FilterType(enum.Enum):
    """A single stream filter."""

    NONE = "None"
    FLATE_DECODE = "FlateDecode"


@dataclass(frozen=True)
class FilterPipeline:
    """Several filters applied one after another, in the order given."""

    filters: tuple["Filter", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))


Filter = Union[FilterType, FilterPipeline]

_SUPPORTED_FILTERS = {"FlateDecode": FilterType.FLATE_DECODE}


@dataclass
class Stream:
    """A stream: a dictionary describing it and its raw bytes."""

    dictionary: Dictionary = field(default_factory=Dictionary)
    data: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.dictionary, Dictionary):
            self.dictionary = Dictionary(self.dictionary)
        self.data = bytes(self.data)

    def process_filters(self) -> None:
        """Decode the stream data in place according to its /Filter entry."""
        length_object = self.dictionary.get("Length")
        if length_object is None:
            raise StreamError("Stream content length not present")
        try:
            content_length = length_object.as_integer()
        except ObjectError as exc:
            raise StreamError("Unexpected dictionary value") from exc

        filter_object = self.dictionary.get("Filter")
        filter_type = FilterType.NONE if filter_object is None else parse_filter(filter_object)

        self.data = apply_filter(self.data, filter_type, content_length)


def parse_filter(filter_object: Object) -> Filter:
    """Turn a /Filter value (a name or an array of names) into a filter description."""
    if filter_object.kind is ObjectKind.NAME:
        try:
            return _SUPPORTED_FILTERS[filter_object.value]
        except KeyError:
            raise StreamError(f"Unsupported stream filter {filter_object.value}") from None
    if filter_object.kind is ObjectKind.ARRAY:
        return FilterPipeline(tuple(parse_filter(item) for item in filter_object.as_array()))
    raise StreamError(f"Unsupported stream filters object. Object =  {filter_object!r}")


def apply_filter(data: bytes, filter_type: Filter, content_length: int) -> bytes:
    """Decode ``data`` with ``filter_type``; ``content_length`` is a size hint."""
    if isinstance(filter_type, FilterPipeline):
        result = bytes(data)
        for inner in filter_type.filters:
            result = apply_filter(result, inner, content_length)
        return result
    if filter_type is FilterType.NONE:
        return bytes(data)
    if filter_type is FilterType.FLATE_DECODE:
        return _inflate(data)
    raise StreamError(f"Unsupported stream filter {filter_type!r}")


def _inflate(data: bytes) -> bytes:
    decoder = zlib.decompressobj()
    try:
        result = decoder.decompress(bytes(data))
        result += decoder.flush()
    except zlib.error as exc:
        raise StreamError("Error during decompression") from exc
    if not decoder.eof:
        raise StreamError("Error during decompression")
    return result