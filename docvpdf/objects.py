"""Core PDF object model: strings, references, dictionaries and objects."""

from __future__ import annotations

import abc
import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

_BOM = "\ufeff"
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class ObjectError(ValueError):
    """Raised when an object does not have the requested type or value."""

    def __init__(self, message: str, obj: "Object", expected: str | None = None):
        super().__init__(message)
        self.obj = obj
        self.expected = expected

    @classmethod
    def unexpected_type(cls, expected: str, got: "Object") -> "ObjectError":
        return cls(
            f"Unexpected object type. Expected = {expected}. Got = {got!r}",
            got,
            expected,
        )

    @classmethod
    def conversion(cls, obj: "Object") -> "ObjectError":
        return cls(f"Can't convert into the requested type. Object = {obj!r}", obj)


class StringError(ValueError):
    """Raised when a PDF string cannot be interpreted as text."""

    def __init__(self, data: bytes):
        super().__init__(f"Can't encode into UTF-8. Data = {list(data)!r}")
        self.data = data


class PdfString(abc.ABC):
    """Base class of the two PDF string forms."""

    @abc.abstractmethod
    def as_str(self) -> str:
        """Return the string as text, with any leading byte order marks removed."""

    @abc.abstractmethod
    def as_bytes(self) -> bytes:
        """Return the raw bytes of the string."""


@dataclass(frozen=True)
class LiteralString(PdfString):
    """A literal string, stored as decoded text."""

    text: str

    def as_str(self) -> str:
        return self.text.lstrip(_BOM)

    def as_bytes(self) -> bytes:
        return self.text.encode("utf-8")


@dataclass(frozen=True)
class HexString(PdfString):
    """A hexadecimal string, stored as decoded bytes."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def as_str(self) -> str:
        try:
            text = self.data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StringError(self.data) from exc
        return text.lstrip(_BOM)

    def as_bytes(self) -> bytes:
        return self.data


@dataclass(frozen=True, order=True)
class IndirectReference:
    """A reference ``id gen R`` to an indirect object."""

    id: int = 0
    gen_id: int = 0

    def __str__(self) -> str:
        return f"{self.id} {self.gen_id} R"


@dataclass(frozen=True)
class IndirectObject:
    """An indirect object definition ``id gen obj ... endobj``."""

    id: int
    gen_id: int
    value: "Object"

    @property
    def reference(self) -> IndirectReference:
        return IndirectReference(self.id, self.gen_id)


class Dictionary(Mapping):
    """A PDF dictionary mapping names (without the leading '/') to objects."""

    def __init__(
        self,
        records: Mapping[str, "Object"] | Iterable[tuple[str, "Object"]] = (),
    ):
        items = records.items() if isinstance(records, Mapping) else records
        self.records: dict[str, Object] = dict(sorted(dict(items).items()))

    def get(self, key: str) -> "Object | None":
        """Return the object stored under ``key``, or None when it is absent."""
        return self.records.get(key)

    def __getitem__(self, key: str) -> "Object":
        return self.records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:
        return f"Dictionary({self.records!r})"


class ObjectKind(enum.Enum):
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    REAL = "Real"
    STRING = "String"
    NAME = "Name"
    NULL = "Null"
    ARRAY = "Array"
    DICTIONARY = "Dictionary"
    STREAM = "Stream"
    INDIRECT_DEFINITION = "Indirect definition"
    INDIRECT_REFERENCE = "Indirect reference"


@dataclass(frozen=True)
class Object:
    """Any PDF object: a kind tag and the value it carries."""

    kind: ObjectKind
    value: Any = field(default=None)

    @classmethod
    def boolean(cls, value: bool) -> "Object":
        if not isinstance(value, bool):
            raise TypeError(f"boolean object needs a bool, got {value!r}")
        return cls(ObjectKind.BOOLEAN, value)

    @classmethod
    def integer(cls, value: int) -> "Object":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"integer object needs an int, got {value!r}")
        if not _I64_MIN <= value <= _I64_MAX:
            raise ValueError(f"integer {value} is out of the 64-bit range")
        return cls(ObjectKind.INTEGER, value)

    @classmethod
    def real(cls, value: float) -> "Object":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"real object needs a number, got {value!r}")
        return cls(ObjectKind.REAL, float(value))

    @classmethod
    def string(cls, value: Union[PdfString, str, bytes]) -> "Object":
        if isinstance(value, str):
            value = LiteralString(value)
        elif isinstance(value, (bytes, bytearray)):
            value = HexString(bytes(value))
        elif not isinstance(value, PdfString):
            raise TypeError(f"string object needs a PDF string, got {value!r}")
        return cls(ObjectKind.STRING, value)

    @classmethod
    def name(cls, value: str) -> "Object":
        if not isinstance(value, str):
            raise TypeError(f"name object needs a str, got {value!r}")
        return cls(ObjectKind.NAME, value)

    @classmethod
    def null(cls) -> "Object":
        return cls(ObjectKind.NULL, None)

    @classmethod
    def array(cls, items: Iterable["Object"]) -> "Object":
        return cls(ObjectKind.ARRAY, tuple(items))

    @classmethod
    def dictionary(
        cls, records: Union[Dictionary, Mapping[str, "Object"], Iterable[tuple[str, "Object"]]]
    ) -> "Object":
        if not isinstance(records, Dictionary):
            records = Dictionary(records)
        return cls(ObjectKind.DICTIONARY, records)

    @classmethod
    def stream(cls, stream: Any) -> "Object":
        return cls(ObjectKind.STREAM, stream)

    @classmethod
    def indirect_definition(cls, definition: IndirectObject) -> "Object":
        if not isinstance(definition, IndirectObject):
            raise TypeError(f"expected an IndirectObject, got {definition!r}")
        return cls(ObjectKind.INDIRECT_DEFINITION, definition)

    @classmethod
    def indirect_reference(cls, reference: IndirectReference) -> "Object":
        if not isinstance(reference, IndirectReference):
            raise TypeError(f"expected an IndirectReference, got {reference!r}")
        return cls(ObjectKind.INDIRECT_REFERENCE, reference)

    def is_null(self) -> bool:
        return self.kind is ObjectKind.NULL

    def as_integer(self, signed: bool = False) -> int:
        """Return the integer value; unless ``signed``, negative values are rejected."""
        if self.kind is not ObjectKind.INTEGER:
            raise ObjectError.unexpected_type("Integer", self)
        if not signed and self.value < 0:
            raise ObjectError.conversion(self)
        return self.value

    def as_float(self) -> float:
        if self.kind is not ObjectKind.REAL:
            raise ObjectError.unexpected_type("Real", self)
        return self.value

    def as_array(self) -> tuple["Object", ...]:
        if self.kind is not ObjectKind.ARRAY:
            raise ObjectError.unexpected_type("Array", self)
        return self.value

    def as_string(self) -> PdfString:
        if self.kind is not ObjectKind.STRING:
            raise ObjectError.unexpected_type("String", self)
        return self.value

    def as_dictionary(self) -> Dictionary:
        return self._unwrap(ObjectKind.DICTIONARY)

    def as_indirect_ref(self) -> IndirectReference:
        if self.kind is not ObjectKind.INDIRECT_REFERENCE:
            raise ObjectError.unexpected_type("Indirect reference", self)
        return self.value

    def as_stream(self) -> Any:
        return self._unwrap(ObjectKind.STREAM)

    def _unwrap(self, kind: ObjectKind) -> Any:
        if self.kind is kind:
            return self.value
        if self.kind is ObjectKind.INDIRECT_DEFINITION and self.value.value.kind is kind:
            return self.value.value.value
        raise ObjectError.unexpected_type(kind.value, self)