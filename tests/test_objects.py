import pytest

from docvpdf.objects import (
    Dictionary,
    HexString,
    IndirectObject,
    IndirectReference,
    LiteralString,
    Object,
    ObjectError,
    ObjectKind,
    StringError,
)


def test_literal_string_trims_bom():
    s = LiteralString("\ufeffD:20211230134641+11'00'")
    assert s.as_str() == "D:20211230134641+11'00'"


def test_literal_string_bytes_round_trip():
    s = LiteralString("hello")
    assert s.as_bytes() == b"hello"
    assert s.as_bytes().decode("utf-8") == s.as_str()


def test_hex_string_as_str_and_bytes():
    s = HexString(bytes([0x48, 0x65, 0x6C, 0x6C, 0x6F]))
    assert s.as_str() == "Hello"
    assert s.as_bytes() == b"Hello"


def test_hex_string_trims_utf8_bom():
    s = HexString("\ufeffabc".encode("utf-8"))
    assert s.as_str() == "abc"


def test_hex_string_invalid_utf8():
    s = HexString(b"\xff\xfe\x00")
    with pytest.raises(StringError):
        s.as_str()


def test_literal_and_hex_differ():
    assert LiteralString("a") != HexString(b"a")
    assert LiteralString("a") == LiteralString("a")


def test_indirect_reference_display():
    assert str(IndirectReference(1, 0)) == "1 0 R"


def test_indirect_reference_ordering():
    refs = [IndirectReference(3, 0), IndirectReference(1, 2), IndirectReference(1, 0)]
    assert sorted(refs) == [
        IndirectReference(1, 0),
        IndirectReference(1, 2),
        IndirectReference(3, 0),
    ]
    assert IndirectReference() == IndirectReference(0, 0)


def test_dictionary_get_and_sorting():
    d = Dictionary({"Type": Object.name("Catalog"), "Pages": Object.integer(2)})
    assert d.get("Type") == Object.name("Catalog")
    assert d.get("Missing") is None
    assert list(d) == sorted(["Type", "Pages"])
    assert len(d) == 2


def test_dictionary_from_pairs_equals_mapping():
    pairs = [("Length", Object.integer(4)), ("Type", Object.name("XObject"))]
    assert Dictionary(pairs) == Dictionary(dict(pairs))


def test_integer_round_trip():
    assert Object.integer(42).as_integer() == 42
    assert Object.integer(-17).as_integer(signed=True) == -17


def test_negative_integer_unsigned_fails():
    with pytest.raises(ObjectError):
        Object.integer(-1).as_integer()


def test_integer_out_of_range_rejected():
    with pytest.raises(ValueError):
        Object.integer(2**63)


def test_as_integer_wrong_type():
    with pytest.raises(ObjectError) as info:
        Object.real(3.14).as_integer()
    assert info.value.expected == "Integer"


def test_as_float():
    assert Object.real(3.14).as_float() == 3.14
    with pytest.raises(ObjectError):
        Object.integer(3).as_float()


def test_null():
    assert Object.null().is_null() is True
    assert Object.integer(42).is_null() is False


def test_as_array():
    items = [Object.null(), Object.integer(1)]
    assert Object.array(items).as_array() == tuple(items)
    with pytest.raises(ObjectError):
        Object.null().as_array()


def test_as_string():
    obj = Object.string("hello")
    assert obj.as_string() == LiteralString("hello")
    assert Object.string(b"\x01").as_string() == HexString(b"\x01")
    with pytest.raises(ObjectError):
        Object.name("hello").as_string()


def test_as_dictionary_direct_and_indirect():
    d = Dictionary({"Key": Object.name("Value")})
    assert Object.dictionary(d).as_dictionary() == d
    definition = IndirectObject(5, 0, Object.dictionary(d))
    assert Object.indirect_definition(definition).as_dictionary() == d


def test_as_dictionary_indirect_wrong_inner():
    definition = IndirectObject(5, 0, Object.integer(1))
    obj = Object.indirect_definition(definition)
    with pytest.raises(ObjectError) as info:
        obj.as_dictionary()
    assert info.value.obj == obj


def test_as_indirect_ref():
    ref = IndirectReference(1, 0)
    assert Object.indirect_reference(ref).as_indirect_ref() == ref
    with pytest.raises(ObjectError):
        Object.integer(1).as_indirect_ref()


def test_as_stream_direct_and_indirect():
    payload = ("dictionary", b"data")
    assert Object.stream(payload).as_stream() == payload
    definition = IndirectObject(7, 0, Object.stream(payload))
    assert Object.indirect_definition(definition).as_stream() == payload
    with pytest.raises(ObjectError):
        Object.null().as_stream()


def test_object_kinds():
    assert Object.boolean(True).kind is ObjectKind.BOOLEAN
    assert Object.name("Type").kind is ObjectKind.NAME
    assert Object.real(1).kind is ObjectKind.REAL


def test_boolean_requires_bool():
    with pytest.raises(TypeError):
        Object.boolean(1)


def test_indirect_object_reference():
    definition = IndirectObject(3, 1, Object.null())
    assert definition.reference == IndirectReference(3, 1)
    assert definition.value.is_null()