# docvpdf

Low-level pieces for reading PDF files in pure Python, using only the
standard library.

## What is inside

- `docvpdf.objects`: the PDF object model.
  - `Object` is a frozen value with a `kind` (an `ObjectKind`) and a `value`.
    Build objects with the class methods `boolean`, `integer`, `real`,
    `string`, `name`, `null`, `array`, `dictionary`, `stream`,
    `indirect_definition` and `indirect_reference`.
  - Accessors `as_integer`, `as_float`, `as_array`, `as_string`,
    `as_dictionary`, `as_indirect_ref` and `as_stream` raise `ObjectError`
    when the object has a different kind. `as_integer()` also rejects
    negative values unless called with `signed=True`. `as_dictionary()` and
    `as_stream()` look through an indirect definition to the object inside.
  - `PdfString` has two forms: `LiteralString` (decoded text) and `HexString`
    (raw bytes). `as_str()` returns text with any leading byte order marks
    removed; for a `HexString` whose bytes are not UTF-8 it raises
    `StringError`. `as_bytes()` returns the raw bytes.
  - `Dictionary` is a read-only mapping from names (without the leading `/`)
    to objects, kept in key order; `get(key)` returns `None` for a missing key.
  - `IndirectReference` (`id`, `gen_id`, printed as `"1 0 R"`) and
    `IndirectObject` (`id`, `gen_id`, `value`).
- `docvpdf.whitespace`: `is_whitespace` and `is_delimiter` classify single
  bytes; `whitespace`, `eol` and `comment` each consume their construct at
  the start of the input, return the bytes that are left and raise
  `ParseError` when nothing matches.
- `docvpdf.string_parser`: `pdf_string(data)` reads a literal `(...)` or
  hexadecimal `<...>` string and returns the parsed string together with the
  remaining bytes. Literal strings handle the standard escapes, octal
  escapes, escaped line breaks and balanced inner parentheses; content that
  starts with `FE FF` is decoded as UTF-16BE. Hexadecimal strings ignore
  whitespace and pad an odd final digit with `0`.
- `docvpdf.stream`: `Stream` holds a `Dictionary` and `data`;
  `process_filters()` requires a `/Length` entry and decodes the data in
  place according to `/Filter`. Supported are no filter, `FlateDecode` and
  arrays of these (`FilterPipeline`). `parse_filter` and `apply_filter` can
  be used on their own; failures raise `StreamError`.
- `docvpdf.filehash`: `FileHash.from_object(obj)` reads the two-string
  `/ID` array of a trailer and raises `HashError` for anything else.
  `str()` of it gives both identifiers as lowercase hex joined by `:`, with
  a `-` before every eighth byte.

## Example

```python
from docvpdf.string_parser import pdf_string

value, rest = pdf_string(b"(Hello\\040World) 1 0 R")
print(value.as_str())   # Hello World
print(rest)             # b' 1 0 R'
```

```python
import zlib
from docvpdf.objects import Dictionary, Object
from docvpdf.stream import Stream

stream = Stream(
    Dictionary({"Length": Object.integer(5), "Filter": Object.name("FlateDecode")}),
    zlib.compress(b"hello"),
)
stream.process_filters()
print(stream.data)      # b'hello'
```

## What it does not do

This is a library of parts, not a PDF reader. It does not open files, find
or read cross-reference tables, parse whole objects (numbers, names, arrays,
dictionaries, streams) from bytes, or read document information. Filters
other than `FlateDecode` and encrypted documents are not supported. There is
no command-line tool or viewer.

## Running the tests

```
pip install -e .[test]
pytest
```