"""Pure-Python building blocks for reading PDF documents: objects, lexing, strings, streams and file identifiers."""

__version__ = "0.0.1"

__all__ = ["objects", "whitespace", "string_parser", "stream", "filehash"]