"""Exceptions raised while loading a dictionary."""
from __future__ import annotations

from typing import Optional


class DictionaryError(Exception):
    """Base class for dictionary loading failures."""


class DictionaryParseError(DictionaryError, ValueError):
    """A fault at a specific line of a dictionary source.

    Attributes:
        reason: Short human readable category, e.g. ``"syntax error"``.
        line_number: 1-based line number in the source being parsed.
        source: Name of that source (a file path) when known.
    """

    def __init__(self, reason: str, line_number: int, source: Optional[str] = None) -> None:
        self.reason = reason
        self.line_number = line_number
        self.source = source
        message = f"{reason}, line {line_number}"
        if source is not None:
            message += f" in {source}"
        super().__init__(message)


class DictionarySyntaxError(DictionaryParseError):
    """Wrong token count, malformed integer or unknown line type."""


class UnresolvedReferenceError(DictionaryParseError):
    """A ``VALUE`` line names an attribute that was not declared before it."""

    def __init__(self, attribute_name: str, line_number: int, source: Optional[str] = None) -> None:
        self.attribute_name = attribute_name
        super().__init__(f"unknown attribute type: {attribute_name}", line_number, source)


class IncludeNotFoundError(DictionaryParseError):
    """An ``$INCLUDE`` target does not exist or cannot be opened."""

    def __init__(self, path: str, line_number: int, source: Optional[str] = None) -> None:
        self.path = path
        super().__init__(f"included file '{path}' not found", line_number, source)


class IncludeCycleError(DictionaryParseError):
    """An ``$INCLUDE`` re-enters a file being parsed or nests too deeply."""

    def __init__(
        self, path: str, line_number: int, source: Optional[str] = None, *, reason: Optional[str] = None
    ) -> None:
        self.path = path
        super().__init__(reason or f"include cycle through '{path}'", line_number, source)


class DictionaryDecodeError(DictionaryParseError):
    """A source cannot be decoded with the configured text encoding."""

    def __init__(self, encoding: str, line_number: int, source: Optional[str] = None) -> None:
        self.encoding = encoding
        super().__init__(f"cannot decode text as {encoding}", line_number, source)


__all__ = [
    "DictionaryError",
    "DictionaryParseError",
    "DictionarySyntaxError",
    "UnresolvedReferenceError",
    "IncludeNotFoundError",
    "IncludeCycleError",
    "DictionaryDecodeError",
]
