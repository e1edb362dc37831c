"""Line parser for RADIUS dictionary files.

Recognised directives, one per line, fields separated by whitespace::

    ATTRIBUTE   <name> <code> <type>
    VALUE       <attribute> <label> <value>
    VENDOR      <vendor-id> <vendor-name>
    VENDORATTR  <vendor-id> <name> <code> <type>
    $INCLUDE    <path>

Keywords are matched case-insensitively. Blank lines and lines starting with
``#`` are skipped. The first malformed line aborts the whole load.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, TextIO, Union

from .attribute import VENDOR_SPECIFIC_CODE, AttributeType, DataKind, resolve_data_kind
from .errors import (
    DictionaryDecodeError,
    DictionarySyntaxError,
    IncludeCycleError,
    IncludeNotFoundError,
    UnresolvedReferenceError,
)
from .registry import DictionaryRegistry

logger = logging.getLogger(__name__)

Opener = Callable[[Path], TextIO]
LineSource = Union[str, Iterable[str]]

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(slots=True, frozen=True)
class ParserOptions:
    """Tunables for :class:`DictionaryParser`.

    Attributes:
        encoding: Text encoding used when the parser opens files itself.
        include_dir: Base for relative ``$INCLUDE`` paths found in sources
            that were not opened from a file. Defaults to the working directory.
        relative_to_including_file: Resolve relative ``$INCLUDE`` paths against
            the directory of the file containing the directive.
        max_include_depth: Maximum nesting of ``$INCLUDE`` directives.
    """

    encoding: str = "utf-8"
    include_dir: Optional[Path] = None
    relative_to_including_file: bool = True
    max_include_depth: int = 32


@dataclass(slots=True, frozen=True)
class _Frame:
    """Where the lines currently being parsed come from."""

    name: Optional[str]
    directory: Optional[Path]
    depth: int = 0


class DictionaryParser:
    """Populates a :class:`DictionaryRegistry` from dictionary text.

    The registry is either supplied by the caller, in which case it is updated
    in place, or created empty. Included files are parsed into the same
    registry. Files opened by the parser are always closed again; streams
    handed in by the caller are left open.
    """

    def __init__(
        self,
        registry: Optional[DictionaryRegistry] = None,
        *,
        options: Optional[ParserOptions] = None,
        opener: Optional[Opener] = None,
    ) -> None:
        self.registry = registry if registry is not None else DictionaryRegistry()
        self._options = options or ParserOptions()
        self._opener = opener or self._open
        self._active: list[Path] = []

    # ------------------------------------------------------------------ API
    def parse(self, source: LineSource, source_name: Optional[str] = None) -> DictionaryRegistry:
        """Parse an iterable of lines, or a whole document given as ``str``."""

        if isinstance(source, str):
            source = source.splitlines()
        self._parse_lines(source, _Frame(name=source_name, directory=None))
        return self.registry

    def parse_file(self, path: Union[str, Path]) -> DictionaryRegistry:
        """Open ``path`` and parse it, closing the file on every exit path."""

        path = Path(path)
        with self._opener(path) as handle:
            self._parse_file_lines(handle, path, depth=0)
        return self.registry

    # ------------------------------------------------------------- internals
    def _open(self, path: Path) -> TextIO:
        return path.open("r", encoding=self._options.encoding)

    def _parse_file_lines(self, lines: Iterable[str], path: Path, depth: int) -> None:
        self._active.append(path.resolve())
        try:
            self._parse_lines(lines, _Frame(name=str(path), directory=path.parent, depth=depth))
        finally:
            self._active.pop()
        logger.info(
            "loaded %s: %d attributes, %d vendors so far",
            path,
            len(self.registry),
            len(self.registry.vendors()),
        )

    def _parse_lines(self, lines: Iterable[str], frame: _Frame) -> None:
        for line_number, raw in _numbered(lines, frame):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            keyword, *fields = line.split()
            keyword = keyword.upper()
            if keyword == "ATTRIBUTE":
                self._parse_attribute(fields, line_number, frame)
            elif keyword == "VALUE":
                self._parse_value(fields, line_number, frame)
            elif keyword == "VENDORATTR":
                self._parse_vendor_attribute(fields, line_number, frame)
            elif keyword == "VENDOR":
                self._parse_vendor(fields, line_number, frame)
            elif keyword == "$INCLUDE":
                self._include(fields, line_number, frame)
            else:
                raise DictionarySyntaxError(f"unknown line type: {keyword}", line_number, frame.name)

    def _parse_attribute(self, fields: list[str], line_number: int, frame: _Frame) -> None:
        _expect_fields(fields, 3, line_number, frame)
        name, code_str, type_name = fields
        code = _parse_int(code_str, line_number, frame)

        if code == VENDOR_SPECIFIC_CODE:
            kind = DataKind.VENDOR_SPECIFIC
        else:
            kind = resolve_data_kind(type_name)
        self.registry.add_attribute_type(AttributeType(code=code, name=name, kind=kind))

    def _parse_value(self, fields: list[str], line_number: int, frame: _Frame) -> None:
        _expect_fields(fields, 3, line_number, frame)
        attribute_name, label, value_str = fields

        attribute_type = self.registry.get_attribute_type_by_name(attribute_name)
        if attribute_type is None:
            raise UnresolvedReferenceError(attribute_name, line_number, frame.name)
        attribute_type.add_enumeration_value(_parse_int(value_str, line_number, frame), label)

    def _parse_vendor_attribute(self, fields: list[str], line_number: int, frame: _Frame) -> None:
        _expect_fields(fields, 4, line_number, frame)
        vendor_str, name, code_str, type_name = fields
        vendor_id = _parse_int(vendor_str, line_number, frame)
        code = _parse_int(code_str, line_number, frame)

        attribute_type = AttributeType(
            code=code,
            name=name,
            kind=resolve_data_kind(type_name),
            vendor_id=vendor_id,
        )
        self.registry.add_attribute_type(attribute_type)

    def _parse_vendor(self, fields: list[str], line_number: int, frame: _Frame) -> None:
        _expect_fields(fields, 2, line_number, frame)
        vendor_str, vendor_name = fields
        self.registry.add_vendor(_parse_int(vendor_str, line_number, frame), vendor_name)

    def _include(self, fields: list[str], line_number: int, frame: _Frame) -> None:
        _expect_fields(fields, 1, line_number, frame)
        target = fields[0]
        path = self._resolve_include(target, frame)

        if path.resolve() in self._active:
            raise IncludeCycleError(target, line_number, frame.name)
        if frame.depth >= self._options.max_include_depth:
            raise IncludeCycleError(
                target,
                line_number,
                frame.name,
                reason=f"include depth exceeds {self._options.max_include_depth} at '{target}'",
            )

        logger.debug("including %s from line %d of %s", path, line_number, frame.name or "<stream>")
        try:
            handle = self._opener(path)
        except OSError as exc:
            raise IncludeNotFoundError(target, line_number, frame.name) from exc
        with handle:
            self._parse_file_lines(handle, path, depth=frame.depth + 1)

    def _resolve_include(self, target: str, frame: _Frame) -> Path:
        path = Path(target)
        if path.is_absolute():
            return path
        if self._options.relative_to_including_file and frame.directory is not None:
            return frame.directory / path
        if self._options.include_dir is not None:
            return self._options.include_dir / path
        return path


def _numbered(lines: Iterable[str], frame: _Frame) -> Iterator[tuple[int, str]]:
    # Streams decode lazily, so a bad byte surfaces while fetching the next line.
    iterator = iter(lines)
    line_number = 0
    while True:
        try:
            raw = next(iterator)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            raise DictionaryDecodeError(exc.encoding, line_number + 1, frame.name) from exc
        line_number += 1
        yield line_number, raw


def _expect_fields(fields: list[str], count: int, line_number: int, frame: _Frame) -> None:
    if len(fields) != count:
        raise DictionarySyntaxError("syntax error", line_number, frame.name)


def _parse_int(token: str, line_number: int, frame: _Frame) -> int:
    if _INTEGER.fullmatch(token) is None:
        raise DictionarySyntaxError(f"syntax error: invalid integer {token!r}", line_number, frame.name)
    return int(token)


def parse_dictionary(
    source: LineSource,
    registry: Optional[DictionaryRegistry] = None,
    *,
    options: Optional[ParserOptions] = None,
    source_name: Optional[str] = None,
) -> DictionaryRegistry:
    """Parse ``source`` into ``registry`` (or a new one) and return it."""

    return DictionaryParser(registry, options=options).parse(source, source_name)


def parse_dictionary_file(
    path: Union[str, Path],
    registry: Optional[DictionaryRegistry] = None,
    *,
    options: Optional[ParserOptions] = None,
) -> DictionaryRegistry:
    """Parse the dictionary file at ``path`` into ``registry`` (or a new one)."""

    return DictionaryParser(registry, options=options).parse_file(path)
