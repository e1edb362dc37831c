"""RADIUS dictionary parsing and attribute registry.

Loads "Radiator format" dictionary files (``ATTRIBUTE``, ``VALUE``,
``VENDOR``, ``VENDORATTR`` and ``$INCLUDE`` lines) into a
:class:`DictionaryRegistry` that codecs query for attribute names, codes,
value kinds and enumerated labels.
"""
from __future__ import annotations

__version__ = "0.1.0"

from .attribute import VENDOR_SPECIFIC_CODE, AttributeType, DataKind, Vendor, resolve_data_kind
from .defaults import load_default_registry
from .errors import (
    DictionaryDecodeError,
    DictionaryError,
    DictionaryParseError,
    DictionarySyntaxError,
    IncludeCycleError,
    IncludeNotFoundError,
    UnresolvedReferenceError,
)
from .parser import DictionaryParser, ParserOptions, parse_dictionary, parse_dictionary_file
from .registry import DictionaryRegistry, RegistryValidator

__all__ = [
    "VENDOR_SPECIFIC_CODE",
    "AttributeType",
    "DataKind",
    "Vendor",
    "resolve_data_kind",
    "load_default_registry",
    "DictionaryDecodeError",
    "DictionaryError",
    "DictionaryParseError",
    "DictionarySyntaxError",
    "IncludeCycleError",
    "IncludeNotFoundError",
    "UnresolvedReferenceError",
    "DictionaryParser",
    "ParserOptions",
    "parse_dictionary",
    "parse_dictionary_file",
    "DictionaryRegistry",
    "RegistryValidator",
]
