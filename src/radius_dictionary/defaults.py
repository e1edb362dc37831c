"""Access to the dictionary bundled with the package."""
from __future__ import annotations

from importlib import resources
from typing import Optional

from .parser import ParserOptions, parse_dictionary
from .registry import DictionaryRegistry

DEFAULT_DICTIONARY = "default.dict"


def load_default_registry(
    registry: Optional[DictionaryRegistry] = None, *, options: Optional[ParserOptions] = None
) -> DictionaryRegistry:
    """Return a registry filled from the bundled RFC 2865/2866/2869 dictionary.

    A new registry is built on every call unless one is passed in.
    """

    resource = resources.files(__package__).joinpath("data").joinpath(DEFAULT_DICTIONARY)
    with resource.open("r", encoding="utf-8") as handle:
        return parse_dictionary(handle, registry, options=options, source_name=DEFAULT_DICTIONARY)
