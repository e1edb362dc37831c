"""Attribute registry populated by the dictionary parser."""

from .memory import DictionaryRegistry
from .validation import RegistryValidator

__all__ = ["DictionaryRegistry", "RegistryValidator"]
