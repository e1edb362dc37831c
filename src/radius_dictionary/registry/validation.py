"""Validation helpers for a populated dictionary registry."""
from __future__ import annotations

from typing import Iterable

from ..attribute import VENDOR_SPECIFIC_CODE, AttributeType, DataKind
from .memory import DictionaryRegistry


class RegistryValidator:
    """Runs consistency checks that the parser itself does not enforce."""

    def __init__(self, registry: DictionaryRegistry) -> None:
        self._registry = registry

    def validate(self) -> Iterable[str]:
        """Yield validation finding strings."""

        for attribute_type in self._registry.attribute_types():
            if not 0 <= attribute_type.code <= 255:
                yield f"attribute {attribute_type.name} has code {attribute_type.code} outside 0-255"
            yield from self.validate_attribute_type(attribute_type)

        vendor_ids = self._registry.vendor_ids()
        container = self._registry.get_attribute_type_by_code(VENDOR_SPECIFIC_CODE)
        if vendor_ids and (container is None or not container.is_vendor_specific):
            yield f"vendor attributes declared but no Vendor-Specific attribute with code {VENDOR_SPECIFIC_CODE}"

        for vendor_id in vendor_ids:
            attribute_types = self._registry.attribute_types(vendor_id)
            if self._registry.get_vendor_name(vendor_id) is None:
                yield f"vendor {vendor_id} has attributes but no VENDOR declaration"
            for attribute_type in attribute_types:
                yield from self.validate_attribute_type(attribute_type)

    def validate_attribute_type(self, attribute_type: AttributeType) -> Iterable[str]:
        """Validate a single attribute type."""

        if attribute_type.enumeration and attribute_type.kind is not DataKind.INTEGER:
            yield f"attribute {attribute_type.name} has enumerated values but is of kind {attribute_type.kind.value}"
        if attribute_type.vendor_id is not None and attribute_type.is_vendor_specific:
            yield f"vendor attribute {attribute_type.name} cannot be a Vendor-Specific container"
