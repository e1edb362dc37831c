"""In-memory registry of attribute types and vendors."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..attribute import AttributeType, Vendor

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Namespace:
    """Name and code indexes for one attribute scope."""

    by_name: dict[str, AttributeType] = field(default_factory=dict)
    by_code: dict[int, AttributeType] = field(default_factory=dict)

    def add(self, attribute_type: AttributeType) -> None:
        # Last write wins per key. A type displaced from one index stays
        # reachable through the other, so aliases sharing a code keep their names.
        previous = self.by_name.get(attribute_type.name)
        if previous is not None and previous is not attribute_type:
            logger.debug("redefining attribute %s (code %d)", previous.name, previous.code)
        previous = self.by_code.get(attribute_type.code)
        if previous is not None and previous is not attribute_type:
            logger.debug(
                "code %d now resolves to %s instead of %s",
                attribute_type.code,
                attribute_type.name,
                previous.name,
            )

        self.by_name[attribute_type.name] = attribute_type
        self.by_code[attribute_type.code] = attribute_type

    def __iter__(self) -> Iterator[AttributeType]:
        unique = {id(at): at for at in (*self.by_name.values(), *self.by_code.values())}
        return iter(sorted(unique.values(), key=lambda at: (at.code, at.name)))


class DictionaryRegistry:
    """Lookup helper for attribute types, vendors and vendor namespaces.

    The global namespace holds attributes declared with ``ATTRIBUTE``. Each
    vendor owns a separate namespace for its ``VENDORATTR`` declarations; a
    vendor's namespace is created on first use, whether or not a ``VENDOR``
    line named it.
    """

    def __init__(self) -> None:
        self._global = _Namespace()
        self._vendor_names: dict[int, str] = {}
        self._vendor_spaces: dict[int, _Namespace] = {}

    # ------------------------------------------------------------------ writes
    def add_attribute_type(self, attribute_type: AttributeType) -> None:
        """Register a type in the global or its vendor's namespace."""

        if attribute_type.vendor_id is None:
            self._global.add(attribute_type)
        else:
            self._vendor_space(attribute_type.vendor_id).add(attribute_type)

    def add_vendor(self, vendor_id: int, vendor_name: str) -> None:
        """Register or rename a vendor and make sure its namespace exists."""

        if not vendor_name:
            raise ValueError("vendor name must not be empty")
        self._vendor_names[vendor_id] = vendor_name
        self._vendor_space(vendor_id)

    # ----------------------------------------------------------------- lookups
    def get_attribute_type_by_name(self, name: str) -> Optional[AttributeType]:
        """Return a global attribute type by name when available."""

        return self._global.by_name.get(name)

    def get_attribute_type_by_code(
        self, code: int, vendor_id: Optional[int] = None
    ) -> Optional[AttributeType]:
        """Return the type registered for ``code`` in the selected namespace."""

        if vendor_id is None:
            return self._global.by_code.get(code)
        space = self._vendor_spaces.get(vendor_id)
        if space is None:
            return None
        return space.by_code.get(code)

    def get_vendor_attribute_type_by_name(
        self, vendor_id: int, name: str
    ) -> Optional[AttributeType]:
        space = self._vendor_spaces.get(vendor_id)
        if space is None:
            return None
        return space.by_name.get(name)

    def get_vendor_name(self, vendor_id: int) -> Optional[str]:
        return self._vendor_names.get(vendor_id)

    def get_vendor_id(self, vendor_name: str) -> Optional[int]:
        """Return the first vendor id registered under ``vendor_name``."""

        for vendor_id, name in self._vendor_names.items():
            if name == vendor_name:
                return vendor_id
        return None

    def vendors(self) -> list[Vendor]:
        """Return declared vendors ordered by id."""

        return [Vendor(vendor_id, name) for vendor_id, name in sorted(self._vendor_names.items())]

    def attribute_types(self, vendor_id: Optional[int] = None) -> list[AttributeType]:
        """Return the types of one namespace ordered by code."""

        if vendor_id is None:
            return list(self._global)
        space = self._vendor_spaces.get(vendor_id)
        if space is None:
            return []
        return list(space)

    def vendor_ids(self) -> list[int]:
        """Return every vendor id that owns a namespace, declared or not."""

        return sorted(self._vendor_spaces)

    def to_dict(self) -> dict[str, object]:
        """Return a plain snapshot of the registry contents."""

        return {
            "attributes": [at.to_dict() for at in self._global],
            "vendors": [
                {
                    "vendor_id": vendor_id,
                    "name": self._vendor_names.get(vendor_id),
                    "attributes": [at.to_dict() for at in self._vendor_spaces[vendor_id]],
                }
                for vendor_id in self.vendor_ids()
            ],
        }

    def __len__(self) -> int:
        return len(self._global.by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._global.by_name

    def _vendor_space(self, vendor_id: int) -> _Namespace:
        space = self._vendor_spaces.get(vendor_id)
        if space is None:
            space = self._vendor_spaces[vendor_id] = _Namespace()
        return space
