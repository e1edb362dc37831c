"""Attribute type descriptors for RADIUS dictionaries.

Defines the closed set of value kinds an attribute may carry and the
:class:`AttributeType` record that the parser registers for every
``ATTRIBUTE`` and ``VENDORATTR`` line.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

VENDOR_SPECIFIC_CODE = 26
"""Attribute code of the Vendor-Specific container (RFC 2865, section 5.26)."""


class DataKind(str, Enum):
    """Enumerates the value kinds understood by downstream codecs."""

    OCTETS = "octets"
    STRING = "string"
    INTEGER = "integer"
    IPADDR = "ipaddr"
    VENDOR_SPECIFIC = "vendor-specific"


_TYPE_NAMES = {
    "string": DataKind.STRING,
    "octets": DataKind.OCTETS,
    "integer": DataKind.INTEGER,
    "date": DataKind.INTEGER,
    "ipaddr": DataKind.IPADDR,
}


def resolve_data_kind(type_name: str) -> DataKind:
    """Map a dictionary type name onto a :class:`DataKind`.

    Unknown names fall back to :attr:`DataKind.OCTETS`. The container kind is
    never returned here; it is selected from the attribute code instead.
    """

    kind = _TYPE_NAMES.get(type_name.lower())
    if kind is None:
        logger.debug("unknown attribute type %r, treating as octets", type_name)
        return DataKind.OCTETS
    return kind


@dataclass(slots=True)
class Vendor:
    """A vendor scope for vendor-specific attributes."""

    vendor_id: int
    name: str


@dataclass(slots=True)
class AttributeType:
    """Describes one named and coded attribute.

    Attributes:
        code: On-wire attribute number, scoped to ``vendor_id`` when set.
        name: Symbolic name, unique within its namespace.
        kind: Value kind used by codecs to pick an encoding.
        vendor_id: Owning vendor, or ``None`` for the global namespace.
        enumeration: Integer value to symbolic name, filled by ``VALUE`` lines.
    """

    code: int
    name: str
    kind: DataKind = DataKind.OCTETS
    vendor_id: Optional[int] = None
    enumeration: dict[int, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("attribute name must not be empty")

    @property
    def is_vendor_specific(self) -> bool:
        """Return True when this type is the vendor-specific container."""

        return self.kind is DataKind.VENDOR_SPECIFIC

    def add_enumeration_value(self, value: int, name: str) -> None:
        """Bind ``name`` to ``value``, replacing any previous binding."""

        if not name:
            raise ValueError("enumeration name must not be empty")
        self.enumeration[value] = name

    def enumeration_name(self, value: int) -> Optional[str]:
        return self.enumeration.get(value)

    def enumeration_value(self, name: str) -> Optional[int]:
        """Return the value bound to ``name``, if any."""

        for value, label in self.enumeration.items():
            if label == name:
                return value
        return None

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "name": self.name,
            "kind": self.kind.value,
            "vendor_id": self.vendor_id,
            "values": {str(value): label for value, label in sorted(self.enumeration.items())},
        }
