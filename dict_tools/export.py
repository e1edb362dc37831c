"""Dictionary file → JSON normalization pipeline."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, Optional

from radius_dictionary import DictionaryRegistry, parse_dictionary_file


@dataclass(slots=True)
class AttributeRow:
    """Flattened representation of one attribute type."""

    vendor_id: Optional[int]
    vendor_name: Optional[str]
    code: int
    name: str
    kind: str
    values: dict[str, str]


def export_dictionary(dict_path: Path, output_path: Path) -> None:
    """Normalize a dictionary file, includes resolved, into structured JSON."""

    registry = parse_dictionary_file(dict_path)
    payload = [asdict(row) for row in _rows(registry)]
    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def _rows(registry: DictionaryRegistry) -> Iterable[AttributeRow]:
    scopes: list[Optional[int]] = [None, *registry.vendor_ids()]
    for vendor_id in scopes:
        vendor_name = registry.get_vendor_name(vendor_id) if vendor_id is not None else None
        for attribute_type in registry.attribute_types(vendor_id):
            yield AttributeRow(
                vendor_id=vendor_id,
                vendor_name=vendor_name,
                code=attribute_type.code,
                name=attribute_type.name,
                kind=attribute_type.kind.value,
                values={str(value): label for value, label in sorted(attribute_type.enumeration.items())},
            )
