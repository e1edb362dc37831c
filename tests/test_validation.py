"""Tests for the registry consistency checks."""
from __future__ import annotations

from radius_dictionary import AttributeType, DataKind, RegistryValidator, parse_dictionary


def test_clean_registry_has_no_findings() -> None:
    registry = parse_dictionary(
        [
            "ATTRIBUTE Service-Type 6 integer",
            "ATTRIBUTE Vendor-Specific 26 octets",
            "VALUE Service-Type Login-User 1",
            "VENDOR 9 Acme",
            "VENDORATTR 9 Widget 5 string",
        ]
    )

    assert list(RegistryValidator(registry).validate()) == []


def test_findings_for_inconsistent_registry() -> None:
    registry = parse_dictionary(
        [
            "ATTRIBUTE Name 1 string",
            "VALUE Name Bob 1",
            "ATTRIBUTE Internal 1029 string",
            "VENDORATTR 9 Widget 5 string",
        ]
    )

    findings = list(RegistryValidator(registry).validate())

    assert findings == [
        "attribute Name has enumerated values but is of kind string",
        "attribute Internal has code 1029 outside 0-255",
        "vendor attributes declared but no Vendor-Specific attribute with code 26",
        "vendor 9 has attributes but no VENDOR declaration",
    ]


def test_validate_single_definition() -> None:
    registry = parse_dictionary([])
    validator = RegistryValidator(registry)
    container = AttributeType(code=26, name="Nested", kind=DataKind.VENDOR_SPECIFIC, vendor_id=9)

    assert list(validator.validate_attribute_type(container)) == [
        "vendor attribute Nested cannot be a Vendor-Specific container"
    ]
