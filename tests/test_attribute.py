"""Tests for attribute type descriptors."""
from __future__ import annotations

import pytest

from radius_dictionary import VENDOR_SPECIFIC_CODE, AttributeType, DataKind, resolve_data_kind


@pytest.mark.parametrize(
    "type_name,expected",
    [
        ("string", DataKind.STRING),
        ("STRING", DataKind.STRING),
        ("octets", DataKind.OCTETS),
        ("integer", DataKind.INTEGER),
        ("date", DataKind.INTEGER),
        ("Date", DataKind.INTEGER),
        ("ipaddr", DataKind.IPADDR),
        ("abinary", DataKind.OCTETS),
        ("vendor-specific", DataKind.OCTETS),
    ],
)
def test_resolve_data_kind(type_name: str, expected: DataKind) -> None:
    assert resolve_data_kind(type_name) is expected


def test_vendor_specific_code() -> None:
    assert VENDOR_SPECIFIC_CODE == 26


def test_enumeration_lookups() -> None:
    service = AttributeType(code=6, name="Service-Type", kind=DataKind.INTEGER)
    service.add_enumeration_value(1, "Login-User")
    service.add_enumeration_value(2, "Framed-User")

    assert service.enumeration_name(2) == "Framed-User"
    assert service.enumeration_name(99) is None
    assert service.enumeration_value("Login-User") == 1
    assert service.enumeration_value("Unknown") is None


def test_enumeration_value_is_replaced() -> None:
    service = AttributeType(code=6, name="Service-Type", kind=DataKind.INTEGER)
    service.add_enumeration_value(1, "Login-User")
    service.add_enumeration_value(1, "Login")

    assert service.enumeration == {1: "Login"}


def test_defaults() -> None:
    attribute_type = AttributeType(code=25, name="Class")

    assert attribute_type.kind is DataKind.OCTETS
    assert attribute_type.vendor_id is None
    assert attribute_type.enumeration == {}
    assert not attribute_type.is_vendor_specific


def test_empty_names_are_rejected() -> None:
    with pytest.raises(ValueError):
        AttributeType(code=1, name="")
    with pytest.raises(ValueError):
        AttributeType(code=1, name="Foo").add_enumeration_value(1, "")
