# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""Tests for MAC normalization and validation."""

import pytest

from interface_record import InvalidMacAddress
from interface_record.formatters import clean_mac, format_mac, validate_mac


@pytest.mark.parametrize(
    "raw",
    [
        "AA:BB:CC:DD:EE:FF",
        "aa:bb:cc:dd:ee:ff",
        "aa-bb-cc-dd-ee-ff",
        "aabb.ccdd.eeff",
        "aabbccddeeff",
        "  aa:bb:cc:dd:ee:ff\n",
    ],
)
def test_format_mac_canonical(raw):
    assert format_mac(raw) == "AA:BB:CC:DD:EE:FF"


def test_format_mac_unparseable_is_upper_cased():
    assert format_mac(" not-a-mac ") == "NOT-A-MAC"


def test_validate_mac():
    assert validate_mac("00:1A:2B:3C:4D:5E")

    assert not validate_mac("00:1a:2b:3c:4d:5e")
    assert not validate_mac("00-1A-2B-3C-4D-5E")
    assert not validate_mac("00:1A:2B:3C:4D")
    assert not validate_mac("00:1A:2B:3C:4D:5E:6F:70")
    assert not validate_mac("00:1A:2B:3C:4D:5G")
    assert not validate_mac("00:1A:2B:3C:4D:5E\n")
    assert not validate_mac("")


def test_clean_mac():
    assert clean_mac("0011.2233.44ff") == "00:11:22:33:44:FF"

    with pytest.raises(InvalidMacAddress) as excinfo:
        clean_mac("zz:zz")
    assert excinfo.value.mac_address == "ZZ:ZZ"
    assert str(excinfo.value) == "ZZ:ZZ is not a valid MAC address."


def test_invalid_mac_is_a_value_error():
    with pytest.raises(ValueError):
        clean_mac("bogus")


@pytest.mark.parametrize(
    "raw",
    ["AABBCCDDEEFF0011", "aabbccddeeff00112233", "0", "42", "123456", "AABBCCDDEEF"],
)
def test_clean_mac_rejects_numbers_and_wrong_length_hex(raw):
    with pytest.raises(InvalidMacAddress) as excinfo:
        clean_mac(raw)
    assert excinfo.value.mac_address == raw.upper()
