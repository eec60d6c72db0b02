# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""
Build interface records from the output of napalm getters.

Nothing here talks to a device, the caller runs get_interfaces(),
get_mac_address_table() and get_arp_table() on an open driver and hands the
results over.
"""

import logging
from typing import Optional

from interface_record.exceptions import InvalidMacAddress
from interface_record.formatters import clean_mac
from interface_record.record import InterfaceRecord

# keys of a get_interfaces() entry that map onto record fields
RECORD_KEYS = ("is_up", "description", "mac_address")


def record_from_napalm(
    interface: dict, optional_args: Optional[dict] = None
) -> InterfaceRecord:
    """
    Create a record from one value of get_interfaces(), which has the keys:
        is_up (True/False)
        is_enabled (True/False)
        description (string)
        last_flapped (float in seconds)
        speed (float in Mbit)
        mtu (in Bytes)
        mac_address (string)
    Everything but is_up, description and mac_address ends up in metadata.
    """
    if optional_args is None:
        optional_args = {}
    skip_invalid_macs = optional_args.get("skip_invalid_macs", False)

    record = InterfaceRecord()
    record.set_up(interface.get("is_up", False))
    record.set_description(interface.get("description") or "")
    record.set_metadata(
        {
            key: value
            for key, value in interface.items()
            if key not in RECORD_KEYS and value is not None
        }
    )

    mac_address = interface.get("mac_address")
    if mac_address:
        try:
            record.set_mac_address(mac_address)
        except InvalidMacAddress as e:
            if not skip_invalid_macs:
                raise
            logging.warning(f"Skipping interface MAC address: {e}")

    return record


def connected_macs_from_mac_table(mac_table: list, interface: str) -> list:
    """
    Collect the MACs learned on ``interface`` from get_mac_address_table() entries.
    """
    return _unique_macs(entry for entry in mac_table if entry.get("interface") == interface)


def connected_macs_from_arp_table(arp_table: list, interface: str) -> list:
    """
    Collect the MACs resolved on ``interface`` from get_arp_table() entries.
    """
    return _unique_macs(entry for entry in arp_table if entry.get("interface") == interface)


def records_from_napalm(
    interfaces: dict,
    mac_table: Optional[list] = None,
    arp_table: Optional[list] = None,
    optional_args: Optional[dict] = None,
) -> dict:
    """
    Returns a dictionary of records keyed by interface name, with the layer 2
    neighbours taken from ``mac_table`` and the layer 3 ones from ``arp_table``.
    """
    if optional_args is None:
        optional_args = {}
    include_disabled = optional_args.get("include_disabled", True)
    skip_invalid_macs = optional_args.get("skip_invalid_macs", False)

    records = {}
    for name, interface in interfaces.items():
        if not include_disabled and interface.get("is_enabled") is False:
            continue

        record = record_from_napalm(interface, optional_args)
        layers = (
            (InterfaceRecord.LAYER2, connected_macs_from_mac_table(mac_table or [], name)),
            (InterfaceRecord.LAYER3, connected_macs_from_arp_table(arp_table or [], name)),
        )
        for layer, connected_macs in layers:
            if skip_invalid_macs:
                connected_macs = _drop_invalid(connected_macs, name, layer)
            record.set_connected_macs(connected_macs, layer)

        records[name] = record

    return records


def _unique_macs(entries) -> list:
    # first seen wins, compared on the normalized form
    macs = {}
    for entry in entries:
        raw = entry.get("mac")
        if not raw:
            continue
        try:
            key = clean_mac(raw)
        except InvalidMacAddress:
            key = raw
        macs.setdefault(key, raw)
    return list(macs.values())


def _drop_invalid(connected_macs: list, name: str, layer: InterfaceRecord.Layer) -> list:
    valid = []
    for connected_mac in connected_macs:
        try:
            valid.append(clean_mac(connected_mac))
        except InvalidMacAddress as e:
            logging.warning(f"Skipping {layer.value} MAC on {name}: {e}")
    return valid
