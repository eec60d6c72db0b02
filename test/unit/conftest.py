# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""Test fixtures."""

import pytest

from interface_record import InterfaceRecord


@pytest.fixture
def record():
    return InterfaceRecord()


@pytest.fixture
def napalm_interfaces():
    """get_interfaces() output as returned by a napalm driver."""
    return {
        "ethernet-1/1": {
            "is_up": True,
            "is_enabled": True,
            "description": "uplink",
            "last_flapped": 1200.0,
            "speed": 10000.0,
            "mtu": 9232,
            "mac_address": "1a:b0:00:ff:00:01",
        },
        "ethernet-1/2": {
            "is_up": False,
            "is_enabled": False,
            "description": None,
            "last_flapped": -1.0,
            "speed": None,
            "mtu": 9232,
            "mac_address": "1A-B0-00-FF-00-02",
        },
        "mgmt0": {
            "is_up": True,
            "is_enabled": True,
            "description": "",
            "last_flapped": 30.5,
            "speed": 1000.0,
            "mtu": 1514,
            "mac_address": "",
        },
    }


@pytest.fixture
def napalm_mac_table():
    """get_mac_address_table() output."""
    return [
        {"mac": "00:11:22:33:44:55", "interface": "ethernet-1/1", "vlan": 10,
         "static": False, "active": True, "moves": 0, "last_move": 0.0},
        {"mac": "0011.2233.4466", "interface": "ethernet-1/1", "vlan": 10,
         "static": False, "active": True, "moves": 0, "last_move": 0.0},
        {"mac": "00-11-22-33-44-55", "interface": "ethernet-1/1", "vlan": 20,
         "static": False, "active": True, "moves": 1, "last_move": 5.0},
        {"mac": "00:11:22:33:44:77", "interface": "ethernet-1/2", "vlan": 10,
         "static": True, "active": True, "moves": 0, "last_move": 0.0},
    ]


@pytest.fixture
def napalm_arp_table():
    """get_arp_table() output."""
    return [
        {"interface": "ethernet-1/1", "mac": "5c:5e:ab:da:3c:f0", "ip": "172.17.17.1", "age": 120.0},
        {"interface": "mgmt0", "mac": "66:0e:94:96:e0:ff", "ip": "172.20.20.1", "age": 300.0},
    ]
