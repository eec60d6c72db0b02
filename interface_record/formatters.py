# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""
MAC address normalization and validation.

Normalization and validation are kept apart: ``format_mac`` only rewrites
whatever it can parse into upper-case colon form, ``validate_mac`` only
checks the canonical shape. ``clean_mac`` chains the two.
"""

import re

from napalm.base.helpers import mac
from netaddr.core import AddrFormatError

from interface_record.exceptions import InvalidMacAddress

CANONICAL_MAC = re.compile(r"([A-F0-9]{2}:){5}[A-F0-9]{2}")
# netaddr reads separator-less input as an integer, only plain 48-bit hex is a MAC
BARE_MAC = re.compile(r"[0-9A-Fa-f]{12}")
SEPARATORS = (":", "-", ".")


def format_mac(raw: str) -> str:
    """
    Convert a MAC address in any form netaddr understands (colon, dash, Cisco dotted
    or bare hex, any case) to upper-case colon-separated form.

    Input without separators must be exactly twelve hex digits. Anything that
    cannot be parsed comes back stripped and upper-cased, it is left to
    ``validate_mac`` to reject it.
    """
    raw = str(raw).strip()
    if not any(sep in raw for sep in SEPARATORS) and not BARE_MAC.fullmatch(raw):
        return raw.upper()
    try:
        return mac(raw)
    except (AddrFormatError, IndexError, ValueError, TypeError):
        return raw.upper()


def validate_mac(mac_address: str) -> bool:
    return CANONICAL_MAC.fullmatch(mac_address) is not None


def clean_mac(raw: str) -> str:
    """Normalize ``raw`` and raise InvalidMacAddress unless the result is canonical."""
    formatted = format_mac(raw)
    if not validate_mac(formatted):
        raise InvalidMacAddress(formatted)
    return formatted
