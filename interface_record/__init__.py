# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""Validated, serializable records of network device interface state."""

from interface_record.exceptions import (
    InterfaceRecordException,
    InvalidLayer,
    InvalidMacAddress,
)
from interface_record.formatters import clean_mac, format_mac, validate_mac
from interface_record.record import InterfaceRecord
from interface_record.types import InterfaceSnapshot

__all__ = [
    "InterfaceRecord",
    "InterfaceSnapshot",
    "InterfaceRecordException",
    "InvalidLayer",
    "InvalidMacAddress",
    "clean_mac",
    "format_mac",
    "validate_mac",
]
