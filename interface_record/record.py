# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

"""
In-memory state of a single network device interface.

A record is created empty by whatever polls the device, filled in through its
setters as facts about the interface are discovered, and read back once via
to_snapshot(), to_dict() or to_json().
"""

import copy
import enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Union

from interface_record.exceptions import InvalidLayer
from interface_record.formatters import clean_mac
from interface_record.types import InterfaceSnapshot


class InterfaceRecord(object):
    """
    Represents one physical or logical interface on a device: its status,
    description, display metadata, MAC address and the MAC addresses seen
    behind it at layer 2 and layer 3.
    """

    class Layer(str, enum.Enum):
        """
        Enum class used to represent the layer a connected MAC was observed at.
        """

        LAYER2 = "l2"
        LAYER3 = "l3"

    LAYER2 = Layer.LAYER2
    LAYER3 = Layer.LAYER3

    def __init__(self):
        """Constructor."""
        self.up = False
        self.description = ""
        self.metadata = {}
        self.mac_address = ""
        self.connected_macs_layer2 = []
        self.connected_macs_layer3 = []

    def __repr__(self):
        return (
            f"<InterfaceRecord description={self.description!r} "
            f"mac_address={self.mac_address!r} up={self.up}>"
        )

    def set_description(self, description: str) -> None:
        """Set the name/description of the interface."""
        self.description = description

    def get_description(self) -> str:
        return self.description

    def set_up(self, status: bool) -> None:
        """Set the status of the port, True if it is up."""
        self.up = bool(status)

    def get_up(self) -> bool:
        return self.up

    def set_metadata(self, metadata: Mapping[str, Any]) -> None:
        """
        Metadata can be anything, it is only displayed by the consumer and is
        never inspected here.
        """
        self.metadata = dict(metadata)

    def get_metadata(self) -> dict:
        return self.metadata

    def set_mac_address(self, mac_address: str) -> None:
        """
        Set the interface MAC. Raises InvalidMacAddress and keeps the previous
        value if the address does not normalize to AA:BB:CC:DD:EE:FF form.
        """
        self.mac_address = clean_mac(mac_address)

    def get_mac_address(self) -> str:
        """Returns the canonical MAC, or an empty string if it was never set."""
        return self.mac_address

    def set_connected_macs(
        self, connected_macs: Iterable[str], layer: Union[Layer, str]
    ) -> None:
        """
        Replace the MACs connected at ``layer`` (one of LAYER2, LAYER3).

        Every address is normalized and validated before anything is stored,
        so a single bad address leaves both layers exactly as they were.
        """
        layer = self._check_layer(layer)
        cleaned_macs = [clean_mac(connected_mac) for connected_mac in connected_macs]

        if layer == InterfaceRecord.LAYER2:
            self.connected_macs_layer2 = cleaned_macs
        else:
            self.connected_macs_layer3 = cleaned_macs

    def get_connected_macs(self, layer: Union[Layer, str]) -> list:
        layer = self._check_layer(layer)
        if layer == InterfaceRecord.LAYER2:
            return self.get_connected_macs_layer2()
        return self.get_connected_macs_layer3()

    def get_connected_macs_layer2(self) -> list:
        return list(self.connected_macs_layer2)

    def get_connected_macs_layer3(self) -> list:
        return list(self.connected_macs_layer3)

    def to_model(self) -> InterfaceSnapshot:
        """Build the frozen pydantic model of the current field values."""
        return InterfaceSnapshot(
            up=self.up,
            description=self.description,
            metadata=self._copy_metadata(),
            mac_address=self.mac_address,
            connected_l2=list(self.connected_macs_layer2),
            connected_l3=list(self.connected_macs_layer3),
        )

    def to_dict(self) -> dict:
        """Convert this interface to a plain dictionary."""
        return self.to_model().model_dump()

    def to_snapshot(self) -> Mapping[str, Any]:
        """
        Returns a mapping, read-only at the top level, with the keys:
            up (bool)
            description (string)
            metadata (dict)
            mac_address (string)
            connected_l2 (list of MAC strings)
            connected_l3 (list of MAC strings)
        The values are copies, later changes to the record do not show up in it.
        Metadata that cannot be deep-copied is copied one level deep only.
        """
        return MappingProxyType(self.to_dict())

    def to_json(self, **kwargs) -> str:
        return self.to_model().model_dump_json(**kwargs)

    @staticmethod
    def _check_layer(layer: Union[Layer, str]) -> "InterfaceRecord.Layer":
        try:
            return InterfaceRecord.Layer(layer)
        except ValueError:
            raise InvalidLayer(layer, [member.value for member in InterfaceRecord.Layer])

    def _copy_metadata(self) -> dict:
        try:
            return copy.deepcopy(self.metadata)
        except (TypeError, copy.Error):
            return dict(self.metadata)
