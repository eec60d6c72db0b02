# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

from napalm.base.exceptions import NapalmException


class InterfaceRecordException(NapalmException, ValueError):
    pass


class InvalidMacAddress(InterfaceRecordException):
    def __init__(self, mac_address):
        self.mac_address = mac_address
        super().__init__(f"{mac_address} is not a valid MAC address.")


class InvalidLayer(InterfaceRecordException):
    def __init__(self, layer, valid=("l2", "l3")):
        self.layer = layer
        super().__init__(
            f"Layer {layer!r} is not one of the layer constants: {', '.join(valid)}"
        )
