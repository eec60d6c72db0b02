# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from pydantic import BaseModel, ConfigDict


class InterfaceSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    up: bool
    description: str
    metadata: dict[str, Any]
    mac_address: str
    connected_l2: list[str]
    connected_l3: list[str]
