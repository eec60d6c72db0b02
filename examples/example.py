# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0
"""
This is a simple example of how to fill interface records from a napalm driver.
Point it at any device napalm supports, here a containerlab SR Linux node
(the "srlinux" driver comes from the napalm-srlinux package):

```
CLAB_LABDIR_BASE=/tmp \
sudo -E clab deploy -c -t srlinux.dev/clab-srl
```

python examples/example.py
"""

import json

from napalm import get_network_driver

from interface_record.builders import records_from_napalm

driver = get_network_driver("srlinux")
optional_args = {
    "insecure": True,
    # "skip_invalid_macs": True,
    # "include_disabled": False,
}
with driver("srl", "admin", "NokiaSrl1!", optional_args=optional_args) as device:
    records = records_from_napalm(
        device.get_interfaces(),
        mac_table=device.get_mac_address_table(),
        arp_table=device.get_arp_table(),
        optional_args=optional_args,
    )
    print(json.dumps({name: record.to_dict() for name, record in records.items()}, indent=2))
