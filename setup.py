# Copyright 2020 Nokia
# Licensed under the Apache License 2.0.
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup, find_packages
with open("requirements.txt", "r") as file:
    reqs = [req for req in file.read().splitlines() if (len(req) > 0 and not req.startswith("#"))]

setup(
    name="device-interface-record",
    version="1.0.0",
    packages=find_packages(exclude=["test", "test.*", "examples"]),
    description="Validated, serializable records of network device interface state",
    classifiers=[
        'Topic :: Utilities',
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Natural Language :: English",
        'Operating System :: POSIX :: Linux',
        'Operating System :: MacOS',
    ],
    python_requires=">=3.9",
    include_package_data=True,
    install_requires=reqs,
    extras_require={"test": ["pytest"]},
)
