# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from enum import Enum


class ManagerKind(Enum):
    """
    Enum for the package managers an image can be scanned for.
    """

    APT = "APT"
    RPM = "RPM"
    APK = "APK"
    NPM = "NPM"
    UNKNOWN = "Unknown"

    @property
    def binary(self) -> str | None:
        return _BINARIES.get(self)

    @property
    def section_title(self) -> str:
        return _SECTION_TITLES.get(self, "Other Packages")


_BINARIES = {
    ManagerKind.APT: "dpkg",
    ManagerKind.RPM: "rpm",
    ManagerKind.APK: "apk",
    ManagerKind.NPM: "npm",
}

_SECTION_TITLES = {
    ManagerKind.APT: "APT/DPKG Packages",
    ManagerKind.RPM: "RPM Packages",
    ManagerKind.APK: "Alpine Packages",
    ManagerKind.NPM: "Node.js Packages",
}
