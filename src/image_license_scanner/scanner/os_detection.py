# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
import re
from dataclasses import dataclass

from image_license_scanner.artifact_management.execution_context import (
    ExecutionContext,
)
from image_license_scanner.package_managers.manager_kind import ManagerKind

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")

OS_FAMILIES = {
    "ubuntu": "Debian",
    "debian": "Debian",
    "rhel": "RedHat",
    "centos": "RedHat",
    "fedora": "RedHat",
    "rocky": "RedHat",
    "almalinux": "RedHat",
    "alpine": "Alpine",
    "arch": "Arch",
    "sles": "SUSE",
}

PRETTY_NAME_VERSION = re.compile(r"v([0-9]+\.[0-9]+)")


@dataclass(frozen=True)
class OperatingSystem:
    name: str = "Unknown"
    family: str = "Unknown"


def os_family_from_id(os_id: str) -> str:
    if os_id.startswith("opensuse"):
        return "SUSE"
    return OS_FAMILIES.get(os_id, "Linux")


def parse_os_release(content: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for line in content.splitlines()[:20]:
        key, separator, value = line.partition("=")
        if not separator or key.strip() in fields:
            continue
        fields[key.strip()] = value.strip().strip('"').strip("'")
    return fields


def operating_system_from_os_release(content: str) -> OperatingSystem:
    fields = parse_os_release(content)
    name = fields.get("NAME", "")
    version = fields.get("VERSION") or fields.get("VERSION_ID") or ""
    if not version:
        pretty_name_version = PRETTY_NAME_VERSION.search(fields.get("PRETTY_NAME", ""))
        if pretty_name_version:
            version = pretty_name_version.group(1)
    if name:
        os_name = f"{name} {version}" if version else name
    else:
        os_name = "Unknown OS"
    return OperatingSystem(name=os_name, family=os_family_from_id(fields.get("ID", "")))


class OsDetector:
    def __init__(self, context: ExecutionContext, timeout: float = 10) -> None:
        self.context = context
        self.timeout = timeout

    def _read_first_line(self, path: str) -> str | None:
        if not self.context.file_exists(path, self.timeout):
            return None
        raw = self.context.read_file(path, self.timeout)
        if raw is None:
            return None
        lines = raw.decode("utf-8", errors="replace").splitlines()
        return lines[0].strip() if lines else ""

    def detect(self) -> OperatingSystem:
        operating_system = self._detect()
        logger.info(f"Detected OS: {operating_system.name}")
        logger.info(f"OS Family: {operating_system.family}")
        return operating_system

    def _detect(self) -> OperatingSystem:
        if self.context.file_exists("/etc/os-release", self.timeout):
            raw = self.context.read_file("/etc/os-release", self.timeout)
            if raw is not None:
                return operating_system_from_os_release(
                    raw.decode("utf-8", errors="replace")
                )
            return OperatingSystem(name="Unknown OS", family="Linux")

        redhat_release = self._read_first_line("/etc/redhat-release")
        if redhat_release is not None:
            return OperatingSystem(name=redhat_release, family="RedHat")

        alpine_release = self._read_first_line("/etc/alpine-release")
        if alpine_release is not None:
            return OperatingSystem(name=f"Alpine Linux {alpine_release}", family="Alpine")

        debian_version = self._read_first_line("/etc/debian_version")
        if debian_version is not None:
            return OperatingSystem(name=f"Debian {debian_version}", family="Debian")

        uname = self.context.run(["uname", "-a"], self.timeout)
        if uname.success and "Linux" in uname.stdout:
            fields = uname.stdout.split()
            kernel = fields[2] if len(fields) > 2 else ""
            return OperatingSystem(name=f"Linux ({kernel})", family="Linux")

        for kind, operating_system in [
            (ManagerKind.APT, OperatingSystem("Debian-based", "Debian")),
            (ManagerKind.RPM, OperatingSystem("RedHat-based", "RedHat")),
            (ManagerKind.APK, OperatingSystem("Alpine Linux", "Alpine")),
        ]:
            if self.context.run(["which", str(kind.binary)], self.timeout).success:
                return operating_system
        return OperatingSystem()
