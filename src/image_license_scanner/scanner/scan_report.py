# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from dataclasses import dataclass, field
from datetime import datetime

from image_license_scanner.package_managers.manager_kind import ManagerKind

IMAGE_TYPE_STANDARD = "standard"
IMAGE_TYPE_DISTROLESS = "minimal/distroless"

DISTROLESS_NOTE = "Minimal/distroless image with no package managers detected"


@dataclass(frozen=True)
class InstalledPackage:
    """A package as listed by its package manager, before license resolution."""

    name: str
    version: str
    manager_kind: ManagerKind
    native_license: str | None = None


@dataclass(frozen=True)
class Package:
    name: str
    version: str
    manager_kind: ManagerKind
    license: str


@dataclass(frozen=True)
class CopyrightFile:
    original_path: str  # absolute path inside the scanned filesystem
    size_bytes: int
    extracted_relative_path: str  # relative to the extraction mirror root


@dataclass
class ScanReport:
    """Everything a scan found. Filled by the scan pipeline, then only read."""

    image: str
    scan_date: datetime
    operating_system: str = "Unknown"
    os_family: str = "Unknown"
    image_type: str = IMAGE_TYPE_STANDARD
    note: str | None = None
    detected_managers: list[ManagerKind] = field(default_factory=list)
    packages: list[Package] = field(default_factory=list)
    copyright_files: list[CopyrightFile] = field(default_factory=list)

    @property
    def is_distroless(self) -> bool:
        return self.image_type == IMAGE_TYPE_DISTROLESS

    def add_packages(self, packages: list[Package]) -> None:
        self.packages.extend(packages)

    def set_copyright_files(self, copyright_files: list[CopyrightFile]) -> None:
        self.copyright_files = sorted(copyright_files, key=lambda f: f.original_path)

    def mark_distroless(self, note: str = DISTROLESS_NOTE) -> None:
        self.image_type = IMAGE_TYPE_DISTROLESS
        self.note = note

    def packages_by_manager(self) -> dict[ManagerKind, list[Package]]:
        """Packages per manager, every detected manager present even when empty."""
        grouped: dict[ManagerKind, list[Package]] = {
            kind: [] for kind in self.detected_managers
        }
        for package in self.packages:
            grouped.setdefault(package.manager_kind, []).append(package)
        return grouped
