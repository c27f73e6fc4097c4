# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""Image scanner runs the scan pipeline against an execution context:
probe -> enumerate -> resolve, then harvest, everything landing in a ScanReport."""

import logging
from typing import Optional

from image_license_scanner.adaptors.datetime import get_datetime_now
from image_license_scanner.artifact_management.execution_context import (
    ExecutionContext,
)
from image_license_scanner.config.cli_configs import Config, default_config
from image_license_scanner.copyright_harvester.copyright_harvester import (
    CopyrightHarvester,
)
from image_license_scanner.license_resolver.license_resolver import LicenseResolver
from image_license_scanner.package_managers.manager_kind import ManagerKind
from image_license_scanner.package_managers.manager_probe import ManagerProbe
from image_license_scanner.package_managers.registry import create_adapter
from image_license_scanner.scanner.os_detection import OsDetector
from image_license_scanner.scanner.scan_report import (
    DISTROLESS_NOTE,
    Package,
    ScanReport,
)

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")

NO_PACKAGES_NOTE = "No packages found. This appears to be a minimal image with no package managers detected"


def distroless_report(image: str, note: str = DISTROLESS_NOTE) -> ScanReport:
    report = ScanReport(image=image, scan_date=get_datetime_now())
    report.mark_distroless(note)
    return report


class ImageScanner:
    def __init__(
        self,
        context: ExecutionContext,
        resolver: LicenseResolver,
        harvester: Optional[CopyrightHarvester] = None,
        config: Config = default_config,
    ) -> None:
        self.context = context
        self.resolver = resolver
        self.harvester = harvester
        self.config = config

    def _scan_manager(self, kind: ManagerKind) -> list[Package]:
        adapter = create_adapter(kind, self.context, self.config)
        try:
            installed = adapter.list_installed()
        except Exception as e:
            logger.warning(f"Failed to enumerate {kind.value} packages: {e}")
            return []
        return [self.resolver.resolve_package(package) for package in installed]

    def scan(self, image: str) -> ScanReport:
        report = ScanReport(image=image, scan_date=get_datetime_now())
        operating_system = OsDetector(self.context, self.config.probe_timeout).detect()
        report.operating_system = operating_system.name
        report.os_family = operating_system.family

        detected = ManagerProbe(self.context, self.config.probe_timeout).detect()
        report.detected_managers = list(detected)
        if not detected:
            logger.warning("No package manager found, treating image as distroless.")
            report.mark_distroless(DISTROLESS_NOTE)
        for kind in detected:
            report.add_packages(self._scan_manager(kind))

        if detected and not report.packages:
            logger.warning("No packages found in this image.")
            report.mark_distroless(NO_PACKAGES_NOTE)
        logger.info(f"Total packages found: {len(report.packages)}")

        if self.harvester is not None:
            report.set_copyright_files(self.harvester.harvest())
            logger.info(
                f"Total copyright files extracted: {len(report.copyright_files)}"
            )
        return report
