# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging

from image_license_scanner.package_managers.adapters.abstract_package_manager import (
    PackageManagerAdapter,
)
from image_license_scanner.package_managers.manager_kind import ManagerKind
from image_license_scanner.scanner.scan_report import InstalledPackage

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")

RPM_QUERY_FORMAT = "%{NAME}\t%{VERSION}-%{RELEASE}\t%{LICENSE}\n"


class RpmPackageManager(PackageManagerAdapter):
    kind = ManagerKind.RPM

    def list_installed(self) -> list[InstalledPackage]:
        result = self.context.run(
            ["rpm", "-qa", "--queryformat", RPM_QUERY_FORMAT],
            self.config.list_timeout,
        )
        if not result.success:
            logger.warning(f"Failed to list rpm packages: {result.stderr.strip()}")
            return []

        packages = []
        for line in result.stdout.splitlines():
            fields = line.split("\t")
            name = fields[0].strip()
            if not name:
                continue
            version = fields[1].strip() if len(fields) > 1 else ""
            license = fields[2].strip() if len(fields) > 2 else ""
            if license == "(none)":
                license = ""
            packages.append(self._package(name, version, license))
        logger.info(f"Processing {len(packages)} RPM packages...")
        return packages
