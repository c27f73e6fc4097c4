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


class AptPackageManager(PackageManagerAdapter):
    """dpkg carries no license field, resolution relies on copyright files."""

    kind = ManagerKind.APT

    def list_installed(self) -> list[InstalledPackage]:
        result = self.context.run(
            ["dpkg-query", "-W", "-f=${Package}\t${Version}\n"],
            self.config.list_timeout,
        )
        if not result.success:
            logger.warning(f"Failed to list dpkg packages: {result.stderr.strip()}")
            return []

        packages = []
        for line in result.stdout.splitlines():
            fields = line.split("\t")
            if len(fields) < 2:
                continue
            name, version = fields[0].strip(), fields[1].strip()
            if name and version:
                packages.append(self._package(name, version))
        logger.info(f"Processing {len(packages)} APT packages...")
        return packages
