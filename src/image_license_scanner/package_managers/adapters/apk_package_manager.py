# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
import re

from image_license_scanner.package_managers.adapters.abstract_package_manager import (
    PackageManagerAdapter,
)
from image_license_scanner.package_managers.manager_kind import ManagerKind
from image_license_scanner.scanner.scan_report import InstalledPackage

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")

APK_INSTALLED_DB = "/lib/apk/db/installed"

# "musl-1.2.4-r2 x86_64 {musl} (MIT) [installed]" -> ("musl", "1.2.4-r2")
APK_LIST_LINE = re.compile(r"^(\S+)-([0-9]\S*)\s")


class ApkPackageManager(PackageManagerAdapter):
    kind = ManagerKind.APK

    def _read_installed_db_licenses(self) -> dict[str, str]:
        """Read every package license from the apk database in one go."""
        raw = self.context.read_file(APK_INSTALLED_DB, self.config.file_read_timeout)
        if raw is None:
            logger.debug(f"Could not read {APK_INSTALLED_DB}")
            return {}
        licenses: dict[str, str] = {}
        name: str | None = None
        for line in raw.decode("utf-8", errors="replace").splitlines():
            if not line.strip():
                name = None
            elif line.startswith("P:"):
                name = line[2:].strip()
            elif line.startswith("L:") and name:
                license = line[2:].strip()
                if license:
                    licenses[name] = license
        return licenses

    def _query_license(self, name: str) -> str | None:
        result = self.context.run(
            ["apk", "info", "-a", name], self.config.package_query_timeout
        )
        if not result.success:
            logger.debug(f"apk info failed for {name}: {result.stderr.strip()}")
            return None
        lines = result.stdout.splitlines()
        for index, line in enumerate(lines):
            if "license:" in line and index + 1 < len(lines):
                license = lines[index + 1].strip()
                if license and "license:" not in license:
                    return license
                return None
        return None

    def list_installed(self) -> list[InstalledPackage]:
        result = self.context.run(["apk", "list", "-I"], self.config.list_timeout)
        if not result.success:
            logger.warning(f"Failed to list apk packages: {result.stderr.strip()}")
            return []

        db_licenses = self._read_installed_db_licenses()
        packages = []
        for line in result.stdout.splitlines():
            match = APK_LIST_LINE.match(line)
            if not match:
                continue
            name, version = match.group(1), match.group(2)
            license = db_licenses.get(name)
            if license is None:
                license = self._query_license(name)
            packages.append(self._package(name, version, license))
        logger.info(f"Processing {len(packages)} APK packages...")
        return packages
