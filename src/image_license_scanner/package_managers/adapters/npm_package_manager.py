# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json
import logging
from typing import Any, Dict

from image_license_scanner.package_managers.adapters.abstract_package_manager import (
    PackageManagerAdapter,
)
from image_license_scanner.package_managers.manager_kind import ManagerKind
from image_license_scanner.scanner.scan_report import InstalledPackage

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")


def extract_license_from_pkg_data(pkg_data: Dict[str, Any]) -> str | None:
    license = pkg_data.get("license")
    if isinstance(license, dict):
        license = license.get("type")
    if isinstance(license, str) and license.strip():
        return license.strip()
    # deprecated form: "licenses": [{"type": "MIT", "url": ...}]
    licenses = pkg_data.get("licenses")
    if isinstance(licenses, list):
        types = [
            str(entry.get("type")) if isinstance(entry, dict) else str(entry)
            for entry in licenses
            if entry
        ]
        if types:
            return " OR ".join(types)
    return None


class NpmPackageManager(PackageManagerAdapter):
    """Top level dependencies of the node project in the container working dir."""

    kind = ManagerKind.NPM

    def _read_installed_license(self, project_path: str, name: str) -> str | None:
        package_json_path = f"{project_path.rstrip('/')}/node_modules/{name}/package.json"
        raw = self.context.read_file(package_json_path, self.config.file_read_timeout)
        if raw is None:
            return None
        try:
            return extract_license_from_pkg_data(json.loads(raw))
        except (json.JSONDecodeError, UnicodeDecodeError, AttributeError) as e:
            logger.debug(f"Failed to parse {package_json_path}: {e}")
            return None

    def list_installed(self) -> list[InstalledPackage]:
        if not self.context.file_exists(
            "package.json", self.config.file_check_timeout
        ):
            logger.info("No package.json in the container working directory.")
            return []

        # npm ls exits non-zero on extraneous or missing deps but still prints the tree
        result = self.context.run(
            ["npm", "ls", "--depth=0", "--json", "--long"], self.config.list_timeout
        )
        try:
            tree = json.loads(result.stdout) if result.stdout.strip() else {}
        except json.JSONDecodeError:
            logger.warning("Failed to parse npm ls output.")
            return []
        if not isinstance(tree, dict):
            return []

        project_path = str(tree.get("path") or ".")
        packages = []
        for name, dep_data in (tree.get("dependencies") or {}).items():
            if not isinstance(dep_data, dict):
                continue
            version = dep_data.get("version")
            if not name or not version:
                continue
            license = extract_license_from_pkg_data(dep_data)
            if license is None:
                license = self._read_installed_license(project_path, name)
            packages.append(self._package(name, str(version), license))
        logger.info(f"Processing {len(packages)} NPM packages...")
        return packages
