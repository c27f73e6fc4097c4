# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from image_license_scanner.artifact_management.execution_context import (
    ExecutionContext,
)
from image_license_scanner.config.cli_configs import Config, default_config
from image_license_scanner.package_managers.adapters.abstract_package_manager import (
    PackageManagerAdapter,
)
from image_license_scanner.package_managers.adapters.apk_package_manager import (
    ApkPackageManager,
)
from image_license_scanner.package_managers.adapters.apt_package_manager import (
    AptPackageManager,
)
from image_license_scanner.package_managers.adapters.npm_package_manager import (
    NpmPackageManager,
)
from image_license_scanner.package_managers.adapters.rpm_package_manager import (
    RpmPackageManager,
)
from image_license_scanner.package_managers.manager_kind import ManagerKind

PACKAGE_MANAGER_ADAPTERS: dict[ManagerKind, type[PackageManagerAdapter]] = {
    ManagerKind.APT: AptPackageManager,
    ManagerKind.RPM: RpmPackageManager,
    ManagerKind.APK: ApkPackageManager,
    ManagerKind.NPM: NpmPackageManager,
}


def create_adapter(
    kind: ManagerKind, context: ExecutionContext, config: Config = default_config
) -> PackageManagerAdapter:
    if kind not in PACKAGE_MANAGER_ADAPTERS:
        raise ValueError(f"No package manager adapter for {kind.value}")
    return PACKAGE_MANAGER_ADAPTERS[kind](context, config)
