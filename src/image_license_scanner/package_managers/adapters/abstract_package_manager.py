# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from abc import ABC, abstractmethod

from image_license_scanner.artifact_management.execution_context import (
    ExecutionContext,
)
from image_license_scanner.config.cli_configs import Config, default_config
from image_license_scanner.package_managers.manager_kind import ManagerKind
from image_license_scanner.scanner.scan_report import InstalledPackage


class PackageManagerAdapter(ABC):
    kind: ManagerKind = ManagerKind.UNKNOWN

    def __init__(self, context: ExecutionContext, config: Config = default_config):
        self.context = context
        self.config = config

    def _package(
        self, name: str, version: str, native_license: str | None = None
    ) -> InstalledPackage:
        return InstalledPackage(
            name=name,
            version=version,
            manager_kind=self.kind,
            native_license=native_license or None,
        )

    @abstractmethod
    def list_installed(self) -> list[InstalledPackage]:
        raise NotImplementedError
