# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""License resolver class walks the passed strategies, from the most to the
least authoritative, until one of them produces a license."""

import logging
from typing import Optional

from image_license_scanner.artifact_management.execution_context import (
    ExecutionContext,
)
from image_license_scanner.config.cli_configs import Config, default_config
from image_license_scanner.license_resolver.fallback_rules import FallbackRule
from image_license_scanner.license_resolver.resolution_result import (
    UNKNOWN_LICENSE,
    LicenseResolutionResult,
    LicenseSource,
)
from image_license_scanner.license_resolver.strategies.abstract_resolution_strategy import (
    LicenseResolutionStrategy,
)
from image_license_scanner.license_resolver.strategies.copyright_file_strategy import (
    CopyrightFileLicenseStrategy,
)
from image_license_scanner.license_resolver.strategies.fallback_table_strategy import (
    FallbackTableLicenseStrategy,
)
from image_license_scanner.license_resolver.strategies.native_license_strategy import (
    NativeLicenseStrategy,
)
from image_license_scanner.scanner.scan_report import InstalledPackage, Package

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")


class LicenseResolver:
    def __init__(self, strategies: list[LicenseResolutionStrategy]):
        self.strategies = strategies

    def resolve(self, package: InstalledPackage) -> LicenseResolutionResult:
        for strategy in self.strategies:
            try:
                result = strategy.resolve(package)
            except Exception as e:
                logger.warning(
                    f"{type(strategy).__name__} failed for {package.name}: {e}"
                )
                continue
            if result is not None and result.license:
                return result
        return LicenseResolutionResult(
            license=UNKNOWN_LICENSE, source=LicenseSource.GENERIC_DEFAULT
        )

    def resolve_package(self, package: InstalledPackage) -> Package:
        result = self.resolve(package)
        logger.debug(
            f"{package.name} {package.version}: {result.license} ({result.source.value})"
        )
        return Package(
            name=package.name,
            version=package.version,
            manager_kind=package.manager_kind,
            license=result.license,
        )

    @classmethod
    def default(
        cls,
        context: ExecutionContext,
        config: Config = default_config,
        extra_fallback_rules: Optional[list[FallbackRule]] = None,
    ) -> "LicenseResolver":
        return cls(
            [
                NativeLicenseStrategy(),
                CopyrightFileLicenseStrategy(context, config),
                FallbackTableLicenseStrategy(extra_fallback_rules),
            ]
        )
