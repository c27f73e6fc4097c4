# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from typing import Optional

from image_license_scanner.license_resolver.fallback_rules import (
    FALLBACK_RULES,
    FallbackRule,
    lookup_fallback_license,
)
from image_license_scanner.license_resolver.resolution_result import (
    LicenseResolutionResult,
    LicenseSource,
)
from image_license_scanner.license_resolver.strategies.abstract_resolution_strategy import (
    LicenseResolutionStrategy,
)
from image_license_scanner.scanner.scan_report import InstalledPackage


class FallbackTableLicenseStrategy(LicenseResolutionStrategy):
    """
    Looks the package name up in the curated table. User supplied rules,
    if any, are consulted before the built-in ones.
    """

    def __init__(
        self,
        extra_rules: Optional[list[FallbackRule]] = None,
        rules: tuple[FallbackRule, ...] = FALLBACK_RULES,
    ) -> None:
        self.rules = tuple(extra_rules or []) + tuple(rules)

    def resolve(self, package: InstalledPackage) -> LicenseResolutionResult | None:
        license = lookup_fallback_license(package.name, self.rules)
        if license is None:
            return None
        return LicenseResolutionResult(
            license=license, source=LicenseSource.FALLBACK_TABLE
        )
