# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from image_license_scanner.license_resolver.license_normalizer import (
    clean_license_string,
)
from image_license_scanner.license_resolver.resolution_result import (
    LicenseResolutionResult,
    LicenseSource,
)
from image_license_scanner.license_resolver.strategies.abstract_resolution_strategy import (
    LicenseResolutionStrategy,
)
from image_license_scanner.scanner.scan_report import InstalledPackage


class NativeLicenseStrategy(LicenseResolutionStrategy):
    """Trusts the license the package manager declared, as is."""

    def resolve(self, package: InstalledPackage) -> LicenseResolutionResult | None:
        license = clean_license_string(package.native_license)
        if not license:
            return None
        return LicenseResolutionResult(license=license, source=LicenseSource.NATIVE)
