# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from abc import ABC, abstractmethod

from image_license_scanner.license_resolver.resolution_result import (
    LicenseResolutionResult,
)
from image_license_scanner.scanner.scan_report import InstalledPackage


class LicenseResolutionStrategy(ABC):
    @abstractmethod
    def resolve(self, package: InstalledPackage) -> LicenseResolutionResult | None:
        raise NotImplementedError
