# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from image_license_scanner.license_resolver.license_resolver import LicenseResolver
from image_license_scanner.license_resolver.resolution_result import (
    LicenseResolutionResult,
    LicenseSource,
)

__all__ = ["LicenseResolver", "LicenseResolutionResult", "LicenseSource"]
