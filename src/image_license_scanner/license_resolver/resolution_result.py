# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from dataclasses import dataclass
from enum import Enum

UNKNOWN_LICENSE = "Unknown"


class LicenseSource(Enum):
    """
    Enum for the strategy that produced a package license.
    """

    NATIVE = "Native"
    COPYRIGHT_FILE = "CopyrightFile"
    FALLBACK_TABLE = "FallbackTable"
    GENERIC_DEFAULT = "GenericDefault"


@dataclass(frozen=True)
class LicenseResolutionResult:
    license: str
    source: LicenseSource
