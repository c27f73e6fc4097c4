# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
import re

from image_license_scanner.artifact_management.execution_context import (
    ExecutionContext,
)
from image_license_scanner.config.cli_configs import Config, default_config
from image_license_scanner.license_resolver.license_normalizer import (
    normalize_license_text,
)
from image_license_scanner.license_resolver.resolution_result import (
    LicenseResolutionResult,
    LicenseSource,
)
from image_license_scanner.license_resolver.strategies.abstract_resolution_strategy import (
    LicenseResolutionStrategy,
)
from image_license_scanner.package_managers.manager_kind import ManagerKind
from image_license_scanner.scanner.scan_report import InstalledPackage

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")

DEP5_FORMAT_LINE = re.compile(
    r"^Format:.*debian\.org/doc/packaging-manuals/copyright-format", re.MULTILINE
)
DEP5_LICENSE_FIELD = re.compile(r"^License:(.*)$", re.MULTILINE)
COMMON_LICENSES_REFERENCE = re.compile(r"/usr/share/common-licenses/([A-Za-z0-9._+-]*)")
LICENSE_KEYWORDS = re.compile(
    r"LGPL|GPL|MIT|BSD|Apache|Mozilla|General Public License"
)
KEYWORD_SCAN_LINES = 50


def extract_license_text(copyright_text: str) -> str:
    """Pull the most license-looking snippet out of a Debian copyright file."""
    if DEP5_FORMAT_LINE.search(copyright_text):
        field = DEP5_LICENSE_FIELD.search(copyright_text)
        return field.group(1).strip() if field else ""

    reference = COMMON_LICENSES_REFERENCE.search(copyright_text)
    if reference:
        return reference.group(1)

    for line in copyright_text.splitlines()[:KEYWORD_SCAN_LINES]:
        if LICENSE_KEYWORDS.search(line):
            return line.strip()
    return ""


class CopyrightFileLicenseStrategy(LicenseResolutionStrategy):
    """Reads /usr/share/doc/<package>/copyright for APT packages."""

    def __init__(
        self, context: ExecutionContext, config: Config = default_config
    ) -> None:
        self.context = context
        self.config = config

    def resolve(self, package: InstalledPackage) -> LicenseResolutionResult | None:
        if package.manager_kind != ManagerKind.APT:
            return None
        copyright_path = f"/usr/share/doc/{package.name}/copyright"
        if not self.context.file_exists(
            copyright_path, self.config.file_check_timeout
        ):
            return None
        raw = self.context.read_file(copyright_path, self.config.file_read_timeout)
        if raw is None:
            logger.debug(f"Could not read {copyright_path}")
            return None

        license_text = extract_license_text(raw.decode("utf-8", errors="replace"))
        license = normalize_license_text(license_text)
        if license is None:
            logger.debug(
                f"No known license in {copyright_path}: {license_text[:80]!r}"
            )
            return None
        return LicenseResolutionResult(
            license=license, source=LicenseSource.COPYRIGHT_FILE
        )
