# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging

from image_license_scanner.artifact_management.execution_context import (
    ExecutionContext,
)
from image_license_scanner.package_managers.manager_kind import ManagerKind

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")


class ManagerProbe:
    """Finds which package managers are installed in the scanned image."""

    def __init__(self, context: ExecutionContext, probe_timeout: float = 10) -> None:
        self.context = context
        self.probe_timeout = probe_timeout

    def is_present(self, kind: ManagerKind) -> bool:
        if kind.binary is None:
            return False
        result = self.context.run(["which", kind.binary], self.probe_timeout)
        if result.timed_out:
            logger.debug(f"Probe for {kind.binary} timed out, assuming absent")
        return result.success and bool(result.stdout.strip())

    def detect(self) -> list[ManagerKind]:
        detected = []
        for kind in ManagerKind:
            if kind.binary is None:
                continue
            logger.info(f"Checking for {kind.value} packages...")
            if self.is_present(kind):
                detected.append(kind)
        if not detected:
            logger.warning("No package manager detected in the image.")
        return detected
