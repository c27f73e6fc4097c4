# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from image_license_scanner.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)
from image_license_scanner.scanner.scan_report import ScanReport

ROW_FORMAT = "{:<30} {:<20} {:<30} {}"

DISTROLESS_BLOCK = [
    "MINIMAL/DISTROLESS IMAGE DETECTED",
    "==================================",
    "No packages found. This appears to be a minimal image containing only:",
    "- Application binary and runtime dependencies",
    "- No package management system (APT, RPM, APK, etc.)",
    "",
    "For license information, please refer to:",
    "- The base image documentation",
    "- Application-specific license files",
    "- Container image build specifications",
]


def _single_line(value: str) -> str:
    return " ".join(value.split())


class TextReportingWriter(ReportingWriter):
    """Human readable report, one fixed width table per package manager."""

    def write(self, report: ScanReport) -> str:
        lines = [
            f"Package Scan Report for {report.image}",
            "========================================",
            "",
            f"Operating System: {report.operating_system}",
            f"OS Family: {report.os_family}",
            "",
        ]
        for kind, packages in report.packages_by_manager().items():
            title = f"{kind.section_title}:"
            lines.extend(["", title, "=" * len(title)])
            lines.append(
                ROW_FORMAT.format("Package Name", "Version", "License", "Manager")
            )
            lines.append("-" * 80)
            for package in packages:
                lines.append(
                    ROW_FORMAT.format(
                        _single_line(package.name),
                        _single_line(package.version),
                        _single_line(package.license),
                        package.manager_kind.value,
                    )
                )
        if report.is_distroless:
            lines.extend([""] + DISTROLESS_BLOCK)
        lines.append("")
        return "\n".join(lines)
