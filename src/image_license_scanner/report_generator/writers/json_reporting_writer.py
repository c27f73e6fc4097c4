# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import io
import json
from typing import Any

from image_license_scanner.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)
from image_license_scanner.scanner.scan_report import ScanReport


class JSONReportingWriter(ReportingWriter):
    """
    Writes the scan report as a single JSON document.
    """

    def write(self, report: ScanReport) -> str:
        document: dict[str, Any] = {
            "image": report.image,
            "scan_date": report.scan_date.isoformat(timespec="seconds"),
            "operating_system": report.operating_system,
            "os_family": report.os_family,
        }
        if report.is_distroless:
            document["image_type"] = report.image_type
        document["packages"] = [
            {
                "name": package.name,
                "version": package.version,
                "license": package.license,
                "package_manager": package.manager_kind.value,
            }
            for package in report.packages
        ]
        if report.note:
            document["note"] = report.note
        document["copyright_files"] = [
            {
                "path": copyright_file.original_path,
                "size_bytes": copyright_file.size_bytes,
                "extracted_file": copyright_file.extracted_relative_path,
            }
            for copyright_file in report.copyright_files
        ]

        output = io.StringIO()
        json.dump(document, output, indent=2)
        json_string = output.getvalue()
        output.close()
        return json_string
