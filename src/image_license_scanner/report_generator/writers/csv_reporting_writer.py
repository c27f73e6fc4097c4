# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import csv
import io

from image_license_scanner.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)
from image_license_scanner.scanner.scan_report import ScanReport

FIELD_NAMES = ["package_name", "version", "license", "package_manager"]


class CSVReportingWriter(ReportingWriter):
    def write(self, report: ScanReport) -> str:
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=FIELD_NAMES, quoting=csv.QUOTE_ALL)

        writer.writeheader()
        for package in report.packages:
            writer.writerow(
                {
                    "package_name": package.name,
                    "version": package.version,
                    "license": package.license,
                    "package_manager": package.manager_kind.value,
                }
            )
        if report.is_distroless and not report.packages:
            output.write("# No packages found - minimal/distroless image\r\n")
        csv_string = output.getvalue()
        output.close()
        return csv_string
