# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import re

from image_license_scanner.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)
from image_license_scanner.scanner.scan_report import ScanReport


class ReportGenerator:
    def __init__(self, reporting_writer: ReportingWriter):
        self.reporting_writer = reporting_writer

    def generate_report(self, report: ScanReport) -> str:
        return self.reporting_writer.write(report)


def sanitize_image_name(image: str) -> str:
    # registry.example.com/team/app:v1.2 -> app_v1_2
    name_and_tag = image.rsplit("/", 1)[-1]
    return re.sub(r"[:/.\-]", "_", name_and_tag).rstrip("_")
