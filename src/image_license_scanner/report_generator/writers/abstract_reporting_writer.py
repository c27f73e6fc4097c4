# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from abc import ABC, abstractmethod

from image_license_scanner.scanner.scan_report import ScanReport


class ReportingWriter(ABC):
    @abstractmethod
    def write(self, report: ScanReport) -> str:
        raise NotImplementedError
