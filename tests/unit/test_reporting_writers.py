# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json
from datetime import datetime

import pytest
import pytz

from image_license_scanner.package_managers.manager_kind import ManagerKind
from image_license_scanner.report_generator.report_generator import (
    ReportGenerator,
    sanitize_image_name,
)
from image_license_scanner.report_generator.writers.csv_reporting_writer import (
    CSVReportingWriter,
)
from image_license_scanner.report_generator.writers.json_reporting_writer import (
    JSONReportingWriter,
)
from image_license_scanner.report_generator.writers.text_reporting_writer import (
    ROW_FORMAT,
    TextReportingWriter,
)
from image_license_scanner.scanner.scan_report import (
    DISTROLESS_NOTE,
    CopyrightFile,
    Package,
    ScanReport,
)

SCAN_DATE = datetime(2024, 5, 1, 12, 30, 15, tzinfo=pytz.UTC)


def standard_report() -> ScanReport:
    return ScanReport(
        image="debian:12",
        scan_date=SCAN_DATE,
        operating_system="Debian GNU/Linux 12 (bookworm)",
        os_family="Debian",
        packages=[
            Package("adduser", "3.134", ManagerKind.APT, "GPL-2.0"),
            Package("express", "4.18.2", ManagerKind.NPM, "MIT"),
            Package("bash", "5.2.15-2", ManagerKind.APT, "GPL-3.0"),
        ],
        copyright_files=[
            CopyrightFile("/usr/share/doc/bash/copyright", 1234, "usr/share/doc/bash/copyright")
        ],
    )


def distroless() -> ScanReport:
    report = ScanReport(image="gcr.io/distroless/static", scan_date=SCAN_DATE)
    report.mark_distroless(DISTROLESS_NOTE)
    return report


def test_csv_writer() -> None:
    csv_output = ReportGenerator(CSVReportingWriter()).generate_report(
        standard_report()
    )
    assert csv_output == (
        '"package_name","version","license","package_manager"\r\n'
        '"adduser","3.134","GPL-2.0","APT"\r\n'
        '"express","4.18.2","MIT","NPM"\r\n'
        '"bash","5.2.15-2","GPL-3.0","APT"\r\n'
    )


def test_csv_writer_quotes_embedded_quotes_and_commas() -> None:
    report = ScanReport(
        image="x",
        scan_date=SCAN_DATE,
        packages=[Package("p", "1", ManagerKind.RPM, 'MIT, "or" BSD')],
    )
    csv_output = CSVReportingWriter().write(report)
    assert '"p","1","MIT, ""or"" BSD","RPM"\r\n' in csv_output


def test_csv_writer_distroless() -> None:
    assert CSVReportingWriter().write(distroless()) == (
        '"package_name","version","license","package_manager"\r\n'
        "# No packages found - minimal/distroless image\r\n"
    )


def test_json_writer() -> None:
    document = json.loads(JSONReportingWriter().write(standard_report()))
    assert list(document) == [
        "image",
        "scan_date",
        "operating_system",
        "os_family",
        "packages",
        "copyright_files",
    ]
    assert document["scan_date"] == "2024-05-01T12:30:15+00:00"
    assert document["packages"][1] == {
        "name": "express",
        "version": "4.18.2",
        "license": "MIT",
        "package_manager": "NPM",
    }
    assert document["copyright_files"] == [
        {
            "path": "/usr/share/doc/bash/copyright",
            "size_bytes": 1234,
            "extracted_file": "usr/share/doc/bash/copyright",
        }
    ]


def test_json_writer_distroless() -> None:
    output = JSONReportingWriter().write(distroless())
    document = json.loads(output)
    assert list(document) == [
        "image",
        "scan_date",
        "operating_system",
        "os_family",
        "image_type",
        "packages",
        "note",
        "copyright_files",
    ]
    assert document["image_type"] == "minimal/distroless"
    assert document["packages"] == []
    assert document["note"] == DISTROLESS_NOTE
    assert output.startswith('{\n  "image"')


def test_text_writer_groups_by_manager() -> None:
    lines = TextReportingWriter().write(standard_report()).splitlines()

    assert lines[0] == "Package Scan Report for debian:12"
    assert "Operating System: Debian GNU/Linux 12 (bookworm)" in lines
    assert "OS Family: Debian" in lines
    apt_index = lines.index("APT/DPKG Packages:")
    npm_index = lines.index("Node.js Packages:")
    assert apt_index < npm_index
    assert lines[apt_index + 1] == "=" * len("APT/DPKG Packages:")
    assert lines[apt_index + 2] == ROW_FORMAT.format(
        "Package Name", "Version", "License", "Manager"
    )
    assert lines[apt_index + 3] == "-" * 80
    assert lines[apt_index + 4] == ROW_FORMAT.format(
        "adduser", "3.134", "GPL-2.0", "APT"
    )
    assert lines[apt_index + 5].startswith("bash ")
    assert "MINIMAL/DISTROLESS IMAGE DETECTED" not in lines


def test_text_writer_keeps_sections_of_detected_managers_without_packages() -> None:
    report = standard_report()
    report.packages = [p for p in report.packages if p.manager_kind == ManagerKind.APT]
    report.detected_managers = [ManagerKind.APT, ManagerKind.NPM]

    lines = TextReportingWriter().write(report).splitlines()

    npm_index = lines.index("Node.js Packages:")
    assert lines[npm_index + 1] == "=" * len("Node.js Packages:")
    assert lines[npm_index + 2] == ROW_FORMAT.format(
        "Package Name", "Version", "License", "Manager"
    )
    assert lines[npm_index + 3] == "-" * 80
    assert lines[npm_index + 4 :] == []


def test_text_writer_flattens_multiline_licenses() -> None:
    report = ScanReport(
        image="x",
        scan_date=SCAN_DATE,
        packages=[Package("p", "1", ManagerKind.APK, "MIT\nAND BSD")],
    )
    assert ROW_FORMAT.format("p", "1", "MIT AND BSD", "APK") in TextReportingWriter().write(
        report
    ).splitlines()


def test_text_writer_distroless() -> None:
    text = TextReportingWriter().write(distroless())
    assert "MINIMAL/DISTROLESS IMAGE DETECTED" in text
    assert "Packages:" not in text


@pytest.mark.parametrize(
    "image, expected",
    [
        ("nginx:latest", "nginx_latest"),
        ("registry.example.com/team/app:v1.2", "app_v1_2"),
        ("gcr.io/distroless/static-debian12", "static_debian12"),
        ("ubuntu", "ubuntu"),
    ],
)
def test_sanitize_image_name(image: str, expected: str) -> None:
    assert sanitize_image_name(image) == expected
