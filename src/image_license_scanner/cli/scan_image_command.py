# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

# Command scanning a container image for package licenses and copyright files

import json
import logging
from enum import Enum
from typing import Annotated, Optional

import typer

from image_license_scanner.adaptors.datetime import get_datetime_now
from image_license_scanner.adaptors.os import create_dirs, path_join, write_file
from image_license_scanner.artifact_management.container_manager import (
    ContainerManager,
    ScanEnvironmentError,
    detect_container_runtime,
)
from image_license_scanner.config import JsonConfigParser, default_config
from image_license_scanner.copyright_harvester.copyright_harvester import (
    CopyrightHarvester,
)
from image_license_scanner.license_resolver.fallback_rules import FallbackRule
from image_license_scanner.license_resolver.license_resolver import LicenseResolver
from image_license_scanner.report_generator.report_generator import (
    ReportGenerator,
    sanitize_image_name,
)
from image_license_scanner.report_generator.writers.abstract_reporting_writer import (
    ReportingWriter,
)
from image_license_scanner.report_generator.writers.csv_reporting_writer import (
    CSVReportingWriter,
)
from image_license_scanner.report_generator.writers.json_reporting_writer import (
    JSONReportingWriter,
)
from image_license_scanner.report_generator.writers.text_reporting_writer import (
    TextReportingWriter,
)
from image_license_scanner.scanner.image_scanner import (
    ImageScanner,
    distroless_report,
)
from image_license_scanner.scanner.scan_report import ScanReport
from image_license_scanner.utils.logging import setup_logging

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")


class OutputFormat(str, Enum):
    TXT = "txt"
    CSV = "csv"
    JSON = "json"


WRITERS: dict[OutputFormat, type[ReportingWriter]] = {
    OutputFormat.TXT: TextReportingWriter,
    OutputFormat.CSV: CSVReportingWriter,
    OutputFormat.JSON: JSONReportingWriter,
}


def log_level_callback(value: str) -> str:
    if not isinstance(logging.getLevelName(value.upper()), int):
        raise typer.BadParameter(
            "Log level must be one of DEBUG, INFO, WARNING, ERROR or CRITICAL"
        )
    return value.upper()


def run_scan(
    image: str,
    runtime: str,
    copyright_dir: Optional[str],
    fallback_rules: list[FallbackRule],
    harvest_workers: int = 1,
) -> ScanReport:
    with ContainerManager(image, runtime) as container:
        if container.context is None:
            return distroless_report(image)
        harvester = None
        if copyright_dir is not None:
            harvester = CopyrightHarvester(
                container.context,
                copyright_dir,
                default_config,
                max_workers=harvest_workers,
            )
        scanner = ImageScanner(
            container.context,
            LicenseResolver.default(
                container.context, default_config, fallback_rules
            ),
            harvester,
            default_config,
        )
        return scanner.scan(image)


def write_reports(report: ScanReport, base_filename: str) -> dict[OutputFormat, str]:
    rendered = {}
    for output_format, writer in WRITERS.items():
        content = ReportGenerator(writer()).generate_report(report)
        file_path = f"{base_filename}.{output_format.value}"
        write_file(file_path, content)
        logger.info(f"  {output_format.value.upper()} format: {file_path}")
        rendered[output_format] = content
    return rendered


def scan_image(
    image: Annotated[
        str, typer.Argument(help="The container image to scan, e.g. ubuntu:22.04.")
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Report format printed to stdout. All formats are written to the output directory.",
        ),
    ] = OutputFormat.TXT,
    output_dir: Annotated[
        str,
        typer.Option(
            "--output-dir", "-o", help="Directory where the reports are written."
        ),
    ] = "./scan-results",
    runtime: Annotated[
        Optional[str],
        typer.Option(
            "--runtime",
            help="Container runtime to use (docker or nerdctl). Auto-detected by default.",
        ),
    ] = None,
    skip_copyright_files: Annotated[
        bool,
        typer.Option(
            "--skip-copyright-files",
            help="Do not extract copyright and license files from the image.",
        ),
    ] = False,
    fallback_rules_file: Annotated[
        Optional[str],
        typer.Option(
            "--fallback-rules",
            help="JSON file with extra [{pattern, license}] rules consulted before the built-in fallback table.",
        ),
    ] = None,
    harvest_workers: Annotated[
        int,
        typer.Option(
            "--harvest-workers",
            min=1,
            help="Number of copyright harvest passes run in parallel.",
        ),
    ] = 1,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
            callback=log_level_callback,
        ),
    ] = "INFO",
) -> None:
    """
    Scan a container image for installed packages and their licenses.

    Supports APT (Debian/Ubuntu), RPM (RedHat/CentOS/Fedora), APK (Alpine)
    and top level NPM packages, and extracts copyright files found in the
    image filesystem.
    """
    setup_logging(getattr(logging, log_level))

    fallback_rules: list[FallbackRule] = []
    if fallback_rules_file:
        try:
            fallback_rules = JsonConfigParser.load_fallback_rules(fallback_rules_file)
        except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
            typer.echo(f"Error: invalid fallback rules file: {e}", err=True)
            raise typer.Exit(code=1)

    logger.info(f"Target image: {image}")
    timestamp = get_datetime_now().strftime("%Y%m%d_%H%M%S")
    create_dirs(output_dir)
    base_filename = path_join(output_dir, f"{sanitize_image_name(image)}_{timestamp}")
    copyright_dir = None if skip_copyright_files else f"{base_filename}_copyright_files"

    try:
        container_runtime = detect_container_runtime(runtime)
        report = run_scan(
            image, container_runtime, copyright_dir, fallback_rules, harvest_workers
        )
    except ScanEnvironmentError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.info("Results saved to:")
    rendered = write_reports(report, base_filename)
    typer.echo(rendered[output_format])
