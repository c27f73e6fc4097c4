# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""Copyright harvester collects license, copyright and notice files from the
scanned filesystem and mirrors them under a local output directory."""

import logging
import posixpath
import re
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable

from image_license_scanner.adaptors.os import (
    create_dirs,
    parent_dir,
    path_join,
    write_bytes,
)
from image_license_scanner.artifact_management.execution_context import (
    ExecutionContext,
)
from image_license_scanner.config.cli_configs import Config, default_config
from image_license_scanner.scanner.scan_report import CopyrightFile

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")

CONTENT_SNIFF_BYTES = 64 * 1024


class CopyrightHarvester:
    def __init__(
        self,
        context: ExecutionContext,
        output_dir: str,
        config: Config = default_config,
        max_workers: int = 1,
    ) -> None:
        self.context = context
        self.output_dir = output_dir
        self.config = config
        self.max_workers = max(1, max_workers)
        self._content_keywords = re.compile(
            config.content_sniff_keywords, re.IGNORECASE
        )
        self._lock = threading.Lock()
        self._seen_paths: set[str] = set()
        self._harvested: list[CopyrightFile] = []

    def _claim(self, path: str) -> bool:
        with self._lock:
            if path in self._seen_paths:
                return False
            self._seen_paths.add(path)
            return True

    def _is_seen(self, path: str) -> bool:
        with self._lock:
            return path in self._seen_paths

    @staticmethod
    def _normalize(path: str) -> str | None:
        path = path.strip()
        if not path.startswith("/"):
            return None
        return posixpath.normpath(path)

    def _store(self, original_path: str, content: bytes) -> None:
        relative_path = original_path.lstrip("/")
        destination = path_join(self.output_dir, relative_path)
        try:
            create_dirs(parent_dir(destination))
            write_bytes(destination, content)
        except OSError as e:
            logger.debug(f"Failed to extract {original_path}: {e}")
            return
        logger.debug(f"Extracted: {original_path}")
        with self._lock:
            self._harvested.append(
                CopyrightFile(
                    original_path=original_path,
                    size_bytes=len(content),
                    extracted_relative_path=relative_path,
                )
            )

    def _extract(self, found_path: str) -> None:
        path = self._normalize(found_path)
        if path is None or not self._claim(path):
            return
        content = self.context.read_file(path, self.config.file_read_timeout)
        if content is None:
            logger.debug(f"Could not read {path}, skipping")
            return
        self._store(path, content)

    def exact_name_pass(self) -> None:
        for name in self.config.preset_copyright_file_names:
            logger.debug(f"Searching for files named {name}")
            for path in self.context.find_files(
                "/", [name], self.config.exact_name_limit, self.config.find_timeout
            ):
                self._extract(path)

    def substring_name_pass(self) -> None:
        for name in self.config.preset_copyright_file_names:
            logger.debug(f"Searching for files containing {name}")
            for path in self.context.find_files(
                "/",
                [f"*{name}*"],
                self.config.substring_name_limit,
                self.config.find_timeout,
            ):
                self._extract(path)

    def directory_pass(self) -> None:
        for directory in self.config.preset_copyright_search_dirs:
            if not self.context.dir_exists(directory, self.config.file_read_timeout):
                continue
            logger.debug(f"Searching in directory: {directory}")
            for path in self.context.find_files(
                directory,
                self.config.preset_copyright_dir_patterns,
                self.config.directory_limit,
                self.config.directory_find_timeout,
            ):
                self._extract(path)

    def content_sniff_pass(self) -> None:
        """Pick up text files that mention a license even with an unusual name."""
        candidates = self.context.find_files(
            "/",
            self.config.preset_content_sniff_patterns,
            self.config.content_sniff_limit,
            self.config.content_find_timeout,
        )
        for found_path in candidates:
            path = self._normalize(found_path)
            if path is None or self._is_seen(path):
                continue
            head = self.context.read_file_head(
                path, CONTENT_SNIFF_BYTES, self.config.content_sniff_timeout
            )
            if head is None:
                continue
            if self._content_keywords.search(head.decode("utf-8", errors="replace")):
                self._extract(path)

    @staticmethod
    def _run_guarded(harvest_pass: Callable[[], None]) -> None:
        try:
            harvest_pass()
        except Exception as e:
            logger.warning(f"Copyright pass {harvest_pass.__name__} failed: {e}")

    def _run_passes(self, passes: list[Callable[[], None]]) -> None:
        if self.max_workers == 1:
            for harvest_pass in passes:
                self._run_guarded(harvest_pass)
            return
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._run_guarded, harvest_pass)
                for harvest_pass in passes
            ]
            for future in as_completed(futures):
                future.result()

    def harvest(self) -> list[CopyrightFile]:
        logger.info("Starting copyright file collection...")
        try:
            create_dirs(self.output_dir)
        except OSError as e:
            logger.warning(
                f"Cannot create {self.output_dir}, skipping copyright files: {e}"
            )
            return []
        self._run_passes(
            [self.exact_name_pass, self.substring_name_pass, self.directory_pass]
        )
        logger.info("Searching for files containing copyright text...")
        self._run_guarded(self.content_sniff_pass)

        with self._lock:
            harvested = sorted(self._harvested, key=lambda f: f.original_path)
        if harvested:
            logger.info(f"Found and extracted {len(harvested)} copyright files")
        else:
            logger.warning("No copyright files found in the image")
        return harvested
