# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""Execution contexts give the scanner time-bounded access to a target image.

Every operation swallows its own failures: a missing binary, a non-zero exit
code or an expired timeout are reported as "not found" so callers can keep
going with the next item.
"""

import logging
from abc import ABC, abstractmethod

from image_license_scanner.adaptors.os import (
    CommandResult,
    head_lines_from_command,
    output_bytes_from_command,
    run_command_with_timeout,
)

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")


class ExecutionContext(ABC):
    @abstractmethod
    def run(self, args: list[str], timeout: float) -> CommandResult:
        raise NotImplementedError

    @abstractmethod
    def file_exists(self, path: str, timeout: float) -> bool:
        raise NotImplementedError

    @abstractmethod
    def dir_exists(self, path: str, timeout: float) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_file(self, path: str, timeout: float) -> bytes | None:
        raise NotImplementedError

    @abstractmethod
    def read_file_head(
        self, path: str, max_bytes: int, timeout: float
    ) -> bytes | None:
        """Return at most the first `max_bytes` bytes of `path`."""
        raise NotImplementedError

    @abstractmethod
    def find_files(
        self, root: str, name_patterns: list[str], limit: int, timeout: float
    ) -> list[str]:
        """Return up to `limit` regular files under `root` whose basename
        matches any of the shell-style `name_patterns`."""
        raise NotImplementedError


class ContainerExecutionContext(ExecutionContext):
    """Runs everything through `<runtime> exec <container>`."""

    def __init__(self, runtime: str, container_name: str) -> None:
        self.runtime = runtime
        self.container_name = container_name

    def _exec_args(self, args: list[str]) -> list[str]:
        return [self.runtime, "exec", self.container_name, *args]

    def run(self, args: list[str], timeout: float) -> CommandResult:
        result = run_command_with_timeout(self._exec_args(args), timeout)
        if result.timed_out:
            logger.debug(f"Command timed out in {self.container_name}: {args}")
        return result

    def file_exists(self, path: str, timeout: float) -> bool:
        return self.run(["test", "-f", path], timeout).success

    def dir_exists(self, path: str, timeout: float) -> bool:
        return self.run(["test", "-d", path], timeout).success

    def read_file(self, path: str, timeout: float) -> bytes | None:
        return output_bytes_from_command(self._exec_args(["cat", path]), timeout)

    def read_file_head(
        self, path: str, max_bytes: int, timeout: float
    ) -> bytes | None:
        return output_bytes_from_command(
            self._exec_args(["head", "-c", str(max_bytes), path]), timeout
        )

    def find_files(
        self, root: str, name_patterns: list[str], limit: int, timeout: float
    ) -> list[str]:
        if not name_patterns:
            return []
        name_clause: list[str] = []
        for pattern in name_patterns:
            if name_clause:
                name_clause.append("-o")
            name_clause.extend(["-name", pattern])
        args = ["find", root, "-type", "f", "(", *name_clause, ")"]
        # like `find | head`: stops at `limit` matches, a timeout keeps what was found
        return head_lines_from_command(self._exec_args(args), limit, timeout)
