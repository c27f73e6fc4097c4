# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from fnmatch import fnmatchcase
from typing import Callable

import pytest

from image_license_scanner.adaptors.os import CommandResult
from image_license_scanner.artifact_management.execution_context import (
    ExecutionContext,
)


def ok(stdout: str = "") -> CommandResult:
    return CommandResult(returncode=0, stdout=stdout, stderr="")


def not_found() -> CommandResult:
    return CommandResult(returncode=127, stdout="", stderr="not found")


class FakeExecutionContext(ExecutionContext):
    """In-memory image: a dict of absolute path -> content and canned commands."""

    def __init__(
        self,
        files: dict[str, bytes] | None = None,
        commands: dict[tuple[str, ...], CommandResult] | None = None,
        unreadable: set[str] | None = None,
    ) -> None:
        self.files = files or {}
        self.commands = commands or {}
        self.unreadable = unreadable or set()
        self.run_calls: list[list[str]] = []
        self.read_calls: list[str] = []
        self.head_calls: list[str] = []

    def run(self, args: list[str], timeout: float) -> CommandResult:
        self.run_calls.append(args)
        return self.commands.get(tuple(args), not_found())

    def file_exists(self, path: str, timeout: float) -> bool:
        return path in self.files

    def dir_exists(self, path: str, timeout: float) -> bool:
        prefix = path.rstrip("/") + "/"
        return any(file_path.startswith(prefix) for file_path in self.files)

    def read_file(self, path: str, timeout: float) -> bytes | None:
        self.read_calls.append(path)
        if path in self.unreadable:
            return None
        return self.files.get(path)

    def read_file_head(
        self, path: str, max_bytes: int, timeout: float
    ) -> bytes | None:
        self.head_calls.append(path)
        if path in self.unreadable or path not in self.files:
            return None
        return self.files[path][:max_bytes]

    def find_files(
        self, root: str, name_patterns: list[str], limit: int, timeout: float
    ) -> list[str]:
        prefix = root.rstrip("/") + "/"
        found = [
            path
            for path in sorted(self.files)
            if path.startswith(prefix)
            and any(
                fnmatchcase(path.rsplit("/", 1)[-1], pattern)
                for pattern in name_patterns
            )
        ]
        return found[:limit]


@pytest.fixture
def make_context() -> Callable[..., FakeExecutionContext]:
    return FakeExecutionContext
