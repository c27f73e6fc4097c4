# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from pathlib import Path
from typing import Callable

import pytest
import pytest_mock

from image_license_scanner.copyright_harvester.copyright_harvester import (
    CONTENT_SNIFF_BYTES,
    CopyrightHarvester,
)
from image_license_scanner.scanner.scan_report import CopyrightFile

FOO_COPYRIGHT = b"Copyright 2020 Foo Authors\nLicense: MIT\n"
IMAGE_FILES = {
    "/usr/share/doc/foo/copyright": FOO_COPYRIGHT,
    "/usr/share/licenses/bar/COPYING": b"GNU GENERAL PUBLIC LICENSE\n",
    "/app/README.md": b"# app\n\nReleased under the MIT license.\n",
    "/app/notes.txt": b"hello world\n",
    "/usr/bin/ls": b"\x7fELF",
}


def test_file_matched_by_every_pass_is_extracted_once(
    make_context: Callable, tmp_path: Path
) -> None:
    context = make_context(files={"/usr/share/doc/foo/copyright": FOO_COPYRIGHT})
    harvested = CopyrightHarvester(context, str(tmp_path)).harvest()

    assert harvested == [
        CopyrightFile(
            original_path="/usr/share/doc/foo/copyright",
            size_bytes=len(FOO_COPYRIGHT),
            extracted_relative_path="usr/share/doc/foo/copyright",
        )
    ]
    assert context.read_calls == ["/usr/share/doc/foo/copyright"]
    assert (tmp_path / "usr/share/doc/foo/copyright").read_bytes() == FOO_COPYRIGHT


def test_harvest_collects_by_name_and_by_content(
    make_context: Callable, tmp_path: Path
) -> None:
    context = make_context(files=IMAGE_FILES)
    harvested = CopyrightHarvester(context, str(tmp_path)).harvest()

    assert [f.original_path for f in harvested] == [
        "/app/README.md",
        "/usr/share/doc/foo/copyright",
        "/usr/share/licenses/bar/COPYING",
    ]
    assert (tmp_path / "app/README.md").exists()
    assert not (tmp_path / "app/notes.txt").exists()
    assert not (tmp_path / "usr/bin/ls").exists()


def test_unreadable_file_is_skipped_and_not_retried(
    make_context: Callable, tmp_path: Path
) -> None:
    context = make_context(
        files={"/opt/LICENSE": b"MIT"}, unreadable={"/opt/LICENSE"}
    )
    assert CopyrightHarvester(context, str(tmp_path)).harvest() == []
    assert context.read_calls.count("/opt/LICENSE") == 1


def test_harvests_into_separate_directories_find_the_same_files(
    make_context: Callable, tmp_path: Path
) -> None:
    first = CopyrightHarvester(
        make_context(files=IMAGE_FILES), str(tmp_path / "first")
    ).harvest()
    second = CopyrightHarvester(
        make_context(files=IMAGE_FILES), str(tmp_path / "second")
    ).harvest()

    assert {f.original_path for f in first} == {f.original_path for f in second}
    assert len(first) == 3
    assert (tmp_path / "second" / "usr/share/doc/foo/copyright").exists()


def test_content_sniff_skips_paths_already_extracted(
    make_context: Callable, tmp_path: Path
) -> None:
    context = make_context(files={"/srv/LICENSE.txt": b"MIT License\n"})
    harvested = CopyrightHarvester(context, str(tmp_path)).harvest()
    assert [f.original_path for f in harvested] == ["/srv/LICENSE.txt"]
    assert context.read_calls == ["/srv/LICENSE.txt"]


def test_relative_paths_from_find_are_ignored(
    make_context: Callable, mocker: pytest_mock.MockFixture, tmp_path: Path
) -> None:
    context = make_context()
    mocker.patch.object(context, "find_files", return_value=["relative/LICENSE"])
    assert CopyrightHarvester(context, str(tmp_path)).harvest() == []
    assert context.read_calls == []


@pytest.mark.parametrize("max_workers", [1, 3])
def test_harvest_result_does_not_depend_on_worker_count(
    make_context: Callable, tmp_path: Path, max_workers: int
) -> None:
    context = make_context(files=IMAGE_FILES)
    harvested = CopyrightHarvester(
        context, str(tmp_path), max_workers=max_workers
    ).harvest()
    assert len(harvested) == 3
    assert context.read_calls.count("/usr/share/doc/foo/copyright") == 1


def test_content_sniff_reads_only_the_head_of_candidates(
    make_context: Callable, tmp_path: Path
) -> None:
    late_keyword = b"x" * CONTENT_SNIFF_BYTES + b" MIT license"
    context = make_context(
        files={"/data/dump.txt": late_keyword, "/app/README.md": b"Apache 2.0\n"}
    )
    harvested = CopyrightHarvester(context, str(tmp_path)).harvest()

    assert [f.original_path for f in harvested] == ["/app/README.md"]
    assert sorted(context.head_calls) == ["/app/README.md", "/data/dump.txt"]
    assert context.read_calls == ["/app/README.md"]


@pytest.mark.parametrize("max_workers", [1, 2])
def test_failing_pass_does_not_abort_the_harvest(
    make_context: Callable,
    mocker: pytest_mock.MockFixture,
    tmp_path: Path,
    max_workers: int,
) -> None:
    def substring_name_pass() -> None:
        raise RuntimeError("find exploded")

    def content_sniff_pass() -> None:
        raise RuntimeError("sniff exploded")

    harvester = CopyrightHarvester(
        make_context(files=IMAGE_FILES), str(tmp_path), max_workers=max_workers
    )
    mocker.patch.object(harvester, "substring_name_pass", new=substring_name_pass)
    mocker.patch.object(harvester, "content_sniff_pass", new=content_sniff_pass)

    harvested = harvester.harvest()

    assert [f.original_path for f in harvested] == [
        "/usr/share/doc/foo/copyright",
        "/usr/share/licenses/bar/COPYING",
    ]


def test_unwritable_output_directory_yields_no_files(
    make_context: Callable, mocker: pytest_mock.MockFixture, tmp_path: Path
) -> None:
    mocker.patch(
        "image_license_scanner.copyright_harvester.copyright_harvester.create_dirs",
        side_effect=PermissionError("read-only file system"),
    )
    context = make_context(files=IMAGE_FILES)
    assert CopyrightHarvester(context, str(tmp_path)).harvest() == []
    assert context.read_calls == []
