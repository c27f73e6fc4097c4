# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from typing import Callable

import pytest

from conftest import ok
from image_license_scanner.scanner.os_detection import (
    OperatingSystem,
    OsDetector,
    operating_system_from_os_release,
    os_family_from_id,
)


@pytest.mark.parametrize(
    "os_id, family",
    [
        ("ubuntu", "Debian"),
        ("debian", "Debian"),
        ("rocky", "RedHat"),
        ("alpine", "Alpine"),
        ("opensuse-leap", "SUSE"),
        ("wolfi", "Linux"),
        ("", "Linux"),
    ],
)
def test_os_family_from_id(os_id: str, family: str) -> None:
    assert os_family_from_id(os_id) == family


def test_os_release_prefers_version() -> None:
    content = 'NAME="Ubuntu"\nVERSION="22.04.3 LTS (Jammy Jellyfish)"\nVERSION_ID="22.04"\nID=ubuntu\n'
    assert operating_system_from_os_release(content) == OperatingSystem(
        "Ubuntu 22.04.3 LTS (Jammy Jellyfish)", "Debian"
    )


def test_os_release_falls_back_to_version_id() -> None:
    content = 'NAME="Alpine Linux"\nID=alpine\nVERSION_ID=3.19.1\n'
    assert operating_system_from_os_release(content) == OperatingSystem(
        "Alpine Linux 3.19.1", "Alpine"
    )


def test_os_release_takes_version_from_pretty_name() -> None:
    content = 'NAME="Alpine Linux"\nID=alpine\nPRETTY_NAME="Alpine Linux v3.19"\n'
    assert operating_system_from_os_release(content).name == "Alpine Linux 3.19"


def test_os_release_without_name() -> None:
    assert operating_system_from_os_release("ID=debian\n") == OperatingSystem(
        "Unknown OS", "Debian"
    )


def test_detect_redhat_release(make_context: Callable) -> None:
    context = make_context(
        files={"/etc/redhat-release": b"CentOS Linux release 7.9.2009 (Core)\n"}
    )
    assert OsDetector(context).detect() == OperatingSystem(
        "CentOS Linux release 7.9.2009 (Core)", "RedHat"
    )


def test_detect_alpine_release(make_context: Callable) -> None:
    context = make_context(files={"/etc/alpine-release": b"3.18.4\n"})
    assert OsDetector(context).detect() == OperatingSystem(
        "Alpine Linux 3.18.4", "Alpine"
    )


def test_detect_debian_version(make_context: Callable) -> None:
    context = make_context(files={"/etc/debian_version": b"11.8\n"})
    assert OsDetector(context).detect() == OperatingSystem("Debian 11.8", "Debian")


def test_detect_from_uname(make_context: Callable) -> None:
    context = make_context(
        commands={
            ("uname", "-a"): ok(
                "Linux 3f2a 6.5.0-14-generic #14-Ubuntu SMP x86_64 GNU/Linux\n"
            )
        }
    )
    assert OsDetector(context).detect() == OperatingSystem(
        "Linux (6.5.0-14-generic)", "Linux"
    )


def test_detect_from_package_manager_binary(make_context: Callable) -> None:
    context = make_context(commands={("which", "rpm"): ok("/usr/bin/rpm\n")})
    assert OsDetector(context).detect() == OperatingSystem("RedHat-based", "RedHat")


def test_detect_nothing(make_context: Callable) -> None:
    assert OsDetector(make_context()).detect() == OperatingSystem("Unknown", "Unknown")
