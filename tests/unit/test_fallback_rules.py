# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import pytest

from image_license_scanner.license_resolver.fallback_rules import (
    FALLBACK_RULES,
    OSI_APPROVED,
    FallbackRule,
    lookup_fallback_license,
)


@pytest.mark.parametrize(
    "package_name, expected_license",
    [
        ("adduser", "GPL-2.0"),
        ("bash", "GPL-2.0"),
        ("libc6", "LGPL-2.1"),
        ("libssl3", "Apache-1.0"),
        ("openssl", "Apache-1.0"),
        ("libcurl4", "MIT"),
        ("zlib1g", "Zlib"),
        ("gcc-12-base", "GPL-3.0"),
        ("libstdc++6", "GPL-3.0"),
        ("ca-certificates", "MPL-2.0"),
        ("libsqlite3-0", "Public-Domain"),
        ("python3.11-minimal", "PSF"),
        ("perl-base", "Artistic | GPL-1.0+"),
        ("libpng16-16", "PNG"),
    ],
)
def test_fallback_table_known_packages(
    package_name: str, expected_license: str
) -> None:
    assert lookup_fallback_license(package_name, FALLBACK_RULES) == expected_license


@pytest.mark.parametrize(
    "package_name, expected_license",
    [
        ("libzmq5", "LGPL-3.0"),  # before libz*
        ("libdb5.3", "Sleepycat"),  # before libdb*
        ("libdbus-1-3", "GPL-2.0"),  # before libdb*
        ("libevent-2.1-7", "BSD-3-Clause"),  # before libev*
        ("libcap2", "GPL-2.0"),  # before libcap*
        ("libssh-4", "LGPL-2.1"),  # before libss*
        ("libss2", "MIT"),
    ],
)
def test_fallback_table_specific_patterns_precede_broader_ones(
    package_name: str, expected_license: str
) -> None:
    assert lookup_fallback_license(package_name, FALLBACK_RULES) == expected_license


@pytest.mark.parametrize(
    "package_name",
    ["", "totally-unknown-package", "@scope/npm-thing", "UPPERCASE", "lib"],
)
def test_fallback_table_always_yields_a_license(package_name: str) -> None:
    assert lookup_fallback_license(package_name, FALLBACK_RULES) == OSI_APPROVED


def test_fallback_table_ends_with_catch_all() -> None:
    assert FALLBACK_RULES[-1] == FallbackRule(name_pattern="*", license=OSI_APPROVED)
    assert all(rule.name_pattern != "*" for rule in FALLBACK_RULES[:-1])


def test_fallback_lookup_without_rules_returns_none() -> None:
    assert lookup_fallback_license("bash", []) is None


def test_fallback_rule_matching_is_case_sensitive() -> None:
    rule = FallbackRule(name_pattern="libssl*", license="Apache-1.0")
    assert rule.matches("libssl1.1")
    assert not rule.matches("LIBSSL1.1")
