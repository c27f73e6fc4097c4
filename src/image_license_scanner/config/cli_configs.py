# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class Config:
    preset_copyright_file_names: list[str]
    preset_copyright_search_dirs: list[str]
    preset_copyright_dir_patterns: list[str]
    preset_content_sniff_patterns: list[str]
    content_sniff_keywords: str
    exact_name_limit: int
    substring_name_limit: int
    directory_limit: int
    content_sniff_limit: int
    probe_timeout: float
    list_timeout: float
    package_query_timeout: float
    file_check_timeout: float
    file_read_timeout: float
    find_timeout: float
    directory_find_timeout: float
    content_find_timeout: float
    content_sniff_timeout: float


default_config = Config(
    preset_copyright_file_names=[
        "copyright",
        "COPYRIGHT",
        "COPYING",
        "LICENSE",
        "LICENCE",  # I know it is misspelled, but it is common in the wild
        "license",
        "licence",
        "NOTICE",
        "notice",
        "AUTHORS",
        "authors",
        "CREDITS",
        "credits",
        "LEGAL",
        "legal",
    ],
    preset_copyright_search_dirs=[
        "/usr/share/doc",
        "/usr/share/licenses",
        "/opt",
        "/app",
        "/root",
        "/home",
        "/etc",
        "/var/lib",
    ],
    preset_copyright_dir_patterns=[
        "*copyright*",
        "*COPYRIGHT*",
        "*license*",
        "*LICENSE*",
        "*COPYING*",
        "*NOTICE*",
        "*AUTHORS*",
        "*CREDITS*",
    ],
    preset_content_sniff_patterns=[
        "*.txt",
        "*.md",
        "README*",
        "readme*",
    ],
    content_sniff_keywords=r"copyright|license|licensed|GPL|MIT|BSD|Apache",
    exact_name_limit=100,
    substring_name_limit=50,
    directory_limit=200,
    content_sniff_limit=100,
    probe_timeout=10,
    list_timeout=300,
    package_query_timeout=10,
    file_check_timeout=5,
    file_read_timeout=10,
    find_timeout=30,
    directory_find_timeout=60,
    content_find_timeout=120,
    content_sniff_timeout=5,
)
