# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

# Map free license text to a short canonical token

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizationRule:
    keywords: tuple[str, ...]  # any of them must be present
    qualifier: str | None  # must also be present when set
    token: str

    def matches(self, text: str) -> bool:
        if not any(keyword in text for keyword in self.keywords):
            return False
        return self.qualifier is None or self.qualifier in text


_GPL = ("GPL", "General Public License")

# Substring matching only, a dual licensed
# "GPLv3 or LGPLv2.1" text resolves to whatever rule comes first.
NORMALIZATION_RULES: tuple[NormalizationRule, ...] = (
    NormalizationRule(("LGPL",), "2.1", "LGPL-2.1"),
    NormalizationRule(("Lesser General Public License",), None, "LGPL-2.1"),
    NormalizationRule(("LGPL",), "3", "LGPL-3.0"),
    NormalizationRule(("LGPL",), None, "LGPL"),
    NormalizationRule(_GPL, "3", "GPL-3.0"),
    NormalizationRule(_GPL, "2", "GPL-2.0"),
    NormalizationRule(_GPL, None, "GPL"),
    NormalizationRule(("MIT",), None, "MIT"),
    NormalizationRule(("BSD",), None, "BSD"),
    NormalizationRule(("Apache",), None, "Apache"),
    NormalizationRule(("Mozilla",), None, "MPL"),
)


def normalize_license_text(text: str) -> str | None:
    """Return the canonical token for `text`, or None when no rule matches."""
    if not text or not text.strip():
        return None
    for rule in NORMALIZATION_RULES:
        if rule.matches(text):
            return rule.token
    return None


def clean_license_string(license: str | None) -> str:
    """Trim whitespace and strip quote characters from a declared license."""
    if not license:
        return ""
    return license.replace('"', "").replace("'", "").strip()
