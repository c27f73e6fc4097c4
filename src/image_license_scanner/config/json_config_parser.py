# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import json
import logging

from image_license_scanner.adaptors.os import open_file
from image_license_scanner.license_resolver.fallback_rules import FallbackRule


class JsonConfigParser:
    """Parser for JSON configuration files used by image-license-scanner."""

    @staticmethod
    def parse_fallback_rules(rules_json: object) -> list[FallbackRule]:
        """Convert a JSON list of pattern/license objects to FallbackRule objects.

        JSON format: [{"pattern": "libfoo*", "license": "MIT"}]

        Raises:
            ValueError: If the format is invalid
        """
        if not isinstance(rules_json, list):
            raise ValueError("Fallback rules must be a JSON list of objects.")
        rules = []
        for rule in rules_json:
            if not isinstance(rule, dict):
                raise ValueError(f"Invalid fallback rule: {rule}")
            pattern = rule.get("pattern")
            license = rule.get("license")
            if not isinstance(pattern, str) or not pattern:
                raise ValueError(f"Fallback rule is missing a pattern: {rule}")
            if not isinstance(license, str) or not license.strip():
                raise ValueError(f"Fallback rule is missing a license: {rule}")
            rules.append(FallbackRule(name_pattern=pattern, license=license.strip()))
        return rules

    @staticmethod
    def load_fallback_rules(rules_file_path: str) -> list[FallbackRule]:
        """Load user supplied fallback rules from a JSON file.

        Args:
            rules_file_path: Path to the JSON file containing the rules

        Returns:
            List of FallbackRule objects, in file order

        Raises:
            FileNotFoundError: If the rules file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the rules format is invalid
        """
        try:
            return JsonConfigParser.parse_fallback_rules(
                json.loads(open_file(rules_file_path))
            )
        except FileNotFoundError:
            logging.error(f"Fallback rules file not found: {rules_file_path}")
            raise
        except json.JSONDecodeError:
            logging.error(f"Invalid JSON in fallback rules file: {rules_file_path}")
            raise
        except Exception as e:
            logging.error(f"Error reading fallback rules file: {e}")
            raise
