# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the parser configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".jdoc.yaml"


class ParserConfigError(Exception):
    """Raised when a parser configuration file is invalid or cannot be loaded."""


@dataclass
class ParserConfig:
    """Settings for parsing Java source files.

    Attributes:
        encoding: Text encoding used to read source files.
        ignored_keywords: Extra words lexed as ignorable keywords, e.g. framework
            annotations such as ``@Autowired`` whose arguments should be skipped.
    """

    encoding: str = "utf-8"
    ignored_keywords: list[str] = field(default_factory=list)


def load_parser_config(path: Path) -> ParserConfig:
    """Load and parse a parser configuration file.

    Args:
        path: Path to the `.jdoc.yaml` file.

    Returns:
        A ParserConfig instance populated from the file.

    Raises:
        ParserConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ParserConfigError(f"Parser config file not found: {path}") from None
    except OSError as exc:
        raise ParserConfigError(f"Cannot read parser config file: {exc}") from exc

    return _parse_parser_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_parser_config(text: str, source_label: str = "<string>") -> ParserConfig:
    """Parse parser config YAML text into a ParserConfig.

    An empty document yields the defaults.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParserConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ParserConfig()
    if not isinstance(data, dict):
        raise ParserConfigError(f"{source_label}: parser config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ParserConfigError(f"{source_label}: unknown field(s) {', '.join(map(str, unknown))}")

    config = ParserConfig()
    if "encoding" in data:
        config.encoding = _require_string(data, "encoding", source_label)
    if "ignored-keywords" in data:
        config.ignored_keywords = _require_string_list(data, "ignored-keywords", source_label)
    return config


_KNOWN_KEYS = frozenset({"encoding", "ignored-keywords"})


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising ParserConfigError if it has the wrong type."""
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise ParserConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value


def _require_string_list(mapping: dict[str, object], key: str, source_label: str) -> list[str]:
    value = mapping[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ParserConfigError(f"{source_label}: '{key}' must be a list of strings")
    return list(value)
