# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and declaration parser for Java source files."""

from jdoc.parser.builder import ParseError
from jdoc.parser.parser import SourceFileError, parse, parse_file

__all__ = [
    "parse",
    "parse_file",
    "ParseError",
    "SourceFileError",
]
