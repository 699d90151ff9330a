# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry points: parse Java source text or a Java source file into a declaration."""

import logging
from pathlib import Path

from jdoc.config import ParserConfig
from jdoc.model.declarations import ObjectType
from jdoc.parser.builder import build_declaration
from jdoc.parser.lexer import tokenize

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class SourceFileError(Exception):
    """Raised when a source file cannot be opened, read, or decoded.

    Attributes:
        path: The file that could not be read.
    """

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


def parse(source: str, config: ParserConfig | None = None) -> ObjectType:
    """Parse Java source text into a declaration.

    Parsing is lenient: unsupported constructs are reported through logging and
    skipped. Source without any type declaration yields an empty ClassDef.

    Args:
        source: The full text of a .java file.
        config: Parser settings; defaults apply when omitted.

    Returns:
        A ClassDef, InterfaceDef, or EnumDef.

    Raises:
        ParseError: If the token stream is internally inconsistent.
    """
    config = config or ParserConfig()
    return build_declaration(tokenize(source, config.ignored_keywords))


def parse_file(path: Path, lint: bool = False, config: ParserConfig | None = None) -> ObjectType:
    """Read and parse one Java source file.

    Args:
        path: Path to the .java file.
        lint: Reserved for documentation linting; accepted but not consulted.
        config: Parser settings; defaults apply when omitted.

    Returns:
        A ClassDef, InterfaceDef, or EnumDef.

    Raises:
        SourceFileError: If the file cannot be read as text.
        ParseError: If the token stream is internally inconsistent.
    """
    config = config or ParserConfig()
    path = Path(path)
    try:
        text = path.read_text(encoding=config.encoding)
    except FileNotFoundError:
        raise SourceFileError(f"Source file not found: {path}", path) from None
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise SourceFileError(f"Cannot read source file '{path}': {exc}", path) from exc

    logger.debug(f"Parsing {path} (lint={lint})")
    return parse(text, config)
