# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration builder: the state machine that turns a token stream into a declaration.

The builder walks the tokens once. Words are grouped and classified into
grammar parts until a statement terminator (``;`` or ``{``) is reached, at
which point the statement is handed to one of the statement handlers: the
type header, a method signature, a field declaration, or an enum constant
list. Doc comments are collected on the side and attached to the next
statement.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from jdoc.model.declarations import ObjectType
from jdoc.model.docs import Doc
from jdoc.parser.grammar import GrammarKind, GrammarPart, classify_words, keyword_part
from jdoc.parser.handlers import apply_object_header, build_enum_fields, build_member, build_method
from jdoc.parser.javadoc import JdocToken, JdocTokenType, parse_doc
from jdoc.parser.keywords import DOC_TAGS, OBJECT_KEYWORDS, STATEMENT_KEYWORDS, STRUCTURAL_KEYWORDS
from jdoc.parser.lexer import Token, TokenType
from jdoc.parser.object_builder import ObjectBuilder, ObjectState

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised when the token stream is internally inconsistent.

    Attributes:
        line: 1-based line number of the offending token.
    """

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"Line {line}: {message}")
        self.line = line


def build_declaration(tokens: list[Token]) -> ObjectType:
    """Build the declaration of one source file from its tokens.

    Args:
        tokens: The token stream produced by :func:`jdoc.parser.lexer.tokenize`.

    Returns:
        The finalized class, interface, or enum declaration.

    Raises:
        ParseError: If a statement terminator other than ``;`` or ``{`` is
            found in code.
    """
    return DeclarationBuilder(tokens).build()


class Span(enum.Enum):
    """The kind of source text the builder is currently inside."""

    CODE = "code"
    DOC = "doc"
    BLOCK_COMMENT = "block_comment"
    LINE_COMMENT = "line_comment"


class ParseState(enum.Enum):
    """Which handler the next ``{`` belongs to."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    OTHER = "other"


class AnnotationState(enum.Enum):
    """Progress through an annotation such as ``@SuppressWarnings("x")``."""

    NONE = "none"
    PENDING = "pending"
    ARGUMENTS = "arguments"


@dataclass
class Cursor:
    """Line tracking threaded through the builder.

    Attributes:
        line: The line currently being read.
        statement_line: The line the current statement started on, if any.
        lines: Trimmed text of every line, by line number.
    """

    line: int = 1
    statement_line: int | None = None
    lines: dict[int, str] = field(default_factory=dict)

    def mark_statement(self) -> None:
        if self.statement_line is None:
            self.statement_line = self.line

    def statement_position(self) -> tuple[int, str]:
        """Return the line number and text the current statement started on."""
        line = self.statement_line if self.statement_line is not None else self.line
        return line, self.lines.get(line, "")


class DeclarationBuilder:
    """Builds a declaration from a token stream; single use."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._object = ObjectBuilder()
        self._cursor = Cursor(lines=_index_lines(tokens))
        self._span = Span.CODE
        self._annotation = AnnotationState.NONE
        self._annotation_depth = 0
        self._parse_state = ParseState.OTHER
        self._in_object = False
        self._enum_constants_done = False
        self._file_body_open = False

        self._doc = Doc()
        self._doc_tokens: list[JdocToken] = []
        self._comment_words: list[str] = []
        self._header_comment = ""

        # Current statement
        self._parts: list[GrammarPart] = []
        self._words: list[str] = []
        self._pending_name = ""
        self._has_params = False
        self._initializer = False
        self._executable = False
        self._nested = False

    def build(self) -> ObjectType:
        """Walk all tokens and return the finalized declaration."""
        handlers = {
            TokenType.KEYWORD: self._on_keyword,
            TokenType.SYMBOL: self._on_symbol,
            TokenType.JOIN: self._on_join,
            TokenType.PARAM_START: self._on_param_start,
            TokenType.PARAM_END: self._on_param_end,
            TokenType.EXPRESSION_END: self._on_expression_end,
            TokenType.LINE_NUMBER: self._on_line_number,
            TokenType.SIGN: self._on_sign,
        }
        for token in self._tokens:
            if self._annotation is AnnotationState.ARGUMENTS and not _is_line_token(token):
                self._skip_annotation_argument(token)
                continue
            handlers[token.type](token)

        self._finish_enum_constants()
        return self._object.finalize()

    # ------------------------------------------------------------------
    # Token handlers
    # ------------------------------------------------------------------

    def _on_keyword(self, token: Token) -> None:
        keyword = token.value
        if self._span is Span.DOC:
            self._doc_tokens.append(_doc_token(keyword))
            return
        if self._span is Span.BLOCK_COMMENT:
            self._comment_words.append(keyword)
            return
        if self._span is Span.LINE_COMMENT:
            return

        self._flush_words()
        self._annotation = AnnotationState.NONE

        if keyword in OBJECT_KEYWORDS:
            self._on_object_keyword(keyword, token.line)
        elif keyword in STRUCTURAL_KEYWORDS:
            if keyword == "package" and self._header_comment:
                self._object.license = self._header_comment
            part = keyword_part(keyword)
            if part is not None:
                self._add_part(part)
        elif keyword.startswith("@"):
            if keyword in DOC_TAGS:
                logger.warning(f"Javadoc tag outside of a doc comment on line {token.line}: {keyword}")
            else:
                self._annotation = AnnotationState.PENDING
        else:
            if keyword in STATEMENT_KEYWORDS:
                self._executable = True
            logger.debug(f"Keyword not supported: {keyword}")

    def _on_object_keyword(self, keyword: str, line: int) -> None:
        if self._in_object:
            logger.warning(f"Nested type declarations are not supported: {keyword} on line {line}")
            self._nested = True
            return
        self._object.state = _OBJECT_STATES[keyword]
        self._parse_state = _PARSE_STATES[keyword]
        self._in_object = True
        self._add_part(GrammarPart(GrammarKind.OBJECT, keyword))

    def _on_symbol(self, token: Token) -> None:
        word = token.value

        if self._span is Span.LINE_COMMENT:
            pass
        elif word == "*/":
            self._close_comment()
        elif self._span is Span.DOC:
            self._doc_tokens.append(_doc_token(word))
        elif self._span is Span.BLOCK_COMMENT:
            if word != "*":
                self._comment_words.append(word)
        elif word == "/**":
            self._span = Span.DOC
            self._doc_tokens = []
        elif word == "/*":
            self._span = Span.BLOCK_COMMENT
            self._comment_words = []
        elif word == "//":
            self._span = Span.LINE_COMMENT
        elif word.startswith("@"):
            self._annotation = AnnotationState.PENDING
            return
        else:
            if "=" in word:
                self._initializer = True
            self._words.append(word)
            self._cursor.mark_statement()

        self._annotation = AnnotationState.NONE

    def _on_join(self, token: Token) -> None:
        if self._span is Span.CODE:
            self._flush_words()

    def _on_param_start(self, token: Token) -> None:
        if self._span is not Span.CODE:
            return
        if self._annotation is AnnotationState.PENDING:
            self._annotation = AnnotationState.ARGUMENTS
            self._annotation_depth = 1
            return
        self._flush_words()
        if not self._initializer:
            self._has_params = True

    def _on_param_end(self, token: Token) -> None:
        if self._span is not Span.CODE:
            return
        if len(self._words) == 1:
            self._pending_name = self._words[0]
            self._words = []
        else:
            self._flush_words()

    def _on_expression_end(self, token: Token) -> None:
        if self._span is not Span.CODE:
            logger.debug(f"Ignoring {token.value!r} inside a comment on line {token.line}")
            return

        self._flush_words()
        if token.value == ";":
            self._end_statement()
        elif token.value == "{":
            self._begin_block()
        else:
            raise ParseError(f"Expression end not allowed: {token.value!r}", token.line)
        self._reset_statement()

    def _on_line_number(self, token: Token) -> None:
        self._cursor.line = int(token.value)
        if self._span is Span.LINE_COMMENT:
            self._span = Span.CODE

    def _on_sign(self, token: Token) -> None:
        # Signatures are looked up in the line index built up front.
        pass

    # ------------------------------------------------------------------
    # Statement dispatch
    # ------------------------------------------------------------------

    def _end_statement(self) -> None:
        """Dispatch a statement terminated by ``;``."""
        if self._in_object and self._object.state is ObjectState.ENUMERATION and not self._enum_constants_done:
            # The first ``;`` of an enum body closes its constant list, even an empty one.
            if not self._skip_statement():
                self._add_enum_constants()
            self._enum_constants_done = True
            return
        if self._skip_statement():
            return
        line, signature = self._cursor.statement_position()

        if not self._in_object:
            self._end_file_statement(line, signature)
        elif self._has_params:
            self._add_method(line, signature)
        else:
            self._add_member(line, signature)

    def _end_file_statement(self, line: int, signature: str) -> None:
        """Handle a ``;`` statement outside of any type declaration."""
        first = self._parts[0]
        if first.kind in (GrammarKind.IMPORT, GrammarKind.PACKAGE):
            names = [part.value for part in self._parts[1:] if part.kind is GrammarKind.VARIABLE]
            if not names:
                logger.warning(f"Pattern not supported on line {line}: {signature!r}")
            elif first.kind is GrammarKind.IMPORT:
                self._object.dependencies.append(names[0])
            else:
                self._object.package_name = names[0]
        elif self._file_body_open:
            logger.debug(f"Skipping statement inside a file-level body on line {line}: {self._describe_parts()}")
        elif len(self._parts) > 1:
            self._add_member(line, signature)

    def _begin_block(self) -> None:
        """Dispatch a statement terminated by ``{``."""
        if self._skip_statement():
            return
        line, signature = self._cursor.statement_position()

        if self._parse_state is not ParseState.OTHER:
            apply_object_header(self._parts, self._doc, signature, self._object)
        elif self._object.state is ObjectState.ENUMERATION and self._in_object and not self._enum_constants_done:
            # An enum constant with a class body, e.g. ``RED { ... },``.
            self._add_enum_constants()
        elif self._initializer:
            self._add_member(line, signature)
        else:
            self._add_method(line, signature)

        if not self._in_object:
            # Closing braces are not tokens, so a file-level body runs to the end of input.
            self._file_body_open = True

    def _skip_statement(self) -> bool:
        if not self._parts:
            return True
        if self._nested:
            logger.warning(f"Skipping nested type declaration: {self._describe_parts()}")
            return True
        if self._executable:
            logger.debug(f"Skipping executable statement: {self._describe_parts()}")
            return True
        return False

    def _add_method(self, line: int, signature: str) -> None:
        method = build_method(self._parts, self._doc, line, signature, self._pending_name)
        if method is not None:
            self._object.methods.append(method)

    def _add_member(self, line: int, signature: str) -> None:
        member = build_member(self._parts, line, signature)
        if member is not None:
            self._object.variables.append(member)

    def _add_enum_constants(self) -> None:
        self._object.fields.extend(build_enum_fields(self._parts, start=len(self._object.fields)))

    def _finish_enum_constants(self) -> None:
        """Flush an enum constant list that was closed by ``}`` instead of ``;``."""
        if self._object.state is not ObjectState.ENUMERATION or self._enum_constants_done:
            return
        if self._span is Span.CODE:
            self._flush_words()
        if self._parts and not self._skip_statement():
            self._add_enum_constants()
        self._enum_constants_done = True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _add_part(self, part: GrammarPart) -> None:
        self._parts.append(part)
        self._cursor.mark_statement()

    def _flush_words(self) -> None:
        """Classify the pending word group into grammar parts."""
        if self._words:
            self._parts.extend(classify_words(self._words))
            self._words = []

    def _close_comment(self) -> None:
        if self._span is Span.DOC:
            self._doc = parse_doc(self._doc_tokens)
            self._doc_tokens = []
            if not self._collecting_enum_constants():
                # Header parts seen before the comment must not leak into the
                # declaration that follows it.
                self._parts = []
                self._parse_state = ParseState.OTHER
                if not self._words:
                    self._cursor.statement_line = None
        elif self._span is Span.BLOCK_COMMENT:
            self._header_comment = " ".join(self._comment_words)
            self._comment_words = []
        elif self._span is Span.CODE:
            logger.debug("Stray comment terminator")
        self._span = Span.CODE

    def _collecting_enum_constants(self) -> bool:
        return (
            self._object.state is ObjectState.ENUMERATION
            and self._parse_state is ParseState.OTHER
            and not self._enum_constants_done
        )

    def _skip_annotation_argument(self, token: Token) -> None:
        if token.type is TokenType.PARAM_START:
            self._annotation_depth += 1
        elif token.type is TokenType.PARAM_END:
            self._annotation_depth -= 1
            if self._annotation_depth == 0:
                self._annotation = AnnotationState.NONE

    def _reset_statement(self) -> None:
        self._parse_state = ParseState.OTHER
        self._doc = Doc()
        self._parts = []
        self._words = []
        self._pending_name = ""
        self._has_params = False
        self._initializer = False
        self._executable = False
        self._nested = False
        self._cursor.statement_line = None

    def _describe_parts(self) -> str:
        return " ".join(part.value or part.kind.value for part in self._parts)


# ################
# Implementation
# ################

_OBJECT_STATES: dict[str, ObjectState] = {
    "class": ObjectState.CLASS,
    "interface": ObjectState.INTERFACE,
    "enum": ObjectState.ENUMERATION,
}

_PARSE_STATES: dict[str, ParseState] = {
    "class": ParseState.CLASS,
    "interface": ParseState.INTERFACE,
    "enum": ParseState.ENUM,
}

# Inline tags are written ``{@link Foo}``; the braces are part of the word.
_INLINE_BRACES = "{}"


def _doc_token(word: str) -> JdocToken:
    """Classify a word inside a doc comment as a tag or as text."""
    tag = word.strip(_INLINE_BRACES)
    if tag in DOC_TAGS or (tag.startswith("@") and tag[1:].isalpha()):
        return JdocToken(JdocTokenType.KEYWORD, tag)
    if word.endswith("}") and "{" not in word:
        # Last word of an inline tag.
        word = word[:-1]
    return JdocToken(JdocTokenType.SYMBOL, word)


def _is_line_token(token: Token) -> bool:
    return token.type in (TokenType.LINE_NUMBER, TokenType.SIGN)


def _index_lines(tokens: list[Token]) -> dict[int, str]:
    """Map each line number to the text carried by its SIGN token."""
    lines: dict[int, str] = {}
    line = 1
    for token in tokens:
        if token.type is TokenType.LINE_NUMBER:
            line = int(token.value)
        elif token.type is TokenType.SIGN:
            lines[line] = token.value
    return lines
