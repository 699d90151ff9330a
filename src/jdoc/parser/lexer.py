# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Java source files.

Converts raw source text into a flat sequence of tokens. Only the file level
and the body of the top-level type are tokenized; executable bodies (anything
nested two or more braces deep) are read solely to keep the brace depth right.
"""

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from jdoc.parser.keywords import is_keyword

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the Java lexer."""

    KEYWORD = "keyword"
    SYMBOL = "symbol"

    # Delimiters
    JOIN = ","
    PARAM_START = "("
    PARAM_END = ")"
    EXPRESSION_END = "expression_end"

    # Line bookkeeping
    LINE_NUMBER = "line_number"
    SIGN = "sign"


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The kind of token.
        value: The word for KEYWORD/SYMBOL tokens, ``;`` or ``{`` for
            EXPRESSION_END, the line number for LINE_NUMBER and the trimmed
            text of the completed line for SIGN.
        line: 1-based line number the token was produced on.
    """

    type: TokenType
    value: str
    line: int


def tokenize(source: str, extra_keywords: Iterable[str] = ()) -> list[Token]:
    """Tokenize Java source text.

    The stream starts with a LINE_NUMBER token for line 1. Every newline emits
    a SIGN token for the completed line followed by the LINE_NUMBER of the next
    one, and the end of input emits the SIGN of the last line.

    Args:
        source: The full text of a .java file.
        extra_keywords: Additional words to lex as (ignorable) keywords.

    Returns:
        A list of Token objects.
    """
    return _Lexer(source, frozenset(extra_keywords)).tokenize()


# ################
# Implementation
# ################

# Depth at which executable bodies start: 0 is the file, 1 a type body.
_BODY_DEPTH = 2

_WHITESPACE = " \t\r\f"

_DELIMITERS: dict[str, tuple[TokenType, str]] = {
    ",": (TokenType.JOIN, ","),
    ";": (TokenType.EXPRESSION_END, ";"),
    "(": (TokenType.PARAM_START, "("),
    ")": (TokenType.PARAM_END, ")"),
}

_TEXT_BLOCK_QUOTE = '"""'


class _Mode(enum.Enum):
    CODE = "code"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    STRING = "string"
    TEXT_BLOCK = "text_block"


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str, extra_keywords: frozenset[str]) -> None:
        self._source = source
        self._extra_keywords = extra_keywords
        self._pos = 0
        self._line = 1
        self._depth = 0
        self._angle_depth = 0
        self._mode = _Mode.CODE
        self._quote = ""
        self._word: list[str] = []
        self._line_text: list[str] = []
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens."""
        self._emit(TokenType.LINE_NUMBER, str(self._line))
        while self._pos < len(self._source):
            if self._current() == "\n":
                self._pos += 1
                self._end_line()
            elif self._mode is _Mode.CODE:
                self._scan_code()
            elif self._mode in (_Mode.LINE_COMMENT, _Mode.BLOCK_COMMENT):
                self._scan_comment()
            else:
                self._scan_literal()
        self._flush_word()
        self._emit(TokenType.SIGN, "".join(self._line_text).strip())
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, record it in the line text, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        self._line_text.append(ch)
        return ch

    def _take(self) -> None:
        """Consume the current character into the pending word."""
        ch = self._advance()
        if self._capturing():
            self._word.append(ch)

    def _capturing(self) -> bool:
        return self._depth < _BODY_DEPTH

    # ------------------------------------------------------------------
    # Token emission
    # ------------------------------------------------------------------

    def _emit(self, token_type: TokenType, value: str) -> None:
        self._tokens.append(Token(token_type, value, self._line))

    def _emit_word(self, word: str) -> None:
        if is_keyword(word, self._extra_keywords):
            self._emit(TokenType.KEYWORD, word)
        else:
            self._emit(TokenType.SYMBOL, word)

    def _flush_word(self) -> None:
        if self._word:
            self._emit_word("".join(self._word))
            self._word = []

    def _end_line(self) -> None:
        """Close the current physical line."""
        self._flush_word()
        # Line comments and plain literals never continue past a newline.
        if self._mode in (_Mode.LINE_COMMENT, _Mode.STRING):
            self._mode = _Mode.CODE
        self._angle_depth = 0
        self._emit(TokenType.SIGN, "".join(self._line_text).strip())
        self._line_text = []
        self._line += 1
        self._emit(TokenType.LINE_NUMBER, str(self._line))

    # ------------------------------------------------------------------
    # Mode scanners
    # ------------------------------------------------------------------

    def _scan_code(self) -> None:
        """Scan one character of ordinary source text."""
        ch = self._current()
        nxt = self._peek()

        if ch == "/" and nxt == "/":
            self._open_comment("//", _Mode.LINE_COMMENT)
        elif ch == "/" and nxt == "*":
            # "/**/" is an empty block comment, not a doc comment.
            if self._source.startswith("/**", self._pos) and not self._source.startswith("/**/", self._pos):
                self._open_comment("/**", _Mode.BLOCK_COMMENT)
            else:
                self._open_comment("/*", _Mode.BLOCK_COMMENT)
        elif self._source.startswith(_TEXT_BLOCK_QUOTE, self._pos):
            for _ in _TEXT_BLOCK_QUOTE:
                self._take()
            self._mode = _Mode.TEXT_BLOCK
        elif ch in "\"'":
            self._quote = ch
            self._take()
            self._mode = _Mode.STRING
        elif ch == "<":
            self._angle_depth += 1
            self._take()
        elif ch == ">":
            self._close_angle()
        elif self._angle_depth and (ch in _WHITESPACE or ch == ","):
            self._take_type_argument_separator()
        elif ch in _WHITESPACE:
            self._advance()
            self._flush_word()
        elif ch in _DELIMITERS:
            self._angle_depth = 0
            self._advance()
            if self._capturing():
                self._flush_word()
                self._emit(*_DELIMITERS[ch])
        elif ch == "{":
            self._angle_depth = 0
            self._advance()
            if self._capturing():
                self._flush_word()
                self._emit(TokenType.EXPRESSION_END, "{")
            self._depth += 1
        elif ch == "}":
            self._angle_depth = 0
            self._advance()
            self._flush_word()
            self._depth = max(0, self._depth - 1)
        else:
            self._take()

    def _open_comment(self, opener: str, mode: _Mode) -> None:
        self._flush_word()
        for _ in opener:
            self._advance()
        if self._capturing():
            self._emit_word(opener)
        self._mode = mode

    def _close_angle(self) -> None:
        if self._angle_depth:
            self._angle_depth -= 1
            self._drop_trailing_space()
        self._take()

    def _take_type_argument_separator(self) -> None:
        """Keep ``Map<String, Integer>`` as one word, with single spaces."""
        ch = self._advance()
        if not self._capturing():
            return
        if ch == ",":
            self._drop_trailing_space()
            self._word.append(ch)
        elif self._word and self._word[-1] not in "< ":
            self._word.append(" ")

    def _drop_trailing_space(self) -> None:
        if self._word and self._word[-1] == " ":
            self._word.pop()

    def _scan_comment(self) -> None:
        """Scan one character inside a comment; delimiters are plain text here."""
        ch = self._current()
        if self._mode is _Mode.BLOCK_COMMENT and ch == "*" and self._peek() == "/":
            self._flush_word()
            self._advance()
            self._advance()
            if self._capturing():
                self._emit_word("*/")
            self._mode = _Mode.CODE
        elif ch in _WHITESPACE:
            self._advance()
            self._flush_word()
        else:
            self._take()

    def _scan_literal(self) -> None:
        """Scan one character inside a string, character, or text-block literal."""
        ch = self._current()
        if ch == "\\":
            self._take()
            if self._pos < len(self._source) and self._current() != "\n":
                self._take()
        elif self._mode is _Mode.TEXT_BLOCK and self._source.startswith(_TEXT_BLOCK_QUOTE, self._pos):
            for _ in _TEXT_BLOCK_QUOTE:
                self._take()
            self._mode = _Mode.CODE
        elif self._mode is _Mode.STRING and ch == self._quote:
            self._take()
            self._mode = _Mode.CODE
        else:
            self._take()
