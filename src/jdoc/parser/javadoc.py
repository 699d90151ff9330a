# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for the tag language inside ``/** ... */`` comments."""

import enum
import logging
from dataclasses import dataclass

from jdoc.model.docs import Doc, ExceptionDoc, Param

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class JdocTokenType(enum.Enum):
    """Token kinds inside a doc comment."""

    KEYWORD = "keyword"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class JdocToken:
    """A tag (``@param``) or a word of free text inside a doc comment."""

    type: JdocTokenType
    value: str


def parse_doc(tokens: list[JdocToken]) -> Doc:
    """Build a Doc record from the tokens of one doc comment.

    Text before the first block tag is the description. Each block tag
    collects the words up to the next block tag (or the end of the comment)
    into the field it owns. Inline tags such as ``{@code ...}`` leave the text
    where it is; unknown tags are reported and dropped.

    Args:
        tokens: The tokens between ``/**`` and ``*/``.

    Returns:
        The parsed documentation record.
    """
    return _DocParser().parse(tokens)


# ################
# Implementation
# ################


class _State(enum.Enum):
    DESCRIPTION = "description"
    RETURN = "return"
    PARAM = "param"
    AUTHOR = "author"
    DEPRECATED = "deprecated"
    VERSION = "version"
    SEE = "see"
    EXCEPTION = "exception"
    IGNORED = "ignored"


_BLOCK_TAGS: dict[str, _State] = {
    "@return": _State.RETURN,
    "@param": _State.PARAM,
    "@author": _State.AUTHOR,
    "@deprecated": _State.DEPRECATED,
    "@since": _State.VERSION,
    "@version": _State.VERSION,
    "@link": _State.SEE,
    "@linkplain": _State.SEE,
    "@see": _State.SEE,
    "@exception": _State.EXCEPTION,
    "@throws": _State.EXCEPTION,
    "@serial": _State.IGNORED,
    "@serialData": _State.IGNORED,
    "@serialField": _State.IGNORED,
}

_INLINE_TAGS: frozenset[str] = frozenset({"@code", "@literal", "@docRoot", "@inheritDoc", "@value"})

# Leading asterisk of a continuation line.
_CONTINUATION = "*"


class _DocParser:
    """Single-pass state machine over doc comment tokens."""

    def __init__(self) -> None:
        self._state = _State.DESCRIPTION
        self._words: list[str] = []
        self._fields: dict[_State, str] = {}
        self._params: list[Param] = []
        self._exceptions: list[ExceptionDoc] = []

    def parse(self, tokens: list[JdocToken]) -> Doc:
        for token in tokens:
            if token.type is JdocTokenType.KEYWORD:
                self._on_tag(token.value)
            elif token.value and token.value != _CONTINUATION:
                self._words.append(token.value)
        self._flush()
        return Doc(
            description=self._fields.get(_State.DESCRIPTION, ""),
            params=self._params,
            return_description=self._fields.get(_State.RETURN, ""),
            author=self._fields.get(_State.AUTHOR, ""),
            version=self._fields.get(_State.VERSION, ""),
            exceptions=self._exceptions,
            deprecated=self._fields.get(_State.DEPRECATED, ""),
            see=self._fields.get(_State.SEE, ""),
        )

    def _on_tag(self, tag: str) -> None:
        if tag in _INLINE_TAGS:
            return
        state = _BLOCK_TAGS.get(tag)
        if state is None:
            logger.warning(f"Unsupported javadoc tag: {tag}")
            return
        self._flush()
        self._state = state

    def _flush(self) -> None:
        """Store the buffered text in the field owned by the current tag."""
        text = " ".join(self._words).strip()
        self._words = []

        if self._state is _State.PARAM:
            if text:
                name, _, description = text.partition(" ")
                self._params.append(Param(name=name, description=description.strip()))
        elif self._state is _State.EXCEPTION:
            # The first documented exception is recorded like every later one.
            if text:
                exception_type, _, description = text.partition(" ")
                self._exceptions.append(ExceptionDoc(type=exception_type, description=description.strip()))
        elif self._state is not _State.IGNORED:
            self._fields[self._state] = text
