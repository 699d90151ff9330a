# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar parts: the typed form of the words making up one statement."""

import enum
from dataclasses import dataclass

from jdoc.parser.keywords import ACCESS_KEYWORDS, MODIFIER_KEYWORDS, OBJECT_KEYWORDS

# ###############
# Public Interface
# ###############


class GrammarKind(enum.Enum):
    """Classification of a word or word group within a statement."""

    TYPE = "type"
    VARIABLE = "variable"
    OBJECT = "object"
    ACCESS = "access"
    MODIFIER = "modifier"

    # Markers; they carry no value.
    EXCEPTION = "throws"
    IMPLEMENT = "implements"
    PARENT = "extends"
    IMPORT = "import"
    PACKAGE = "package"


@dataclass(frozen=True)
class GrammarPart:
    """One classified element of a statement."""

    kind: GrammarKind
    value: str = ""


def classify_words(words: list[str]) -> list[GrammarPart]:
    """Classify a word group as ``<type> <identifier>``.

    A single word is an identifier. With two or more words, everything before
    the last word is the type and the last word is the identifier.
    """
    if not words:
        return []
    if len(words) == 1:
        return [GrammarPart(GrammarKind.VARIABLE, words[0])]
    return [
        GrammarPart(GrammarKind.TYPE, " ".join(words[:-1])),
        GrammarPart(GrammarKind.VARIABLE, words[-1]),
    ]


def keyword_part(keyword: str) -> GrammarPart | None:
    """Return the grammar part for a structural keyword, or None if it has none."""
    if keyword in OBJECT_KEYWORDS:
        return GrammarPart(GrammarKind.OBJECT, keyword)
    if keyword in ACCESS_KEYWORDS:
        return GrammarPart(GrammarKind.ACCESS, keyword)
    if keyword in MODIFIER_KEYWORDS:
        return GrammarPart(GrammarKind.MODIFIER, keyword)
    marker = _MARKERS.get(keyword)
    if marker is not None:
        return GrammarPart(marker)
    return None


# ################
# Implementation
# ################

_MARKERS: dict[str, GrammarKind] = {
    "throws": GrammarKind.EXCEPTION,
    "implements": GrammarKind.IMPLEMENT,
    "extends": GrammarKind.PARENT,
    "import": GrammarKind.IMPORT,
    "package": GrammarKind.PACKAGE,
}
