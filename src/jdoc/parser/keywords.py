# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Keyword sets shared by the lexer and the declaration builder."""

# ###############
# Public Interface
# ###############

OBJECT_KEYWORDS: frozenset[str] = frozenset({"class", "interface", "enum"})

ACCESS_KEYWORDS: frozenset[str] = frozenset({"public", "protected", "private"})

MODIFIER_KEYWORDS: frozenset[str] = frozenset({"static", "final", "abstract", "synchronized", "volatile"})

MARKER_KEYWORDS: frozenset[str] = frozenset({"package", "import", "throws", "extends", "implements"})

STRUCTURAL_KEYWORDS: frozenset[str] = OBJECT_KEYWORDS | ACCESS_KEYWORDS | MODIFIER_KEYWORDS | MARKER_KEYWORDS

# Javadoc block and inline tags.
DOC_TAGS: frozenset[str] = frozenset(
    {
        "@author",
        "@code",
        "@deprecated",
        "@docRoot",
        "@exception",
        "@inheritDoc",
        "@link",
        "@linkplain",
        "@literal",
        "@param",
        "@return",
        "@see",
        "@serial",
        "@serialData",
        "@serialField",
        "@since",
        "@throws",
        "@value",
        "@version",
    }
)

# Keywords that only occur in executable statements. A statement carrying one
# of them is never a declaration.
STATEMENT_KEYWORDS: frozenset[str] = frozenset(
    {
        "assert",
        "break",
        "case",
        "catch",
        "continue",
        "do",
        "else",
        "finally",
        "for",
        "if",
        "return",
        "switch",
        "throw",
        "try",
        "while",
        "yield",
    }
)

# Recognized but not modelled: they are lexed as keywords so that they never
# end up inside a type name, and are otherwise ignored.
IGNORED_KEYWORDS: frozenset[str] = STATEMENT_KEYWORDS | frozenset(
    {
        "const",
        "default",
        "goto",
        "instanceof",
        "native",
        "new",
        "non-sealed",
        "permits",
        "sealed",
        "strictfp",
        "super",
        "this",
        "transient",
    }
)


def is_keyword(word: str, extra_keywords: frozenset[str] = frozenset()) -> bool:
    """Return True if *word* belongs to any keyword set."""
    return word in STRUCTURAL_KEYWORDS or word in DOC_TAGS or word in IGNORED_KEYWORDS or word in extra_keywords
