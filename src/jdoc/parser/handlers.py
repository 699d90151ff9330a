# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Statement handlers: turn the grammar parts of one statement into records.

Each handler receives the grammar parts collected between two statement
terminators and the javadoc comment (if any) that preceded the statement.
Unsupported shapes are reported through logging and skipped.
"""

import enum
import logging

from jdoc.model.declarations import EnumField, Member, Method
from jdoc.model.docs import Doc, ExceptionDoc, Param
from jdoc.parser.grammar import GrammarKind, GrammarPart
from jdoc.parser.object_builder import ObjectBuilder

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def apply_object_header(parts: list[GrammarPart], doc: Doc, signature: str, builder: ObjectBuilder) -> None:
    """Apply a class, interface, or enum header to the object builder."""
    state = _HeaderState.OTHER

    for part in parts:
        if part.kind is GrammarKind.VARIABLE:
            if state is _HeaderState.CLASS_NAME:
                builder.name = _strip_type_parameters(part.value)
                state = _HeaderState.OTHER
            elif state is _HeaderState.PARENT:
                builder.parents.append(part.value)
            elif state is _HeaderState.IMPLEMENT:
                builder.interfaces.append(part.value)
            elif state is _HeaderState.EXCEPTION:
                logger.warning(f"Type declarations do not throw exceptions; ignoring {part.value}")
        elif part.kind is GrammarKind.OBJECT:
            state = _HeaderState.CLASS_NAME
        elif part.kind is GrammarKind.ACCESS:
            builder.access = part.value
        elif part.kind is GrammarKind.MODIFIER:
            builder.modifiers.append(part.value)
        elif part.kind is GrammarKind.PARENT:
            state = _HeaderState.PARENT
        elif part.kind is GrammarKind.IMPLEMENT:
            state = _HeaderState.IMPLEMENT
        elif part.kind is GrammarKind.EXCEPTION:
            state = _HeaderState.EXCEPTION
        else:
            logger.warning(f"Class pattern not supported: {part.kind.value} {part.value!r}")

    builder.signature = signature
    builder.description = doc.description
    builder.author = doc.author
    builder.version = doc.version
    builder.deprecated = doc.deprecated
    builder.see = doc.see


def build_method(
    parts: list[GrammarPart],
    doc: Doc,
    line: int,
    signature: str,
    pending_name: str = "",
) -> Method | None:
    """Build a method record from a signature.

    The first type is the return type and the identifier after it the method
    name; later type/identifier pairs are parameters. A bare identifier seen
    before any return type is a constructor name. When the javadoc has a
    ``@return`` text it replaces the parsed return type.

    Args:
        parts: Grammar parts of the signature.
        doc: Javadoc comment preceding the signature.
        line: Line the signature starts on.
        signature: Text of that line.
        pending_name: A lone word found directly before a closing parenthesis.

    Returns:
        The method, or None if no method name could be found.
    """
    state = _MethodState.OTHER
    name = ""
    return_type = ""
    constructor = False
    param_type = ""
    access = ""
    modifiers: list[str] = []
    params: list[Param] = []
    thrown: list[str] = []

    for part in parts:
        if part.kind is GrammarKind.VARIABLE:
            if state is _MethodState.EXCEPTION:
                thrown.append(part.value)
            elif state is _MethodState.METHOD_NAME:
                name = part.value
                state = _MethodState.OTHER
            elif state is _MethodState.PARAM_NAME:
                params.append(Param(type=param_type, name=part.value))
                param_type = ""
                state = _MethodState.OTHER
            elif not name and not return_type:
                return_type = part.value
                constructor = True
            else:
                logger.warning(f"Method pattern not supported: unexpected identifier {part.value!r}")
        elif part.kind is GrammarKind.TYPE:
            if state is _MethodState.EXCEPTION:
                logger.warning(f"Method pattern not supported: throws {part.value!r}")
            elif not return_type:
                return_type = part.value
                state = _MethodState.METHOD_NAME
            else:
                param_type = part.value
                state = _MethodState.PARAM_NAME
        elif part.kind is GrammarKind.ACCESS:
            access = part.value
        elif part.kind is GrammarKind.MODIFIER:
            modifiers.append(part.value)
        elif part.kind is GrammarKind.EXCEPTION:
            state = _MethodState.EXCEPTION
        else:
            logger.warning(f"Method pattern not supported: {part.kind.value} {part.value!r}")

    if not name:
        if constructor:
            name = return_type
        elif pending_name:
            name = pending_name
        else:
            logger.warning(f"Method pattern not supported on line {line}: {signature!r}")
            return None

    if doc.return_description:
        return_type = doc.return_description

    return Method(
        name=name,
        return_type=return_type,
        parameters=match_params(params, doc.params),
        access=access,
        modifiers=modifiers,
        exceptions=match_exceptions(thrown, doc.exceptions),
        description=doc.description,
        deprecated=doc.deprecated,
        see=doc.see,
        line=line,
        signature=signature,
    )


def build_member(parts: list[GrammarPart], line: int, signature: str) -> Member | None:
    """Build a field record from a field declaration.

    The first word is the declared type and the second the field name.
    Everything from an ``=`` onwards is an initializer and is discarded.
    """
    access = ""
    modifiers: list[str] = []
    words: list[str] = []

    for part in parts:
        if part.kind is GrammarKind.ACCESS:
            access = part.value
        elif part.kind is GrammarKind.MODIFIER:
            modifiers.append(part.value)
        elif part.kind in (GrammarKind.TYPE, GrammarKind.VARIABLE):
            words.extend(_split_words(part.value))
        else:
            logger.warning(f"Member variable pattern not supported: {part.kind.value} {part.value!r}")

    declared = _declarator_words(words)
    if len(declared) < 2:
        logger.warning(f"Member variable pattern not supported on line {line}: {signature!r}")
        return None

    return Member(
        type=declared[0],
        name=declared[1],
        access=access,
        modifiers=modifiers,
        line=line,
        signature=signature,
    )


def build_enum_fields(parts: list[GrammarPart], start: int = 0) -> list[EnumField]:
    """Build enum constants from a constant list, numbering them from *start*."""
    fields: list[EnumField] = []
    for part in parts:
        if part.kind is GrammarKind.VARIABLE:
            fields.append(EnumField(name=part.value, value=str(start + len(fields))))
        else:
            logger.warning(f"Enumeration pattern not supported: {part.kind.value} {part.value!r}")
    return fields


def match_params(declared: list[Param], documented: list[Param]) -> list[Param]:
    """Merge declared parameters with their documented descriptions by name.

    Documented parameters that match no declared parameter are dropped.
    """
    descriptions: dict[str, str] = {}
    for param in documented:
        descriptions.setdefault(param.name, param.description)
    return [
        Param(type=param.type, name=param.name, description=descriptions.get(param.name, "")) for param in declared
    ]


def match_exceptions(thrown: list[str], documented: list[ExceptionDoc]) -> list[ExceptionDoc]:
    """Merge a ``throws`` clause with the documented exceptions by type name."""
    descriptions: dict[str, str] = {}
    for exc in documented:
        descriptions.setdefault(exc.type, exc.description)
    return [ExceptionDoc(type=exc_type, description=descriptions.get(exc_type, "")) for exc_type in thrown]


# ################
# Implementation
# ################


class _HeaderState(enum.Enum):
    IMPLEMENT = "implement"
    EXCEPTION = "exception"
    PARENT = "parent"
    CLASS_NAME = "class_name"
    OTHER = "other"


class _MethodState(enum.Enum):
    EXCEPTION = "exception"
    METHOD_NAME = "method_name"
    PARAM_NAME = "param_name"
    OTHER = "other"


def _strip_type_parameters(name: str) -> str:
    """``Box<T>`` -> ``Box``."""
    return name.split("<", 1)[0] or name


def _declarator_words(words: list[str]) -> list[str]:
    """Return the words of a field declaration up to its initializer."""
    declared: list[str] = []
    for word in words:
        if "=" in word:
            head = word.split("=", 1)[0]
            if head:
                declared.append(head)
            break
        declared.append(word)
    return declared


def _split_words(text: str) -> list[str]:
    """Split on spaces outside of type arguments: ``Map<K, V> m`` -> ``Map<K, V>``, ``m``."""
    words: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in text:
        if ch == " " and depth == 0:
            if current:
                words.append("".join(current))
                current = []
            continue
        if ch == "<":
            depth += 1
        elif ch == ">" and depth:
            depth -= 1
        current.append(ch)
    if current:
        words.append("".join(current))
    return words
