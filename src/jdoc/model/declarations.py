# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration records produced for a parsed Java source file."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from jdoc.model.docs import ExceptionDoc, Param

# ###############
# Public Interface
# ###############


class EnumField(BaseModel):
    """An enum constant; ``value`` is its zero-based declaration order as text."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class Member(BaseModel):
    """A field declared in a type body."""

    model_config = ConfigDict(frozen=True)

    type: str = ""
    name: str = ""
    access: str = ""
    modifiers: list[str] = _Field(default_factory=list)
    line: int = 0
    signature: str = ""


class Method(BaseModel):
    """A method or constructor signature merged with its javadoc."""

    model_config = ConfigDict(frozen=True)

    name: str
    return_type: str = ""
    parameters: list[Param] = _Field(default_factory=list)
    access: str = ""
    modifiers: list[str] = _Field(default_factory=list)
    exceptions: list[ExceptionDoc] = _Field(default_factory=list)
    description: str = ""
    deprecated: str = ""
    see: str = ""
    line: int = 0
    signature: str = ""


class _Declaration(BaseModel):
    """Fields shared by every top-level type declaration."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    package_name: str = ""
    dependencies: list[str] = _Field(default_factory=list)
    access: str = ""
    modifiers: list[str] = _Field(default_factory=list)
    license: str = ""
    variables: list[Member] = _Field(default_factory=list)
    methods: list[Method] = _Field(default_factory=list)
    signature: str = ""
    author: str = ""
    version: str = ""
    description: str = ""
    deprecated: str = ""
    see: str = ""


class ClassDef(_Declaration):
    """A class declaration."""

    kind: Literal["class"] = "class"
    parent: str = ""
    interfaces: list[str] = _Field(default_factory=list)


class InterfaceDef(_Declaration):
    """An interface declaration; ``parents`` lists the extended interfaces."""

    kind: Literal["interface"] = "interface"
    parents: list[str] = _Field(default_factory=list)


class EnumDef(_Declaration):
    """An enum declaration with its constants."""

    kind: Literal["enum"] = "enum"
    interfaces: list[str] = _Field(default_factory=list)
    fields: list[EnumField] = _Field(default_factory=list)


# The single declaration produced per source file.
ObjectType = Annotated[ClassDef | InterfaceDef | EnumDef, _Field(discriminator="kind")]
