# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation model for Java declarations (classes, interfaces, enums)."""

from jdoc.model.declarations import (
    ClassDef,
    EnumDef,
    EnumField,
    InterfaceDef,
    Member,
    Method,
    ObjectType,
)
from jdoc.model.docs import Doc, ExceptionDoc, Param

__all__ = [
    # Documentation
    "Doc",
    "ExceptionDoc",
    "Param",
    # Declarations
    "EnumField",
    "Member",
    "Method",
    "ClassDef",
    "InterfaceDef",
    "EnumDef",
    "ObjectType",
]
