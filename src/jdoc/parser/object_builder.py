# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mutable accumulator for the declaration of one source file."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from jdoc.model.declarations import ClassDef, EnumDef, EnumField, InterfaceDef, Member, Method, ObjectType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ObjectState(enum.Enum):
    """Which kind of type the file declares, fixed by its type keyword."""

    UNSET = "unset"
    CLASS = "class"
    INTERFACE = "interface"
    ENUMERATION = "enum"


@dataclass
class ObjectBuilder:
    """Collects the parts of a declaration while the token stream is walked.

    ``parents`` holds the ``extends`` targets: at most one for a class, any
    number for an interface.
    """

    state: ObjectState = ObjectState.UNSET
    name: str = ""
    package_name: str = ""
    parents: list[str] = field(default_factory=list)
    interfaces: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    access: str = ""
    modifiers: list[str] = field(default_factory=list)
    license: str = ""
    variables: list[Member] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)
    fields: list[EnumField] = field(default_factory=list)
    signature: str = ""
    author: str = ""
    version: str = ""
    description: str = ""
    deprecated: str = ""
    see: str = ""

    def finalize(self) -> ObjectType:
        """Convert the accumulated state into an immutable declaration.

        A file without a type declaration still yields a ClassDef, carrying
        whatever file-level content was collected.
        """
        if self.state is ObjectState.CLASS:
            return self._to_class()
        if self.state is ObjectState.INTERFACE:
            return InterfaceDef(parents=list(self.parents), **self._common())
        if self.state is ObjectState.ENUMERATION:
            return EnumDef(interfaces=list(self.interfaces), fields=list(self.fields), **self._common())
        return self._finalize_unset()

    # ------------------------------------------------------------------
    # Implementation
    # ------------------------------------------------------------------

    def _finalize_unset(self) -> ClassDef:
        logger.warning("Java file type not supported. Supported types: class, interface, enum")
        if self.variables or self.methods:
            logger.warning(
                f"Keeping {len(self.variables)} field(s) and {len(self.methods)} method(s) "
                "found outside of any type declaration"
            )
        if self.fields:
            logger.warning(f"Dropping {len(self.fields)} enum constant(s) without an enum declaration")
        return self._to_class()

    def _to_class(self) -> ClassDef:
        if len(self.parents) > 1:
            logger.warning(f"A class extends a single parent; ignoring {self.parents[1:]}")
        parent = self.parents[0] if self.parents else ""
        return ClassDef(parent=parent, interfaces=list(self.interfaces), **self._common())

    def _common(self) -> dict[str, object]:
        return {
            "name": self.name,
            "package_name": self.package_name,
            "dependencies": list(self.dependencies),
            "access": self.access,
            "modifiers": list(self.modifiers),
            "license": self.license,
            "variables": list(self.variables),
            "methods": list(self.methods),
            "signature": self.signature,
            "author": self.author,
            "version": self.version,
            "description": self.description,
            "deprecated": self.deprecated,
            "see": self.see,
        }
