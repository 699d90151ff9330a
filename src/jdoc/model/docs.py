# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation records extracted from javadoc comments."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Param(BaseModel):
    """A method parameter.

    Declared parameters start without a description and documented ones
    without a type; reconciliation produces the union of both.
    """

    model_config = ConfigDict(frozen=True)

    type: str = ""
    name: str
    description: str = ""


class ExceptionDoc(BaseModel):
    """An exception named by a ``throws`` clause or a ``@throws`` tag."""

    model_config = ConfigDict(frozen=True)

    type: str
    description: str = ""


class Doc(BaseModel):
    """The structured contents of one ``/** ... */`` comment."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    params: list[Param] = _Field(default_factory=list)
    return_description: str = ""
    author: str = ""
    version: str = ""
    exceptions: list[ExceptionDoc] = _Field(default_factory=list)
    deprecated: str = ""
    see: str = ""
