# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for declaration documents describing record types.

A declaration document is the plain (YAML-friendly) rendition of builder
calls: each structure lists its fields, and each field is a type declaration
discriminated by its ``kind``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, StrictBool
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

OPTION_FLAGS: tuple[str, ...] = ("nullable", "positive", "negative", "nonpositive", "nonnegative", "nonempty")


class _TypeDeclBase(BaseModel):
    """Options shared by every type declaration."""

    model_config = ConfigDict(extra="forbid")

    nullable: StrictBool = False
    positive: StrictBool = False
    negative: StrictBool = False
    nonpositive: StrictBool = False
    nonnegative: StrictBool = False
    nonempty: StrictBool = False

    def options(self) -> dict[str, bool]:
        """Return the enabled option flags as descriptor keyword arguments."""
        return {flag: True for flag in OPTION_FLAGS if getattr(self, flag)}


class StringDecl(_TypeDeclBase):
    """A ``str`` field."""

    kind: Literal["string"] = "string"


class IntegerDecl(_TypeDeclBase):
    """An ``int`` field."""

    kind: Literal["integer"] = "integer"


class FloatDecl(_TypeDeclBase):
    """A ``float`` field."""

    kind: Literal["float"] = "float"


class DecimalDecl(_TypeDeclBase):
    """A ``Decimal`` field."""

    kind: Literal["decimal"] = "decimal"


class BooleanDecl(_TypeDeclBase):
    """A ``bool`` field."""

    kind: Literal["boolean"] = "boolean"


class ArrayDecl(_TypeDeclBase):
    """An array of a single element type."""

    kind: Literal["array"] = "array"
    element: TypeDecl


class MapDecl(_TypeDeclBase):
    """A mapping with typed keys and values."""

    kind: Literal["map"] = "map"
    key: TypeDecl
    value: TypeDecl


class TupleDecl(_TypeDeclBase):
    """A fixed-arity tuple."""

    kind: Literal["tuple"] = "tuple"
    elements: list[TypeDecl]


class EnumDecl(_TypeDeclBase):
    """A value restricted to permitted values, given in their plain form."""

    kind: Literal["enum"] = "enum"
    element: TypeDecl
    values: list[Any] = _Field(min_length=1)


class StructureRefDecl(_TypeDeclBase):
    """A nested record, referenced by structure name."""

    kind: Literal["structure"] = "structure"
    ref: str


class PolyStructureDecl(_TypeDeclBase):
    """A nested record chosen from candidates (discriminant id to structure name)."""

    kind: Literal["poly_structure"] = "poly_structure"
    candidates: dict[str, str] = _Field(min_length=1)


# A field type declaration. The `kind` discriminator selects the model.
TypeDecl = Annotated[
    StringDecl
    | IntegerDecl
    | FloatDecl
    | DecimalDecl
    | BooleanDecl
    | ArrayDecl
    | MapDecl
    | TupleDecl
    | EnumDecl
    | StructureRefDecl
    | PolyStructureDecl,
    _Field(discriminator="kind"),
]


class StructureDecl(BaseModel):
    """A record type: its fields in declaration order and an optional base."""

    model_config = ConfigDict(extra="forbid")

    extends: str | None = None
    fields: dict[str, TypeDecl] = _Field(default_factory=dict)


class DeclarationDocument(BaseModel):
    """Top-level declaration document."""

    model_config = ConfigDict(extra="forbid")

    structures: dict[str, StructureDecl] = _Field(default_factory=dict)


# Resolve forward references for models that use TypeDecl.
ArrayDecl.model_rebuild()
MapDecl.model_rebuild()
TupleDecl.model_rebuild()
EnumDecl.model_rebuild()
StructureDecl.model_rebuild()
DeclarationDocument.model_rebuild()
