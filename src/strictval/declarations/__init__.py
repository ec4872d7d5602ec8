# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarative (YAML or plain mapping) definitions of record types."""

from strictval.declarations.loader import build_structures, load_structures
from strictval.declarations.models import (
    OPTION_FLAGS,
    ArrayDecl,
    BooleanDecl,
    DeclarationDocument,
    DecimalDecl,
    EnumDecl,
    FloatDecl,
    IntegerDecl,
    MapDecl,
    PolyStructureDecl,
    StringDecl,
    StructureDecl,
    StructureRefDecl,
    TupleDecl,
    TypeDecl,
)

__all__ = [
    # Document model
    "OPTION_FLAGS",
    "ArrayDecl",
    "BooleanDecl",
    "DeclarationDocument",
    "DecimalDecl",
    "EnumDecl",
    "FloatDecl",
    "IntegerDecl",
    "MapDecl",
    "PolyStructureDecl",
    "StringDecl",
    "StructureDecl",
    "StructureRefDecl",
    "TupleDecl",
    "TypeDecl",
    # Loading
    "build_structures",
    "load_structures",
]
