# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""StrictVal: immutable, strictly-typed value objects."""

from strictval.builder import StructureBuilder
from strictval.descriptors import (
    ArrayType,
    DecimalType,
    DescendantType,
    EnumType,
    FloatType,
    IntegerType,
    MapType,
    PolyStructureType,
    StringType,
    StructureType,
    TupleType,
    TypeDescriptor,
    array,
    boolean,
    coerce_type,
    decimal,
    descendant,
    enum,
    float_,
    integer,
    map_,
    poly_structure,
    string,
    structure,
    tuple_,
)
from strictval.errors import ConfigError, ValidationError
from strictval.frozen import FrozenDict
from strictval.record import TYPE_ID_FIELD, Structure

__all__ = [
    # Records
    "Structure",
    "StructureBuilder",
    "TYPE_ID_FIELD",
    # Errors
    "ConfigError",
    "ValidationError",
    # Containers
    "FrozenDict",
    # Descriptors
    "ArrayType",
    "DecimalType",
    "DescendantType",
    "EnumType",
    "FloatType",
    "IntegerType",
    "MapType",
    "PolyStructureType",
    "StringType",
    "StructureType",
    "TupleType",
    "TypeDescriptor",
    # Descriptor factories
    "array",
    "boolean",
    "coerce_type",
    "decimal",
    "descendant",
    "enum",
    "float_",
    "integer",
    "map_",
    "poly_structure",
    "string",
    "structure",
    "tuple_",
]
