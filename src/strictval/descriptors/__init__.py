# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors: validation, serialization and freezing per field kind."""

from strictval.descriptors.base import (
    STANDARD_VALIDATORS,
    DescriptorOptions,
    TypeDescriptor,
    parse_options,
)
from strictval.descriptors.composites import ArrayType, EnumType, MapType, TupleType
from strictval.descriptors.factories import (
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
from strictval.descriptors.scalars import (
    IMMUTABLE_KINDS,
    DecimalType,
    DescendantType,
    FloatType,
    IntegerType,
    StringType,
)
from strictval.descriptors.structures import PolyStructureType, StructureType

__all__ = [
    # Base contract
    "DescriptorOptions",
    "STANDARD_VALIDATORS",
    "TypeDescriptor",
    "parse_options",
    # Scalars
    "IMMUTABLE_KINDS",
    "DecimalType",
    "DescendantType",
    "FloatType",
    "IntegerType",
    "StringType",
    # Composites
    "ArrayType",
    "EnumType",
    "MapType",
    "TupleType",
    # Structures
    "PolyStructureType",
    "StructureType",
    # Factories
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
