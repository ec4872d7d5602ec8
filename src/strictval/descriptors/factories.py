# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Convenience constructors for descriptors and kind coercion.

Wherever a child descriptor is expected, these helpers also accept a plain
Python kind (``str``, ``int``, ``float``, ``bool``, ``Decimal``) or a record
type, resolved through :func:`coerce_type`. Names that would shadow builtins
carry a trailing underscore.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from typing import Any

from strictval.descriptors.base import TypeDescriptor
from strictval.descriptors.composites import ArrayType, EnumType, MapType, TupleType
from strictval.descriptors.scalars import DecimalType, DescendantType, FloatType, IntegerType, StringType
from strictval.descriptors.structures import PolyStructureType, StructureType
from strictval.errors import ConfigError
from strictval.record import Structure, is_record_type

# ###############
# Public Interface
# ###############


def string(**options: Any) -> StringType:
    """Descriptor for ``str`` fields."""
    return StringType(**options)


def integer(**options: Any) -> IntegerType:
    """Descriptor for ``int`` fields."""
    return IntegerType(**options)


def float_(**options: Any) -> FloatType:
    """Descriptor for ``float`` fields."""
    return FloatType(**options)


def decimal(**options: Any) -> DecimalType:
    """Descriptor for :class:`~decimal.Decimal` fields."""
    return DecimalType(**options)


def boolean(**options: Any) -> EnumType:
    """Descriptor for ``bool`` fields, modelled as an enum over ``True`` and ``False``."""
    return EnumType(DescendantType(bool), (True, False), **options)


def descendant(kind: type, **options: Any) -> DescendantType:
    """Descriptor accepting instances of an immutable *kind* or its subclasses."""
    return DescendantType(kind, **options)


def array(element: Any, **options: Any) -> ArrayType:
    """Descriptor for a homogeneous array of *element*."""
    return ArrayType(coerce_type(element), **options)


def map_(key: Any, value: Any, **options: Any) -> MapType:
    """Descriptor for a mapping from *key* to *value*."""
    return MapType(coerce_type(key), coerce_type(value), **options)


def tuple_(elements: Sequence[Any], **options: Any) -> TupleType:
    """Descriptor for a fixed-arity tuple with one kind per position."""
    if not isinstance(elements, list | tuple):
        raise ConfigError(f"Tuple elements must be a list or tuple, found {elements!r}")
    return TupleType([coerce_type(e) for e in elements], **options)


def enum(element: Any, values: Iterable[Any], **options: Any) -> EnumType:
    """Descriptor restricting *element* values to the permitted *values*."""
    return EnumType(coerce_type(element), values, **options)


def structure(record_type: type[Structure], **options: Any) -> StructureType:
    """Descriptor for a nested record of *record_type*."""
    return StructureType(record_type, **options)


def poly_structure(candidates: Mapping[str, type[Structure]], **options: Any) -> PolyStructureType:
    """Descriptor for a nested record drawn from *candidates* (discriminant id to record type)."""
    return PolyStructureType(candidates, **options)


def coerce_type(kind: Any, **options: Any) -> TypeDescriptor:
    """Resolve *kind* to a descriptor.

    Resolution is a fixed mapping:

    * a descriptor is returned unchanged (options are then not allowed, since
      the descriptor is already configured);
    * a record type becomes a :class:`StructureType`;
    * ``str``, ``int``, ``float``, ``bool`` and ``Decimal`` (and their
      subclasses) become their canonical descriptor.

    Args:
        kind: A descriptor, record type, or supported Python kind.
        **options: Descriptor options applied when a new descriptor is built.

    Returns:
        The resolved descriptor.

    Raises:
        ConfigError: If *kind* is none of the above, or options are given
            together with an existing descriptor.
    """
    if isinstance(kind, TypeDescriptor):
        if options:
            raise ConfigError(f"Options {sorted(options)} cannot be applied to an existing descriptor {kind}")
        return kind
    if is_record_type(kind):
        return StructureType(kind, **options)
    if isinstance(kind, type):
        for base in kind.__mro__:
            factory = _KIND_FACTORIES.get(base)
            if factory is not None:
                return factory(**options)
    raise ConfigError(f"Invalid type definition: {kind!r}")


# ################
# Implementation
# ################

_KIND_FACTORIES: dict[type, Any] = {
    str: string,
    bool: boolean,
    int: integer,
    float: float_,
    Decimal: decimal,
}
