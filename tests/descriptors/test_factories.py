# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for kind coercion and descriptor factories."""

import enum as _enum
from decimal import Decimal

import pytest

from strictval.builder import StructureBuilder
from strictval.descriptors import (
    DecimalType,
    EnumType,
    FloatType,
    IntegerType,
    StringType,
    StructureType,
    coerce_type,
    integer,
)
from strictval.errors import ConfigError

Tag = StructureBuilder("Tag").string("label").build()


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (str, StringType),
        (int, IntegerType),
        (float, FloatType),
        (Decimal, DecimalType),
        (bool, EnumType),
    ],
)
def test_coerce_python_kinds(kind: type, expected: type) -> None:
    """Supported Python kinds map to their canonical descriptor."""
    assert isinstance(coerce_type(kind), expected)


def test_coerce_applies_options_to_new_descriptor() -> None:
    """Options are applied when coercion builds a descriptor."""
    descriptor = coerce_type(int, nullable=True, positive=True)
    assert descriptor.nullable is True
    assert len(descriptor.validators) == 1


def test_coerce_record_type() -> None:
    """Record types become structure descriptors."""
    descriptor = coerce_type(Tag)
    assert isinstance(descriptor, StructureType)
    assert descriptor.structure is Tag


def test_coerce_descriptor_is_identity() -> None:
    """An existing descriptor is returned unchanged."""
    descriptor = integer()
    assert coerce_type(descriptor) is descriptor


def test_coerce_descriptor_with_options_is_error() -> None:
    """Options cannot be silently dropped on an existing descriptor."""
    with pytest.raises(ConfigError, match="cannot be applied to an existing descriptor"):
        coerce_type(integer(), nullable=True)


def test_coerce_subclass_of_supported_kind() -> None:
    """Subclasses of supported kinds resolve through their base class."""

    class Color(str, _enum.Enum):
        RED = "red"

    assert isinstance(coerce_type(Color), StringType)


@pytest.mark.parametrize("kind", [list, dict, object, "str", 3, None])
def test_coerce_rejects_everything_else(kind: object) -> None:
    """Anything outside the fixed mapping is a configuration error."""
    with pytest.raises(ConfigError, match="Invalid type definition"):
        coerce_type(kind)
