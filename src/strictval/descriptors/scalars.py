# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Leaf descriptors over immutable Python scalar kinds."""

from __future__ import annotations

import enum
import uuid
from datetime import date, time, timedelta
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any

from strictval.descriptors.base import TypeDescriptor, describe_value
from strictval.errors import ConfigError, ValidationError

# ###############
# Public Interface
# ###############

# Kinds whose instances are intrinsically immutable and hashable. A descendant
# descriptor over any other kind could not guarantee deep immutability.
IMMUTABLE_KINDS: tuple[type, ...] = (
    str,
    bytes,
    int,
    float,
    complex,
    bool,
    Decimal,
    Fraction,
    date,
    time,
    timedelta,
    uuid.UUID,
    enum.Enum,
    frozenset,
)


class DescendantType(TypeDescriptor):
    """Accepts instances of a given kind (or its subclasses).

    Serialization and freezing are the identity, so only kinds listed in
    :data:`IMMUTABLE_KINDS` are accepted.

    Attributes:
        kind: The required runtime class.
    """

    __slots__ = ("kind",)

    def __init__(self, kind: type, **options: Any) -> None:
        super().__init__(**options)
        self._check_kind(kind)
        self._assign("kind", kind)

    @property
    def plain_key(self) -> bool:
        # Enum members serialize as themselves and do not come back from plain strings.
        return issubclass(self.kind, str) and not issubclass(self.kind, enum.Enum)

    def serialize(self, value: Any) -> Any:
        return value

    def deserialize(self, plain: Any) -> Any:
        return plain

    def deep_freeze(self, value: Any) -> Any:
        return value

    def __str__(self) -> str:
        return self.kind.__name__

    def _check_kind(self, kind: Any) -> None:
        """Reject kinds that are not known to be immutable."""
        if not isinstance(kind, type) or not issubclass(kind, IMMUTABLE_KINDS):
            raise ConfigError(f"Cannot build a descendant descriptor for {kind!r}: not an immutable kind")

    def _validate_value(self, name: str, value: Any) -> None:
        if not isinstance(value, self.kind):
            raise ValidationError(name, f"must be of type {self}, found {describe_value(value)}")


class StringType(DescendantType):
    """Descriptor for ``str`` values."""

    __slots__ = ()

    def __init__(self, **options: Any) -> None:
        super().__init__(str, **options)


class IntegerType(DescendantType):
    """Descriptor for ``int`` values. Booleans are rejected even though ``bool`` subclasses ``int``."""

    __slots__ = ()

    def __init__(self, **options: Any) -> None:
        super().__init__(int, **options)

    def _validate_value(self, name: str, value: Any) -> None:
        if isinstance(value, bool):
            raise ValidationError(name, f"must be of type int, found {describe_value(value)}")
        super()._validate_value(name, value)


class FloatType(DescendantType):
    """Descriptor for ``float`` values. Integers are not implicitly accepted."""

    __slots__ = ()

    def __init__(self, **options: Any) -> None:
        super().__init__(float, **options)


class DecimalType(DescendantType):
    """Descriptor for :class:`decimal.Decimal` values.

    Decimals serialize to their string form so no precision is lost in
    JSON-like encodings.
    """

    __slots__ = ()

    def __init__(self, **options: Any) -> None:
        super().__init__(Decimal, **options)

    @property
    def plain_key(self) -> bool:
        return True

    def serialize(self, value: Any) -> Any:
        if value is None:
            return None
        return str(value)

    def deserialize(self, plain: Any) -> Any:
        # Unparseable input is handed back unchanged and rejected by validation.
        if isinstance(plain, bool):
            return plain
        if isinstance(plain, float):
            plain = repr(plain)
        if isinstance(plain, str | int):
            try:
                return Decimal(plain)
            except InvalidOperation:
                return plain
        return plain
