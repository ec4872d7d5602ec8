# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptors that own child descriptors: arrays, maps, tuples and enums.

Validation recurses into every child and reports failures with the child's
position appended to the field path (``tags[2]``, ``scores['alice']``).
Freezing produces new immutable containers (``tuple`` and
:class:`~strictval.frozen.FrozenDict`), never references to the input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from strictval.descriptors.base import TypeDescriptor, describe_value, require_descriptor
from strictval.errors import ConfigError, ValidationError, error_path
from strictval.frozen import FrozenDict

# ###############
# Public Interface
# ###############


class ArrayType(TypeDescriptor):
    """An ordered, homogeneous sequence (``list`` or ``tuple``), frozen as a ``tuple``.

    Attributes:
        element: Descriptor applied to every element.
    """

    __slots__ = ("element",)

    def __init__(self, element: TypeDescriptor, **options: Any) -> None:
        super().__init__(**options)
        self._assign("element", require_descriptor(element))

    def serialize(self, value: Any) -> Any:
        if value is None:
            return None
        return [self.element.serialize(item) for item in value]

    def deserialize(self, plain: Any) -> Any:
        if not _is_sequence(plain):
            return plain
        result = []
        for index, item in enumerate(plain):
            with error_path(f"[{index}]"):
                result.append(self.element.deserialize(item))
        return result

    def deep_freeze(self, value: Any) -> Any:
        if value is None:
            return None
        return tuple(self.element.deep_freeze(item) for item in value)

    def __str__(self) -> str:
        return f"array<{self.element}>"

    def _validate_value(self, name: str, value: Any) -> None:
        if not _is_sequence(value):
            raise ValidationError(name, f"must be an array of {self.element}, found {describe_value(value)}")
        for index, item in enumerate(value):
            self.element.validate(f"{name}[{index}]", item)


class MapType(TypeDescriptor):
    """A mapping with typed keys and values, frozen as a :class:`FrozenDict`.

    Keys must use a descriptor whose serialized form is a string (strings,
    decimals, or enums over those), so the plain form stays a string-keyed
    mapping that survives JSON. Entry order is preserved through every operation.

    Attributes:
        key: Descriptor applied to every key.
        value: Descriptor applied to every value.
    """

    __slots__ = ("key", "value")

    def __init__(self, key: TypeDescriptor, value: TypeDescriptor, **options: Any) -> None:
        super().__init__(**options)
        key = require_descriptor(key)
        if not key.plain_key:
            raise ConfigError(f"Map keys must serialize to strings, found {key}")
        self._assign("key", key)
        self._assign("value", require_descriptor(value))

    def serialize(self, value: Any) -> Any:
        if value is None:
            return None
        return {self.key.serialize(k): self.value.serialize(v) for k, v in value.items()}

    def deserialize(self, plain: Any) -> Any:
        if not isinstance(plain, Mapping):
            return plain
        result = {}
        for k, v in plain.items():
            key = self.key.deserialize(k)
            if key in result:
                raise ValidationError(f"key({k!r})", f"is a duplicate key: {key!r} was already given")
            with error_path(f"[{k!r}]"):
                result[key] = self.value.deserialize(v)
        return result

    def deep_freeze(self, value: Any) -> Any:
        if value is None:
            return None
        return FrozenDict((self.key.deep_freeze(k), self.value.deep_freeze(v)) for k, v in value.items())

    def __str__(self) -> str:
        return f"map<{self.key}, {self.value}>"

    def _validate_value(self, name: str, value: Any) -> None:
        if not isinstance(value, Mapping):
            raise ValidationError(name, f"must be a mapping of {self}, found {describe_value(value)}")
        for k, v in value.items():
            self.key.validate(f"{name}.key({k!r})", k)
            self.value.validate(f"{name}[{k!r}]", v)


class TupleType(TypeDescriptor):
    """A fixed-arity sequence with one descriptor per position.

    Attributes:
        elements: Per-position descriptors.
    """

    __slots__ = ("elements",)

    def __init__(self, elements: Sequence[TypeDescriptor], **options: Any) -> None:
        super().__init__(**options)
        if not _is_sequence(elements):
            raise ConfigError(f"Tuple elements must be a list or tuple of descriptors, found {elements!r}")
        self._assign("elements", tuple(require_descriptor(e) for e in elements))

    def serialize(self, value: Any) -> Any:
        if value is None:
            return None
        return [element.serialize(item) for element, item in zip(self.elements, value)]

    def deserialize(self, plain: Any) -> Any:
        if not _is_sequence(plain) or len(plain) != len(self.elements):
            return plain
        result = []
        for index, (element, item) in enumerate(zip(self.elements, plain)):
            with error_path(f"[{index}]"):
                result.append(element.deserialize(item))
        return result

    def deep_freeze(self, value: Any) -> Any:
        if value is None:
            return None
        return tuple(element.deep_freeze(item) for element, item in zip(self.elements, value))

    def __str__(self) -> str:
        return f"({', '.join(str(e) for e in self.elements)})"

    def _validate_value(self, name: str, value: Any) -> None:
        if not _is_sequence(value) or len(value) != len(self.elements):
            raise ValidationError(name, f"must be a tuple of {self}, found {describe_value(value)}")
        for index, (element, item) in enumerate(zip(self.elements, value)):
            element.validate(f"{name}[{index}]", item)


class EnumType(TypeDescriptor):
    """A value restricted to a fixed set of permitted values.

    Permitted values are validated against and frozen by the element
    descriptor once, at construction. Membership is tested by equality.

    Attributes:
        element: Descriptor of the underlying value kind.
        values: The permitted values, frozen.
    """

    __slots__ = ("element", "values")

    def __init__(self, element: TypeDescriptor, values: Iterable[Any], **options: Any) -> None:
        super().__init__(**options)
        element = require_descriptor(element)
        if isinstance(values, str | bytes) or not isinstance(values, Iterable):
            raise ConfigError(f"Enum values must be a collection, found {values!r}")
        frozen = []
        for value in values:
            try:
                element.validate("enum value", value)
            except ValidationError as exc:
                raise ConfigError(f"Invalid enum value: {exc}") from exc
            frozen.append(element.deep_freeze(value))
        if not frozen:
            raise ConfigError("Enum must permit at least one value")
        self._assign("element", element)
        self._assign("values", tuple(frozen))

    @property
    def plain_key(self) -> bool:
        return self.element.plain_key

    def serialize(self, value: Any) -> Any:
        return self.element.serialize(value)

    def deserialize(self, plain: Any) -> Any:
        return self.element.deserialize(plain)

    def deep_freeze(self, value: Any) -> Any:
        return self.element.deep_freeze(value)

    def __str__(self) -> str:
        return f"enum<{self.element}>{list(self.values)!r}"

    def _validate_value(self, name: str, value: Any) -> None:
        self.element.validate(name, value)
        if value not in self.values:
            raise ValidationError(name, f"must be one of {list(self.values)!r}, found {value!r}")


# ################
# Implementation
# ################


def _is_sequence(value: Any) -> bool:
    """Return True for the sequence kinds accepted as arrays and tuples."""
    return isinstance(value, list | tuple)
