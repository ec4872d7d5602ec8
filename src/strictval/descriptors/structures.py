# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptors whose values are themselves record instances.

:class:`StructureType` nests a single record type. :class:`PolyStructureType`
accepts any of several record types and records which one was used under the
reserved ``__type_id`` key of the serialized form.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from strictval.descriptors.base import TypeDescriptor
from strictval.descriptors.scalars import DescendantType
from strictval.errors import ConfigError, ValidationError
from strictval.frozen import FrozenDict
from strictval.record import TYPE_ID_FIELD, Structure, is_record_type

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class StructureType(DescendantType):
    """A nested record of one specific record type.

    Values must be instances of exactly that type: a subtype would serialize
    its extra fields and come back as the base type. Subtypes belong in a
    :class:`PolyStructureType`. Record instances are immutable by construction,
    so freezing is the identity.
    """

    __slots__ = ()

    def __init__(self, structure: type[Structure], **options: Any) -> None:
        super().__init__(structure, **options)

    @property
    def structure(self) -> type[Structure]:
        """The nested record type."""
        return self.kind

    def serialize(self, value: Any) -> Any:
        if value is None:
            return None
        return value.serialize()

    def deserialize(self, plain: Any) -> Any:
        if not isinstance(plain, Mapping):
            return plain
        return self.kind.deserialize(plain)

    def _check_kind(self, kind: Any) -> None:
        if not is_record_type(kind):
            raise ConfigError(f"Cannot build a structure descriptor for {kind!r}: not a record type")

    def _validate_value(self, name: str, value: Any) -> None:
        super()._validate_value(name, value)
        if type(value) is not self.kind:
            raise ValidationError(name, _subtype_reason(self.kind, value))


class PolyStructureType(TypeDescriptor):
    """A nested record drawn from a closed set of record types.

    Each candidate is registered under a discriminant id. A value must be an
    instance of exactly one candidate; matching none or several is a
    validation error, as is an instance of an unregistered subtype of a
    candidate. Candidates related by inheritance are accepted but logged,
    since instances of the subclass will always be ambiguous.

    Attributes:
        candidates: Discriminant id to record type, in declaration order.
    """

    __slots__ = ("candidates",)

    def __init__(self, candidates: Mapping[str, type[Structure]], **options: Any) -> None:
        super().__init__(**options)
        if not isinstance(candidates, Mapping) or not candidates:
            raise ConfigError(
                f"Polymorphic structure needs a non-empty id to record type mapping, found {candidates!r}"
            )
        for type_id, record_type in candidates.items():
            if not isinstance(type_id, str) or not type_id:
                raise ConfigError(f"Polymorphic structure ids must be non-empty strings, found {type_id!r}")
            if not is_record_type(record_type):
                raise ConfigError(f"Polymorphic candidate '{type_id}' is not a record type: {record_type!r}")
        self._assign("candidates", FrozenDict(candidates))

        overlapping = _overlapping_candidates(self.candidates)
        if overlapping:
            logger.warning(
                "Polymorphic candidates %s overlap; values matching more than one will be rejected as ambiguous",
                overlapping,
            )

    def serialize(self, value: Any) -> Any:
        if value is None:
            return None
        return value.serialize(type_id=self._resolve("", value))

    def deserialize(self, plain: Any) -> Any:
        if not isinstance(plain, Mapping):
            return plain
        type_id = plain.get(TYPE_ID_FIELD)
        if not isinstance(type_id, str) or type_id not in self.candidates:
            raise ValidationError(TYPE_ID_FIELD, f"must be one of {list(self.candidates)}, found {type_id!r}")
        return self.candidates[type_id].deserialize(plain)

    def deep_freeze(self, value: Any) -> Any:
        return value

    def __str__(self) -> str:
        return " | ".join(f"{type_id}:{record_type.__name__}" for type_id, record_type in self.candidates.items())

    def _validate_value(self, name: str, value: Any) -> None:
        self._resolve(name, value)

    def _resolve(self, name: str, value: Any) -> str:
        """Return the id of the single candidate matching *value*."""
        matches = [type_id for type_id, record_type in self.candidates.items() if isinstance(value, record_type)]
        if not matches:
            raise ValidationError(name, f"matches none of {list(self.candidates)}; found {type(value).__name__}")
        if len(matches) > 1:
            raise ValidationError(name, f"is ambiguous; {type(value).__name__} matches {matches}")
        if type(value) is not self.candidates[matches[0]]:
            raise ValidationError(name, _subtype_reason(self.candidates[matches[0]], value))
        return matches[0]


# ################
# Implementation
# ################


def _overlapping_candidates(candidates: Mapping[str, type[Structure]]) -> list[tuple[str, str]]:
    """Return pairs of candidate ids where one record type is the same as or a subclass of the other."""
    items = list(candidates.items())
    pairs = []
    for i, (first_id, first) in enumerate(items):
        for second_id, second in items[i + 1 :]:
            if issubclass(first, second) or issubclass(second, first):
                pairs.append((first_id, second_id))
    return pairs


def _subtype_reason(record_type: type[Structure], value: Any) -> str:
    return (
        f"must be exactly {record_type.__name__}, found subtype {type(value).__name__}; "
        "register the subtype as its own polymorphic candidate"
    )
