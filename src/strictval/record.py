# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime representation of StrictVal record types and their instances.

A record type is a subclass of :class:`Structure` produced by
:class:`strictval.builder.StructureBuilder`. It carries an ordered mapping of
field names to descriptors and a tuple of record-level validators. Instances
hold one deep-frozen value per field and can never be mutated.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from strictval.errors import ConfigError, ValidationError, error_path
from strictval.frozen import FrozenDict

# ###############
# Public Interface
# ###############

# Reserved key carrying the discriminant id of a polymorphic structure.
TYPE_ID_FIELD = "__type_id"

RecordValidator = Callable[[Any], Any]


class FieldAccessor:
    """Read-only class attribute exposing one field of a record instance."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __get__(self, instance: Structure | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._values[self.name]

    def __set__(self, instance: Structure, value: Any) -> None:
        raise AttributeError(f"cannot assign to field '{self.name}' of immutable {type(instance).__name__}")

    def __delete__(self, instance: Structure) -> None:
        raise AttributeError(f"cannot delete field '{self.name}' of immutable {type(instance).__name__}")


class Structure:
    """Base class of every record type.

    Record types are not written by hand; they are built by
    :class:`~strictval.builder.StructureBuilder`, which sets the two class
    attributes below and adds a :class:`FieldAccessor` per field.

    Attributes:
        __fields__: Field name to descriptor, in declaration order.
        __validators__: Record-level validators. Each receives the fully
            constructed instance and fails by returning ``False`` or raising.
    """

    __slots__ = ("_values",)

    __fields__: ClassVar[FrozenDict] = FrozenDict()
    __validators__: ClassVar[tuple[RecordValidator, ...]] = ()

    def __init__(self, values: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        """Validate, freeze and store the supplied field values.

        Args:
            values: Field values keyed by field name.
            **kwargs: Further field values; these take precedence over *values*.

        Raises:
            ConfigError: If a supplied name is not a declared field.
            ValidationError: If a field value or a record-level validator fails.
        """
        record_type = type(self)
        if record_type is Structure:
            raise ConfigError("Structure cannot be instantiated directly; build a record type first")
        supplied = dict(values or {})
        supplied.update(kwargs)

        fields = record_type.__fields__
        unrecognized = [name for name in supplied if name not in fields]
        if unrecognized:
            raise ConfigError(f"Unrecognized fields for {record_type.__name__}: {unrecognized}")

        frozen: dict[str, Any] = {}
        for name, descriptor in fields.items():
            value = supplied.get(name)
            descriptor.validate(name, value)
            frozen[name] = descriptor.deep_freeze(value)
        object.__setattr__(self, "_values", FrozenDict(frozen))

        self._check_invariants()

    @classmethod
    def new(cls, values: Mapping[str, Any]) -> Structure:
        """Construct an instance from a mapping of field name to value."""
        return cls(values)

    @classmethod
    def deserialize(cls, plain: Any) -> Structure:
        """Construct an instance from its plain serialized form.

        Every declared field is read from *plain* (missing fields are ``None``,
        extra keys such as :data:`TYPE_ID_FIELD` are ignored), deserialized
        through its descriptor, and the instance is then built through the
        regular constructor so full validation runs again.

        Raises:
            ValidationError: If *plain* is not a mapping or any field is invalid.
        """
        if not isinstance(plain, Mapping):
            raise ValidationError(
                "", f"{cls.__name__} must be deserialized from a mapping, found {type(plain).__name__}"
            )
        values: dict[str, Any] = {}
        for name, descriptor in cls.__fields__.items():
            with error_path(name):
                values[name] = descriptor.deserialize(plain.get(name))
        return cls(values)

    @classmethod
    def from_json(cls, text: str | bytes) -> Structure:
        """Parse a JSON document and deserialize it.

        Raises:
            ValidationError: If the text is not valid JSON or the data is invalid.
        """
        try:
            plain = json.loads(text)
        except ValueError as exc:
            raise ValidationError("", f"invalid JSON for {cls.__name__}: {exc}", cause=exc) from exc
        return cls.deserialize(plain)

    def serialize(self, type_id: str | None = None) -> dict[str, Any]:
        """Return the plain form of this instance.

        Args:
            type_id: Discriminant to inject under :data:`TYPE_ID_FIELD`, used
                when the instance is serialized as a polymorphic value.
        """
        result = {
            name: descriptor.serialize(self._values[name]) for name, descriptor in type(self).__fields__.items()
        }
        if type_id is not None:
            result[TYPE_ID_FIELD] = type_id
        return result

    def to_json(self) -> str:
        """Serialize this instance to a compact JSON string."""
        return json.dumps(self.serialize(), separators=(",", ":"))

    def to_dict(self) -> dict[str, Any]:
        """Return the frozen field values keyed by field name."""
        return dict(self._values)

    def replace(self, values: Mapping[str, Any] | None = None, /, **overrides: Any) -> Structure:
        """Return a new instance with some fields replaced.

        The receiver is left untouched and the new instance is fully validated.
        """
        merged = dict(self._values)
        merged.update(values or {})
        merged.update(overrides)
        return type(self)(merged)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Structure):
            return NotImplemented
        return type(self) is type(other) and self._values == other._values

    def __hash__(self) -> int:
        return hash((type(self), self._values))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"{type(self).__name__}({fields})"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> Structure:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Structure:
        return self

    # ------------------------------------------------------------------
    # Record-level validation
    # ------------------------------------------------------------------

    def _check_invariants(self) -> None:
        """Run every record-level validator against this instance."""
        for validator in type(self).__validators__:
            label = getattr(validator, "__name__", repr(validator))
            try:
                outcome = validator(self)
            except ValidationError:
                raise
            except Exception as exc:
                raise ValidationError("", f"{type(self).__name__} is invalid: {exc}", cause=exc) from exc
            if outcome is False:
                raise ValidationError("", f"{type(self).__name__} failed validator {label}")


def is_record_type(candidate: Any) -> bool:
    """Return True if *candidate* is a record type built from :class:`Structure`."""
    return isinstance(candidate, type) and issubclass(candidate, Structure) and candidate is not Structure

