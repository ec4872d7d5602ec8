# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Base contract shared by every StrictVal type descriptor.

A descriptor is an immutable configuration object that knows how to validate,
serialize, deserialize and deep-freeze the values of one field kind.
Descriptors are built once and shared by every record instance that uses them.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator
from pydantic import Field as _Field
from pydantic import ValidationError as _PydanticValidationError

from strictval.errors import ConfigError, ValidationError

# ###############
# Public Interface
# ###############

# A field-level check. Receives the field path and the (non-null) value and
# raises on failure.
Validator = Callable[[str, Any], None]


class DescriptorOptions(BaseModel):
    """The complete set of options accepted by every descriptor.

    Attributes:
        nullable: Whether ``None`` is an acceptable value.
        positive: Attach the ``> 0`` validator.
        negative: Attach the ``< 0`` validator.
        nonpositive: Attach the ``<= 0`` validator.
        nonnegative: Attach the ``>= 0`` validator.
        nonempty: Attach the ``len(value) > 0`` validator.
        predicates: Custom predicates, given as ``validate=``. A predicate
            receives the value and fails by returning ``False`` or raising.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    nullable: StrictBool = False
    positive: StrictBool = False
    negative: StrictBool = False
    nonpositive: StrictBool = False
    nonnegative: StrictBool = False
    nonempty: StrictBool = False
    predicates: tuple[Callable[[Any], Any], ...] = _Field(default=(), alias="validate")

    @field_validator("predicates", mode="before")
    @classmethod
    def wrap_single_predicate(cls, value: Any) -> Any:
        """Accept a single callable or a list where a tuple of predicates is expected."""
        if callable(value):
            return (value,)
        if isinstance(value, list):
            return tuple(value)
        return value


def parse_options(options: Mapping[str, Any]) -> DescriptorOptions:
    """Validate a descriptor option mapping.

    Raises:
        ConfigError: If an option is unrecognized or has a malformed value.
    """
    try:
        return DescriptorOptions.model_validate(dict(options))
    except _PydanticValidationError as exc:
        raise ConfigError(f"Invalid descriptor options {sorted(options)}: {exc}") from exc


class TypeDescriptor(abc.ABC):
    """Abstract base for all descriptors.

    Subclasses implement :meth:`serialize`, :meth:`deserialize` and
    :meth:`deep_freeze`, and override :meth:`_validate_value` to add their
    kind and structure checks.

    Attributes:
        nullable: Whether ``None`` passes validation.
        validators: Field-level checks, applied in declaration order.
    """

    __slots__ = ("nullable", "validators")

    def __init__(self, **options: Any) -> None:
        parsed = parse_options(options)
        validators: list[Validator] = []
        # Keyword order is declaration order.
        for key in options:
            if key in STANDARD_VALIDATORS and getattr(parsed, key):
                validators.append(STANDARD_VALIDATORS[key])
            elif key == "validate":
                validators.extend(_predicate_validator(p) for p in parsed.predicates)
        self._assign("nullable", parsed.nullable)
        self._assign("validators", tuple(validators))

    def validate(self, name: str, value: Any) -> None:
        """Check *value* for the field at path *name*.

        Raises:
            ValidationError: If the value is null but the descriptor is not
                nullable, has the wrong kind or structure, or fails a validator.
        """
        if value is None:
            if not self.nullable:
                raise ValidationError(name, "cannot be null")
            return
        self._validate_value(name, value)
        for validator in self.validators:
            try:
                validator(name, value)
            except ValidationError:
                raise
            except Exception as exc:
                raise ValidationError(name, f"failed validation: {exc}", cause=exc) from exc

    @abc.abstractmethod
    def serialize(self, value: Any) -> Any:
        """Return the plain (JSON-compatible) form of *value*."""

    @abc.abstractmethod
    def deserialize(self, plain: Any) -> Any:
        """Rebuild a value from its plain form."""

    @abc.abstractmethod
    def deep_freeze(self, value: Any) -> Any:
        """Return an immutable equivalent of *value* that shares no mutable state with it."""

    @property
    def plain_key(self) -> bool:
        """True if serialized values are always strings and can therefore key a plain mapping."""
        return False

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}{' (nullable)' if self.nullable else ''}>"

    def _validate_value(self, name: str, value: Any) -> None:
        """Check the kind and structure of a non-null value."""

    def _assign(self, name: str, value: Any) -> None:
        """Set an attribute during construction."""
        object.__setattr__(self, name, value)


def require_descriptor(candidate: Any) -> TypeDescriptor:
    """Return *candidate* if it is a descriptor, else raise :class:`ConfigError`."""
    if not isinstance(candidate, TypeDescriptor):
        raise ConfigError(f"Expected a type descriptor, found {candidate!r}")
    return candidate


def describe_value(value: Any) -> str:
    """Render a value and its type for error messages."""
    return f"{value!r} ({type(value).__name__})"


# ################
# Implementation
# ################


def _positive(name: str, value: Any) -> None:
    if not value > 0:
        raise ValidationError(name, f"must be > 0 (got {value!r})")


def _negative(name: str, value: Any) -> None:
    if not value < 0:
        raise ValidationError(name, f"must be < 0 (got {value!r})")


def _nonpositive(name: str, value: Any) -> None:
    if not value <= 0:
        raise ValidationError(name, f"must be <= 0 (got {value!r})")


def _nonnegative(name: str, value: Any) -> None:
    if not value >= 0:
        raise ValidationError(name, f"must be >= 0 (got {value!r})")


def _nonempty(name: str, value: Any) -> None:
    if len(value) == 0:
        raise ValidationError(name, f"must be non-empty (got {value!r})")


STANDARD_VALIDATORS: dict[str, Validator] = {
    "positive": _positive,
    "negative": _negative,
    "nonpositive": _nonpositive,
    "nonnegative": _nonnegative,
    "nonempty": _nonempty,
}


def _predicate_validator(predicate: Callable[[Any], Any]) -> Validator:
    """Adapt a user predicate over the value into a field-level check."""
    label = getattr(predicate, "__name__", repr(predicate))

    def check(name: str, value: Any) -> None:
        if predicate(value) is False:
            raise ValidationError(name, f"failed validator {label} (got {value!r})")

    return check
