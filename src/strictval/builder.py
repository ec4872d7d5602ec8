# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Builder that assembles field declarations into a new record type.

Example::

    Hobby = (
        StructureBuilder("Hobby")
        .string("desc")
        .integer("difficulty", positive=True)
        .build()
    )
"""

from __future__ import annotations

import keyword
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from strictval.descriptors import factories
from strictval.descriptors.base import TypeDescriptor
from strictval.errors import ConfigError
from strictval.frozen import FrozenDict
from strictval.record import FieldAccessor, RecordValidator, Structure, is_record_type

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class StructureBuilder:
    """Accumulates fields and record-level validators, then builds a record type.

    Every declaration method returns the builder so calls can be chained.
    A builder may be used to build several record types; each call to
    :meth:`build` takes a snapshot of the current declarations.

    Args:
        name: Class name of the record type to build.
        extends: Optional record type to inherit fields and validators from.
            The built type is a subclass of it.
    """

    def __init__(self, name: str, extends: type[Structure] | None = None) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            raise ConfigError(f"Record type name must be an identifier, found {name!r}")
        if extends is not None and not is_record_type(extends):
            raise ConfigError(f"A record type can only extend another record type, found {extends!r}")
        self.name = name
        self.extends = extends
        self._fields: dict[str, TypeDescriptor] = dict(extends.__fields__) if extends else {}
        self._validators: list[RecordValidator] = list(extends.__validators__) if extends else []

    @property
    def fields(self) -> Mapping[str, TypeDescriptor]:
        """The fields declared so far, in declaration order."""
        return FrozenDict(self._fields)

    @property
    def validators(self) -> tuple[RecordValidator, ...]:
        """The record-level validators declared so far."""
        return tuple(self._validators)

    def field(self, name: str, kind: Any, **options: Any) -> StructureBuilder:
        """Declare a field of any kind accepted by :func:`~strictval.descriptors.coerce_type`.

        Raises:
            ConfigError: If the name is invalid or already declared, or the
                kind cannot be resolved to a descriptor.
        """
        self._check_field_name(name)
        self._fields[name] = factories.coerce_type(kind, **options)
        return self

    def string(self, name: str, **options: Any) -> StructureBuilder:
        return self.field(name, factories.string(**options))

    def integer(self, name: str, **options: Any) -> StructureBuilder:
        return self.field(name, factories.integer(**options))

    def float(self, name: str, **options: Any) -> StructureBuilder:
        return self.field(name, factories.float_(**options))

    def decimal(self, name: str, **options: Any) -> StructureBuilder:
        return self.field(name, factories.decimal(**options))

    def boolean(self, name: str, **options: Any) -> StructureBuilder:
        return self.field(name, factories.boolean(**options))

    def descendant(self, name: str, kind: type, **options: Any) -> StructureBuilder:
        return self.field(name, factories.descendant(kind, **options))

    def array(self, name: str, element: Any, **options: Any) -> StructureBuilder:
        return self.field(name, factories.array(element, **options))

    def map(self, name: str, key: Any, value: Any, **options: Any) -> StructureBuilder:
        return self.field(name, factories.map_(key, value, **options))

    def tuple(self, name: str, elements: Sequence[Any], **options: Any) -> StructureBuilder:
        return self.field(name, factories.tuple_(elements, **options))

    def enum(self, name: str, element: Any, values: Iterable[Any], **options: Any) -> StructureBuilder:
        return self.field(name, factories.enum(element, values, **options))

    def structure(self, name: str, record_type: type[Structure], **options: Any) -> StructureBuilder:
        return self.field(name, factories.structure(record_type, **options))

    def poly_structure(
        self, name: str, candidates: Mapping[str, type[Structure]], **options: Any
    ) -> StructureBuilder:
        return self.field(name, factories.poly_structure(candidates, **options))

    def validate(self, validator: RecordValidator) -> StructureBuilder:
        """Declare a record-level validator.

        The validator receives the fully constructed (already immutable)
        instance and fails by returning ``False`` or raising.
        """
        if not callable(validator):
            raise ConfigError(f"Record validator must be callable, found {validator!r}")
        self._validators.append(validator)
        return self

    def build(self) -> type[Structure]:
        """Create the record type from the declarations made so far."""
        fields = FrozenDict(self._fields)
        namespace: dict[str, Any] = {
            "__slots__": (),
            "__fields__": fields,
            "__validators__": tuple(self._validators),
        }
        for name in fields:
            namespace[name] = FieldAccessor(name)
        record_type = type(self.name, (self.extends or Structure,), namespace)
        logger.debug("Built record type %s with fields %s", self.name, list(fields))
        return record_type

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_field_name(self, name: Any) -> None:
        """Reject names that cannot be exposed as read-only attributes."""
        if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
            raise ConfigError(f"Field name must be an identifier, found {name!r}")
        if name.startswith("_"):
            raise ConfigError(f"Field name '{name}' is reserved: names may not start with an underscore")
        if hasattr(Structure, name):
            raise ConfigError(f"Field name '{name}' collides with a Structure attribute")
        if name in self._fields:
            raise ConfigError(f"Field '{name}' is already declared on {self.name}")
