# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Build record types from declaration documents (YAML files or plain mappings).

Structures may reference one another in any order; references are resolved
on demand, and a structure that (transitively) references itself is rejected
because record types must exist before they can be nested.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as _PydanticValidationError

from strictval.builder import StructureBuilder
from strictval.declarations.models import (
    ArrayDecl,
    BooleanDecl,
    DeclarationDocument,
    DecimalDecl,
    EnumDecl,
    FloatDecl,
    IntegerDecl,
    MapDecl,
    PolyStructureDecl,
    StringDecl,
    StructureRefDecl,
    TupleDecl,
    TypeDecl,
)
from strictval.descriptors import factories
from strictval.descriptors.base import TypeDescriptor
from strictval.errors import ConfigError
from strictval.record import Structure

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def load_structures(path: Path) -> dict[str, type[Structure]]:
    """Load a YAML declaration document and build every structure it declares.

    Args:
        path: Path to the YAML document.

    Returns:
        Record types keyed by structure name, in document order.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or the
            declarations are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Declaration file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read declaration file: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: declaration document must be a YAML mapping")

    structures = build_structures(data, source_label=str(path))
    logger.debug("Loaded %d structures from %s", len(structures), path)
    return structures


def build_structures(document: Mapping[str, Any], source_label: str = "<document>") -> dict[str, type[Structure]]:
    """Build every structure declared in a plain declaration document.

    Args:
        document: Mapping with a ``structures`` key (see :class:`DeclarationDocument`).
        source_label: Human-readable label used in error messages.

    Returns:
        Record types keyed by structure name, in document order.

    Raises:
        ConfigError: If the document does not match the declaration model, a
            reference cannot be resolved, structures reference each other
            cyclically, or a declaration is rejected by the builder.
    """
    try:
        parsed = DeclarationDocument.model_validate(document)
    except _PydanticValidationError as exc:
        raise ConfigError(f"{source_label}: invalid declaration document: {exc}") from exc
    try:
        return _StructureResolver(parsed).build_all()
    except ConfigError as exc:
        raise ConfigError(f"{source_label}: {exc}") from exc


# ################
# Implementation
# ################


class _StructureResolver:
    """Builds structures on demand so that declaration order does not matter."""

    def __init__(self, document: DeclarationDocument) -> None:
        self._document = document
        self._built: dict[str, type[Structure]] = {}
        self._in_progress: list[str] = []

    def build_all(self) -> dict[str, type[Structure]]:
        for name in self._document.structures:
            self._structure(name)
        return {name: self._built[name] for name in self._document.structures}

    def _structure(self, name: str) -> type[Structure]:
        """Return the record type for *name*, building it and its dependencies first."""
        if name in self._built:
            return self._built[name]
        if name not in self._document.structures:
            raise ConfigError(f"unknown structure '{name}'")
        if name in self._in_progress:
            cycle = " -> ".join([*self._in_progress[self._in_progress.index(name) :], name])
            raise ConfigError(f"structures reference each other cyclically: {cycle}")

        self._in_progress.append(name)
        decl = self._document.structures[name]
        extends = self._structure(decl.extends) if decl.extends is not None else None
        builder = StructureBuilder(name, extends=extends)
        for field_name, type_decl in decl.fields.items():
            try:
                builder.field(field_name, self._descriptor(type_decl))
            except ConfigError as exc:
                raise ConfigError(f"{name}.{field_name}: {exc}") from exc
        self._in_progress.pop()

        self._built[name] = builder.build()
        return self._built[name]

    def _descriptor(self, decl: TypeDecl) -> TypeDescriptor:
        """Translate a type declaration into a descriptor."""
        options = decl.options()
        if isinstance(decl, StringDecl):
            return factories.string(**options)
        if isinstance(decl, IntegerDecl):
            return factories.integer(**options)
        if isinstance(decl, FloatDecl):
            return factories.float_(**options)
        if isinstance(decl, DecimalDecl):
            return factories.decimal(**options)
        if isinstance(decl, BooleanDecl):
            return factories.boolean(**options)
        if isinstance(decl, ArrayDecl):
            return factories.array(self._descriptor(decl.element), **options)
        if isinstance(decl, MapDecl):
            return factories.map_(self._descriptor(decl.key), self._descriptor(decl.value), **options)
        if isinstance(decl, TupleDecl):
            return factories.tuple_([self._descriptor(e) for e in decl.elements], **options)
        if isinstance(decl, EnumDecl):
            element = self._descriptor(decl.element)
            # Permitted values are written in their plain form.
            return factories.enum(element, [element.deserialize(v) for v in decl.values], **options)
        if isinstance(decl, StructureRefDecl):
            return factories.structure(self._structure(decl.ref), **options)
        if isinstance(decl, PolyStructureDecl):
            candidates = {type_id: self._structure(ref) for type_id, ref in decl.candidates.items()}
            return factories.poly_structure(candidates, **options)
        raise ConfigError(f"unsupported declaration {decl!r}")
