# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error types raised by StrictVal.

Two tiers are distinguished:

* :class:`ConfigError` signals a mistake in a descriptor or record type
  definition. It is raised while schemas are being declared and is never
  caught internally.
* :class:`ValidationError` signals that a piece of data does not conform to
  its declared type. It carries the path of the offending field using ``.``
  and ``[i]`` notation, e.g. ``hobbies[0].difficulty``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

# ###############
# Public Interface
# ###############


class ConfigError(Exception):
    """Raised when a descriptor, record type, or declaration document is invalid."""


class ValidationError(Exception):
    """Raised when a value fails a null, kind, validator, or structural check.

    Attributes:
        path: Path of the offending field. Empty when the failure concerns a
            record as a whole (e.g. a record-level validator).
        reason: Human-readable description of the failure.
        cause: The original exception raised by a validator, if any.
    """

    def __init__(self, path: str, reason: str, cause: BaseException | None = None) -> None:
        super().__init__(f"{path} {reason}" if path else reason)
        self.path = path
        self.reason = reason
        self.cause = cause

    def within(self, parent: str) -> ValidationError:
        """Return a copy of this error located under the field path *parent*."""
        return ValidationError(join_path(parent, self.path), self.reason, self.cause)


def join_path(parent: str, child: str) -> str:
    """Join two field path segments.

    Index segments (``[0]``) attach directly; named segments are joined with a dot.
    """
    if not parent:
        return child
    if not child:
        return parent
    if child.startswith("["):
        return f"{parent}{child}"
    return f"{parent}.{child}"


@contextmanager
def error_path(segment: str) -> Iterator[None]:
    """Relocate any :class:`ValidationError` raised inside the block under *segment*."""
    try:
        yield
    except ValidationError as exc:
        raise exc.within(segment) from exc
