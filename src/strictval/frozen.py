# Copyright 2026 StrictVal Contributors
# SPDX-License-Identifier: Apache-2.0

"""Immutable container types used to store deep-frozen field values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

# ###############
# Public Interface
# ###############


class FrozenDict(Mapping):
    """An immutable, hashable mapping that preserves insertion order.

    The mapping takes a private copy of its input, so later changes to the
    source mapping are never observed. Equality follows the ``Mapping``
    protocol and therefore compares equal to a plain ``dict`` with the same
    items.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, items: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = (), /, **kwargs: Any) -> None:
        data = dict(items)
        data.update(kwargs)
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_hash", None)

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash(frozenset(self._data.items())))
        return self._hash

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._data,))

    def __copy__(self) -> FrozenDict:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> FrozenDict:
        return self
