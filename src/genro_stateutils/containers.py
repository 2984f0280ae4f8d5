# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Container classification and copy helpers.

A tree is made of two container kinds:

- **mapping**: any ``collections.abc.Mapping`` (copied as ``dict``)
- **sequence**: any ``collections.abc.Sequence`` that is not string-like
  (``tuple`` stays ``tuple``, everything else is copied as ``list``)

Every other value is a leaf. The copy helpers never touch their input:
they return a shallow copy with one slot replaced, so untouched children
are shared with the original.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Union

Key = Union[str, int]

_STRINGLIKE = (str, bytes, bytearray)


class _Absent:
    """Sentinel for "no value here".

    Distinct from None, which is a legitimate stored value. There is a
    single instance, ``ABSENT``; compare it by identity.
    """

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def is_mapping(value: Any) -> bool:
    """True if value is a keyed mapping."""
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """True if value is an ordered sequence (strings are leaves)."""
    return isinstance(value, Sequence) and not isinstance(value, _STRINGLIKE)


def is_container(value: Any) -> bool:
    """True if value is a mapping or a sequence."""
    return is_mapping(value) or is_sequence(value)


def is_index(key: Any) -> bool:
    """True if key can address a sequence slot.

    Only non-negative ints qualify; bool is rejected although it
    subclasses int.
    """
    return isinstance(key, int) and not isinstance(key, bool) and key >= 0


def empty_like_key(key: Any) -> dict | list:
    """Return a fresh empty container shaped for the given key."""
    return [] if is_index(key) else {}


def assoc(mapping: Mapping, key: str, value: Any) -> dict:
    """Return a new dict with all entries of mapping plus key -> value."""
    result = dict(mapping)
    result[key] = value
    return result


def assoc_index(sequence: Sequence, index: int, value: Any) -> list | tuple:
    """Return a new sequence with position index replaced by value.

    Writing past the end pads the gap with ABSENT, so the result has
    length ``index + 1``.
    """
    items = list(sequence)
    if index >= len(items):
        items.extend([ABSENT] * (index - len(items) + 1))
    items[index] = value
    if isinstance(sequence, tuple):
        return tuple(items)
    return items
