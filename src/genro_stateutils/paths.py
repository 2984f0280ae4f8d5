# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path normalisation.

A path is either a sequence of keys or a dotted string:

    ('todos', 0, 'done')   # key tuple
    'todos.#0.done'        # same path, dotted form

In the dotted form a ``#N`` segment is the sequence index N; every other
segment is a mapping key. The empty tuple and the empty string both
address the root.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from .containers import Key

Path = Union[str, Sequence[Key]]


def _parse_path_segment(segment: str) -> Key:
    """Turn one dotted segment into a key: '#3' is the index 3, any other text is itself."""
    if segment.startswith('#'):
        rest = segment[1:]
        if rest.isdecimal():
            return int(rest)
    return segment


def parse_path(path: Path) -> tuple[Key, ...]:
    """Normalise a path into a tuple of keys.

    Args:
        path: Dotted string or sequence of str/int keys.

    Returns:
        Tuple of keys.

    Raises:
        TypeError: If path is bytes-like or a key is neither str nor int.

    Example:
        >>> parse_path('todos.#0.done')
        ('todos', 0, 'done')
        >>> parse_path(['user', 'tags', 1])
        ('user', 'tags', 1)
    """
    if isinstance(path, str):
        if not path:
            return ()
        return tuple(_parse_path_segment(part) for part in path.split('.'))

    if isinstance(path, (bytes, bytearray)):
        raise TypeError(
            f"path must be str or a sequence of keys, not {type(path).__name__}"
        )

    keys = tuple(path)
    for key in keys:
        if not isinstance(key, (str, int)):
            raise TypeError(
                f"path keys must be str or int, not {type(key).__name__}"
            )
    return keys


def _format_key(key: Key) -> str:
    """Render one key for the dotted form, refusing keys it would misread."""
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise ValueError(f"{key!r} cannot be written in a dotted path")
    if isinstance(key, int):
        if key < 0:
            raise ValueError(f"negative index {key} cannot be written in a dotted path")
        return f"#{key}"
    if not key or '.' in key or isinstance(_parse_path_segment(key), int):
        raise ValueError(f"key {key!r} cannot be written in a dotted path")
    return key


def format_path(keys: Sequence[Key]) -> str:
    """Join keys into the dotted form, writing ints as #N.

    The result always parses back to the same keys. Keys the dotted form
    cannot express (bools, negative ints, and strings that are empty,
    contain '.', or look like '#N') raise ValueError; pass such paths as
    key tuples instead.
    """
    return '.'.join(_format_key(key) for key in keys)
