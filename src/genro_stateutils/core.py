# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Immutable path-addressed access to nested state.

This module provides the three operations of the library:

    - get_in(tree, path): read the value at a nested path
    - set_in(tree, path, value): new tree with value written at path
    - update_in(tree, path, fn): new tree with the value at path
      replaced by fn(current)

None of them mutates its input. A write copies only the containers on
the path from the root to the target; every other branch of the result
is the very same object found in the input (structural sharing).

Missing intermediate containers are created on the fly. The shape of a
new container comes from the key that follows it: an int creates a list,
a string creates a dict.

Example:
    >>> state = {'user': {'tags': [1, 2, 3]}, 'theme': 'dark'}
    >>> nxt = set_in(state, ('user', 'tags', 1), 'two')
    >>> nxt['user']['tags']
    [1, 'two', 3]
    >>> nxt['theme'] is state['theme']
    True
    >>> set_in({}, 'todos.#0.done', True)
    {'todos': [{'done': True}]}
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .containers import (
    ABSENT,
    assoc,
    assoc_index,
    empty_like_key,
    is_container,
    is_index,
    is_mapping,
    is_sequence,
)
from .exceptions import InvalidIndexKindError, InvalidRootKindError
from .paths import Path, parse_path

logger = logging.getLogger(__name__)

_ARRAY_KEY_MESSAGE = "Unexpected key type for array"


def get_in(tree: Any, path: Path, default: Any = ABSENT) -> Any:
    """Get the value at the given path.

    Reading through a missing key or into a leaf is not an error: it
    yields ``default``. Indexing a sequence with a non-index key is.

    Args:
        tree: Root value, usually a mapping or sequence.
        path: Dotted string or sequence of keys.
        default: Returned when nothing is found. Defaults to ABSENT.

    Returns:
        The value at path, ``tree`` itself for an empty path, or default.

    Raises:
        InvalidIndexKindError: If a sequence is indexed by a non-index key.

    Example:
        >>> get_in({'a': [10, {'b': 2}]}, ('a', 1, 'b'))
        2
        >>> get_in({'a': 1}, 'a.b.c') is ABSENT
        True
    """
    keys = parse_path(path)
    current = tree

    for position, key in enumerate(keys):
        if is_mapping(current):
            current = current.get(str(key), ABSENT)
        elif is_sequence(current):
            if not is_index(key):
                raise InvalidIndexKindError(key, position)
            current = current[key] if key < len(current) else ABSENT
        else:
            return default

    if current is ABSENT:
        return default
    return current


def set_in(tree: Any, path: Path, value: Any) -> Any:
    """Return a new tree with value stored at path.

    An empty path replaces the whole tree: ``value`` is returned as is.
    Intermediate containers that are missing, or hold a non-container
    value, are created according to the next key in the path.

    Args:
        tree: Root mapping or sequence.
        path: Dotted string or sequence of keys.
        value: Value to store.

    Returns:
        The new tree. ``tree`` is left untouched.

    Raises:
        InvalidRootKindError: If path is not empty and tree is not a
            container.
        InvalidIndexKindError: If a sequence is indexed by a non-index key.
    """
    keys = parse_path(path)
    if not keys:
        logger.debug("set_in: empty path, replacing root")
        return value
    return _set_in(tree, keys, 0, value)


def _set_in(obj: Any, keys: tuple, position: int, value: Any) -> Any:
    """Recursive worker for set_in, writing keys[position:] into obj."""
    if not is_container(obj):
        raise InvalidRootKindError(obj)

    key = keys[position]
    last = position == len(keys) - 1

    if is_sequence(obj):
        if not is_index(key):
            raise InvalidIndexKindError(key, position, _ARRAY_KEY_MESSAGE)
        if key > len(obj):
            logger.debug("set_in: padding sequence from %d to %d", len(obj), key + 1)
        if last:
            return assoc_index(obj, key, value)
        child = obj[key] if key < len(obj) else ABSENT
        child = _container_for(child, keys, position)
        return assoc_index(obj, key, _set_in(child, keys, position + 1, value))

    label = str(key)
    if last:
        return assoc(obj, label, value)
    child = _container_for(obj.get(label, ABSENT), keys, position)
    return assoc(obj, label, _set_in(child, keys, position + 1, value))


def _container_for(child: Any, keys: tuple, position: int) -> Any:
    """Return child if it is a container, else a new one shaped by the next key."""
    if is_container(child):
        return child
    if child is not ABSENT:
        logger.debug(
            "set_in: discarding %s at path position %d",
            type(child).__name__,
            position,
        )
    return empty_like_key(keys[position + 1])


def update_in(tree: Any, path: Path, fn: Callable[[Any], Any]) -> Any:
    """Return a new tree with the value at path replaced by fn(current).

    ``current`` is what get_in would return (ABSENT when missing). Unlike
    set_in, a non-container tree with a non-empty path is not an error:
    the result is ABSENT.

    Args:
        tree: Root value.
        path: Dotted string or sequence of keys.
        fn: Callable receiving the current value and returning the new one.

    Returns:
        The new tree, ``fn(tree)`` for an empty path, or ABSENT.

    Raises:
        InvalidIndexKindError: If a sequence is indexed by a non-index key.

    Example:
        >>> update_in({'done': False}, ('done',), lambda v: not v)
        {'done': True}
    """
    keys = parse_path(path)
    if not keys:
        return fn(tree)

    if not is_container(tree):
        return ABSENT

    return set_in(tree, keys, fn(get_in(tree, keys)))
