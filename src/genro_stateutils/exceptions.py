# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StateUtils exceptions."""

from __future__ import annotations

from typing import Any


class StateUtilsError(Exception):
    """Base exception for stateutils errors."""

    pass


class InvalidIndexKindError(StateUtilsError):
    """Raised when a sequence is indexed by a key that is not an index.

    Attributes:
        key: The offending key.
        position: Position of the key inside the path, or None if unknown.
    """

    def __init__(
        self, key: Any, position: int | None = None, message: str | None = None
    ) -> None:
        self.key = key
        self.position = position
        if message is None:
            message = f"{key!r} is an invalid array index"
        if position is not None:
            message = f"{message} (path position {position})"
        super().__init__(message)


class InvalidRootKindError(StateUtilsError):
    """Raised when a non-empty path is written into a non-container."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"set_in: subject must be a mapping or sequence, not {type(value).__name__}"
        )
