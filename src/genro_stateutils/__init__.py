# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-StateUtils - Immutable path-addressed updates for nested state.

A lightweight, zero-dependency library for reading and rewriting nested
dict/list trees without mutating them, for the Genro ecosystem (Genro Kyō).
"""

import logging

__version__ = "0.1.0"

from .containers import ABSENT, is_container, is_mapping, is_sequence
from .core import get_in, set_in, update_in
from .exceptions import (
    InvalidIndexKindError,
    InvalidRootKindError,
    StateUtilsError,
)
from .paths import format_path, parse_path

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Operations
    "get_in",
    "set_in",
    "update_in",
    # Classifier
    "ABSENT",
    "is_mapping",
    "is_sequence",
    "is_container",
    # Paths
    "parse_path",
    "format_path",
    # Exceptions
    "StateUtilsError",
    "InvalidIndexKindError",
    "InvalidRootKindError",
]
