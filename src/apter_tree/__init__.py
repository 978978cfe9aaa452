# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Apter-Tree - Trees stored as parallel value and parent-index lists.

A lightweight, zero-dependency library providing a flat-array tree
container: every element is kept in insertion order next to the index
of its parent.
"""

__version__ = "0.1.0"

from .exceptions import (
    ApterTreeError,
    HasChildrenError,
    InvalidParentError,
    TreeFullError,
)
from .node import ApterNode
from .store import NO_PARENT, ApterTree, CheckedApterTree

__all__ = [
    # Core classes
    "ApterTree",
    "ApterNode",
    "NO_PARENT",
    # Checked variant
    "CheckedApterTree",
    # Exceptions
    "ApterTreeError",
    "InvalidParentError",
    "HasChildrenError",
    "TreeFullError",
]
