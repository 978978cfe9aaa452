# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ApterTree exceptions."""

from __future__ import annotations


class ApterTreeError(Exception):
    """Base exception for ApterTree errors."""

    pass


class InvalidParentError(ApterTreeError):
    """Raised when a node is inserted under a parent index that does not exist."""

    pass


class HasChildrenError(ApterTreeError):
    """Raised when a node that still has children is deleted."""

    pass


class TreeFullError(ApterTreeError):
    """Raised when an insert would make an index collide with the root sentinel."""

    pass
