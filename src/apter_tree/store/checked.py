# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""CheckedApterTree - ApterTree with validated insert and delete.

The plain ApterTree trusts its caller: insert() stores any parent index and
delete() removes nodes that still have children. CheckedApterTree refuses
both, which keeps every parent strictly before its child. Trees built only
through a CheckedApterTree are therefore always acyclic, and ancestors()
and walk() always terminate.

Example:
    >>> tree = CheckedApterTree()
    >>> tree.insert('root')
    0
    >>> tree.insert('orphan', 5)
    Traceback (most recent call last):
        ...
    InvalidParentError: parent index 5 does not exist (tree has 1 element(s))

    Permissive mode collects errors instead of raising::

        tree = CheckedApterTree(raise_on_error=False)
        tree.insert('orphan', 5)   # None
        tree.errors                # ['parent index 5 does not exist ...']
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import (
    ApterTreeError,
    HasChildrenError,
    InvalidParentError,
    TreeFullError,
)
from .core import NO_PARENT, ApterTree

logger = logging.getLogger(__name__)


class CheckedApterTree(ApterTree):
    """An ApterTree that validates parent indices and childless deletes.

    Attributes:
        errors: Messages of rejected operations, filled only when
            raise_on_error is False.
    """

    __slots__ = ('_raise_on_error', 'errors')

    def __init__(
        self,
        source: list | dict | ApterTree | None = None,
        raise_on_error: bool = True,
    ) -> None:
        """Initialize a CheckedApterTree.

        Args:
            source: Optional initial data, as for ApterTree. Loaded through
                the checked insert.
            raise_on_error: If True (default), rejected operations raise an
                ApterTreeError subclass. If False, they are logged, recorded
                in errors and return None (delete returns its default).
        """
        self._raise_on_error = raise_on_error
        self.errors: list[str] = []
        super().__init__(source)

    def _reject(self, error: ApterTreeError) -> None:
        if self._raise_on_error:
            logger.debug("rejected: %s", error)
            raise error
        logger.warning("rejected: %s", error)
        self.errors.append(str(error))

    def insert(self, value: Any, parent: int = NO_PARENT) -> int | None:
        """Append a value under an existing parent.

        Raises:
            InvalidParentError: If parent is neither NO_PARENT nor an existing index.
            TreeFullError: If the new index would reach NO_PARENT.
        """
        size = len(self)
        if size >= NO_PARENT:
            self._reject(TreeFullError(f"tree is full ({size} element(s))"))
            return None
        if parent != NO_PARENT and not 0 <= parent < size:
            self._reject(InvalidParentError(
                f"parent index {parent} does not exist (tree has {size} element(s))"
            ))
            return None
        return super().insert(value, parent)

    def delete(self, index: int, default: Any = None) -> Any:
        """Delete and return the value at index, which must have no children.

        Out-of-range indices still return default without error, and so does
        a delete rejected with raise_on_error=False.

        Raises:
            HasChildrenError: If the element has children.
        """
        if 0 <= index < len(self) and not self.is_leaf(index):
            self._reject(HasChildrenError(
                f"cannot delete {index}: it has children {list(self.children(index))}"
            ))
            return default
        return super().delete(index, default)

    def delete_subtree(self, index: int) -> list[Any]:
        """Delete index and all its descendants.

        Elements are removed highest index first. Every descendant comes
        after its parent, so each removal is of a leaf and never shifts an
        index that is still to be removed.

        Returns:
            Removed values in removal order; empty if index is out of range.
        """
        if not 0 <= index < len(self):
            return []
        doomed = [index] + [i for i, _ in self.walk(start=index)]
        return [ApterTree.delete(self, i) for i in sorted(doomed, reverse=True)]

    def copy(self) -> CheckedApterTree:
        """Return a shallow copy with the same raise_on_error setting."""
        return type(self)(self, raise_on_error=self._raise_on_error)
