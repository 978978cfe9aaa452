# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ApterTree node view."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .store import ApterTree


class ApterNode:
    """A snapshot of one element of an ApterTree.

    Each node has:
    - index: The element's insertion-order position
    - value: The stored value
    - parent: The raw parent index (NO_PARENT for roots)
    - tree: The ApterTree the node was read from

    Indices shift when an earlier element is deleted, so a node is only
    meaningful until the next deletion on its tree.

    Example:
        >>> tree = ApterTree()
        >>> tree.insert('root')
        0
        >>> tree.node(0)
        ApterNode(0, 'root', parent=None)
    """

    __slots__ = ('index', 'value', 'parent', 'tree')

    def __init__(
        self,
        index: int,
        value: Any,
        parent: int,
        tree: ApterTree | None = None,
    ) -> None:
        self.index = index
        self.value = value
        self.parent = parent
        self.tree = tree

    def __repr__(self) -> str:
        parent = None if self.is_root else self.parent
        return f"ApterNode({self.index}, {self.value!r}, parent={parent!r})"

    @property
    def is_root(self) -> bool:
        """True if the node was inserted with the root sentinel as parent."""
        from .store import NO_PARENT
        return self.parent == NO_PARENT

    @property
    def is_leaf(self) -> bool:
        """True if no element of the tree has this node as parent."""
        if self.tree is None:
            raise ValueError("Node is not attached to a tree")
        return self.tree.is_leaf(self.index)
