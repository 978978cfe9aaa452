# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ApterTree - A tree stored as parallel value and parent-index lists.

This module provides the ApterTree class, the core container of the
apter-tree library. Instead of nodes owning references to their children,
every element lives in an insertion-ordered list and a second list of the
same length records the index of each element's parent.

Key Features:
    - **Flat storage**: Two parallel lists, O(1) append
    - **Implicit children**: Children are found by scanning parent indices
    - **Lazy traversal**: children(), leaves(), ancestors() and walk() are generators
    - **Ordered deletion**: delete() renumbers parent references in one pass

Root sentinel:
    A root is an element whose parent is NO_PARENT (``sys.maxsize``), the
    largest index a Python list can address. A tree therefore holds at most
    NO_PARENT elements.

Unchecked operations:
    insert() does not validate the parent index and delete() does not check
    that the deleted node is childless. Both are caller responsibilities:
    a dangling parent or a deleted parent leaves the tree with wrong
    parentage, and a cyclic parent chain makes ancestors(), walk() and
    as_nested() loop forever.
    Use validation_errors() to check a tree on demand, or CheckedApterTree
    to validate every insert and delete.

Example:
    Basic usage::

        tree = ApterTree()
        root = tree.insert('root')
        a = tree.insert('a', root)
        tree.insert('b', root)
        tree.insert('a1', a)

        list(tree.children(root))  # [1, 2]
        list(tree.leaves())        # [2, 3]
        list(tree.ancestors(3))    # [1, 0]
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Iterator

from ..node import ApterNode
from .loading import load_from_dict, load_from_list, load_from_tree

logger = logging.getLogger(__name__)

NO_PARENT = sys.maxsize


class ApterTree:
    """A tree container keyed by parent-pointer indices.

    ApterTree provides:
    - insert(value, parent): Append an element, returning its index
    - get(index) / tree[index]: Soft and strict element access
    - parent_of(index): Raw parent index of an element
    - children(), leaves(), ancestors(), walk(): Lazy traversals
    - delete(index): Ordered removal with parent renumbering

    Indices are 0-based insertion positions without gaps. They are not
    stable across delete(): every element after the removed one moves
    down by one.

    Example:
        >>> tree = ApterTree([('root', NO_PARENT), ('a', 0), ('b', 0)])
        >>> len(tree)
        3
        >>> tree.find('b')
        2
    """

    __slots__ = ('_values', '_parents')

    def __init__(self, source: list | dict | ApterTree | None = None) -> None:
        """Initialize an ApterTree.

        Args:
            source: Optional initial data. Can be:
                - list: (value, parent) pairs, or bare values inserted as roots
                - dict: Nested mapping {value: {child: {...}}}, inserted depth-first
                - ApterTree: Copy of another tree

        Example:
            >>> ApterTree([('root', NO_PARENT), ('child', 0)])
            >>> ApterTree({'root': {'a': {'a1': None}, 'b': None}})
            >>> ApterTree(other_tree)  # copy
        """
        self._values: list[Any] = []
        self._parents: list[int] = []

        if source is not None:
            self._load_source(source)

    def _load_source(self, source: list | dict | ApterTree) -> None:
        """Load data from source into this tree.

        Raises:
            TypeError: If source is not list, dict, or ApterTree.
        """
        if isinstance(source, ApterTree):
            load_from_tree(self, source)
        elif isinstance(source, dict):
            load_from_dict(self, source)
        elif isinstance(source, list):
            load_from_list(self, source)
        else:
            raise TypeError(
                f"source must be list, dict, or ApterTree, not {type(source).__name__}"
            )

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        pairs = ', '.join(
            f"({v!r}, {'NO_PARENT' if p == NO_PARENT else p})"
            for v, p in zip(self._values, self._parents)
        )
        return f"{type(self).__name__}([{pairs}])"

    def __len__(self) -> int:
        """Return the number of elements in the tree."""
        return len(self._parents)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        """Iterate over (index, value) pairs in insertion order."""
        return self.iter_items()

    def __contains__(self, value: Any) -> bool:
        """Check if any element compares equal to value."""
        return self.find(value) is not None

    def __getitem__(self, index: int) -> Any:
        """Get the value at index.

        Raises:
            IndexError: If index is outside 0..len(tree)-1.
        """
        self._check_index(index)
        return self._values[index]

    def __setitem__(self, index: int, value: Any) -> None:
        """Replace the value at index, keeping its parent.

        Raises:
            IndexError: If index is outside 0..len(tree)-1.
        """
        self._check_index(index)
        self._values[index] = value

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected rather than wrapped around.
        if not 0 <= index < len(self._parents):
            raise IndexError(
                f"Index {index} out of range (0-{len(self._parents) - 1})"
            )

    @property
    def is_empty(self) -> bool:
        """True if the tree contains no elements."""
        return not self._parents

    # ==================== Core API ====================

    def insert(self, value: Any, parent: int = NO_PARENT) -> int:
        """Append a value under the given parent index.

        The parent index is stored as given. It is not checked against the
        current size of the tree.

        Args:
            value: The value to store.
            parent: Index of the parent element, or NO_PARENT for a root.

        Returns:
            The index of the new element (len(tree) before the insert).
        """
        index = len(self._parents)
        self._values.append(value)
        self._parents.append(parent)
        return index

    def get(self, index: int, default: Any = None) -> Any:
        """Get the value at index, or default if there is no such element.

        The stored object itself is returned, so mutable values can be
        changed in place.
        """
        if 0 <= index < len(self._values):
            return self._values[index]
        return default

    def set(self, index: int, value: Any) -> bool:
        """Replace the value at index.

        Returns:
            True if the value was replaced, False if index is out of range.
        """
        if 0 <= index < len(self._values):
            self._values[index] = value
            return True
        return False

    def parent_of(self, index: int) -> int:
        """Return the raw parent index stored for index.

        Raises:
            IndexError: If index is outside 0..len(tree)-1.
        """
        self._check_index(index)
        return self._parents[index]

    def find(self, value: Any) -> int | None:
        """Return the first index whose value equals value, or None."""
        for index, candidate in enumerate(self._values):
            if candidate == value:
                return index
        return None

    def delete(self, index: int, default: Any = None) -> Any:
        """Delete and return the value at index.

        This is O(n): the element is removed from both lists, shifting every
        later element down by one, then every parent index greater than the
        removed index is decremented. NO_PARENT is never decremented, so
        roots stay roots. The deleted node should have no
        children, otherwise they end up pointing at whichever element now
        occupies the renumbered slot.

        Args:
            index: Index of the element to delete.
            default: Value returned if index is out of range.

        Returns:
            The removed value, or default with the tree left unchanged.
        """
        if not 0 <= index < len(self._parents):
            return default

        value = self._values.pop(index)
        self._parents.pop(index)

        parents = self._parents
        for i, parent in enumerate(parents):
            if index < parent and parent != NO_PARENT:
                parents[i] = parent - 1

        return value

    def clear(self) -> None:
        """Remove all elements from the tree."""
        self._values.clear()
        self._parents.clear()

    def copy(self) -> ApterTree:
        """Return a shallow copy of the tree (values are shared, not copied)."""
        clone = type(self)()
        load_from_tree(clone, self)
        return clone

    # ==================== Iteration ====================

    def keys(self) -> range:
        """Return the range of all indices in the tree."""
        return range(len(self._parents))

    def iter_items(self) -> Iterator[tuple[int, Any]]:
        """Yield (index, value) pairs in insertion order."""
        for index in range(len(self._values)):
            yield index, self._values[index]

    def iter_values(self) -> Iterator[Any]:
        """Yield values in insertion order."""
        yield from self._values

    def iter_nodes(self) -> Iterator[ApterNode]:
        """Yield ApterNode views in insertion order."""
        for index in range(len(self._values)):
            yield ApterNode(index, self._values[index], self._parents[index], self)

    def items(self) -> list[tuple[int, Any]]:
        """Return list of (index, value) pairs in insertion order."""
        return list(self.iter_items())

    def values(self) -> list[Any]:
        """Return list of values in insertion order."""
        return list(self._values)

    def nodes(self) -> list[ApterNode]:
        """Return list of ApterNode views in insertion order."""
        return list(self.iter_nodes())

    def node(self, index: int) -> ApterNode:
        """Return an ApterNode view of the element at index.

        Raises:
            IndexError: If index is outside 0..len(tree)-1.
        """
        self._check_index(index)
        return ApterNode(index, self._values[index], self._parents[index], self)

    # ==================== Navigation ====================

    def children(self, parent: int) -> Iterator[int]:
        """Yield every index whose parent is parent, in ascending order.

        Any integer is accepted: NO_PARENT yields the roots, an index with
        no children (or no element) yields nothing.
        """
        for index in range(len(self._parents)):
            if self._parents[index] == parent:
                yield index

    def roots(self) -> Iterator[int]:
        """Yield the indices of all root elements."""
        return self.children(NO_PARENT)

    def is_leaf(self, index: int) -> bool:
        """True if no element has index as its parent."""
        return next(self.children(index), None) is None

    def leaves(self) -> Iterator[int]:
        """Yield every index that has no children, in ascending order."""
        parents = set(self._parents)
        for index in range(len(self._parents)):
            if index not in parents:
                yield index

    def ancestors(self, index: int) -> Iterator[int]:
        """Yield the parent chain of index, nearest first.

        The walk starts at parent_of(index) and stops, without yielding it,
        at the first index that is not an element of the tree (NO_PARENT for
        a well-formed tree). A cycle in the parent chain makes the returned
        iterator infinite.

        Raises:
            IndexError: If index is outside 0..len(tree)-1, at call time.
        """
        return self._ancestors_gen(self.parent_of(index))

    def _ancestors_gen(self, current: int) -> Iterator[int]:
        parents = self._parents
        while 0 <= current < len(parents):
            yield current
            current = parents[current]

    def depth(self, index: int) -> int:
        """Return the number of ancestors of index (roots have depth 0)."""
        return sum(1 for _ in self.ancestors(index))

    def walk(
        self,
        callback: Callable[[int, int], Any] | None = None,
        start: int = NO_PARENT,
    ) -> Iterator[tuple[int, int]] | None:
        """Walk the descendants of start depth-first, in pre-order.

        Siblings are visited in ascending index order. Depth is 0 for the
        children of start.

        Args:
            callback: Optional function called as callback(index, depth).
                      If provided, walk returns None.
            start: Index whose descendants are walked; NO_PARENT walks the
                whole tree.

        Yields:
            Tuples of (index, depth) if no callback provided.

        Example:
            >>> for index, depth in tree.walk():
            ...     print('  ' * depth, tree[index])
        """
        if callback is not None:
            for index, depth in self._walk_gen(start):
                callback(index, depth)
            return None
        return self._walk_gen(start)

    def _walk_gen(self, start: int) -> Iterator[tuple[int, int]]:
        # Explicit stack, so deep trees do not hit the recursion limit.
        stack = [(index, 0) for index in reversed(list(self.children(start)))]
        while stack:
            index, depth = stack.pop()
            yield index, depth
            stack.extend(
                (child, depth + 1) for child in reversed(list(self.children(index)))
            )

    # ==================== Conversion ====================

    def as_nested(self, start: int = NO_PARENT) -> list[tuple[Any, list]]:
        """Convert the descendants of start to nested (value, children) tuples.

        Example:
            >>> ApterTree({'root': {'a': None, 'b': None}}).as_nested()
            [('root', [('a', []), ('b', [])])]
        """
        result: list[tuple[Any, list]] = []
        branches = {start: result}
        # Pre-order guarantees a parent's list exists before its children.
        for index, _ in self._walk_gen(start):
            children: list[tuple[Any, list]] = []
            branches[self._parents[index]].append((self._values[index], children))
            branches[index] = children
        return result

    # ==================== Validation ====================

    @property
    def is_valid(self) -> bool:
        """True if every parent index refers to an earlier element or is NO_PARENT.

        A tree built only with backward parent references cannot contain a
        cycle, so a valid tree is safe for ancestors() and walk().
        """
        return not self.validation_errors()

    def validation_errors(self) -> dict[int, list[str]]:
        """Return structural problems of the tree, keyed by element index.

        Detected problems:
            - dangling parent: a parent index that is not an element
            - forward parent: a parent inserted after its child
            - cycle: the element's parent chain returns to an element already seen

        Example:
            >>> tree = ApterTree([('a', NO_PARENT), ('b', 7)])
            >>> tree.validation_errors()
            {1: ['dangling parent index 7']}
        """
        errors: dict[int, list[str]] = {}
        size = len(self._parents)
        for index, parent in enumerate(self._parents):
            if parent == NO_PARENT:
                continue
            if not 0 <= parent < size:
                errors.setdefault(index, []).append(f"dangling parent index {parent}")
            elif parent >= index:
                errors.setdefault(index, []).append(
                    f"parent index {parent} is not before child {index}"
                )

        # Only forward references can close a cycle.
        for index in errors.copy():
            seen = {index}
            current = self._parents[index]
            while 0 <= current < size:
                if current in seen:
                    errors[index].append(f"parent chain cycles through {current}")
                    break
                seen.add(current)
                current = self._parents[current]

        if errors:
            logger.debug("tree has %d invalid element(s): %s", len(errors), errors)
        return errors
