# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading functions for populating an ApterTree from various sources.

Every loader appends through ApterTree.insert(), so a CheckedApterTree
validates loaded data the same way it validates direct inserts.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import ApterTree


def load_from_list(tree: ApterTree, items: list) -> None:
    """Load (value, parent) pairs into tree.

    Items that are not 2-tuples are inserted as roots.

    Example:
        >>> load_from_list(tree, [('root', NO_PARENT), ('a', 0), 'other_root'])
    """
    for item in items:
        if isinstance(item, tuple) and len(item) == 2:
            value, parent = item
            tree.insert(value, parent)
        else:
            tree.insert(item)


def load_from_dict(tree: ApterTree, data: dict, parent: int | None = None) -> None:
    """Load a nested mapping into tree, depth-first.

    Keys become values. A dict value holds the key's children; any other
    value (usually None) means the key has no children.

    Example:
        >>> load_from_dict(tree, {'root': {'a': {'a1': None}, 'b': None}})
        >>> tree.values()
        ['root', 'a', 'a1', 'b']
    """
    for key, children in data.items():
        index = tree.insert(key) if parent is None else tree.insert(key, parent)
        if isinstance(children, dict):
            load_from_dict(tree, children, index)


def load_from_tree(tree: ApterTree, source: ApterTree) -> None:
    """Copy every element of source into tree, keeping parent indices.

    Indices are offset by the current length of tree, so loading into a
    non-empty tree appends source as extra roots and subtrees.
    """
    offset = len(tree)
    for index, value in source.iter_items():
        parent = source.parent_of(index)
        if offset and 0 <= parent < len(source):
            parent += offset
        tree.insert(value, parent)
