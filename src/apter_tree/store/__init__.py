# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ApterTree package - Parent-pointer tree container.

The package is organized into:
- core: Main ApterTree class with insertion, deletion, lookup and traversal
- checked: CheckedApterTree, which validates every insert and delete
- loading: Functions for loading data from list, dict, or ApterTree sources

Example:
    >>> from apter_tree import ApterTree
    >>> tree = ApterTree()
    >>> tree.insert('root')
    0
    >>> tree.insert('child', 0)
    1
    >>> list(tree.ancestors(1))
    [0]
"""

from .checked import CheckedApterTree
from .core import NO_PARENT, ApterTree

__all__ = ["ApterTree", "CheckedApterTree", "NO_PARENT"]
