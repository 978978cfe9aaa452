# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for ApterTree sources, copying and nested conversion."""

import pytest

from apter_tree import NO_PARENT, ApterTree


class TestApterTreeSource:
    """Tests for ApterTree source parameter."""

    def test_source_from_pairs(self):
        """Test creating a tree from (value, parent) pairs."""
        tree = ApterTree([('root', NO_PARENT), ('a', 0), ('a1', 1)])
        assert tree.values() == ['root', 'a', 'a1']
        assert list(tree.ancestors(2)) == [1, 0]

    def test_source_bare_values_are_roots(self):
        """Test list items that are not pairs become roots."""
        tree = ApterTree(['x', 'y', ('z', 0)])
        assert list(tree.roots()) == [0, 1]
        assert tree.parent_of(2) == 0

    def test_source_from_dict(self):
        """Test nested dict is inserted depth-first."""
        tree = ApterTree({'root': {'a': {'a1': None}, 'b': None}})
        assert tree.values() == ['root', 'a', 'a1', 'b']
        assert list(tree.children(0)) == [1, 3]
        assert list(tree.leaves()) == [2, 3]

    def test_source_from_dict_multiple_roots(self):
        """Test top-level keys become roots."""
        tree = ApterTree({'r1': {'c': 1}, 'r2': None})
        assert list(tree.roots()) == [0, 2]
        assert tree.is_leaf(1) is True

    def test_source_from_tree(self):
        """Test copying from another tree."""
        original = ApterTree([('root', NO_PARENT), ('a', 0)])
        copy = ApterTree(original)
        assert copy.items() == original.items()
        original.insert('b', 0)
        assert len(copy) == 2

    def test_source_invalid_type_raises(self):
        """Test an unsupported source raises TypeError."""
        with pytest.raises(TypeError, match="source must be"):
            ApterTree('root')


class TestApterTreeCopy:
    """Tests for copy."""

    def test_copy_is_independent(self):
        """Test mutating a copy leaves the original alone."""
        tree = ApterTree([('root', NO_PARENT), ('a', 0), ('b', 0)])
        clone = tree.copy()
        clone.delete(1)
        clone[0] = 'ROOT'
        assert tree.values() == ['root', 'a', 'b']
        assert clone.values() == ['ROOT', 'b']
        assert clone.parent_of(1) == 0

    def test_copy_keeps_dangling_parents(self):
        """Test copy reproduces parent indices as stored."""
        tree = ApterTree([('a', 42)])
        assert tree.copy().parent_of(0) == 42


class TestApterTreeNested:
    """Tests for as_nested."""

    def test_as_nested(self):
        """Test nested conversion mirrors the structure."""
        tree = ApterTree({'root': {'a': {'a1': None}, 'b': None}})
        assert tree.as_nested() == [
            ('root', [('a', [('a1', [])]), ('b', [])]),
        ]

    def test_as_nested_from_index(self):
        """Test nested conversion below a given element."""
        tree = ApterTree({'root': {'a': {'a1': None}, 'b': None}})
        assert tree.as_nested(1) == [('a1', [])]

    def test_as_nested_empty(self):
        """Test nested conversion of an empty tree."""
        assert ApterTree().as_nested() == []
