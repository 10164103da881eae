import pytest

from tests.data import BASE_DATA
from treewidget.exceptions import DuplicateNodeId, InvalidNodeData
from treewidget.nodes import (
    TreeNode,
    ancestor_ids,
    dump_forest,
    find_node,
    load_forest,
    validate_forest,
    walk_forest,
)


class TestLoadForest:
    def test_load_forest(self, forest):
        assert [node.id for node in forest] == ['item1', 'item2', 'item3']
        item1 = forest[0]
        assert item1.label == 'Item 1'
        assert [child.id for child in item1.children] == ['item1-1', 'item1-2']
        assert item1.children[1].disabled is True
        assert item1.children[0].disabled is False
        assert forest[2].children is None

    def test_load_forest_empty(self):
        assert load_forest([]) == []

    def test_load_forest_missing_label(self):
        with pytest.raises(InvalidNodeData):
            load_forest([{'id': 'a', 'children': []}])

    def test_load_forest_missing_nested_id(self):
        with pytest.raises(InvalidNodeData):
            load_forest([{'id': 'a', 'label': 'A', 'children': [{'label': 'B'}]}])

    def test_dump_forest(self, forest):
        assert dump_forest(forest) == BASE_DATA

    def test_dump_forest_keeps_icon(self):
        forest = [TreeNode('a', 'A', icon='*')]
        assert dump_forest(forest) == [{'id': 'a', 'label': 'A', 'icon': '*'}]


class TestTreeNode:
    def test_has_children(self):
        assert not TreeNode('a', 'A').has_children
        assert not TreeNode('a', 'A', children=[]).has_children
        assert TreeNode('a', 'A', children=[TreeNode('b', 'B')]).has_children

    def test_is_leaf(self):
        assert TreeNode('a', 'A', children=[]).is_leaf()

    def test_str(self):
        assert str(TreeNode(1, 'One')) == 'One'


class TestWalkForest:
    def test_walk_forest(self, forest):
        got = [(node.id, depth, parent.id if parent else None)
               for node, depth, parent in walk_forest(forest)]
        assert got == [
            ('item1', 1, None),
            ('item1-1', 2, 'item1'),
            ('item1-2', 2, 'item1'),
            ('item2', 1, None),
            ('item2-1', 2, 'item2'),
            ('item2-1-1', 3, 'item2-1'),
            ('item3', 1, None),
        ]

    def test_find_node(self, forest):
        assert find_node(forest, 'item2-1-1').label == 'Item 2.1.1'
        assert find_node(forest, 'missing') is None

    def test_ancestor_ids(self, forest):
        assert ancestor_ids(forest, 'item2-1-1') == ['item2', 'item2-1']
        assert ancestor_ids(forest, 'item1-2') == ['item1']
        assert ancestor_ids(forest, 'item3') == []
        assert ancestor_ids(forest, 'missing') == []


class TestValidateForest:
    def test_valid(self, forest):
        validate_forest(forest)

    def test_duplicate_siblings(self):
        forest = [TreeNode('a', 'A'), TreeNode('a', 'Another A')]
        with pytest.raises(DuplicateNodeId):
            validate_forest(forest)

    def test_duplicate_in_other_subtree(self):
        forest = load_forest([
            {'id': 'a', 'label': 'A', 'children': [{'id': 'x', 'label': 'X'}]},
            {'id': 'b', 'label': 'B', 'children': [{'id': 'x', 'label': 'X'}]},
        ])
        with pytest.raises(DuplicateNodeId) as excinfo:
            validate_forest(forest)
        assert excinfo.value.node_id == 'x'
