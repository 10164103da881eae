import pytest

from treewidget.controllers import (
    ExpansionController,
    SelectionController,
    collapsed_without,
    expanded_with,
    toggled,
)
from treewidget.flatten import flatten
from treewidget.navigation import next_focus, normalize_key
from treewidget.nodes import TreeNode, load_forest


class TestNextFocus:
    def test_arrow_down_skips_disabled(self, small):
        items = flatten(small, {'A'})
        assert next_focus('A1', 'ArrowDown', items) == 'B'

    def test_arrow_up_skips_disabled(self, small):
        items = flatten(small, {'A'})
        assert next_focus('B', 'ArrowUp', items) == 'A1'

    def test_no_wrap(self, small):
        items = flatten(small, {'A'})
        assert next_focus('B', 'ArrowDown', items) is None
        assert next_focus('A', 'ArrowUp', items) is None

    def test_arrow_down_visits_every_focusable_item_once(self, forest):
        items = flatten(forest, ['item1', 'item2', 'item2-1'])
        visited = ['item1']
        while True:
            target = next_focus(visited[-1], 'ArrowDown', items)
            if target is None:
                break
            visited.append(target)
        assert visited == ['item1', 'item1-1', 'item2', 'item2-1',
                           'item2-1-1', 'item3']

    def test_home_and_end_skip_disabled(self):
        forest = load_forest([
            {'id': 'first', 'label': 'First', 'disabled': True},
            {'id': 'second', 'label': 'Second'},
            {'id': 'third', 'label': 'Third'},
            {'id': 'last', 'label': 'Last', 'disabled': True},
        ])
        items = flatten(forest, [])
        assert next_focus('third', 'Home', items) == 'second'
        assert next_focus('second', 'End', items) == 'third'

    def test_home_on_first_item_stays(self, forest):
        items = flatten(forest, [])
        assert next_focus('item1', 'Home', items) is None
        assert next_focus('item3', 'End', items) is None

    def test_unknown_focused_id(self, forest):
        items = flatten(forest, [])
        assert next_focus('item1-1', 'ArrowDown', items) is None
        assert next_focus(None, 'ArrowDown', items) is None

    def test_empty_items(self):
        assert next_focus('a', 'Home', []) is None

    def test_action_keys_do_not_move_focus(self, forest):
        items = flatten(forest, [])
        for key in ('ArrowRight', 'ArrowLeft', 'Enter', ' ', 'a'):
            assert next_focus('item1', key, items) is None

    def test_all_disabled(self):
        forest = [TreeNode('a', 'A', disabled=True),
                  TreeNode('b', 'B', disabled=True)]
        items = flatten(forest, [])
        assert next_focus('a', 'ArrowDown', items) is None
        assert next_focus('a', 'End', items) is None

    @pytest.mark.parametrize(('key', 'expected'), [
        ('Space', ' '),
        ('Spacebar', ' '),
        (' ', ' '),
        ('Enter', 'Enter'),
    ])
    def test_normalize_key(self, key, expected):
        assert normalize_key(key) == expected


class TestExpansion:
    def test_toggled(self):
        assert toggled(['a'], 'b') == ['a', 'b']
        assert toggled(['a', 'b', 'c'], 'b') == ['a', 'c']
        assert toggled([], 'a') == ['a']

    def test_expanded_with_is_idempotent(self):
        assert expanded_with(['a', 'b'], 'a') == ['a', 'b']
        assert expanded_with(('a',), 'b') == ['a', 'b']

    def test_collapsed_without(self):
        assert collapsed_without(['a', 'b'], 'a') == ['b']
        assert collapsed_without(['a'], 'z') == ['a']

    def test_controller_calls_back_once(self):
        calls = []
        ExpansionController(calls.append).toggle(['a'], 'b')
        assert calls == [['a', 'b']]

    def test_controller_without_callback(self):
        ExpansionController(None).expand([], 'a')


class TestSelection:
    def test_select(self):
        calls = []
        assert SelectionController(calls.append).select(TreeNode('a', 'A'))
        assert calls == ['a']

    def test_select_disabled(self):
        calls = []
        node = TreeNode('a', 'A', disabled=True)
        assert not SelectionController(calls.append).select(node)
        assert calls == []
