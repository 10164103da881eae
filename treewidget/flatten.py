"""Flattening of the partially expanded forest into the visible item list."""

from __future__ import annotations

from collections.abc import Collection, Hashable, Sequence

from treewidget.nodes import TreeNode


class VisibleItem:
    """
    A node currently eligible to be rendered because all of its ancestors
    are expanded.

    Items are derived and ephemeral: a fresh list is built by
    :func:`flatten` on every render and every keyboard event.
    """

    __slots__ = ('node', 'depth', 'sibling_index', 'sibling_count',
                 'parent_id', 'expanded')

    def __init__(self, node: TreeNode, depth: int, sibling_index: int,
                 sibling_count: int, parent_id: Hashable | None = None,
                 expanded: bool = False):
        self.node = node
        self.depth = depth
        self.sibling_index = sibling_index
        self.sibling_count = sibling_count
        self.parent_id = parent_id
        self.expanded = expanded

    @property
    def id(self):
        return self.node.id

    @property
    def disabled(self) -> bool:
        return self.node.disabled

    @property
    def has_children(self) -> bool:
        return self.node.has_children

    @property
    def focusable(self) -> bool:
        return not self.node.disabled

    def __repr__(self):
        return '<VisibleItem: %r depth=%d %d/%d>' % (
            self.id, self.depth, self.sibling_index + 1, self.sibling_count)


def _flatten_recur(ret: list[VisibleItem], nodes: Sequence[TreeNode],
                   expanded_ids: Collection, depth: int,
                   parent_id: Hashable | None) -> None:
    count = len(nodes)
    for index, node in enumerate(nodes):
        expanded = node.id in expanded_ids
        ret.append(VisibleItem(node, depth, index, count, parent_id,
                               expanded))
        if node.children and expanded:
            _flatten_recur(ret, node.children, expanded_ids, depth + 1,
                           node.id)


def flatten(forest: Sequence[TreeNode],
            expanded_ids: Collection) -> list[VisibleItem]:
    """
    :returns: the visible items of ``forest`` in document order.

    Roots are always visible; any other node is visible iff every one of its
    ancestors is in ``expanded_ids``. Disabled nodes are included: they
    occupy a position and count toward their siblings' set size.
    """
    if not isinstance(expanded_ids, (set, frozenset)):
        expanded_ids = set(expanded_ids)
    ret: list[VisibleItem] = []
    _flatten_recur(ret, forest, expanded_ids, 1, None)
    return ret


def index_of(items: Sequence[VisibleItem], node_id: Hashable) -> int:
    ":returns: the position of ``node_id`` in ``items``, or -1"
    for index, item in enumerate(items):
        if item.id == node_id:
            return index
    return -1
