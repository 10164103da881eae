# -*- coding: utf-8 -*-
"""

    treewidget.nodes
    ----------------

    The tree model: nodes, forests and their plain-data form.

"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any

from treewidget.exceptions import DuplicateNodeId, InvalidNodeData
from treewidget.types import NodeData


class TreeNode:
    """ One entry in the hierarchy.

    A forest is an ordered list of root nodes. Forests are owned by the
    caller and treated as immutable for the duration of one render pass.

    :param id: identifier, unique across the entire forest
    :param label: display label, rendered with HTML escaping
    :param children: ordered list of child nodes, or ``None``
    :param disabled: disabled nodes are rendered but never focused or
        selected
    :param icon: optional render payload shown before the label

    """

    __slots__ = ('id', 'label', 'children', 'disabled', 'icon')

    def __init__(self, id: Hashable, label: Any,
                 children: list[TreeNode] | None = None,
                 disabled: bool = False, icon: Any = None):
        self.id = id
        self.label = label
        self.children = children
        self.disabled = bool(disabled)
        self.icon = icon

    @property
    def has_children(self) -> bool:
        ":returns: ``True`` if the node has a non-empty list of children"
        return bool(self.children)

    def is_leaf(self) -> bool:
        return not self.has_children

    def __repr__(self):
        return '<TreeNode: %r>' % (self.id,)

    def __str__(self):
        return str(self.label)


def load_forest(data: Iterable[NodeData]) -> list[TreeNode]:
    """
    Builds a forest from a list/dictionary structure.

    :param data:

        A list of dictionaries with the keys ``id`` and ``label`` (required)
        and ``disabled``, ``icon`` and ``children`` (optional). ``children``
        is a list of dictionaries with the same structure.

    :returns: A list of root :class:`TreeNode` objects.

    :raise InvalidNodeData: when a dictionary lacks ``id`` or ``label``

    Example::

        forest = load_forest([
            {'id': 'a', 'label': 'A', 'children': [
                {'id': 'a1', 'label': 'A1'},
                {'id': 'a2', 'label': 'A2', 'disabled': True},
            ]},
            {'id': 'b', 'label': 'B'},
        ])

    """
    roots: list[TreeNode] = []
    # tree, iterative preorder
    stack = [(roots, node_struct) for node_struct in list(data)[::-1]]
    while stack:
        siblings, node_struct = stack.pop()
        try:
            node = TreeNode(
                node_struct['id'],
                node_struct['label'],
                disabled=node_struct.get('disabled', False),
                icon=node_struct.get('icon'))
        except KeyError as exc:
            raise InvalidNodeData(
                'Node data is missing required key %s: %r' % (exc, node_struct)
            ) from None
        siblings.append(node)
        if 'children' in node_struct:
            node.children = []
            stack.extend([(node.children, child)
                          for child in node_struct['children'][::-1]])
    return roots


def dump_forest(forest: Iterable[TreeNode]) -> list[NodeData]:
    """
    Dumps a forest to a python data structure, described in
    :func:`load_forest`.

    ``disabled`` and ``icon`` are only included when set.
    """
    ret: list[NodeData] = []
    for node in forest:
        newobj: NodeData = {'id': node.id, 'label': node.label}
        if node.disabled:
            newobj['disabled'] = True
        if node.icon is not None:
            newobj['icon'] = node.icon
        if node.children is not None:
            newobj['children'] = dump_forest(node.children)
        ret.append(newobj)
    return ret


def walk_forest(forest: Iterable[TreeNode]
                ) -> Iterator[tuple[TreeNode, int, TreeNode | None]]:
    """
    Yields ``(node, depth, parent)`` for every node of the forest in document
    order (DFS), whether or not its ancestors are expanded. ``depth`` is
    1-based; ``parent`` is ``None`` for roots.
    """
    stack: list[tuple[TreeNode, int, TreeNode | None]] = [
        (node, 1, None) for node in list(forest)[::-1]]
    while stack:
        node, depth, parent = stack.pop()
        yield node, depth, parent
        if node.children:
            stack.extend([(child, depth + 1, node)
                          for child in node.children[::-1]])


def validate_forest(forest: Iterable[TreeNode]) -> None:
    """
    Checks that every id is unique across the whole forest.

    :raise DuplicateNodeId: naming the first id seen twice
    """
    seen = set()
    for node, _depth, _parent in walk_forest(forest):
        if node.id in seen:
            raise DuplicateNodeId(node.id)
        seen.add(node.id)


def find_node(forest: Iterable[TreeNode], node_id: Hashable) -> TreeNode | None:
    ":returns: the node with the given id, or ``None``"
    for node, _depth, _parent in walk_forest(forest):
        if node.id == node_id:
            return node
    return None


def ancestor_ids(forest: Iterable[TreeNode], node_id: Hashable) -> list:
    """
    :returns: the ids of the ancestors of ``node_id``, root first. Empty if
        the node is a root or is not in the forest.
    """
    parents = {}
    for node, _depth, parent in walk_forest(forest):
        parents[node.id] = parent.id if parent is not None else None
        if node.id == node_id:
            break
    else:
        return []
    ret = []
    current = parents[node_id]
    while current is not None:
        ret.append(current)
        current = parents[current]
    return ret[::-1]
