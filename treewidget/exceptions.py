"""Treewidget exceptions"""


class TreeWidgetException(Exception):
    """Base class for every error raised by treewidget."""


class DuplicateNodeId(TreeWidgetException, ValueError):
    """
    Raised when the same node id appears more than once in a forest.

    Expansion and selection are tracked as flat id sets, so ids must be
    unique across the whole forest, not only among siblings.
    """

    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__('Duplicate node id in forest: %r' % (node_id,))


class InvalidNodeData(TreeWidgetException, ValueError):
    """Raised when a plain-data node lacks a required key."""
