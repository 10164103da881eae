"""Per-widget registry of focusable item handles."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Protocol

logger = logging.getLogger(__name__)


class Focusable(Protocol):
    def focus(self) -> None: ...


class FocusRegistry:
    """
    Maps node ids to focusable handles for one widget instance.

    Rendered items register on mount and unregister on unmount. Collapsing a
    subtree unmounts its descendants, so both :meth:`unregister` and
    :meth:`focus` tolerate ids that are not registered.
    """

    def __init__(self):
        self._handles: dict[Hashable, Focusable] = {}

    def register(self, node_id: Hashable, handle: Focusable) -> None:
        self._handles[node_id] = handle

    def unregister(self, node_id: Hashable) -> None:
        self._handles.pop(node_id, None)

    def get(self, node_id: Hashable) -> Focusable | None:
        return self._handles.get(node_id)

    def focus(self, node_id: Hashable) -> bool:
        """
        Calls ``focus()`` once on the handle registered for ``node_id``.

        :returns: ``False`` if no handle is registered for the id
        """
        handle = self._handles.get(node_id)
        if handle is None:
            logger.debug('No registered handle to focus for %r', node_id)
            return False
        handle.focus()
        return True

    def ids(self) -> list:
        return list(self._handles)

    def clear(self) -> None:
        self._handles.clear()

    def __contains__(self, node_id):
        return node_id in self._handles

    def __len__(self):
        return len(self._handles)


class ItemHandle:
    """
    Default handle mounted by :class:`~treewidget.widget.TreeView` for each
    rendered item. Focusing it makes the item the widget's active element,
    which the renderer marks with ``autofocus``.
    """

    __slots__ = ('tree', 'node_id')

    def __init__(self, tree, node_id: Hashable):
        self.tree = tree
        self.node_id = node_id

    def focus(self) -> None:
        self.tree.active_id = self.node_id

    @property
    def is_active(self) -> bool:
        return self.tree.active_id == self.node_id

    def __repr__(self):
        return '<ItemHandle: %r>' % (self.node_id,)
