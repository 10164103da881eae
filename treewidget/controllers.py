"""
Expansion and selection controllers.

Expansion and selection are controlled state: the caller owns them and the
widget only ever *requests* a change through the caller's callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable

logger = logging.getLogger(__name__)


def toggled(expanded_ids: Iterable, node_id: Hashable) -> list:
    """
    :returns: ``expanded_ids`` without ``node_id`` if present, else with
        ``node_id`` appended. Order is preserved.
    """
    expanded_ids = list(expanded_ids)
    if node_id in expanded_ids:
        return [eid for eid in expanded_ids if eid != node_id]
    return expanded_ids + [node_id]


def expanded_with(expanded_ids: Iterable, node_id: Hashable) -> list:
    expanded_ids = list(expanded_ids)
    if node_id in expanded_ids:
        return expanded_ids
    return expanded_ids + [node_id]


def collapsed_without(expanded_ids: Iterable, node_id: Hashable) -> list:
    return [eid for eid in expanded_ids if eid != node_id]


class ExpansionController:
    """Translates expand/collapse requests into ``on_expanded_change`` calls."""

    def __init__(self, on_expanded_change: Callable[[list], None] | None):
        self.on_expanded_change = on_expanded_change

    def _request(self, next_ids):
        if self.on_expanded_change is None:
            logger.debug('Expansion change %r dropped: no callback', next_ids)
            return
        logger.debug('Requesting expanded ids %r', next_ids)
        self.on_expanded_change(next_ids)

    def toggle(self, expanded_ids: Iterable, node_id: Hashable) -> None:
        self._request(toggled(expanded_ids, node_id))

    def expand(self, expanded_ids: Iterable, node_id: Hashable) -> None:
        self._request(expanded_with(expanded_ids, node_id))

    def collapse(self, expanded_ids: Iterable, node_id: Hashable) -> None:
        self._request(collapsed_without(expanded_ids, node_id))


class SelectionController:
    """Translates selection requests into ``on_selected_change`` calls."""

    def __init__(self, on_selected_change: Callable[[Hashable], None] | None):
        self.on_selected_change = on_selected_change

    def select(self, node) -> bool:
        """
        Requests selection of ``node`` (a node or visible item).

        :returns: ``False`` if the node is disabled and nothing was requested
        """
        if node.disabled:
            logger.debug('Not selecting disabled node %r', node.id)
            return False
        if self.on_selected_change is not None:
            logger.debug('Requesting selection of %r', node.id)
            self.on_selected_change(node.id)
        return True


def activate(item, expanded_ids: Iterable, selection: SelectionController,
             expansion: ExpansionController) -> bool:
    """
    Activates a node (click, Enter or Space).

    A node with children is both selected and has its expansion toggled, in
    that order, as part of the same action. Disabled nodes are ignored.

    :returns: ``True`` if the node was activated
    """
    if not selection.select(item):
        return False
    if item.has_children:
        expansion.toggle(expanded_ids, item.id)
    return True
