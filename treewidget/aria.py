"""ARIA attributes for visible tree items (roving tabindex pattern)."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from treewidget.flatten import VisibleItem


def _bool(value):
    return 'true' if value else 'false'


def aria_attributes(item: VisibleItem, selected_id: Hashable | None,
                    focused_id: Hashable | None) -> dict[str, str]:
    """
    Computes the attributes of one rendered ``treeitem``.

    ``aria-expanded`` is only present for nodes with children. ``tabindex``
    is ``0`` for exactly the focused node and ``-1`` for every other one, so
    Tab moves focus in and out of the tree while arrow keys move within it.
    """
    attrs = {
        'role': 'treeitem',
        'aria-level': str(item.depth),
        'aria-setsize': str(item.sibling_count),
        'aria-posinset': str(item.sibling_index + 1),
    }
    if item.has_children:
        attrs['aria-expanded'] = _bool(item.expanded)
    attrs['aria-selected'] = _bool(
        selected_id is not None and item.id == selected_id)
    attrs['aria-disabled'] = _bool(item.disabled)
    attrs['tabindex'] = '0' if (
        focused_id is not None and item.id == focused_id) else '-1'
    return attrs


def tree_context(items: Iterable[VisibleItem]) -> list[dict]:
    """
    Generate a list containing additional context for each visible item, for
    use by the frontend. It is assumed that the template renders the items in
    the same order as ``items``.
    """
    return [
        {
            'node-id': str(item.id),
            'parent-id': '' if item.parent_id is None else str(item.parent_id),
            'level': item.depth,
            'has-children': 1 if item.has_children else 0,
        }
        for item in items
    ]
