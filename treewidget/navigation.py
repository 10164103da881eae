"""Keyboard navigation over the flattened list of visible items."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from treewidget.flatten import VisibleItem, index_of

ARROW_UP = 'ArrowUp'
ARROW_DOWN = 'ArrowDown'
ARROW_LEFT = 'ArrowLeft'
ARROW_RIGHT = 'ArrowRight'
HOME = 'Home'
END = 'End'
ENTER = 'Enter'
SPACE = ' '

NAVIGATION_KEYS = (ARROW_UP, ARROW_DOWN, HOME, END)
ACTION_KEYS = (ARROW_LEFT, ARROW_RIGHT, ENTER, SPACE)

KEY_ALIASES = {
    'Space': SPACE,
    'Spacebar': SPACE,
}


def normalize_key(key: str) -> str:
    return KEY_ALIASES.get(key, key)


def _scan(items, indexes):
    for index in indexes:
        if items[index].focusable:
            return index
    return None


def next_focus(focused_id: Hashable | None, key: str,
               items: Sequence[VisibleItem]) -> Hashable | None:
    """
    Decides where focus moves for a navigation key.

    ``items`` must be the current result of
    :func:`~treewidget.flatten.flatten`. Disabled items are skipped as
    candidates but still occupy their index. There is no wraparound.

    :returns: the id that should receive focus, or ``None`` when focus
        stays where it is (unknown focused id, no candidate, not a
        navigation key)
    """
    key = normalize_key(key)
    if focused_id is None or key not in NAVIGATION_KEYS:
        return None
    current = index_of(items, focused_id)
    if current == -1:
        return None

    if key == ARROW_DOWN:
        target = _scan(items, range(current + 1, len(items)))
    elif key == ARROW_UP:
        target = _scan(items, range(current - 1, -1, -1))
    elif key == HOME:
        target = _scan(items, range(len(items)))
    else:
        target = _scan(items, range(len(items) - 1, -1, -1))

    if target is None or target == current:
        return None
    return items[target].id
