"""The tree navigation/selection widget."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable, Sequence

from django.forms.utils import flatatt
from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe

from treewidget import aria
from treewidget.conf import get_setting
from treewidget.controllers import (
    ExpansionController,
    SelectionController,
    activate,
)
from treewidget.flatten import VisibleItem, flatten
from treewidget.navigation import (
    ACTION_KEYS,
    ARROW_LEFT,
    ARROW_RIGHT,
    NAVIGATION_KEYS,
    next_focus,
    normalize_key,
)
from treewidget.nodes import TreeNode, find_node, validate_forest
from treewidget.registry import FocusRegistry, ItemHandle

logger = logging.getLogger(__name__)

_UNSET = object()


class TreeView:
    """
    Controlled tree widget.

    Expansion and selection belong to the caller: the widget reports
    requested changes through ``on_expanded_change(next_ids)`` and
    ``on_selected_change(node_id)`` and only reflects them once the caller
    passes them back through :meth:`update`. Focus is owned by the widget:
    exactly one item, the focused one, has ``tabindex="0"``. It starts on
    ``focused`` when given, else on the first root.

    Creating the widget mounts it. Every rendered item gets a handle in
    ``registry`` (created by ``handle_factory(node_id)``); items are
    registered and unregistered as expansion changes what is visible.

    Activating a node with children (click, Enter or Space) both selects it
    and toggles its expansion. Clicking the expand button only toggles.

    Example::

        tree = TreeView(forest, on_expanded_change=..., on_selected_change=...)
        tree.key_down('ArrowDown')
        html = tree.render()

    """

    def __init__(self, forest: Sequence[TreeNode], expanded: Iterable = (),
                 selected: Hashable | None = None,
                 focused: Hashable | None = None,
                 on_expanded_change: Callable[[list], None] | None = None,
                 on_selected_change: Callable[[Hashable], None] | None = None,
                 registry: FocusRegistry | None = None,
                 handle_factory: Callable | None = None,
                 aria_label: str | None = None,
                 class_name: str | None = None,
                 validate: bool | None = None):
        if validate is None:
            validate = get_setting('VALIDATE_IDS')
        self.validate = validate
        self.aria_label = (aria_label if aria_label is not None
                           else get_setting('ARIA_LABEL'))
        self.css_class = get_setting('CSS_CLASS')
        self.class_name = class_name
        self.registry = registry if registry is not None else FocusRegistry()
        self.handle_factory = handle_factory or (
            lambda node_id: ItemHandle(self, node_id))
        self.expansion = ExpansionController(on_expanded_change)
        self.selection = SelectionController(on_selected_change)
        self.active_id = None
        self._mounted: set = set()

        self._set_props(forest, expanded, selected)
        if focused is not None and find_node(self.forest, focused) is not None:
            self.focused_id = focused
        else:
            self.focused_id = self.forest[0].id if self.forest else None
        self._reconcile()

    # props

    def _set_props(self, forest, expanded, selected):
        forest = list(forest)
        if self.validate:
            validate_forest(forest)
        self.forest = forest
        self.expanded = tuple(expanded)
        self.selected = selected

    def update(self, forest=_UNSET, expanded=_UNSET, selected=_UNSET) -> None:
        """Re-renders the widget with new caller-owned props."""
        self._set_props(
            self.forest if forest is _UNSET else forest,
            self.expanded if expanded is _UNSET else expanded,
            self.selected if selected is _UNSET else selected)
        if self.focused_id is None or find_node(
                self.forest, self.focused_id) is None:
            self.focused_id = self.forest[0].id if self.forest else None
        self._reconcile()

    def visible_items(self) -> list[VisibleItem]:
        return flatten(self.forest, self.expanded)

    def _visible_item(self, node_id, items=None) -> VisibleItem | None:
        if node_id is None:
            return None
        for item in (items if items is not None else self.visible_items()):
            if item.id == node_id:
                return item
        return None

    # mount lifecycle

    def _reconcile(self) -> None:
        visible = [item.id for item in self.visible_items()]
        visible_set = set(visible)
        for node_id in self._mounted - visible_set:
            self.registry.unregister(node_id)
            if self.active_id == node_id:
                self.active_id = None
        for node_id in visible:
            if node_id not in self._mounted:
                self.registry.register(node_id, self.handle_factory(node_id))
        self._mounted = visible_set

    def unmount(self) -> None:
        for node_id in self._mounted:
            self.registry.unregister(node_id)
        self._mounted = set()
        self.active_id = None

    # focus

    def _set_focus(self, node_id) -> None:
        if node_id == self.focused_id:
            return
        logger.debug('Focus moves from %r to %r', self.focused_id, node_id)
        self.focused_id = node_id
        self.registry.focus(node_id)

    # events

    def key_down(self, key: str) -> bool:
        """
        Handles a key pressed while focus is inside the tree.

        :returns: ``True`` if the key was handled by the tree (the browser
            default action should be prevented)
        """
        key = normalize_key(key)
        if key not in NAVIGATION_KEYS and key not in ACTION_KEYS:
            return False
        items = self.visible_items()
        item = self._visible_item(self.focused_id, items)
        if item is None:
            logger.debug('Ignoring %r: no focused item is visible', key)
            return False

        if key in NAVIGATION_KEYS:
            target = next_focus(self.focused_id, key, items)
            if target is not None:
                self._set_focus(target)
            return True

        if item.disabled:
            return False
        if key == ARROW_RIGHT:
            if item.has_children and not item.expanded:
                self.expansion.expand(self.expanded, item.id)
        elif key == ARROW_LEFT:
            if item.has_children and item.expanded:
                self.expansion.collapse(self.expanded, item.id)
        else:
            activate(item, self.expanded, self.selection, self.expansion)
        return True

    def click(self, node_id) -> bool:
        """Handles a pointer click on the item row of ``node_id``."""
        item = self._visible_item(node_id)
        if item is None:
            logger.debug('Ignoring click on %r: not visible', node_id)
            return False
        if not self.selection.select(item):
            return False
        self._set_focus(item.id)
        if item.has_children:
            self.expansion.toggle(self.expanded, item.id)
        return True

    def chevron_click(self, node_id) -> bool:
        """Handles a click on the expand button of ``node_id``."""
        item = self._visible_item(node_id)
        if item is None or not item.has_children or item.disabled:
            return False
        self.expansion.toggle(self.expanded, item.id)
        return True

    def focus_in(self, node_id) -> bool:
        """Handles the native focus event of the item ``node_id``."""
        item = self._visible_item(node_id)
        if item is None or item.disabled:
            return False
        self._set_focus(item.id)
        return True

    # rendering

    def tree_context(self) -> list[dict]:
        return aria.tree_context(self.visible_items())

    def _item_class(self, item):
        base = self.css_class + '-item'
        classes = [base]
        if self.selected is not None and item.id == self.selected:
            classes.append(base + '--selected')
        if item.disabled:
            classes.append(base + '--disabled')
        return ' '.join(classes)

    def _chevron(self, item):
        if not item.has_children:
            return format_html('<span class="{}-chevron-placeholder"></span>',
                               self.css_class)
        classes = self.css_class + '-chevron'
        if item.expanded:
            classes += ' ' + classes + '--expanded'
        attrs = {
            'type': 'button',
            'aria-label': 'Collapse' if item.expanded else 'Expand',
            'class': classes,
            'tabindex': '-1',
            'disabled': item.disabled,
        }
        return format_html(
            '<button{}><span aria-hidden="true" class="{}-chevron-icon">'
            '</span></button>', flatatt(attrs), self.css_class)

    def _line(self, item):
        attrs = aria.aria_attributes(item, self.selected, self.focused_id)
        attrs['class'] = self._item_class(item)
        attrs['data-node-id'] = str(item.id)
        if self.active_id is not None and item.id == self.active_id:
            attrs['data-active'] = True
            attrs['autofocus'] = True
        icon = ''
        if item.node.icon is not None:
            icon = format_html('<span class="{}-icon">{}</span>',
                               self.css_class, item.node.icon)
        return format_html(
            '<div{}>{}{}<span class="{}-label">{}</span></div>',
            flatatt(attrs), self._chevron(item), icon, self.css_class,
            item.node.label)

    def _subtree(self, item, children_of):
        group = ''
        if item.has_children and item.expanded:
            group = format_html(
                '<div role="group" class="{}-group">{}</div>',
                self.css_class,
                mark_safe(''.join(self._subtree(child, children_of)
                                  for child in children_of[item.id])))
        return format_html('<div class="{}-node">{}{}</div>',
                           self.css_class, self._line(item), group)

    def render(self) -> SafeString:
        items = self.visible_items()
        children_of = defaultdict(list)
        for item in items:
            children_of[item.parent_id].append(item)
        classes = self.css_class
        if self.class_name:
            classes += ' ' + self.class_name
        container = flatatt({
            'role': 'tree',
            'aria-label': self.aria_label,
            'class': classes,
            'tabindex': '-1',
        })
        return format_html(
            '<div{}>{}</div>', container,
            format_html_join('', '{}', ((self._subtree(root, children_of),)
                                        for root in children_of[None])))

    def __html__(self):
        return self.render()

    def __str__(self):
        return self.render()
