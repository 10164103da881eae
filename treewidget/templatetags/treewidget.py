from django.template import Library

from treewidget.aria import tree_context as _tree_context

register = Library()


@register.simple_tag
def render_tree(tree):
    """Renders a :class:`~treewidget.widget.TreeView`."""
    return tree.render()


@register.simple_tag
def tree_context(tree):
    """
    Generate a list containing additional context for each visible item of
    ``tree``, for use by the frontend. It is assumed that the template renders
    the items in the same order as the list.
    """
    return _tree_context(tree.visible_items())
