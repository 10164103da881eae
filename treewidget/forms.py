"Forms for treewidget."

from django import forms
from django.core.exceptions import ValidationError
from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from treewidget.nodes import ancestor_ids, walk_forest
from treewidget.widget import TreeView


def _node_by_value(forest, value):
    if value in (None, ''):
        return None
    for node, _depth, _parent in walk_forest(forest):
        if str(node.id) == str(value):
            return node
    return None


def tree_choices(forest):
    """ Creates a tree-like list of choices """

    def mk_indent(level):
        return '. . ' * (level - 1)

    return [(str(node.id), mk_indent(depth) + str(node.label))
            for node, depth, _parent in walk_forest(forest)]


class TreeSelect(forms.Widget):
    """
    Renders a forest as a tree with the current value selected, plus a hidden
    input carrying the selected id.

    The ancestors of the selected node are expanded so it is visible, and it
    holds the roving tabindex.
    """

    def __init__(self, forest=None, attrs=None):
        super().__init__(attrs)
        self.forest = list(forest or [])

    def get_tree(self, value):
        node = _node_by_value(self.forest, value)
        if node is None:
            return TreeView(self.forest)
        return TreeView(self.forest,
                        expanded=ancestor_ids(self.forest, node.id),
                        selected=node.id, focused=node.id)

    def render(self, name, value, attrs=None, renderer=None):
        final_attrs = self.build_attrs(self.attrs, attrs)
        hidden = format_html(
            '<input type="hidden" name="{}" value="{}"{}>',
            name, '' if value is None else value,
            flatatt(final_attrs))
        return format_html('{}{}', hidden, self.get_tree(value).render())

    def value_from_datadict(self, data, files, name):
        return data.get(name)


class TreeChoiceField(forms.ChoiceField):
    """
    Single choice among the nodes of a forest. Disabled nodes are rendered
    but can't be chosen.
    """

    widget = TreeSelect
    default_error_messages = {
        'disabled': _('Select a valid choice. %(value)s is disabled.'),
    }

    def __init__(self, forest, **kwargs):
        self.forest = list(forest)
        super().__init__(choices=tree_choices(self.forest), **kwargs)
        self.widget.forest = self.forest

    def to_python(self, value):
        ":returns: the id of the chosen node, with its original type"
        if value in self.empty_values:
            return ''
        node = _node_by_value(self.forest, value)
        if node is None:
            return str(value)
        return node.id

    def validate(self, value):
        super().validate(value)
        node = _node_by_value(self.forest, value)
        if node is not None and node.disabled:
            raise ValidationError(
                self.error_messages['disabled'],
                code='disabled',
                params={'value': value},
            )
