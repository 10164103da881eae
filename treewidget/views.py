"""HTTP endpoint that applies one tree event and returns the re-rendered tree."""

import logging

from django.http import HttpResponse, HttpResponseBadRequest
from django.views import View

from treewidget.nodes import walk_forest
from treewidget.widget import TreeView

logger = logging.getLogger(__name__)

EVENTS = ('key', 'click', 'chevron', 'focus')


class TreeEventView(View):
    """
    Applies a keyboard or pointer event to a tree and responds with the
    updated tree HTML fragment.

    The client owns the state and posts it with every event:

        - ``event``: one of ``key``, ``click``, ``chevron``, ``focus``
        - ``key``: the key name, for ``key`` events
        - ``node_id``: the target item, for the other events
        - ``focused_id``, ``selected_id``: current focus and selection
        - ``expanded``: repeated, the expanded ids

    The view plays the caller of the controlled widget: it applies the
    widget's expansion/selection requests to its copy of the state before
    rendering. Subclasses implement :meth:`get_forest`.
    """

    http_method_names = ['post']

    def get_forest(self, request):
        raise NotImplementedError

    def get_tree_kwargs(self, request):
        return {}

    def post(self, request, *args, **kwargs):
        try:
            event = request.POST['event']
            if event not in EVENTS:
                raise ValueError(event)
            if event == 'key':
                target = request.POST['key']
            else:
                target = request.POST['node_id']
        except (KeyError, ValueError):
            # Some parameters were missing or wrong, return a BadRequest
            return HttpResponseBadRequest('Malformed POST params')

        forest = self.get_forest(request)
        # posted values are strings, map them back to the real ids
        ids = {str(node.id): node.id
               for node, _depth, _parent in walk_forest(forest)}
        expanded = [ids[eid] for eid in request.POST.getlist('expanded')
                    if eid in ids]

        def on_expanded_change(next_ids):
            tree.update(expanded=next_ids)

        def on_selected_change(node_id):
            tree.update(selected=node_id)

        tree = TreeView(
            forest,
            expanded=expanded,
            selected=ids.get(request.POST.get('selected_id', '')),
            focused=ids.get(request.POST.get('focused_id', '')),
            on_expanded_change=on_expanded_change,
            on_selected_change=on_selected_change,
            **self.get_tree_kwargs(request))

        if event == 'key':
            handled = tree.key_down(target)
        elif target not in ids:
            handled = False
        elif event == 'click':
            handled = tree.click(ids[target])
        elif event == 'chevron':
            handled = tree.chevron_click(ids[target])
        else:
            handled = tree.focus_in(ids[target])
        logger.debug('Tree event %s %r handled=%s', event, target, handled)

        response = HttpResponse(tree.render())
        response['X-Tree-Focused-Id'] = '' if tree.focused_id is None \
            else str(tree.focused_id)
        return response
