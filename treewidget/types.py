from collections.abc import Hashable
from typing import Any, NotRequired, TypedDict


class NodeData(TypedDict):
    """Plain-data form of a tree node.

    Note: ``children`` is a recursive list of the same structure.
    """

    id: Hashable
    label: Any
    disabled: NotRequired[bool]
    icon: NotRequired[Any]
    children: NotRequired[list["NodeData"]]
