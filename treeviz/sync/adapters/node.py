"""Adapter for objects implementing the node protocol.

Any object with ``str(node)`` and a callable ``children()`` can be rendered
through NodeAdapter; inheriting from TreeVizNode is not required.
"""

from typing import Any, List

from ..core.adapter import TreeVizAdapter
from ..._common.errors import NodeCapabilityError


class NodeAdapter(TreeVizAdapter):
    """Default adapter: ``str(node)`` for labels, ``node.children()`` for children."""

    def get_label(self, node: Any) -> str:
        return str(node)

    def get_children(self, node: Any) -> List[Any]:
        children = getattr(node, 'children', None)
        if not callable(children):
            raise NodeCapabilityError(node, 'children')
        return list(children())
