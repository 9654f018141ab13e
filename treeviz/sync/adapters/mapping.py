"""Adapter for trees made of nested mappings.

Useful for rendering parsed JSON/YAML or other dict-shaped data:

    tree = {"label": "Root", "children": [{"label": "Child1"}]}
    render("Data", tree, adapter=MappingAdapter())
"""

from typing import Any, List, Mapping

from ..core.adapter import TreeVizAdapter
from ..._common.errors import NodeCapabilityError


class MappingAdapter(TreeVizAdapter):
    """Reads labels and children from mapping keys.

    A missing children key means the node is a leaf. A missing label key
    is an error, since a node without display text is almost always a
    mistake in the key names.
    """

    def __init__(self, label_key: str = "label", children_key: str = "children"):
        """Initialize adapter.

        Args:
            label_key: Key holding the display text
            children_key: Key holding the list of child mappings
        """
        self.label_key = label_key
        self.children_key = children_key

    def get_label(self, node: Mapping[str, Any]) -> str:
        if not isinstance(node, Mapping) or self.label_key not in node:
            raise NodeCapabilityError(node, self.label_key)
        return str(node[self.label_key])

    def get_children(self, node: Mapping[str, Any]) -> List[Any]:
        if not isinstance(node, Mapping):
            raise NodeCapabilityError(node, self.children_key)
        return list(node.get(self.children_key) or [])

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(label_key={self.label_key!r}, "
                f"children_key={self.children_key!r})")
