"""TreeVizAdapter abstraction for treeviz.

The adapter provides the navigation logic for a specific tree shape,
decoupling the node representation from the serializer. The serializer
only ever talks to nodes through an adapter.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class TreeVizAdapter(ABC):
    """Abstract adapter for reading labels and children from nodes.

    This separation allows:
    - Any object to be rendered without inheriting from a base class
    - The same node type to be rendered with different labels
    - Nested data (dicts, JSON) to be rendered directly
    """

    @abstractmethod
    def get_label(self, node: Any) -> str:
        """Get the display text of a node.

        The text is sanitized by the serializer, so adapters return it
        unchanged.

        Args:
            node: The node to describe

        Returns:
            Display text (may be empty)
        """
        pass

    @abstractmethod
    def get_children(self, node: Any) -> List[Any]:
        """Get the children of a node in display order.

        Args:
            node: The parent node

        Returns:
            List of child nodes (empty for leaves)
        """
        pass

    def is_leaf(self, node: Any) -> bool:
        """Check if a node has no children.

        Default implementation materializes the children.
        Adapters can override for more efficient implementations.
        """
        return not self.get_children(node)
