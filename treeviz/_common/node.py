"""Node abstraction for treeviz.

Nodes are plain data owned by the caller. The default adapters only need
two things from a node: ``str(node)`` for its display text and
``node.children()`` for its ordered children. Inheriting from TreeVizNode
is optional; it documents the protocol and gives a readable repr.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Sequence


class TreeVizNode(ABC):
    """Abstract base class for renderable tree nodes.

    Subclasses implement ``children()`` and usually ``__str__``. Nodes are
    never mutated by the renderer and may be rendered any number of times.
    """

    @abstractmethod
    def children(self) -> Sequence['TreeVizNode']:
        """Return the child nodes in display order.

        Returns:
            Sequence of child nodes (empty for leaves)
        """
        pass

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return len(self.children()) == 0

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(label={str(self)!r})"


@dataclass(repr=False)
class SimpleNode(TreeVizNode):
    """Ready-made node holding a label and a list of child nodes.

    Example:
        root = SimpleNode("Root", [SimpleNode("Child1"), SimpleNode("Child2")])
    """

    label: str
    nodes: List['SimpleNode'] = field(default_factory=list)

    def children(self) -> List['SimpleNode']:
        return list(self.nodes)

    def add(self, *nodes: 'SimpleNode') -> 'SimpleNode':
        """Append children and return self, for chained tree building."""
        self.nodes.extend(nodes)
        return self

    def __str__(self) -> str:
        return self.label
