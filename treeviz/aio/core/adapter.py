"""Async tree adapter abstraction.

Defines how the concurrent serializer reads labels and children from
nodes. Both methods are coroutines so adapters may fetch lazily loaded
nodes without blocking the event loop.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class AsyncTreeVizAdapter(ABC):
    """Abstract base class for async tree adapters.

    Adapters bridge between the generic serializer and specific tree
    implementations. Concurrency limits are applied by the serializer, so
    adapters only describe how to read one node.
    """

    @abstractmethod
    async def get_label(self, node: Any) -> str:
        """Get the display text of a node.

        Args:
            node: The node to describe

        Returns:
            Display text (unsanitized, may be empty)
        """
        pass

    @abstractmethod
    async def get_children(self, node: Any) -> List[Any]:
        """Get the children of a node in display order.

        Args:
            node: The parent node

        Returns:
            List of child nodes (empty for leaves)
        """
        pass

    async def close(self):
        """Clean up adapter resources.

        Override if adapter needs cleanup (close connections, etc.)
        """
        pass

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
