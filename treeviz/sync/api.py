"""High-level API for treeviz.

This module provides simple, user-friendly functions for rendering trees.
Each call builds a fresh serializer, so calls are independent of each other.
"""

from typing import Any, Iterator, Optional

from .core.adapter import TreeVizAdapter
from .core.serializer import DotSerializer
from .config import RenderConfig


def render(graph_name: str,
           root: Any,
           adapter: Optional[TreeVizAdapter] = None,
           config: Optional[RenderConfig] = None) -> str:
    """Render a tree as a GraphViz DOT directed graph.

    Args:
        graph_name: Graph name; spaces and non-ASCII characters are removed
        root: Root node of the tree
        adapter: Adapter for reading nodes (default: str(node)/node.children())
        config: Render configuration

    Returns:
        DOT document text

    Example:
        root = SimpleNode("Root", [SimpleNode("Child1"), SimpleNode("Child2")])
        print(render("Example", root))
    """
    return DotSerializer(adapter, config).render(graph_name, root)


def iter_statements(root: Any,
                    adapter: Optional[TreeVizAdapter] = None,
                    config: Optional[RenderConfig] = None) -> Iterator[str]:
    """Yield the label and edge statements of a tree in pre-order.

    Unlike render(), no header, closing brace or normalization is applied.

    Args:
        root: Root node of the tree
        adapter: Adapter for reading nodes
        config: Render configuration

    Yields:
        DOT statements
    """
    yield from DotSerializer(adapter, config).statements(root)


def fingerprint(node: Any,
                adapter: Optional[TreeVizAdapter] = None,
                config: Optional[RenderConfig] = None) -> int:
    """Compute the raw content fingerprint of a node.

    Two subtrees with the same labels and shape get the same value. Inside
    a render the value may be shifted to keep identifiers unique.

    Args:
        node: Node to fingerprint
        adapter: Adapter for reading nodes
        config: Render configuration (selects the hash algorithm)

    Returns:
        Unsigned 64-bit integer
    """
    return DotSerializer(adapter, config).content_fingerprint(node)
