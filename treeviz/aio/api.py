"""High-level async API for treeviz.

This module provides simple, user-friendly coroutines for rendering trees
with concurrent sibling traversal, plus a blocking wrapper for callers
without an event loop.
"""

import asyncio
from typing import Any, List, Optional

from .core import AsyncTreeVizAdapter, AsyncDotSerializer
from .config import RenderConfig


async def render_async(graph_name: str,
                       root: Any,
                       adapter: Optional[AsyncTreeVizAdapter] = None,
                       config: Optional[RenderConfig] = None) -> str:
    """Render a tree as a GraphViz DOT directed graph, concurrently.

    The result is byte-identical to treeviz.sync.render for the same tree
    and config.

    Args:
        graph_name: Graph name; spaces and non-ASCII characters are removed
        root: Root node of the tree
        adapter: Async adapter for reading nodes
        config: Render configuration

    Returns:
        DOT document text
    """
    return await AsyncDotSerializer(adapter, config).render(graph_name, root)


async def collect_statements_async(root: Any,
                                   adapter: Optional[AsyncTreeVizAdapter] = None,
                                   config: Optional[RenderConfig] = None) -> List[str]:
    """Collect the label and edge statements of a tree in pre-order.

    Args:
        root: Root node of the tree
        adapter: Async adapter for reading nodes
        config: Render configuration

    Returns:
        DOT statements without header or normalization
    """
    return await AsyncDotSerializer(adapter, config).statements(root)


async def fingerprint_async(node: Any,
                            adapter: Optional[AsyncTreeVizAdapter] = None,
                            config: Optional[RenderConfig] = None) -> int:
    """Compute the raw content fingerprint of a node.

    Args:
        node: Node to fingerprint
        adapter: Async adapter for reading nodes
        config: Render configuration (selects the hash algorithm)

    Returns:
        Unsigned 64-bit integer
    """
    return await AsyncDotSerializer(adapter, config).content_fingerprint(node)


def render_concurrent(graph_name: str,
                      root: Any,
                      adapter: Optional[AsyncTreeVizAdapter] = None,
                      config: Optional[RenderConfig] = None) -> str:
    """Blocking wrapper around render_async.

    Runs the render on a fresh event loop, so it must not be called from
    inside a running loop; await render_async there instead.

    Args:
        graph_name: Graph name; spaces and non-ASCII characters are removed
        root: Root node of the tree
        adapter: Async adapter for reading nodes
        config: Render configuration

    Returns:
        DOT document text
    """
    return asyncio.run(render_async(graph_name, root, adapter, config))
