"""Concurrent DOT serializer.

Visits the children of every node as concurrently scheduled tasks and
joins them before assembling the parent's block, so each child subtree
stays one contiguous block in request order.

Fingerprints are reserved in pre-order: every visit waits for a turn
event released once its pre-order predecessor (the parent, or the whole
subtree of the previous sibling) has reserved. Collision probing thus sees
the registry in the same state as the sequential serializer and both
produce byte-identical documents. Hashing and adapter calls are not
ordered and overlap freely.
"""

import asyncio
import logging
from typing import Any, Awaitable, Iterable, List, Optional

from .adapter import AsyncTreeVizAdapter
from .identity import AsyncFingerprintRegistry
from ..adapters.node import AsyncNodeAdapter
from ..._common.config import RenderConfig
from ..._common.document import assemble_document, edge_statement, label_statement
from ..._common.fingerprint import Fingerprinter, FingerprintMemo


logger = logging.getLogger(__name__)


class _Traversal:
    """State shared by all tasks of one render."""

    def __init__(self, max_concurrent: int):
        self.registry = AsyncFingerprintRegistry()
        self.memo = FingerprintMemo()
        self.semaphore = asyncio.Semaphore(max_concurrent)


def _released() -> asyncio.Event:
    event = asyncio.Event()
    event.set()
    return event


async def _gather(coroutines: Iterable[Awaitable[Any]]) -> List[Any]:
    """Run coroutines as tasks and collect results in request order.

    If one fails the others are cancelled and awaited before the error
    propagates; siblings may be parked on a turn that will never come.
    """
    tasks = [asyncio.ensure_future(coroutine) for coroutine in coroutines]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        # Collect every outcome so no failed sibling goes unretrieved
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class AsyncDotSerializer:
    """Renders trees as GraphViz DOT with concurrent sibling traversal.

    Example:
        serializer = AsyncDotSerializer()
        text = await serializer.render("Example", root)
    """

    def __init__(self,
                 adapter: Optional[AsyncTreeVizAdapter] = None,
                 config: Optional[RenderConfig] = None):
        """Initialize serializer.

        Args:
            adapter: Async adapter for reading nodes (defaults to AsyncNodeAdapter)
            config: Render configuration (defaults to RenderConfig())

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or RenderConfig()
        self.config.raise_if_invalid()
        self.adapter = adapter or AsyncNodeAdapter()
        self.fingerprinter = Fingerprinter(self.config.hash_algorithm)

    async def _get_label(self, node: Any, traversal: _Traversal) -> str:
        async with traversal.semaphore:
            return await self.adapter.get_label(node)

    async def _get_children(self, node: Any, traversal: _Traversal) -> List[Any]:
        async with traversal.semaphore:
            return await self.adapter.get_children(node)

    async def _content_fingerprint(self, node: Any, traversal: _Traversal) -> int:
        cached = traversal.memo.get(node)
        if cached is not None:
            return cached

        children = await self._get_children(node, traversal)
        child_fingerprints = await _gather(
            self._content_fingerprint(child, traversal) for child in children
        )
        label = await self._get_label(node, traversal)
        fingerprint = self.fingerprinter.combine(label, child_fingerprints)
        traversal.memo.put(node, fingerprint, children)
        return fingerprint

    async def content_fingerprint(self, node: Any) -> int:
        """Compute the raw fingerprint of a node from its subtree content.

        Args:
            node: Node to fingerprint

        Returns:
            Raw 64-bit fingerprint (not yet made unique)
        """
        return await self._content_fingerprint(node, _Traversal(self.config.max_concurrent))

    async def _visit(self,
                     node: Any,
                     parent: Optional[int],
                     traversal: _Traversal,
                     turn: asyncio.Event,
                     done: asyncio.Event) -> List[str]:
        raw = await self._content_fingerprint(node, traversal)
        label = await self._get_label(node, traversal)
        children = traversal.memo.children(node)
        if children is None:
            children = await self._get_children(node, traversal)

        await turn.wait()
        fingerprint = await traversal.registry.reserve(raw)

        block = [label_statement(fingerprint, label)]
        if parent is not None:
            block.append(edge_statement(parent, fingerprint))

        if not children:
            done.set()
            return block

        # The last child's subtree finishing is this subtree finishing
        visits = []
        previous = _released()
        for index, child in enumerate(children):
            child_done = done if index == len(children) - 1 else asyncio.Event()
            visits.append(self._visit(child, fingerprint, traversal, previous, child_done))
            previous = child_done

        for child_block in await _gather(visits):
            block.extend(child_block)
        return block

    async def statements(self, root: Any) -> List[str]:
        """Collect raw DOT statements for the tree in pre-order.

        Args:
            root: Root node of the tree

        Returns:
            Label and edge statements (not normalized), in the same order
            the sequential serializer yields them
        """
        traversal = _Traversal(self.config.max_concurrent)
        return await self._visit(root, None, traversal, _released(), asyncio.Event())

    async def render(self, graph_name: str, root: Any) -> str:
        """Render the tree rooted at ``root`` as a DOT document.

        Args:
            graph_name: Graph name; spaces and non-ASCII are removed
            root: Root node of the tree

        Returns:
            Complete DOT document
        """
        statements = await self.statements(root)
        logger.debug("Rendered graph %r concurrently: %d node(s)",
                     graph_name, (len(statements) + 1) // 2)
        return assemble_document(graph_name, "\n".join(statements), self.config.line_separator)
