"""Async adapters for protocol nodes and for sync adapters."""

import asyncio
import inspect
from typing import Any, List

from ..core.adapter import AsyncTreeVizAdapter
from ...sync.core.adapter import TreeVizAdapter
from ..._common.errors import NodeCapabilityError


class AsyncNodeAdapter(AsyncTreeVizAdapter):
    """Default async adapter: ``str(node)`` and ``node.children()``.

    ``children()`` may be a plain method, a coroutine function or return
    an async iterable; all three are accepted.
    """

    async def get_label(self, node: Any) -> str:
        return str(node)

    async def get_children(self, node: Any) -> List[Any]:
        children = getattr(node, 'children', None)
        if not callable(children):
            raise NodeCapabilityError(node, 'children')

        result = children()
        if inspect.isawaitable(result):
            result = await result
        if hasattr(result, '__aiter__'):
            return [child async for child in result]
        return list(result)


class SyncAdapterBridge(AsyncTreeVizAdapter):
    """Runs a synchronous TreeVizAdapter inside the async serializer.

    With ``use_threads=True`` each call is pushed to a worker thread via
    asyncio.to_thread, which keeps the event loop free when the wrapped
    adapter blocks (lazy loading, database lookups).
    """

    def __init__(self, adapter: TreeVizAdapter, use_threads: bool = False):
        """Initialize bridge.

        Args:
            adapter: Synchronous adapter to wrap
            use_threads: Run adapter calls in worker threads
        """
        self.adapter = adapter
        self.use_threads = use_threads

    async def get_label(self, node: Any) -> str:
        if self.use_threads:
            return await asyncio.to_thread(self.adapter.get_label, node)
        return self.adapter.get_label(node)

    async def get_children(self, node: Any) -> List[Any]:
        if self.use_threads:
            return await asyncio.to_thread(self.adapter.get_children, node)
        return self.adapter.get_children(node)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.adapter!r}, use_threads={self.use_threads})"
