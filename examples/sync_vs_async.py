#!/usr/bin/env python3
"""
Comparison between sync and async rendering.

This example demonstrates:
- Rendering a lazily loaded tree whose children take time to fetch
- Concurrent sibling traversal hiding that latency
- Byte-identical output from both implementations
"""

import asyncio
import sys
import time
from pathlib import Path
from typing import List

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeviz.sync import render
from treeviz.aio import render_async

FETCH_DELAY = 0.005


class RemoteNode:
    """Node whose children are 'fetched' with some latency."""

    def __init__(self, name: str, depth: int, fanout: int):
        self.name = name
        self.depth = depth
        self.fanout = fanout

    def __str__(self) -> str:
        return self.name

    def _build(self) -> List['RemoteNode']:
        if self.depth == 0:
            return []
        return [RemoteNode(f"{self.name}.{i}", self.depth - 1, self.fanout)
                for i in range(self.fanout)]


class BlockingNode(RemoteNode):
    def children(self) -> List['BlockingNode']:
        time.sleep(FETCH_DELAY)
        return [BlockingNode(n.name, n.depth, n.fanout) for n in self._build()]


class AwaitableNode(RemoteNode):
    async def children(self) -> List['AwaitableNode']:
        await asyncio.sleep(FETCH_DELAY)
        return [AwaitableNode(n.name, n.depth, n.fanout) for n in self._build()]


def main():
    depth, fanout = 3, 4

    start = time.perf_counter()
    sync_text = render("Remote", BlockingNode("n", depth, fanout))
    sync_elapsed = time.perf_counter() - start

    start = time.perf_counter()
    async_text = asyncio.run(render_async("Remote", AwaitableNode("n", depth, fanout)))
    async_elapsed = time.perf_counter() - start

    print(f"Sync:  {sync_elapsed:.2f}s")
    print(f"Async: {async_elapsed:.2f}s")
    print(f"Identical output: {sync_text == async_text}")


if __name__ == "__main__":
    main()
