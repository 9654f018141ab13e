"""Built-in async adapters."""

from .node import AsyncNodeAdapter, SyncAdapterBridge

__all__ = [
    'AsyncNodeAdapter',
    'SyncAdapterBridge',
]
