"""Asynchronous implementation of treeviz.

This package contains a native async/await serializer that traverses
sibling subtrees concurrently. Its output is identical to the sync
implementation for the same tree.
"""

# Core abstractions
from .core import (
    AsyncTreeVizAdapter,
    AsyncFingerprintRegistry,
    AsyncDotSerializer,
)

# Adapters
from .adapters import AsyncNodeAdapter, SyncAdapterBridge

# Nodes and configuration
from .._common.node import TreeVizNode, SimpleNode
from .._common.errors import TreeVizError, NodeCapabilityError
from .config import RenderConfig

# High-level API
from .api import (
    render_async,
    collect_statements_async,
    fingerprint_async,
    render_concurrent,
)

__all__ = [
    # Core abstractions
    'AsyncTreeVizAdapter',
    'AsyncFingerprintRegistry',
    'AsyncDotSerializer',
    # Adapters
    'AsyncNodeAdapter',
    'SyncAdapterBridge',
    # Nodes
    'TreeVizNode',
    'SimpleNode',
    # Errors
    'TreeVizError',
    'NodeCapabilityError',
    # Configuration
    'RenderConfig',
    # High-level API
    'render_async',
    'collect_statements_async',
    'fingerprint_async',
    'render_concurrent',
]
