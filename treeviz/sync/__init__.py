"""Synchronous implementation of treeviz.

This package renders trees sequentially on the calling thread. Nothing
here suspends or spawns work.
"""

# Core components
from .core.adapter import TreeVizAdapter
from .core.serializer import DotSerializer

# Adapters
from .adapters import NodeAdapter, MappingAdapter

# Nodes and configuration
from .._common.node import TreeVizNode, SimpleNode
from .._common.errors import TreeVizError, NodeCapabilityError
from .config import RenderConfig

# High-level API
from .api import render, iter_statements, fingerprint

__all__ = [
    # Core
    'TreeVizAdapter',
    'DotSerializer',
    # Adapters
    'NodeAdapter',
    'MappingAdapter',
    # Nodes
    'TreeVizNode',
    'SimpleNode',
    # Errors
    'TreeVizError',
    'NodeCapabilityError',
    # Config
    'RenderConfig',
    # API
    'render',
    'iter_statements',
    'fingerprint',
]
