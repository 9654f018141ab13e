"""Core abstractions for synchronous rendering.

This module contains the adapter base class and the sequential serializer.
"""

from .adapter import TreeVizAdapter
from .serializer import DotSerializer

__all__ = [
    "TreeVizAdapter",
    "DotSerializer",
]
