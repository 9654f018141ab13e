"""Core abstractions for concurrent rendering.

This module defines the async adapter interface, the lock-guarded
fingerprint registry and the concurrent serializer.
"""

from .adapter import AsyncTreeVizAdapter
from .identity import AsyncFingerprintRegistry
from .serializer import AsyncDotSerializer

__all__ = [
    'AsyncTreeVizAdapter',
    'AsyncFingerprintRegistry',
    'AsyncDotSerializer',
]
