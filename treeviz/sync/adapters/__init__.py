"""Built-in synchronous adapters."""

from .node import NodeAdapter
from .mapping import MappingAdapter

__all__ = [
    'NodeAdapter',
    'MappingAdapter',
]
