"""Configuration re-export for the aio package."""

from .._common.config import RenderConfig, DEFAULT_HASH_ALGORITHM

__all__ = [
    'RenderConfig',
    'DEFAULT_HASH_ALGORITHM',
]
