"""Testing utilities for treeviz consumers."""

from .fixtures import DotDocument

__all__ = ['DotDocument']
