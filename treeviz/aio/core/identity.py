"""Shared fingerprint registry for concurrent traversal."""

import asyncio

from ..._common.fingerprint import FingerprintRegistry


class AsyncFingerprintRegistry:
    """FingerprintRegistry guarded by an asyncio.Lock.

    The probe and the insert happen inside one critical section, so two
    tasks can never leave with the same fingerprint. Only that step is
    locked; hashing and formatting run outside it.
    """

    def __init__(self):
        self._registry = FingerprintRegistry()
        self._lock = asyncio.Lock()

    async def reserve(self, raw: int) -> int:
        """Reserve a unique fingerprint starting from a raw value."""
        async with self._lock:
            return self._registry.reserve(raw)

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._registry

    def __len__(self) -> int:
        return len(self._registry)
