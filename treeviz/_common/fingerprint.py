"""Node identity for treeviz.

A node's fingerprint is the integer used as its DOT node identifier. It is
derived from content (display text plus, transitively, the children) and
then made unique within one render by the FingerprintRegistry.
"""

import hashlib
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from .config import DEFAULT_HASH_ALGORITHM


logger = logging.getLogger(__name__)

FINGERPRINT_BYTES = 8
FINGERPRINT_MASK = (1 << (FINGERPRINT_BYTES * 8)) - 1


class Fingerprinter:
    """Computes raw 64-bit content fingerprints.

    The raw fingerprint of a node is a digest over its display text, its
    child count and the raw fingerprints of its children in order. Two
    subtrees with identical content always produce the same value, also
    across processes, since only hashlib is involved.

    Any fixed-size hashlib algorithm can back the digest; the first eight
    bytes are read big-endian. The default, blake2b, is asked for an
    eight-byte digest directly.
    """

    def __init__(self, algorithm: str = DEFAULT_HASH_ALGORITHM):
        """Initialize fingerprinter.

        Args:
            algorithm: hashlib algorithm name

        Raises:
            ValueError: If the algorithm is unknown or has no fixed digest size
        """
        # hashlib names are case-insensitive
        algorithm = algorithm.lower()
        if algorithm.startswith("shake_"):
            raise ValueError(f"Hash algorithm {algorithm!r} has no fixed digest size")
        self.algorithm = algorithm
        # Fails early for unknown algorithms
        self._new_hash()

    def _new_hash(self):
        if self.algorithm == "blake2b":
            return hashlib.blake2b(digest_size=FINGERPRINT_BYTES)
        return hashlib.new(self.algorithm)

    def combine(self, label: str, child_fingerprints: Iterable[int]) -> int:
        """Compute the raw fingerprint of a node.

        Args:
            label: Display text of the node (unsanitized)
            child_fingerprints: Raw fingerprints of the children, in order

        Returns:
            Unsigned 64-bit integer
        """
        children = list(child_fingerprints)
        data = label.encode("utf-8", "surrogatepass")

        digest = self._new_hash()
        digest.update(len(data).to_bytes(8, "big"))
        digest.update(data)
        digest.update(len(children).to_bytes(8, "big"))
        for fingerprint in children:
            digest.update(fingerprint.to_bytes(FINGERPRINT_BYTES, "big"))
        return int.from_bytes(digest.digest()[:FINGERPRINT_BYTES], "big")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(algorithm={self.algorithm!r})"


class FingerprintRegistry:
    """Fingerprints already assigned during one render.

    Collisions are resolved by linear probing: a taken value is incremented
    (wrapping at 2**64) until a free one is found. Not thread-safe; the
    async serializer guards it with a lock.
    """

    def __init__(self):
        self._seen: Set[int] = set()

    def reserve(self, raw: int) -> int:
        """Reserve a unique fingerprint starting from a raw value.

        Args:
            raw: Raw content fingerprint

        Returns:
            The first free value at or after ``raw``, now marked as used
        """
        fingerprint = raw & FINGERPRINT_MASK
        while fingerprint in self._seen:
            fingerprint = (fingerprint + 1) & FINGERPRINT_MASK
        if fingerprint != raw:
            logger.debug(
                "Fingerprint collision on %d, probed %d step(s) to %d",
                raw, (fingerprint - raw) & FINGERPRINT_MASK, fingerprint,
            )
        self._seen.add(fingerprint)
        return fingerprint

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def __iter__(self) -> Iterator[int]:
        return iter(self._seen)


class FingerprintMemo:
    """Per-render cache of raw fingerprints keyed by node identity.

    The node itself is stored next to its value so its id cannot be
    recycled by another object while the memo is alive. The child list
    read while hashing is kept too, so a traversal can walk the very
    objects that were hashed instead of asking the adapter again. Trees
    whose ``children()`` builds new objects on every call depend on this.
    """

    def __init__(self):
        self._entries: Dict[int, Tuple[Any, int, Optional[List[Any]]]] = {}

    def get(self, node: Any) -> Optional[int]:
        entry = self._entries.get(id(node))
        if entry is None:
            return None
        return entry[1]

    def children(self, node: Any) -> Optional[List[Any]]:
        """Return the child list stored with ``node``, or None if unknown."""
        entry = self._entries.get(id(node))
        if entry is None:
            return None
        return entry[2]

    def put(self, node: Any, fingerprint: int, children: Optional[List[Any]] = None) -> None:
        self._entries[id(node)] = (node, fingerprint, children)

    def __len__(self) -> int:
        return len(self._entries)
