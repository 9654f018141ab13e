"""Configuration system for treeviz.

This module defines how users tune a render: which hash backs node
fingerprints, how the final document is laid out and how much concurrency
the async serializer may use.
"""

import hashlib
from dataclasses import dataclass
from typing import List


DEFAULT_HASH_ALGORITHM = "blake2b"


@dataclass
class RenderConfig:
    """Complete configuration for rendering a tree as DOT.

    Both serializers accept the same config, so a tree rendered with
    either execution model under the same config yields the same text.
    """

    # Identity
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM  # hashlib name for raw fingerprints

    # Layout
    line_separator: str = ""  # Joins normalized lines ("" = single line)

    # Concurrency (aio only)
    max_concurrent: int = 100  # Concurrent adapter calls

    @classmethod
    def compact(cls) -> 'RenderConfig':
        """Create config producing the whole document on one line.

        Returns:
            RenderConfig with an empty line separator
        """
        return cls(line_separator="")

    @classmethod
    def multiline(cls) -> 'RenderConfig':
        """Create config producing one statement per line.

        Returns:
            RenderConfig with a newline separator
        """
        return cls(line_separator="\n")

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        algorithm = self.hash_algorithm.lower()
        if algorithm.startswith("shake_"):
            errors.append(f"hash_algorithm {self.hash_algorithm!r} has no fixed digest size")
        elif algorithm not in {name.lower() for name in hashlib.algorithms_available}:
            errors.append(f"hash_algorithm {self.hash_algorithm!r} is not available in hashlib")

        if self.line_separator and not self.line_separator.isspace():
            errors.append("line_separator must be empty or whitespace only")

        if self.max_concurrent <= 0:
            errors.append("max_concurrent must be positive")

        return errors

    def raise_if_invalid(self) -> None:
        """Raise ValueError listing every validation error, if any."""
        errors = self.validate()
        if errors:
            raise ValueError(f"Invalid configuration: {', '.join(errors)}")
