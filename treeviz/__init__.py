"""treeviz - Render any tree as a GraphViz DOT directed graph.

treeviz turns an in-memory tree of application-defined nodes into DOT
text. Every node gets a content-derived fingerprint that is unique within
one render; labels and graph names are sanitized for DOT.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from treeviz.sync import render

Asynchronous:
    from treeviz.aio import render_async
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implementations produce byte-identical output for the same tree.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export submodules for convenient access
from . import sync
from . import aio

# Users must explicitly choose their implementation
__all__ = [
    "__version__",
    "sync",
    "aio",
]
