"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration (RenderConfig)
- Node base classes (TreeVizNode, SimpleNode)
- Identity assignment (Fingerprinter, FingerprintRegistry)
- Sanitization and DOT document assembly (pure computation, no I/O)

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import RenderConfig, DEFAULT_HASH_ALGORITHM
from .errors import TreeVizError, NodeCapabilityError
from .node import TreeVizNode, SimpleNode
from .fingerprint import (
    Fingerprinter,
    FingerprintRegistry,
    FingerprintMemo,
    FINGERPRINT_MASK,
)
from .sanitize import sanitize_graph_name, sanitize_label, strip_non_ascii
from .document import (
    graph_header,
    label_statement,
    edge_statement,
    normalize_lines,
    assemble_document,
)

__all__ = [
    'RenderConfig',
    'DEFAULT_HASH_ALGORITHM',
    'TreeVizError',
    'NodeCapabilityError',
    'TreeVizNode',
    'SimpleNode',
    'Fingerprinter',
    'FingerprintRegistry',
    'FingerprintMemo',
    'FINGERPRINT_MASK',
    'sanitize_graph_name',
    'sanitize_label',
    'strip_non_ascii',
    'graph_header',
    'label_statement',
    'edge_statement',
    'normalize_lines',
    'assemble_document',
]
