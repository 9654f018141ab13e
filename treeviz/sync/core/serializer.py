"""Sequential DOT serializer.

Walks the tree depth-first in pre-order on the calling thread, emitting a
label statement for every node and an edge statement for every non-root
node. The registry of used fingerprints lives for one traversal only.
"""

import logging
from typing import Any, Iterator, Optional

from .adapter import TreeVizAdapter
from ..adapters.node import NodeAdapter
from ..._common.config import RenderConfig
from ..._common.document import assemble_document, edge_statement, label_statement
from ..._common.fingerprint import Fingerprinter, FingerprintMemo, FingerprintRegistry


logger = logging.getLogger(__name__)


class DotSerializer:
    """Renders trees as GraphViz DOT, one node at a time.

    Example:
        serializer = DotSerializer()
        text = serializer.render("Example", SimpleNode("Root", [SimpleNode("Leaf")]))
    """

    def __init__(self,
                 adapter: Optional[TreeVizAdapter] = None,
                 config: Optional[RenderConfig] = None):
        """Initialize serializer.

        Args:
            adapter: Adapter for reading nodes (defaults to NodeAdapter)
            config: Render configuration (defaults to RenderConfig())

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or RenderConfig()
        self.config.raise_if_invalid()
        self.adapter = adapter or NodeAdapter()
        self.fingerprinter = Fingerprinter(self.config.hash_algorithm)

    def content_fingerprint(self, node: Any, memo: Optional[FingerprintMemo] = None) -> int:
        """Compute the raw fingerprint of a node from its subtree content.

        Args:
            node: Node to fingerprint
            memo: Cache shared across one traversal

        Returns:
            Raw 64-bit fingerprint (not yet made unique)
        """
        if memo is None:
            memo = FingerprintMemo()
        cached = memo.get(node)
        if cached is not None:
            return cached

        children = list(self.adapter.get_children(node))
        child_fingerprints = [self.content_fingerprint(child, memo) for child in children]
        fingerprint = self.fingerprinter.combine(self.adapter.get_label(node), child_fingerprints)
        memo.put(node, fingerprint, children)
        return fingerprint

    def statements(self, root: Any) -> Iterator[str]:
        """Yield raw DOT statements for the tree in pre-order.

        For every node the label statement comes first, then the edge from
        its parent, then everything from its children's subtrees in order.

        Args:
            root: Root node of the tree

        Yields:
            Label and edge statements (not normalized)
        """
        registry = FingerprintRegistry()
        memo = FingerprintMemo()

        def _visit(node: Any, parent: Optional[int]) -> Iterator[str]:
            fingerprint = registry.reserve(self.content_fingerprint(node, memo))
            yield label_statement(fingerprint, self.adapter.get_label(node))
            if parent is not None:
                yield edge_statement(parent, fingerprint)

            # Children read while hashing; refetching may build new objects
            children = memo.children(node)
            if children is None:
                children = self.adapter.get_children(node)
            for child in children:
                yield from _visit(child, fingerprint)

        yield from _visit(root, None)

    def render(self, graph_name: str, root: Any) -> str:
        """Render the tree rooted at ``root`` as a DOT document.

        Args:
            graph_name: Graph name; spaces and non-ASCII are removed
            root: Root node of the tree

        Returns:
            Complete DOT document
        """
        statements = list(self.statements(root))
        logger.debug("Rendered graph %r: %d node(s)", graph_name, (len(statements) + 1) // 2)
        return assemble_document(graph_name, "\n".join(statements), self.config.line_separator)
