"""Test fixtures for treeviz consumers.

These helpers parse rendered DOT documents so test suites can assert on
structure (node counts, edges, labels) instead of comparing fingerprints,
which depend on the hash algorithm.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


_HEADER = re.compile(r'digraph (\S*) \{')
_STATEMENT = re.compile(
    r'\s*(?:'
    r'(?P<node>\d+) \[label="(?P<label>(?:[^"\\]|\\.)*)"\];'
    r'|(?P<parent>\d+) -> (?P<child>\d+);'
    r')'
)
_CLOSING = re.compile(r'\s*\}\s*')


@dataclass
class DotDocument:
    """Parsed form of a document produced by treeviz.

    Example:
        doc = DotDocument.parse(render("Example", root))
        assert doc.node_count == 3
        assert doc.labels == ["Root", "Child1", "Child2"]
    """

    name: str
    label_statements: List[Tuple[int, str]] = field(default_factory=list)
    edge_statements: List[Tuple[int, int]] = field(default_factory=list)
    sequence: List[str] = field(default_factory=list, repr=False)  # "node"/"edge" in document order

    @classmethod
    def parse(cls, text: str) -> 'DotDocument':
        """Parse a rendered document.

        Args:
            text: Output of render()/render_async(), compact or multiline

        Returns:
            DotDocument with statements in document order

        Raises:
            ValueError: If the text is not a treeviz document
        """
        header = _HEADER.match(text)
        if header is None:
            raise ValueError("Document does not start with a digraph header")

        document = cls(name=header.group(1))
        position = header.end()
        while True:
            match = _STATEMENT.match(text, position)
            if match is None:
                break
            if match.group('node') is not None:
                document.label_statements.append((int(match.group('node')), match.group('label')))
                document.sequence.append("node")
            else:
                document.edge_statements.append((int(match.group('parent')), int(match.group('child'))))
                document.sequence.append("edge")
            position = match.end()

        closing = _CLOSING.fullmatch(text, position)
        if closing is None:
            raise ValueError(f"Unexpected content at offset {position}: {text[position:position + 40]!r}")
        return document

    @property
    def node_count(self) -> int:
        return len(self.label_statements)

    @property
    def edge_count(self) -> int:
        return len(self.edge_statements)

    @property
    def fingerprints(self) -> List[int]:
        """Node fingerprints in document order."""
        return [fingerprint for fingerprint, _ in self.label_statements]

    @property
    def labels(self) -> List[str]:
        """Escaped label texts in document order."""
        return [label for _, label in self.label_statements]

    @property
    def root(self) -> Optional[int]:
        """Fingerprint of the first declared node."""
        if not self.label_statements:
            return None
        return self.label_statements[0][0]

    def label_of(self, fingerprint: int) -> str:
        """Escaped label of a node.

        Raises:
            KeyError: If no node has this fingerprint
        """
        for candidate, label in self.label_statements:
            if candidate == fingerprint:
                return label
        raise KeyError(fingerprint)

    def children_of(self, fingerprint: int) -> List[int]:
        """Fingerprints of a node's children, in edge order."""
        return [child for parent, child in self.edge_statements if parent == fingerprint]

    def tree(self) -> Dict[int, List[int]]:
        """Adjacency mapping of every declared node to its children."""
        return {fingerprint: self.children_of(fingerprint) for fingerprint in self.fingerprints}

    def check_invariants(self) -> List[str]:
        """Check structural guarantees of a rendered tree.

        Returns:
            List of violations (empty if the document is consistent)
        """
        problems = []

        if len(set(self.fingerprints)) != self.node_count:
            problems.append("duplicate fingerprints in label statements")

        if self.node_count and self.edge_count != self.node_count - 1:
            problems.append(
                f"{self.edge_count} edge(s) for {self.node_count} node(s), expected {self.node_count - 1}"
            )

        # Edges must follow the label statements of both ends
        declared = set()
        label_index = 0
        edge_index = 0
        for kind in self.sequence:
            if kind == 'node':
                declared.add(self.label_statements[label_index][0])
                label_index += 1
            else:
                parent, child = self.edge_statements[edge_index]
                edge_index += 1
                if parent not in declared or child not in declared:
                    problems.append(f"edge {parent} -> {child} precedes a label statement")

        return problems

