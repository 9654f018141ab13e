"""DOT statement formatting and document assembly.

Serializers produce raw statements with the helpers below and hand the
joined body to assemble_document, which adds the header and closing brace
and normalizes the text.
"""

from typing import List

from .sanitize import sanitize_graph_name, sanitize_label


STATEMENT_TERMINATOR = ";"
CLOSING_BRACE = "}"


def graph_header(graph_name: str) -> str:
    """Opening line of a directed graph, with the name sanitized."""
    return f"digraph {sanitize_graph_name(graph_name)} {{"


def label_statement(fingerprint: int, label: str) -> str:
    """Node statement carrying the sanitized display text."""
    return f'{fingerprint} [label="{sanitize_label(label)}"]{STATEMENT_TERMINATOR}'


def edge_statement(parent: int, child: int) -> str:
    """Directed edge from parent to child."""
    return f"{parent} -> {child}{STATEMENT_TERMINATOR}"


def normalize_lines(text: str) -> List[str]:
    """Split text into trimmed lines, dropping empty and bare ``;`` lines.

    Args:
        text: Raw document text

    Returns:
        Normalized lines in original order
    """
    lines = []
    for line in text.split("\n"):
        line = line.strip()
        if line and line != STATEMENT_TERMINATOR:
            lines.append(line)
    return lines


def assemble_document(graph_name: str, body: str, line_separator: str = "") -> str:
    """Build the final DOT document.

    Args:
        graph_name: Unsanitized graph name
        body: Newline-joined statements
        line_separator: Joins the normalized lines; ``""`` gives a single line

    Returns:
        Complete document ending with the closing brace
    """
    lines = normalize_lines(f"{graph_header(graph_name)}\n{body}")
    lines.append(CLOSING_BRACE)
    return line_separator.join(lines)
