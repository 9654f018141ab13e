"""Text sanitization for DOT output.

Graph names end up as bare identifiers and labels end up inside a quoted
attribute value, so both are cleaned before they reach the document.
Every function here is idempotent.
"""


def strip_non_ascii(text: str) -> str:
    """Remove every character outside the 7-bit ASCII range."""
    return "".join(ch for ch in text if ch.isascii())


def sanitize_graph_name(name: str) -> str:
    """Clean a graph name for use after the ``digraph`` keyword.

    Spaces and non-ASCII characters are removed. ASCII punctuation is kept
    as-is, so ``"My Graph!"`` becomes ``"MyGraph!"``.

    Args:
        name: Graph name as supplied by the caller

    Returns:
        Sanitized graph name (possibly empty)
    """
    return "".join(ch for ch in name if ch != " " and ch.isascii())


def sanitize_label(text: str) -> str:
    """Clean node display text for a quoted ``label`` attribute.

    Non-ASCII characters are stripped, then every unescaped double quote is
    prefixed with a backslash. A quote preceded by an odd run of backslashes
    is already escaped and left alone. A trailing odd run of backslashes is
    completed with one more so it cannot swallow the closing quote.

    Args:
        text: Display text of a node

    Returns:
        Text safe to embed between double quotes
    """
    out = []
    backslashes = 0
    for ch in strip_non_ascii(text):
        if ch == '"' and backslashes % 2 == 0:
            out.append("\\")
        out.append(ch)
        backslashes = backslashes + 1 if ch == "\\" else 0
    if backslashes % 2:
        out.append("\\")
    return "".join(out)
