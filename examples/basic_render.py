#!/usr/bin/env python3
"""
Basic example rendering a Python syntax tree as DOT.

This example demonstrates:
- Writing a custom adapter for an existing tree type (ast.AST)
- Rendering with the sync API
- Piping the result into GraphViz: python basic_render.py file.py | dot -Tsvg > out.svg
"""

import ast
import sys
from pathlib import Path
from typing import Any, List

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeviz.sync import TreeVizAdapter, RenderConfig, render


class AstAdapter(TreeVizAdapter):
    """Labels nodes with their type name plus the identifier, if any."""

    def get_label(self, node: ast.AST) -> str:
        name = getattr(node, 'name', None) or getattr(node, 'id', None) or getattr(node, 'arg', None)
        kind = type(node).__name__
        return f"{kind} {name}" if name else kind

    def get_children(self, node: ast.AST) -> List[Any]:
        return list(ast.iter_child_nodes(node))


def main():
    """Render the syntax tree of a source file (this file by default)."""
    source_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__)
    tree = ast.parse(source_path.read_text(), filename=str(source_path))

    print(render(source_path.stem, tree, adapter=AstAdapter(), config=RenderConfig.multiline()))


if __name__ == "__main__":
    main()
