"""Exceptions raised by treeviz.

Rendering itself never fails for well-formed input. These errors report
inputs that break the node contract, i.e. objects an adapter cannot read
a label or children from.
"""


class TreeVizError(Exception):
    """Base class for all treeviz errors."""
    pass


class NodeCapabilityError(TreeVizError, TypeError):
    """Raised when a node lacks a capability its adapter requires."""

    def __init__(self, node, capability: str):
        self.node = node
        self.capability = capability
        super().__init__(
            f"{type(node).__name__} object does not provide '{capability}' "
            f"required for tree rendering"
        )
