"""
Rendering configuration for expression graphs.
"""

from dataclasses import dataclass

VALID_RANKDIRS = ("LR", "RL", "TB", "BT")


@dataclass
class RenderConfig:
    """Configuration for DOT export."""
    # Node text
    precision: int = 2          # decimals for value (and grad) display
    show_grad: bool = False     # append " | <grad>" to node text

    # Layout
    show_operations: bool = False  # insert an op node between operands and result
    rankdir: str = "LR"
    node_shape: str = "record"
    graph_name: str = "expression"

    # Logging
    verbose: bool = False

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 0:
            raise ValueError(f"precision must be a non-negative int, got {self.precision!r}")
        if self.rankdir not in VALID_RANKDIRS:
            raise ValueError(f"rankdir must be one of {VALID_RANKDIRS}, got {self.rankdir!r}")
