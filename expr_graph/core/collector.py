# expr_graph/core/collector.py
"""
Graph collection for expression nodes.

`collect` walks the graph reachable from one or more roots depth-first and
returns every node exactly once (first-discovery order) together with one
(operand_id, parent_id) edge per operand slot. The result is what the DOT
adapter in `expr_graph.render` consumes.
"""
from __future__ import annotations
import warnings
from typing import List, NamedTuple, Sequence, Tuple, Union

from .node import ExprNode

Edge = Tuple[int, int]


class GraphSnapshot(NamedTuple):
    """Collected graph: nodes in discovery order, edges as (from_id, to_id)."""
    nodes: List[ExprNode]
    edges: List[Edge]

    def node_ids(self) -> List[int]:
        return [n.id for n in self.nodes]


def _as_roots(roots) -> List[ExprNode]:
    if isinstance(roots, ExprNode):
        return [roots]
    roots = list(roots)
    for r in roots:
        if not isinstance(r, ExprNode):
            raise TypeError(f"collect() expects ExprNode roots, got {type(r)}")
    return roots


def collect(roots: Union[ExprNode, Sequence[ExprNode]]) -> GraphSnapshot:
    """
    Collect the deduplicated node list and the edge list reachable from `roots`.

    Args:
        roots: an ExprNode or a sequence of ExprNodes. Roots are processed in
               order and share one visited set, so sub-expressions common to
               several roots appear once.

    Returns:
        GraphSnapshot(nodes, edges)

    Notes:
        - For each node: mark visited, append it, then for each operand (in
          operand order) append the edge (operand.id, node.id) and descend
          into the operand unless it was already visited.
        - A shared operand yields one edge per referencing slot but a single
          entry in `nodes`.
        - The walk uses an explicit stack; the order is the same as the
          recursive formulation.
        - Every collected node is frozen afterwards.
    """
    nodes: List[ExprNode] = []
    edges: List[Edge] = []
    visited = set()
    on_path = set()
    cycle_reported = False

    for root in _as_roots(roots):
        if root.id in visited:
            continue
        visited.add(root.id)
        nodes.append(root)
        on_path.add(root.id)
        stack = [(root, iter(root.operands))]

        while stack:
            parent, operands = stack[-1]
            child = next(operands, None)
            if child is None:
                stack.pop()
                on_path.discard(parent.id)
                continue

            edges.append((child.id, parent.id))
            if child.id in visited:
                if child.id in on_path and not cycle_reported:
                    warnings.warn(
                        f"Cycle detected through node {child.id} ({child.label!r}); "
                        f"expression graphs are expected to be acyclic",
                        RuntimeWarning,
                        stacklevel=2,
                    )
                    cycle_reported = True
                continue

            visited.add(child.id)
            nodes.append(child)
            on_path.add(child.id)
            stack.append((child, iter(child.operands)))

    for node in nodes:
        node._freeze()
    return GraphSnapshot(nodes, edges)


def trace(root: ExprNode) -> GraphSnapshot:
    """Single-root shorthand for collect()."""
    return collect([root])
