# expr_graph/render/dot.py
from __future__ import annotations
from typing import Optional, Sequence, Union

from graphviz import Digraph

from ..config import RenderConfig
from ..core.node import ExprNode
from ..core.collector import GraphSnapshot, collect


def format_node(node: ExprNode, config: Optional[RenderConfig] = None) -> str:
    """Display text of a node: "label(value)", optionally followed by " | grad"."""
    config = config or RenderConfig()
    p = config.precision
    text = f"{node.label}({node.value:.{p}f})"
    if config.show_grad:
        text += f" | {node.grad:.{p}f}"
    return text


def _escape_record(text: str) -> str:
    # Characters with a meaning inside record labels
    for ch in ("\\", "{", "}", "|", "<", ">"):
        text = text.replace(ch, "\\" + ch)
    return text


def _op_node_name(node: ExprNode) -> str:
    return f"{node.id}_{node.operation.value}"


def to_digraph(snapshot: GraphSnapshot, config: Optional[RenderConfig] = None) -> Digraph:
    """
    Build a graphviz Digraph from a collected graph.

    Every node is named by its numeric id and labelled with format_node();
    every (from_id, to_id) edge becomes one DOT edge. With `show_operations`
    an operation node sits between the operands and the composite node.
    """
    config = config or RenderConfig()
    dot = Digraph(name=config.graph_name, graph_attr={"rankdir": config.rankdir})

    node_by_id = {}
    for node in snapshot.nodes:
        node_by_id[node.id] = node
        text = format_node(node, config)
        if config.node_shape == "record":
            text = _escape_record(text)
        dot.node(name=str(node.id), label=text, shape=config.node_shape)

        if config.show_operations and node.operation is not None:
            dot.node(name=_op_node_name(node), label=node.operation.symbol)
            dot.edge(_op_node_name(node), str(node.id))

    for src, dst in snapshot.edges:
        target = node_by_id.get(dst)
        if config.show_operations and target is not None and target.operation is not None:
            dot.edge(str(src), _op_node_name(target))
        else:
            dot.edge(str(src), str(dst))

    if config.verbose:
        print(f"DOT graph '{config.graph_name}': {len(snapshot.nodes)} nodes, "
              f"{len(snapshot.edges)} edges")
    return dot


def to_dot(snapshot: GraphSnapshot, config: Optional[RenderConfig] = None) -> str:
    """Return the DOT source text of a collected graph."""
    return to_digraph(snapshot, config).source


def render_graph(roots: Union[ExprNode, Sequence[ExprNode]],
                 config: Optional[RenderConfig] = None) -> str:
    """Collect the graph reachable from `roots` and return its DOT source."""
    return to_dot(collect(roots), config)
