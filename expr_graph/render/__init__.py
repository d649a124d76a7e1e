"""DOT export of collected expression graphs."""

from .dot import format_node, to_digraph, to_dot, render_graph

__all__ = ["format_node", "to_digraph", "to_dot", "render_graph"]
