# expr_graph/__init__.py
# Scalar expression graphs: construction, collection and DOT export

from .core.node import ExprNode, Operation, FrozenNodeError, new_leaf, relabel, apply_unary
from .core.arena import Arena, global_arena, use_arena
from .core.collector import GraphSnapshot, collect, trace
from .core.graph_utils import get_graph_stats, print_graph_summary, analyze_graph_complexity

from . import ops
from .ops import combine, add, mul, tanh, exp, relu, sigmoid

from .config import RenderConfig
from .render import format_node, to_digraph, to_dot, render_graph

__all__ = [
    # Core
    'ExprNode',
    'Operation',
    'FrozenNodeError',
    'new_leaf',
    'relabel',
    'apply_unary',
    'Arena',
    'global_arena',
    'use_arena',
    # Collector
    'GraphSnapshot',
    'collect',
    'trace',
    'get_graph_stats',
    'print_graph_summary',
    'analyze_graph_complexity',
    # Ops
    'ops',
    'combine',
    'add',
    'mul',
    'tanh',
    'exp',
    'relu',
    'sigmoid',
    # Rendering
    'RenderConfig',
    'format_node',
    'to_digraph',
    'to_dot',
    'render_graph',
]
