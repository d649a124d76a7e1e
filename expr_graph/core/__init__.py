# expr_graph/core/__init__.py

"""
Core public API for the expression graph package.

Exports:
    ExprNode        : Scalar node of the expression graph.
    Operation       : Binary operation tag of a composite node.
    FrozenNodeError : Raised when a shared or collected node is mutated.
    new_leaf        : Create a leaf node.
    relabel         : Rename a node that is still private to its author.
    apply_unary     : Rewrite a private node's value with a transform.
    Arena           : Id-addressed weak registry of nodes.
    global_arena    : The default arena new nodes are registered in.
    use_arena       : Context manager to temporarily switch the active arena.
    collect, trace  : Deduplicating traversal returning a GraphSnapshot.
"""

from .node import ExprNode, Operation, FrozenNodeError, new_leaf, relabel, apply_unary
from .arena import Arena, global_arena, use_arena
from .collector import GraphSnapshot, collect, trace

__all__ = [
    "ExprNode", "Operation", "FrozenNodeError",
    "new_leaf", "relabel", "apply_unary",
    "Arena", "global_arena", "use_arena",
    "GraphSnapshot", "collect", "trace",
]
