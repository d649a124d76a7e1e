# expr_graph/core/arena.py
from __future__ import annotations
import itertools
import weakref
from typing import Iterator, List, Optional
from contextlib import contextmanager

# One counter for the whole process: ids never repeat, even across arenas.
_ID_COUNTER = itertools.count()


def next_id() -> int:
    return next(_ID_COUNTER)


class Arena:
    """
    Registry of expression nodes addressed by their id.

    The arena only holds weak references: a node lives as long as the caller
    or some parent composite still refers to it.
    """
    def __init__(self):
        self._nodes = weakref.WeakValueDictionary()

    def reset(self):
        self._nodes.clear()

    def register(self, node) -> int:
        """
        Allocate a fresh id for `node`, record it and return the id.
        """
        node_id = next_id()
        self._nodes[node_id] = node
        return node_id

    def get(self, node_id: int):
        return self._nodes.get(node_id)

    def ids(self) -> List[int]:
        return sorted(self._nodes.keys())

    def __contains__(self, node_id) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator:
        for node_id in self.ids():
            node = self._nodes.get(node_id)
            if node is not None:
                yield node


# Global default arena
global_arena = Arena()

@contextmanager
def use_arena(arena: Optional[Arena] = None):
    """
    Context manager to temporarily register new nodes in another arena:
        with use_arena() as arena:
            ... build expressions ...
            len(arena)
    """
    from . import arena as _arena_mod  # local import, module attribute is swapped
    prev = _arena_mod.global_arena
    try:
        _arena_mod.global_arena = arena if arena is not None else Arena()
        yield _arena_mod.global_arena
    finally:
        _arena_mod.global_arena = prev
