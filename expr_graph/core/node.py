# expr_graph/core/node.py
from __future__ import annotations
import numbers
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from . import arena as arena_mod  # Use module access for use_arena() compatibility


class Operation(Enum):
    """Binary operation that produced a composite node."""
    ADD = "add"
    MUL = "mul"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operation.ADD: "+",
    Operation.MUL: "*",
}


class FrozenNodeError(ValueError):
    """Raised when a node is mutated after it was shared or collected."""


def _check_real(value, what: str = "ExprNode"):
    # bool is an Integral, but never a meaningful graph value
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(
            f"{what} only accepts real numbers (int, float, numpy scalar), "
            f"but got {type(value)}"
        )


class ExprNode:
    """
    Node of a scalar expression graph.

    Attributes
    ----------
    id : int
        Process-unique identity, allocated from a monotonically increasing
        counter. Deduplication and edge endpoints use it exclusively.
    label : str
        Display name. Composite nodes derive it from their operands.
    value : float
        Scalar value, computed eagerly for composite nodes.
    grad : float
        Gradient slot. Always 0.0: no backward pass populates it.
    operation : Optional[Operation]
        None for leaves.
    operands : Tuple[ExprNode, ...]
        Shared references to the nodes this one was computed from.

    Equality and hashing are identity based. A node becomes frozen once it is
    used as an operand or passed to the collector; frozen nodes reject
    `relabel` and `apply`.
    """

    def __init__(self, value, label: str = "", *,
                 operation: Optional[Operation] = None,
                 operands: Sequence["ExprNode"] = ()):
        _check_real(value)
        operands = tuple(operands)
        if operation is not None and not isinstance(operation, Operation):
            raise TypeError(f"operation must be an Operation or None, got {type(operation)}")
        for x in operands:
            if not isinstance(x, ExprNode):
                raise TypeError(f"operands must be ExprNodes, got {type(x)}")
        if bool(operands) != (operation is not None):
            raise ValueError("a node has operands if and only if it has an operation")

        self._value = float(value)
        self._label = str(label)
        self._operation = operation
        self._operands: Tuple[ExprNode, ...] = operands
        self._frozen = False
        for x in operands:
            x._freeze()
        self.id = arena_mod.global_arena.register(self)

    # Read-only views; relabel() and apply() are the only writers
    @property
    def value(self) -> float:
        return self._value

    @property
    def label(self) -> str:
        return self._label

    @property
    def operation(self) -> Optional[Operation]:
        return self._operation

    @property
    def grad(self) -> float:
        return 0.0

    @property
    def operands(self) -> Tuple["ExprNode", ...]:
        return self._operands

    @property
    def is_leaf(self) -> bool:
        return self.operation is None

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _freeze(self):
        self._frozen = True

    def _check_mutable(self, action: str):
        if self._frozen:
            raise FrozenNodeError(
                f"cannot {action} node {self.id} ({self.label!r}): it is already "
                f"shared by a composite or was handed to the collector"
            )

    # Authoring-time mutation
    def relabel(self, label: str):
        self._check_mutable("relabel")
        self._label = str(label)

    def apply(self, transform: Callable[[float], float]):
        """Rewrite the value in place: value = transform(value)."""
        self._check_mutable("transform")
        result = transform(self._value)
        _check_real(result, what="transform result")
        self._value = float(result)

    # Nodes are identity objects: a copy is the same node
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        op = self.operation.value if self.operation is not None else "leaf"
        return f"ExprNode(id={self.id}, label={self.label!r}, value={self.value!r}, op={op})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)


def new_leaf(value, label: str) -> ExprNode:
    """Create a leaf node: fresh id, no operation, no operands."""
    return ExprNode(value, label)


def relabel(node: ExprNode, label: str):
    node.relabel(label)


def apply_unary(node: ExprNode, transform: Callable[[float], float]):
    node.apply(transform)
