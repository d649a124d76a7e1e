# expr_graph/ops/arithmetic.py
from ..core.node import ExprNode, Operation, _check_real

_KERNELS = {
    Operation.ADD: lambda a, b: a + b,
    Operation.MUL: lambda a, b: a * b,
}

def _as_operation(op):
    if isinstance(op, Operation):
        return op
    try:
        return Operation(op)
    except ValueError:
        raise ValueError(
            f"Unknown operation {op!r}; expected one of "
            f"{[o.value for o in Operation]}"
        ) from None

def _as_node(x):
    """Ensure x is an ExprNode; otherwise wrap a plain number as a constant leaf."""
    if isinstance(x, ExprNode):
        return x
    _check_real(x, what="operand")
    return ExprNode(x, f"{float(x):g}")

def combine(op, left, right):
    """
    Generic binary primitive:
      - computes out.value = op(left.value, right.value) eagerly
      - derives out.label = "[<left><symbol><right>]"
      - links (left, right) as shared operands (the constructor freezes them)
    """
    op = _as_operation(op)
    for name, x in (("left", left), ("right", right)):
        if not isinstance(x, ExprNode):
            raise TypeError(f"combine() {name} operand must be an ExprNode, got {type(x)}")

    out = ExprNode(
        _KERNELS[op](left.value, right.value),
        f"[{left.label}{op.symbol}{right.label}]",
        operation=op,
        operands=(left, right),
    )
    return out

def add(x, y): return combine(Operation.ADD, _as_node(x), _as_node(y))
def mul(x, y): return combine(Operation.MUL, _as_node(x), _as_node(y))
