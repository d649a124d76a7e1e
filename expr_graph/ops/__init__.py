# expr_graph/ops/__init__.py

from .arithmetic import combine, add, mul
from .transcendental import tanh, exp, relu, sigmoid

__all__ = [
    "combine", "add", "mul",
    "tanh", "exp", "relu", "sigmoid",
]
