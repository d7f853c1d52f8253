# nanograd/ops/__init__.py

# Convenience re-exports so users can do: from nanograd.ops import mul, relu, ...
from .arithmetic import add, sub, mul, div
from .activation import relu

__all__ = [
    "add", "sub", "mul", "div",
    "relu",
]
