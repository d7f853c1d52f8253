# nanograd/core/__init__.py

"""
Core public API for nanograd.

Exports:
    Value          : Scalar node of the computation graph.
    Op             : Tag of the operation that produced a Value.
    backward       : Run a single reverse pass from an output Value.
    zero_grad      : Reset grad on every node reachable from an output.
    topological_order : Reachable nodes, each before its parents.
    EngineConfig   : Engine switches (strict handling of dead references).
    use_config     : Context manager to temporarily switch the configuration.
    grad, grads, grads_list, value : Convenience seed helpers.
"""

from .value import Value, Op
from .errors import NanogradError, DanglingReferenceError
from .config import EngineConfig, get_config, set_config, use_config
from .engine import backward, zero_grad, topological_order
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Value", "Op",
    "NanogradError", "DanglingReferenceError",
    "EngineConfig", "get_config", "set_config", "use_config",
    "backward", "zero_grad", "topological_order",
    "grad", "grads", "grads_list", "value",
]
