# nanograd/__init__.py
# Scalar reverse-mode automatic differentiation engine

from .core.value import Value, Op
from .core.errors import NanogradError, DanglingReferenceError
from .core.config import EngineConfig, get_config, set_config, use_config
from .core.engine import backward, zero_grad, topological_order
from .ops import relu

# Seed helpers and graph introspection
from .core.seeds import grad, grads, grads_list, value
from .core import graph_utils

__version__ = "0.1.0"

__all__ = [
    # Core
    'Value',
    'Op',
    'relu',
    # Engine
    'backward',
    'zero_grad',
    'topological_order',
    # Configuration / errors
    'EngineConfig',
    'get_config',
    'set_config',
    'use_config',
    'NanogradError',
    'DanglingReferenceError',
    # Seeds
    'grad',
    'grads',
    'grads_list',
    'value',
    'graph_utils',
]
