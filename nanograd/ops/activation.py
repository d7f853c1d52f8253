# nanograd/ops/activation.py
import numpy as np
from ..core.value import Op, Value
from ..core.engine import make_rule
from .arithmetic import _as_value


def _relu_backward(out, a):
    # subgradient at exactly 0 is taken as 0
    a.grad += out.grad if a.data > 0 else 0.0


def relu(x):
    """
    Rectified linear unit: out.data = max(x.data, 0).
    A nan input maps to 0 (the comparison x > 0 is False).
    """
    x = _as_value(x)
    data = x.data if x.data > 0 else np.float64(0.0)
    out = Value.with_parents(data, (x,), Op.RELU)
    out._backward = make_rule(Op.RELU, _relu_backward, out, x)
    return out
