# nanograd/ops/arithmetic.py
import numpy as np
from ..core.value import Op, Value, is_scalar
from ..core.engine import make_rule


def _as_value(x):
    """Ensure x is a Value; otherwise wrap a plain number as a leaf."""
    if isinstance(x, Value):
        return x
    if is_scalar(x):
        return Value(x)
    raise TypeError(f"unsupported operand type for nanograd ops: {type(x)}")


def _binary(x, y, f, propagate, op):
    """
    Generic binary primitive:
      - computes out.data = f(x.data, y.data) with IEEE float64 semantics
        (x/0 gives inf or nan, never an exception)
      - records (x, y) as parents, left operand first
      - attaches the backward rule built from `propagate(out, x, y)`
    """
    x = _as_value(x)
    y = _as_value(y)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        data = f(x.data, y.data)
    out = Value.with_parents(data, (x, y), op)
    out._backward = make_rule(op, propagate, out, x, y)
    return out


# --------- local gradient rules: p.grad += ∂out/∂p * out.grad ---------

def _add_backward(out, a, b):
    a.grad += out.grad
    b.grad += out.grad


def _sub_backward(out, a, b):
    a.grad += out.grad
    b.grad -= out.grad


def _mul_backward(out, a, b):
    a.grad += b.data * out.grad
    b.grad += a.data * out.grad


def _div_backward(out, a, b):
    # ∂(a/b)/∂a = 1/b,  ∂(a/b)/∂b = -a/b^2
    a.grad += out.grad / b.data
    b.grad += -a.data * out.grad / (b.data * b.data)


def add(x, y): return _binary(x, y, lambda a, b: a + b, _add_backward, Op.ADD)
def sub(x, y): return _binary(x, y, lambda a, b: a - b, _sub_backward, Op.SUB)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, _mul_backward, Op.MUL)
def div(x, y): return _binary(x, y, lambda a, b: a / b, _div_backward, Op.DIV)
