# nanograd/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .value import Value
from .engine import backward, zero_grad


def value(x: Any) -> Any:
    """Return the numeric data of a Value; pass through plain numbers unchanged."""
    return x.data if isinstance(x, Value) else x


def _ensure_value(v: Any) -> Value:
    """Wrap a plain number as a leaf Value if needed; otherwise return it as is."""
    return v if isinstance(v, Value) else Value(v)


def _run(y: Any) -> None:
    # A function that ignores its inputs may hand back a plain number
    y = _ensure_value(y)
    zero_grad(y)
    backward(y)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Value], Any], x0: Any):
    """
    Derivative of y = f(x) at x0, from one reverse pass.

    Example
    -------
    grad(lambda x: x * x + 3 * x, 2.0) -> 7.0
    """
    x = _ensure_value(x0)
    x.grad = 0.0
    _run(f(x))
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Value]], Any], inputs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Gradient of y = f(vars) w.r.t. ALL inputs (dict form), from ONE reverse pass.

    Parameters
    ----------
    f       : function taking a dict {name: Value} and returning a Value
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: gradient}  # same key order as `inputs`
    """
    vars_v: Dict[str, Value] = {k: _ensure_value(v) for k, v in inputs.items()}
    for v in vars_v.values():
        v.grad = 0.0
    _run(f(vars_v))
    return {k: vars_v[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Value]], Any], x0_list: Iterable[Any]) -> List[Any]:
    """
    Same as grads(), but inputs are given as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Value] = [_ensure_value(v) for v in x0_list]
    for x in xs:
        x.grad = 0.0
    _run(f(xs))
    return [x.grad for x in xs]
