# nanograd/core/engine.py
from __future__ import annotations
import logging
import weakref
from typing import Callable, List
import numpy as np
from .config import get_config
from .errors import DanglingReferenceError
from .value import Op, Value

logger = logging.getLogger(__name__)


def topological_order(output: Value) -> List[Value]:
    """
    Every node reachable from `output` through parent links, ordered so that
    each node comes before all of its parents (output first).

    Nodes are deduplicated by identity, so a sub-expression reused along
    several paths (x + x, diamonds) appears once. The walk uses an explicit
    stack: each node is emitted only after all of its parents have been
    emitted (post-order), and the reversed emission order is the result.
    """
    order: List[Value] = []
    visited = set()
    stack = [(output, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            # all parents already emitted
            order.append(node)
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, True))
        # reversed so the left operand is expanded first
        for parent in reversed(node.parents):
            if id(parent) not in visited:
                stack.append((parent, False))
    order.reverse()
    return order


def backward(output: Value):
    """
    Run a single reverse pass from `output`.

    Seeds output.grad = 1, then invokes each node's backward rule exactly
    once, in reverse-topological order, so a node's grad is complete before
    it is pushed to its parents. Rules are detached as they run; calling
    backward() again on the same graph re-seeds the output but applies no
    rule twice.

    Notes:
        - Parents accumulate: p.grad += (∂out/∂p) * out.grad.
        - Gradients are not reset here; see zero_grad().
    """
    order = topological_order(output)
    logger.debug("backward: %d nodes reachable from %r", len(order), output)

    # Seed: d(output)/d(output) = 1
    output.grad = np.float64(1.0)

    for node in order:
        rule, node._backward = node._backward, None
        if rule is not None:
            rule()


def zero_grad(output: Value):
    """Set grad to zero on every node reachable from `output`."""
    for node in topological_order(output):
        node.grad = np.float64(0.0)


def _resolve(ref: weakref.ref, op: Op, role: str):
    node = ref()
    if node is None:
        if get_config().strict:
            raise DanglingReferenceError(str(op), role)
        logger.debug("skipping %s contribution: %s node already reclaimed", op, role)
    return node


def make_rule(op: Op, propagate: Callable[..., None], out: Value, *parents: Value) -> Callable[[], None]:
    """
    Wrap `propagate(out, *parents)` into a zero-argument backward rule.

    The rule holds `out` and `parents` only through weak references: `out`
    already owns its parents strongly and owns the rule itself, so strong
    captures would tie every node into a reference cycle. If any reference
    has died by the time the rule runs, the whole contribution is skipped,
    or DanglingReferenceError is raised under EngineConfig(strict=True).
    """
    out_ref = weakref.ref(out)
    parent_refs = tuple(weakref.ref(p) for p in parents)

    def _backward():
        out_node = _resolve(out_ref, op, "output")
        nodes = [_resolve(r, op, "operand") for r in parent_refs]
        if out_node is None or any(n is None for n in nodes):
            return
        # IEEE semantics for grads through x/0 (inf/nan, no warnings)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            propagate(out_node, *nodes)

    return _backward
