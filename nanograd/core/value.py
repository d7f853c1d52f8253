# nanograd/core/value.py
from __future__ import annotations
from enum import Enum
from typing import Callable, Iterable, Optional, Tuple
import numpy as np

# Numeric scalars accepted as leaf data (bool is rejected explicitly below)
_SCALAR_TYPES = (int, float, np.integer, np.floating)


class Op(Enum):
    """Operation that produced a Value. INIT marks a leaf."""
    INIT = "Init"
    ADD = "Add"
    MUL = "Mul"
    DIV = "Div"
    SUB = "Sub"
    RELU = "ReLU"

    def __str__(self):
        return self.value


def is_scalar(x) -> bool:
    return isinstance(x, _SCALAR_TYPES) and not isinstance(x, (bool, np.bool_))


class Value:
    """
    Scalar node of the computation graph for reverse-mode AD.

    Attributes
    ----------
    data : np.float64
        Forward value; read-only once the node exists.
    grad : np.float64
        Gradient accumulator. Every consumer adds its contribution here
        during backward().
    op : Op
        Operation that produced this node (Op.INIT for leaves).
    parents : tuple[Value, ...]
        Direct operands, left/numerator first. Held strongly: a node keeps
        its whole ancestry alive.
    """

    __array_priority__ = 1000  # numpy scalars defer to Value's reflected operators

    def __init__(self, data):
        # Only plain real scalars; arrays, sequences and bools are not values
        if not is_scalar(data):
            raise TypeError(
                f"Value only accepts real scalars (int, float, numpy number), "
                f"but got {type(data)}"
            )
        self._data = np.float64(data)
        self.grad = np.float64(0.0)
        self._op = Op.INIT
        self._prev: Tuple[Value, ...] = ()
        # Set by the producing operator; consumed by backward()
        self._backward: Optional[Callable[[], None]] = None

    @classmethod
    def with_parents(cls, data, parents: Iterable[Value], op: Op) -> Value:
        """
        Build a derived node holding `parents` with the given op tag.
        The backward rule is left unset; the operator attaches it.
        """
        parents = tuple(parents)
        for p in parents:
            if not isinstance(p, Value):
                raise TypeError(f"parents must be Values, but got {type(p)}")
        out = cls(data)
        out._prev = parents
        out._op = op
        return out

    @property
    def data(self) -> np.float64:
        return self._data

    @property
    def op(self) -> Op:
        return self._op

    @property
    def parents(self) -> Tuple[Value, ...]:
        return self._prev

    @property
    def is_leaf(self) -> bool:
        return not self._prev

    def backward(self):
        """Propagate d(self)/d(node) into `grad` of every ancestor."""
        from .engine import backward
        backward(self)

    def relu(self) -> Value:
        from ..ops.activation import relu
        return relu(self)

    def display_parents(self) -> str:
        return ", ".join(f"Value(data={p.data})" for p in self._prev)

    def __repr__(self):
        return f"Value(data={self.data}, grad={self.grad}, op={self.op})"

    # Operator overloading; plain numbers are wrapped as leaves by the ops
    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import div
        return div(other, self)


def _is_operand(x) -> bool:
    return isinstance(x, Value) or is_scalar(x)
