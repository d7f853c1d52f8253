# nanograd/nn.py
"""
Minimal neural-network layers built from nanograd Values.

Only forward evaluation and parameter bookkeeping live here; gradients come
from calling backward() on whatever scalar the caller builds from the outputs.
"""
from __future__ import annotations
from typing import List, Optional, Sequence
import numpy as np

from .core.value import Value


class Module:

    def parameters(self) -> List[Value]:
        return []

    def zero_grad(self):
        for p in self.parameters():
            p.grad = np.float64(0.0)


class Neuron(Module):
    """
    One unit: relu(w · x + b), or the bare affine sum when nonlin=False.

    Weights are drawn from U[-1, 1) with `rng` (a numpy Generator); the
    bias starts at 0.
    """

    def __init__(self, nin: int, nonlin: bool = True, rng: Optional[np.random.Generator] = None):
        if nin <= 0:
            raise ValueError(f"Neuron needs at least one input, got nin={nin}")
        rng = rng if rng is not None else np.random.default_rng()
        self.w = [Value(w) for w in rng.uniform(-1.0, 1.0, size=nin)]
        self.b = Value(0.0)
        self.nonlin = nonlin

    def __call__(self, x: Sequence):
        if len(x) != len(self.w):
            raise ValueError(f"expected {len(self.w)} inputs, got {len(x)}")
        act = sum((wi * xi for wi, xi in zip(self.w, x)), self.b)
        return act.relu() if self.nonlin else act

    def parameters(self) -> List[Value]:
        return self.w + [self.b]

    def __repr__(self):
        return f"{'ReLU' if self.nonlin else 'Linear'}Neuron({len(self.w)})"


class Layer(Module):

    def __init__(self, nin: int, nout: int, **kwargs):
        if nout <= 0:
            raise ValueError(f"Layer needs at least one neuron, got nout={nout}")
        self.neurons = [Neuron(nin, **kwargs) for _ in range(nout)]

    def __call__(self, x: Sequence):
        outs = [n(x) for n in self.neurons]
        return outs[0] if len(outs) == 1 else outs

    def parameters(self) -> List[Value]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """Stack of fully connected layers; ReLU between layers, linear output."""

    def __init__(self, nin: int, nouts: Sequence[int], rng: Optional[np.random.Generator] = None):
        if not nouts:
            raise ValueError("MLP needs at least one layer size")
        rng = rng if rng is not None else np.random.default_rng()
        sizes = [nin] + list(nouts)
        self.layers = [
            Layer(sizes[i], sizes[i + 1], nonlin=i != len(nouts) - 1, rng=rng)
            for i in range(len(nouts))
        ]

    def __call__(self, x: Sequence):
        for layer in self.layers:
            # single-neuron layers hand back a bare Value
            x = layer([x] if isinstance(x, Value) else x)
        return x

    def parameters(self) -> List[Value]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
