import numpy as np
import pytest

from nanograd import Value
from nanograd.nn import MLP, Layer, Neuron


def test_linear_neuron_matches_affine_sum():
    n = Neuron(3, nonlin=False, rng=np.random.default_rng(0))
    x = [1.0, -2.0, 0.5]
    out = n(x)
    expected = sum(w.data * xi for w, xi in zip(n.w, x)) + n.b.data
    assert out.data == pytest.approx(expected)

    out.backward()
    for w, xi in zip(n.w, x):
        assert w.grad == pytest.approx(xi)
    assert n.b.grad == 1.0


def test_relu_neuron_is_non_negative():
    rng = np.random.default_rng(1)
    for _ in range(10):
        n = Neuron(4, rng=rng)
        assert n(list(rng.uniform(-1, 1, size=4))).data >= 0.0


def test_weights_in_unit_interval_and_zero_bias():
    n = Neuron(50, rng=np.random.default_rng(2))
    assert all(-1.0 <= w.data < 1.0 for w in n.w)
    assert n.b.data == 0.0


def test_layer_output_shape():
    rng = np.random.default_rng(3)
    assert isinstance(Layer(2, 1, rng=rng)([1.0, 2.0]), Value)
    outs = Layer(2, 3, rng=rng)([1.0, 2.0])
    assert len(outs) == 3


def test_mlp_parameters_and_backward():
    model = MLP(3, [4, 4, 1], rng=np.random.default_rng(4))
    params = model.parameters()
    assert len(params) == 4 * (3 + 1) + 4 * (4 + 1) + 1 * (4 + 1)
    assert not model.layers[-1].neurons[0].nonlin

    out = model([2.0, 3.0, -1.0])
    assert isinstance(out, Value)
    loss = out * out
    loss.backward()
    # the output bias always receives d(loss)/d(out) = 2 * out
    assert model.layers[-1].neurons[0].b.grad == pytest.approx(2.0 * out.data)

    model.zero_grad()
    assert all(p.grad == 0.0 for p in params)


def test_mlp_with_single_neuron_hidden_layer():
    model = MLP(2, [1, 2], rng=np.random.default_rng(5))
    outs = model([0.5, -0.5])
    assert len(outs) == 2


def test_invalid_sizes():
    with pytest.raises(ValueError):
        Neuron(0)
    with pytest.raises(ValueError):
        Layer(2, 0)
    with pytest.raises(ValueError):
        MLP(2, [])
    with pytest.raises(ValueError):
        Neuron(2, rng=np.random.default_rng(6))([1.0])


def test_reprs():
    model = MLP(2, [1], rng=np.random.default_rng(7))
    assert repr(model) == "MLP of [Layer of [LinearNeuron(2)]]"
    assert repr(Neuron(3)) == "ReLUNeuron(3)"
