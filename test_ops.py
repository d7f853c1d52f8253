import math
import warnings

import numpy as np
import pytest

from nanograd import Op, Value, relu
from nanograd.ops import add, div, mul, sub


@pytest.mark.parametrize("x, y", [(2.0, 3.0), (-1.5, 4.25), (0.0, 7.0), (1e6, -1e-3)])
def test_add(x, y):
    a, b = Value(x), Value(y)
    out = a + b
    assert out.data == x + y
    assert out.op is Op.ADD
    out.backward()
    assert a.grad == 1.0
    assert b.grad == 1.0


@pytest.mark.parametrize("x, y", [(2.0, 3.0), (-1.5, 4.25), (1e6, -1e-3)])
def test_mul(x, y):
    a, b = Value(x), Value(y)
    out = a * b
    assert out.data == x * y
    assert out.op is Op.MUL
    out.backward()
    assert a.grad == y
    assert b.grad == x


def test_sub_is_ordered():
    a, b = Value(10.0), Value(4.0)
    out = a - b
    assert out.data == 6.0
    assert out.op is Op.SUB
    assert out.parents == (a, b)
    out.backward()
    assert a.grad == 1.0
    assert b.grad == -1.0


@pytest.mark.parametrize("x, y", [(3.0, 4.0), (-2.0, 0.5), (1.0, -8.0)])
def test_div(x, y):
    a, b = Value(x), Value(y)
    out = a / b
    assert out.data == x / y
    assert out.op is Op.DIV
    assert out.parents[0] is a
    out.backward()
    assert a.grad == pytest.approx(1.0 / y)
    assert b.grad == pytest.approx(-x / y ** 2)


def test_div_by_zero_follows_ieee():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        pos = Value(1.0) / Value(0.0)
        neg = Value(-1.0) / Value(0.0)
        nan = Value(0.0) / Value(0.0)
        assert pos.data == math.inf
        assert neg.data == -math.inf
        assert math.isnan(nan.data)

        a, b = Value(1.0), Value(0.0)
        out = a / b
        out.backward()
        assert a.grad == math.inf
        assert b.grad == -math.inf


def test_relu_positive_and_negative():
    a = Value(2.5)
    out = relu(a)
    assert out.data == 2.5
    assert out.op is Op.RELU
    assert out.parents == (a,)
    out.backward()
    assert a.grad == 1.0

    b = Value(-2.5)
    out = b.relu()
    assert out.data == 0.0
    out.backward()
    assert b.grad == 0.0


def test_relu_at_zero_has_zero_subgradient():
    a = Value(0.0)
    out = a.relu()
    out.backward()
    assert out.data == 0.0
    assert a.grad == 0.0


def test_relu_of_nan_is_zero():
    out = Value(float("nan")).relu()
    assert out.data == 0.0


def test_plain_numbers_are_wrapped():
    x = Value(4.0)
    y = 2 * x + 1
    y.backward()
    assert y.data == 9.0
    assert x.grad == 2.0

    x = Value(4.0)
    y = 1 / x
    y.backward()
    assert y.data == 0.25
    assert x.grad == pytest.approx(-1.0 / 16.0)

    x = Value(4.0)
    y = 10 - x
    y.backward()
    assert y.data == 6.0
    assert x.grad == -1.0

    x = Value(4.0)
    y = x / 8
    y.backward()
    assert y.data == 0.5
    assert x.grad == 0.125


def test_function_forms_match_operators():
    a, b = Value(6.0), Value(3.0)
    assert add(a, b).data == 9.0
    assert sub(a, b).data == 3.0
    assert mul(a, b).data == 18.0
    assert div(a, b).data == 2.0
    assert add(a, 1).parents[1].is_leaf


def test_unsupported_operands_raise_type_error():
    with pytest.raises(TypeError):
        Value(1.0) + "x"
    with pytest.raises(TypeError):
        [1.0] * Value(1.0)
    with pytest.raises(TypeError):
        add(Value(1.0), None)


def test_leaf_construction():
    v = Value(3)
    assert v.data == 3.0
    assert v.grad == 0.0
    assert v.op is Op.INIT
    assert v.parents == ()
    assert v.is_leaf
    assert v._backward is None
    assert Value(np.float32(1.5)).data == 1.5


@pytest.mark.parametrize("bad", ["1.0", None, True, [1.0], np.array([1.0, 2.0])])
def test_leaf_rejects_non_scalars(bad):
    with pytest.raises(TypeError):
        Value(bad)


def test_data_is_read_only():
    v = Value(1.0)
    with pytest.raises(AttributeError):
        v.data = 2.0


def test_with_parents_leaves_rule_unset():
    a, b = Value(1.0), Value(2.0)
    out = Value.with_parents(3.0, [a, b], Op.ADD)
    assert out.parents == (a, b)
    assert out.op is Op.ADD
    assert out._backward is None
    with pytest.raises(TypeError):
        Value.with_parents(3.0, [a, 2.0], Op.ADD)


def test_repr_and_display_parents():
    a = Value(5.0)
    c = a + Value(7.0)
    assert repr(a) == "Value(data=5.0, grad=0.0, op=Init)"
    assert str(c) == "Value(data=12.0, grad=0.0, op=Add)"
    assert c.display_parents() == "Value(data=5.0), Value(data=7.0)"
    assert a.display_parents() == ""
    assert str(c.relu()) == "Value(data=12.0, grad=0.0, op=ReLU)"
