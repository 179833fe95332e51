from __future__ import annotations

import operator

import pytest
pytest.importorskip("hypothesis")
from hypothesis import assume, given, strategies as st

from complex import Complex
from id_counter import IdCounter

COUNTER = IdCounter()

components = st.one_of(
    st.integers(min_value=-1000, max_value=1000),
    st.fractions(min_value=-100, max_value=100, max_denominator=50),
)
values = st.builds(lambda re, im: Complex(re, im, counter=COUNTER), components, components)
floats = st.floats(min_value=-10, max_value=10, allow_nan=False, allow_infinity=False)
float_values = st.builds(lambda re, im: Complex(re, im, counter=COUNTER), floats, floats)
int_values = st.builds(
    lambda re, im: Complex(re, im, counter=COUNTER),
    st.integers(min_value=-1000, max_value=1000),
    st.integers(min_value=-1000, max_value=1000),
)


@pytest.mark.unit
@given(values, values)
def test_add_and_multiply_commute(a, b):
    assert a + b == b + a
    assert a * b == b * a


@pytest.mark.unit
@given(values, values, values)
def test_add_is_associative(a, b, c):
    assert (a + b) + c == a + (b + c)


@pytest.mark.unit
@given(values)
def test_additive_identity(a):
    assert a + Complex(0, 0, counter=COUNTER) == a


@pytest.mark.unit
@given(values)
def test_double_negation_and_conjugation(a):
    assert -(-a) == a
    assert a.conjugate().conjugate() == a


@pytest.mark.unit
@given(values, values)
def test_division_undoes_multiplication(a, b):
    assume(b.squared_magnitude() != 0)
    assert (a * b) / b == a


@pytest.mark.unit
@given(int_values, int_values)
def test_division_undoes_multiplication_for_integers(a, b):
    assume(b.squared_magnitude() != 0)
    assert (a * b) / b == a


@pytest.mark.unit
@given(float_values, float_values)
def test_division_undoes_multiplication_for_floats(a, b):
    assume(b.squared_magnitude() > 1e-6)
    assert (a * b) / b == a


@pytest.mark.unit
@given(values, values, st.sampled_from([
    (operator.iadd, operator.add),
    (operator.isub, operator.sub),
    (operator.imul, operator.mul),
    (operator.itruediv, operator.truediv),
]))
def test_in_place_equals_binary(a, b, ops):
    in_place, binary = ops
    if binary is operator.truediv:
        assume(b.squared_magnitude() != 0)
    expected = binary(a, b)
    in_place(a, b)
    assert (a.re, a.im) == (expected.re, expected.im)


@pytest.mark.unit
@given(st.integers(min_value=1, max_value=64))
def test_ids_strictly_increase(n):
    counter = IdCounter()
    ids = [Complex(i, i, counter=counter).id for i in range(n)]
    assert all(x < y for x, y in zip(ids, ids[1:]))
    assert len(set(ids)) == n
