from __future__ import annotations

import pytest
matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from complex_plot import animate_sequence, coordinates, plot_sequence


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.mark.unit
def test_coordinates_accept_mixed_inputs(make):
    xs, ys = coordinates([make(1, 2), 3 + 4j, (5, 6)])
    np.testing.assert_array_equal(xs, [1.0, 3.0, 5.0])
    np.testing.assert_array_equal(ys, [2.0, 4.0, 6.0])


@pytest.mark.unit
def test_coordinates_do_not_draw_ids(make, counter):
    values = [make(1, 2), make(3, 4)]
    before = counter.peek()
    coordinates(values)
    assert counter.peek() == before


@pytest.mark.unit
def test_empty_sequence_is_rejected():
    with pytest.raises(ValueError):
        coordinates([])


@pytest.mark.unit
def test_plot_sequence_draws_every_sample(make):
    values = [make(1, 0), make(0, 1), make(-3, 0)]
    points, trail = plot_sequence(values)
    np.testing.assert_array_equal(points.get_xdata(), [1.0, 0.0, -3.0])
    np.testing.assert_array_equal(trail.get_ydata(), [0.0, 1.0, 0.0])

    ax = points.axes
    low, high = ax.get_xlim()
    assert low < -3 and high > 3


@pytest.mark.unit
@pytest.mark.filterwarnings("ignore:Animation was deleted")
def test_animate_sequence_uses_given_axes(make):
    _, ax = plt.subplots()
    anim = animate_sequence([make(1, 0), make(0, 1)], interval=5, ax=ax)
    assert isinstance(anim, matplotlib.animation.FuncAnimation)
    assert ax.get_title() == "Complex number animation"
    assert len(ax.lines) == 2
