from typing import Iterable, List, Tuple

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np

from complex import Complex

# ---------- configuration ----------
INTERVAL_MS = 200         # delay between animation frames
MARGIN_FRACTION = 0.1     # empty border around the data, as a share of the span

Point = Complex | complex | Tuple[float, float]


def coordinates(sequence: Iterable[Point]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split a sequence of complex samples into (xs, ys) float arrays.

    Accepts `Complex`, Python `complex`, or (re, im) tuples. No `Complex`
    instances are created, so plotting never draws ids from a counter.
    """
    xs: List[float] = []
    ys: List[float] = []
    for z in sequence:
        if isinstance(z, Complex):
            re, im = z.re, z.im
        elif isinstance(z, complex):
            re, im = z.real, z.imag
        else:
            re, im = z
        xs.append(float(re))
        ys.append(float(im))
    if not xs:
        raise ValueError("Cannot plot an empty sequence")
    return np.asarray(xs), np.asarray(ys)


def _prepare_axes(ax, xs: np.ndarray, ys: np.ndarray, title: str):
    # a square box centred on the origin that fits every sample
    span = max(np.abs(xs).max(), np.abs(ys).max(), 1.0)
    margin = MARGIN_FRACTION * span

    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.3)


def plot_sequence(sequence: Iterable[Point], ax=None):
    """
    Draw every sample as a point joined by a trail, on `ax` or a new figure.

    Returns (points, trail) – the two Line2D artists.
    """
    xs, ys = coordinates(sequence)
    if ax is None:
        _, ax = plt.subplots()
    _prepare_axes(ax, xs, ys, "Complex sequence")

    trail, = ax.plot(xs, ys, "b-", alpha=0.5, linewidth=1)
    points, = ax.plot(xs, ys, "ro", markersize=4)
    return points, trail


def animate_sequence(
    sequence: Iterable[Point],
    *,
    interval: int = INTERVAL_MS,
    ax=None,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex samples in the 2‑D plane.

    Parameters
    ----------
    sequence : iterable of `Complex`, Python `complex`, or (x,y) tuples
    interval : delay between frames in **ms**
    ax       : axes to draw on; a new figure is made when omitted

    Returns
    -------
    matplotlib.animation.FuncAnimation – call plt.show() or .save() on it.
    """
    xs, ys = coordinates(sequence)
    if ax is None:
        _, ax = plt.subplots()
    _prepare_axes(ax, xs, ys, "Complex number animation")

    point, = ax.plot([], [], "ro", markersize=6)
    trail, = ax.plot([], [], "b-", alpha=0.5, linewidth=1)

    def init():
        point.set_data([], [])
        trail.set_data([], [])
        return point, trail

    def update(frame: int):
        point.set_data([xs[frame]], [ys[frame]])
        trail.set_data(xs[:frame + 1], ys[:frame + 1])
        return point, trail

    return animation.FuncAnimation(
        ax.figure,
        update,
        frames=len(xs),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )


if __name__ == "__main__":
    # unit step of angle ≈ 2t radians, built from a rational parametrisation
    t = 0.01
    step = Complex((1 - t * t) / (1 + t * t), 2 * t / (1 + t * t))
    z = Complex(1.0, 0.0)
    samples = [z.copy()]
    for _ in range(320):
        z *= step
        samples.append(z.copy())
    anim = animate_sequence(samples, interval=1)
    plt.show()
