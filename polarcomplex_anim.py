import logging
import math
from typing import Iterable, List

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np

from polarcomplex import Complex

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
INTERVAL_MS   = 200              # delay between frames
MARGIN        = 0.1              # axis padding, fraction of the span
POINT_STYLE   = "ro"
TRAIL_STYLE   = "b-"
TRAIL_ALPHA   = 0.5

logger = logging.getLogger(__name__)


def to_points(sequence: Iterable[Complex | complex | tuple[float, float]]) -> np.ndarray:
    """
    Collect complex samples into an (n, 2) array of (real, imag) rows.

    Parameters
    ----------
    sequence : iterable of `Complex`, Python `complex`, or (x, y) tuples
    """
    rows = []
    for z in sequence:
        if isinstance(z, (Complex, complex)):
            rows.append((z.real, z.imag))
        else:
            x, y = z
            rows.append((x, y))
    if not rows:
        raise ValueError("Cannot plot an empty sequence")
    return np.asarray(rows, dtype=float)


def rotation_sequence(start: Complex, step: Complex, count: int) -> List[Complex]:
    """Return `count` snapshots of `start` repeatedly multiplied by `step`."""
    z = start.copy()
    out = [z.copy()]
    for _ in range(count - 1):
        out.append(z.mul(step).copy())
    return out


def animate_complex(
    sequence: Iterable[Complex | complex | tuple[float, float]],
    *,
    interval: int = INTERVAL_MS,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex‑number samples in the 2‑D plane.

    Parameters
    ----------
    sequence : iterable of `Complex`, Python `complex`, or (x,y) tuples
    interval : delay between frames in **ms**
    show     : call plt.show() before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – handy if you need to save().
    """
    points = to_points(sequence)

    # Pre‑compute limits for a clean box that fits everything
    finite = points[np.isfinite(points).all(axis=1)]
    span = max(float(np.abs(finite).max()) if finite.size else 0.0, 1.0)
    margin = MARGIN * span

    fig, ax = plt.subplots()
    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title("Complex number animation")
    ax.grid(True, linestyle="--", alpha=0.3)

    point, = ax.plot([], [], POINT_STYLE, markersize=6)
    trail, = ax.plot([], [], TRAIL_STYLE, alpha=TRAIL_ALPHA, linewidth=1)

    def init():
        point.set_data([], [])
        trail.set_data([], [])
        return point, trail

    def update(frame: int):
        x, y = points[frame]
        point.set_data([x], [y])
        trail.set_data(points[:frame + 1, 0], points[:frame + 1, 1])
        ax.set_title(f"t = {frame}  |  z = {x:+.3f} {y:+.3f}i")
        return point, trail

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(points),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )
    logger.info("built animation with %d frames", len(points))
    if show:
        plt.show()
    return anim


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    o = rotation_sequence(Complex(1, 0), Complex.from_polar(1, math.pi / 180), 360)
    animate_complex(o, interval=1)
