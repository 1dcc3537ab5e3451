"""Closed-form kinematics for a body falling without air resistance."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

STANDARD_GRAVITY = 9.80
DEFAULT_STEP = 0.01


def position(t: float, x0: float = 0.0, v0: float = 0.0, a: float = STANDARD_GRAVITY) -> float:
    """Return the position at time ``t`` under constant acceleration ``a``."""
    return x0 + v0 * t + 0.5 * a * t * t


def free_fall_samples(
    t: float,
    delta_t: float = DEFAULT_STEP,
    x0: float = 0.0,
    v0: float = 0.0,
    a: float = STANDARD_GRAVITY,
) -> Iterator[tuple[float, float]]:
    """Yield ``(time, position)`` pairs from 0 up to, but excluding, ``t``.

    The velocity term is evaluated at the total time ``t`` while the
    acceleration term follows the sampled time, as in the tabulated output.
    """
    if delta_t <= 0:
        raise ValueError("delta_t must be positive")
    current_t = 0.0
    while current_t < t:
        yield current_t, x0 + v0 * t + 0.5 * a * current_t * current_t
        current_t += delta_t


def free_falling_without_air_resistance(
    t: float,
    delta_t: float = DEFAULT_STEP,
    x0: float = 0.0,
    v0: float = 0.0,
    a: float = STANDARD_GRAVITY,
    file: TextIO | None = None,
) -> None:
    """Print a table of positions of a falling body, one line per step."""
    out = sys.stdout if file is None else file
    for current_t, x in free_fall_samples(t, delta_t, x0, v0, a):
        print(f"t = {current_t:g} secondi  x  = {x:g}m", file=out)