"""Exact per-timestep propagation in frequency space."""

from __future__ import annotations

import numpy as np

from ..errors import ConfigurationError
from ..numerics import complex_exp


def propagate(spectrum, characteristic, from_time: float, to_time: float, xp=np):
    """spectrum *= exp((to_time - from_time) * Psi), in place.

    After the transform the PIDE is a linear first-order ODE per frequency bin,
    so this is its exact solution over the interval.
    """
    dt = float(to_time) - float(from_time)
    if dt < 0.0:
        raise ConfigurationError(f"to_time ({to_time}) must be >= from_time ({from_time})")
    spectrum *= complex_exp(dt * characteristic, xp)
    return spectrum
