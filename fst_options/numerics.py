"""Elementwise complex helpers shared by the models and the propagator.

Written against the array-module API so the same code runs under numpy and
cupy, in whatever precision the inputs carry.
"""

from __future__ import annotations

import numpy as np


def complex_exp(z, xp=np):
    """exp(a + ib) = e^a (cos b + i sin b)."""
    a = xp.real(z)
    b = xp.imag(z)
    return xp.exp(a) * (xp.cos(b) + 1j * xp.sin(b))


def complex_power(z, y: float, xp=np):
    """Principal branch z**y for real y via the polar form |z|**y * e^{i y arg z}."""
    r = xp.abs(z)
    theta = xp.angle(z)
    return (r ** y) * (xp.cos(y * theta) + 1j * xp.sin(y * theta))
