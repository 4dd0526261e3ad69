"""GBM (Black-Scholes, no jumps) characteristic exponent."""

from __future__ import annotations

import numpy as np

from ..base_cf import CharacteristicExponent


class GBMExponent(CharacteristicExponent):
    """Black‑Scholes / GBM: Psi(k) = -2(sigma pi k)^2 - r + i (r - q - sigma^2/2) 2 pi k."""

    name = "none"

    def exponent(self, k, xp=np):
        return self.diffusion_exponent(k, xp)
