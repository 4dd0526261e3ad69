"""CGMY characteristic exponent."""

from __future__ import annotations

import numpy as np
from scipy.special import gamma as sp_gamma

from ..base_cf import CharacteristicExponent
from ..errors import ConfigurationError
from ..numerics import complex_power


class CGMYExponent(CharacteristicExponent):
    """CGMY (Carr–Geman–Madan–Yor) class of tempered stable processes.

    Parameters (in `params` dict): C, G, M, Y. `vol` adds an independent
    Brownian component; vol = 0 gives the pure-jump CGMY model.
    """

    name = "cgmy"

    def _unpack(self) -> tuple[float, float, float, float]:
        C = float(self.params.get("C", 0.02))
        G = float(self.params.get("G", 5.0))
        M = float(self.params.get("M", 5.0))
        Y = float(self.params.get("Y", 0.5))
        return C, G, M, Y

    def validate(self) -> None:
        C, G, M, Y = self._unpack()
        if not all(np.isfinite([C, G, M, Y])):
            raise ConfigurationError("CGMY parameters must be finite")
        if C <= 0.0:
            raise ConfigurationError("CGMY C must be > 0")
        if G <= 0.0:
            raise ConfigurationError("CGMY G must be > 0")
        # The martingale compensator needs E[e^X] < inf, i.e. M > 1.
        if M <= 1.0:
            raise ConfigurationError("CGMY M must be > 1")
        if Y >= 2.0:
            raise ConfigurationError("CGMY Y must be < 2")
        # Gamma(-Y) has poles at Y = 0 and Y = 1.
        if Y in (0.0, 1.0):
            raise ConfigurationError("CGMY Y must not be 0 or 1")

    def jump_exponent(self, k, xp=np):
        """psi(w) = C Gamma(-Y) [(M - i w)^Y + (G + i w)^Y - M^Y - G^Y], w = 2 pi k."""
        C, G, M, Y = self._unpack()
        gamma_m = float(sp_gamma(-Y))
        w = 2.0 * np.pi * k
        term_m = complex_power(M - 1j * w, Y, xp)
        term_g = complex_power(G + 1j * w, Y, xp)
        return C * gamma_m * (term_m + term_g - M ** Y - G ** Y)

    def compensator(self) -> float:
        """psi(-i): keeps the discounted price a martingale."""
        C, G, M, Y = self._unpack()
        return float(C * sp_gamma(-Y) * ((M - 1.0) ** Y + (G + 1.0) ** Y - M ** Y - G ** Y))

    def exponent(self, k, xp=np):
        base = self.diffusion_exponent(k, xp, compensator=self.compensator())
        return base + self.jump_exponent(k, xp)

    def variance_rate(self) -> float:
        C, G, M, Y = self._unpack()
        return self.vol ** 2 + C * float(sp_gamma(2.0 - Y)) * (M ** (Y - 2.0) + G ** (Y - 2.0))
