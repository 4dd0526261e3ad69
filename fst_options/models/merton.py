"""Merton jump-diffusion characteristic exponent."""

from __future__ import annotations

import numpy as np

from ..base_cf import CharacteristicExponent
from ..errors import ConfigurationError


class MertonExponent(CharacteristicExponent):
    """Merton jump‑diffusion (Gaussian log-jumps).

    Parameters (in `params` dict): lam (jump intensity), muJ (mean log-jump),
    sigmaJ (log-jump standard deviation).
    """

    name = "merton"

    def validate(self) -> None:
        lam = float(self.params.get("lam", 0.0))
        sigmaJ = float(self.params.get("sigmaJ", 0.0))
        muJ = float(self.params.get("muJ", 0.0))
        if not all(np.isfinite([lam, sigmaJ, muJ])):
            raise ConfigurationError("Merton parameters must be finite")
        if lam < 0.0:
            raise ConfigurationError("Merton jump intensity lam must be >= 0")
        if sigmaJ < 0.0:
            raise ConfigurationError("Merton jump stdev sigmaJ must be >= 0")

    def kappa(self) -> float:
        """Expected relative price jump E[e^Y] - 1."""
        muJ = float(self.params.get("muJ", 0.0))
        sigmaJ = float(self.params.get("sigmaJ", 0.0))
        return float(np.exp(muJ + 0.5 * sigmaJ ** 2) - 1.0)

    def jump_transform(self, k, xp=np):
        # J(k) = exp(-2 (pi k sigmaJ)^2 - i 2 pi k muJ); conj(J) is E[e^{i 2 pi k Y}].
        muJ = float(self.params.get("muJ", 0.0))
        sigmaJ = float(self.params.get("sigmaJ", 0.0))
        w = 2.0 * np.pi * k
        return xp.exp(-2.0 * (np.pi * k * sigmaJ) ** 2 - 1j * w * muJ)

    def jump_characteristic(self, k, xp=np):
        """E[e^{i w Y}] = exp(i w muJ - (w sigmaJ)^2 / 2); analytic, so k may be complex."""
        muJ = float(self.params.get("muJ", 0.0))
        sigmaJ = float(self.params.get("sigmaJ", 0.0))
        w = 2.0 * np.pi * k
        return xp.exp(1j * w * muJ - 0.5 * (w * sigmaJ) ** 2)

    def exponent(self, k, xp=np):
        lam = float(self.params.get("lam", 0.0))
        base = self.diffusion_exponent(k, xp, compensator=lam * self.kappa(), intensity=lam)
        return base + lam * self.jump_characteristic(k, xp)

    def variance_rate(self) -> float:
        lam = float(self.params.get("lam", 0.0))
        muJ = float(self.params.get("muJ", 0.0))
        sigmaJ = float(self.params.get("sigmaJ", 0.0))
        return self.vol ** 2 + lam * (muJ ** 2 + sigmaJ ** 2)
