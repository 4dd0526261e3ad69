"""Kou double-exponential jump-diffusion characteristic exponent."""

from __future__ import annotations

import numpy as np

from ..base_cf import CharacteristicExponent
from ..errors import ConfigurationError


class KouExponent(CharacteristicExponent):
    """Kou double‑exponential jump‑diffusion.

    Parameters (in `params` dict): lam (jump intensity), p (probability of an
    up-jump), eta1 (up-jump rate, > 1), eta2 (down-jump rate, > 0).
    """

    name = "kou"

    def _unpack(self) -> tuple[float, float, float, float]:
        lam = float(self.params.get("lam", 0.0))
        p = float(self.params.get("p", 0.5))
        eta1 = float(self.params.get("eta1", 10.0))
        eta2 = float(self.params.get("eta2", 5.0))
        return lam, p, eta1, eta2

    def validate(self) -> None:
        lam, p, eta1, eta2 = self._unpack()
        if not all(np.isfinite([lam, p, eta1, eta2])):
            raise ConfigurationError("Kou parameters must be finite")
        if lam < 0.0:
            raise ConfigurationError("Kou jump intensity lam must be >= 0")
        if not 0.0 <= p <= 1.0:
            raise ConfigurationError("Kou up-jump probability p must be in [0, 1]")
        # E[e^Y] is finite only for eta1 > 1.
        if eta1 <= 1.0:
            raise ConfigurationError("Kou up-jump rate eta1 must be > 1")
        if eta2 <= 0.0:
            raise ConfigurationError("Kou down-jump rate eta2 must be > 0")

    def kappa(self) -> float:
        _, p, eta1, eta2 = self._unpack()
        return p * (eta1 / (eta1 - 1.0)) + (1.0 - p) * (eta2 / (eta2 + 1.0)) - 1.0

    def jump_transform(self, k, xp=np):
        # J(k) = p / (1 + i w / eta1) + (1 - p) / (1 - i w / eta2), the conjugate of E[e^{i w Y}].
        _, p, eta1, eta2 = self._unpack()
        w = 2.0 * np.pi * k
        return p / (1.0 + 1j * w / eta1) + (1.0 - p) / (1.0 - 1j * w / eta2)

    def jump_characteristic(self, k, xp=np):
        """E[e^{i w Y}] = p eta1 / (eta1 - i w) + (1 - p) eta2 / (eta2 + i w); k may be complex."""
        _, p, eta1, eta2 = self._unpack()
        w = 2.0 * np.pi * k
        return p / (1.0 - 1j * w / eta1) + (1.0 - p) / (1.0 + 1j * w / eta2)

    def exponent(self, k, xp=np):
        lam = self._unpack()[0]
        base = self.diffusion_exponent(k, xp, compensator=lam * self.kappa(), intensity=lam)
        return base + lam * self.jump_characteristic(k, xp)

    def variance_rate(self) -> float:
        lam, p, eta1, eta2 = self._unpack()
        return self.vol ** 2 + lam * (p * 2.0 / (eta1 ** 2) + (1.0 - p) * 2.0 / (eta2 ** 2))
