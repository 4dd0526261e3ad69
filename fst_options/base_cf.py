"""Characteristic-exponent base model API.

Contains:
- CharacteristicExponent base class
- frequency-bin layout shared by every model
- the diffusion / discount term the jump models build on
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from .errors import ConfigurationError
from .grid import Grid


class CharacteristicExponent:
    """
    Base class for all models.

    A model supplies Psi(k), the frequency-domain generator of the pricing
    PIDE in log-price x = ln(S/S0): a Fourier mode e^{2 pi i k x} of the option
    value evolves over a time-to-maturity interval dt as exp(dt * Psi(k)).
    Psi includes the discounting (-r) so the propagated value is already a
    present value.

    Subclasses must implement :meth:`exponent`.
    """

    name = "base"

    def __init__(self, r: float, q: float, vol: float, params: Dict[str, Any] | None = None):
        self.r = float(r)
        self.q = float(q)
        self.vol = float(vol)
        self.params = dict(params or {})
        if not np.isfinite(self.vol) or self.vol < 0.0:
            raise ConfigurationError("vol must be finite and >= 0")
        self.validate()

    def validate(self) -> None:
        """Check the model parameters; subclasses raise ConfigurationError."""

    # ----------------------------------------------------------------------- #
    # Frequency layout
    # ----------------------------------------------------------------------- #
    @staticmethod
    def fold_index(idx, N: int, xp=np):
        """Map a transform bin index to its signed frequency index.

        Bins above N/2 alias negative frequencies (m = idx - N). Only the first
        N/2 + 1 bins of a real-to-complex transform are ever populated, so for
        those the fold is the identity.
        """
        idx = xp.asarray(idx)
        return xp.where(idx <= N // 2, idx, idx - N)

    def frequencies(self, grid: Grid, xp=np, dtype=np.float64):
        """Frequencies k (cycles per unit log-price) of the N/2+1 populated bins."""
        idx = xp.arange(grid.n_frequencies)
        m = self.fold_index(idx, grid.resolution, xp)
        return (grid.delta_frequency * m).astype(dtype)

    # ----------------------------------------------------------------------- #
    # Exponent
    # ----------------------------------------------------------------------- #
    def diffusion_exponent(self, k, xp=np, *, compensator: float = 0.0, intensity: float = 0.0):
        """-2 (sigma pi k)^2 - (r + intensity) + i (r - q - sigma^2/2 - compensator) 2 pi k.

        `compensator` is the drift correction that keeps the discounted
        jump-diffusion a martingale; `intensity` is the jump arrival rate that
        leaves the no-jump state.
        """
        w = 2.0 * np.pi * k
        sigma = self.vol
        decay = -2.0 * (sigma * np.pi * k) ** 2 - (self.r + intensity)
        drift = self.r - self.q - 0.5 * sigma ** 2 - compensator
        return decay + 1j * drift * w

    def exponent(self, k, xp=np):
        """Psi(k) for an array of real frequencies k."""
        raise NotImplementedError

    def jump_transform(self, k, xp=np):
        """Fourier transform of the jump-size density, or None for models without one."""
        return None

    def field(self, grid: Grid, backend):
        """CharacteristicField: Psi over the N/2+1 populated bins, on the backend."""
        k = self.frequencies(grid, backend.xp, backend.real_dtype)
        psi = self.exponent(k, backend.xp)
        return backend.xp.asarray(psi, dtype=backend.complex_dtype)

    def variance_rate(self) -> float:
        """Variance of ln(S) per unit time; sizes the log-price domain."""
        return self.vol ** 2

    def __repr__(self) -> str:
        return f"{type(self).__name__}(r={self.r}, q={self.q}, vol={self.vol}, params={self.params})"
