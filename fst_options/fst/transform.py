"""Real-to-complex / complex-to-real transforms over the log-price grid."""

from __future__ import annotations

import logging

from ..backend import Backend
from ..errors import BackendError, PricingStateError

logger = logging.getLogger(__name__)


class TransformEngine:
    """Forward (R2C) and inverse (C2R) transforms of a fixed length N.

    Both directions are left unnormalised, like cuFFT: `inverse(forward(v))`
    returns N * v and :meth:`normalize` divides by N. On the GPU one cuFFT plan
    per direction is created up front and reused for every timestep; on the
    CPU `scipy.fft` plans internally and caches by size.
    """

    def __init__(self, backend: Backend, resolution: int):
        self.backend = backend
        self.n = int(resolution)
        self._forward_plan = None
        self._inverse_plan = None
        self._open = True
        if backend.is_gpu:
            self._build_gpu_plans()

    def _build_gpu_plans(self) -> None:
        xp = self.backend.xp
        real = xp.zeros(self.n, dtype=self.backend.real_dtype)
        spectrum = xp.zeros(self.n // 2 + 1, dtype=self.backend.complex_dtype)
        try:
            self._forward_plan = self.backend.fft.get_fft_plan(real, value_type="R2C")
            self._inverse_plan = self.backend.fft.get_fft_plan(spectrum, shape=(self.n,), value_type="C2R")
        except Exception as exc:  # cuFFT errors surface as several cupy exception types
            raise BackendError(f"Failed to create cuFFT plans for N={self.n}: {exc}") from exc
        logger.debug("Created R2C/C2R cuFFT plans for N=%d", self.n)

    def _plan_kwargs(self, plan) -> dict:
        return {"plan": plan} if self.backend.is_gpu else {}

    def _check_open(self) -> None:
        if not self._open:
            raise PricingStateError("TransformEngine has been released")

    def forward(self, values):
        """PriceField (N reals) -> FrequencyField (N/2+1 complex bins), unnormalised."""
        self._check_open()
        spectrum = self.backend.fft.rfft(values, norm="backward", **self._plan_kwargs(self._forward_plan))
        return spectrum.astype(self.backend.complex_dtype, copy=False)

    def inverse(self, spectrum, out=None):
        """FrequencyField -> N reals, unnormalised. Writes into `out` when given."""
        self._check_open()
        values = self.backend.fft.irfft(spectrum, n=self.n, norm="forward", **self._plan_kwargs(self._inverse_plan))
        if out is None:
            return values.astype(self.backend.real_dtype, copy=False)
        out[...] = values
        return out

    def normalize(self, values):
        """Divide by N in place (the inverse transform is unnormalised)."""
        values /= self.n
        return values

    def release(self) -> None:
        self._forward_plan = None
        self._inverse_plan = None
        self._open = False

    def __enter__(self) -> "TransformEngine":
        return self

    def __exit__(self, *exc) -> None:
        self.release()
