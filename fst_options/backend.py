"""Array backend selection (numpy on the CPU, cupy on the GPU) and precision."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Any

import numpy as np
import scipy.fft

from .errors import BackendError, ConfigurationError

logger = logging.getLogger(__name__)

BACKENDS = ("numpy", "cupy")
PRECISIONS = {
    "double": (np.float64, np.complex128),
    "single": (np.float32, np.complex64),
}


@dataclass(frozen=True)
class Backend:
    """Array module, FFT module and dtypes one pricing run executes with.

    All elementwise arithmetic in the engine is written once against `xp`;
    the dtypes carry the single/double precision choice.
    """

    name: str
    xp: ModuleType
    fft: ModuleType
    precision: str
    real_dtype: Any
    complex_dtype: Any

    @property
    def is_gpu(self) -> bool:
        return self.name == "cupy"

    def zeros(self, n: int, *, complex_: bool = False):
        dtype = self.complex_dtype if complex_ else self.real_dtype
        try:
            return self.xp.zeros(int(n), dtype=dtype)
        except MemoryError as exc:  # includes cupy's OutOfMemoryError
            raise BackendError(f"{self.name}: failed to allocate {n} elements of {np.dtype(dtype)}") from exc

    def asarray(self, values, *, complex_: bool = False):
        dtype = self.complex_dtype if complex_ else self.real_dtype
        return self.xp.asarray(values, dtype=dtype)

    def to_host(self, values) -> np.ndarray:
        """Copy a backend array into a numpy array (synchronizes the device)."""
        if self.is_gpu:
            return self.xp.asnumpy(values)
        return np.asarray(values)

    def synchronize(self) -> None:
        if self.is_gpu:
            self.xp.cuda.Device().synchronize()


def _import_cupy() -> tuple[ModuleType, ModuleType]:
    try:
        import cupy
        import cupyx.scipy.fft
    except ImportError as exc:
        raise BackendError(
            "The 'cupy' backend requires CuPy; install it with `pip install fst-options[gpu]`"
        ) from exc
    try:
        cupy.cuda.runtime.getDeviceCount()
    except Exception as exc:  # cupy.cuda.runtime.CUDARuntimeError
        raise BackendError(f"No usable CUDA device: {exc}") from exc
    return cupy, cupyx.scipy.fft


def get_backend(name: str = "numpy", precision: str = "double") -> Backend:
    """Resolve a backend by name and precision ("double" or "single")."""
    name = str(name).lower().strip()
    precision = str(precision).lower().strip()
    if name not in BACKENDS:
        raise ConfigurationError(f"Unknown backend {name!r}; expected one of {BACKENDS}")
    if precision not in PRECISIONS:
        raise ConfigurationError(f"Unknown precision {precision!r}; expected one of {tuple(PRECISIONS)}")
    real_dtype, complex_dtype = PRECISIONS[precision]

    if name == "cupy":
        xp, fft = _import_cupy()
    else:
        xp, fft = np, scipy.fft
    logger.debug("Using %s backend in %s precision", name, precision)
    return Backend(name, xp, fft, precision, real_dtype, complex_dtype)
