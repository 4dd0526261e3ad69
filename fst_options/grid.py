"""Log-price discretisation and the matching frequency step."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import ConfigurationError, NumericalError
from .params import is_power_of_two


@dataclass(frozen=True)
class Grid:
    """Uniform log-moneyness grid x_i = x_min + i * delta_x, i = 0..N-1.

    x = ln(S / S0), so x = 0 is the spot. The grid is laid out so that x = 0
    falls exactly on index N/2.
    """

    resolution: int
    x_min: float
    x_max: float
    delta_x: float
    delta_frequency: float

    @property
    def n_frequencies(self) -> int:
        """Number of non-redundant bins of a real-to-complex transform."""
        return self.resolution // 2 + 1

    @property
    def spot_index(self) -> int:
        """Index of x = 0, i.e. -x_min * (N-1) / (x_max - x_min).

        The grid is constructed so this is an exact integer; anything else
        means the grid was built inconsistently.
        """
        pos = -self.x_min * (self.resolution - 1) / (self.x_max - self.x_min)
        idx = int(round(pos))
        if abs(pos - idx) > 1e-6:
            raise NumericalError(f"Spot does not sit on a grid node (position {pos:.9f})")
        return idx

    def log_prices(self, xp=np, dtype=np.float64):
        return self.x_min + xp.arange(self.resolution, dtype=dtype) * self.delta_x


def half_width(
    volatility: float,
    expiry: float,
    risk_free_rate: float,
    dividend_rate: float = 0.0,
    *,
    width: float = 10.0,
    min_half_width: float = 1.0,
    variance_rate: float | None = None,
) -> float:
    """Half-width of the log-price domain.

    `width` standard deviations of ln(S_T) plus the drift over the life of
    the option. When the model reports its total variance rate (jumps included)
    that is used instead of volatility**2.

    With volatility 0 and no jumps nothing smooths the payoff kink. The
    drift then shifts it by a non-multiple of delta_x, and the Fourier
    interpolation rings around it and around the jump at the periodic
    boundary. The value at spot is then off by an amount proportional to
    delta_x, so such contracts need a large resolution.
    """
    var_rate = float(volatility) ** 2 if variance_rate is None else float(variance_rate)
    std = np.sqrt(max(var_rate, 0.0) * float(expiry))
    drift = abs(float(risk_free_rate) - float(dividend_rate)) * float(expiry)
    return float(max(float(width) * std + drift, float(min_half_width)))


def build_grid(
    resolution: int,
    volatility: float,
    expiry: float,
    risk_free_rate: float,
    dividend_rate: float = 0.0,
    *,
    width: float = 10.0,
    min_half_width: float = 1.0,
    variance_rate: float | None = None,
) -> Grid:
    """Build the log-price grid for N = `resolution` points."""
    N = int(resolution)
    if N <= 1 or not is_power_of_two(N):
        raise ConfigurationError(f"resolution must be a power of two >= 2, got {resolution!r}")
    if volatility < 0.0 or expiry < 0.0:
        raise ConfigurationError("volatility and expiry must be >= 0")
    if width <= 0.0 or min_half_width <= 0.0:
        raise ConfigurationError("width and min_half_width must be > 0")

    h = half_width(
        volatility,
        expiry,
        risk_free_rate,
        dividend_rate,
        width=width,
        min_half_width=min_half_width,
        variance_rate=variance_rate,
    )
    half = N // 2
    delta_x = h / half
    x_min = -half * delta_x
    x_max = (half - 1) * delta_x
    delta_frequency = (N - 1) / ((x_max - x_min) * N)
    return Grid(N, x_min, x_max, delta_x, delta_frequency)
