"""Terminal payoff on the grid and the early-exercise floor."""

from __future__ import annotations

import numpy as np

from ..grid import Grid
from ..params import PayoffType


def asset_grid(grid: Grid, start_price: float, xp=np, dtype=np.float64):
    """S_i = S0 * exp(x_min + i * delta_x)."""
    return float(start_price) * xp.exp(grid.log_prices(xp, dtype))


def intrinsic_values(grid: Grid, start_price: float, strike: float, payoff: PayoffType, xp=np, dtype=np.float64):
    """Immediate-exercise value max(S - K, 0) (call) or max(K - S, 0) (put) on the grid."""
    S = asset_grid(grid, start_price, xp, dtype)
    if PayoffType.parse(payoff) is PayoffType.CALL:
        return xp.maximum(S - float(strike), 0.0)
    return xp.maximum(float(strike) - S, 0.0)


def terminal_payoff(grid: Grid, start_price: float, strike: float, payoff: PayoffType, xp=np, dtype=np.float64):
    """Option value at expiry, the initial PriceField of the backward stepping."""
    return intrinsic_values(grid, start_price, strike, payoff, xp, dtype)


def apply_early_exercise(values, intrinsic, xp=np):
    """Floor the continuation value at the exercise value, in place."""
    xp.maximum(values, intrinsic, out=values)
    return values
