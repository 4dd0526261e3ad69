"""Black-Scholes reference prices and volatility inversion."""

from __future__ import annotations

import numpy as np
import scipy.optimize as opt
from scipy.stats import norm

from .errors import NumericalError


def black_scholes_price(S: float, K: float, r: float, q: float, vol: float, T: float, is_call: bool = True) -> float:
    """Closed-form European price under GBM with continuous yield q."""
    S, K, r, q, vol, T = map(float, (S, K, r, q, vol, T))
    if T <= 0.0:
        return max(S - K, 0.0) if is_call else max(K - S, 0.0)
    fwd = S * np.exp(-q * T)
    disc = K * np.exp(-r * T)
    if vol <= 0.0:
        return max(fwd - disc, 0.0) if is_call else max(disc - fwd, 0.0)
    sig_sqrt = vol * np.sqrt(T)
    d1 = (np.log(S / K) + (r - q + 0.5 * vol * vol) * T) / sig_sqrt
    d2 = d1 - sig_sqrt
    if is_call:
        return float(fwd * norm.cdf(d1) - disc * norm.cdf(d2))
    return float(disc * norm.cdf(-d2) - fwd * norm.cdf(-d1))


def implied_volatility(price: float,
                       S: float,
                       K: float,
                       r: float,
                       q: float,
                       T: float,
                       is_call: bool = True,
                       target_eps: float = 1e-10,
                       max_iter: int = 100) -> float:
    """
    Black-Scholes volatility reproducing a European price.
    Uses a bracketed root-finding on vol (Brent).
    """
    price = float(price)

    def f(vol: float) -> float:
        return black_scholes_price(S, K, r, q, max(vol, 1e-12), T, is_call) - price

    lo, hi = 1e-6, 2.0
    flo, fhi = f(lo), f(hi)
    trials = 0
    while flo * fhi > 0 and trials < max_iter:
        hi *= 2.0
        fhi = f(hi)
        trials += 1
    if flo * fhi > 0:
        raise NumericalError("Failed to bracket root for implied volatility")
    sol = opt.root_scalar(f, bracket=[lo, hi], method="brentq", xtol=target_eps, maxiter=max_iter)
    if not sol.converged:
        raise NumericalError("Root-finding failed to converge")
    return sol.root

