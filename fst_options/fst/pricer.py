"""Fourier space time-stepping (FST) pricing engine (European + American)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from ..backend import Backend, get_backend
from ..base_cf import CharacteristicExponent
from ..errors import NumericalError, PricingStateError
from ..grid import Grid, build_grid
from ..models import DualExponent, build_exponent
from ..params import PayoffType, PricingParameters
from .payoff import apply_early_exercise, intrinsic_values, terminal_payoff
from .propagator import propagate
from .transform import TransformEngine

logger = logging.getLogger(__name__)


class RunState(Enum):
    UNINITIALIZED = "uninitialized"
    PREPARED = "prepared"
    STEPPING = "stepping"
    FINALIZED = "finalized"


@dataclass
class PricingResult:
    price: float
    grid_index: int
    grid: Grid
    values: np.ndarray
    backend: str
    precision: str

    def __float__(self) -> float:
        return float(self.price)


class FSTPricer:
    """Prices one contract by stepping the option value backwards from expiry.

    Each timestep transforms the value to frequency space, multiplies by
    exp(dt * Psi), transforms back, normalises and (American only) floors the
    result at the exercise value. Psi is computed once per run.

    Usage:
        with FSTPricer(params) as pricer:
            result = pricer.run()

    or step by step: prepare(), step(0) ... step(timesteps - 1), finalize().

    Calls are priced as the dual put C(S0, K, r, q) = P(K, S0, q, r) under the
    share measure (see DualExponent), so the stepped payoff stays bounded by S0
    however wide the log-price domain gets. `values` then holds the dual put
    on a grid centred on K. Pass call_duality=False to step the call payoff.

    Device buffers and transform plans are released by finalize()/close(),
    including when a step raises.
    """

    def __init__(
        self,
        params: PricingParameters,
        *,
        backend: str | Backend = "numpy",
        precision: str = "double",
        width: float = 10.0,
        min_half_width: float = 1.0,
        check_finite: bool = True,
        call_duality: bool = True,
        model: Optional[CharacteristicExponent] = None,
    ):
        self.params = params
        if isinstance(backend, Backend):
            self.backend = backend
        else:
            self.backend = get_backend(backend, precision)
        self.width = float(width)
        self.min_half_width = float(min_half_width)
        self.check_finite = bool(check_finite)
        # Resolve the jump model once, on the host.
        self.model = model if model is not None else build_exponent(params)
        self.dual = params.is_call and bool(call_duality)
        if self.dual:
            self._model = DualExponent(self.model)
            self._spot, self._strike, self._payoff = params.strike, params.start_price, PayoffType.PUT
        else:
            self._model = self.model
            self._spot, self._strike, self._payoff = params.start_price, params.strike, params.payoff

        self.state = RunState.UNINITIALIZED
        self.grid: Optional[Grid] = None
        self.engine: Optional[TransformEngine] = None
        self._values = None
        self._characteristic = None
        self._intrinsic = None
        self._next_step = 0

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def prepare(self) -> "FSTPricer":
        """Build grid, characteristic field, buffers, plans and the terminal payoff."""
        if self.state is not RunState.UNINITIALIZED:
            raise PricingStateError(f"prepare() called in state {self.state.value}")
        p = self.params
        xp = self.backend.xp
        dtype = self.backend.real_dtype

        self.grid = build_grid(
            p.resolution,
            p.volatility,
            p.expiry,
            self._model.r,
            self._model.q,
            width=self.width,
            min_half_width=self.min_half_width,
            variance_rate=self._model.variance_rate(),
        )
        logger.debug(
            "Grid N=%d x in [%.6f, %.6f] dx=%.3e dk=%.3e",
            self.grid.resolution,
            self.grid.x_min,
            self.grid.x_max,
            self.grid.delta_x,
            self.grid.delta_frequency,
        )

        try:
            self._characteristic = self._model.field(self.grid, self.backend)
            if self.check_finite and not bool(xp.all(xp.isfinite(self._characteristic))):
                raise NumericalError(f"{self._model!r} produced non-finite characteristic exponent values")

            self._values = self.backend.zeros(self.grid.resolution)
            self._values[...] = terminal_payoff(self.grid, self._spot, self._strike, self._payoff, xp, dtype)
            if p.is_american:
                self._intrinsic = intrinsic_values(self.grid, self._spot, self._strike, self._payoff, xp, dtype)
            self.engine = TransformEngine(self.backend, self.grid.resolution)
        except Exception:
            self.close()
            raise

        self.state = RunState.PREPARED
        return self

    def step(self, i: int) -> None:
        """Advance time-to-maturity from i/steps*T to (i+1)/steps*T."""
        if self.state not in (RunState.PREPARED, RunState.STEPPING):
            raise PricingStateError(f"step() called in state {self.state.value}")
        if self.engine is None:
            raise PricingStateError("step() called after resources were released")
        if i != self._next_step:
            raise PricingStateError(f"expected step {self._next_step}, got {i}")
        self.state = RunState.STEPPING

        p = self.params
        xp = self.backend.xp
        from_time = i / p.timesteps * p.expiry
        to_time = (i + 1) / p.timesteps * p.expiry

        try:
            spectrum = self.engine.forward(self._values)
            propagate(spectrum, self._characteristic, from_time, to_time, xp)
            self.engine.inverse(spectrum, out=self._values)
            self.engine.normalize(self._values)
            if p.is_american:
                apply_early_exercise(self._values, self._intrinsic, xp)
        except Exception:
            self.close()
            raise
        self._next_step += 1

    def finalize(self) -> PricingResult:
        """Copy the value back to the host, read it at the spot and release resources."""
        if self.state not in (RunState.PREPARED, RunState.STEPPING):
            raise PricingStateError(f"finalize() called in state {self.state.value}")
        if self._next_step != self.params.timesteps:
            raise PricingStateError(f"finalize() after {self._next_step} of {self.params.timesteps} steps")
        if self._values is None:
            raise PricingStateError("finalize() called after resources were released")
        try:
            values = self.backend.to_host(self._values)
            idx = self.grid.spot_index
            price = float(values[idx])
        finally:
            self.close()
        self.state = RunState.FINALIZED
        logger.debug("Price %.10f at grid index %d", price, idx)
        if self.check_finite:
            self._check_price(price)
        return PricingResult(
            price=price,
            grid_index=idx,
            grid=self.grid,
            values=values,
            backend=self.backend.name,
            precision=self.backend.precision,
        )

    def _check_price(self, price: float) -> None:
        """Reject a price that is non-finite or outside the no-arbitrage bounds."""
        p = self.params
        if not np.isfinite(price):
            raise NumericalError(f"Non-finite price {price!r}")
        if p.is_call:
            bound = p.start_price if p.is_american else p.start_price * np.exp(-p.dividend_rate * p.expiry)
        else:
            bound = p.strike if p.is_american else p.strike * np.exp(-p.risk_free_rate * p.expiry)
        rtol = 1e-6 if self.backend.precision == "double" else 1e-3
        if price > bound + rtol * (p.start_price + p.strike):
            raise NumericalError(
                f"Price {price:.6g} exceeds the no-arbitrage bound {bound:.6g}; "
                "the log-price grid cannot resolve this contract"
            )
        # Ringing near the payoff kink can dip far out-of-the-money values slightly below zero.
        if price < -0.05 * (p.start_price + p.strike):
            raise NumericalError(f"Price {price:.6g} is negative; the log-price grid cannot resolve this contract")

    def run(self) -> PricingResult:
        """prepare → all timesteps → finalize."""
        p = self.params
        logger.info(
            "Pricing %s %s, model=%s, N=%d, steps=%d, backend=%s/%s",
            p.style.value,
            p.payoff.value,
            p.jump_model.value,
            p.resolution,
            p.timesteps,
            self.backend.name,
            self.backend.precision,
        )
        try:
            if self.state is RunState.UNINITIALIZED:
                self.prepare()
            for i in range(self._next_step, p.timesteps):
                self.step(i)
            result = self.finalize()
        finally:
            self.close()
        logger.info("Price %.8f", result.price)
        return result

    def close(self) -> None:
        """Release buffers and transform plans. Safe to call more than once."""
        if self.engine is not None:
            self.engine.release()
        self.engine = None
        self._values = None
        self._characteristic = None
        self._intrinsic = None

    def __enter__(self) -> "FSTPricer":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def price_option(params: PricingParameters, **options) -> float:
    """Convenience wrapper: price one contract and return the value at spot.

    Keyword options are forwarded to :class:`FSTPricer`.
    """
    with FSTPricer(params, **options) as pricer:
        return pricer.run().price
