"""Fourier space time-stepping engine."""

from .payoff import apply_early_exercise, asset_grid, intrinsic_values, terminal_payoff
from .pricer import FSTPricer, PricingResult, RunState, price_option
from .propagator import propagate
from .transform import TransformEngine

__all__ = [
    "FSTPricer",
    "PricingResult",
    "RunState",
    "price_option",
    "TransformEngine",
    "propagate",
    "apply_early_exercise",
    "asset_grid",
    "intrinsic_values",
    "terminal_payoff",
]
