"""Option-pricing engine (public shim).

The engine is split into smaller modules:
- fst_options.params
- fst_options.grid
- fst_options.base_cf
- fst_options.models.*
- fst_options.fst.*
- fst_options.implied_vol

This file gathers the public API in one place:
    from fst_options.engine import FSTPricer, MertonExponent, ...
"""

from __future__ import annotations

from .backend import Backend, get_backend
from .base_cf import CharacteristicExponent
from .errors import BackendError, ConfigurationError, FSTError, NumericalError, PricingStateError
from .fst import (
    FSTPricer,
    PricingResult,
    RunState,
    TransformEngine,
    apply_early_exercise,
    price_option,
    propagate,
    terminal_payoff,
)
from .grid import Grid, build_grid
from .implied_vol import black_scholes_price, implied_volatility
from .models import (
    CGMYExponent,
    GBMExponent,
    KouExponent,
    MertonExponent,
    build_exponent,
)
from .params import JumpModel, OptionStyle, PayoffType, PricingParameters

__all__ = [
    # Configuration
    "PricingParameters",
    "OptionStyle",
    "PayoffType",
    "JumpModel",
    "Backend",
    "get_backend",
    # Grid
    "Grid",
    "build_grid",
    # Models
    "CharacteristicExponent",
    "GBMExponent",
    "MertonExponent",
    "KouExponent",
    "CGMYExponent",
    "build_exponent",
    # Engine
    "FSTPricer",
    "PricingResult",
    "RunState",
    "TransformEngine",
    "propagate",
    "apply_early_exercise",
    "terminal_payoff",
    "price_option",
    # Helpers
    "black_scholes_price",
    "implied_volatility",
    # Errors
    "FSTError",
    "ConfigurationError",
    "BackendError",
    "NumericalError",
    "PricingStateError",
]
