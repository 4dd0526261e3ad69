"""Fourier space time-stepping option pricer package exports."""

from .engine import (
    CGMYExponent,
    CharacteristicExponent,
    ConfigurationError,
    FSTError,
    FSTPricer,
    GBMExponent,
    JumpModel,
    KouExponent,
    MertonExponent,
    OptionStyle,
    PayoffType,
    PricingParameters,
    black_scholes_price,
    build_grid,
    implied_volatility,
    price_option,
)

__version__ = "0.1.0"

__all__ = [
    "PricingParameters",
    "OptionStyle",
    "PayoffType",
    "JumpModel",
    "CharacteristicExponent",
    "GBMExponent",
    "MertonExponent",
    "KouExponent",
    "CGMYExponent",
    "FSTPricer",
    "price_option",
    "build_grid",
    "black_scholes_price",
    "implied_volatility",
    "FSTError",
    "ConfigurationError",
]
