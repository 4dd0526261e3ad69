"""Exception types raised by the pricing engine."""

from __future__ import annotations


class FSTError(Exception):
    """Base class for all pricing-engine errors."""


class ConfigurationError(FSTError, ValueError):
    """Invalid pricing or model parameters."""


class BackendError(FSTError, RuntimeError):
    """Array backend unavailable, or an allocation / transform-plan failure."""


class NumericalError(FSTError, ArithmeticError):
    """Non-finite characteristic values or an inconsistent grid."""


class PricingStateError(FSTError, RuntimeError):
    """Pricer driven out of order (e.g. stepping after finalization)."""
