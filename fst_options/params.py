"""Pricing parameter record and option/model selectors."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict

import numpy as np

from .errors import ConfigurationError


class _ParsableEnum(str, Enum):
    @classmethod
    def parse(cls, value: "str | _ParsableEnum"):
        """Accept an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        key = str(value).lower().strip()
        for member in cls:
            if member.value == key:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ConfigurationError(f"Invalid {cls.__name__} {value!r}; expected one of: {choices}")


class OptionStyle(_ParsableEnum):
    EUROPEAN = "european"
    AMERICAN = "american"


class PayoffType(_ParsableEnum):
    CALL = "call"
    PUT = "put"


class JumpModel(_ParsableEnum):
    NONE = "none"
    MERTON = "merton"
    KOU = "kou"
    CGMY = "cgmy"


def is_power_of_two(n: int) -> bool:
    n = int(n)
    return n > 0 and (n & (n - 1)) == 0


@dataclass(frozen=True, slots=True)
class PricingParameters:
    """Everything needed to price one contract.

    `model_params` holds the jump-model parameters, keyed as in the model
    classes:
        Merton: lam, muJ, sigmaJ
        Kou:    lam, p, eta1, eta2
        CGMY:   C, G, M, Y
    Keys that do not belong to the selected `jump_model` are ignored.
    """

    start_price: float
    strike: float
    risk_free_rate: float
    volatility: float
    expiry: float
    resolution: int = 2048
    timesteps: int = 100
    dividend_rate: float = 0.0
    style: OptionStyle = OptionStyle.EUROPEAN
    payoff: PayoffType = PayoffType.CALL
    jump_model: JumpModel = JumpModel.NONE
    model_params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Normalise string selectors so callers can pass "american", "put", ...
        object.__setattr__(self, "style", OptionStyle.parse(self.style))
        object.__setattr__(self, "payoff", PayoffType.parse(self.payoff))
        object.__setattr__(self, "jump_model", JumpModel.parse(self.jump_model))
        object.__setattr__(self, "model_params", dict(self.model_params))

        for name in ("start_price", "strike", "risk_free_rate", "volatility", "expiry", "dividend_rate"):
            value = float(getattr(self, name))
            if not np.isfinite(value):
                raise ConfigurationError(f"{name} must be finite")
            object.__setattr__(self, name, value)

        if self.start_price <= 0.0:
            raise ConfigurationError("start_price must be > 0")
        if self.strike <= 0.0:
            raise ConfigurationError("strike must be > 0")
        if self.volatility < 0.0:
            raise ConfigurationError("volatility must be >= 0")
        if self.expiry < 0.0:
            raise ConfigurationError("expiry must be >= 0")

        if int(self.resolution) != self.resolution or not is_power_of_two(self.resolution) or self.resolution < 2:
            raise ConfigurationError(f"resolution must be a power of two >= 2, got {self.resolution!r}")
        if int(self.timesteps) != self.timesteps or self.timesteps < 1:
            raise ConfigurationError(f"timesteps must be a positive integer, got {self.timesteps!r}")
        object.__setattr__(self, "resolution", int(self.resolution))
        object.__setattr__(self, "timesteps", int(self.timesteps))

    @property
    def is_call(self) -> bool:
        return self.payoff is PayoffType.CALL

    @property
    def is_american(self) -> bool:
        return self.style is OptionStyle.AMERICAN

    def with_updates(self, **changes: Any) -> "PricingParameters":
        """Copy with some fields replaced (re-validated)."""
        return replace(self, **changes)
