"""Model exports and jump-model dispatch."""

from __future__ import annotations

from typing import Dict, Type

from ..base_cf import CharacteristicExponent
from ..params import JumpModel, PricingParameters
from .cgmy import CGMYExponent
from .duality import DualExponent
from .gbm import GBMExponent
from .kou import KouExponent
from .merton import MertonExponent

MODEL_REGISTRY: Dict[JumpModel, Type[CharacteristicExponent]] = {
    JumpModel.NONE: GBMExponent,
    JumpModel.MERTON: MertonExponent,
    JumpModel.KOU: KouExponent,
    JumpModel.CGMY: CGMYExponent,
}


def build_exponent(params: PricingParameters) -> CharacteristicExponent:
    """Instantiate the characteristic exponent selected by `params.jump_model`."""
    cls = MODEL_REGISTRY[params.jump_model]
    model_params = params.model_params if params.jump_model is not JumpModel.NONE else {}
    return cls(params.risk_free_rate, params.dividend_rate, params.volatility, model_params)


__all__ = [
    "GBMExponent",
    "MertonExponent",
    "KouExponent",
    "CGMYExponent",
    "DualExponent",
    "MODEL_REGISTRY",
    "build_exponent",
]
