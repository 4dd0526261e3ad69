import numpy as np
import pytest

from fst_options import CGMYExponent, GBMExponent, KouExponent, MertonExponent, PricingParameters, price_option
from fst_options.fst import FSTPricer
from fst_options.models import DualExponent

MODELS = {
    "gbm": lambda r, q: GBMExponent(r, q, 0.2),
    "merton": lambda r, q: MertonExponent(r, q, 0.2, {"lam": 0.5, "muJ": -0.1, "sigmaJ": 0.15}),
    "kou": lambda r, q: KouExponent(r, q, 0.15, {"lam": 1.0, "p": 0.4, "eta1": 10.0, "eta2": 5.0}),
    "cgmy": lambda r, q: CGMYExponent(r, q, 0.1, {"C": 0.5, "G": 5.0, "M": 6.0, "Y": 0.7}),
}

JUMP_PARAMS = {
    "none": {},
    "merton": {"lam": 0.5, "muJ": -0.1, "sigmaJ": 0.15},
    "kou": {"lam": 1.0, "p": 0.4, "eta1": 10.0, "eta2": 5.0},
    "cgmy": {"C": 0.5, "G": 5.0, "M": 6.0, "Y": 0.7},
}


def test_dual_of_gbm_swaps_rate_and_yield():
    k = np.linspace(-5.0, 5.0, 41)
    dual = DualExponent(GBMExponent(0.05, 0.02, 0.3))
    assert (dual.r, dual.q) == (0.02, 0.05)
    assert np.allclose(dual.exponent(k), GBMExponent(0.02, 0.05, 0.3).exponent(k))


@pytest.mark.parametrize("name", sorted(MODELS))
def test_dual_exponent_discounts_at_the_yield(name):
    # Psi*(0) = psi(-i) - r = (r - q) - r: the martingale compensators must be right.
    dual = DualExponent(MODELS[name](0.05, 0.02))
    assert np.allclose(dual.exponent(np.array([0.0])), -0.02, atol=1e-12)


@pytest.mark.parametrize("name", sorted(MODELS))
def test_dual_of_dual_is_the_model(name):
    model = MODELS[name](0.05, 0.02)
    k = np.linspace(0.0, 8.0, 33)
    assert np.allclose(DualExponent(DualExponent(model)).exponent(k), model.exponent(k), rtol=1e-10, atol=1e-10)


def _params(**overrides) -> PricingParameters:
    base = dict(
        start_price=100.0,
        strike=105.0,
        risk_free_rate=0.05,
        volatility=0.2,
        expiry=1.0,
        dividend_rate=0.03,
        resolution=4096,
        timesteps=25,
    )
    base.update(overrides)
    return PricingParameters(**base)


@pytest.mark.parametrize("style", ["european", "american"])
@pytest.mark.parametrize("jump_model", sorted(JUMP_PARAMS))
def test_dual_put_matches_direct_call_stepping(jump_model, style):
    params = _params(style=style, jump_model=jump_model, model_params=JUMP_PARAMS[jump_model])
    dual = price_option(params)
    direct = price_option(params, call_duality=False)
    assert abs(dual - direct) < 5e-3


def test_duality_applies_to_calls_only():
    assert FSTPricer(_params()).dual
    assert not FSTPricer(_params(), call_duality=False).dual
    assert not FSTPricer(_params(payoff="put")).dual
