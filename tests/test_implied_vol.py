import numpy as np
import pytest

from fst_options.errors import NumericalError
from fst_options.implied_vol import black_scholes_price, implied_volatility


@pytest.mark.parametrize("is_call", [True, False])
@pytest.mark.parametrize("vol", [0.1, 0.25, 0.6])
def test_implied_vol_recovers_input(vol, is_call):
    price = black_scholes_price(100.0, 95.0, 0.03, 0.01, vol, 0.75, is_call)
    iv = implied_volatility(price, 100.0, 95.0, 0.03, 0.01, 0.75, is_call=is_call)
    assert abs(iv - vol) < 1e-8


def test_black_scholes_limits():
    assert black_scholes_price(100.0, 90.0, 0.05, 0.0, 0.2, 0.0) == 10.0
    assert black_scholes_price(100.0, 110.0, 0.05, 0.0, 0.0, 1.0, is_call=False) == pytest.approx(
        110.0 * np.exp(-0.05) - 100.0
    )


def test_price_below_intrinsic_has_no_implied_vol():
    with pytest.raises(NumericalError):
        implied_volatility(0.5, 100.0, 80.0, 0.0, 0.0, 1.0, is_call=True)
