"""CuPy backend checks; skipped when CuPy or a CUDA device is unavailable."""

import numpy as np
import pytest

from fst_options import PricingParameters, price_option
from fst_options.backend import get_backend
from fst_options.errors import BackendError
from fst_options.fst import TransformEngine

pytest.importorskip("cupy")


@pytest.fixture(scope="module")
def gpu():
    try:
        return get_backend("cupy", "double")
    except BackendError as exc:
        pytest.skip(str(exc))


def test_gpu_round_trip(gpu):
    rng = np.random.default_rng(5)
    x = rng.standard_normal(2048)
    engine = TransformEngine(gpu, 2048)
    y = engine.normalize(engine.inverse(engine.forward(gpu.asarray(x))))
    assert np.allclose(gpu.to_host(y), x, atol=1e-10)
    engine.release()


@pytest.mark.parametrize("style", ["european", "american"])
def test_gpu_matches_cpu(gpu, style):
    params = PricingParameters(
        start_price=100.0,
        strike=100.0,
        risk_free_rate=0.05,
        volatility=0.2,
        expiry=1.0,
        resolution=4096,
        timesteps=50,
        style=style,
        payoff="put",
        jump_model="merton",
        model_params={"lam": 0.5, "muJ": -0.1, "sigmaJ": 0.15},
    )
    cpu = price_option(params)
    dev = price_option(params, backend=gpu)
    assert abs(cpu - dev) < 1e-9
