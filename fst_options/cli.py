"""Command-line pricer.

Run examples:
    fst-price --start-price 100 --strike 100 --rate 0.05 --vol 0.2 --expiry 1 \
        --resolution 4096 --timesteps 200
    fst-price --style american --payoff put --merton 0.1 -0.05 0.1 -v
    python -m fst_options --cgmy 1.0 5.0 5.0 0.5 --vol 0.0 --backend cupy
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .errors import FSTError
from .fst import FSTPricer
from .implied_vol import implied_volatility
from .params import JumpModel, OptionStyle, PayoffType, PricingParameters

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fst-price",
        description="Price a vanilla option with Fourier space time-stepping.",
    )
    ap.add_argument("--payoff", choices=[m.value for m in PayoffType], default="call")
    ap.add_argument("--style", choices=[m.value for m in OptionStyle], default="european")
    ap.add_argument("--start-price", type=float, default=100.0)
    ap.add_argument("--strike", type=float, default=100.0)
    ap.add_argument("--rate", type=float, default=0.05, help="Risk-free rate")
    ap.add_argument("--dividend", type=float, default=0.0, help="Continuous dividend yield")
    ap.add_argument("--expiry", type=float, default=1.0)
    ap.add_argument("--vol", type=float, default=0.2, help="Diffusion volatility")
    ap.add_argument("--resolution", type=int, default=4096, help="Grid points (power of two)")
    ap.add_argument("--timesteps", type=int, default=200)

    jumps = ap.add_mutually_exclusive_group()
    jumps.add_argument("--merton", nargs=3, type=float, metavar=("LAM", "MU_J", "SIGMA_J"),
                       help="Merton jumps: intensity, mean log-jump, log-jump stdev")
    jumps.add_argument("--kou", nargs=4, type=float, metavar=("LAM", "P", "ETA1", "ETA2"),
                       help="Kou jumps: intensity, up probability, up rate, down rate")
    jumps.add_argument("--cgmy", nargs=4, type=float, metavar=("C", "G", "M", "Y"),
                       help="CGMY jump parameters")

    ap.add_argument("--backend", choices=["numpy", "cupy"], default="numpy")
    ap.add_argument("--precision", choices=["double", "single"], default="double")
    ap.add_argument("--width", type=float, default=10.0,
                    help="Log-price half-width in standard deviations of ln(S_T)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Print the grid index and Black-Scholes implied volatility too")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging")
    return ap


def params_from_args(args: argparse.Namespace) -> PricingParameters:
    jump_model = JumpModel.NONE
    model_params: dict[str, float] = {}
    if args.merton is not None:
        jump_model = JumpModel.MERTON
        model_params = dict(zip(("lam", "muJ", "sigmaJ"), args.merton))
    elif args.kou is not None:
        jump_model = JumpModel.KOU
        model_params = dict(zip(("lam", "p", "eta1", "eta2"), args.kou))
    elif args.cgmy is not None:
        jump_model = JumpModel.CGMY
        model_params = dict(zip(("C", "G", "M", "Y"), args.cgmy))

    return PricingParameters(
        start_price=args.start_price,
        strike=args.strike,
        risk_free_rate=args.rate,
        dividend_rate=args.dividend,
        volatility=args.vol,
        expiry=args.expiry,
        resolution=args.resolution,
        timesteps=args.timesteps,
        style=args.style,
        payoff=args.payoff,
        jump_model=jump_model,
        model_params=model_params,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.debug else (logging.INFO if args.verbose else logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        params = params_from_args(args)
        with FSTPricer(params, backend=args.backend, precision=args.precision, width=args.width) as pricer:
            result = pricer.run()
    except FSTError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"{result.grid_index} {result.price:.10f}")
        if not params.is_american:
            try:
                iv = implied_volatility(
                    result.price,
                    params.start_price,
                    params.strike,
                    params.risk_free_rate,
                    params.dividend_rate,
                    params.expiry,
                    is_call=params.is_call,
                )
                print(f"implied_vol {iv:.8f}")
            except FSTError as exc:
                logger.warning("No Black-Scholes implied volatility: %s", exc)
    else:
        print(f"{result.price:.10f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
