import pytest

from fst_options.cli import build_parser, main, params_from_args
from fst_options.params import JumpModel


def test_cli_prints_price(capsys):
    rc = main(["--resolution", "1024", "--timesteps", "10"])
    out = capsys.readouterr().out.strip()
    assert rc == 0
    assert abs(float(out) - 10.45) < 0.05


def test_cli_verbose_prefixes_grid_index(capsys):
    rc = main(["--resolution", "1024", "--timesteps", "10", "--verbose"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert rc == 0
    index, price = lines[0].split()
    assert int(index) == 512
    assert abs(float(price) - 10.45) < 0.05
    assert lines[1].startswith("implied_vol")
    assert abs(float(lines[1].split()[1]) - 0.2) < 5e-3


def test_cli_jump_flags_are_mutually_exclusive():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--merton", "0.1", "-0.05", "0.1", "--kou", "1", "0.4", "10", "5"])
    assert exc.value.code == 2


def test_cli_rejects_unknown_payoff():
    with pytest.raises(SystemExit) as exc:
        main(["--payoff", "straddle"])
    assert exc.value.code == 2


def test_cli_reports_configuration_errors(capsys):
    rc = main(["--resolution", "1000"])
    assert rc == 1
    assert "power of two" in capsys.readouterr().err


def test_cli_builds_jump_parameters():
    args = build_parser().parse_args(["--cgmy", "1", "5", "5", "0.5", "--style", "american", "--payoff", "put"])
    params = params_from_args(args)
    assert params.jump_model is JumpModel.CGMY
    assert params.model_params == {"C": 1.0, "G": 5.0, "M": 5.0, "Y": 0.5}
    assert params.is_american and not params.is_call

    args = build_parser().parse_args(["--kou", "1", "0.4", "10", "5"])
    assert params_from_args(args).model_params == {"lam": 1.0, "p": 0.4, "eta1": 10.0, "eta2": 5.0}
