from monsternav.cli import build_parser, simulate


def test_parser_flags():
    args = build_parser().parse_args(["--seed", "7", "--auto", "--log-level", "DEBUG"])
    assert args.seed == 7 and args.auto and args.log_level == "DEBUG"


def test_simulate_is_reproducible():
    a, b = simulate(123), simulate(123)
    assert a.is_over()
    assert a.log == b.log
    assert a.outcome() in ("PLAYER_WIN", "PLAYER_LOSS")
