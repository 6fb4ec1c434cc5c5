from main import build_parser, config_from_args


def test_defaults():
    config = config_from_args(build_parser().parse_args([]))
    assert config.layout == "fixed"
    assert config.map.seed is None
    assert config.screen.font is None


def test_random_layout_with_seed_and_font():
    args = build_parser().parse_args(["--layout", "random", "--seed", "9", "--font", "arial10x10.png"])
    config = config_from_args(args)
    assert config.layout == "random"
    assert config.map.seed == 9
    assert config.screen.font == "arial10x10.png"
    assert config.screen.width == 80 and config.screen.height == 50
