import pytest

from blockfall_config import COLORS, CONFIG, GameConfig


def test_defaults_match_config_dict():
    assert GameConfig.from_mapping(CONFIG) == GameConfig()


def test_fall_threshold_is_cell_size():
    assert GameConfig(cell_size=50).fall_threshold == 50.0


def test_palette_covers_every_shape():
    assert set(GameConfig().palette) == set(COLORS) == set("IOTLJSZ")


@pytest.mark.parametrize("kwargs", [
    {"cols": 3},
    {"rows": 1},
    {"cell_size": 0},
    {"base_speed": 0.0},
    {"base_speed": 300.0, "fast_speed": 100.0},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_from_mapping_overrides():
    cfg = dict(CONFIG, COLS=12, SEED=5)
    gc = GameConfig.from_mapping(cfg)
    assert gc.cols == 12
    assert gc.seed == 5
