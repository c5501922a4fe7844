import pytest

from blockfall_config import GameConfig
from blockfall_game import Game
from blockfall_grid import Grid

RED = (255, 0, 0)
FILL = (90, 90, 90)


@pytest.fixture
def config():
    return GameConfig(seed=7)


@pytest.fixture
def game(config):
    return Game(config)


@pytest.fixture
def grid():
    return Grid(10, 20)


def fill_row(grid, row, color=FILL, skip=()):
    for col in range(grid.cols):
        if col not in skip:
            grid.place((col, row), color)
