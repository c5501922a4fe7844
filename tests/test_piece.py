import pytest

from blockfall_piece import Piece, rotate_ccw, rotate_cw
from blockfall_shapes import Shape
from conftest import RED


def test_spawn_cells():
    p = Piece.spawn(Shape.I, 4, RED)
    assert p.cells() == [(3, 0), (4, 0), (5, 0), (6, 0)]
    assert p.fall == 0.0


def test_translate_is_pure():
    p = Piece.spawn(Shape.T, 4, RED)
    moved = p.translated(1, 0, 10)
    assert moved.x == 5
    assert p.x == 4


def test_translate_rejects_horizontal_overflow():
    p = Piece.spawn(Shape.I, 1, RED)
    assert p.translated(-1, 0, 10) is None
    p = Piece.spawn(Shape.I, 7, RED)
    assert p.translated(1, 0, 10) is None


def test_translate_never_rejects_vertical():
    p = Piece.spawn(Shape.T, 4, RED)
    assert p.translated(0, 50, 10).y == 50


def test_rotation_formulas():
    assert rotate_cw(((1, 0), (0, 1))) == ((0, -1), (1, 0))
    assert rotate_ccw(((1, 0), (0, 1))) == ((0, 1), (-1, 0))


@pytest.mark.parametrize("shape", [s for s in Shape if s is not Shape.O])
def test_rotations_round_trip(shape):
    p = Piece.spawn(shape, 4, RED, y=5)
    assert p.rotated(True).rotated(False) == p
    q = p
    for _ in range(4):
        q = q.rotated(True)
    assert q == p
    assert p.rotated(True).offsets != p.offsets


def test_square_rotation_is_noop():
    p = Piece.spawn(Shape.O, 4, RED, y=5)
    assert p.rotated(True) is p
    assert p.rotated(False) is p


def test_rotation_keeps_anchor():
    p = Piece.spawn(Shape.T, 4, RED, y=5)
    r = p.rotated(True)
    assert (r.x, r.y) == (4, 5)
    assert (4, 5) in r.cells()
