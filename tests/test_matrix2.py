import math

import pytest

from kgame.matrix2 import Matrix2
from kgame.vector2 import Vector2


def test_default_is_identity():
    assert Matrix2() == Matrix2.IDENTITY
    assert Matrix2.IDENTITY == Matrix2(1.0, 0.0, 0.0, 1.0)
    assert Matrix2.ZERO == Matrix2(0.0, 0.0, 0.0, 0.0)


def test_set_overwrites_entries():
    m = Matrix2()
    m.set(1.0, 2.0, 3.0, 4.0)
    assert m == Matrix2(1.0, 2.0, 3.0, 4.0)


def test_identity_leaves_vector_unchanged():
    v = Vector2(2.5, -7.0)
    assert Matrix2.IDENTITY * v == v
    assert v * Matrix2.IDENTITY == v


def test_zero_matrix_gives_zero_vector():
    assert Matrix2.ZERO * Vector2(3.0, 4.0) == Vector2.ZERO


def test_quarter_turn_maps_right_to_up():
    m = Matrix2()
    m.set_rotation(math.pi / 2)
    assert tuple(m * Vector2.RIGHT) == pytest.approx(tuple(Vector2.UP), abs=1e-12)


def test_zero_rotation_is_identity():
    m = Matrix2(5.0, 6.0, 7.0, 8.0)
    m.set_rotation(0.0)
    assert m == Matrix2.IDENTITY


@pytest.mark.parametrize("angle", [0.3, 1.0, -2.2, math.pi])
def test_rotation_preserves_length(angle):
    m = Matrix2()
    m.set_rotation(angle)
    v = Vector2(3.0, -1.5)
    assert (m * v).length() == pytest.approx(v.length())


@pytest.mark.parametrize("angle", [0.3, 1.0, -2.2])
def test_row_vector_form_is_transpose(angle):
    forward = Matrix2()
    forward.set_rotation(angle)
    backward = Matrix2()
    backward.set_rotation(-angle)
    v = Vector2(1.5, 4.0)
    assert tuple(v * forward) == pytest.approx(tuple(backward * v))


def test_scalar_times_matrix():
    m = Matrix2(1.0, -2.0, 0.5, 3.0)
    v = Vector2(2.0, 7.0)
    assert ((2.0 * m) * v) == 2.0 * (m * v)


def test_matrix_times_scalar_unsupported():
    with pytest.raises(TypeError):
        Matrix2() * 3  # type: ignore[operator]