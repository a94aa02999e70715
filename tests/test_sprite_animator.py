import pytest
from PIL import Image

from kgame.sprite_animator import Animation, SpriteAnimator
from kgame.tile_manager import TileManager
from kgame.vector2 import Vector2


class RecordingTilemap:
    def __init__(self):
        self.calls = []

    def draw_tile(self, canvas, x, y, row, col, mirror=False, scale=1.0):
        self.calls.append((canvas, x, y, row, col, mirror, scale))


FRAMES = [Vector2(0, 0), Vector2(1, 0), Vector2(2, 1)]


@pytest.fixture
def animator():
    a = SpriteAnimator()
    a.set_animation(7, FRAMES, 0.5)
    return a


def test_set_animation_starts_at_first_frame(animator):
    anim = animator[7]
    assert anim.sequence == FRAMES
    assert anim.current_frame == 0
    assert anim.elapsed_time == 0.0
    assert anim.time_between_frames == 0.5
    assert 7 in animator
    assert len(animator) == 1


def test_empty_sequence_rejected():
    with pytest.raises(ValueError):
        SpriteAnimator().set_animation(1, [], 0.1)


def test_update_accumulates_before_stepping(animator):
    animator.update(0.25)
    assert animator[7].current_frame == 0
    assert animator[7].elapsed_time == 0.25
    animator.update(0.25)
    assert animator[7].current_frame == 1
    assert animator[7].elapsed_time == 0.0


def test_update_steps_one_frame_even_for_large_delta(animator):
    animator.update(100.0)
    assert animator[7].current_frame == 1


def test_update_wraps_around(animator):
    for _ in range(len(FRAMES)):
        animator.update(0.5)
    assert animator[7].current_frame == 0


def test_update_advances_all_animations(animator):
    animator.set_animation(2, [Vector2(0, 0), Vector2(0, 1)], 0.5)
    animator.update(0.5)
    assert [animator[i].current_frame for i in animator] == [1, 1]


def test_replacing_animation_resets_it(animator):
    animator.update(0.5)
    animator.set_animation(7, FRAMES, 0.5)
    assert animator[7].current_frame == 0


def test_draw_passes_row_and_column(animator):
    tilemap = RecordingTilemap()
    animator.tilemap = tilemap
    animator.update(0.5)
    animator.update(0.5)
    canvas = object()
    animator.draw(canvas, 7, 10, 20, mirror=True, scale=2.0)
    assert tilemap.calls == [(canvas, 10, 20, 1, 2, True, 2.0)]


def test_draw_unknown_id_or_no_tilemap_does_nothing(animator):
    tilemap = RecordingTilemap()
    animator.draw(object(), 7, 0, 0)
    animator.tilemap = tilemap
    animator.draw(object(), 99, 0, 0)
    assert tilemap.calls == []


def test_clear_all_removes_everything(animator):
    tilemap = RecordingTilemap()
    animator.tilemap = tilemap
    animator.clear_all()
    assert len(animator) == 0
    animator.draw(object(), 7, 0, 0)
    assert tilemap.calls == []


def test_animation_current_tile():
    anim = Animation([Vector2(3, 4), Vector2(5, 6)], 1.0, current_frame=1)
    assert anim.current_tile == Vector2(5, 6)


def test_draw_with_real_tile_manager(tmp_path):
    sheet = Image.new("RGB", (4, 2), (0, 0, 0))
    sheet.paste((255, 0, 0), (0, 0, 2, 2))
    sheet.paste((0, 0, 255), (2, 0, 4, 2))
    path = tmp_path / "sheet.png"
    sheet.save(path)
    tm = TileManager()
    tm.load_tile_sheet(path, 2, 2)

    animator = SpriteAnimator(tilemap=tm)
    animator.set_animation(0, [Vector2(0, 0), Vector2(1, 0)], 1.0)
    canvas = Image.new("RGB", (2, 2), (255, 255, 255))
    animator.draw(canvas, 0, 0, 0)
    assert canvas.getpixel((0, 0)) == (255, 0, 0)
    animator.update(1.0)
    animator.draw(canvas, 0, 0, 0)
    assert canvas.getpixel((1, 1)) == (0, 0, 255)