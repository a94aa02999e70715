"""Frame-based sprite animations drawn from a tile sheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from .vector2 import Vector2

if TYPE_CHECKING:
    from PIL import Image

    from .tile_manager import TileManager


@dataclass
class Animation:
    """A looping sequence of tile positions; each Vector2 is (column, row)."""

    sequence: list[Vector2]
    time_between_frames: float
    elapsed_time: float = 0.0
    current_frame: int = 0

    @property
    def current_tile(self) -> Vector2:
        """The tile position of the frame being shown."""
        return self.sequence[self.current_frame]


@dataclass
class SpriteAnimator:
    """Keeps a set of animations by id, advances them and draws them."""

    tilemap: TileManager | None = None
    _animations: dict[int, Animation] = field(default_factory=dict, repr=False)

    def set_animation(
        self,
        animation_id: int,
        sequence: Iterable[Vector2],
        time_between_frames: float,
    ) -> None:
        """Register or replace an animation, starting at its first frame."""
        frames = list(sequence)
        if not frames:
            raise ValueError("an animation needs at least one frame")
        self._animations[animation_id] = Animation(frames, time_between_frames)

    def update(self, delta_time: float) -> None:
        """Advance every animation by delta_time; each steps at most one frame."""
        for anim in self._animations.values():
            anim.elapsed_time += delta_time
            if anim.elapsed_time >= anim.time_between_frames:
                anim.elapsed_time = 0.0
                anim.current_frame = (anim.current_frame + 1) % len(anim.sequence)

    def draw(
        self,
        canvas: Image.Image,
        animation_id: int,
        x: int,
        y: int,
        mirror: bool = False,
        scale: float = 1.0,
    ) -> None:
        """Draw the current frame of an animation; do nothing if unknown or no tilemap."""
        anim = self._animations.get(animation_id)
        if anim is None or self.tilemap is None:
            return
        tile = anim.current_tile
        self.tilemap.draw_tile(canvas, x, y, int(tile.y), int(tile.x), mirror, scale)

    def clear_all(self) -> None:
        """Remove every animation."""
        self._animations.clear()

    def __getitem__(self, animation_id: int) -> Animation:
        return self._animations[animation_id]

    def __contains__(self, animation_id: object) -> bool:
        return animation_id in self._animations

    def __len__(self) -> int:
        return len(self._animations)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._animations))