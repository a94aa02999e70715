"""A positioned game entity with an optional image."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .vector2 import Vector2

if TYPE_CHECKING:
    from PIL import Image


@dataclass
class GameObject:
    """An image placed at a position in the world."""

    image: Image.Image | None = None
    pos: Vector2 = Vector2.ZERO