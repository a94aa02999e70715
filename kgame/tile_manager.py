"""Tile sheets: load an image of equally sized tiles and draw single tiles."""

from __future__ import annotations

import os
from typing import Union

from PIL import Image

PathLike = Union[str, "os.PathLike[str]"]


class TileManager:
    """Holds one tile sheet and draws tiles from it onto a Pillow image."""

    def __init__(self) -> None:
        self._sheet: Image.Image | None = None
        self.tile_width = 0
        self.tile_height = 0
        self.cols_per_row = 0

    @property
    def sheet(self) -> Image.Image | None:
        """The loaded sheet as an RGBA image, or None."""
        return self._sheet

    @property
    def is_loaded(self) -> bool:
        """Whether a tile sheet is currently loaded."""
        return self._sheet is not None

    def load_tile_sheet(self, filename: PathLike, tile_width: int, tile_height: int) -> None:
        """Load the sheet at filename, cut into tiles of the given size.

        Any previously loaded sheet is dropped first. Raises ValueError for
        non-positive tile sizes and OSError when the image cannot be read.
        """
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError(
                f"tile size must be positive, got {tile_width}x{tile_height}"
            )
        self._sheet = None
        with Image.open(filename) as img:
            sheet = img.convert("RGBA")
        self._sheet = sheet
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.cols_per_row = sheet.width // tile_width

    def draw_tile(
        self,
        canvas: Image.Image,
        x: int,
        y: int,
        row: int,
        col: int,
        mirror: bool = False,
        scale: float = 1.0,
    ) -> None:
        """Draw the tile at (row, col) onto canvas with its top-left at (x, y).

        Scaling uses nearest-neighbour sampling. A mirrored tile is flipped
        horizontally, drawn at twice the scale, and ends at x + tile_width * scale.
        Nothing is drawn when no sheet is loaded.
        """
        if self._sheet is None:
            return

        src_x = col * self.tile_width
        src_y = row * self.tile_height
        tile = self._sheet.crop(
            (src_x, src_y, src_x + self.tile_width, src_y + self.tile_height)
        )

        dest_w = int(self.tile_width * scale)
        dest_h = int(self.tile_height * scale)

        if mirror:
            width = int(self.tile_width * scale * 2)
            height = int(self.tile_height * scale * 2)
            if width <= 0 or height <= 0:
                return
            tile = tile.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
            tile = tile.resize((width, height), Image.Resampling.NEAREST)
            canvas.paste(tile, (x + dest_w - width, y), tile)
        else:
            if dest_w <= 0 or dest_h <= 0:
                return
            tile = tile.resize((dest_w, dest_h), Image.Resampling.NEAREST)
            canvas.paste(tile, (x, y), tile)