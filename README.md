# kgame

A small toolkit for 2D games. It provides:

- `kgame.vector2.Vector2`: an immutable 2D vector with `+`, `-`, multiplication by a scalar, iteration over `(x, y)`, `length()`, `normalize()` and `Vector2.lerp(begin, end, ratio)`, which clamps `ratio` to `[0, 1]`. The constants `Vector2.ZERO`, `Vector2.ONE`, `Vector2.RIGHT` and `Vector2.UP` are predefined.
- `kgame.complex_number.Complex`: an immutable complex number `r + i·j` with `+`, `-`, `*` and negation against other `Complex` values and plain reals, `length()`, `normalize()`, `str()` in the form `"1 + 2i"` and conversion with `complex()`.
- `kgame.matrix2.Matrix2`: a mutable 2x2 matrix (identity by default) with `set(...)` and `set_rotation(angle)`. `matrix * vector` and `vector * matrix` give a `Vector2`, and `scalar * matrix` gives a scaled matrix. `Matrix2.ZERO` and `Matrix2.IDENTITY` are predefined.
- `kgame.matrix3.Matrix3`: a mutable 3x3 homogeneous matrix (identity by default) with `set(...)`, `set_identity()`, `set_rotation(theta)`, `set_shear(...)`, `set_scale(uniform_scale)`, `set_translation(tx, ty)` and `basis(index)`, which returns column 0 or 1 as a `Vector2` and raises `IndexError` for any other index. Applying it to a `Vector2` from either side performs a homogeneous divide. `matrix * matrix` composes, and `scalar * matrix` scales every entry. `Matrix3.ZERO` and `Matrix3.IDENTITY` are predefined.
- `kgame.tile_manager.TileManager`: loads a tile sheet image and draws single tiles onto a Pillow image, with nearest-neighbour scaling and optional horizontal mirroring.
- `kgame.sprite_animator.SpriteAnimator` and `Animation`: looping sequences of tile positions that advance over time and are drawn through a `TileManager`.
- `kgame.game_object.GameObject`: an optional image paired with a `Vector2` position.

## Installation

```
pip install kgame
```

Pillow is installed with it. It is used to load tile sheets and to draw tiles.

## Vectors and matrices

```python
import math
from kgame.vector2 import Vector2
from kgame.matrix3 import Matrix3

v = Vector2(3.0, 4.0)
print(v.length())            # 5.0
print(v.normalize())         # Vector2(x=0.6, y=0.8)

halfway = Vector2.lerp(Vector2(0, 0), Vector2(10, 0), 0.5)   # Vector2(x=5.0, y=0.0)

m = Matrix3()
m.set_translation(2.0, 3.0)
print(m * Vector2(1.0, 1.0))  # Vector2(x=3.0, y=4.0)

r = Matrix3()
r.set_rotation(math.pi / 2)
combined = m * r              # rotate first, then translate
```

`normalize()` on a zero vector or zero complex number raises `ZeroDivisionError`.

## Tiles and animation

```python
from PIL import Image
from kgame.tile_manager import TileManager
from kgame.sprite_animator import SpriteAnimator
from kgame.vector2 import Vector2

tiles = TileManager()
tiles.load_tile_sheet("sheet.png", 16, 16)   # raises OSError if the file cannot be read

animator = SpriteAnimator(tiles)
# Each frame is Vector2(column, row) in the tile sheet.
animator.set_animation(0, [Vector2(0, 0), Vector2(1, 0), Vector2(2, 0)], 0.1)

canvas = Image.new("RGBA", (320, 240))
animator.update(0.016)
animator.draw(canvas, 0, 10, 20, mirror=False, scale=2.0)
```

Details worth knowing:

- `load_tile_sheet` raises `ValueError` for a non-positive tile size. After loading, `tile_width`, `tile_height`, `cols_per_row`, `sheet` and `is_loaded` describe the sheet.
- `draw_tile` does nothing when no sheet is loaded. A mirrored tile is flipped horizontally, drawn at twice the given scale, and its right edge lies at `x + tile_width * scale`.
- `set_animation` raises `ValueError` for an empty sequence. `update(delta_time)` moves each animation forward by at most one frame per call, and resets its elapsed time when it steps.
- `draw` does nothing for an unknown animation id or when the animator has no tilemap.
- A `SpriteAnimator` supports `len()`, `in`, indexing by id (giving the `Animation`) and iteration over its ids in sorted order. `clear_all()` removes every animation.

## What this package does not do

It has no window, no event handling and no game loop. Tiles are drawn onto Pillow images that you create and display or save yourself, and time steps are passed to `update` by your own code.

## Running the tests

```
pip install kgame[test]
pytest
```