"""Composition of world cells into tile images.

A tile is its terrain stretched over the whole square, with the cell's
occupants drawn on top in an ``m x m`` sub-grid where ``m = ceil(sqrt(k))``
for ``k`` occupants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from PIL import Image

from hobbitworld.art.assets import AssetStore
from hobbitworld.render.interfaces import EntityManager, Grid

TILE_SIZE = 100

TRANSPARENT = (0, 0, 0, 0)


@dataclass(frozen=True)
class CellSnapshot:
    """What the renderer needs to know about one cell, copied off the model."""

    column: int
    row: int
    symbol: str
    long_description: str
    entity_symbols: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MapSnapshot:
    width: int
    height: int
    cells: Tuple[CellSnapshot, ...]


@dataclass(frozen=True)
class ComposedTile:
    column: int
    row: int
    image: Image.Image
    tooltip: str


def resize_image(image: Optional[Image.Image], width: int, height: int) -> Image.Image:
    """Stretch ``image`` to ``width`` x ``height`` keeping its transparency.

    The aspect ratio is not preserved. ``None`` gives a fully transparent
    image of the requested size.
    """

    if image is None:
        return Image.new("RGBA", (width, height), TRANSPARENT)
    return image.convert("RGBA").resize((width, height), Image.BILINEAR)


def sprite_grid_size(count: int) -> int:
    if count <= 0:
        return 0
    side = math.isqrt(count)
    if side * side < count:
        side += 1
    return side


def sprite_boxes(count: int, tile_size: int = TILE_SIZE) -> List[Tuple[int, int, int]]:
    """``(left, top, side)`` of each of ``count`` sprites, row-major."""

    grid_size = sprite_grid_size(count)
    if grid_size == 0:
        return []
    cell = tile_size // grid_size
    boxes = []
    for index in range(count):
        row, column = divmod(index, grid_size)
        boxes.append((column * cell, row * cell, cell))
    return boxes


def compose_tile(
    terrain: Optional[Image.Image],
    sprites: Sequence[Optional[Image.Image]],
    tile_size: int = TILE_SIZE,
) -> Image.Image:
    tile = resize_image(terrain, tile_size, tile_size)
    for sprite, (left, top, side) in zip(sprites, sprite_boxes(len(sprites), tile_size)):
        if side <= 0:
            continue
        tile.alpha_composite(resize_image(sprite, side, side), (left, top))
    return tile


def snapshot_map(grid: Grid, entity_manager: EntityManager) -> MapSnapshot:
    """Copy the visible state of ``grid`` so it can be drawn on another thread."""

    cells: List[CellSnapshot] = []
    for row in range(grid.height):
        for column in range(grid.width):
            location = grid.location_at(column, row)
            contents = entity_manager.contents_of(location) or ()
            cells.append(
                CellSnapshot(
                    column=column,
                    row=row,
                    symbol=location.symbol,
                    long_description=location.long_description,
                    entity_symbols=tuple(entity.symbol for entity in contents),
                )
            )
    return MapSnapshot(width=grid.width, height=grid.height, cells=tuple(cells))


def compose_cell(cell: CellSnapshot, assets: AssetStore, tile_size: int = TILE_SIZE) -> ComposedTile:
    image = compose_tile(
        assets.terrain_for(cell.symbol),
        [assets.entity_for(symbol) for symbol in cell.entity_symbols],
        tile_size,
    )
    return ComposedTile(cell.column, cell.row, image, cell.long_description)


def compose_map(
    snapshot: MapSnapshot, assets: AssetStore, tile_size: int = TILE_SIZE
) -> List[ComposedTile]:
    return [compose_cell(cell, assets, tile_size) for cell in snapshot.cells]


__all__ = [
    "CellSnapshot",
    "ComposedTile",
    "MapSnapshot",
    "TILE_SIZE",
    "compose_cell",
    "compose_map",
    "compose_tile",
    "resize_image",
    "snapshot_map",
    "sprite_boxes",
    "sprite_grid_size",
]
