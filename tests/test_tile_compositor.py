from PIL import Image

from hobbitworld.art.assets import AssetStore
from hobbitworld.art.compositor import (
    CellSnapshot,
    compose_cell,
    compose_map,
    compose_tile,
    resize_image,
    snapshot_map,
    sprite_boxes,
    sprite_grid_size,
)
from hobbitworld.demo.world import DemoEntity, DemoEntityManager, DemoGrid

RED = (255, 0, 0, 255)
SPRITE_COLOURS = [
    (0, 0, 255, 255),
    (0, 255, 0, 255),
    (255, 255, 0, 255),
    (0, 255, 255, 255),
    (255, 0, 255, 255),
]


def solid(colour, size=(8, 8)) -> Image.Image:
    return Image.new("RGBA", size, colour)


def test_resizing_transparent_image_stays_transparent() -> None:
    resized = resize_image(Image.new("RGBA", (40, 25), (0, 0, 0, 0)), 100, 60)

    assert resized.size == (100, 60)
    assert resized.mode == "RGBA"
    assert resized.getextrema()[3] == (0, 0)


def test_resize_stretches_without_keeping_aspect_ratio() -> None:
    resized = resize_image(solid(RED, (10, 40)), 50, 20)

    assert resized.size == (50, 20)
    assert resized.getpixel((0, 0)) == RED
    assert resized.getpixel((49, 19)) == RED


def test_resize_of_missing_image_is_transparent_rectangle() -> None:
    resized = resize_image(None, 30, 30)

    assert resized.size == (30, 30)
    assert resized.getextrema()[3] == (0, 0)


def test_sprite_grid_size_is_ceiling_square_root() -> None:
    assert [sprite_grid_size(count) for count in range(0, 11)] == [0, 1, 2, 2, 2, 3, 3, 3, 3, 3, 4]


def test_five_sprites_use_a_three_by_three_grid() -> None:
    assert sprite_boxes(5, 100) == [
        (0, 0, 33),
        (33, 0, 33),
        (66, 0, 33),
        (0, 33, 33),
        (33, 33, 33),
    ]


def test_crowded_tile_places_sprites_row_major_over_terrain() -> None:
    sprites = [solid(colour) for colour in SPRITE_COLOURS]

    tile = compose_tile(solid(RED), sprites, 100)

    assert tile.size == (100, 100)
    assert tile.getpixel((15, 15)) == SPRITE_COLOURS[0]
    assert tile.getpixel((48, 15)) == SPRITE_COLOURS[1]
    assert tile.getpixel((81, 15)) == SPRITE_COLOURS[2]
    assert tile.getpixel((15, 48)) == SPRITE_COLOURS[3]
    assert tile.getpixel((48, 48)) == SPRITE_COLOURS[4]
    # The four unused sub-cells show nothing but terrain.
    for point in ((81, 48), (15, 81), (48, 81), (81, 81)):
        assert tile.getpixel(point) == RED


def test_transparent_sprite_leaves_terrain_visible() -> None:
    tile = compose_tile(solid(RED), [solid((0, 0, 0, 0)), None], 40)

    assert tile.getpixel((5, 5)) == RED
    assert tile.getpixel((30, 5)) == RED


def test_tile_without_entities_is_just_terrain() -> None:
    tile = compose_tile(solid(RED), [], 50)

    assert tile.size == (50, 50)
    assert tile.getcolors() == [(2500, RED)]


def test_compose_cell_uses_symbols_and_keeps_long_description(assets: AssetStore) -> None:
    cell = CellSnapshot(0, 0, "R", "The River Sherbourne", ("o", "s", "w", "c", "g"))

    composed = compose_cell(cell, assets, 100)

    expected = compose_tile(
        assets.texture("water"),
        [assets.sprite(name) for name in ("ring", "sword", "wood", "suit", "goblin")],
        100,
    )
    assert composed.tooltip == "The River Sherbourne"
    assert list(composed.image.getdata()) == list(expected.getdata())


def test_snapshot_reads_every_cell_row_by_row() -> None:
    grid = DemoGrid(("S.", "RF"))
    manager = DemoEntityManager()
    manager.place(DemoEntity("@", "Biblo"), (1, 1))
    manager.place(DemoEntity("g", "a goblin"), (1, 1))

    snapshot = snapshot_map(grid, manager)

    assert (snapshot.width, snapshot.height) == (2, 2)
    assert [(cell.column, cell.row, cell.symbol) for cell in snapshot.cells] == [
        (0, 0, "S"),
        (1, 0, "."),
        (0, 1, "R"),
        (1, 1, "F"),
    ]
    assert snapshot.cells[3].entity_symbols == ("@", "g")
    assert snapshot.cells[0].entity_symbols == ()


def test_snapshot_treats_missing_contents_as_empty() -> None:
    class NoContents:
        def contents_of(self, location):
            return None

    snapshot = snapshot_map(DemoGrid(("b",)), NoContents())

    assert snapshot.cells[0].entity_symbols == ()


def test_compose_map_yields_one_tile_per_cell(assets: AssetStore) -> None:
    snapshot = snapshot_map(DemoGrid(("SbR", "F.S")), DemoEntityManager())

    tiles = compose_map(snapshot, assets, 10)

    assert len(tiles) == 6
    assert all(tile.image.size == (10, 10) for tile in tiles)
    assert tiles[2].tooltip == "The River Sherbourne (2, 0)"
