"""A tiny Shire-to-Mirkwood world for driving the renderer by hand.

It implements just enough of the collaborator protocols (grid, locations,
entities, actions) and of a turn loop to exercise every part of the GUI:
terrain of each kind, crowded tiles, all eight compass moves and a few
non-move commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from hobbitworld.render.interfaces import GridRenderer

# Row strings of location symbols, top row first.
DEMO_LAYOUT: Sequence[str] = (
    "SSbb..",
    "Sb...F",
    "..R.FF",
    "..R.FF",
    "..R...",
)

LOCATION_NAMES: Dict[str, str] = {
    "S": "The Shire",
    "b": "Bag End",
    ".": "Middle Earth",
    "F": "Mirkwood Forest",
    "R": "The River Sherbourne",
}

BEARING_NAMES: Dict[int, str] = {
    0: "North",
    45: "North-East",
    90: "East",
    135: "South-East",
    180: "South",
    225: "South-West",
    270: "West",
    315: "North-West",
}

# Column and row offsets for each bearing; rows grow southwards.
BEARING_OFFSETS: Dict[int, Tuple[int, int]] = {
    0: (0, -1),
    45: (1, -1),
    90: (1, 0),
    135: (1, 1),
    180: (0, 1),
    225: (-1, 1),
    270: (-1, 0),
    315: (-1, -1),
}

Coord = Tuple[int, int]


@dataclass(eq=False)
class DemoEntity:
    symbol: str
    description: str
    portable: bool = True


@dataclass(frozen=True)
class DemoLocation:
    column: int
    row: int
    symbol: str

    @property
    def long_description(self) -> str:
        name = LOCATION_NAMES.get(self.symbol, "Somewhere")
        return f"{name} ({self.column}, {self.row})"


class DemoGrid:
    def __init__(self, layout: Sequence[str] = DEMO_LAYOUT) -> None:
        self.height = len(layout)
        self.width = len(layout[0]) if self.height else 0
        self._cells = [
            [DemoLocation(column, row, symbol) for column, symbol in enumerate(line)]
            for row, line in enumerate(layout)
        ]

    def location_at(self, column: int, row: int) -> DemoLocation:
        return self._cells[row][column]

    def in_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self.width and 0 <= row < self.height


class DemoEntityManager:
    """Positions of every entity, with per-cell contents in insertion order."""

    def __init__(self) -> None:
        self._contents: Dict[Coord, List[DemoEntity]] = {}

    def place(self, entity: DemoEntity, coord: Coord) -> None:
        self._contents.setdefault(coord, []).append(entity)

    def remove(self, entity: DemoEntity) -> None:
        for entities in self._contents.values():
            if entity in entities:
                entities.remove(entity)
                return

    def where_is(self, entity: DemoEntity) -> Optional[Coord]:
        for coord, entities in self._contents.items():
            if entity in entities:
                return coord
        return None

    def contents_at(self, coord: Coord) -> List[DemoEntity]:
        return list(self._contents.get(coord, ()))

    def contents_of(self, location: DemoLocation) -> List[DemoEntity]:
        return self.contents_at((location.column, location.row))


@dataclass(frozen=True)
class DemoMove:
    bearing: int
    is_move: bool = field(default=True, init=False)

    @property
    def description(self) -> str:
        return f"Move {BEARING_NAMES[self.bearing]}"


@dataclass(frozen=True)
class DemoTake:
    item: DemoEntity
    is_move: bool = field(default=False, init=False)

    @property
    def description(self) -> str:
        return f"Take {self.item.description}"


@dataclass(frozen=True)
class DemoWait:
    is_move: bool = field(default=False, init=False)

    @property
    def description(self) -> str:
        return "Wait"


DemoAction = Union[DemoMove, DemoTake, DemoWait]


def build_demo_world() -> Tuple[DemoGrid, DemoEntityManager, DemoEntity]:
    grid = DemoGrid()
    manager = DemoEntityManager()
    biblo = DemoEntity("@", "Biblo Baggins", portable=False)
    manager.place(biblo, (2, 1))
    manager.place(DemoEntity("o", "the One Ring"), (3, 1))
    manager.place(DemoEntity("s", "a short sword"), (3, 1))
    manager.place(DemoEntity("w", "a pile of logs"), (3, 1))
    manager.place(DemoEntity("c", "a mithril coat"), (3, 1))
    manager.place(DemoEntity("g", "a goblin", portable=False), (3, 1))
    manager.place(DemoEntity("†", "an axe"), (0, 4))
    manager.place(DemoEntity("$", "a chest of treasure"), (5, 4))
    manager.place(DemoEntity("d", "Dorko the dwarf", portable=False), (1, 3))
    for coord in ((4, 2), (5, 2), (4, 3), (5, 1)):
        manager.place(DemoEntity("T", "a tree", portable=False), coord)
    return grid, manager, biblo


class DemoSimulation:
    """Turn loop for a single player-controlled actor."""

    def __init__(
        self, grid: DemoGrid, manager: DemoEntityManager, actor: DemoEntity
    ) -> None:
        self.grid = grid
        self.manager = manager
        self.actor = actor
        self.inventory: List[DemoEntity] = []
        self.tick = 0

    def available_actions(self) -> List[DemoAction]:
        coord = self.manager.where_is(self.actor)
        actions: List[DemoAction] = []
        if coord is None:
            return [DemoWait()]
        column, row = coord
        for bearing, (dx, dy) in BEARING_OFFSETS.items():
            if self.grid.in_bounds(column + dx, row + dy):
                actions.append(DemoMove(bearing))
        for entity in self.manager.contents_at(coord):
            if entity is not self.actor and entity.portable:
                actions.append(DemoTake(entity))
        actions.append(DemoWait())
        return actions

    def apply(self, action: DemoAction) -> str:
        if isinstance(action, DemoMove):
            column, row = self.manager.where_is(self.actor)
            dx, dy = BEARING_OFFSETS[action.bearing]
            self.manager.remove(self.actor)
            self.manager.place(self.actor, (column + dx, row + dy))
            destination = self.grid.location_at(column + dx, row + dy)
            return f"{self.actor.description} walks to {destination.long_description}."
        if isinstance(action, DemoTake):
            self.manager.remove(action.item)
            self.inventory.append(action.item)
            return f"{self.actor.description} takes {action.item.description}."
        return f"{self.actor.description} waits."

    def step(self, renderer: GridRenderer) -> DemoAction:
        self.tick += 1
        renderer.display_map()
        coord = self.manager.where_is(self.actor)
        if coord is not None:
            here = self.grid.location_at(*coord)
            renderer.display_message(f"Tick {self.tick}: {self.actor.description} is at {here.long_description}")
        if self.inventory:
            carried = ", ".join(item.description for item in self.inventory)
            renderer.display_message(f"Carrying {carried}")
        choice = renderer.get_selection(self.available_actions())
        renderer.display_message(self.apply(choice))
        return choice

    def run(self, renderer: GridRenderer, ticks: Optional[int] = None) -> None:
        while ticks is None or self.tick < ticks:
            self.step(renderer)


__all__ = [
    "BEARING_NAMES",
    "BEARING_OFFSETS",
    "DEMO_LAYOUT",
    "DemoEntity",
    "DemoEntityManager",
    "DemoGrid",
    "DemoLocation",
    "DemoMove",
    "DemoSimulation",
    "DemoTake",
    "DemoWait",
    "build_demo_world",
]
