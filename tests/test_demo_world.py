from typing import List

from hobbitworld.demo.world import (
    DemoEntity,
    DemoEntityManager,
    DemoGrid,
    DemoMove,
    DemoSimulation,
    DemoTake,
    DemoWait,
    build_demo_world,
)
from hobbitworld.render.commands import build_command_layout
from hobbitworld.render.interfaces import GridRenderer


class ScriptedRenderer(GridRenderer):
    """Picks actions by description and records what it was shown."""

    def __init__(self, choices: List[str]) -> None:
        self.choices = list(choices)
        self.maps = 0
        self.messages: List[str] = []
        self.offered: List[list] = []

    def display_map(self) -> None:
        self.maps += 1

    def display_message(self, message: str) -> None:
        self.messages.append(message)

    def get_selection(self, actions):
        self.offered.append(list(actions))
        wanted = self.choices.pop(0)
        return next(action for action in actions if action.description == wanted)


def test_demo_world_covers_every_terrain_and_entity() -> None:
    grid, manager, biblo = build_demo_world()

    symbols = {grid.location_at(column, row).symbol for row in range(grid.height) for column in range(grid.width)}
    entities = {
        entity.symbol
        for row in range(grid.height)
        for column in range(grid.width)
        for entity in manager.contents_at((column, row))
    }

    assert (grid.width, grid.height) == (6, 5)
    assert symbols == {"S", "b", ".", "F", "R"}
    assert entities == {"†", "s", "T", "w", "c", "o", "$", "g", "d", "@"}
    assert manager.where_is(biblo) == (2, 1)
    assert len(manager.contents_at((3, 1))) == 5


def test_long_description_names_the_cell() -> None:
    grid = DemoGrid(("bR",))

    assert grid.location_at(0, 0).long_description == "Bag End (0, 0)"
    assert grid.location_at(1, 0).long_description == "The River Sherbourne (1, 0)"


def test_corner_actor_is_only_offered_moves_that_stay_on_the_map() -> None:
    grid = DemoGrid(("..", ".."))
    manager = DemoEntityManager()
    actor = DemoEntity("@", "Biblo", portable=False)
    manager.place(actor, (0, 0))

    actions = DemoSimulation(grid, manager, actor).available_actions()

    assert sorted(action.bearing for action in actions if action.is_move) == [90, 135, 180]
    assert isinstance(actions[-1], DemoWait)


def test_demo_actions_fill_the_whole_compass() -> None:
    grid, manager, biblo = build_demo_world()

    layout = build_command_layout(DemoSimulation(grid, manager, biblo).available_actions())

    assert all(token is not None for slot, token in enumerate(layout.pad) if slot != 4)
    assert [layout.resolve(token).description for token in layout.pad if token is not None] == [
        "Move North-West",
        "Move North",
        "Move North-East",
        "Move West",
        "Move East",
        "Move South-West",
        "Move South",
        "Move South-East",
    ]
    assert [layout.resolve(token).description for token in layout.others] == ["Wait"]


def test_move_then_take_updates_the_world() -> None:
    grid, manager, biblo = build_demo_world()
    simulation = DemoSimulation(grid, manager, biblo)

    moved = simulation.apply(DemoMove(90))
    offered = simulation.available_actions()
    takes = [action for action in offered if isinstance(action, DemoTake)]
    taken = simulation.apply(takes[0])

    assert moved == "Biblo Baggins walks to Middle Earth (3, 1)."
    assert [action.description for action in takes] == [
        "Take the One Ring",
        "Take a short sword",
        "Take a pile of logs",
        "Take a mithril coat",
    ]
    assert taken == "Biblo Baggins takes the One Ring."
    assert [item.symbol for item in simulation.inventory] == ["o"]
    assert [entity.symbol for entity in manager.contents_at((3, 1))] == ["s", "w", "c", "g", "@"]


def test_remove_only_takes_out_the_exact_entity() -> None:
    manager = DemoEntityManager()
    first, second = DemoEntity("T", "a tree"), DemoEntity("T", "a tree")
    manager.place(first, (0, 0))
    manager.place(second, (1, 0))

    manager.remove(second)

    assert manager.contents_at((0, 0)) == [first]
    assert manager.contents_at((1, 0)) == []


def test_run_drives_the_renderer_each_tick() -> None:
    grid, manager, biblo = build_demo_world()
    simulation = DemoSimulation(grid, manager, biblo)
    renderer = ScriptedRenderer(["Move East", "Take a short sword", "Wait"])

    simulation.run(renderer, ticks=3)

    assert simulation.tick == 3
    assert renderer.maps == 3
    assert len(renderer.offered) == 3
    assert renderer.messages[0] == "Tick 1: Biblo Baggins is at Bag End (2, 1)"
    assert "Carrying a short sword" in renderer.messages
    assert renderer.messages[-1] == "Biblo Baggins waits."
    assert manager.where_is(biblo) == (3, 1)
