"""Graphical implementation of :class:`GridRenderer`.

The renderer runs on the simulation thread and never touches widgets
itself. It prepares everything that can be prepared off the UI thread (map
snapshot, composed tiles, command layout, message text) and hands the
results to a :class:`RenderView` through ``dispatch``, a callable that runs
work on the UI thread in submission order.

One renderer belongs to one application window; there is no shared state
between instances.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol, Sequence

from hobbitworld.art.assets import AssetStore
from hobbitworld.art.compositor import TILE_SIZE, ComposedTile, compose_map, snapshot_map
from hobbitworld.render.commands import CommandLayout, build_command_layout
from hobbitworld.render.interfaces import ActionT, EntityManager, Grid, GridRenderer
from hobbitworld.render.messages import MessageLog
from hobbitworld.render.selection import SelectionCoordinator

Dispatch = Callable[..., None]
Publish = Callable[[int], None]


class RenderView(Protocol):
    """Widget side of the renderer; every method runs on the UI thread."""

    def show_map(self, width: int, height: int, tiles: List[ComposedTile]) -> None: ...

    def show_messages(self, text: str) -> None: ...

    def show_commands(self, layout: CommandLayout[Any], publish: Publish) -> None: ...


class HobbitGridRenderer(GridRenderer):
    def __init__(
        self,
        grid: Grid,
        entity_manager: EntityManager,
        view: RenderView,
        dispatch: Dispatch,
        assets: AssetStore,
        *,
        tile_size: int = TILE_SIZE,
        coordinator: Optional[SelectionCoordinator] = None,
        messages: Optional[MessageLog] = None,
    ) -> None:
        self.grid = grid
        self.entity_manager = entity_manager
        self.view = view
        self.dispatch = dispatch
        self.assets = assets
        self.tile_size = tile_size
        self.coordinator = coordinator or SelectionCoordinator()
        self.messages = messages or MessageLog()

    def display_map(self) -> None:
        snapshot = snapshot_map(self.grid, self.entity_manager)
        tiles = compose_map(snapshot, self.assets, self.tile_size)
        self.dispatch(self.view.show_map, snapshot.width, snapshot.height, tiles)

    def display_message(self, message: str) -> None:
        self.dispatch(self.view.show_messages, self.messages.append(message))

    def get_selection(self, actions: Sequence[ActionT]) -> ActionT:
        # Validate before anything is cleared or queued so a bad call cannot block.
        layout = build_command_layout(actions)

        self.dispatch(self.view.show_messages, self.messages.begin_tick())

        generation = self.coordinator.reset()

        def publish(token: int) -> None:
            self.coordinator.publish(token, generation)

        self.dispatch(self.view.show_commands, layout, publish)
        return layout.resolve(self.coordinator.await_selection())


__all__ = ["Dispatch", "HobbitGridRenderer", "Publish", "RenderView"]
