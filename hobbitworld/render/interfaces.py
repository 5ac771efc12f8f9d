"""Collaborator protocols consumed by the renderer and the renderer ABC."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Protocol, Sequence, TypeVar


class Entity(Protocol):
    symbol: str
    description: str


class Location(Protocol):
    symbol: str
    long_description: str


class Grid(Protocol):
    width: int
    height: int

    def location_at(self, column: int, row: int) -> Location: ...


class EntityManager(Protocol):
    def contents_of(self, location: Location) -> Optional[Sequence[Entity]]: ...


class Action(Protocol):
    description: str
    is_move: bool


ActionT = TypeVar("ActionT", bound=Action)


class GridRenderer(ABC):
    """What the simulation loop needs from a user interface, once per tick."""

    @abstractmethod
    def display_map(self) -> None:
        """Redraw the whole world grid."""

    @abstractmethod
    def display_message(self, message: str) -> None:
        """Append ``message`` to the tick's message log."""

    @abstractmethod
    def get_selection(self, actions: Sequence[ActionT]) -> ActionT:
        """Block until the player picks one of ``actions`` and return it."""


__all__ = [
    "Action",
    "ActionT",
    "Entity",
    "EntityManager",
    "Grid",
    "GridRenderer",
    "Location",
]
