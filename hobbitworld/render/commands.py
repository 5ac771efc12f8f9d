"""Ordering and 3x3 placement of the active actor's commands.

Move commands are laid out on a directional pad read like a compass rose:

    NW  N  NE          315   0   45
    W   .  E     ==    270  -1   90
    SW  S  SE          225 180  135

Every other command goes into a vertical list sorted by description. The
position of a command in ``moves + others`` is its selection token.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, Tuple

from hobbitworld.logging_utils import log_warning
from hobbitworld.render.interfaces import ActionT

CENTRE = -1

# Reading order of the pad; -1 is the empty middle cell.
DEFINED_ORDER: Tuple[int, ...] = (315, 0, 45, 270, CENTRE, 90, 225, 180, 135)

COMPASS_BEARINGS = frozenset(angle for angle in DEFINED_ORDER if angle != CENTRE)

PAD_ROWS = 3
PAD_COLUMNS = 3


class NoCommandsError(ValueError):
    """Raised when an actor is asked to choose from an empty command list."""


def compass_key(action: object) -> int:
    """Index of the action's bearing in :data:`DEFINED_ORDER`.

    Actions flagged as moves that carry no usable compass bearing are sorted
    to the front (key 0) after a warning.
    """

    bearing = getattr(action, "bearing", None)
    if isinstance(bearing, int) and not isinstance(bearing, bool) and bearing in COMPASS_BEARINGS:
        return DEFINED_ORDER.index(bearing)
    description = getattr(action, "description", repr(action))
    log_warning(f"move command {description!r} has no compass bearing ({bearing!r}); using NW")
    return 0


def pad_position(slot: int) -> Tuple[int, int]:
    """``(row, column)`` of a pad slot."""

    return divmod(slot, PAD_COLUMNS)


@dataclass(frozen=True)
class CommandLayout(Generic[ActionT]):
    """Result of arranging a command list for display.

    ``ordered`` holds the moves (compass order) followed by the others
    (description order). ``pad`` has nine entries, one per slot of
    :data:`DEFINED_ORDER`, each a token into ``ordered`` or ``None`` for a
    filler. ``others`` lists the tokens of the vertical stack, top first.
    """

    ordered: Tuple[ActionT, ...]
    pad: Tuple[Optional[int], ...]
    others: Tuple[int, ...]

    def resolve(self, token: int) -> ActionT:
        return self.ordered[token]

    @property
    def tokens(self) -> List[int]:
        """Every token that has a button, pad first."""

        return [token for token in self.pad if token is not None] + list(self.others)


def build_command_layout(commands: Sequence[ActionT]) -> CommandLayout[ActionT]:
    if not commands:
        raise NoCommandsError("command list for the actor is empty")

    moves: List[Tuple[int, ActionT]] = []
    others: List[ActionT] = []
    for command in commands:
        if command.is_move:
            moves.append((compass_key(command), command))
        else:
            others.append(command)

    moves.sort(key=lambda pair: pair[0])
    others.sort(key=lambda command: command.description)

    ordered = tuple(command for _, command in moves) + tuple(others)

    pad: List[Optional[int]] = []
    cursor = 0
    for slot, angle in enumerate(DEFINED_ORDER):
        # Anything still sorted before this slot lost its place to an earlier move.
        while cursor < len(moves) and moves[cursor][0] < slot:
            _report_dropped(moves[cursor][1])
            cursor += 1
        if angle != CENTRE and cursor < len(moves) and moves[cursor][0] == slot:
            pad.append(cursor)
            cursor += 1
        else:
            pad.append(None)
    for _, command in moves[cursor:]:
        _report_dropped(command)

    return CommandLayout(
        ordered=ordered,
        pad=tuple(pad),
        others=tuple(range(len(moves), len(ordered))),
    )


def _report_dropped(command: object) -> None:
    description = getattr(command, "description", repr(command))
    log_warning(f"no free pad slot for move command {description!r}; it will not be shown")


__all__ = [
    "CENTRE",
    "COMPASS_BEARINGS",
    "CommandLayout",
    "DEFINED_ORDER",
    "NoCommandsError",
    "PAD_COLUMNS",
    "PAD_ROWS",
    "build_command_layout",
    "compass_key",
    "pad_position",
]
