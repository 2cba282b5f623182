"""
Core enums and type aliases shared across the engine.

Coordinates are 1-based ``(x, y)`` tuples: ``x`` grows to the east,
``y`` grows to the south.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

GridPos = Tuple[int, int]


class Color(Enum):
    """Unit color. The color fixes cost, move range and attack pattern."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    @classmethod
    def from_name(cls, name: str) -> Optional[Color]:
        """Parse a color name (case-insensitive). Returns None if unknown."""
        if not isinstance(name, str):
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


class MoveDir(Enum):
    """Cardinal move directions."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> GridPos:
        """(dx, dy) for one step in this direction."""
        return _DELTAS[self]

    @classmethod
    def from_name(cls, name: str) -> Optional[MoveDir]:
        """Parse a direction name (case-insensitive). Returns None if unknown."""
        if not isinstance(name, str):
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


_DELTAS = {
    MoveDir.NORTH: (0, -1),
    MoveDir.SOUTH: (0, 1),
    MoveDir.EAST: (1, 0),
    MoveDir.WEST: (-1, 0),
}


class CellState(Enum):
    """What a snapshot reports for a single cell."""

    EMPTY = "empty"
    BUILDING = "building"
    UNIT = "unit"
    BUILDING_AND_UNIT = "building_and_unit"


class GamePhase(Enum):
    """Lifecycle of a match. ENDED is terminal."""

    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    ENDED = "ended"


class ActionStatus(Enum):
    """Outcome of a single unit step or area attack."""

    NOTHING = "nothing"
    WON_FIGHT = "won_fight"
    PLAYER_ELIMINATED = "player_eliminated"
    BUNKER_SEIZED = "bunker_seized"
    WON_AND_SEIZED = "won_and_seized"
    INVALID_MOVE = "invalid_move"
    INVALID_DIRECTION = "invalid_direction"
    OFF_THE_MAP = "off_the_map"
    POSITION_OCCUPIED = "position_occupied"
    SURVIVED = "survived"


class CreateStatus(Enum):
    """Outcome of a bunker spawning a unit."""

    OK = "ok"
    OCCUPIED = "occupied"
    INSUFFICIENT_FUNDS = "insufficient_funds"


class GameStatus(Enum):
    """Status carried by every engine response."""

    OK = "ok"
    REJECTED = "rejected"
    INVALID_SIZE = "invalid_size"
    NOT_ENOUGH_TEAMS = "not_enough_teams"
    WRONG_PHASE = "wrong_phase"
    INVALID_COLOR = "invalid_color"
    INVALID_BUILDING = "invalid_building"
    WRONG_TEAM = "wrong_team"
    INVALID_POSITION = "invalid_position"
    NO_UNIT = "no_unit"
    TEAM_ELIMINATED = "team_eliminated"
    GAME_OVER = "game_over"
    TEAM_ELIMINATED_AND_GAME_OVER = "team_eliminated_and_game_over"
