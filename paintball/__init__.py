"""
Paintball grid: a turn-based team combat engine.

Teams own bunkers that earn coins and recruit colored units; units move,
fight by rock-paper-scissors and seize bunkers until one team is left.
"""

from .core import (
    ActionStatus,
    CellState,
    Color,
    CreateStatus,
    GamePhase,
    GameResponse,
    GameStatus,
    MoveDir,
    SizedIterator,
    UnitAction,
)
from .entities import Bunker, Unit
from .game import PaintballGame
from .scenario import BunkerSpec, Scenario, TeamSpec, create_duel_scenario, create_skirmish_scenario
from .world import Cell, Field, FieldMap, Team

__version__ = "0.1.0"

__all__ = [
    "ActionStatus",
    "CellState",
    "Color",
    "CreateStatus",
    "GamePhase",
    "GameResponse",
    "GameStatus",
    "MoveDir",
    "SizedIterator",
    "UnitAction",
    "Bunker",
    "Unit",
    "PaintballGame",
    "BunkerSpec",
    "Scenario",
    "TeamSpec",
    "create_duel_scenario",
    "create_skirmish_scenario",
    "Cell",
    "Field",
    "FieldMap",
    "Team",
]
