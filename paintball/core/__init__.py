"""Core types, result records and collection helpers."""

from .types import (
    ActionStatus,
    CellState,
    Color,
    CreateStatus,
    GamePhase,
    GameStatus,
    GridPos,
    MoveDir,
)
from .results import GameResponse, UnitAction
from .sequence import SizedIterator, index_of

__all__ = [
    "ActionStatus",
    "CellState",
    "Color",
    "CreateStatus",
    "GamePhase",
    "GameStatus",
    "GridPos",
    "MoveDir",
    "GameResponse",
    "UnitAction",
    "SizedIterator",
    "index_of",
]
