"""
Result records returned by units and by the turn engine.

Failures are never raised across component boundaries; callers branch on
the status carried by these records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, Optional, TypeVar

from .types import ActionStatus, Color, GameStatus, GridPos

if TYPE_CHECKING:
    from ..world.team import Team

T = TypeVar("T")


@dataclass(frozen=True)
class UnitAction:
    """
    State of a unit after one step of a move command.

    Attributes:
        status: What happened during the step
        location: Where the unit stands after the step (its pre-move cell
            when the step failed or the unit was eliminated)
        color: Color of the acting unit
    """

    status: ActionStatus
    location: GridPos
    color: Color

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "location": list(self.location),
            "color": self.color.value,
        }


@dataclass(frozen=True)
class GameResponse(Generic[T]):
    """
    General response of the engine.

    Attributes:
        status: Status of the operation; OK means success
        result: Payload of the operation (step log, snapshot, create status)
        winner: Winning team once the match has ended
    """

    status: GameStatus
    result: Optional[T] = None
    winner: Optional["Team"] = None

    @property
    def game_over(self) -> bool:
        return self.status in (GameStatus.GAME_OVER, GameStatus.TEAM_ELIMINATED_AND_GAME_OVER)
