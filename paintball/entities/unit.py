from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..core.patterns import AttackPattern, diagonal_pattern, rectangle_pattern, row_pattern
from ..core.types import Color
from .base import Entity


@dataclass(frozen=True)
class UnitProfile:
    """
    Template defining what a unit of a given color can do.

    Attributes:
        cost: Coins debited from the spawning bunker
        min_moves: Fewest directions a move command may carry
        max_moves: Most directions a move command may carry
        pattern: Area-attack pattern
    """

    cost: int
    min_moves: int
    max_moves: int
    pattern: AttackPattern


UNIT_PROFILES: Dict[Color, UnitProfile] = {
    Color.RED: UnitProfile(cost=4, min_moves=1, max_moves=3, pattern=rectangle_pattern),
    Color.GREEN: UnitProfile(cost=2, min_moves=1, max_moves=1, pattern=diagonal_pattern),
    Color.BLUE: UnitProfile(cost=2, min_moves=1, max_moves=1, pattern=row_pattern),
}

# Attacker color -> color it defeats
BEATS: Dict[Color, Color] = {
    Color.RED: Color.BLUE,
    Color.BLUE: Color.GREEN,
    Color.GREEN: Color.RED,
}


@dataclass(eq=False)
class Unit(Entity):
    """
    A mobile, colored combatant ("player").

    Units are created only by a bunker and destroyed only by losing a
    fight. The color selects a profile from UNIT_PROFILES; there are no
    per-color subclasses.
    """

    color: Color = Color.RED

    @property
    def profile(self) -> UnitProfile:
        return UNIT_PROFILES[self.color]

    def beats(self, defender: Unit) -> bool:
        """Whether this unit wins a fight it starts against ``defender``."""
        return beats(self.color, defender.color)

    def label(self) -> str:
        owner = self.team_name or "without owner"
        return f"{self.color.value} unit@{self.pos}[{owner}]"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["color"] = self.color.value
        return data


def beats(attacker: Color, defender: Color) -> bool:
    """
    Resolve the combat triangle.

    Red beats Blue, Blue beats Green, Green beats Red. Same colors resolve
    in the attacker's favor, so there are no draws.
    """
    if attacker == defender:
        return True
    return BEATS[attacker] == defender
