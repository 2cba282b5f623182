from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from ..core.types import Color, CreateStatus
from .base import Entity
from .unit import UNIT_PROFILES, Unit

if TYPE_CHECKING:
    from ..world.field import Field


@dataclass(eq=False)
class Bunker(Entity):
    """
    A stationary, capturable building that earns coins and spawns units.

    Bunkers are never destroyed; they only change owner. The name is the
    bunker's identity within a match.
    """

    name: str = ""
    treasury: int = 0

    def __post_init__(self):
        if not self.name:
            raise ValueError("Bunker name cannot be empty")
        if self.treasury < 0:
            raise ValueError(f"Treasury cannot be negative: {self.treasury}")

    def end_turn(self) -> None:
        """Passive income: one coin per turn."""
        self.treasury += 1

    def create_unit(self, color: Color, field: Field) -> Tuple[CreateStatus, Optional[Unit]]:
        """
        Spawn a unit of ``color`` on this bunker's cell.

        The unit joins the bunker's team. Nothing changes when the spawn
        fails.

        Args:
            color: Color of the new unit
            field: Field the bunker stands on

        Returns:
            (CreateStatus.OK, unit) on success, otherwise
            (CreateStatus.OCCUPIED, None) if a unit stands on the bunker or
            (CreateStatus.INSUFFICIENT_FUNDS, None) if the treasury is short
        """
        if field.cell_at(*self.pos).unit is not None:
            return CreateStatus.OCCUPIED, None
        cost = UNIT_PROFILES[color].cost
        if self.treasury < cost:
            return CreateStatus.INSUFFICIENT_FUNDS, None

        self.treasury -= cost
        unit = Unit(pos=self.pos, color=color)
        field.set_unit_at(unit, *self.pos)
        if self.team is not None:
            self.team.add_unit(unit)
        return CreateStatus.OK, unit

    def label(self) -> str:
        owner = self.team_name or "without owner"
        return f"Bunker({self.name})@{self.pos}[{owner}]"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "name": self.name,
            "treasury": self.treasury,
        })
        return data
