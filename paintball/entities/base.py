from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..core.types import GridPos

if TYPE_CHECKING:
    from ..world.team import Team


@dataclass(eq=False)
class Entity:
    """
    Base class for everything that occupies a cell of the field.

    An entity knows where it stands and which team owns it. Both are
    mutated only through the Field (position) and the owning Team (owner),
    which keep their own references consistent with the entity's.

    Entities compare by identity: two bunkers with the same coordinates
    are still different bunkers.
    """

    pos: GridPos
    team: Optional["Team"] = field(default=None, repr=False)

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]

    @property
    def team_name(self) -> Optional[str]:
        return self.team.name if self.team is not None else None

    def label(self) -> str:
        """
        Get a human-readable label for this entity.

        Returns:
            String like "Bunker(Alpha)@(1, 1)[T1]"
        """
        owner = self.team_name or "without owner"
        return f"{self.__class__.__name__}@{self.pos}[{owner}]"

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize entity to dictionary.

        Subclasses extend this with their own fields.
        """
        return {
            "type": self.__class__.__name__,
            "pos": list(self.pos),
            "team": self.team_name,
        }

    def __str__(self) -> str:
        return self.label()
