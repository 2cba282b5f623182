"""Game mechanics: engagements, moves and area attacks."""

from .combat import CombatResolver
from .movement import MovementResolver

__all__ = ["CombatResolver", "MovementResolver"]
