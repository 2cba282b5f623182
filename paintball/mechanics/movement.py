"""
MovementResolver - unit moves and area attacks.

This module handles:
- Validating and executing single move steps
- Fanning a move command out into steps, per the unit's color profile
- Running a unit's area attack along its color's pattern
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from ..core.results import UnitAction
from ..core.types import ActionStatus, MoveDir
from .combat import CombatResolver

if TYPE_CHECKING:
    from ..entities.unit import Unit
    from ..world.field import Field

Direction = Union[MoveDir, str, None]


class MovementResolver:
    """
    Stateless resolver for unit actions.

    Every engagement along the way is delegated to the CombatResolver.
    """

    def __init__(self, combat: Optional[CombatResolver] = None):
        self._combat = combat or CombatResolver()

    def move(self, field: Field, unit: Unit, directions: Sequence[Direction]) -> List[UnitAction]:
        """
        Execute a move command.

        The number of directions must fit the unit's profile; otherwise the
        whole command is rejected with a single INVALID_MOVE record and
        nothing changes. Steps run in order and stop right after the unit
        is eliminated.

        Args:
            field: Field the match is played on (modified in-place)
            unit: Unit to move
            directions: MoveDir values or direction names

        Returns:
            One UnitAction per executed step
        """
        profile = unit.profile
        if not profile.min_moves <= len(directions) <= profile.max_moves:
            return [UnitAction(ActionStatus.INVALID_MOVE, unit.pos, unit.color)]

        actions: List[UnitAction] = []
        for direction in directions:
            action = self.move_step(field, unit, direction)
            actions.append(action)
            if action.status == ActionStatus.PLAYER_ELIMINATED:
                break
        return actions

    def move_step(self, field: Field, unit: Unit, direction: Direction) -> UnitAction:
        """
        Move a unit one cell.

        Returns:
            UnitAction with INVALID_DIRECTION, OFF_THE_MAP or
            POSITION_OCCUPIED (unit untouched), PLAYER_ELIMINATED at the
            pre-move location, or the engagement status at the new location
        """
        if isinstance(direction, str):
            direction = MoveDir.from_name(direction)
        if not isinstance(direction, MoveDir):
            return UnitAction(ActionStatus.INVALID_DIRECTION, unit.pos, unit.color)

        dx, dy = direction.delta
        x, y = unit.x + dx, unit.y + dy
        if not field.in_bounds(x, y):
            return UnitAction(ActionStatus.OFF_THE_MAP, unit.pos, unit.color)

        target = field.cell_at(x, y)
        if target.unit is not None and target.unit.team is unit.team:
            return UnitAction(ActionStatus.POSITION_OCCUPIED, unit.pos, unit.color)

        origin = unit.pos
        status = self._combat.attack_cell(field, unit, target)
        if status == ActionStatus.PLAYER_ELIMINATED:
            return UnitAction(status, origin, unit.color)

        field.move_unit(unit, x, y)
        return UnitAction(status, unit.pos, unit.color)

    def area_attack(self, field: Field, unit: Unit) -> ActionStatus:
        """
        Attack every cell of the unit's pattern without moving.

        Returns:
            PLAYER_ELIMINATED as soon as the unit loses a fight (the rest of
            the pattern is skipped), SURVIVED otherwise
        """
        x, y = unit.pos
        for dx, dy in unit.profile.pattern(x, y, field.width, field.height):
            cell = field.cell_at(x + dx, y + dy)
            if self._combat.attack_cell(field, unit, cell) == ActionStatus.PLAYER_ELIMINATED:
                return ActionStatus.PLAYER_ELIMINATED
        return ActionStatus.SURVIVED
