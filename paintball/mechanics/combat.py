"""
CombatResolver - engagement resolution on a single cell.

This module handles:
- Fights between a unit and the enemy unit on a target cell
- Removing the loser from the field and its team
- Seizing bunkers that the acting team does not own
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from infra.logger import get_logger

from ..core.types import ActionStatus

if TYPE_CHECKING:
    from ..entities.unit import Unit
    from ..world.field import Cell, Field

logger = get_logger(__name__)


class CombatResolver:
    """
    Stateless resolver for engagements.

    An engagement happens whenever a unit enters a cell or hits it with an
    area attack. The resolver never relocates the attacker; moving is the
    MovementResolver's job.
    """

    def attack_cell(self, field: Field, attacker: Unit, cell: Cell) -> ActionStatus:
        """
        Resolve an engagement of ``attacker`` against ``cell``.

        Args:
            field: Field the match is played on (modified in-place)
            attacker: Acting unit
            cell: Target cell

        Returns:
            NOTHING if nothing happened (empty cell, friendly unit, or own
            bunker), PLAYER_ELIMINATED if the attacker lost its fight,
            WON_FIGHT, BUNKER_SEIZED or WON_AND_SEIZED otherwise
        """
        status = ActionStatus.NOTHING
        defender = cell.unit
        if defender is not None:
            if defender.team is attacker.team:
                return status
            if not attacker.beats(defender):
                logger.debug("%s lost against %s", attacker.label(), defender.label())
                self.eliminate(field, attacker)
                return ActionStatus.PLAYER_ELIMINATED
            logger.debug("%s defeated %s", attacker.label(), defender.label())
            self.eliminate(field, defender)
            status = ActionStatus.WON_FIGHT

        building = cell.building
        if building is not None and building.team is not attacker.team:
            previous = building.team
            if previous is not None:
                previous.remove_building(building)
            attacker.team.add_building(building)
            logger.debug("%s seized by %s", building.name, attacker.team_name)
            status = (ActionStatus.WON_AND_SEIZED if status == ActionStatus.WON_FIGHT
                      else ActionStatus.BUNKER_SEIZED)
        return status

    @staticmethod
    def eliminate(field: Field, unit: Unit) -> None:
        """Remove a unit from the field and from its team."""
        field.remove_unit_at(*unit.pos)
        if unit.team is not None:
            unit.team.remove_unit(unit)
