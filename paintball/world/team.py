from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..core.sequence import SizedIterator, index_of

if TYPE_CHECKING:
    from ..entities.bunker import Bunker
    from ..entities.unit import Unit


class Team:
    """
    A named side of the match with its rosters of bunkers and units.

    Adding an entity to a roster makes this team its owner; removing it
    clears the owner. Bunkers are kept in the order they were claimed,
    units in the order they were created.
    """

    def __init__(self, name: str):
        if not name:
            raise ValueError("Team name cannot be empty")
        self.name = name
        self._buildings: List[Bunker] = []
        self._units: List[Unit] = []

    def is_empty(self) -> bool:
        return not self._buildings and not self._units

    # Units
    def add_unit(self, unit: Unit) -> None:
        unit.team = self
        self._units.append(unit)

    def remove_unit(self, unit: Unit) -> None:
        """
        Raises:
            ValueError: If the unit is not on this team's roster
        """
        del self._units[index_of(self._units, unit)]
        unit.team = None

    # Buildings
    def add_building(self, building: Bunker) -> None:
        building.team = self
        self._buildings.append(building)

    def remove_building(self, building: Bunker) -> None:
        """
        Raises:
            ValueError: If the bunker is not on this team's roster
        """
        del self._buildings[index_of(self._buildings, building)]
        building.team = None

    # Roster queries
    def units(self) -> SizedIterator[Unit]:
        return SizedIterator(self._units)

    def buildings(self) -> SizedIterator[Bunker]:
        return SizedIterator(self._buildings)

    @property
    def unit_count(self) -> int:
        return len(self._units)

    @property
    def building_count(self) -> int:
        return len(self._buildings)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (f"Team(name={self.name!r}, buildings={len(self._buildings)}, "
                f"units={len(self._units)})")
