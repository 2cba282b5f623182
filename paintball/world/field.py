"""
Field - the rectangular grid the match is played on.

The field owns every cell, indexed by position. Units and bunkers store
their own coordinates; the field keeps the cell references and the
entities' coordinates in step whenever something is placed, removed or
moved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from ..core.types import CellState, GridPos

if TYPE_CHECKING:
    from ..entities.bunker import Bunker
    from ..entities.unit import Unit
    from .team import Team


@dataclass(eq=False)
class Cell:
    """A single grid square: at most one unit and at most one bunker."""

    x: int
    y: int
    unit: Optional["Unit"] = None
    building: Optional["Bunker"] = None

    @property
    def pos(self) -> GridPos:
        return (self.x, self.y)

    def has_unit(self) -> bool:
        return self.unit is not None

    def has_building(self) -> bool:
        return self.building is not None

    def state(self, team: Optional["Team"] = None) -> CellState:
        """
        Visible state of this cell, optionally from a team's point of view.

        A cell holding an enemy unit, or an enemy (or unowned) bunker, is
        reported as EMPTY as a whole, whatever else it holds.
        """
        if team is not None:
            if self.unit is not None and self.unit.team is not team:
                return CellState.EMPTY
            if self.building is not None and self.building.team is not team:
                return CellState.EMPTY
        if self.unit is not None and self.building is not None:
            return CellState.BUILDING_AND_UNIT
        if self.unit is not None:
            return CellState.UNIT
        if self.building is not None:
            return CellState.BUILDING
        return CellState.EMPTY


@dataclass(frozen=True)
class FieldMap:
    """
    Point-in-time snapshot of the field for a renderer.

    Attributes:
        width: Field width
        height: Field height
        cells: Row-major cell states, ``width * height`` entries
        team_name: Viewing team, or None for an unfiltered snapshot
    """

    width: int
    height: int
    cells: List[CellState]
    team_name: Optional[str] = None

    def state_at(self, x: int, y: int) -> CellState:
        return self.cells[(y - 1) * self.width + (x - 1)]

    def rows(self) -> List[List[CellState]]:
        return [self.cells[r * self.width:(r + 1) * self.width] for r in range(self.height)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "team": self.team_name,
            "cells": [state.value for state in self.cells],
        }


class Field:
    """
    Fixed-size grid with 1-based coordinates.

    Attributes:
        width: Number of columns
        height: Number of rows
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Field dimensions must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[Cell] = [
            Cell(x, y) for y in range(1, height + 1) for x in range(1, width + 1)
        ]

    # ------------------------------------------------------------------#
    # Lookup
    # ------------------------------------------------------------------#
    def in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Fetch the cell at (x, y).

        Raises:
            IndexError: If the coordinates are off the field
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is off the {self.width}x{self.height} field")
        return self._cells[(y - 1) * self.width + (x - 1)]

    def cells(self) -> Iterator[Cell]:
        """Iterate every cell in row-major order."""
        return iter(self._cells)

    # ------------------------------------------------------------------#
    # Placement
    # ------------------------------------------------------------------#
    def set_unit_at(self, unit: Unit, x: int, y: int) -> Cell:
        cell = self.cell_at(x, y)
        cell.unit = unit
        unit.pos = (x, y)
        return cell

    def remove_unit_at(self, x: int, y: int) -> bool:
        """Clear the unit reference of a cell. Returns whether one was there."""
        cell = self.cell_at(x, y)
        removed = cell.unit is not None
        cell.unit = None
        return removed

    def move_unit(self, unit: Unit, x: int, y: int) -> Cell:
        """Relocate a unit, clearing its old cell and filling the new one."""
        target = self.cell_at(x, y)
        old = self.cell_at(*unit.pos)
        if old.unit is unit:
            old.unit = None
        target.unit = unit
        unit.pos = (x, y)
        return target

    def set_building_at(self, building: Bunker, x: int, y: int) -> Cell:
        cell = self.cell_at(x, y)
        cell.building = building
        building.pos = (x, y)
        return cell

    def remove_building_at(self, x: int, y: int) -> bool:
        cell = self.cell_at(x, y)
        removed = cell.building is not None
        cell.building = None
        return removed

    # ------------------------------------------------------------------#
    # Snapshots
    # ------------------------------------------------------------------#
    def snapshot(self, team: Optional[Team] = None) -> FieldMap:
        """
        Build a snapshot of the field.

        Args:
            team: Viewing team for fog-of-war, or None for everything

        Returns:
            FieldMap with one CellState per cell, row-major
        """
        return FieldMap(
            width=self.width,
            height=self.height,
            cells=[cell.state(team) for cell in self._cells],
            team_name=team.name if team is not None else None,
        )

    def __repr__(self) -> str:
        return f"Field({self.width}x{self.height})"
