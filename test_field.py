"""
Tests for the grid model, rosters and bunkers.

Run with ``python -m unittest test_field.py``.
"""

import unittest

from paintball.core import CellState, Color, CreateStatus, SizedIterator, index_of
from paintball.entities import Bunker, Unit
from paintball.world import Field, Team


def place_unit(field: Field, team: Team, color: Color, x: int, y: int) -> Unit:
    unit = Unit(pos=(x, y), color=color)
    field.set_unit_at(unit, x, y)
    team.add_unit(unit)
    return unit


class TestField(unittest.TestCase):
    def setUp(self) -> None:
        self.field = Field(10, 12)

    def test_dimensions_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            Field(0, 10)
        with self.assertRaises(ValueError):
            Field(10, -1)

    def test_bounds_are_one_based(self) -> None:
        self.assertTrue(self.field.in_bounds(1, 1))
        self.assertTrue(self.field.in_bounds(10, 12))
        self.assertFalse(self.field.in_bounds(0, 1))
        self.assertFalse(self.field.in_bounds(11, 1))
        self.assertFalse(self.field.in_bounds(1, 13))
        with self.assertRaises(IndexError):
            self.field.cell_at(11, 1)

    def test_cells_are_row_major(self) -> None:
        cells = list(self.field.cells())
        self.assertEqual(len(cells), 120)
        self.assertEqual(cells[0].pos, (1, 1))
        self.assertEqual(cells[1].pos, (2, 1))
        self.assertEqual(cells[10].pos, (1, 2))
        self.assertEqual(cells[-1].pos, (10, 12))

    def test_move_unit_keeps_cell_and_position_consistent(self) -> None:
        team = Team("T1")
        unit = place_unit(self.field, team, Color.RED, 3, 3)
        self.assertIs(self.field.cell_at(3, 3).unit, unit)

        self.field.move_unit(unit, 4, 3)
        self.assertEqual(unit.pos, (4, 3))
        self.assertIsNone(self.field.cell_at(3, 3).unit)
        self.assertIs(self.field.cell_at(4, 3).unit, unit)

    def test_remove_reports_whether_something_was_there(self) -> None:
        team = Team("T1")
        place_unit(self.field, team, Color.BLUE, 2, 2)
        self.assertTrue(self.field.remove_unit_at(2, 2))
        self.assertFalse(self.field.remove_unit_at(2, 2))

        bunker = Bunker(pos=(5, 5), name="B1", treasury=3)
        self.field.set_building_at(bunker, 5, 5)
        self.assertTrue(self.field.remove_building_at(5, 5))
        self.assertFalse(self.field.cell_at(5, 5).has_building())


class TestSnapshot(unittest.TestCase):
    def setUp(self) -> None:
        self.field = Field(10, 10)
        self.own = Team("Own")
        self.enemy = Team("Enemy")

        self.own_bunker = Bunker(pos=(1, 1), name="Home", treasury=5)
        self.field.set_building_at(self.own_bunker, 1, 1)
        self.own.add_building(self.own_bunker)

        self.neutral = Bunker(pos=(5, 5), name="Neutral", treasury=5)
        self.field.set_building_at(self.neutral, 5, 5)

    def test_unfiltered_snapshot_shows_everything(self) -> None:
        place_unit(self.field, self.own, Color.RED, 1, 1)
        place_unit(self.field, self.enemy, Color.BLUE, 3, 3)

        snapshot = self.field.snapshot()
        self.assertIsNone(snapshot.team_name)
        self.assertEqual(len(snapshot.cells), 100)
        self.assertEqual(snapshot.state_at(1, 1), CellState.BUILDING_AND_UNIT)
        self.assertEqual(snapshot.state_at(3, 3), CellState.UNIT)
        self.assertEqual(snapshot.state_at(5, 5), CellState.BUILDING)
        self.assertEqual(snapshot.state_at(2, 2), CellState.EMPTY)

    def test_team_snapshot_hides_foreign_cells_entirely(self) -> None:
        place_unit(self.field, self.enemy, Color.BLUE, 3, 3)
        own_unit = place_unit(self.field, self.own, Color.RED, 6, 6)

        snapshot = self.field.snapshot(self.own)
        self.assertEqual(snapshot.team_name, "Own")
        self.assertEqual(snapshot.state_at(1, 1), CellState.BUILDING)
        self.assertEqual(snapshot.state_at(3, 3), CellState.EMPTY)
        self.assertEqual(snapshot.state_at(5, 5), CellState.EMPTY)
        self.assertEqual(snapshot.state_at(6, 6), CellState.UNIT)

        # An own unit standing on a bunker it does not own is hidden too
        self.field.move_unit(own_unit, 5, 5)
        self.assertEqual(self.field.snapshot(self.own).state_at(5, 5), CellState.EMPTY)

    def test_enemy_unit_on_own_bunker_hides_the_bunker(self) -> None:
        place_unit(self.field, self.enemy, Color.GREEN, 1, 1)
        self.assertEqual(self.field.snapshot(self.own).state_at(1, 1), CellState.EMPTY)

    def test_rows_and_dict(self) -> None:
        snapshot = self.field.snapshot()
        rows = snapshot.rows()
        self.assertEqual(len(rows), 10)
        self.assertEqual(rows[0][0], CellState.BUILDING)
        data = snapshot.to_dict()
        self.assertEqual(data["width"], 10)
        self.assertEqual(data["cells"][0], "building")


class TestTeam(unittest.TestCase):
    def test_rosters_keep_order_and_back_references(self) -> None:
        field = Field(10, 10)
        team = Team("T1")
        self.assertTrue(team.is_empty())

        first = place_unit(field, team, Color.RED, 1, 1)
        second = place_unit(field, team, Color.GREEN, 2, 1)
        self.assertEqual(list(team.units()), [first, second])
        self.assertIs(first.team, team)
        self.assertFalse(team.is_empty())

        team.remove_unit(first)
        self.assertIsNone(first.team)
        self.assertEqual(team.unit_count, 1)

    def test_removing_an_absent_entity_raises(self) -> None:
        team = Team("T1")
        with self.assertRaises(ValueError):
            team.remove_unit(Unit(pos=(1, 1), color=Color.RED))
        with self.assertRaises(ValueError):
            team.remove_building(Bunker(pos=(1, 1), name="B", treasury=1))

    def test_empty_name_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Team("")

    def test_team_with_only_a_bunker_is_not_empty(self) -> None:
        team = Team("T1")
        team.add_building(Bunker(pos=(1, 1), name="B1", treasury=1))
        self.assertFalse(team.is_empty())
        self.assertEqual(team.building_count, 1)


class TestSizedIterator(unittest.TestCase):
    def test_reports_size_and_remaining(self) -> None:
        items = SizedIterator(["a", "b", "c"])
        self.assertEqual(len(items), 3)
        self.assertTrue(items.has_next())
        self.assertEqual(next(items), "a")
        self.assertEqual(len(items), 3)
        self.assertEqual(items.remaining(), 2)
        self.assertEqual(list(items), ["b", "c"])
        self.assertFalse(items.has_next())

    def test_iterates_a_snapshot(self) -> None:
        source = [1, 2, 3]
        items = SizedIterator(source)
        source.clear()
        self.assertEqual(list(items), [1, 2, 3])

    def test_index_of_uses_identity(self) -> None:
        a, b = [1], [1]
        self.assertEqual(index_of([a, b], b), 1)
        with self.assertRaises(ValueError):
            index_of([a], [1])


class TestBunker(unittest.TestCase):
    def setUp(self) -> None:
        self.field = Field(10, 10)
        self.team = Team("T1")
        self.bunker = Bunker(pos=(4, 4), name="B1", treasury=10)
        self.field.set_building_at(self.bunker, 4, 4)
        self.team.add_building(self.bunker)

    def test_validation(self) -> None:
        with self.assertRaises(ValueError):
            Bunker(pos=(1, 1), name="", treasury=1)
        with self.assertRaises(ValueError):
            Bunker(pos=(1, 1), name="B", treasury=-1)

    def test_create_unit_debits_cost_and_joins_team(self) -> None:
        status, unit = self.bunker.create_unit(Color.RED, self.field)
        self.assertEqual(status, CreateStatus.OK)
        self.assertEqual(self.bunker.treasury, 6)
        self.assertEqual(unit.pos, (4, 4))
        self.assertIs(self.field.cell_at(4, 4).unit, unit)
        self.assertEqual(list(self.team.units()), [unit])

    def test_create_unit_on_occupied_bunker(self) -> None:
        self.bunker.create_unit(Color.BLUE, self.field)
        status, unit = self.bunker.create_unit(Color.BLUE, self.field)
        self.assertEqual(status, CreateStatus.OCCUPIED)
        self.assertIsNone(unit)
        self.assertEqual(self.bunker.treasury, 8)
        self.assertEqual(self.team.unit_count, 1)

    def test_create_unit_without_funds(self) -> None:
        poor = Bunker(pos=(1, 1), name="Poor", treasury=3)
        self.field.set_building_at(poor, 1, 1)
        status, unit = poor.create_unit(Color.RED, self.field)
        self.assertEqual(status, CreateStatus.INSUFFICIENT_FUNDS)
        self.assertIsNone(unit)
        self.assertEqual(poor.treasury, 3)
        self.assertFalse(self.field.cell_at(1, 1).has_unit())

    def test_end_turn_pays_one_coin(self) -> None:
        self.bunker.end_turn()
        self.bunker.end_turn()
        self.assertEqual(self.bunker.treasury, 12)

    def test_to_dict(self) -> None:
        data = self.bunker.to_dict()
        self.assertEqual(data["name"], "B1")
        self.assertEqual(data["team"], "T1")
        self.assertEqual(data["pos"], [4, 4])
        self.assertEqual(data["type"], "Bunker")


if __name__ == "__main__":
    unittest.main()
