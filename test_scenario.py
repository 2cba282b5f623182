"""
Tests for scenario serialization and replay.

Run with ``python -m unittest test_scenario.py``.
"""

import json
import tempfile
import unittest
from pathlib import Path

from paintball import GamePhase, Scenario, create_duel_scenario, create_skirmish_scenario
from paintball.scenario import BunkerSpec, TeamSpec


class TestScenario(unittest.TestCase):
    def test_dict_round_trip(self) -> None:
        scenario = create_skirmish_scenario()
        data = scenario.to_dict()
        self.assertEqual(data["config"], {"width": 12, "height": 12})
        self.assertEqual(data["bunkers"][0], {"name": "Alpha", "pos": [1, 1], "treasury": 8})
        self.assertEqual(data["teams"][2], {"name": "South", "bunker": "Charlie"})

        restored = Scenario.from_dict(data)
        self.assertEqual(restored.to_dict(), data)
        self.assertEqual(restored.bunkers[3], BunkerSpec("Depot", (6, 6), 3))

    def test_json_save_and_load(self) -> None:
        scenario = create_duel_scenario()
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "duel.json"
            written = scenario.save_json(path)
            self.assertEqual(written, path)

            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            loaded = Scenario.load_json(path)

        self.assertEqual(raw["teams"][0]["bunker"], "B1")
        self.assertEqual(loaded.to_dict(), scenario.to_dict())

    def test_malformed_entries_raise(self) -> None:
        with self.assertRaises(KeyError):
            Scenario.from_dict({"bunkers": [{"name": "B1", "pos": [1, 1]}]})
        with self.assertRaises(ValueError):
            Scenario.from_dict({"config": {"width": "wide"}})

    def test_non_mapping_sections_raise_value_error(self) -> None:
        for data in ([], {"config": [1, 2]}, {"bunkers": [["B1", 1, 1]]}, {"teams": ["T1"]}):
            with self.assertRaises(ValueError):
                Scenario.from_dict(data)

    def test_create_game(self) -> None:
        game = create_duel_scenario().create_game()
        self.assertEqual(game.phase, GamePhase.IN_PROGRESS)
        self.assertEqual([t.name for t in game.teams()], ["T1", "T2"])
        self.assertEqual(game.current_team.name, "T1")
        self.assertEqual(game.building("B2").pos, (10, 10))
        self.assertEqual(game.building("B2").team.name, "T2")

    def test_create_game_without_start(self) -> None:
        game = create_duel_scenario().create_game(start=False)
        self.assertEqual(game.phase, GamePhase.SETUP)

    def test_create_game_logs_rejections(self) -> None:
        scenario = Scenario(
            width=10,
            height=10,
            bunkers=[BunkerSpec("B1", (1, 1), 5), BunkerSpec("Off", (11, 1), 5)],
            teams=[TeamSpec("T1", "B1"), TeamSpec("T2", "Off")],
        )
        with self.assertLogs("paintball.scenario", level="WARNING") as logs:
            game = scenario.create_game()

        self.assertEqual(game.phase, GamePhase.SETUP)
        output = "\n".join(logs.output)
        self.assertIn("Bunker Off rejected", output)
        self.assertIn("Team T2 rejected", output)
        self.assertIn("Match not started", output)

    def test_invalid_field_stops_replay(self) -> None:
        scenario = Scenario(width=5, height=5, bunkers=[BunkerSpec("B1", (1, 1), 5)])
        with self.assertLogs("paintball.scenario", level="WARNING"):
            game = scenario.create_game()
        self.assertIsNone(game.field)
        self.assertEqual(len(game.buildings()), 0)

    def test_builder_methods_chain(self) -> None:
        scenario = Scenario().add_bunker("A", 2, 2, 4).add_team("Red", "A")
        self.assertEqual(scenario.bunkers, [BunkerSpec("A", (2, 2), 4)])
        self.assertEqual(scenario.teams, [TeamSpec("Red", "A")])
        self.assertIn("bunkers=1", str(scenario))


if __name__ == "__main__":
    unittest.main()
