"""
Scenario system for creating and replaying match setups.

A scenario describes the field, the bunkers and the teams of a match, and
nothing that happens once it is running. It serializes to JSON so a setup
can be shared and reproduced.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from infra.logger import get_logger
from infra.paths import PROJECT_ROOT, SCENARIO_STORAGE_DIR

from .core.types import GameStatus, GridPos
from .game import PaintballGame

logger = get_logger(__name__)


def _require_mapping(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class BunkerSpec:
    """Placement of one bunker."""

    name: str
    pos: GridPos
    treasury: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "pos": list(self.pos), "treasury": self.treasury}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> BunkerSpec:
        data = _require_mapping(data, "Bunker entry")
        x, y = data["pos"]
        return cls(name=str(data["name"]), pos=(int(x), int(y)), treasury=int(data["treasury"]))


@dataclass(frozen=True)
class TeamSpec:
    """A team and the bunker it starts with."""

    name: str
    bunker: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "bunker": self.bunker}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TeamSpec:
        data = _require_mapping(data, "Team entry")
        return cls(name=str(data["name"]), bunker=str(data["bunker"]))


class Scenario:
    """
    A complete, self-contained match setup.

    Teams are listed in turn order. Bunkers are placed before teams are
    created, so every team's bunker must be listed in ``bunkers``.

    Example:
        scenario = Scenario(
            width=10,
            height=10,
            bunkers=[
                BunkerSpec("B1", (1, 1), 10),
                BunkerSpec("B2", (10, 10), 10),
            ],
            teams=[TeamSpec("T1", "B1"), TeamSpec("T2", "B2")],
        )
        scenario.save_json("my_scenario.json")
        game = Scenario.load_json("my_scenario.json").create_game()
    """

    def __init__(
        self,
        width: int = 10,
        height: int = 10,
        bunkers: Optional[List[BunkerSpec]] = None,
        teams: Optional[List[TeamSpec]] = None,
    ):
        """
        Initialize a scenario.

        Args:
            width: Width of the field (columns)
            height: Height of the field (rows)
            bunkers: Bunker placements, in placement order
            teams: Teams, in turn order
        """
        self.width = width
        self.height = height
        self.bunkers: List[BunkerSpec] = list(bunkers or [])
        self.teams: List[TeamSpec] = list(teams or [])

    def add_bunker(self, name: str, x: int, y: int, treasury: int) -> Scenario:
        self.bunkers.append(BunkerSpec(name=name, pos=(x, y), treasury=treasury))
        return self

    def add_team(self, name: str, bunker: str) -> Scenario:
        self.teams.append(TeamSpec(name=name, bunker=bunker))
        return self

    def create_game(self, start: bool = True) -> PaintballGame:
        """
        Replay this setup into a fresh engine.

        Rejected setup steps are logged and skipped, exactly as the engine
        would reject them when issued by hand.

        Args:
            start: Also start the match

        Returns:
            The configured engine (in SETUP if ``start`` is False or the
            match could not start)
        """
        game = PaintballGame()
        status = game.configure_field(self.width, self.height)
        if status != GameStatus.OK:
            logger.warning("Field %sx%s rejected: %s", self.width, self.height, status.value)
            return game

        for spec in self.bunkers:
            status = game.add_building(spec.pos[0], spec.pos[1], spec.treasury, spec.name)
            if status != GameStatus.OK:
                logger.warning("Bunker %s rejected: %s", spec.name, status.value)
        for spec in self.teams:
            status = game.add_team(spec.name, spec.bunker)
            if status != GameStatus.OK:
                logger.warning("Team %s rejected: %s", spec.name, status.value)

        if start:
            status = game.start()
            if status != GameStatus.OK:
                logger.warning("Match not started: %s", status.value)
        return game

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a JSON-compatible dictionary.

        Returns:
            Dict with field config, bunkers and teams
        """
        return {
            "config": {
                "width": self.width,
                "height": self.height,
            },
            "bunkers": [b.to_dict() for b in self.bunkers],
            "teams": [t.to_dict() for t in self.teams],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Scenario:
        """
        Deserialize from a dictionary produced by to_dict().

        Raises:
            KeyError: If a bunker or team entry misses a field
            ValueError: If a value cannot be converted or a section has the
                wrong shape
        """
        data = _require_mapping(data, "Scenario")
        config = _require_mapping(data.get("config", {}), "Scenario config")
        return cls(
            width=int(config.get("width", 10)),
            height=int(config.get("height", 10)),
            bunkers=[BunkerSpec.from_dict(b) for b in data.get("bunkers", [])],
            teams=[TeamSpec.from_dict(t) for t in data.get("teams", [])],
        )

    def save_json(self, filepath: str | Path | None = None, indent: int = 2) -> Path:
        """
        Save scenario to JSON file.

        Args:
            filepath: Path to save to. If None, saves under storage/scenarios
                with a timestamped name. Relative paths resolve against the
                project root.
            indent: JSON indentation (default: 2)

        Returns:
            Path the scenario was written to
        """
        if filepath is None:
            base_dir = SCENARIO_STORAGE_DIR
            base_dir.mkdir(parents=True, exist_ok=True)
            timestamp = time.strftime("%Y%m%d_%H%M%S")
            filepath = base_dir / f"scenario_{timestamp}.json"
        else:
            filepath = Path(filepath)
            if not filepath.is_absolute():
                filepath = PROJECT_ROOT / filepath
            filepath.parent.mkdir(parents=True, exist_ok=True)

        logger.info("Saving scenario JSON to %s", filepath)
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=indent, ensure_ascii=False)
        return filepath

    @classmethod
    def load_json(cls, filepath: str | Path) -> Scenario:
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    def __str__(self) -> str:
        return f"Scenario({self.width}x{self.height}, bunkers={len(self.bunkers)}, teams={len(self.teams)})"

    def __repr__(self) -> str:
        return f"Scenario(width={self.width}, height={self.height}, bunkers={self.bunkers}, teams={self.teams})"


# =============================================================================
# SCENARIO BUILDERS
# =============================================================================

def create_duel_scenario() -> Scenario:
    """
    Two teams in opposite corners of a 10x10 field, 10 coins each.
    """
    return Scenario(
        width=10,
        height=10,
        bunkers=[
            BunkerSpec("B1", (1, 1), 10),
            BunkerSpec("B2", (10, 10), 10),
        ],
        teams=[
            TeamSpec("T1", "B1"),
            TeamSpec("T2", "B2"),
        ],
    )


def create_skirmish_scenario() -> Scenario:
    """
    Three teams on a 12x12 field with two neutral bunkers in the middle.
    """
    return Scenario(
        width=12,
        height=12,
        bunkers=[
            BunkerSpec("Alpha", (1, 1), 8),
            BunkerSpec("Bravo", (12, 1), 8),
            BunkerSpec("Charlie", (6, 12), 8),
            BunkerSpec("Depot", (6, 6), 3),
            BunkerSpec("Outpost", (7, 7), 3),
        ],
        teams=[
            TeamSpec("North", "Alpha"),
            TeamSpec("East", "Bravo"),
            TeamSpec("South", "Charlie"),
        ],
    )


if __name__ == "__main__":
    # python -m paintball.scenario
    from infra.logger import configure_logging
    configure_logging(level="INFO", json=True)
    create_duel_scenario().save_json()
