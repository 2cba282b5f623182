"""Line-oriented command interpreter for playing a match from a terminal."""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, TextIO

from infra.logger import get_logger
from paintball import (
    ActionStatus,
    CellState,
    Color,
    CreateStatus,
    FieldMap,
    GameStatus,
    PaintballGame,
    UnitAction,
)

logger = get_logger(__name__)

QUIT = "quit"

COMMANDS_NO_GAME = (
    "game - Create a new game\n"
    "help - Show available commands\n"
    "quit - End program execution\n"
)

COMMANDS_IN_GAME = (
    "game - Create a new game\n"
    "move - Move a player\n"
    "create - Create a player in a bunker\n"
    "attack - Attack with all players of the current team\n"
    "status - Show the current state of the game\n"
    "map - Show the map of the current team\n"
    "bunkers - List the bunkers of the current team, by the order they were seized\n"
    "players - List the active players of the current team, by the order they were created\n"
    "help - Show available commands\n"
    "quit - End program execution\n"
)

MAP_CHARS = {
    CellState.EMPTY: ".",
    CellState.BUILDING: "B",
    CellState.UNIT: "P",
    CellState.BUILDING_AND_UNIT: "O",
}

ACTION_MESSAGES = {
    ActionStatus.INVALID_DIRECTION: "Invalid direction.",
    ActionStatus.OFF_THE_MAP: "Trying to move off the map.",
    ActionStatus.POSITION_OCCUPIED: "Position occupied.",
    ActionStatus.PLAYER_ELIMINATED: "Player eliminated.",
    ActionStatus.INVALID_MOVE: "Invalid move.",
    ActionStatus.BUNKER_SEIZED: "Bunker seized.",
    ActionStatus.WON_FIGHT: "Won the fight.",
    ActionStatus.WON_AND_SEIZED: "Won the fight and bunker seized.",
}

# Steps after which the unit is still standing, and its position is printed
_STANDING = (
    ActionStatus.NOTHING,
    ActionStatus.BUNKER_SEIZED,
    ActionStatus.WON_FIGHT,
    ActionStatus.WON_AND_SEIZED,
)


class Console:
    """
    Command interpreter bound to a pair of text streams.

    Each command is one line. ``game`` reads its bunker and team lines
    right after it:

        game 10 10 2 2
        1 1 10 B1
        10 10 10 B2
        T1 B1
        T2 B2

    Args:
        stdin: Stream commands are read from (default: sys.stdin)
        stdout: Stream responses are written to (default: sys.stdout)
        game: Match to start with, e.g. one built from a scenario
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        game: Optional[PaintballGame] = None,
    ):
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self.game = game or PaintballGame()
        self._handlers: Dict[str, Callable[[List[str]], None]] = {
            "help": self._help,
            "game": self._new_game,
            "status": self._status,
            "map": self._map,
            "bunkers": self._bunkers,
            "players": self._players,
            "create": self._create,
            "move": self._move,
            "attack": self._attack,
            QUIT: self._quit,
        }

    # ------------------------------------------------------------------#
    # Loop
    # ------------------------------------------------------------------#
    def prompt(self) -> str:
        if self.game.in_progress:
            return f"{self.game.current_team.name}> "
        return "> "

    def run(self) -> None:
        """Read and execute commands until ``quit`` or end of input."""
        while True:
            self._write(self.prompt())
            line = self._in.readline()
            if not line:
                break
            if not self.execute(line):
                break

    def execute(self, line: str) -> bool:
        """
        Execute a single command line.

        Returns:
            False once the interpreter should stop, True otherwise
        """
        tokens = line.split()
        if not tokens:
            return True
        command, args = tokens[0].lower(), tokens[1:]
        handler = self._handlers.get(command)
        if handler is None:
            self._print("Invalid command.")
            return True

        logger.debug("Command %s %s", command, args)
        try:
            handler(args)
        except ValueError:
            self._print("Invalid command.")
        return command != QUIT

    # ------------------------------------------------------------------#
    # Output helpers
    # ------------------------------------------------------------------#
    def _write(self, text: str) -> None:
        self._out.write(text)

    def _print(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _read_line(self) -> str:
        return self._in.readline().strip()

    def _require_game(self) -> bool:
        if not self.game.in_progress:
            self._print("Invalid command.")
            return False
        return True

    def _print_map(self, field_map: FieldMap) -> None:
        width = field_map.width
        self._print(f"{width} {field_map.height}")
        self._print("**" + " ".join(str(i) for i in range(1, width + 1)))
        for row_number, row in enumerate(field_map.rows(), start=1):
            self._print(str(row_number) + "".join(" " + MAP_CHARS[state] for state in row))

    # ------------------------------------------------------------------#
    # Commands
    # ------------------------------------------------------------------#
    def _help(self, args: List[str]) -> None:
        self._write(COMMANDS_IN_GAME if self.game.in_progress else COMMANDS_NO_GAME)

    def _quit(self, args: List[str]) -> None:
        self._print("Bye.")
        self.game.stop()

    def _new_game(self, args: List[str]) -> None:
        if len(args) < 4:
            self._print("ERROR: NOT ENOUGH ARGUMENTS")
            return
        width, height, team_count, bunker_count = (int(a) for a in args[:4])

        self.game.stop()
        self.game = PaintballGame()
        if self.game.configure_field(width, height) != GameStatus.OK:
            self._print("ERROR: FIELD RESOLUTION IS NOT OK")
            return

        self._print(f"{bunker_count} bunkers:")
        for _ in range(bunker_count):
            parts = self._read_line().split(maxsplit=3)
            try:
                x, y, treasury = (int(p) for p in parts[:3])
                name = parts[3].strip() if len(parts) > 3 else ""
            except ValueError:
                self._print("Bunker not created.")
                continue
            if self.game.add_building(x, y, treasury, name) != GameStatus.OK:
                self._print("Bunker not created.")

        self._print(f"{team_count} teams:")
        for _ in range(team_count):
            parts = self._read_line().split(maxsplit=1)
            team_name = parts[0] if parts else ""
            bunker_name = parts[1].strip() if len(parts) > 1 else ""
            if self.game.add_team(team_name, bunker_name) != GameStatus.OK:
                self._print("Team not created.")

        if self.game.start() != GameStatus.OK:
            self.game.stop()
            self._print("FATAL ERROR: Insufficient number of teams.")

    def _status(self, args: List[str]) -> None:
        if not self._require_game():
            return
        self._print(f"{self.game.width} {self.game.height}")
        buildings = self.game.buildings()
        self._print(f"{len(buildings)} bunkers:")
        for bunker in buildings:
            self._print(f"{bunker.name} ({bunker.team_name or 'without owner'})")
        teams = self.game.teams()
        self._print(f"{len(teams)} teams:")
        self._print("; ".join(team.name for team in teams))

    def _map(self, args: List[str]) -> None:
        if not self._require_game():
            return
        self._print_map(self.game.map(self.game.current_team))

    def _bunkers(self, args: List[str]) -> None:
        if not self._require_game():
            return
        buildings = self.game.current_team.buildings()
        if len(buildings) == 0:
            self._print("Without bunkers.")
            return
        self._print(f"{len(buildings)} bunkers:")
        for bunker in buildings:
            self._print(f"{bunker.name} with {bunker.treasury} coins in position ({bunker.x}, {bunker.y})")

    def _players(self, args: List[str]) -> None:
        if not self._require_game():
            return
        units = self.game.current_team.units()
        if len(units) == 0:
            self._print("Without players.")
            return
        self._print(f"{len(units)} players:")
        for unit in units:
            self._print(f"{unit.color.value} player in position ({unit.x}, {unit.y})")

    def _create(self, args: List[str]) -> None:
        if not self._require_game():
            return
        if not args:
            self._print("Invalid command.")
            return
        color_name, building_name = args[0], " ".join(args[1:])
        response = self.game.create_unit(Color.from_name(color_name), building_name)

        if response.status == GameStatus.OK:
            if response.result == CreateStatus.OK:
                self._print(f"{color_name} player created in {building_name}")
            elif response.result == CreateStatus.INSUFFICIENT_FUNDS:
                self._print("Insufficient coins for recruitment.")
            else:
                self._print("Bunker not free.")
        elif response.status == GameStatus.INVALID_COLOR:
            self._print("Non-existent player type.")
        elif response.status == GameStatus.INVALID_BUILDING:
            self._print("Non-existent bunker.")
        elif response.status == GameStatus.WRONG_TEAM:
            self._print("Bunker illegally invaded.")

    def _move(self, args: List[str]) -> None:
        if not self._require_game():
            return
        if len(args) < 2:
            self._print("Invalid command.")
            return
        x, y = int(args[0]), int(args[1])
        response = self.game.move_unit_at(x, y, args[2:])

        if response.status == GameStatus.INVALID_POSITION:
            self._print("Invalid position.")
        elif response.status == GameStatus.NO_UNIT:
            self._print("No player in that position.")
        elif response.status == GameStatus.WRONG_TEAM:
            self._print("Unable to move player from the enemy team.")
        elif response.status in (GameStatus.OK, GameStatus.GAME_OVER):
            self._print_moves(response.result)
            if response.status == GameStatus.GAME_OVER:
                self._print(f"Winner is {response.winner.name}.")

    def _print_moves(self, actions: List[UnitAction]) -> None:
        for action in actions:
            message = ACTION_MESSAGES.get(action.status)
            if message is not None:
                self._print(message)
            if action.status in _STANDING:
                x, y = action.location
                self._print(f"{action.color.value} player in position ({x}, {y})")

    def _attack(self, args: List[str]) -> None:
        if not self._require_game():
            return
        response = self.game.current_team_attacks()

        if response.status == GameStatus.TEAM_ELIMINATED_AND_GAME_OVER:
            self._print("All players eliminated.")
            self._print(f"Winner is {response.winner.name}.")
        elif response.status == GameStatus.GAME_OVER:
            if response.winner.name == response.result.team_name:
                self._print_map(response.result)
            self._print(f"Winner is {response.winner.name}.")
        elif response.status == GameStatus.TEAM_ELIMINATED:
            self._print("All players eliminated.")
        elif response.status == GameStatus.OK:
            self._print_map(response.result)


def run_console(game: Optional[PaintballGame] = None) -> None:
    """Run the interpreter on the process's standard streams."""
    Console(game=game).run()


if __name__ == "__main__":
    run_console()
