"""
PaintballGame - the turn engine.

This is the primary API of the package. It owns the field, the bunkers and
the teams, validates every command, rotates turns and detects eliminations.

Usage:
    from paintball import PaintballGame, Color

    game = PaintballGame()
    game.configure_field(10, 10)
    game.add_building(1, 1, 10, "B1")
    game.add_building(10, 10, 10, "B2")
    game.add_team("T1", "B1")
    game.add_team("T2", "B2")
    game.start()

    game.create_unit(Color.RED, "B1")        # T1's turn
    game.create_unit(Color.BLUE, "B2")       # T2's turn
    response = game.move_unit_at(1, 1, ["south", "south"])

Turn rules:
    Every create/move/attack command ends the current team's turn, even
    when the command is rejected. At the end of each turn every bunker
    earns one coin.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Union

from infra.logger import get_logger

from .core.results import GameResponse, UnitAction
from .core.sequence import SizedIterator
from .core.types import ActionStatus, Color, CreateStatus, GamePhase, GameStatus, MoveDir
from .entities.bunker import Bunker
from .mechanics import CombatResolver, MovementResolver
from .world.field import Field, FieldMap
from .world.team import Team

logger = get_logger(__name__)

MIN_FIELD_SIZE = 10
MIN_TEAMS = 2


class PaintballGame:
    """
    Turn engine for a single match.

    A match goes SETUP -> IN_PROGRESS -> ENDED. ENDED is terminal; play
    again with a fresh instance.

    Attributes:
        field: The grid (None until configure_field succeeds)
        phase: Current GamePhase
    """

    def __init__(self):
        self.field: Optional[Field] = None
        self.phase = GamePhase.SETUP
        self._buildings: List[Bunker] = []
        self._buildings_by_name: Dict[str, Bunker] = {}
        self._teams: List[Team] = []
        self._current = 0
        self._winner: Optional[Team] = None
        self._turn = 0

        self._combat = CombatResolver()
        self._movement = MovementResolver(self._combat)

    # ------------------------------------------------------------------#
    # Setup
    # ------------------------------------------------------------------#
    def configure_field(self, width: int, height: int) -> GameStatus:
        """
        Create the field.

        Returns:
            INVALID_SIZE if either dimension is below 10, REJECTED if
            bunkers were already placed on a previous field, OK otherwise
        """
        if self.phase != GamePhase.SETUP:
            return GameStatus.WRONG_PHASE
        if width < MIN_FIELD_SIZE or height < MIN_FIELD_SIZE:
            logger.debug("Rejected field size %sx%s", width, height)
            return GameStatus.INVALID_SIZE
        if self._buildings:
            return GameStatus.REJECTED
        self.field = Field(width, height)
        return GameStatus.OK

    def add_building(self, x: int, y: int, treasury: int, name: str) -> GameStatus:
        """
        Place an unowned bunker.

        Returns:
            REJECTED if there is no field yet, a coordinate or the treasury
            is not an integer, the position is off the field or already has
            a bunker, the treasury is not positive or the name is empty or
            taken; OK otherwise
        """
        if self.phase != GamePhase.SETUP:
            return GameStatus.WRONG_PHASE
        if (self.field is None
                or not all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y, treasury))
                or not self.field.in_bounds(x, y)
                or treasury <= 0
                or not name
                or name in self._buildings_by_name
                or self.field.cell_at(x, y).has_building()):
            logger.debug("Rejected bunker %r at (%s, %s) with %s coins", name, x, y, treasury)
            return GameStatus.REJECTED

        bunker = Bunker(pos=(x, y), name=name, treasury=treasury)
        self.field.set_building_at(bunker, x, y)
        self._buildings.append(bunker)
        self._buildings_by_name[name] = bunker
        return GameStatus.OK

    def add_team(self, team_name: str, building_name: str) -> GameStatus:
        """
        Create a team that owns the named, still unclaimed, bunker.

        Returns:
            REJECTED if the team name is empty or taken or no unclaimed
            bunker has that name; OK otherwise
        """
        if self.phase != GamePhase.SETUP:
            return GameStatus.WRONG_PHASE
        bunker = self._buildings_by_name.get(building_name)
        if not team_name or self.team(team_name) is not None or bunker is None or bunker.team is not None:
            logger.debug("Rejected team %r anchored at %r", team_name, building_name)
            return GameStatus.REJECTED

        team = Team(team_name)
        team.add_building(bunker)
        self._teams.append(team)
        return GameStatus.OK

    def start(self) -> GameStatus:
        """
        Start the match.

        Returns:
            NOT_ENOUGH_TEAMS with fewer than two teams, OK otherwise
        """
        if self.phase != GamePhase.SETUP:
            return GameStatus.WRONG_PHASE
        if len(self._teams) < MIN_TEAMS:
            return GameStatus.NOT_ENOUGH_TEAMS
        self.phase = GamePhase.IN_PROGRESS
        self._current = 0
        logger.info(
            "Match started on %sx%s field: teams=%s bunkers=%s",
            self.width, self.height,
            [t.name for t in self._teams], [b.name for b in self._buildings],
        )
        return GameStatus.OK

    def stop(self) -> None:
        """End the match without a winner."""
        if self.phase == GamePhase.ENDED:
            return
        self.phase = GamePhase.ENDED
        logger.info("Match stopped after %s turns", self._turn)

    # ------------------------------------------------------------------#
    # Queries
    # ------------------------------------------------------------------#
    @property
    def width(self) -> int:
        return self.field.width if self.field else 0

    @property
    def height(self) -> int:
        return self.field.height if self.field else 0

    @property
    def in_progress(self) -> bool:
        return self.phase == GamePhase.IN_PROGRESS

    @property
    def winner(self) -> Optional[Team]:
        return self._winner

    @property
    def turn(self) -> int:
        """Number of turns played so far."""
        return self._turn

    @property
    def current_team(self) -> Optional[Team]:
        if not self._teams:
            return None
        return self._teams[self._current]

    def buildings(self) -> SizedIterator[Bunker]:
        """All bunkers, in the order they were added."""
        return SizedIterator(self._buildings)

    def teams(self) -> SizedIterator[Team]:
        """Teams still in the match, in turn order."""
        return SizedIterator(self._teams)

    def building(self, name: str) -> Optional[Bunker]:
        return self._buildings_by_name.get(name)

    def team(self, name: str) -> Optional[Team]:
        for team in self._teams:
            if team.name == name:
                return team
        return None

    def map(self, team: Optional[Team] = None) -> FieldMap:
        """
        Snapshot of the field, optionally from a team's point of view.

        Raises:
            RuntimeError: If the field has not been configured
        """
        if self.field is None:
            raise RuntimeError("Field is not configured")
        return self.field.snapshot(team)

    # ------------------------------------------------------------------#
    # Commands
    # ------------------------------------------------------------------#
    def create_unit(self, color: Union[Color, str, None], building_name: str) -> GameResponse[CreateStatus]:
        """
        Spawn a unit of the given color in one of the current team's bunkers.

        Returns:
            GameResponse with INVALID_COLOR, INVALID_BUILDING or WRONG_TEAM,
            or OK carrying the bunker's CreateStatus (OK, OCCUPIED,
            INSUFFICIENT_FUNDS)
        """
        rejected = self._check_command_phase()
        if rejected is not None:
            return rejected

        response = self._create_unit(color, building_name)
        self._end_of_turn()
        return response

    def _create_unit(self, color: Union[Color, str, None], building_name: str) -> GameResponse[CreateStatus]:
        if isinstance(color, str):
            color = Color.from_name(color)
        if not isinstance(color, Color):
            return GameResponse(GameStatus.INVALID_COLOR)
        bunker = self._buildings_by_name.get(building_name)
        if bunker is None:
            return GameResponse(GameStatus.INVALID_BUILDING)
        if bunker.team is not self.current_team:
            return GameResponse(GameStatus.WRONG_TEAM)

        status, unit = bunker.create_unit(color, self.field)
        if unit is not None:
            logger.debug("%s created in %s", unit.label(), bunker.name)
        return GameResponse(GameStatus.OK, status)

    def move_unit_at(
        self,
        x: int,
        y: int,
        directions: Sequence[Union[MoveDir, str]],
    ) -> GameResponse[List[UnitAction]]:
        """
        Move the current team's unit standing at (x, y).

        Args:
            x: X coordinate of the unit
            y: Y coordinate of the unit
            directions: MoveDir values or direction names, in order

        Returns:
            GameResponse with INVALID_POSITION, NO_UNIT or WRONG_TEAM; OK
            with the step log; or GAME_OVER with the step log and the winner
            if the move ended the match
        """
        rejected = self._check_command_phase()
        if rejected is not None:
            return rejected

        if self.field is None or not self.field.in_bounds(x, y):
            response: GameResponse[List[UnitAction]] = GameResponse(GameStatus.INVALID_POSITION)
        else:
            unit = self.field.cell_at(x, y).unit
            if unit is None:
                response = GameResponse(GameStatus.NO_UNIT)
            elif unit.team is not self.current_team:
                response = GameResponse(GameStatus.WRONG_TEAM)
            else:
                actions = self._movement.move(self.field, unit, list(directions))
                self._remove_empty_teams()
                if self._check_game_over():
                    return GameResponse(GameStatus.GAME_OVER, actions, self._winner)
                response = GameResponse(GameStatus.OK, actions)

        self._end_of_turn()
        return response

    def current_team_attacks(self) -> GameResponse[FieldMap]:
        """
        Make every unit of the current team run its area attack.

        Units attack in roster order; a unit eliminated during the action
        does not attack.

        Returns:
            GameResponse carrying the acting team's snapshot, with status
            OK, TEAM_ELIMINATED, GAME_OVER or TEAM_ELIMINATED_AND_GAME_OVER
        """
        rejected = self._check_command_phase()
        if rejected is not None:
            return rejected

        team = self.current_team
        for unit in team.units():
            if unit.team is not team:
                continue
            if self._movement.area_attack(self.field, unit) == ActionStatus.PLAYER_ELIMINATED:
                logger.debug("%s eliminated while attacking", unit.color.value)

        eliminated = team.is_empty()
        self._remove_empty_teams()
        game_over = self._check_game_over()

        if eliminated and game_over:
            status = GameStatus.TEAM_ELIMINATED_AND_GAME_OVER
        elif game_over:
            status = GameStatus.GAME_OVER
        elif eliminated:
            status = GameStatus.TEAM_ELIMINATED
        else:
            status = GameStatus.OK

        snapshot = self.field.snapshot(team)
        self._end_of_turn()
        return GameResponse(status, snapshot, self._winner)

    # ------------------------------------------------------------------#
    # Turn bookkeeping
    # ------------------------------------------------------------------#
    def _check_command_phase(self) -> Optional[GameResponse]:
        if self.phase == GamePhase.SETUP:
            return GameResponse(GameStatus.WRONG_PHASE)
        if self.phase == GamePhase.ENDED:
            return GameResponse(GameStatus.GAME_OVER, winner=self._winner)
        return None

    def _end_of_turn(self) -> None:
        """Pass the turn to the next team and pay every bunker."""
        self._turn += 1
        if self._teams:
            self._current = (self._current + 1) % len(self._teams)
        for bunker in self._buildings:
            bunker.end_turn()

    def _remove_empty_teams(self) -> None:
        """
        Drop every team with no units and no bunkers.

        The current index is shifted back when the removed team sat at or
        before it, so the next turn goes to the team that came after it.
        """
        i = 0
        while i < len(self._teams):
            team = self._teams[i]
            if not team.is_empty():
                i += 1
                continue
            del self._teams[i]
            logger.info("Team %s eliminated", team.name)
            if i <= self._current:
                self._current -= 1
        if self._teams:
            self._current %= len(self._teams)
        else:
            self._current = 0

    def _check_game_over(self) -> bool:
        if len(self._teams) != 1:
            return False
        self._winner = self._teams[0]
        self._current = 0
        self.phase = GamePhase.ENDED
        logger.info("Match over after %s turns, winner: %s", self._turn + 1, self._winner.name)
        return True
