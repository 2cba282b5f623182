"""HTTP API entrypoint for driving a local match from a web UI or script."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from infra.logger import get_logger
from paintball import GameResponse, PaintballGame, Scenario

app = FastAPI(title="Paintball Grid")
game: PaintballGame | None = None

logger = get_logger(__name__)

# Allow the browser-based control panel (served from file:// or other origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class StartRequest(BaseModel):
    scenario: dict


class CreateRequest(BaseModel):
    color: str
    bunker: str


class MoveRequest(BaseModel):
    x: int
    y: int
    directions: list[str]


def _require_game() -> PaintballGame:
    if game is None:
        raise HTTPException(400, "No active game")
    return game


def _response_dict(response: GameResponse, result=None) -> dict:
    return {
        "status": response.status.value,
        "result": result,
        "winner": response.winner.name if response.winner is not None else None,
    }


@app.post("/start")
def start(request: StartRequest):
    global game
    try:
        scenario = Scenario.from_dict(request.scenario)
    except (KeyError, TypeError, ValueError) as exc:
        raise HTTPException(400, f"Invalid scenario: {exc}") from exc
    if game is not None:
        game.stop()
    game = scenario.create_game()
    logger.info("Match created from %s", scenario)
    return {"success": game.in_progress, "phase": game.phase.value}


@app.post("/create")
def create(request: CreateRequest):
    current = _require_game()
    response = current.create_unit(request.color, request.bunker)
    result = response.result.value if response.result is not None else None
    return _response_dict(response, result)


@app.post("/move")
def move(request: MoveRequest):
    current = _require_game()
    response = current.move_unit_at(request.x, request.y, request.directions)
    result = [action.to_dict() for action in response.result] if response.result is not None else None
    return _response_dict(response, result)


@app.post("/attack")
def attack():
    current = _require_game()
    response = current.current_team_attacks()
    result = response.result.to_dict() if response.result is not None else None
    return _response_dict(response, result)


@app.get("/status")
def status():
    if game is None:
        return {"active": False}
    current_team = game.current_team if game.in_progress else None
    return {
        "active": True,
        "phase": game.phase.value,
        "turn": game.turn,
        "width": game.width,
        "height": game.height,
        "current_team": current_team.name if current_team is not None else None,
        "winner": game.winner.name if game.winner is not None else None,
        "teams": [team.name for team in game.teams()],
        "bunkers": [bunker.to_dict() for bunker in game.buildings()],
    }


@app.get("/map")
def field_map(team: str | None = None):
    current = _require_game()
    viewer = None
    if team is not None:
        viewer = current.team(team)
        if viewer is None:
            raise HTTPException(400, f"Unknown team: {team}")
    try:
        return current.map(viewer).to_dict()
    except RuntimeError as exc:
        raise HTTPException(400, str(exc)) from exc
