"""
Jungle King FastAPI server
Thin HTTP adapter over the rule engine: new games, moves, cell queries
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import ServerConfig
from ..engine import PieceType, Player, new_game as start_engine_game
from ..engine.initial_setup import decide_first_player
from .models import (
    CellResponse,
    MoveRequest,
    MoveResponse,
    NewGameRequest,
    NewGameResponse,
)
from .session_manager import GameSession, SessionManager

logger = logging.getLogger(__name__)

config = ServerConfig.from_env()

app = FastAPI(
    title="Jungle King API",
    description="Backend API for the Jungle King board game",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Handlers are plain def so they run in the threadpool under their game's lock
sessions = SessionManager(max_games=config.max_games)
app.state.sessions = sessions


def _get_session(game_id: str) -> GameSession:
    """Look up a game or answer 404"""
    session = sessions.get(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return session


# Endpoints

@app.get("/api")
def root():
    """API root"""
    return {
        "message": "Welcome to the Jungle King API",
        "version": __version__,
        "endpoints": [
            "/new_game",
            "/apply_move/{game_id}",
            "/get_legal_moves/{game_id}",
            "/get_game/{game_id}",
            "/cell/{game_id}/{row}/{col}",
            "/resign/{game_id}",
            "/delete_game/{game_id}",
        ]
    }


@app.post("/new_game", response_model=NewGameResponse)
def new_game(request: Optional[NewGameRequest] = None):
    """
    Start a new game from the standard layout.
    If both pre-game draws are supplied, the stronger animal moves first.
    """
    request = request or NewGameRequest()

    try:
        first_player = Player(request.first_player)
        if request.player_one_choice and request.player_two_choice:
            first_player = decide_first_player(
                PieceType[request.player_one_choice.upper()],
                PieceType[request.player_two_choice.upper()],
            )
        names = None
        if request.player_names:
            names = {Player(number): name for number, name in request.player_names.items()}
    except KeyError as e:
        raise HTTPException(status_code=400, detail=f"Unknown piece type: {e}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    state = start_engine_game(first_player=first_player, player_names=names)
    session = sessions.create(state)

    return NewGameResponse(
        game_id=session.game_id,
        message=f"New game started, {state.player_names[first_player]} moves first",
        game_state=state.to_dict()
    )


@app.get("/get_game/{game_id}")
def get_game(game_id: str):
    """Current state of a game"""
    session = _get_session(game_id)
    with session.lock:
        return session.state.to_dict()


@app.post("/apply_move/{game_id}", response_model=MoveResponse)
def apply_move(game_id: str, move_request: MoveRequest):
    """
    Play a move for the player whose turn it is.
    A refused move is not an HTTP error: success is false and reason says why.
    """
    session = _get_session(game_id)

    with session.lock:
        state = session.state
        result = state.submit_move(
            move_request.from_row,
            move_request.from_col,
            move_request.to_row,
            move_request.to_col,
        )

        if not result.success:
            logger.debug("Game %s: refused move %s (%s)", game_id, move_request, result.reason.name)

        legal_moves = None
        if result.success and not state.game_over:
            legal_moves = [move.to_dict() for move in state.get_legal_moves()]

        return MoveResponse(
            success=result.success,
            outcome=result.outcome.name,
            reason=result.reason.name if result.reason else None,
            message=result.message,
            captured_piece_type=result.captured_piece_type.name if result.captured_piece_type else None,
            weakened_piece_id=result.weakened_piece_id,
            game_state=state.to_dict(),
            legal_moves=legal_moves
        )


@app.get("/get_legal_moves/{game_id}")
def get_legal_moves(game_id: str):
    """Legal moves for the player to move"""
    session = _get_session(game_id)

    with session.lock:
        state = session.state
        if state.game_over:
            return {"legal_moves": [], "message": "The game is over"}

        legal_moves = state.get_legal_moves()
        return {
            "legal_moves": [move.to_dict() for move in legal_moves],
            "count": len(legal_moves),
            "current_player": state.current_player.value
        }


@app.get("/cell/{game_id}/{row}/{col}", response_model=CellResponse)
def query_cell(game_id: str, row: int, col: int):
    """What is on one square (off-board squares report terrain OUTSIDE)"""
    session = _get_session(game_id)

    with session.lock:
        view = session.state.query_cell(row, col)

    return CellResponse(row=row, col=col, **view.to_dict())


@app.post("/resign/{game_id}")
def resign(game_id: str):
    """The player to move resigns and the opponent wins"""
    session = _get_session(game_id)

    with session.lock:
        state = session.state
        if state.game_over:
            raise HTTPException(status_code=400, detail="The game is already over")

        loser = state.current_player
        winner = state.resign()

        return {
            "message": f"{state.player_names[loser]} resigned",
            "winner": winner.value,
            "game_state": state.to_dict()
        }


@app.delete("/delete_game/{game_id}")
def delete_game(game_id: str):
    """Forget a game"""
    if not sessions.delete(game_id):
        raise HTTPException(status_code=404, detail="Game not found")
    return {"message": "Game deleted"}


@app.get("/")
def index():
    return {"message": "Jungle King API server is running. See /docs for the API documentation."}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.host, port=config.port)
