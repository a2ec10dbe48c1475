"""FastAPI application that plays tic-tac-toe against the minimax AI."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from .ai import Difficulty, MinimaxAI
from .game import COMPUTER, EMPTY, HUMAN, InvalidMove, ScoreTally, TicTacToeGame

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Container for the current game, its AI opponent, and the session score."""

    game: TicTacToeGame
    ai: MinimaxAI
    tally: ScoreTally = field(default_factory=ScoreTally)
    move_log: List[Dict[str, int | str]] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(title="Tic-Tac-Toe", description="Play tic-tac-toe against minimax")


class NewGameRequest(BaseModel):
    """Request payload for starting a new session."""

    difficulty: Difficulty = Field(
        default=Difficulty.MEDIUM,
        description="Controls how many plies the AI looks ahead",
    )


class RestartRequest(BaseModel):
    """Optional payload for restarting; omitting difficulty keeps the current one."""

    difficulty: Optional[Difficulty] = None


class MoveRequest(BaseModel):
    """Request payload for the human's move."""

    model_config = ConfigDict(populate_by_name=True)

    cell_index: int = Field(alias="cellIndex", ge=0, le=8)


def _create_session(difficulty: Difficulty) -> tuple[str, GameSession]:
    """Create a new session and register it for later access."""

    session = GameSession(
        game=TicTacToeGame(), ai=MinimaxAI(player=COMPUTER, difficulty=difficulty)
    )
    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = session
    logger.info("Created game %s (difficulty=%s)", session_id, difficulty.value)
    return session_id, session


def _get_session(game_id: str) -> GameSession:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _record_if_finished(game_id: str, session: GameSession) -> bool:
    game = session.game
    if not game.is_over:
        return False
    session.tally.record(game.outcome)
    logger.info("Game %s finished: %s", game_id, game.outcome.value)
    return True


def _apply_player_move(game_id: str, session: GameSession, cell_index: int) -> None:
    with session.lock:
        game = session.game
        if game.is_over:
            raise HTTPException(status_code=400, detail="Game already finished")
        if game.current_player != HUMAN:
            raise HTTPException(status_code=400, detail="Not the human player's turn")

        try:
            game.play_move(cell_index)
        except InvalidMove as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        session.move_log.append({"player": HUMAN, "cellIndex": cell_index})

        if _record_if_finished(game_id, session):
            return

        ai_move = session.ai.choose(game.board)
        game.play_move(ai_move)
        session.move_log.append({"player": session.ai.player, "cellIndex": ai_move})
        _record_if_finished(game_id, session)


def _serialize_session(game_id: str, session: GameSession) -> Dict[str, object]:
    with session.lock:
        game = session.game
        line = game.winning_line()
        state: Dict[str, object] = {
            "id": game_id,
            "cells": [c if c != EMPTY else "" for c in game.board],
            "currentPlayer": game.current_player,
            "outcome": game.outcome.value,
            "winningLine": list(line) if line else None,
            "difficulty": session.ai.difficulty.value,
            "score": {
                "human": session.tally.human,
                "computer": session.tally.computer,
                "draws": session.tally.draws,
            },
            "moveLog": list(session.move_log),
        }
        if session.move_log:
            state["lastMove"] = session.move_log[-1]
        return state


@app.post("/api/game")
def create_game(request: NewGameRequest) -> Dict[str, object]:
    game_id, session = _create_session(request.difficulty)
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    _apply_player_move(game_id, session, request.cell_index)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/restart")
def restart_game(
    game_id: str, request: Optional[RestartRequest] = None
) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.restart()
        session.move_log.clear()
        if request is not None and request.difficulty is not None:
            session.ai.difficulty = request.difficulty
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/reset")
def reset_session(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.restart()
        session.move_log.clear()
        session.tally.reset()
    logger.info("Reset score for game %s", game_id)
    return _serialize_session(game_id, session)
