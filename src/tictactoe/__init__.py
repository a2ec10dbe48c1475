"""Tic-tac-toe against a minimax opponent: rules, search, and the web API."""

from .ai import Difficulty, InvariantViolation, MinimaxAI, select_move
from .game import InvalidMove, Outcome, ScoreTally, TicTacToeGame, evaluate
from .ui import app

__all__ = [
    "Difficulty",
    "InvalidMove",
    "InvariantViolation",
    "MinimaxAI",
    "Outcome",
    "ScoreTally",
    "TicTacToeGame",
    "app",
    "evaluate",
    "select_move",
]
