"""Depth-limited minimax opponent for tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import logging
import math

from .game import (
    COMPUTER,
    EMPTY,
    HUMAN,
    Outcome,
    Player,
    empty_cells,
    evaluate,
    opponent,
)

logger = logging.getLogger(__name__)

# A 3x3 game never lasts longer than this many plies.
FULL_DEPTH = 9

WIN_SCORE = 10


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def max_depth(self) -> int:
        return _DIFFICULTY_DEPTHS[self]


_DIFFICULTY_DEPTHS = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 6,
}


class InvariantViolation(RuntimeError):
    """The search was asked for a move on a board that cannot have one."""


@dataclass
class SearchStats:
    nodes: int = 0


def select_move(
    board: List[str],
    player: Player,
    depth: int = 0,
    max_depth: Optional[int] = None,
    stats: Optional[SearchStats] = None,
) -> Tuple[int, int]:
    """Return ``(score, move_index)`` for ``player`` to move on ``board``.

    Scores are from the computer's point of view: a computer win is worth
    ``10 - depth``, a human win ``-10 + depth`` and a draw ``0``, so quicker
    wins and slower losses are preferred. Terminal boards return move ``-1``.

    Once ``depth`` reaches ``max_depth`` an undecided board is scored ``0``
    with no positional estimate, which is what makes shallow searches play
    weakly. ``max_depth=None`` searches to the end of the game.

    ``board`` is used as a scratch buffer and is restored before returning.
    """
    if len(board) != 9 or any(c not in (EMPTY, HUMAN, COMPUTER) for c in board):
        raise InvariantViolation(f"Malformed board: {board!r}")
    if player not in (HUMAN, COMPUTER):
        raise InvariantViolation(f"Unknown player mark: {player!r}")
    if max_depth is None:
        max_depth = FULL_DEPTH
    return _minimax(board, player, depth, max_depth, stats or SearchStats())


def _minimax(
    board: List[str],
    player: Player,
    depth: int,
    max_depth: int,
    stats: SearchStats,
) -> Tuple[int, int]:
    stats.nodes += 1

    outcome = evaluate(board)
    if outcome is Outcome.HUMAN_WINS:
        return -WIN_SCORE + depth, -1
    if outcome is Outcome.COMPUTER_WINS:
        return WIN_SCORE - depth, -1
    if outcome is Outcome.DRAW:
        return 0, -1

    if depth >= max_depth:
        return 0, -1

    moves = empty_cells(board)
    if not moves:
        raise InvariantViolation("Ongoing board has no empty cells")

    maximizing = player == COMPUTER
    best_score = -math.inf if maximizing else math.inf
    best_move = -1
    for move in moves:
        board[move] = player
        try:
            score, _ = _minimax(board, opponent(player), depth + 1, max_depth, stats)
        finally:
            board[move] = EMPTY
        # Strict comparison: the lowest index reaching the extreme is kept.
        if maximizing and score > best_score:
            best_score, best_move = score, move
        elif not maximizing and score < best_score:
            best_score, best_move = score, move

    return int(best_score), best_move


@dataclass
class MinimaxAI:
    """Computer opponent bound to one mark and one difficulty.

    - MinimaxAI(player="O", difficulty=Difficulty.HARD)
    - choose(board) -> cell_index
    """

    player: Player = COMPUTER
    difficulty: Difficulty = Difficulty.MEDIUM
    nodes_searched: int = field(default=0, init=False)

    def choose(self, board: List[str]) -> int:
        if evaluate(board) is not Outcome.ONGOING:
            raise InvariantViolation("Game is already decided")

        stats = SearchStats()
        score, move = select_move(
            board, self.player, max_depth=self.difficulty.max_depth, stats=stats
        )
        self.nodes_searched = stats.nodes
        logger.debug(
            "%s (%s) searched %d positions: move=%d score=%d",
            self.player,
            self.difficulty.value,
            stats.nodes,
            move,
            score,
        )
        return move
