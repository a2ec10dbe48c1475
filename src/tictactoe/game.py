"""Core rules for a single 3x3 tic-tac-toe board played against the computer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

Player = str  # "X" or "O"

EMPTY = " "
HUMAN: Player = "X"
COMPUTER: Player = "O"

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Outcome(str, Enum):
    HUMAN_WINS = "human"
    COMPUTER_WINS = "computer"
    DRAW = "draw"
    ONGOING = "ongoing"


class InvalidMove(ValueError):
    """Raised when a move targets an occupied or out-of-range cell."""


def new_board() -> List[str]:
    return [EMPTY] * 9


def opponent(player: Player) -> Player:
    return COMPUTER if player == HUMAN else HUMAN


def empty_cells(board: List[str]) -> List[int]:
    """Indices of the empty cells, in ascending order."""
    return [i for i, c in enumerate(board) if c == EMPTY]


def winning_line(board: List[str]) -> Optional[Tuple[int, int, int]]:
    for a, b, c in WINNING_LINES:
        v = board[a]
        if v != EMPTY and v == board[b] == board[c]:
            return (a, b, c)
    return None


def evaluate(board: List[str]) -> Outcome:
    """
    Classify ``board``.

    Lines are checked rows first, then columns, then diagonals, and the first
    completed one decides the winner. A full board is only a draw when no
    line is complete.
    """
    line = winning_line(board)
    if line is not None:
        return Outcome.HUMAN_WINS if board[line[0]] == HUMAN else Outcome.COMPUTER_WINS
    if EMPTY not in board:
        return Outcome.DRAW
    return Outcome.ONGOING


# ---------- Game ----------


@dataclass
class TicTacToeGame:
    # Server-internal: 'X', 'O', or ' ' (space) for empty
    board: List[str] = field(default_factory=new_board)
    current_player: Player = HUMAN
    outcome: Outcome = Outcome.ONGOING

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.ONGOING

    def available_moves(self) -> List[int]:
        if self.is_over:
            return []
        return empty_cells(self.board)

    def play_move(self, index: int) -> None:
        """Place the current player's mark, re-evaluate, and pass the turn."""
        if self.is_over:
            raise InvalidMove("Game already finished")
        if not 0 <= index <= 8:
            raise InvalidMove(f"Cell {index} is out of range (0-8)")
        if self.board[index] != EMPTY:
            raise InvalidMove(f"Cell {index} is already occupied")

        self.board[index] = self.current_player
        self.outcome = evaluate(self.board)
        self.current_player = opponent(self.current_player)

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return winning_line(self.board)

    def restart(self) -> None:
        self.board = new_board()
        self.current_player = HUMAN
        self.outcome = Outcome.ONGOING


# ---------- Score tally ----------


@dataclass
class ScoreTally:
    """Results across the games of one session; a restart does not clear it."""

    human: int = 0
    computer: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.HUMAN_WINS:
            self.human += 1
        elif outcome is Outcome.COMPUTER_WINS:
            self.computer += 1
        elif outcome is Outcome.DRAW:
            self.draws += 1

    def reset(self) -> None:
        self.human = 0
        self.computer = 0
        self.draws = 0
