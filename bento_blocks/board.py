"""
Bento Blocks board with a 20x20 grid and immutable game state.

A ``Board`` is a value: it is never modified after construction. Transitions
(``start_game`` here, ``place_piece`` in ``game.py``) build and return a new
Board, and earlier references stay valid.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .errors import InvalidArgument
from .pieces import Piece, Shape, get_all_pieces

logger = logging.getLogger(__name__)

BOARD_SIZE = 20
MIN_PLAYERS = 2
MAX_PLAYERS = 4

PLAYER_COLORS = {
    1: 'red',
    2: 'blue',
    3: 'yellow',
    4: 'purple',
}


class GameStatus(str, Enum):
    """Game status enumeration."""
    WAITING = "waiting"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass(frozen=True)
class Position:
    """Represents a position on the board."""
    row: int
    col: int


@dataclass(frozen=True)
class Player:
    """A seat at the table: id, running score, color and piece inventory."""
    id: int
    color: str
    score: int = 0
    pieces: Tuple[Piece, ...] = field(default_factory=get_all_pieces)

    @property
    def used_pieces(self) -> Tuple[Piece, ...]:
        return tuple(p for p in self.pieces if p.used)

    @property
    def unused_pieces(self) -> Tuple[Piece, ...]:
        return tuple(p for p in self.pieces if not p.used)

    @property
    def remaining_pieces(self) -> int:
        return len(self.unused_pieces)

    def get_piece(self, piece_id: str) -> Optional[Piece]:
        for piece in self.pieces:
            if piece.id == piece_id:
                return piece
        return None


@dataclass(frozen=True)
class Move:
    """Record of one placement, appended to the board history."""
    player_id: int
    piece_id: str
    position: Tuple[int, int]
    shape: Shape
    timestamp: float

    @property
    def cells(self) -> List[Tuple[int, int]]:
        """Absolute board cells claimed by this move."""
        row, col = self.position
        return [(row + dr, col + dc) for dr, dc in self.shape]


def empty_grid(size: int = BOARD_SIZE) -> np.ndarray:
    return np.zeros((size, size), dtype=np.int8)


@dataclass(frozen=True, eq=False)
class Board:
    """
    Bento Blocks game board.

    The grid is a read-only numpy array where:
    - 0 represents empty space
    - 1-4 represent the owning player id
    """
    grid: np.ndarray = field(default_factory=empty_grid)
    players: Tuple[Player, ...] = ()
    current_player: int = 1
    status: GameStatus = GameStatus.WAITING
    move_history: Tuple[Move, ...] = ()
    last_move: Optional[Move] = None

    def __post_init__(self):
        # Private read-only copy; views of the caller's array cannot reach it
        grid = np.array(self.grid, dtype=np.int8, copy=True)
        grid.setflags(write=False)
        object.__setattr__(self, "grid", grid)

    @property
    def size(self) -> int:
        return self.grid.shape[0]

    @property
    def player_ids(self) -> List[int]:
        return [p.id for p in self.players]

    @property
    def move_count(self) -> int:
        return len(self.move_history)

    def get_player(self, player_id: int) -> Optional[Player]:
        """Active player with ``player_id``, or None."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def cell(self, row: int, col: int) -> int:
        """Owner at (row, col); -1 if off the board."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            return -1
        return int(self.grid[row, col])

    def to_list(self) -> List[List[int]]:
        return self.grid.tolist()

    def evolve(self, **changes) -> 'Board':
        """Copy with ``changes`` applied."""
        return replace(self, **changes)

    def __str__(self) -> str:
        """String representation of the board."""
        result = []
        for row in self.grid:
            result.append("".join("." if value == 0 else str(value) for value in row))
        return "\n".join(result)


def create_board() -> Board:
    """
    Create a new empty board.

    All four seats are present with a full inventory; ``start_game`` decides
    how many of them play.
    """
    players = tuple(Player(id=player_id, color=color)
                    for player_id, color in PLAYER_COLORS.items())
    return Board(grid=empty_grid(BOARD_SIZE), players=players)


def start_game(board: Board, player_count: int = MAX_PLAYERS) -> Board:
    """
    Start a game with the first ``player_count`` seats.

    Raises:
        InvalidArgument: if ``board`` is None or ``player_count`` is not in [2, 4]
    """
    if board is None:
        raise InvalidArgument("Invalid board: a board is required to start a game")
    if (isinstance(player_count, bool) or not isinstance(player_count, int)
            or not MIN_PLAYERS <= player_count <= MAX_PLAYERS):
        raise InvalidArgument(
            f"Invalid player count {player_count!r}: expected {MIN_PLAYERS}-{MAX_PLAYERS}"
        )

    players = board.players[:player_count]
    if len(players) < player_count:
        raise InvalidArgument(
            f"Board has only {len(board.players)} seats, cannot start with {player_count}"
        )

    logger.info(f"Starting game with {player_count} players: {[p.color for p in players]}")
    return board.evolve(
        players=players,
        current_player=players[0].id,
        status=GameStatus.IN_PROGRESS,
    )
