"""
Move search for Bento Blocks: move availability, frontier cells and legal
move enumeration.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from .board import Board, GameStatus, Player
from .config import EngineConfig, load_config
from .pieces import Shape, unique_orientations
from .rules import CORNER_OFFSETS, EDGE_OFFSETS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegalMove:
    """A placement that ``can_place`` would accept."""
    piece_id: str
    rotation: int
    flipped: bool
    row: int
    col: int
    cells: Tuple[Tuple[int, int], ...]


def _owner_touches(rows, size: int, r: int, c: int, player_id: int, offsets) -> bool:
    for dr, dc in offsets:
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size and rows[nr][nc] == player_id:
            return True
    return False


def _placement_ok(rows, size: int, shape: Shape, row: int, col: int,
                  player_id: int, is_first_move: bool, corners: Set[Tuple[int, int]]) -> bool:
    """
    Same outcome as ``rules.can_place`` for an unused owned piece, working
    on a plain nested-list copy of the grid.
    """
    for dr, dc in shape:
        r, c = row + dr, col + dc
        if r < 0 or r >= size or c < 0 or c >= size:
            return False
        if rows[r][c] != 0:
            return False

    if is_first_move:
        return any((row + dr, col + dc) in corners for dr, dc in shape)

    has_corner_connection = False
    for dr, dc in shape:
        r, c = row + dr, col + dc
        if _owner_touches(rows, size, r, c, player_id, EDGE_OFFSETS):
            return False
        if not has_corner_connection and _owner_touches(rows, size, r, c, player_id, CORNER_OFFSETS):
            has_corner_connection = True
    return has_corner_connection


class LegalMoveGenerator:
    """Searches the (piece, rotation, flip, position) space for a player."""

    def __init__(self, config: Optional[EngineConfig] = None, use_frontier: Optional[bool] = None):
        self.config = config or load_config()
        self.use_frontier = self.config.use_frontier_movegen if use_frontier is None else use_frontier

    def _log_timing(self, label: str, player_id: int, result, start: float) -> None:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        mode = "frontier" if self.use_frontier else "naive"
        message = f"MoveGen[{mode}] {label}: player={player_id}, result={result}, elapsed_ms={elapsed_ms:.2f}"
        if self.config.movegen_debug:
            logger.info(message)
        else:
            logger.debug(message)

    @staticmethod
    def _corner_cells(board: Board) -> Set[Tuple[int, int]]:
        last = board.size - 1
        return {(0, 0), (0, last), (last, 0), (last, last)}

    def get_frontier(self, board: Board, player_id: int) -> Set[Tuple[int, int]]:
        """
        Empty cells where the player's next piece could make contact.

        Before the first placement these are the empty board corners. After
        it, they are empty cells diagonally adjacent to the player's cells and
        not orthogonally adjacent to any of them.
        """
        player = board.get_player(player_id)
        if player is None:
            return set()

        rows = board.grid.tolist()
        size = board.size
        if not player.used_pieces:
            return {(r, c) for r, c in self._corner_cells(board) if rows[r][c] == 0}

        frontier = set()
        for r in range(size):
            for c in range(size):
                if rows[r][c] != player_id:
                    continue
                for dr, dc in CORNER_OFFSETS:
                    nr, nc = r + dr, c + dc
                    if not (0 <= nr < size and 0 <= nc < size) or rows[nr][nc] != 0:
                        continue
                    if not _owner_touches(rows, size, nr, nc, player_id, EDGE_OFFSETS):
                        frontier.add((nr, nc))
        return frontier

    def _candidate_anchors(self, board: Board, shape: Shape, frontier):
        """Anchor positions to try for one orientation, in row-major order."""
        size = board.size
        if frontier is None:
            height = max(dr for dr, _ in shape) + 1
            width = max(dc for _, dc in shape) + 1
            for row in range(size - height + 1):
                for col in range(size - width + 1):
                    yield row, col
            return

        anchors = set()
        for fr, fc in frontier:
            for dr, dc in shape:
                anchors.add((fr - dr, fc - dc))
        yield from sorted(anchors)

    def _iter_legal_moves(self, board: Board, player: Player):
        if board.status != GameStatus.IN_PROGRESS:
            return
        rows = board.grid.tolist()
        size = board.size
        is_first_move = not player.used_pieces
        corners = self._corner_cells(board)
        frontier = self.get_frontier(board, player.id) if self.use_frontier else None
        if frontier is not None and not frontier:
            return

        for piece in player.unused_pieces:
            for rotation, flipped, shape in unique_orientations(piece.shape):
                for row, col in self._candidate_anchors(board, shape, frontier):
                    if _placement_ok(rows, size, shape, row, col, player.id, is_first_move, corners):
                        cells = tuple((row + dr, col + dc) for dr, dc in shape)
                        yield LegalMove(piece.id, rotation, flipped, row, col, cells)

    def first_legal_move(self, board: Board, player_id: int) -> Optional[LegalMove]:
        """The first legal placement in search order, or None."""
        player = board.get_player(player_id)
        if player is None:
            return None
        return next(self._iter_legal_moves(board, player), None)

    def has_legal_moves(self, board: Board, player_id: int) -> bool:
        """True as soon as one legal placement is found for the player."""
        start = time.perf_counter()
        result = self.first_legal_move(board, player_id) is not None
        self._log_timing("has_legal_moves", player_id, result, start)
        return result

    def get_legal_moves(self, board: Board, player_id: int) -> List[LegalMove]:
        """
        Every distinct legal placement for the player.

        Orientations that produce the same footprint are reported once, under
        the first (rotation, flipped) state that produces it. Moves are
        ordered by inventory piece, orientation, then row-major anchor in both
        search modes.
        """
        start = time.perf_counter()
        player = board.get_player(player_id)
        if player is None:
            return []

        moves = list(self._iter_legal_moves(board, player))
        self._log_timing("get_legal_moves", player_id, len(moves), start)
        return moves


_default_generator: Optional[LegalMoveGenerator] = None


def get_default_generator() -> LegalMoveGenerator:
    global _default_generator
    if _default_generator is None:
        _default_generator = LegalMoveGenerator()
    return _default_generator


def can_player_move(board: Board, player_id: int) -> bool:
    """
    Check if a player has any legal placement left.

    Tries every unused piece in every rotation and flip state at every board
    position; unknown players cannot move, and nobody can move outside an
    in-progress game.
    """
    if board is None:
        return False
    return get_default_generator().has_legal_moves(board, player_id)


def get_frontier(board: Board, player_id: int) -> Set[Tuple[int, int]]:
    return get_default_generator().get_frontier(board, player_id)


def get_legal_moves(board: Board, player_id: int) -> List[LegalMove]:
    return get_default_generator().get_legal_moves(board, player_id)
