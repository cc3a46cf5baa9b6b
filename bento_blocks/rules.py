"""
Placement validation for Bento Blocks.

Rules:
1. Every cell of a piece must be on the board and empty
2. A player's first piece must cover one of the four board corners
3. Later pieces must touch the player's own pieces at a corner and must not
   share an edge with them

Other players' cells only matter for rule 1.
"""

from typing import Iterable, List, Optional

from .board import Board, GameStatus, Position
from .pieces import Piece, Shape, transform_shape

EDGE_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))
CORNER_OFFSETS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def is_valid_position(row: int, col: int, board: Board) -> bool:
    """Check if position is within board bounds."""
    return 0 <= row < board.size and 0 <= col < board.size


def is_cell_empty(row: int, col: int, board: Board) -> bool:
    """Check if a position is on the board and unclaimed."""
    if not is_valid_position(row, col, board):
        return False
    return board.grid[row, col] == 0


def board_corners(board: Board) -> List[Position]:
    last = board.size - 1
    return [Position(0, 0), Position(0, last), Position(last, 0), Position(last, last)]


def get_edge_adjacent_positions(pos: Position, board: Board) -> List[Position]:
    """Get positions that share an edge (not diagonal)."""
    return [Position(pos.row + dr, pos.col + dc) for dr, dc in EDGE_OFFSETS
            if is_valid_position(pos.row + dr, pos.col + dc, board)]


def get_corner_adjacent_positions(pos: Position, board: Board) -> List[Position]:
    """Get positions that are diagonally adjacent (corner touching)."""
    return [Position(pos.row + dr, pos.col + dc) for dr, dc in CORNER_OFFSETS
            if is_valid_position(pos.row + dr, pos.col + dc, board)]


def _absolute_cells(shape: Iterable, row: int, col: int):
    return [(row + dr, col + dc) for dr, dc in shape]


def touches_corner(shape: Shape, row: int, col: int, board: Board) -> bool:
    """True if the placed shape covers any of the four board corners."""
    corners = {(p.row, p.col) for p in board_corners(board)}
    return any(cell in corners for cell in _absolute_cells(shape, row, col))


def _touches_player(row: int, col: int, board: Board, player_id: int, offsets) -> bool:
    grid = board.grid
    size = board.size
    for dr, dc in offsets:
        nr, nc = row + dr, col + dc
        if 0 <= nr < size and 0 <= nc < size and grid[nr, nc] == player_id:
            return True
    return False


def touches_player_corner(row: int, col: int, board: Board, player_id: int) -> bool:
    """True if (row, col) is diagonally adjacent to one of the player's cells."""
    return _touches_player(row, col, board, player_id, CORNER_OFFSETS)


def touches_player_edge(row: int, col: int, board: Board, player_id: int) -> bool:
    """True if (row, col) shares an edge with one of the player's cells."""
    return _touches_player(row, col, board, player_id, EDGE_OFFSETS)


def is_valid_placement(board: Board, shape: Shape, row: int, col: int, player_id: int) -> bool:
    """
    Apply the adjacency rules to a shape anchored at (row, col).

    Assumes bounds and overlap were already checked. A player with no placed
    pieces only needs to cover a board corner.
    """
    player = board.get_player(player_id)
    if player is None:
        return False

    if not player.used_pieces:
        return touches_corner(shape, row, col, board)

    has_corner_connection = False
    for r, c in _absolute_cells(shape, row, col):
        if touches_player_edge(r, c, board, player_id):
            return False  # Edge adjacency not allowed
        if not has_corner_connection and touches_player_corner(r, c, board, player_id):
            has_corner_connection = True

    return has_corner_connection


def shape_fits(board: Board, shape: Shape, row: int, col: int) -> bool:
    """Bounds and overlap check for every cell of the shape."""
    grid = board.grid
    size = board.size
    for dr, dc in shape:
        r, c = row + dr, col + dc
        if r < 0 or r >= size or c < 0 or c >= size:
            return False
        if grid[r, c] != 0:
            return False
    return True


def owned_shape(board: Board, piece: Piece, player_id: int) -> Optional[Shape]:
    """
    Cells of the player's unused inventory copy of ``piece`` in ``piece``'s
    rotation and flip state; None if the player or an unused copy is missing.
    """
    if piece is None or piece.used:
        return None
    player = board.get_player(player_id)
    if player is None:
        return None
    owned = player.get_piece(piece.id)
    if owned is None or owned.used:
        return None
    return transform_shape(owned.shape, piece.rotation, piece.flipped)


def can_place(board: Board, piece: Piece, row: int, col: int, player_id: int) -> bool:
    """
    Check if ``piece``, in its current orientation, can be placed with its
    shape anchored at (row, col) by ``player_id``.

    Only an in-progress game accepts placements. The cells come from the
    player's inventory copy of the piece turned to ``piece``'s orientation.

    Never raises; any rule violation or unknown player gives False.
    """
    if board is None or board.status != GameStatus.IN_PROGRESS:
        return False

    shape = owned_shape(board, piece, player_id)
    if shape is None:
        return False
    if not shape_fits(board, shape, row, col):
        return False

    return is_valid_placement(board, shape, row, col, player_id)
