"""
Bento Blocks transitions and queries: placement, turn order, game over,
winner and the state projection.
"""

import logging
import time
from typing import List, Optional

from schemas.game_state import GameStateSummary, MoveSummary, PlayerSummary

from .board import Board, GameStatus, Move, Player
from .errors import IllegalMove, InvalidArgument
from .move_generator import can_player_move
from .pieces import Piece
from .rules import can_place, owned_shape

logger = logging.getLogger(__name__)


def next_player(board: Board, current_player_id: int) -> int:
    """
    Round-robin over the active player ids, wrapping after the last.

    Blocked players are not skipped. An id that is not active maps to the
    first player.
    """
    player_ids = board.player_ids
    try:
        current_index = player_ids.index(current_player_id)
    except ValueError:
        current_index = -1
    return player_ids[(current_index + 1) % len(player_ids)]


def place_piece(board: Board, piece: Piece, row: int, col: int, player_id: int) -> Board:
    """
    Place the player's copy of ``piece``, turned to ``piece``'s orientation,
    with its shape anchored at (row, col).

    Validation is re-run here, so a stale ``can_place`` result cannot slip
    through. The input board is not modified.

    Returns:
        The board after the placement, with the turn advanced

    Raises:
        InvalidArgument: if ``board`` is None
        IllegalMove: if the game is not in progress or the placement breaks a rule
    """
    if board is None:
        raise InvalidArgument("Invalid board: a board is required to place a piece")
    if board.status != GameStatus.IN_PROGRESS:
        logger.debug(f"Rejected placement by player {player_id}: game is {board.status.value}")
        raise IllegalMove(f"Game is {board.status.value}; placements need a game in progress")
    if not can_place(board, piece, row, col, player_id):
        piece_id = getattr(piece, 'id', None)
        logger.debug(f"Rejected placement: player={player_id}, piece={piece_id}, anchor=({row}, {col})")
        raise IllegalMove(f"Invalid piece placement: piece {piece_id} at ({row}, {col}) for player {player_id}")

    shape = owned_shape(board, piece, player_id)
    new_grid = board.grid.copy()
    for dr, dc in shape:
        new_grid[row + dr, col + dc] = player_id

    def _updated(player: Player) -> Player:
        if player.id != player_id:
            return player
        new_pieces = tuple(p.mark_used() if p.id == piece.id else p for p in player.pieces)
        return Player(id=player.id, color=player.color,
                      score=player.score + len(shape), pieces=new_pieces)

    move = Move(
        player_id=player_id,
        piece_id=piece.id,
        position=(row, col),
        shape=shape,
        timestamp=time.time(),
    )

    logger.debug(f"Player {player_id} placed {piece.id} at ({row}, {col}), cells={len(shape)}")
    return board.evolve(
        grid=new_grid,
        players=tuple(_updated(p) for p in board.players),
        move_history=board.move_history + (move,),
        last_move=move,
        current_player=next_player(board, player_id),
    )


def is_game_over(board: Board) -> bool:
    """
    Check if the game is over.

    A waiting game is never over and a finished game always is. An in-progress
    game is over once no active player has a legal placement.
    """
    if board is None:
        return False
    if board.status != GameStatus.IN_PROGRESS:
        return board.status == GameStatus.FINISHED

    for player in board.players:
        if can_player_move(board, player.id):
            return False
    return True


def finish_game(board: Board) -> Board:
    """
    Move an in-progress game to ``finished`` once nobody can place.

    Any other board is returned as is.
    """
    if board is None:
        raise InvalidArgument("Invalid board: a board is required to finish a game")
    if board.status != GameStatus.IN_PROGRESS or not is_game_over(board):
        return board

    scores = {p.id: p.score for p in board.players}
    logger.info(f"Game finished after {board.move_count} moves, scores={scores}")
    return board.evolve(status=GameStatus.FINISHED)


def get_winner(board: Board) -> Optional[List[Player]]:
    """
    All players sharing the top score, or None while the game is not over.
    """
    if not is_game_over(board):
        return None
    return _top_scorers(board)


def _top_scorers(board: Board) -> List[Player]:
    if not board.players:
        return []
    max_score = max(p.score for p in board.players)
    return [p for p in board.players if p.score == max_score]


def _player_summary(player: Player) -> PlayerSummary:
    return PlayerSummary(
        id=player.id,
        score=player.score,
        color=player.color,
        remaining_pieces=player.remaining_pieces,
    )


def get_game_state(board: Board) -> GameStateSummary:
    """Read-only summary of the board for display."""
    game_over = is_game_over(board)
    winners = _top_scorers(board) if game_over else None
    last_move = board.last_move
    return GameStateSummary(
        status=board.status,
        current_player=board.current_player,
        players=[_player_summary(p) for p in board.players],
        is_game_over=game_over,
        winner=[_player_summary(p) for p in winners] if winners is not None else None,
        total_moves=board.move_count,
        last_move=MoveSummary(
            player_id=last_move.player_id,
            piece_id=last_move.piece_id,
            row=last_move.position[0],
            col=last_move.position[1],
            cells=[list(cell) for cell in last_move.cells],
            timestamp=last_move.timestamp,
        ) if last_move is not None else None,
    )
