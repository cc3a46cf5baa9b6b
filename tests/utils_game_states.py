"""
Utility functions for generating test game states.
"""

import random
from dataclasses import replace
from typing import Dict, Optional

from bento_blocks.board import Board, create_board, start_game
from bento_blocks.game import next_player, place_piece
from bento_blocks.move_generator import LegalMoveGenerator
from bento_blocks.pieces import Piece


def started_board(player_count: int = 4) -> Board:
    return start_game(create_board(), player_count)


def oriented(board: Board, player_id: int, piece_id: str,
             rotation: int = 0, flipped: bool = False) -> Piece:
    """The player's inventory piece turned to the requested orientation."""
    return board.get_player(player_id).get_piece(piece_id).with_orientation(rotation, flipped)


def generate_random_valid_state(num_moves: int, seed: int = 0, player_count: int = 4) -> Board:
    """
    Generate a random but valid board state by playing random legal moves.

    Blocked players are skipped by handing the turn on, so the result may
    hold fewer than ``num_moves`` placements if everyone gets stuck.

    Args:
        num_moves: Number of moves to make
        seed: Random seed for reproducibility
        player_count: Number of seats taking part

    Returns:
        The resulting board
    """
    rng = random.Random(seed)
    board = started_board(player_count)
    generator = LegalMoveGenerator(use_frontier=True)

    moves_made = 0
    stuck_in_a_row = 0
    while moves_made < num_moves and stuck_in_a_row < player_count:
        player_id = board.current_player
        moves = generator.get_legal_moves(board, player_id)
        if not moves:
            stuck_in_a_row += 1
            board = board.evolve(current_player=next_player(board, player_id))
            continue

        stuck_in_a_row = 0
        move = rng.choice(moves)
        piece = oriented(board, player_id, move.piece_id, move.rotation, move.flipped)
        board = place_piece(board, piece, move.row, move.col, player_id)
        moves_made += 1

    return board


def exhausted_board(scores: Optional[Dict[int, int]] = None, player_count: int = 4) -> Board:
    """
    An in-progress board where every player has used every piece.

    Nobody can move on it, so it is game over. ``scores`` overrides the
    players' scores to set up winners and ties.
    """
    board = started_board(player_count)
    scores = scores or {}
    players = tuple(
        replace(player,
                score=scores.get(player.id, player.score),
                pieces=tuple(p.mark_used() for p in player.pieces))
        for player in board.players
    )
    return board.evolve(players=players)
