"""
Bento Blocks rules engine package.

This package contains the core game logic for Bento Blocks, including:
- Board state and the game lifecycle
- Piece catalog, rotations and reflections
- Placement validation
- Move search and game-over detection
- Scoring, turn order and the state projection
"""

from .board import Board, GameStatus, Move, Player, Position, create_board, start_game
from .errors import BentoBlocksError, IllegalMove, InvalidArgument
from .game import finish_game, get_game_state, get_winner, is_game_over, next_player, place_piece
from .move_generator import LegalMove, LegalMoveGenerator, can_player_move, get_frontier, get_legal_moves
from .pieces import PIECE_IDS, PIECE_SHAPES, Piece, flip, flip_piece, resolved_shape, rotate, rotate_piece
from .rules import can_place, is_valid_placement

__all__ = [
    'Board', 'GameStatus', 'Move', 'Player', 'Position', 'create_board', 'start_game',
    'BentoBlocksError', 'IllegalMove', 'InvalidArgument',
    'finish_game', 'get_game_state', 'get_winner', 'is_game_over', 'next_player', 'place_piece',
    'LegalMove', 'LegalMoveGenerator', 'can_player_move', 'get_frontier', 'get_legal_moves',
    'PIECE_IDS', 'PIECE_SHAPES', 'Piece', 'flip', 'flip_piece', 'resolved_shape', 'rotate', 'rotate_piece',
    'can_place', 'is_valid_placement',
]
