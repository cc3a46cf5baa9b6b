"""
Tests for the read-only game state projection.
"""

import unittest

from bento_blocks.board import GameStatus, create_board
from bento_blocks.game import get_game_state, place_piece
from schemas.game_state import GameStateSummary, MoveSummary, PlayerSummary
from tests.utils_game_states import exhausted_board, oriented, started_board


class TestGameStateSummary(unittest.TestCase):
    """Test get_game_state()."""

    def test_waiting_board(self):
        state = get_game_state(create_board())
        self.assertIsInstance(state, GameStateSummary)
        self.assertEqual(state.status, GameStatus.WAITING)
        self.assertEqual(state.current_player, 1)
        self.assertEqual(len(state.players), 4)
        self.assertFalse(state.is_game_over)
        self.assertIsNone(state.winner)
        self.assertEqual(state.total_moves, 0)
        self.assertIsNone(state.last_move)

    def test_after_placement(self):
        board = started_board(2)
        board = place_piece(board, oriented(board, 1, 'L3'), 0, 0, 1)
        state = get_game_state(board)

        self.assertEqual(state.status, GameStatus.IN_PROGRESS)
        self.assertEqual(state.current_player, 2)
        self.assertEqual(state.total_moves, 1)
        self.assertEqual(state.players[0], PlayerSummary(id=1, score=3, color='red', remaining_pieces=20))
        self.assertEqual(state.players[1], PlayerSummary(id=2, score=0, color='blue', remaining_pieces=21))
        self.assertIsInstance(state.last_move, MoveSummary)
        self.assertEqual(state.last_move.piece_id, 'L3')
        self.assertEqual((state.last_move.row, state.last_move.col), (0, 0))
        self.assertEqual(state.last_move.cells, [[0, 0], [1, 0], [0, 1]])
        self.assertFalse(state.is_game_over)
        self.assertIsNone(state.winner)

    def test_game_over_lists_winners(self):
        board = exhausted_board({1: 10, 2: 25, 3: 25}, player_count=3)
        state = get_game_state(board)
        self.assertTrue(state.is_game_over)
        self.assertEqual([p.id for p in state.winner], [2, 3])
        self.assertTrue(all(p.remaining_pieces == 0 for p in state.players))

    def test_projection_does_not_mutate(self):
        board = started_board()
        before = board.players
        get_game_state(board)
        self.assertEqual(board.players, before)
        self.assertEqual(board.status, GameStatus.IN_PROGRESS)

    def test_serializes(self):
        board = started_board(2)
        board = place_piece(board, oriented(board, 1, 'I1'), 19, 0, 1)
        payload = get_game_state(board).model_dump(mode='json')
        self.assertEqual(payload['status'], 'in_progress')
        self.assertEqual(payload['players'][0]['score'], 1)
        self.assertEqual(payload['last_move']['cells'], [[19, 0]])
        self.assertIsNone(payload['winner'])


if __name__ == '__main__':
    unittest.main()
