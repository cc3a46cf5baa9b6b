"""
Game state schemas
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from bento_blocks.board import GameStatus


class PlayerSummary(BaseModel):
    """Per-player view of the game."""
    id: int = Field(ge=1, le=4)
    score: int = Field(ge=0)
    color: str
    remaining_pieces: int = Field(ge=0, le=21, description="Number of unused pieces")

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "score": 15,
                "color": "red",
                "remaining_pieces": 17
            }
        }


class MoveSummary(BaseModel):
    """The most recent placement."""
    player_id: int
    piece_id: str
    row: int
    col: int
    cells: List[List[int]] = Field(description="Absolute (row, col) cells claimed")
    timestamp: float


class GameStateSummary(BaseModel):
    """Read-only projection of a board, as consumed by the presentation layer."""
    status: GameStatus
    current_player: int
    players: List[PlayerSummary]
    is_game_over: bool
    winner: Optional[List[PlayerSummary]] = None
    total_moves: int = Field(ge=0)
    last_move: Optional[MoveSummary] = None

    class Config:
        json_schema_extra = {
            "example": {
                "status": "in_progress",
                "current_player": 2,
                "players": [
                    {"id": 1, "score": 1, "color": "red", "remaining_pieces": 20},
                    {"id": 2, "score": 0, "color": "blue", "remaining_pieces": 21}
                ],
                "is_game_over": False,
                "winner": None,
                "total_moves": 1,
                "last_move": None
            }
        }
