"""
Pydantic schemas for the Bento Blocks game state projection.
"""

from .game_state import GameStateSummary, MoveSummary, PlayerSummary

__all__ = [
    "GameStateSummary",
    "MoveSummary",
    "PlayerSummary",
]
