"""
Pydantic request/response models for the HTTP API
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class NewGameRequest(BaseModel):
    first_player: int = Field(1, ge=1, le=2, description="Player who moves first")
    player_names: Optional[Dict[int, str]] = None
    # Pre-game draw: when both are given they decide who moves first
    player_one_choice: Optional[str] = None
    player_two_choice: Optional[str] = None


class NewGameResponse(BaseModel):
    game_id: str
    message: str
    game_state: dict


class MoveRequest(BaseModel):
    from_row: int
    from_col: int
    to_row: int
    to_col: int


class MoveResponse(BaseModel):
    success: bool
    outcome: str
    reason: Optional[str] = None
    message: str
    captured_piece_type: Optional[str] = None
    weakened_piece_id: Optional[int] = None
    game_state: dict
    legal_moves: Optional[List[dict]] = None


class CellResponse(BaseModel):
    row: int
    col: int
    terrain: str
    piece_type: Optional[str] = None
    owner: Optional[int] = None
    is_weakened: Optional[bool] = None
    home_base_owner: Optional[int] = None
