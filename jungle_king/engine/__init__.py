"""
Jungle King rule engine - package initialisation
"""

from .piece import (
    Piece, Player, PieceType, MoveCapability, Capabilities,
    PIECE_RANKS, PIECE_NAMES, capabilities_of,
)
from .terrain import (
    Terrain, TerrainKind, BOARD_ROWS, BOARD_COLS, HOME_BASES, TRAPS, LAKES, terrain_at,
)
from .board import Board, Cell
from .move import Move, MoveOutcome, OutcomeKind, RejectReason
from .rules import Rules
from .game_state import GameState, MoveResult, CellView, new_game

__all__ = [
    'Piece',
    'Player',
    'PieceType',
    'MoveCapability',
    'Capabilities',
    'PIECE_RANKS',
    'PIECE_NAMES',
    'capabilities_of',
    'Terrain',
    'TerrainKind',
    'BOARD_ROWS',
    'BOARD_COLS',
    'HOME_BASES',
    'TRAPS',
    'LAKES',
    'terrain_at',
    'Board',
    'Cell',
    'Move',
    'MoveOutcome',
    'OutcomeKind',
    'RejectReason',
    'Rules',
    'GameState',
    'MoveResult',
    'CellView',
    'new_game',
]
