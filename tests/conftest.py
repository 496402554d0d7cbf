"""
Shared pytest configuration and fixtures
"""

import sys
from pathlib import Path

import pytest

# Make the project importable without installing it
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def empty_board():
    """A board with terrain but no pieces"""
    from jungle_king.engine import Board
    return Board()


@pytest.fixture
def initial_board():
    """A board with the standard starting layout"""
    from jungle_king.engine.initial_setup import load_initial_board
    return load_initial_board()


@pytest.fixture
def game():
    """A fresh game, Player 1 to move"""
    from jungle_king.engine import new_game
    return new_game()


@pytest.fixture
def place():
    """Helper: put a piece of a given kind and owner on a board"""
    from jungle_king.engine import Piece

    def _place(board, piece_type, owner, row, col, weakened=False):
        piece = Piece(piece_type, owner)
        assert board.place_piece(piece, row, col), f"could not place {piece_type} on ({row}, {col})"
        piece.weakened = weakened
        return piece

    return _place
