"""
Starting layout, pre-game helpers and coordinate notation
"""

import random
from typing import Dict, Iterable, List, Optional, Tuple

from .board import Board
from .piece import PIECE_RANKS, Piece, PieceType, Player
from .terrain import BOARD_COLS, BOARD_ROWS

# Player 1's starting squares. Player 2 uses the same layout rotated half a
# turn, i.e. (row, col) -> (6 - row, 8 - col).
PLAYER_ONE_SETUP = [
    (0, 0, PieceType.TIGER),
    (0, 2, PieceType.ELEPHANT),
    (1, 1, PieceType.CAT),
    (2, 2, PieceType.WOLF),
    (4, 2, PieceType.LEOPARD),
    (5, 1, PieceType.DOG),
    (6, 0, PieceType.LION),
    (6, 2, PieceType.RAT),
]


def mirror_position(row: int, col: int) -> Tuple[int, int]:
    """Map a square to its counterpart on the other side of the board"""
    return BOARD_ROWS - 1 - row, BOARD_COLS - 1 - col


def starting_positions(player: Player) -> Dict[PieceType, Tuple[int, int]]:
    """Where each kind starts for ``player``"""
    if player == Player.ONE:
        return {piece_type: (row, col) for row, col, piece_type in PLAYER_ONE_SETUP}
    return {piece_type: mirror_position(row, col) for row, col, piece_type in PLAYER_ONE_SETUP}


def validate_assignment(assignment: Dict[Player, Iterable[PieceType]]) -> Dict[Player, List[PieceType]]:
    """
    Check a piece assignment coming from the pre-game screen.
    Each player must hold all eight kinds exactly once.
    """
    validated = {}
    for player in Player:
        if player not in assignment:
            raise ValueError(f"No pieces assigned to {player.label}")
        kinds = list(assignment[player])
        if sorted(kinds, key=lambda k: k.value) != list(PieceType):
            raise ValueError(
                f"{player.label} must own each of the eight animals exactly once, got "
                f"{[k.name for k in kinds]}"
            )
        validated[player] = kinds
    return validated


def load_initial_board(assignment: Optional[Dict[Player, Iterable[PieceType]]] = None) -> Board:
    """
    Build a board with the canonical starting layout.
    ``assignment`` defaults to the full set of animals for both players.
    """
    if assignment is None:
        assignment = {player: list(PieceType) for player in Player}
    assignment = validate_assignment(assignment)

    board = Board()
    for player in Player:
        positions = starting_positions(player)
        for piece_type in assignment[player]:
            row, col = positions[piece_type]
            board.place_piece(Piece(piece_type, player), row, col)

    return board


def shuffle_pre_game_choices(rng: Optional[random.Random] = None) -> List[PieceType]:
    """
    The eight face-down animals of the pre-game draw, in random order.
    Each player then picks one; see ``decide_first_player``.
    """
    rng = rng or random.Random()
    choices = list(PieceType)
    rng.shuffle(choices)
    return choices


def decide_first_player(player_one_choice: PieceType, player_two_choice: PieceType) -> Player:
    """The player who drew the stronger animal moves first"""
    if player_one_choice == player_two_choice:
        raise ValueError("Both players cannot draw the same animal")
    if PIECE_RANKS[player_one_choice] > PIECE_RANKS[player_two_choice]:
        return Player.ONE
    return Player.TWO


def format_position(row: int, col: int) -> str:
    """
    Board position as shown to players (1-based)
    e.g. (0, 0) -> "(1, 1)", (6, 8) -> "(7, 9)"
    """
    return f"({row + 1}, {col + 1})"


def parse_position(pos_str: str) -> Tuple[int, int]:
    """
    Inverse of format_position
    e.g. "(1, 1)" -> (0, 0), "7,9" -> (6, 8)
    """
    parts = pos_str.strip().strip("()").split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid position string: {pos_str}")

    try:
        row, col = (int(part) - 1 for part in parts)
    except ValueError:
        raise ValueError(f"Invalid position string: {pos_str}") from None

    return row, col
