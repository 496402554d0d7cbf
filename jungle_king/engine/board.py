"""
Jungle King board: cell grid and piece occupancy
"""

from typing import Dict, List, Optional, Tuple

from .piece import Piece, Player
from .terrain import BOARD_COLS, BOARD_ROWS, Terrain, is_on_board, terrain_at


class Cell:
    """One square of the board"""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.terrain: Terrain = terrain_at(row, col)
        # Id of the occupying piece (resolved through the board's arena)
        self.piece_id: Optional[int] = None
        # Only set on the two home bases; reassigned when the base is taken
        self.home_base_owner: Optional[Player] = self.terrain.owner if self.terrain.is_home_base else None

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def is_empty(self) -> bool:
        return self.piece_id is None

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, {self.terrain.kind.name}, piece_id={self.piece_id})"


class Board:
    """
    The 7x9 grid.

    The board owns every piece in ``pieces`` (keyed by piece id); cells hold
    ids and pieces hold coordinates. No game rules are checked here.
    """

    def __init__(self):
        self.cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(BOARD_COLS)]
            for row in range(BOARD_ROWS)
        ]
        self.pieces: Dict[int, Piece] = {}
        # Pieces still in play per player
        self.rosters: Dict[Player, List[int]] = {
            Player.ONE: [],
            Player.TWO: [],
        }
        self._next_piece_id = 0

    def is_valid_position(self, position: Tuple[int, int]) -> bool:
        """Check that a position lies on the board"""
        row, col = position
        return is_on_board(row, col)

    def get_cell(self, position: Tuple[int, int]) -> Cell:
        """Return the cell at a position (ValueError if off the board)"""
        if not self.is_valid_position(position):
            raise ValueError(f"Invalid position: {position}")
        row, col = position
        return self.cells[row][col]

    def terrain(self, position: Tuple[int, int]) -> Terrain:
        row, col = position
        return terrain_at(row, col)

    def piece_at(self, row: int, col: int) -> Optional[Piece]:
        """Piece on (row, col), or None for an empty or off-board cell"""
        if not is_on_board(row, col):
            return None
        piece_id = self.cells[row][col].piece_id
        return self.pieces[piece_id] if piece_id is not None else None

    def is_occupied(self, position: Tuple[int, int]) -> bool:
        return self.piece_at(*position) is not None

    def place_piece(self, piece: Piece, row: int, col: int) -> bool:
        """
        Put a new piece on the board and register it with its owner.
        Returns False if the cell is off the board or already taken, or if
        a piece with the same id is already on this board.
        """
        if not is_on_board(row, col):
            return False

        if piece.piece_id is not None and piece.piece_id in self.pieces:
            return False

        cell = self.cells[row][col]
        if not cell.is_empty():
            return False

        if piece.piece_id is None:
            piece.piece_id = self._next_piece_id
        self._next_piece_id = max(self._next_piece_id, piece.piece_id) + 1

        self.pieces[piece.piece_id] = piece
        cell.piece_id = piece.piece_id
        piece.position = (row, col)
        piece.captured = False
        self.rosters[piece.owner].append(piece.piece_id)
        return True

    def remove_piece(self, row: int, col: int) -> Optional[Piece]:
        """
        Take the occupant off the board for good (capture).
        The piece is flagged captured and dropped from its owner's roster.
        """
        piece = self.piece_at(row, col)
        if piece is None:
            return None

        self.cells[row][col].piece_id = None
        del self.pieces[piece.piece_id]
        self.rosters[piece.owner].remove(piece.piece_id)
        piece.position = None
        piece.captured = True
        return piece

    def relocate_piece(self, piece: Piece, row: int, col: int) -> bool:
        """
        Move a piece that is already on the board to an empty cell.
        Returns False if the destination is off the board or occupied.
        """
        if not is_on_board(row, col) or not self.cells[row][col].is_empty():
            return False

        old_row, old_col = piece.position
        self.cells[old_row][old_col].piece_id = None
        self.cells[row][col].piece_id = piece.piece_id
        piece.position = (row, col)
        return True

    def pieces_of(self, player: Player) -> List[Piece]:
        """Pieces the player still has in play"""
        return [self.pieces[piece_id] for piece_id in self.rosters[player]]

    def has_pieces_remaining(self, player: Player) -> bool:
        """Scan the grid for any piece owned by the player"""
        for row in range(BOARD_ROWS):
            for col in range(BOARD_COLS):
                piece = self.piece_at(row, col)
                if piece is not None and piece.owner == player:
                    return True
        return False

    def home_base_owner(self, position: Tuple[int, int]) -> Optional[Player]:
        return self.get_cell(position).home_base_owner

    def claim_home_base(self, position: Tuple[int, int], player: Player):
        """Mark a home base as taken by ``player`` (rendering only)"""
        cell = self.get_cell(position)
        if cell.terrain.is_home_base:
            cell.home_base_owner = player

    def copy(self) -> 'Board':
        """Deep copy of the board, piece ids preserved"""
        new_board = Board()
        for row in range(BOARD_ROWS):
            for col in range(BOARD_COLS):
                cell = self.cells[row][col]
                new_board.cells[row][col].home_base_owner = cell.home_base_owner
                piece = self.piece_at(row, col)
                if piece is not None:
                    new_piece = Piece(piece.piece_type, piece.owner, piece.piece_id)
                    new_piece.weakened = piece.weakened
                    new_board.place_piece(new_piece, row, col)
        # Keep roster order identical to the source
        for player in Player:
            new_board.rosters[player] = list(self.rosters[player])
        new_board._next_piece_id = self._next_piece_id
        return new_board

    def __str__(self):
        """Text rendering of the board"""
        cell_width = 4
        separator_length = BOARD_COLS * (cell_width + 1) + 1

        result = []

        # Column header
        header = "   "
        for i in range(BOARD_COLS):
            header += f"{i:^{cell_width}}|"
        result.append(header)
        result.append("  " + "-" * separator_length)

        for row in range(BOARD_ROWS):
            row_str = f"{row} |"
            for col in range(BOARD_COLS):
                piece = self.piece_at(row, col)
                if piece is None:
                    text = self.cells[row][col].terrain.symbol
                else:
                    text = str(piece) + ("*" if piece.weakened else "")
                row_str += f"{text:^{cell_width}}|"
            result.append(row_str)
            result.append("  " + "-" * separator_length)

        return "\n".join(result)

    def to_dict(self) -> dict:
        """Dictionary form of the board (for the API)"""
        board_data = []
        for row in range(BOARD_ROWS):
            row_data = []
            for col in range(BOARD_COLS):
                cell = self.cells[row][col]
                piece = self.piece_at(row, col)
                row_data.append({
                    "terrain": cell.terrain.kind.name,
                    "home_base_owner": cell.home_base_owner.value if cell.home_base_owner else None,
                    "piece": piece.to_dict() if piece else None,
                })
            board_data.append(row_data)

        return {
            "rows": BOARD_ROWS,
            "cols": BOARD_COLS,
            "board": board_data,
            "pieces_remaining": {
                str(player.value): len(self.rosters[player]) for player in Player
            },
        }
