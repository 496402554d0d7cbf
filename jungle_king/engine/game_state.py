"""
Game state and turn control
"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional

from .board import Board
from .initial_setup import load_initial_board
from .move import Move, MoveOutcome, OutcomeKind, RejectReason
from .piece import PieceType, Player
from .rules import Rules
from .terrain import TerrainKind, is_on_board, terrain_at

logger = logging.getLogger(__name__)


class MoveResult(NamedTuple):
    """What submit_move reports back to the presentation layer"""
    outcome: OutcomeKind
    message: str
    reason: Optional[RejectReason] = None
    captured_piece_type: Optional[PieceType] = None
    weakened_piece_id: Optional[int] = None
    landing: Optional[tuple] = None

    @property
    def success(self) -> bool:
        return self.outcome != OutcomeKind.REJECTED

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "outcome": self.outcome.name,
            "reason": self.reason.name if self.reason else None,
            "message": self.message,
            "captured_piece_type": self.captured_piece_type.name if self.captured_piece_type else None,
            "weakened_piece_id": self.weakened_piece_id,
            "landing": self.landing,
        }


class CellView(NamedTuple):
    """Read-only snapshot of one cell, for rendering"""
    terrain: TerrainKind
    piece_type: Optional[PieceType] = None
    owner: Optional[Player] = None
    is_weakened: Optional[bool] = None
    home_base_owner: Optional[Player] = None

    def to_dict(self) -> dict:
        return {
            "terrain": self.terrain.name,
            "piece_type": self.piece_type.name if self.piece_type else None,
            "owner": self.owner.value if self.owner else None,
            "is_weakened": self.is_weakened,
            "home_base_owner": self.home_base_owner.value if self.home_base_owner else None,
        }


class GameState:
    """One game: board, whose turn it is and whether someone has won"""

    def __init__(
        self,
        board: Board,
        first_player: Player = Player.ONE,
        player_names: Optional[Dict[Player, str]] = None
    ):
        self.board = board
        self.current_player = first_player
        self.game_over = False
        self.winner: Optional[Player] = None
        self.move_history: List[Move] = []
        self.status_message = ""
        self.player_names = {player: player.label for player in Player}
        if player_names:
            self.player_names.update(player_names)

    def is_game_over(self) -> bool:
        return self.game_over

    def switch_turn(self):
        """Hand the turn to the other player"""
        self.current_player = self.current_player.opponent

    def _reject(self, reason: RejectReason, message: str) -> MoveResult:
        self.status_message = message
        logger.debug("Move refused (%s): %s", reason.name, message)
        return MoveResult(OutcomeKind.REJECTED, message, reason=reason)

    def submit_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> MoveResult:
        """
        Play the piece on (from_row, from_col) towards (to_row, to_col).

        Rejections never change the board or the turn. After an accepted move
        the turn passes to the opponent unless the opponent has nothing left on
        the board; landing on the enemy home base ends the game.
        """
        if self.game_over:
            return self._reject(RejectReason.GAME_ALREADY_OVER, "The game is already over.")

        if not is_on_board(from_row, from_col):
            return self._reject(RejectReason.OUT_OF_BOUNDS, "Invalid move: Out of bounds.")

        piece = self.board.piece_at(from_row, from_col)
        if piece is None:
            return self._reject(RejectReason.EMPTY_SOURCE_CELL, "There is no piece on that square.")

        if piece.owner != self.current_player:
            return self._reject(
                RejectReason.WRONG_TURN,
                f"It is {self.player_names[self.current_player]}'s turn."
            )

        outcome: MoveOutcome = Rules.attempt_move(self.board, piece, to_row, to_col)
        if not outcome.accepted:
            self.status_message = outcome.message
            return MoveResult(outcome.kind, outcome.message, reason=outcome.reason)

        mover = piece.owner
        self.move_history.append(
            Move((from_row, from_col), outcome.landing, mover, piece.piece_type)
        )
        message = outcome.message

        if outcome.kind == OutcomeKind.MOVED_ONTO_ENEMY_HOME_BASE:
            self.game_over = True
            self.winner = mover
            message = f"{message} {self.player_names[mover]} wins the game!"
            logger.info("Game over: %s wins", self.player_names[mover])
        elif self.board.has_pieces_remaining(mover.opponent):
            self.switch_turn()
        # Otherwise the opponent has nothing left to move and the same player goes again

        self.status_message = message
        return MoveResult(
            outcome.kind,
            message,
            captured_piece_type=outcome.captured.piece_type if outcome.captured else None,
            weakened_piece_id=piece.piece_id if piece.weakened else None,
            landing=outcome.landing,
        )

    def resign(self) -> Player:
        """The player to move gives up; returns the winner"""
        if self.game_over:
            raise ValueError("The game is already over")
        self.game_over = True
        self.winner = self.current_player.opponent
        self.status_message = f"{self.player_names[self.current_player]} resigned."
        logger.info("%s resigned", self.player_names[self.current_player])
        return self.winner

    def query_cell(self, row: int, col: int) -> CellView:
        """Snapshot of one cell; has no side effects"""
        terrain = terrain_at(row, col)
        if not is_on_board(row, col):
            return CellView(terrain=terrain.kind)

        cell = self.board.cells[row][col]
        piece = self.board.piece_at(row, col)
        if piece is None:
            return CellView(terrain=terrain.kind, home_base_owner=cell.home_base_owner)

        return CellView(
            terrain=terrain.kind,
            piece_type=piece.piece_type,
            owner=piece.owner,
            is_weakened=piece.weakened,
            home_base_owner=cell.home_base_owner,
        )

    def get_legal_moves(self) -> List[Move]:
        if self.game_over:
            return []
        return Rules.get_legal_moves(self.board, self.current_player)

    def to_dict(self) -> dict:
        """Dictionary form of the game (for the API)"""
        return {
            "board": self.board.to_dict(),
            "current_player": self.current_player.value,
            "player_names": {str(p.value): name for p, name in self.player_names.items()},
            "move_count": len(self.move_history),
            "game_over": self.game_over,
            "winner": self.winner.value if self.winner else None,
            "status_message": self.status_message,
        }


def new_game(
    assignment: Optional[Dict[Player, Iterable[PieceType]]] = None,
    first_player: Player = Player.ONE,
    player_names: Optional[Dict[Player, str]] = None
) -> GameState:
    """Start a game from the canonical layout"""
    board = load_initial_board(assignment)
    logger.info("New game, %s moves first", first_player.label)
    return GameState(board, first_player, player_names)
