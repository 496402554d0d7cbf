"""
Jungle King move resolution: legality, captures and terrain effects
"""

import logging
from typing import List, Optional, Tuple

from .board import Board
from .initial_setup import format_position
from .move import Move, MoveOutcome, OutcomeKind, RejectReason
from .piece import Piece, PieceType, Player
from .terrain import HOME_BASES, is_on_board, terrain_at, trap_weakens

logger = logging.getLogger(__name__)

# Orthogonal unit steps: up, left, down, right
DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (0, -1), (1, 0), (0, 1)]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Rules:
    """Jungle King rules

    One parameterised algorithm covers every animal; the differences between
    kinds come from ``Piece.capabilities``.
    """

    @staticmethod
    def can_capture(attacker: Piece, defender: Optional[Piece]) -> bool:
        """
        Rank rule with its two overrides.

        - a weakened defender can be taken by anything
        - a Rat can take an Elephant
        - a weakened attacker takes nothing
        - otherwise rank(attacker) >= rank(defender)
        """
        if defender is None or defender.owner == attacker.owner:
            return False

        if defender.weakened:
            return True

        if attacker.piece_type == PieceType.RAT and defender.piece_type == PieceType.ELEPHANT:
            return True

        if attacker.weakened:
            return False

        return attacker.rank >= defender.rank

    @staticmethod
    def validate_move(board: Board, piece: Piece, target_row: int, target_col: int) -> MoveOutcome:
        """
        Decide whether ``piece`` may move towards (target_row, target_col).

        Nothing on the board is changed. An accepted outcome carries the landing
        cell, the piece that would be captured and whether the mover ends up
        weakened; a rejected outcome carries the first failing reason.
        """
        name = piece.name
        caps = piece.capabilities
        from_row, from_col = piece.position
        requested = (target_row, target_col)

        # 1. The target must be on the grid
        if not is_on_board(target_row, target_col):
            return MoveOutcome.rejected(RejectReason.OUT_OF_BOUNDS, "Invalid move: Out of bounds.")

        dr = target_row - from_row
        dc = target_col - from_col
        if (dr != 0 and dc != 0) or (dr == 0 and dc == 0):
            return MoveOutcome.rejected(
                RejectReason.NOT_ORTHOGONAL,
                f"{name} can only move up, down, left or right."
            )

        step = (_sign(dr), _sign(dc))
        adjacent = (from_row + step[0], from_col + step[1])
        distance = abs(dr) + abs(dc)

        # 2. Never onto one's own home base, even when it is empty
        if requested == HOME_BASES[piece.owner]:
            return MoveOutcome.rejected(
                RejectReason.OWN_HOME_BASE_BLOCKED,
                "You cannot land on your own home base!"
            )

        # Only a lake jump may cover more than one square
        if distance > 1 and not (caps.can_jump_lake and terrain_at(*adjacent).is_lake):
            return MoveOutcome.rejected(
                RejectReason.NOT_ORTHOGONAL,
                f"{name} can only move one square at a time."
            )

        target_piece = board.piece_at(*adjacent)

        # 3. Rat takes Rat wherever either of them stands
        if (piece.piece_type == PieceType.RAT and target_piece is not None
                and target_piece.owner != piece.owner
                and target_piece.piece_type == PieceType.RAT):
            return Rules._accept(piece, adjacent, target_piece)

        landing = adjacent
        jumped = False
        if terrain_at(*adjacent).is_lake and not caps.can_enter_lake:
            # 4. Only the Rat walks into water
            if not caps.can_jump_lake:
                return MoveOutcome.rejected(
                    RejectReason.LAKE_ENTRY_DENIED,
                    f"{name} cannot cross or land on a lake."
                )

            # 5. Lion/Tiger leap over the whole lake unless a Rat is swimming in it
            while terrain_at(*landing).is_lake:
                swimmer = board.piece_at(*landing)
                if swimmer is not None and swimmer.piece_type == PieceType.RAT:
                    return MoveOutcome.rejected(
                        RejectReason.LAKE_JUMP_BLOCKED,
                        f"{name} cannot jump because a Rat blocks the path."
                    )
                landing = (landing[0] + step[0], landing[1] + step[1])

            if not is_on_board(*landing):
                return MoveOutcome.rejected(
                    RejectReason.LAKE_JUMP_LANDING_INVALID,
                    f"{name} must land immediately after the lake."
                )

            if distance > 1 and requested != landing:
                return MoveOutcome.rejected(
                    RejectReason.LAKE_JUMP_LANDING_INVALID,
                    f"{name} must land immediately after the lake, at {format_position(*landing)}."
                )

            if landing == HOME_BASES[piece.owner]:
                return MoveOutcome.rejected(
                    RejectReason.OWN_HOME_BASE_BLOCKED,
                    "You cannot land on your own home base!"
                )

            jumped = True
            target_piece = board.piece_at(*landing)

        # 6. A Rat in the water can only bite another Rat
        if (piece.piece_type == PieceType.RAT and terrain_at(from_row, from_col).is_lake
                and target_piece is not None and target_piece.owner != piece.owner):
            return MoveOutcome.rejected(
                RejectReason.RAT_LAKE_CAPTURE_DENIED,
                f"Rat cannot capture {target_piece.name} from the lake."
            )

        # 7. Occupied target
        if target_piece is not None:
            if target_piece.owner == piece.owner:
                return MoveOutcome.rejected(
                    RejectReason.OCCUPIED_BY_FRIENDLY,
                    f"Cannot capture your own {target_piece.name}."
                )
            if not Rules.can_capture(piece, target_piece):
                return MoveOutcome.rejected(
                    RejectReason.CAPTURE_DENIED,
                    f"Cannot capture {target_piece.name}."
                )

        return Rules._accept(piece, landing, target_piece, jumped)

    @staticmethod
    def _accept(
        piece: Piece,
        landing: Tuple[int, int],
        captured: Optional[Piece],
        jumped: bool = False
    ) -> MoveOutcome:
        """Build the accepted outcome, including the status text"""
        name = piece.name
        position_text = format_position(*landing)
        messages = []

        if captured is not None:
            messages.append(f"{captured.name} of {captured.owner.label} has been captured.")
        if jumped:
            messages.append(f"{name} jumps over the lake to {position_text}.")

        if landing == HOME_BASES[piece.owner.opponent]:
            messages.append(f"{name} reached the home base at {position_text}!")
            return MoveOutcome(
                OutcomeKind.MOVED_ONTO_ENEMY_HOME_BASE,
                message=" ".join(messages),
                landing=landing,
                captured=captured,
                jumped=jumped,
            )

        weakens = trap_weakens(landing, piece.owner)
        if weakens:
            messages.append(f"{name} is weakened by a trap.")
        messages.append(f"{name} moved to {position_text}")

        return MoveOutcome(
            OutcomeKind.MOVED_WITH_CAPTURE if captured is not None else OutcomeKind.MOVED,
            message=" ".join(messages),
            landing=landing,
            captured=captured,
            weakens=weakens,
            jumped=jumped,
        )

    @staticmethod
    def attempt_move(board: Board, piece: Piece, target_row: int, target_col: int) -> MoveOutcome:
        """
        Validate and, if legal, carry out a move.

        The board is only touched after every check has passed, so a rejected
        move leaves it exactly as it was.
        """
        outcome = Rules.validate_move(board, piece, target_row, target_col)
        if not outcome.accepted:
            logger.debug("Rejected %s %s -> %s: %s", piece.name, piece.position,
                         (target_row, target_col), outcome.reason.name)
            return outcome

        Rules._apply(board, piece, outcome)
        logger.info("%s: %s", piece.owner.label, outcome.message)
        return outcome

    @staticmethod
    def _apply(board: Board, piece: Piece, outcome: MoveOutcome):
        """Mutate the board for an accepted outcome"""
        if outcome.captured is not None:
            board.remove_piece(*outcome.captured.position)

        board.relocate_piece(piece, *outcome.landing)

        if outcome.kind == OutcomeKind.MOVED_ONTO_ENEMY_HOME_BASE:
            board.claim_home_base(outcome.landing, piece.owner)

        # Weakness lasts exactly one move
        piece.weakened = outcome.weakens

    @staticmethod
    def get_piece_legal_moves(board: Board, piece: Piece) -> List[Move]:
        """All accepted moves for one piece (jumps report the landing cell)"""
        legal_moves = []
        row, col = piece.position

        for dr, dc in DIRECTIONS:
            outcome = Rules.validate_move(board, piece, row + dr, col + dc)
            if outcome.accepted:
                legal_moves.append(
                    Move((row, col), outcome.landing, piece.owner, piece.piece_type)
                )

        return legal_moves

    @staticmethod
    def get_legal_moves(board: Board, player: Player) -> List[Move]:
        """Every accepted move available to ``player``"""
        legal_moves = []
        for piece in board.pieces_of(player):
            legal_moves.extend(Rules.get_piece_legal_moves(board, piece))
        return legal_moves
