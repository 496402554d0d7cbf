"""
Move requests and their outcomes
"""

from enum import Enum, auto
from typing import Optional, Tuple

from .piece import Piece, PieceType, Player


class RejectReason(Enum):
    """Why a move request was refused"""
    OUT_OF_BOUNDS = auto()
    NOT_ORTHOGONAL = auto()
    OWN_HOME_BASE_BLOCKED = auto()
    LAKE_ENTRY_DENIED = auto()
    LAKE_JUMP_BLOCKED = auto()
    LAKE_JUMP_LANDING_INVALID = auto()
    RAT_LAKE_CAPTURE_DENIED = auto()
    OCCUPIED_BY_FRIENDLY = auto()
    CAPTURE_DENIED = auto()
    WRONG_TURN = auto()
    GAME_ALREADY_OVER = auto()
    EMPTY_SOURCE_CELL = auto()


class OutcomeKind(Enum):
    """Result of resolving one move"""
    REJECTED = auto()
    MOVED = auto()
    MOVED_WITH_CAPTURE = auto()
    MOVED_ONTO_ENEMY_HOME_BASE = auto()  # ends the game


class Move:
    """A move request: the piece on from_pos goes towards to_pos"""

    def __init__(
        self,
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int],
        player: Optional[Player] = None,
        piece_type: Optional[PieceType] = None
    ):
        self.from_pos = from_pos
        self.to_pos = to_pos
        self.player = player
        self.piece_type = piece_type

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return (self.from_pos, self.to_pos, self.player) == (other.from_pos, other.to_pos, other.player)

    def __hash__(self):
        return hash((self.from_pos, self.to_pos, self.player))

    def __str__(self):
        owner = self.player.label if self.player else "?"
        return f"{owner} {self.from_pos} -> {self.to_pos}"

    def __repr__(self):
        return (
            f"Move(from={self.from_pos}, to={self.to_pos}, "
            f"player={self.player.name if self.player else None}, "
            f"piece={self.piece_type.name if self.piece_type else None})"
        )

    def to_dict(self) -> dict:
        """Dictionary form (for the API)"""
        return {
            "from": self.from_pos,
            "to": self.to_pos,
            "player": self.player.value if self.player else None,
            "piece_type": self.piece_type.name if self.piece_type else None,
        }


class MoveOutcome:
    """
    What the move resolver decided.

    For a validated-but-not-yet-applied move, ``landing`` holds the cell the
    piece will end on (which differs from the requested target after a lake
    jump) and ``captured`` the piece that will be taken.
    """

    def __init__(
        self,
        kind: OutcomeKind,
        message: str = "",
        reason: Optional[RejectReason] = None,
        landing: Optional[Tuple[int, int]] = None,
        captured: Optional[Piece] = None,
        weakens: bool = False,
        jumped: bool = False
    ):
        self.kind = kind
        self.message = message
        self.reason = reason
        self.landing = landing
        self.captured = captured
        self.weakens = weakens
        self.jumped = jumped

    @property
    def accepted(self) -> bool:
        return self.kind != OutcomeKind.REJECTED

    @staticmethod
    def rejected(reason: RejectReason, message: str) -> 'MoveOutcome':
        return MoveOutcome(OutcomeKind.REJECTED, message=message, reason=reason)

    def __repr__(self):
        return (
            f"MoveOutcome({self.kind.name}, reason={self.reason.name if self.reason else None}, "
            f"landing={self.landing}, message={self.message!r})"
        )
