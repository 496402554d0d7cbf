"""
Jungle King pieces: players, piece kinds, ranks and movement capabilities
"""

from enum import Enum, auto
from typing import Dict, NamedTuple, Optional, Tuple


class Player(Enum):
    """Player definition"""
    ONE = 1  # Player 1 (home base on the left edge)
    TWO = 2  # Player 2 (home base on the right edge)

    @property
    def opponent(self):
        """Return the opposing player"""
        return Player.TWO if self == Player.ONE else Player.ONE

    @property
    def label(self) -> str:
        return f"Player {self.value}"


class PieceType(Enum):
    """Piece kinds, declared from weakest to strongest"""
    RAT = auto()
    CAT = auto()
    DOG = auto()
    WOLF = auto()
    LEOPARD = auto()
    TIGER = auto()
    LION = auto()
    ELEPHANT = auto()


class MoveCapability(Enum):
    """How a piece interacts with lake cells"""
    STANDARD = auto()      # never enters a lake
    LAKE_DWELLER = auto()  # may walk into and through lakes (Rat)
    LAKE_JUMPER = auto()   # leaps over a whole lake in a straight line (Lion, Tiger)


class Capabilities(NamedTuple):
    rank: int
    capability: MoveCapability

    @property
    def can_enter_lake(self) -> bool:
        return self.capability == MoveCapability.LAKE_DWELLER

    @property
    def can_jump_lake(self) -> bool:
        return self.capability == MoveCapability.LAKE_JUMPER


# Rank 1 (Rat) .. 8 (Elephant)
PIECE_RANKS = {
    PieceType.RAT: 1,
    PieceType.CAT: 2,
    PieceType.DOG: 3,
    PieceType.WOLF: 4,
    PieceType.LEOPARD: 5,
    PieceType.TIGER: 6,
    PieceType.LION: 7,
    PieceType.ELEPHANT: 8,
}

# Display names used in status messages
PIECE_NAMES = {
    PieceType.RAT: "Rat",
    PieceType.CAT: "Cat",
    PieceType.DOG: "Dog",
    PieceType.WOLF: "Wolf",
    PieceType.LEOPARD: "Leopard",
    PieceType.TIGER: "Tiger",
    PieceType.LION: "Lion",
    PieceType.ELEPHANT: "Elephant",
}

# Single-letter symbols for the text board (upper case = Player 1)
PIECE_SYMBOLS = {
    PieceType.RAT: "r",
    PieceType.CAT: "c",
    PieceType.DOG: "d",
    PieceType.WOLF: "w",
    PieceType.LEOPARD: "p",
    PieceType.TIGER: "t",
    PieceType.LION: "l",
    PieceType.ELEPHANT: "e",
}

PIECE_CAPABILITIES: Dict[PieceType, Capabilities] = {
    piece_type: Capabilities(
        rank=PIECE_RANKS[piece_type],
        capability=(
            MoveCapability.LAKE_DWELLER if piece_type == PieceType.RAT
            else MoveCapability.LAKE_JUMPER if piece_type in (PieceType.LION, PieceType.TIGER)
            else MoveCapability.STANDARD
        ),
    )
    for piece_type in PieceType
}


def capabilities_of(piece_type: PieceType) -> Capabilities:
    """Look up the rank and lake behaviour of a piece kind"""
    return PIECE_CAPABILITIES[piece_type]


class Piece:
    """A single animal on the board

    The board owns every piece and addresses it by ``piece_id``; the piece only
    remembers its coordinate, never the cell object.
    """

    def __init__(self, piece_type: PieceType, owner: Player, piece_id: Optional[int] = None):
        self.piece_type = piece_type
        self.owner = owner
        self.piece_id = piece_id
        self.position: Optional[Tuple[int, int]] = None
        self.weakened = False
        self.captured = False

    @property
    def rank(self) -> int:
        return PIECE_RANKS[self.piece_type]

    @property
    def name(self) -> str:
        return PIECE_NAMES[self.piece_type]

    @property
    def capabilities(self) -> Capabilities:
        return capabilities_of(self.piece_type)

    def __str__(self):
        """Two character form, e.g. '1L' for Player 1's Lion"""
        return f"{self.owner.value}{PIECE_SYMBOLS[self.piece_type].upper()}"

    def __repr__(self):
        return (
            f"Piece({self.piece_type.name}, {self.owner.name}, id={self.piece_id}, "
            f"pos={self.position}, weakened={self.weakened})"
        )

    def to_dict(self) -> dict:
        """Dictionary form (for the API)"""
        return {
            "id": self.piece_id,
            "type": self.piece_type.name,
            "owner": self.owner.value,
            "rank": self.rank,
            "weakened": self.weakened,
        }
