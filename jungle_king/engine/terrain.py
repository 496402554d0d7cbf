"""
Static terrain layout of the 7x9 Jungle King board
"""

from enum import Enum, auto
from typing import Dict, FrozenSet, NamedTuple, Optional, Tuple

from .piece import Player

# Board dimensions
BOARD_ROWS = 7
BOARD_COLS = 9


class TerrainKind(Enum):
    """Terrain kinds"""
    PLAIN = auto()
    LAKE = auto()
    TRAP = auto()
    HOME_BASE = auto()
    OUTSIDE = auto()  # sentinel for coordinates off the grid


class Terrain(NamedTuple):
    kind: TerrainKind
    # For a trap: the player whose base it guards. For a home base: its owner.
    owner: Optional[Player] = None

    @property
    def is_lake(self) -> bool:
        return self.kind == TerrainKind.LAKE

    @property
    def is_trap(self) -> bool:
        return self.kind == TerrainKind.TRAP

    @property
    def is_home_base(self) -> bool:
        return self.kind == TerrainKind.HOME_BASE

    @property
    def symbol(self) -> str:
        return TERRAIN_SYMBOLS[self.kind]


HOME_BASES: Dict[Player, Tuple[int, int]] = {
    Player.ONE: (3, 0),
    Player.TWO: (3, 8),
}

# Traps keyed by the player whose home base they guard
TRAPS: Dict[Player, FrozenSet[Tuple[int, int]]] = {
    Player.ONE: frozenset({(2, 0), (4, 0), (3, 1)}),
    Player.TWO: frozenset({(2, 8), (4, 8), (3, 7)}),
}

# Two 2x3 basins in the middle columns
LAKES: FrozenSet[Tuple[int, int]] = frozenset(
    (row, col)
    for row in (1, 2, 4, 5)
    for col in (3, 4, 5)
)

TERRAIN_SYMBOLS = {
    TerrainKind.PLAIN: ".",
    TerrainKind.LAKE: "~",
    TerrainKind.TRAP: "X",
    TerrainKind.HOME_BASE: "H",
    TerrainKind.OUTSIDE: " ",
}

PLAIN = Terrain(TerrainKind.PLAIN)
LAKE = Terrain(TerrainKind.LAKE)
OUTSIDE = Terrain(TerrainKind.OUTSIDE)


def is_on_board(row: int, col: int) -> bool:
    """True when (row, col) lies inside the 7x9 grid; non-integers never do"""
    for value in (row, col):
        if not isinstance(value, int) or isinstance(value, bool):
            return False
    return 0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS


def terrain_at(row: int, col: int) -> Terrain:
    """
    Classify a coordinate.
    Returns the OUTSIDE sentinel for anything off the grid, never raises.
    """
    if not is_on_board(row, col):
        return OUTSIDE

    position = (row, col)
    if position in LAKES:
        return LAKE

    for player, base in HOME_BASES.items():
        if base == position:
            return Terrain(TerrainKind.HOME_BASE, player)

    for player, traps in TRAPS.items():
        if position in traps:
            return Terrain(TerrainKind.TRAP, player)

    return PLAIN


def trap_weakens(position: Tuple[int, int], player: Player) -> bool:
    """Does landing on ``position`` weaken a piece owned by ``player``?"""
    return position in TRAPS[player.opponent]
