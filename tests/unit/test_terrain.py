"""
Unit tests: terrain classification
"""

import pytest
from jungle_king.engine import Player, TerrainKind, terrain_at, BOARD_ROWS, BOARD_COLS
from jungle_king.engine.terrain import is_on_board, trap_weakens


def _count(kind):
    return sum(
        1
        for row in range(BOARD_ROWS)
        for col in range(BOARD_COLS)
        if terrain_at(row, col).kind == kind
    )


class TestTerrain:

    def test_terrain_counts(self):
        """12 lake cells, 6 traps, 2 home bases"""
        assert _count(TerrainKind.LAKE) == 12
        assert _count(TerrainKind.TRAP) == 6
        assert _count(TerrainKind.HOME_BASE) == 2
        assert _count(TerrainKind.PLAIN) == BOARD_ROWS * BOARD_COLS - 20

    def test_home_bases(self):
        assert terrain_at(3, 0).kind == TerrainKind.HOME_BASE
        assert terrain_at(3, 0).owner == Player.ONE
        assert terrain_at(3, 8).kind == TerrainKind.HOME_BASE
        assert terrain_at(3, 8).owner == Player.TWO

    @pytest.mark.parametrize("position,guarded", [
        ((2, 0), Player.ONE), ((4, 0), Player.ONE), ((3, 1), Player.ONE),
        ((2, 8), Player.TWO), ((4, 8), Player.TWO), ((3, 7), Player.TWO),
    ])
    def test_traps_guard_their_base(self, position, guarded):
        terrain = terrain_at(*position)
        assert terrain.kind == TerrainKind.TRAP
        assert terrain.owner == guarded

    def test_lake_basins(self):
        for row in (1, 2, 4, 5):
            for col in (3, 4, 5):
                assert terrain_at(row, col).is_lake
        # The middle row between the basins is dry land
        for col in (3, 4, 5):
            assert terrain_at(3, col).kind == TerrainKind.PLAIN

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (7, 0), (0, 9), (100, 100)])
    def test_outside_is_distinct_from_plain(self, row, col):
        terrain = terrain_at(row, col)
        assert terrain.kind == TerrainKind.OUTSIDE
        assert terrain.kind != TerrainKind.PLAIN

    @pytest.mark.parametrize("row,col", [(0.5, 0), (1, 2.0), (None, 0), (0, "1"), (True, 0)])
    def test_non_integer_coordinates_are_off_board(self, row, col):
        assert not is_on_board(row, col)
        assert terrain_at(row, col).kind == TerrainKind.OUTSIDE

    def test_trap_weakens_only_the_attacker(self):
        # Traps next to Player 1's base weaken Player 2 and vice versa
        assert trap_weakens((2, 0), Player.TWO)
        assert not trap_weakens((2, 0), Player.ONE)
        assert trap_weakens((3, 7), Player.ONE)
        assert not trap_weakens((3, 7), Player.TWO)
        assert not trap_weakens((3, 3), Player.ONE)
