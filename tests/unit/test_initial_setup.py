"""
Unit tests: starting layout, pre-game draw and position notation
"""

import random

import pytest
from jungle_king.engine import Player, PieceType
from jungle_king.engine.initial_setup import (
    decide_first_player,
    format_position,
    load_initial_board,
    mirror_position,
    parse_position,
    shuffle_pre_game_choices,
    starting_positions,
    validate_assignment,
)


class TestAssignment:

    def test_default_assignment_places_sixteen_pieces(self):
        board = load_initial_board()
        assert len(board.pieces_of(Player.ONE)) == 8
        assert len(board.pieces_of(Player.TWO)) == 8

    def test_shuffled_assignment_keeps_layout(self):
        kinds = list(PieceType)
        random.Random(7).shuffle(kinds)

        board = load_initial_board({Player.ONE: kinds, Player.TWO: list(PieceType)})

        for piece_type, (row, col) in starting_positions(Player.ONE).items():
            assert board.piece_at(row, col).piece_type == piece_type

    def test_missing_player_rejected(self):
        with pytest.raises(ValueError, match="No pieces assigned"):
            validate_assignment({Player.ONE: list(PieceType)})

    def test_duplicate_kind_rejected(self):
        kinds = list(PieceType)
        kinds[0] = PieceType.ELEPHANT
        with pytest.raises(ValueError, match="exactly once"):
            validate_assignment({Player.ONE: kinds, Player.TWO: list(PieceType)})

    def test_short_assignment_rejected(self):
        with pytest.raises(ValueError):
            load_initial_board({Player.ONE: [PieceType.RAT], Player.TWO: list(PieceType)})

    def test_mirror_is_an_involution(self):
        for row in range(7):
            for col in range(9):
                assert mirror_position(*mirror_position(row, col)) == (row, col)

    def test_player_two_rat_starts_opposite_player_one_rat(self):
        assert starting_positions(Player.ONE)[PieceType.RAT] == (6, 2)
        assert starting_positions(Player.TWO)[PieceType.RAT] == (0, 6)


class TestPreGameDraw:

    def test_shuffle_contains_every_animal(self):
        choices = shuffle_pre_game_choices(random.Random(1))
        assert sorted(choices, key=lambda k: k.value) == list(PieceType)

    def test_shuffle_is_reproducible_with_seed(self):
        assert shuffle_pre_game_choices(random.Random(3)) == shuffle_pre_game_choices(random.Random(3))

    @pytest.mark.parametrize("one,two,expected", [
        (PieceType.ELEPHANT, PieceType.RAT, Player.ONE),
        (PieceType.RAT, PieceType.CAT, Player.TWO),
        (PieceType.LION, PieceType.TIGER, Player.ONE),
        (PieceType.DOG, PieceType.WOLF, Player.TWO),
    ])
    def test_stronger_draw_moves_first(self, one, two, expected):
        assert decide_first_player(one, two) == expected

    def test_same_draw_rejected(self):
        with pytest.raises(ValueError):
            decide_first_player(PieceType.CAT, PieceType.CAT)


class TestNotation:

    @pytest.mark.parametrize("position,text", [
        ((0, 0), "(1, 1)"),
        ((6, 8), "(7, 9)"),
        ((3, 0), "(4, 1)"),
    ])
    def test_format(self, position, text):
        assert format_position(*position) == text

    @pytest.mark.parametrize("text,position", [
        ("(1, 1)", (0, 0)),
        ("7,9", (6, 8)),
        ("  (4, 9) ", (3, 8)),
    ])
    def test_parse(self, text, position):
        assert parse_position(text) == position

    @pytest.mark.parametrize("text", ["", "(1)", "a,b", "(1, 2, 3)"])
    def test_parse_rejects_garbage(self, text):
        with pytest.raises(ValueError):
            parse_position(text)
