"""
Property-based tests (Hypothesis)

Invariants checked:
1. Every listed legal move is accepted when played
2. Rejected moves leave the board untouched
3. Piece count only drops by one per capture
4. At most one piece per cell, and board links stay consistent
5. A weakened piece is always standing on an enemy trap
"""

import random

from hypothesis import given, settings, strategies as st
from hypothesis.stateful import RuleBasedStateMachine, rule, initialize, invariant

from jungle_king.engine import (
    Board, Player, PieceType, Piece, Rules, OutcomeKind, BOARD_ROWS, BOARD_COLS,
    TRAPS, new_game,
)
from jungle_king.engine.initial_setup import load_initial_board


# =============================================================================
# Strategies
# =============================================================================

@st.composite
def valid_position(draw) -> tuple:
    row = draw(st.integers(min_value=0, max_value=BOARD_ROWS - 1))
    col = draw(st.integers(min_value=0, max_value=BOARD_COLS - 1))
    return (row, col)


@st.composite
def any_position(draw) -> tuple:
    """Positions on and just around the board"""
    row = draw(st.integers(min_value=-2, max_value=BOARD_ROWS + 1))
    col = draw(st.integers(min_value=-2, max_value=BOARD_COLS + 1))
    return (row, col)


def check_board_consistency(board: Board):
    """Cells and pieces point at each other, and nobody shares a cell"""
    seen = set()
    for player in Player:
        for piece in board.pieces_of(player):
            assert not piece.captured
            assert piece.position is not None
            assert piece.position not in seen
            seen.add(piece.position)
            assert board.piece_at(*piece.position) is piece

    occupied = {
        (r, c) for r in range(BOARD_ROWS) for c in range(BOARD_COLS)
        if board.piece_at(r, c) is not None
    }
    assert occupied == seen


def check_weakness(board: Board):
    for player in Player:
        for piece in board.pieces_of(player):
            if piece.weakened:
                assert piece.position in TRAPS[player.opponent]


# =============================================================================
# Invariant tests
# =============================================================================

class TestPropertyBasedRules:

    @given(any_position())
    def test_position_validity(self, position):
        board = Board()
        expected = 0 <= position[0] < BOARD_ROWS and 0 <= position[1] < BOARD_COLS
        assert board.is_valid_position(position) == expected

    @given(st.sampled_from(list(PieceType)), st.sampled_from(list(Player)),
           valid_position(), any_position())
    @settings(max_examples=300)
    def test_lone_piece_moves_are_atomic(self, piece_type, owner, start, target):
        board = Board()
        piece = Piece(piece_type, owner)
        if not board.place_piece(piece, *start):
            return
        before = board.to_dict()

        outcome = Rules.attempt_move(board, piece, *target)

        if outcome.accepted:
            assert piece.position == outcome.landing
            assert outcome.captured is None
        else:
            assert board.to_dict() == before
            assert piece.position == start
        check_board_consistency(board)

    @given(st.integers(min_value=0, max_value=10_000))
    @settings(max_examples=30, deadline=None)
    def test_every_legal_move_is_playable(self, seed):
        rng = random.Random(seed)
        state = new_game()

        for _ in range(40):
            moves = state.get_legal_moves()
            if not moves:
                break
            move = rng.choice(moves)
            pieces_before = sum(len(state.board.pieces_of(p)) for p in Player)

            result = state.submit_move(*move.from_pos, *move.to_pos)

            assert result.success, result.message
            assert result.landing == move.to_pos
            pieces_after = sum(len(state.board.pieces_of(p)) for p in Player)
            expected_loss = 1 if result.outcome == OutcomeKind.MOVED_WITH_CAPTURE else 0
            assert pieces_before - pieces_after == expected_loss
            check_board_consistency(state.board)
            check_weakness(state.board)
            if state.game_over:
                break

    @given(st.integers(min_value=0, max_value=10_000), any_position(), any_position())
    @settings(max_examples=100, deadline=None)
    def test_rejected_submissions_change_nothing(self, seed, source, target):
        state = new_game()
        rng = random.Random(seed)
        for _ in range(rng.randint(0, 10)):
            moves = state.get_legal_moves()
            if not moves or state.game_over:
                break
            move = rng.choice(moves)
            state.submit_move(*move.from_pos, *move.to_pos)

        before = state.to_dict()
        player_before = state.current_player

        result = state.submit_move(*source, *target)

        if not result.success:
            after = state.to_dict()
            assert after["board"] == before["board"]
            assert state.current_player == player_before
            assert after["move_count"] == before["move_count"]


# =============================================================================
# Stateful test
# =============================================================================

class JungleKingMachine(RuleBasedStateMachine):
    """Plays random legal moves and checks the board after every step"""

    @initialize()
    def setup(self):
        self.state = new_game()

    @rule(data=st.data())
    def play_legal_move(self, data):
        moves = self.state.get_legal_moves()
        if not moves:
            return
        move = data.draw(st.sampled_from(moves))
        mover = self.state.current_player

        result = self.state.submit_move(*move.from_pos, *move.to_pos)

        assert result.success
        if self.state.game_over:
            assert self.state.winner == mover
        elif self.state.board.has_pieces_remaining(mover.opponent):
            assert self.state.current_player == mover.opponent
        else:
            assert self.state.current_player == mover

    @rule(source=any_position(), destination=any_position())
    def play_anything(self, source, destination):
        before = self.state.board.to_dict()
        result = self.state.submit_move(*source, *destination)
        if not result.success:
            assert self.state.board.to_dict() == before

    @invariant()
    def board_is_consistent(self):
        check_board_consistency(self.state.board)

    @invariant()
    def only_trapped_pieces_are_weak(self):
        check_weakness(self.state.board)

    @invariant()
    def at_most_eight_pieces_each(self):
        for player in Player:
            assert len(self.state.board.pieces_of(player)) <= 8


TestJungleKingMachine = JungleKingMachine.TestCase
TestJungleKingMachine.settings = settings(max_examples=30, stateful_step_count=40, deadline=None)


def test_initial_board_is_consistent():
    board = load_initial_board()
    check_board_consistency(board)
    assert all(not piece.weakened for p in Player for piece in board.pieces_of(p))
