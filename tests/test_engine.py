import random

import pytest

from app.core.exceptions import BoardFull, BoardSizeMismatch, UnsupportedGeometry
from app.core.game_config import CENTER_CELLS, Geometry, Mark, WIN_PATTERNS, get_board_size
from app.services.board import (
    empty_cells, index_to_position, is_full, place, position_to_index, render
)
from app.services.heuristic import find_winning_move, heuristic_move
from app.services.minimax import best_move, minimax, score_moves
from app.services.outcome_evaluator import OutcomeKind, evaluate, has_won, winning_line
from conftest import StubRandom, make_board

A, B = Mark.A, Mark.B


def random_board(rng, geometry):
    return [rng.choice([None, A, B]) for _ in range(get_board_size(geometry))]


def opponent_never_wins(board, to_move, ai):
    """Follow every opponent reply while ai plays best_move."""
    opponent = ai.opposite()
    if has_won(board, opponent, Geometry.CLASSIC):
        return False
    if has_won(board, ai, Geometry.CLASSIC) or is_full(board):
        return True
    if to_move == ai:
        move = best_move(board, Geometry.CLASSIC, ai)
        return opponent_never_wins(place(board, move, ai), opponent, ai)
    return all(
        opponent_never_wins(place(board, cell, opponent), ai, ai)
        for cell in empty_cells(board)
    )


class TestBoard:

    def test_empty_cells_ascending_and_idempotent(self):
        board = make_board(a=(4, 0), b=(8,))
        assert empty_cells(board) == [1, 2, 3, 5, 6, 7]
        assert empty_cells(board) == empty_cells(board)

    def test_positions(self):
        assert index_to_position(5, Geometry.CLASSIC) == (1, 2)
        assert index_to_position(14, Geometry.RELAX) == (3, 2)
        assert position_to_index(3, 2, Geometry.RELAX) == 14

    def test_render(self):
        assert render(make_board(a=(0,), b=(4,)), Geometry.CLASSIC) == "A../.B./..."

    def test_place_returns_copy(self):
        board = make_board()
        placed = place(board, 4, A)
        assert placed[4] == A
        assert board[4] is None


class TestOutcomeEvaluator:

    def test_row_win(self):
        board = make_board(a=(3, 4, 5), b=(0, 8))
        outcome = evaluate(board, A, Geometry.CLASSIC)
        assert outcome.kind == OutcomeKind.WIN
        assert outcome.winner == A
        assert outcome.line == (3, 4, 5)

    def test_first_line_in_definition_order(self):
        # Row 0 and column 0 are both complete, the row comes first
        board = make_board(a=(0, 1, 2, 3, 6), b=(4, 5, 7))
        assert winning_line(board, A, Geometry.CLASSIC) == (0, 1, 2)

    def test_relax_diagonal(self):
        board = make_board(16, a=(3, 6, 9, 12), b=(0, 1, 2))
        assert winning_line(board, A, Geometry.RELAX) == (3, 6, 9, 12)
        assert not has_won(board, B, Geometry.RELAX)

    def test_three_in_a_row_does_not_win_relax(self):
        board = make_board(16, a=(0, 1, 2), b=(4, 5))
        assert evaluate(board, A, Geometry.RELAX).kind == OutcomeKind.CONTINUE

    def test_full_board_draw_for_both_marks(self):
        board = make_board(a=(0, 2, 3, 7, 8), b=(1, 4, 5, 6))
        assert evaluate(board, A, Geometry.CLASSIC).kind == OutcomeKind.DRAW
        assert evaluate(board, B, Geometry.CLASSIC).kind == OutcomeKind.DRAW

    def test_win_on_last_cell_beats_draw(self):
        board = make_board(a=(0, 1, 2, 5, 7), b=(3, 4, 6, 8))
        outcome = evaluate(board, A, Geometry.CLASSIC)
        assert outcome.kind == OutcomeKind.WIN
        assert outcome.is_terminal

    def test_continue(self):
        outcome = evaluate(make_board(a=(0,), b=(4,)), B, Geometry.CLASSIC)
        assert outcome.kind == OutcomeKind.CONTINUE
        assert outcome.line is None
        assert not outcome.is_terminal

    def test_board_length_must_match_geometry(self):
        with pytest.raises(BoardSizeMismatch):
            evaluate(make_board(16), A, Geometry.CLASSIC)
        with pytest.raises(BoardSizeMismatch):
            evaluate(make_board(9), A, Geometry.RELAX)

    @pytest.mark.parametrize("geometry", list(Geometry))
    def test_winning_line_consistent_with_has_won(self, geometry):
        rng = random.Random(7)
        for _ in range(300):
            board = random_board(rng, geometry)
            for mark in Mark:
                line = winning_line(board, mark, geometry)
                assert (line is None) == (not has_won(board, mark, geometry))
                if line is not None:
                    assert line in WIN_PATTERNS[geometry]


class TestMinimax:

    def test_empty_board_returns_an_optimal_move(self):
        board = make_board()
        scores = score_moves(board, Geometry.CLASSIC, B)
        move = best_move(board, Geometry.CLASSIC, B)

        assert move in range(9)
        assert scores[move] == max(scores.values())
        # Every corner is equally good under optimal play
        assert len({scores[corner] for corner in (0, 2, 6, 8)}) == 1

    def test_takes_the_only_winning_completion(self):
        board = make_board(a=(0, 1), b=(4,))
        assert best_move(board, Geometry.CLASSIC, A) == 2

    def test_blocks_column(self):
        board = make_board(a=(0,), b=(2, 5))
        assert best_move(board, Geometry.CLASSIC, A) == 8

    def test_center_answer_to_corner(self):
        board = make_board(a=(0,))
        assert best_move(board, Geometry.CLASSIC, B) == 4

    def test_prefers_faster_win(self):
        # Winning now at 2 beats any slower forced win
        board = make_board(a=(0, 1, 6), b=(3, 4, 8))
        assert minimax(place(board, 2, A), 0, False, A, Geometry.CLASSIC) == 10
        assert best_move(board, Geometry.CLASSIC, A) == 2

    def test_does_not_mutate_board(self):
        board = make_board(a=(0, 8), b=(4,))
        before = list(board)
        best_move(board, Geometry.CLASSIC, B)
        score_moves(board, Geometry.CLASSIC, B)
        assert board == before

    def test_never_loses_moving_second(self):
        assert opponent_never_wins(make_board(), A, B)

    def test_never_loses_moving_first(self):
        assert opponent_never_wins(make_board(), B, B)

    def test_full_board_is_a_precondition_failure(self):
        board = make_board(a=(0, 2, 3, 7, 8), b=(1, 4, 5, 6))
        with pytest.raises(BoardFull):
            best_move(board, Geometry.CLASSIC, B)

    def test_relax_is_not_searched(self):
        with pytest.raises(UnsupportedGeometry):
            best_move(make_board(16), Geometry.RELAX, B)

    def test_relax_score_is_not_searched(self):
        with pytest.raises(UnsupportedGeometry):
            minimax(make_board(16), 0, True, B, Geometry.RELAX)


class TestHeuristic:

    def test_win_precedes_center_preference(self):
        board = make_board(16, a=(0, 4, 8), b=(1, 2, 7))
        assert heuristic_move(board, Geometry.RELAX, A, StubRandom(0.0)) == 12

    def test_win_precedes_block(self):
        board = make_board(16, a=(0, 4, 8), b=(1, 5, 9))
        assert heuristic_move(board, Geometry.RELAX, A) == 12

    def test_blocks_opponent(self):
        board = make_board(16, a=(0, 5), b=(3, 7, 11))
        assert heuristic_move(board, Geometry.RELAX, A) == 15

    def test_blocks_column_on_classic(self):
        board = make_board(b=(2, 5))
        assert heuristic_move(board, Geometry.CLASSIC, A) == 8

    def test_prefers_free_center(self):
        rng = random.Random(3)
        board = make_board(16, a=(5,), b=(0,))
        for _ in range(20):
            assert heuristic_move(board, Geometry.RELAX, B, rng) in (6, 9, 10)

    def test_random_when_center_taken(self):
        board = make_board(16, a=(5, 10), b=(6, 9))
        move = heuristic_move(board, Geometry.RELAX, B, StubRandom(0.0))
        assert move == 15
        assert move not in CENTER_CELLS[Geometry.RELAX]

    def test_find_winning_move_none(self):
        assert find_winning_move(make_board(a=(0,)), A, Geometry.CLASSIC) is None

    def test_full_board(self):
        board = [A if i % 2 else B for i in range(16)]
        with pytest.raises(BoardFull):
            heuristic_move(board, Geometry.RELAX, A)
