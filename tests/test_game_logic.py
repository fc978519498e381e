import itertools
import unittest

from noughts.game_logic import (
    EMPTY, LINES, Mark, Status,
    apply_move, cell_to_index, detect_winner, empty_cells, evaluate,
    index_to_cell, is_draw, is_legal_move, new_board,
)

X, O, _ = Mark.X, Mark.O, EMPTY

FULL_NO_LINE = [X, O, X,
                X, O, O,
                O, X, X]


class TestDetectWinner(unittest.TestCase):
    def test_every_line_detected_for_both_marks(self) -> None:
        for mark in (X, O):
            for line in LINES:
                board = new_board()
                for i in line:
                    board[i] = mark
                with self.subTest(mark=mark, line=line):
                    self.assertEqual(detect_winner(board), mark)

    def test_no_winner_cases(self) -> None:
        self.assertIsNone(detect_winner(new_board()))
        self.assertIsNone(detect_winner([X, X, _, O, O, _, _, _, _]))
        self.assertIsNone(detect_winner(FULL_NO_LINE))

    def test_plain_strings_are_accepted(self) -> None:
        board = ["O", "X", "", "X", "O", "", "", "", "O"]
        self.assertEqual(detect_winner(board), Mark.O)

    def test_lines_scanned_in_fixed_order(self) -> None:
        # unreachable in real play, but the top row is checked first
        board = [X, X, X,
                 _, _, _,
                 O, O, O]
        self.assertEqual(detect_winner(board), X)
        board = [O, O, O,
                 _, _, _,
                 X, X, X]
        self.assertEqual(detect_winner(board), O)


class TestDraw(unittest.TestCase):
    def test_full_board_without_line_is_draw(self) -> None:
        self.assertTrue(is_draw(FULL_NO_LINE))

    def test_partial_board_is_not_draw(self) -> None:
        self.assertFalse(is_draw(new_board()))
        board = list(FULL_NO_LINE)
        board[8] = EMPTY
        self.assertFalse(is_draw(board))

    def test_full_board_with_winner_is_not_draw(self) -> None:
        board = [X, X, X,
                 O, O, X,
                 X, O, O]
        self.assertEqual(detect_winner(board), X)
        self.assertFalse(is_draw(board))

    def test_draw_and_winner_never_both(self) -> None:
        # every full board over {X, O}
        for cells in itertools.product((X, O), repeat=9):
            board = list(cells)
            self.assertFalse(is_draw(board) and detect_winner(board) is not None)


class TestMoves(unittest.TestCase):
    def test_legal_move_rules(self) -> None:
        board = [X, _, _, _, _, _, _, _, _]
        self.assertTrue(is_legal_move(board, 1, Status.IN_PROGRESS))
        self.assertFalse(is_legal_move(board, 0, Status.IN_PROGRESS))
        self.assertFalse(is_legal_move(board, -1, Status.IN_PROGRESS))
        self.assertFalse(is_legal_move(board, 9, Status.IN_PROGRESS))
        self.assertFalse(is_legal_move(board, 1, Status.WON))
        self.assertFalse(is_legal_move(board, 1, Status.DRAW))

    def test_non_integer_index_rejected(self) -> None:
        board = new_board()
        self.assertFalse(is_legal_move(board, "1", Status.IN_PROGRESS))
        self.assertFalse(is_legal_move(board, None, Status.IN_PROGRESS))
        self.assertFalse(is_legal_move(board, True, Status.IN_PROGRESS))

    def test_apply_move_returns_copy(self) -> None:
        board = [X, _, _, _, O, _, _, _, _]
        before = list(board)
        after = apply_move(board, 8, X)
        self.assertEqual(board, before)
        self.assertIsNot(after, board)
        self.assertEqual(after[8], X)
        self.assertEqual(after[:8], before[:8])

    def test_apply_move_accepts_tuples(self) -> None:
        self.assertEqual(apply_move(tuple(new_board()), 4, O)[4], O)

    def test_empty_cells_ascending(self) -> None:
        self.assertEqual(empty_cells([X, _, O, _, _, X, _, O, _]), [1, 3, 4, 6, 8])
        self.assertEqual(empty_cells(FULL_NO_LINE), [])


class TestEvaluate(unittest.TestCase):
    def test_outcomes(self) -> None:
        self.assertEqual(evaluate(new_board()), (Status.IN_PROGRESS, None))
        self.assertEqual(evaluate(FULL_NO_LINE), (Status.DRAW, None))
        self.assertEqual(evaluate([O, O, O, X, X, _, X, _, _]), (Status.WON, O))

    def test_cell_index_mapping(self) -> None:
        self.assertEqual(index_to_cell(5), (1, 2))
        self.assertEqual(cell_to_index(2, 1), 7)


if __name__ == "__main__":
    unittest.main()
