import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication
from PySide6.QtTest import QTest

from noughts.game_logic import EMPTY, Mark, Mode, Status
from noughts.session import GameController
from noughts.ui.main_window import TicTacToeWindow

APP = QApplication.instance() or QApplication([])

SETTLE_MS = 200


class TestGuiHeadless(unittest.TestCase):
    def setUp(self) -> None:
        self.controller = GameController(mode=Mode.HUMAN_VS_HUMAN, reply_delay_ms=20)
        self.window = TicTacToeWindow(self.controller, popup_delay_ms=20)
        self.window.resize(300, 400)
        self.window.show()

    def tearDown(self) -> None:
        self.window.close()
        self.window.deleteLater()
        QTest.qWait(50)

    def test_status_and_mode_labels_follow_controller(self) -> None:
        self.assertEqual(self.window.message_label.text(), "Next player: X")
        self.assertEqual(self.window.mode_button.text(), "Playing vs Human")
        self.window.board_widget.cell_clicked.emit(4)
        self.assertEqual(self.controller.board[4], Mark.X)
        self.assertEqual(self.window.message_label.text(), "Next player: O")

    def test_mode_button_toggles_and_resets(self) -> None:
        self.controller.submit_move(0)
        self.window.mode_button.click()
        self.assertIs(self.controller.mode, Mode.HUMAN_VS_OPPONENT)
        self.assertEqual(self.controller.board, [EMPTY] * 9)
        self.assertEqual(self.window.mode_button.text(), "Playing vs Computer")

    def test_reset_button(self) -> None:
        self.controller.submit_move(0)
        self.window.reset_button.click()
        self.assertEqual(self.controller.board, [EMPTY] * 9)

    def test_index_at_maps_cells(self) -> None:
        widget = self.window.board_widget
        ox, oy, side = widget._geometry()
        cell = side / 3
        self.assertEqual(widget.index_at(ox + cell / 2, oy + cell / 2), 0)
        self.assertEqual(widget.index_at(ox + 2.5 * cell, oy + 1.5 * cell), 5)
        self.assertIsNone(widget.index_at(ox - 1, oy - 1))

    def test_result_popup_after_win_and_close_starts_new_game(self) -> None:
        for index in (0, 4, 1, 3, 2):
            self.controller.submit_move(index)
        self.assertEqual(self.window.message_label.text(), "Winner: X")
        self.assertIsNone(self.window.result_popup)

        QTest.qWait(SETTLE_MS)
        popup = self.window.result_popup
        self.assertIsNotNone(popup)
        self.assertEqual(popup.text(), "Player X Wins!")

        popup.done(0)
        self.assertIsNone(self.window.result_popup)
        self.assertEqual(self.controller.status, Status.IN_PROGRESS)
        self.assertEqual(self.controller.board, [EMPTY] * 9)

    def test_popup_skipped_if_reset_first(self) -> None:
        for index in (0, 4, 1, 3, 2):
            self.controller.submit_move(index)
        self.controller.reset()
        QTest.qWait(SETTLE_MS)
        self.assertIsNone(self.window.result_popup)


if __name__ == "__main__":
    unittest.main()
