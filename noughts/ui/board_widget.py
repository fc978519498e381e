from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Mark, cell_to_index

X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"


class BoardWidget(QWidget):
    """
    draws the controller's board and turns clicks into cell indices
    """
    cell_clicked = Signal(int)  # row-major index 0-8

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller  # read-only use: board + accepting_input
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        controller.state_changed.connect(self.update)

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centered in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw grid and X/O marks; dim the board while the computer thinks
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        ox, oy, side = self._geometry()
        painter.fillRect(self.rect(), QColor("#333"))
        cell_size = side / BOARD_SIZE
        # grid lines
        painter.setPen(QPen(QColor("#555"), 2))
        for i in range(1, BOARD_SIZE):
            x = ox + i*cell_size
            painter.drawLine(int(x), int(oy), int(x), int(oy+side))
            y = oy + i*cell_size
            painter.drawLine(int(ox), int(y), int(ox+side), int(y))
        if self.controller.opponent_pending:
            painter.setOpacity(0.8)
        # marks
        for index, sym in enumerate(self.controller.board):
            if not sym:
                continue
            r, c = divmod(index, BOARD_SIZE)
            cx = ox + c*cell_size + cell_size/2
            cy = oy + r*cell_size + cell_size/2
            rad = cell_size/2 * 0.7
            if sym == Mark.X:
                painter.setPen(QPen(QColor(X_COLOR), 4))
                # two crossing lines
                painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
            else:
                painter.setPen(QPen(QColor(O_COLOR), 4))
                painter.drawEllipse(QPointF(cx, cy), rad, rad)
        painter.end()

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None if outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox) // cell); row = int((y-oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return cell_to_index(row, col)

    def mouseReleaseEvent(self, event):
        if not self.controller.accepting_input():
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # window forwards to controller
