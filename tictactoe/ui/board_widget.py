from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..board import Coordinate, Symbol, grid_coordinates
from ..config import (BOARD_BACKGROUND, GRID_LINE_COLOR, GRID_SIZE,
                      O_COLOR, X_COLOR)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    column 1 is on the left, row 1 at the bottom
    """
    cell_clicked = Signal(int, int)  # emits column, row on click

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def sizeHint(self):
        return QSize(300, 300)

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # side of the square board and its top-left offset
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w - side) / 2, (h - side) / 2

    def cell_at(self, x, y):
        """
        map widget pixel position to a board Coordinate, None if outside
        """
        side, ox, oy = self._geometry()
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / GRID_SIZE
        if cell <= 0:
            return None
        column = int((x - ox) // cell) + 1
        row = GRID_SIZE - int((y - oy) // cell)
        # clamp to valid range
        column = max(1, min(column, GRID_SIZE)); row = max(1, min(row, GRID_SIZE))
        return Coordinate(column, row)

    def paintEvent(self, event):
        """
        draw grid and X/O marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, offset_x, offset_y = self._geometry()
            # background
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND))
            cell_size = side / GRID_SIZE
            # grid lines
            painter.setPen(QPen(QColor(GRID_LINE_COLOR), 2))
            for i in range(1, GRID_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for coord in grid_coordinates():
                sym = self.session.mark_at(coord)
                if sym is None: continue
                cx = offset_x + (coord.column - 1)*cell_size + cell_size/2
                cy = offset_y + (GRID_SIZE - coord.row)*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if sym is Symbol.X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        pos = event.position()
        coord = self.cell_at(pos.x(), pos.y())
        if coord is None:
            return
        self.cell_clicked.emit(coord.column, coord.row)  # notify main window
