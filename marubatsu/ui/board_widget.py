from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE
from ..presenter import MARU_GLYPH, BATSU_GLYPH

BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
MARU_COLOR = "#ff8a8a"
BATSU_COLOR = "#8acaff"
GRID_PEN_WIDTH = 2
MARK_PEN_WIDTH = 4
MARK_SCALE = 0.7    # mark radius relative to half a cell


class BoardWidget(QWidget):
    """
    nine clickable cells drawn as one widget
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._glyphs = [['' for _ in range(BOARD_SIZE)]
                        for _ in range(BOARD_SIZE)]

    def set_glyph(self, row, col, glyph):
        self._glyphs[row][col] = glyph
        self.update()

    def glyph(self, row, col):
        return self._glyphs[row][col]

    def clear(self):
        self._glyphs = [['' for _ in range(BOARD_SIZE)]
                        for _ in range(BOARD_SIZE)]
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _grid_geometry(self):
        # square grid centred in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None outside the grid
        """
        ox, oy, side = self._grid_geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1))
        col = max(0, min(col, BOARD_SIZE - 1))
        return row, col

    def paintEvent(self, event):
        """
        draw grid and O/X marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._grid_geometry()
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), GRID_PEN_WIDTH))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # marks
            for r in range(BOARD_SIZE):
                for c in range(BOARD_SIZE):
                    sym = self._glyphs[r][c]
                    if not sym: continue
                    cx = offset_x + c*cell_size + cell_size/2
                    cy = offset_y + r*cell_size + cell_size/2
                    rad = cell_size/2 * MARK_SCALE
                    if sym == BATSU_GLYPH:
                        painter.setPen(QPen(QColor(BATSU_COLOR), MARK_PEN_WIDTH))
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    elif sym == MARU_GLYPH:
                        painter.setPen(QPen(QColor(MARU_COLOR), MARK_PEN_WIDTH))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        map click to a board cell and emit
        """
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is None:
            return
        self.cell_clicked.emit(*cell)
