"""PyQt6 GUI frontend — a painted board driven by mouse drags."""

from __future__ import annotations

import sys

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QApplication, QLabel, QMainWindow, QVBoxLayout, QWidget

from backend.engine.levelset import LevelSet
from frontend.common.view import BoardLayout, Colour, draw_level, status_line

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
_BASE = "#000000"
_TEXT = "#cdd6f4"
_OVERLAY0 = "#6c7086"
_GREEN = "#a6e3a1"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_HINT = "Drag pieces     U  undo     R  reset     N/P  next/prev     Esc  quit"

LAYOUT = BoardLayout()


# ---------------------------------------------------------------------------
# Canvas adapter
# ---------------------------------------------------------------------------
class _PainterCanvas:
    def __init__(self, painter: QPainter, layout: BoardLayout) -> None:
        self._painter = painter
        self._layout = layout

    def fill(self, x: float, y: float, w: float, h: float, colour: Colour) -> None:
        sx, sy = self._layout.to_screen(x, y)
        tile = self._layout.tile
        rect = QRectF(sx + 2, sy + 2, w * tile - 4, h * tile - 4)
        self._painter.setBrush(QColor(*colour))
        self._painter.drawRoundedRect(rect, 6, 6)


# ---------------------------------------------------------------------------
# Board widget
# ---------------------------------------------------------------------------
class _BoardWidget(QWidget):
    """Paints the current level and turns mouse events into drags."""

    def __init__(self, levels: LevelSet, on_change) -> None:
        super().__init__()
        self._levels = levels
        self._on_change = on_change
        self.setFixedSize(LAYOUT.window, LAYOUT.window)
        self.setMouseTracking(True)

    def _board_pos(self, event: QMouseEvent) -> tuple[float, float]:
        pos: QPointF = event.position()
        return LAYOUT.to_board(pos.x(), pos.y())

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(_BASE))
        painter.setPen(QPen(QColor(_BASE), 2))
        draw_level(self._levels.current(), _PainterCanvas(painter, LAYOUT))
        painter.end()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        self._levels.current().begin_drag(*self._board_pos(event))
        self.update()

    def mouseMoveEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        game = self._levels.current()
        game.point(*self._board_pos(event))
        if game.dragging:
            self.update()

    def mouseReleaseEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        self._levels.current().commit()
        self._on_change()


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------
class _MainWindow(QMainWindow):
    def __init__(self, levels: LevelSet) -> None:
        super().__init__()
        self._levels = levels

        self.setWindowTitle("Unblock Me!")
        self.setStyleSheet(_GLOBAL_CSS)

        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setSpacing(6)
        root.setContentsMargins(10, 10, 10, 10)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 15, QFont.Weight.Bold))
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        self._board = _BoardWidget(levels, self._after_move)
        root.addWidget(self._board, alignment=Qt.AlignmentFlag.AlignCenter)

        self._hint = QLabel(_HINT)
        self._hint.setFont(QFont("Helvetica", 11))
        self._hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._hint)

        self.setCentralWidget(page)
        self._sync()

    # -- helpers ---

    def _sync(self, message: str = "") -> None:
        game = self._levels.current()
        self._stats.setText(status_line(self._levels.index, len(self._levels), game))
        if message:
            self._hint.setText(message)
            self._hint.setStyleSheet(f"color:{_GREEN};font-weight:bold;")
        else:
            self._hint.setText(_HINT)
            self._hint.setStyleSheet(f"color:{_OVERLAY0};")
        self._board.update()

    def _after_move(self) -> None:
        solved = self._levels.index + 1
        if self._levels.advance_if_solved():
            self._sync(f"★  Level {solved} solved!  ★")
        else:
            self._sync()

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        game = self._levels.current()

        if key in (Qt.Key.Key_U, Qt.Key.Key_Backspace):
            game.undo()
        elif key == Qt.Key.Key_R:
            game.reset()
        elif key == Qt.Key.Key_N:
            self._levels.next()
        elif key == Qt.Key.Key_P:
            self._levels.previous()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
            return
        else:
            super().keyPressEvent(event)
            return
        self._sync()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(levels: LevelSet) -> None:
    """Launch the PyQt6 GUI on the current level."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(levels)
    window.show()
    qapp.exec()
