"""QPainter drawing surface and the tree canvas widget."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath
from PySide6.QtWidgets import QSizePolicy, QWidget

from xmastree_core import ParameterStore
from xmastree_renderer import CanvasSize, Color, Point, draw


def _qcolor(color: Color) -> QColor:
    return QColor.fromRgbF(color.red, color.green, color.blue, color.alpha)


class QPainterSurface:
    def __init__(self, painter: QPainter) -> None:
        self.painter = painter

    def fill_rect(self, top_left: Point, width: float, height: float, color: Color) -> None:
        rect = QRectF(top_left.x, top_left.y, width, height).normalized()
        self.painter.fillRect(rect, _qcolor(color))

    def fill_path(self, contours: Sequence[Sequence[Point]], color: Color) -> None:
        path = QPainterPath()
        # Layers overlap and share a winding direction; non-zero fill keeps overlaps solid.
        path.setFillRule(Qt.FillRule.WindingFill)
        for contour in contours:
            if not contour:
                continue
            path.moveTo(QPointF(contour[0].x, contour[0].y))
            for p in contour[1:]:
                path.lineTo(QPointF(p.x, p.y))
            path.closeSubpath()
        self.painter.fillPath(path, QBrush(_qcolor(color)))

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(_qcolor(color)))
        self.painter.drawEllipse(QPointF(center.x, center.y), radius, radius)


class TreeCanvas(QWidget):
    """Paints the current store snapshot at the widget's measured size."""

    def __init__(self, store: ParameterStore, height: int = 400, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.setFixedHeight(height)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

    def canvas_size(self) -> CanvasSize:
        return CanvasSize(float(self.width()), float(self.height()))

    def paintEvent(self, event) -> None:  # noqa: N802 - Qt override
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            draw(self.store.snapshot, self.canvas_size(), QPainterSurface(painter))
        finally:
            painter.end()
