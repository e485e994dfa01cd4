"""
Display View モジュール。

フレームバッファの 64x32 ピクセルを、ウィジェットの大きさに合わせた整数倍で描画します。
"""
from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from retro_chip8.config.models import DisplayConfig
from retro_chip8.devices.framebuffer import Framebuffer

# @intent:responsibility フレームバッファを読み出して画面に表示するウィジェット。
class DisplayView(QWidget):
    def __init__(self, framebuffer: Framebuffer, config: DisplayConfig, parent=None):
        super().__init__(parent)
        self._framebuffer = framebuffer
        self._scale = config.scale
        self._foreground = QColor(config.foreground)
        self._background = QColor(config.background)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    def sizeHint(self) -> QSize:
        return QSize(self._framebuffer.width * self._scale, self._framebuffer.height * self._scale)

    # @intent:responsibility 整数倍スケールで中央寄せし、点灯ピクセルのみを塗ります。
    def paintEvent(self, event: QPaintEvent):
        fb = self._framebuffer
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)

        cell = max(1, min(self.width() // fb.width, self.height() // fb.height))
        offset_x = (self.width() - cell * fb.width) // 2
        offset_y = (self.height() - cell * fb.height) // 2

        for y, row in enumerate(fb.rows()):
            for x, lit in enumerate(row):
                if lit:
                    painter.fillRect(offset_x + x * cell, offset_y + y * cell, cell, cell, self._foreground)
        painter.end()
