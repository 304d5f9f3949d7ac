"""
フレームバッファを表示するウィジェットと、その描画アダプタ。
"""
from typing import Optional

from PySide6.QtWidgets import QWidget, QApplication
from PySide6.QtCore import QSize
from PySide6.QtGui import QPainter, QColor

from retro_chip8.core.adapters import FrameSink, ToneSink
from retro_chip8.arch.chip8.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from retro_chip8.arch.chip8.state import Framebuffer
from retro_chip8.config.models import DisplayConfig

# @intent:responsibility 64x32のモノクロ画面を、ウィジェットサイズに合わせて拡大表示します。
class DisplayView(QWidget):
    def __init__(self, display_config: Optional[DisplayConfig] = None, parent=None):
        super().__init__(parent)
        self._config = display_config or DisplayConfig()
        self._foreground = QColor(self._config.foreground)
        self._background = QColor(self._config.background)
        self._width = SCREEN_WIDTH
        self._height = SCREEN_HEIGHT
        self._pixels = bytes(SCREEN_WIDTH * SCREEN_HEIGHT)

    def sizeHint(self) -> QSize:
        return QSize(self._width * self._config.scale, self._height * self._config.scale)

    # @intent:responsibility 表示用にピクセル列のコピーを保持し、再描画を予約します。
    def show_frame(self, framebuffer: Framebuffer) -> None:
        self._width = framebuffer.width
        self._height = framebuffer.height
        self._pixels = framebuffer.copy_pixels()
        self.update()

    def is_lit(self, x: int, y: int) -> bool:
        return self._pixels[y * self._width + x] != 0

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)
        cell_w = self.width() / self._width
        cell_h = self.height() / self._height
        for y in range(self._height):
            for x in range(self._width):
                if self.is_lit(x, y):
                    painter.fillRect(int(x * cell_w), int(y * cell_h),
                                     int((x + 1) * cell_w) - int(x * cell_w),
                                     int((y + 1) * cell_h) - int(y * cell_h),
                                     self._foreground)
        painter.end()

# @intent:responsibility エンジンからの描画要求をDisplayViewへ中継します。
class QtFrameSink(FrameSink):
    def __init__(self, view: DisplayView):
        self._view = view

    def present(self, framebuffer: Framebuffer) -> None:
        self._view.show_frame(framebuffer)

# @intent:responsibility トーンの立ち上がりでビープ音を鳴らします。
class QtToneSink(ToneSink):
    def __init__(self):
        self._on = False

    def set_tone(self, on: bool) -> None:
        if on and not self._on:
            QApplication.beep()
        self._on = on
