# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
画面ウィジェットを保持し、Qtのイベントループから実行エンジンを駆動します。
"""
from PySide6.QtWidgets import QMainWindow
from PySide6.QtCore import QTimer, Slot
from PySide6.QtGui import QCloseEvent, QKeyEvent

from retro_chip8.core.engine import ExecutionEngine, EngineState
from .display_view import DisplayView
from .input_source import QtInputSource

# エンジンのtick()を呼び出す間隔 (ms)。フレーム境界の判定はエンジン側で行う
TICK_INTERVAL_MS = 1


# @intent:responsibility 画面ウィジェットとキー入力を束ね、タイマーでエンジンのループを回します。
class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    エンジンの停止 (HALTED) はステータスバーに表示し、ウィンドウを閉じると終了要求を送ります。
    """
    def __init__(self, engine: ExecutionEngine, view: DisplayView, input_source: QtInputSource,
                 title: str = "Retro CHIP-8", parent=None):
        super(MainWindow, self).__init__(parent)
        self.setWindowTitle(title)
        self.engine = engine
        self.view = view
        self.input_source = input_source
        self.setCentralWidget(self.view)
        self.statusBar().showMessage("Running")

        self.timer = QTimer(self)
        self.timer.setInterval(TICK_INTERVAL_MS)
        self.timer.timeout.connect(self._on_tick)

    def start(self) -> None:
        self.engine.start()
        self.timer.start()

    @Slot()
    def _on_tick(self):
        self.engine.tick()
        if self.engine.is_active:
            return
        self.timer.stop()
        if self.engine.state == EngineState.HALTED:
            fault = self.engine.fault
            self.statusBar().showMessage(f"Halted at {fault.pc:04X}: {fault}")
        else:
            self.close()

    def keyPressEvent(self, event: QKeyEvent):
        if not self.input_source.handle_key_press(int(event.key()), event.isAutoRepeat()):
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent):
        if not self.input_source.handle_key_release(int(event.key()), event.isAutoRepeat()):
            super().keyReleaseEvent(event)

    def closeEvent(self, event: QCloseEvent):
        self.timer.stop()
        self.input_source.request_quit()
        self.engine.poll_input()
        event.accept()
