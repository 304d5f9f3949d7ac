# tests/ui/test_display_view.py
"""
画面ウィジェットとメインウィンドウのテスト。オフスクリーンのQtプラットフォームで実行します。
"""
import os
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from retro_chip8.arch.chip8.state import Framebuffer
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig, DisplayConfig
from retro_chip8.core.engine import ExecutionEngine, EngineState
from retro_chip8.ui.display_view import DisplayView, QtFrameSink
from retro_chip8.ui.input_source import QtInputSource
from retro_chip8.ui.main_window import MainWindow


@pytest.fixture(scope="module")
def app():
    return QApplication.instance() or QApplication([])


def test_size_hint_uses_scale(app):
    view = DisplayView(DisplayConfig(scale=5))
    assert view.sizeHint().width() == 320
    assert view.sizeHint().height() == 160


def test_frame_sink_copies_pixels(app):
    view = DisplayView()
    fb = Framebuffer()
    fb.xor_pixel(2, 3)
    QtFrameSink(view).present(fb)
    fb.xor_pixel(2, 3)
    assert view.is_lit(2, 3)
    assert not view.is_lit(0, 0)


def test_render_to_image(app):
    view = DisplayView(DisplayConfig(scale=2, foreground="#FFFFFF", background="#000000"))
    view.resize(128, 64)
    fb = Framebuffer()
    fb.xor_pixel(0, 0)
    view.show_frame(fb)
    image = view.grab().toImage()
    assert image.pixelColor(0, 0).name() == "#ffffff"
    assert image.pixelColor(10, 10).name() == "#000000"


def test_main_window_halts_and_reports(app):
    cpu, bus = SystemBuilder().build_system(MachineConfig())
    bus.load(0x200, 0x00)
    bus.load(0x201, 0xEE)  # RET with an empty stack
    view = DisplayView()
    source = QtInputSource({})
    engine = ExecutionEngine(cpu, frame_sink=QtFrameSink(view), input_source=source)
    window = MainWindow(engine, view, source)
    engine.run_frame()
    window._on_tick()
    assert engine.state == EngineState.HALTED
    assert not window.timer.isActive()
    assert "Halted at 0200" in window.statusBar().currentMessage()


def test_main_window_close_terminates_engine(app):
    cpu, _ = SystemBuilder().build_system(MachineConfig())
    view = DisplayView()
    source = QtInputSource({})
    engine = ExecutionEngine(cpu, input_source=source)
    window = MainWindow(engine, view, source)
    window.show()
    window.start()
    assert window.timer.isActive()
    window.close()
    assert engine.state == EngineState.TERMINATED
    assert not window.timer.isActive()
