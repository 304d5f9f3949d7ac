# tests/ui/test_keymap.py
"""
キー割り当てと入力アダプタの単体テスト（Qtのイベントループは不要）。
"""
import pytest
from PySide6.QtCore import Qt

from retro_chip8.common.types import InputEvent
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig, DEFAULT_KEYMAP
from retro_chip8.core.engine import ExecutionEngine
from retro_chip8.ui.keymap import resolve_keymap
from retro_chip8.ui.input_source import QtInputSource


def test_resolve_default_keymap():
    keymap = resolve_keymap(DEFAULT_KEYMAP)
    assert keymap[int(Qt.Key.Key_1)] == 0x1
    assert keymap[int(Qt.Key.Key_4)] == 0xC
    assert keymap[int(Qt.Key.Key_X)] == 0x0
    assert keymap[int(Qt.Key.Key_V)] == 0xF
    assert keymap[int(Qt.Key.Key_Left)] == 0x4
    assert keymap[int(Qt.Key.Key_Down)] == 0x9


def test_resolve_is_case_insensitive():
    assert resolve_keymap({"space": 0x5}) == {int(Qt.Key.Key_Space): 0x5}


def test_resolve_unknown_key_name():
    with pytest.raises(ValueError, match="Unknown key name"):
        resolve_keymap({"NoSuchKey": 0x1})


class TestQtInputSource:
    def test_key_events_are_queued(self):
        source = QtInputSource({65: 0x7})
        assert source.handle_key_press(65)
        assert source.handle_key_release(65)
        assert source.poll_events() == [InputEvent.key_down(0x7), InputEvent.key_up(0x7)]
        assert source.poll_events() == []

    def test_unmapped_and_auto_repeat_keys(self):
        source = QtInputSource({65: 0x7})
        assert not source.handle_key_press(66)
        assert source.handle_key_press(65, auto_repeat=True)
        assert source.poll_events() == []

    def test_quit(self):
        source = QtInputSource({})
        source.request_quit()
        assert source.poll_events() == [InputEvent.quit()]


# @intent:test_case_alias 既定の割り当てで Q と Left は同じキー4を指すため、片方を離しても押下が続くことを検証します。
def test_aliased_keys_hold_until_both_released():
    cpu, _ = SystemBuilder().build_system(MachineConfig())
    source = QtInputSource(resolve_keymap(DEFAULT_KEYMAP))
    engine = ExecutionEngine(cpu, input_source=source)
    keypad = cpu.get_state().keypad
    source.handle_key_press(int(Qt.Key.Key_Q))
    source.handle_key_press(int(Qt.Key.Key_Left))
    source.handle_key_release(int(Qt.Key.Key_Q))
    engine.poll_input()
    assert keypad.is_pressed(0x4)
    source.handle_key_release(int(Qt.Key.Key_Left))
    engine.poll_input()
    assert not keypad.is_pressed(0x4)
