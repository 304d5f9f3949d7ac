"""
Qtのキーイベントをキューに溜め、エンジンのポーリングに応じて払い出す入力アダプタ。
"""
from typing import Dict, List

from retro_chip8.common.types import InputEvent
from retro_chip8.core.adapters import InputSource

# @intent:responsibility ウィジェットから届くキーイベントを、エンジンが消費するInputEventに変換します。
class QtInputSource(InputSource):
    def __init__(self, keymap: Dict[int, int]):
        self._keymap = keymap
        self._queue: List[InputEvent] = []

    # @intent:post-condition 割り当てのあるキーならTrueを返します（ウィジェットはイベントを消費済みとして扱えます）。
    def handle_key_press(self, key: int, auto_repeat: bool = False) -> bool:
        symbol = self._keymap.get(key)
        if symbol is None:
            return False
        if not auto_repeat:
            self._queue.append(InputEvent.key_down(symbol))
        return True

    def handle_key_release(self, key: int, auto_repeat: bool = False) -> bool:
        symbol = self._keymap.get(key)
        if symbol is None:
            return False
        if not auto_repeat:
            self._queue.append(InputEvent.key_up(symbol))
        return True

    def request_quit(self) -> None:
        self._queue.append(InputEvent.quit())

    def poll_events(self) -> List[InputEvent]:
        events = self._queue
        self._queue = []
        return events
