# retro_chip8/core/adapters.py
"""
境界アダプタのインターフェース定義。

コアは描画、入力、時刻、音の各デバイスを直接扱わず、以下の抽象インターフェースを通して
のみ外部と通信します。具体的な実装（PySide6ウィジェットなど）はUI層が提供します。
"""
import time
from abc import ABC, abstractmethod
from typing import Any, List

from retro_chip8.common.types import InputEvent

# @intent:responsibility フレームバッファを表示する描画アダプタ。
class FrameSink(ABC):
    # @intent:pre-condition フレームバッファが前回の表示以降に変更された場合にのみ呼び出されます。
    @abstractmethod
    def present(self, framebuffer: Any) -> None:
        pass

# @intent:responsibility 物理入力をキーイベントへ変換する入力アダプタ。
class InputSource(ABC):
    # @intent:post-condition ブロックせずに、前回の呼び出し以降に発生したイベントを返します。
    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        pass

# @intent:responsibility 単調増加するミリ秒単位の時刻と、次のフレーム境界までの待機を提供します。
class Clock(ABC):
    @abstractmethod
    def now_ms(self) -> float:
        pass

    @abstractmethod
    def sleep_ms(self, duration_ms: float) -> None:
        pass

# @intent:responsibility サウンドタイマーに連動した「トーンのオン/オフ」信号を受け取ります。
class ToneSink(ABC):
    @abstractmethod
    def set_tone(self, on: bool) -> None:
        pass


class MonotonicClock(Clock):
    def now_ms(self) -> float:
        return time.monotonic() * 1000.0

    def sleep_ms(self, duration_ms: float) -> None:
        time.sleep(duration_ms / 1000.0)


class NullFrameSink(FrameSink):
    def present(self, framebuffer: Any) -> None:
        # Intentional: headless execution discards frames.
        pass


class NullInputSource(InputSource):
    def poll_events(self) -> List[InputEvent]:
        return []


class NullToneSink(ToneSink):
    def set_tone(self, on: bool) -> None:
        # Intentional: no audio output.
        pass
