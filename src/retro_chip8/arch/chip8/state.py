# src/retro_chip8/arch/chip8/state.py
"""
CHIP-8 固有の状態定義。

レジスタファイル、スタック、タイマー、フレームバッファ、キー状態を保持します。
メモリ本体は Bus に接続された ROM/RAM デバイスが保持します。
"""
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from retro_chip8.core.state import CpuState
from retro_chip8.arch.chip8.constants import (
    PROGRAM_START, REGISTER_COUNT, STACK_SIZE, KEY_COUNT, SCREEN_WIDTH, SCREEN_HEIGHT,
)

# @intent:responsibility 1ピクセル1ビットのモノクロ画面と、再描画要求フラグを保持します。
class Framebuffer:
    """
    64x32 のモノクロフレームバッファ。
    描画命令と画面クリア命令のみが変更し、描画アダプタは読み出しのみを行います。
    """
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height)
        # 前回の表示以降に変更があったか
        self.dirty = False

    def clear(self) -> None:
        for idx in range(len(self._pixels)):
            self._pixels[idx] = 0
        self.dirty = True

    def get_pixel(self, x: int, y: int) -> bool:
        return self._pixels[y * self.width + x] != 0

    # @intent:responsibility 指定座標のピクセルを反転します。
    # @intent:post-condition 点灯していたピクセルが消灯した場合にTrueを返します（衝突検出）。
    def xor_pixel(self, x: int, y: int) -> bool:
        idx = y * self.width + x
        was_set = self._pixels[idx] != 0
        self._pixels[idx] ^= 1
        return was_set

    def copy_pixels(self) -> bytes:
        return bytes(self._pixels)

# @intent:responsibility 16キーの押下状態と、直近フレームで発生したキー押下イベントを保持します。
# @intent:rationale 複数の物理キーが同じキーに割り当てられるため、押下はキーごとの保持数で数えます。
class Keypad:
    """
    キー状態は入力アダプタ（エンジン経由）のみが書き込み、コアからは読み取り専用です。
    押下イベントのキューは FX0A (キー待ち) が消費します。
    """
    def __init__(self):
        self._holds: List[int] = [0] * KEY_COUNT
        self._pending: Deque[int] = deque()

    @staticmethod
    def _check(symbol: int) -> None:
        if not 0 <= symbol < KEY_COUNT:
            raise ValueError(f"Key symbol {symbol} is outside 0x0-0xF.")

    def press(self, symbol: int) -> None:
        self._check(symbol)
        self._holds[symbol] += 1
        self._pending.append(symbol)

    def release(self, symbol: int) -> None:
        self._check(symbol)
        if self._holds[symbol] > 0:
            self._holds[symbol] -= 1

    # @intent:rationale Vxは8ビット値のため0xFを超え得ますが、存在しないキーは常に「押されていない」とみなします。
    def is_pressed(self, symbol: int) -> bool:
        if not 0 <= symbol < KEY_COUNT:
            return False
        return self._holds[symbol] > 0

    def pop_pending_press(self) -> Optional[int]:
        if self._pending:
            return self._pending.popleft()
        return None

    def clear_pending(self) -> None:
        self._pending.clear()


# @intent:responsibility CHIP-8 のレジスタ（V0-VF, I, PC, SP）、スタック、タイマー、画面、キー状態を保持します。
@dataclass
class Chip8CpuState(CpuState):
    """
    CHIP-8 のマシン状態。
    VF (v[0xF]) はキャリー/ボロー/衝突フラグを兼ねます。
    """
    pc: int = PROGRAM_START
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    i: int = 0x0000
    stack: List[int] = field(default_factory=lambda: [0] * STACK_SIZE)
    delay_timer: int = 0
    sound_timer: int = 0
    framebuffer: Framebuffer = field(default_factory=Framebuffer)
    keypad: Keypad = field(default_factory=Keypad)

    @property
    def vf(self) -> int:
        return self.v[0xF]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[0xF] = value & 0xFF

    # @intent:responsibility 60Hzごとに両タイマーを1ずつ減らします（0で停止）。
    def tick_timers(self) -> None:
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1
