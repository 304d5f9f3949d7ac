# retro_chip8/core/engine.py
"""
実行エンジン

フェッチ→デコード→実行のサイクルを、60Hzのフレーム境界ごとに固定命令数だけ駆動します。
タイマーの減算、トーン信号、再描画要求の処理もここで行います。

エンジンはシングルスレッドで動作し、マシン状態を唯一変更する主体です。
アダプタとのやり取りはすべてフレームループ内で同期的に行われます。
"""
import logging
from enum import Enum
from typing import Optional

from retro_chip8.common.types import InputEventType
from retro_chip8.core.adapters import (
    Clock, FrameSink, InputSource, ToneSink,
    MonotonicClock, NullFrameSink, NullInputSource, NullToneSink,
)
from retro_chip8.core.errors import MachineFault

logger = logging.getLogger(__name__)

DEFAULT_CYCLES_PER_FRAME = 14
DEFAULT_FRAME_RATE_HZ = 60

# @intent:responsibility エンジンの状態遷移: RESET → RUNNING → (HALTED | TERMINATED)。
class EngineState(Enum):
    RESET = "RESET"
    RUNNING = "RUNNING"
    HALTED = "HALTED"
    TERMINATED = "TERMINATED"


class ExecutionEngine:
    """
    CHIP-8 CPUを駆動するフレームループ。

    - poll_input(): 入力アダプタのイベントをキー状態へ反映（QUITで終了）
    - run_frame(): タイマー減算、トーン信号、命令バッチ実行、必要なら描画
    - tick(): ループ1回分（入力ポーリングとフレーム境界の判定）
    - run(): 終了または停止まで tick() を繰り返す
    """
    def __init__(self, cpu, frame_sink: Optional[FrameSink] = None,
                 input_source: Optional[InputSource] = None, clock: Optional[Clock] = None,
                 tone_sink: Optional[ToneSink] = None,
                 cycles_per_frame: int = DEFAULT_CYCLES_PER_FRAME,
                 frame_rate_hz: int = DEFAULT_FRAME_RATE_HZ, trace: bool = False):
        if cycles_per_frame <= 0:
            raise ValueError("cycles_per_frame must be a positive integer.")
        if frame_rate_hz <= 0:
            raise ValueError("frame_rate_hz must be a positive integer.")
        self._cpu = cpu
        self._frame_sink = frame_sink or NullFrameSink()
        self._input_source = input_source or NullInputSource()
        self._clock = clock or MonotonicClock()
        self._tone_sink = tone_sink or NullToneSink()
        self._cycles_per_frame = cycles_per_frame
        self._frame_interval_ms = 1000.0 / frame_rate_hz
        self._trace = trace

        self._state = EngineState.RESET
        self._last_frame_ms: Optional[float] = None
        self._tone_on = False
        self._frame_count = 0
        self._fault: Optional[MachineFault] = None

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def fault(self) -> Optional[MachineFault]:
        return self._fault

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def start(self) -> None:
        if self._state == EngineState.RESET:
            self._state = EngineState.RUNNING
            self._last_frame_ms = self._clock.now_ms()

    # @intent:responsibility 外部からの終了要求。ループを無条件に終了させます。
    def stop(self) -> None:
        if self._state != EngineState.TERMINATED:
            self._set_tone(False)
            self._state = EngineState.TERMINATED

    @property
    def is_active(self) -> bool:
        return self._state in (EngineState.RESET, EngineState.RUNNING)

    # @intent:responsibility 入力アダプタのイベントをキー状態へ反映します（ブロックしません）。
    def poll_input(self) -> None:
        keypad = self._cpu.get_state().keypad
        for event in self._input_source.poll_events():
            if event.event_type == InputEventType.QUIT:
                logger.info("Quit requested")
                self.stop()
                return
            if event.event_type == InputEventType.KEY_DOWN:
                keypad.press(event.symbol)
            elif event.event_type == InputEventType.KEY_UP:
                keypad.release(event.symbol)

    # @intent:responsibility 1フレーム分の処理を実行します。
    # @intent:flow タイマー減算 → トーン信号 → 命令バッチ実行 → 保留キー破棄 → 変更があれば描画。
    def run_frame(self) -> None:
        if self._state == EngineState.RESET:
            self.start()
        if self._state != EngineState.RUNNING:
            return

        state = self._cpu.get_state()
        state.tick_timers()
        self._set_tone(state.sound_timer > 0)

        try:
            for _ in range(self._cycles_per_frame):
                snapshot = self._cpu.step()
                if self._trace:
                    logger.debug("%04X: %s %s", snapshot.pc, snapshot.operation.opcode_hex,
                                 snapshot.metadata.symbol_info)
        except MachineFault as fault:
            self._halt(fault)

        state.keypad.clear_pending()
        self._frame_count += 1
        self._present_if_dirty()

    # @intent:responsibility ループ1回分の処理。フレーム境界を越えていればフレームを実行します。
    # @intent:rationale 境界を越えた時点の時刻を次の基準にし、遅れの取り戻しは行いません。
    def tick(self) -> None:
        if self._state == EngineState.RESET:
            self.start()
        if self._state != EngineState.RUNNING:
            return

        self.poll_input()
        if self._state != EngineState.RUNNING:
            return

        now = self._clock.now_ms()
        if now - self._last_frame_ms >= self._frame_interval_ms:
            self._last_frame_ms = now
            self.run_frame()

    # @intent:responsibility 終了要求または致命的フォールトまでフレームループを回します。
    # @intent:post-condition フレーム境界の合間は次の境界まで Clock.sleep_ms で待機します。
    def run(self) -> EngineState:
        self.start()
        while self._state == EngineState.RUNNING:
            self.tick()
            if self._state == EngineState.RUNNING:
                remaining = self.time_until_next_frame()
                if remaining > 0:
                    self._clock.sleep_ms(remaining)
        return self._state

    # @intent:responsibility 次のフレーム境界までの残り時間 (ms) を返します（境界を過ぎていれば0）。
    def time_until_next_frame(self) -> float:
        if self._last_frame_ms is None:
            return 0.0
        return max(0.0, self._last_frame_ms + self._frame_interval_ms - self._clock.now_ms())

    def _present_if_dirty(self) -> None:
        fb = self._cpu.get_state().framebuffer
        if fb.dirty:
            self._frame_sink.present(fb)
            fb.dirty = False

    # @intent:responsibility サウンドタイマーが0でない間はフレームごとにトーン要求を送ります。
    def _set_tone(self, on: bool) -> None:
        if on or self._tone_on:
            self._tone_sink.set_tone(on)
        self._tone_on = on

    @property
    def tone_on(self) -> bool:
        return self._tone_on

    def _halt(self, fault: MachineFault) -> None:
        self._fault = fault
        self._state = EngineState.HALTED
        self._set_tone(False)
        regs = self._cpu.get_register_map()
        logger.error("Machine halted at %04X after %d instructions: %s",
                     fault.pc, self._cpu.get_cycle_count(), fault)
        logger.error("Registers: %s", " ".join(f"{name}={value:02X}" for name, value in regs.items()))
