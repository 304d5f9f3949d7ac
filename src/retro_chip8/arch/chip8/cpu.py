# src/retro_chip8/arch/chip8/cpu.py
"""
CHIP-8 CPUエミュレーションの中心モジュール。
"""
from typing import List, Tuple

from retro_chip8.common.types import RegisterMap
from retro_chip8.core.cpu import AbstractCpu
from retro_chip8.core.errors import MachineFault
from retro_chip8.core.snapshot import Operation, Snapshot
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.constants import MEMORY_SIZE, FONT_START, FONT_DATA
from retro_chip8.arch.chip8.quirks import Chip8Quirks, DEFAULT_QUIRKS
from retro_chip8.arch.chip8.state import Chip8CpuState
from retro_chip8.arch.chip8.instructions import decode_opcode, execute_instruction
from retro_chip8.arch.chip8.instructions.base import read_byte
from retro_chip8.arch.chip8 import disassembler

# @intent:responsibility CHIP-8の具体的なエミュレーションロジック（フェッチ、デコード、実行）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 インタプリタをエミュレートするクラス。
    メモリは Bus 上の フォントROM (0x000-0x04F) と RAM (0x050-0xFFF) で構成されます。
    """
    def __init__(self, bus: Bus, quirks: Chip8Quirks = DEFAULT_QUIRKS):
        self._quirks = quirks
        super().__init__(bus)

    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState()

    def get_state(self) -> Chip8CpuState:
        return self._state

    # @intent:responsibility レジスタ、スタック、タイマー、画面、キー状態を初期化し、メモリを消去してフォントを配置します。
    # @intent:rationale プログラムをロードする前には必ずこのリセットを通します。
    def reset(self) -> None:
        super().reset()
        for addr in range(min(MEMORY_SIZE, self._bus.get_address_limit() + 1)):
            self._bus.load(addr, 0x00)
        for offset, byte in enumerate(FONT_DATA):
            self._bus.load(FONT_START + offset, byte)

    # @intent:responsibility PCの位置からビッグエンディアンの16ビット命令ワードを読み出します。
    def _fetch(self) -> int:
        pc = self._state.pc
        return (read_byte(self._bus, pc) << 8) | read_byte(self._bus, pc + 1)

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus, self._quirks)

    # @intent:responsibility 1命令を実行します。フォールト発生時は命令のアドレスを付与して再送出します。
    def step(self) -> Snapshot:
        initial_pc = self._state.pc
        try:
            return super().step()
        except MachineFault as fault:
            fault.pc = initial_pc
            raise

    def get_register_map(self) -> RegisterMap:
        s = self._state
        regs = {f"V{idx:X}": value for idx, value in enumerate(s.v)}
        regs.update({
            "I": s.i, "PC": s.pc, "SP": s.sp, "DT": s.delay_timer, "ST": s.sound_timer
        })
        return regs

    def disassemble(self, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
        return disassembler.disassemble(self._bus, start_addr, length)
