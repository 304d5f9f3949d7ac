# src/retro_chip8/arch/chip8/instructions/keys.py
"""
キー入力命令 (EX9E, EXA1, FX0A) の実装。
"""
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.constants import INSTRUCTION_LENGTH
from retro_chip8.arch.chip8.quirks import Chip8Quirks
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Operation

# --- EX9E ---
def execute_skp(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    if state.keypad.is_pressed(state.v[op.x]):
        state.pc = (state.pc + INSTRUCTION_LENGTH) & 0xFFFF

# --- EXA1 ---
def execute_sknp(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    if not state.keypad.is_pressed(state.v[op.x]):
        state.pc = (state.pc + INSTRUCTION_LENGTH) & 0xFFFF

# --- FX0A ---
# @intent:responsibility 保留中のキー押下を1つ取り出してVxに格納します。
# @intent:rationale 押下がなければPCを戻して同じ命令を次のサイクルで再実行します（ブロックしないポーリング）。
def execute_ld_vx_k(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    key = state.keypad.pop_pending_press()
    if key is None:
        state.pc = (state.pc - INSTRUCTION_LENGTH) & 0xFFFF
    else:
        state.v[op.x] = key
